"""Ordered palette of primaries.

The position of a primary in the palette is its priority rank: index 0 is
the most preferred emitter. When several combinations of primaries could
reproduce a color, the mixing allocator prefers the earliest ones.
"""

from typing import Iterable, Iterator, Optional, Union

from lampmix.exceptions import InvalidPaletteError

from .primary import Primary

# Chromaticities closer than this are treated as the same point
COINCIDENCE_TOLERANCE = 1e-9


class Palette:
    """
    Immutable, priority-ordered collection of primaries.

    Raises InvalidPaletteError when the palette is empty, when two primaries
    share a name, or when two primaries share a chromaticity (the segment or
    triangle they would span has no extent).
    """

    __slots__ = ("_primaries", "_ranks")

    def __init__(self, primaries: Iterable[Primary]):
        primaries = tuple(primaries)
        if not primaries:
            raise InvalidPaletteError("a palette needs at least one primary")

        ranks: dict[str, int] = {}
        for rank, primary in enumerate(primaries):
            if primary.name in ranks:
                raise InvalidPaletteError(f"duplicate primary name '{primary.name}'")
            ranks[primary.name] = rank

        for i, first in enumerate(primaries):
            for second in primaries[i + 1:]:
                if (
                    abs(first.x - second.x) <= COINCIDENCE_TOLERANCE
                    and abs(first.y - second.y) <= COINCIDENCE_TOLERANCE
                ):
                    raise InvalidPaletteError(
                        f"primaries '{first.name}' and '{second.name}' have the same "
                        f"chromaticity ({first.x}, {first.y})"
                    )

        self._primaries = primaries
        self._ranks = ranks

    @property
    def primaries(self) -> tuple[Primary, ...]:
        """Primaries in priority order."""
        return self._primaries

    @property
    def names(self) -> tuple[str, ...]:
        return tuple(p.name for p in self._primaries)

    def rank(self, name: str) -> int:
        """
        Priority rank of a primary (0 = most preferred).

        Raises:
            KeyError: If no primary has this name
        """
        return self._ranks[name]

    def get(self, name: str) -> Optional[Primary]:
        """Look up a primary by name, None if absent."""
        rank = self._ranks.get(name)
        return None if rank is None else self._primaries[rank]

    def __getitem__(self, key: Union[int, str]) -> Primary:
        if isinstance(key, str):
            return self._primaries[self._ranks[key]]
        return self._primaries[key]

    def __contains__(self, name: object) -> bool:
        return name in self._ranks

    def __iter__(self) -> Iterator[Primary]:
        return iter(self._primaries)

    def __len__(self) -> int:
        return len(self._primaries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Palette):
            return NotImplemented
        return self._primaries == other._primaries

    def __hash__(self) -> int:
        return hash(self._primaries)

    def __repr__(self) -> str:
        return f"Palette({', '.join(self.names)})"
