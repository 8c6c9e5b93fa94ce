"""Wiring table: logical primary name to physical channel slot.

The fixture firmware expects duty codes in the order its channels are
wired, which is not necessarily the order primaries are listed or
prioritized in. Frames are always built through this table, never from
the position of function arguments.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator


class WiringTable(BaseModel):
    """
    Ordered list of primary names, one per wired channel.

    Example:
        >>> wiring = WiringTable(slots=("red", "blue", "green", "amber", "white"))
        >>> wiring.slot_of("green")
        2
    """

    model_config = ConfigDict(frozen=True)

    slots: tuple[str, ...] = Field(description="Primary name for each channel, in wire order")

    @field_validator("slots")
    @classmethod
    def validate_slots(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Ensure the table is non-empty and names each primary once."""
        if not v:
            raise ValueError("wiring table needs at least one channel")
        duplicates = sorted({name for name in v if v.count(name) > 1})
        if duplicates:
            raise ValueError(f"channels wired more than once: {', '.join(duplicates)}")
        return v

    @property
    def width(self) -> int:
        """Number of channels in a frame."""
        return len(self.slots)

    def slot_of(self, name: str) -> int:
        """
        Wire slot of a primary.

        Raises:
            KeyError: If the primary is not wired
        """
        try:
            return self.slots.index(name)
        except ValueError:
            raise KeyError(name) from None

    def __contains__(self, name: object) -> bool:
        return name in self.slots
