"""Tests for Palette."""

import pytest

from lampmix.exceptions import InvalidPaletteError
from lampmix.models import Palette, Primary, reference_primaries


@pytest.mark.unit
class TestPalette:
    """Test palette ordering and validation."""

    def test_priority_order(self, palette):
        assert palette.names == ("white", "green", "red", "blue", "amber")
        assert palette.rank("white") == 0
        assert palette.rank("amber") == 4

    def test_rank_unknown(self, palette):
        with pytest.raises(KeyError):
            palette.rank("violet")

    def test_lookup(self, palette):
        assert palette["red"].capacity == 400
        assert palette[1].name == "green"
        assert palette.get("blue").capacity == 120
        assert palette.get("violet") is None

    def test_container_protocol(self, palette):
        assert len(palette) == 5
        assert "amber" in palette
        assert "violet" not in palette
        assert [p.name for p in palette] == list(palette.names)

    def test_equality(self, palette):
        assert palette == Palette(reference_primaries())
        assert palette != Palette(reference_primaries()[:3])
        assert hash(palette) == hash(Palette(reference_primaries()))

    def test_empty_rejected(self):
        with pytest.raises(InvalidPaletteError):
            Palette([])

    def test_duplicate_names_rejected(self):
        with pytest.raises(InvalidPaletteError, match="duplicate"):
            Palette([
                Primary.from_xy("red", 0.68, 0.3, 400),
                Primary.from_xy("red", 0.6, 0.35, 100),
            ])

    def test_coincident_chromaticities_rejected(self):
        with pytest.raises(InvalidPaletteError, match="same chromaticity"):
            Palette([
                Primary.from_xy("red", 0.68, 0.3, 400),
                Primary.from_xy("deep red", 0.68, 0.3, 100),
            ])

    def test_single_primary(self):
        palette = Palette([Primary.from_xy("white", 0.434, 0.403, 675)])
        assert len(palette) == 1

    def test_repr(self, palette):
        assert repr(palette) == "Palette(white, green, red, blue, amber)"
