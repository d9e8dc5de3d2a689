"""Test mapping colors to a quantized palette.

:created: 2026-10-12
"""

from typing import Callable

import pytest

from color_extraction.color_map import ColorMap
from color_extraction.histogram import Histogram
from color_extraction.vbox import VBox

MakePixels = Callable[..., bytes]


@pytest.fixture
def histogram(make_pixels: MakePixels) -> Histogram:
    """One pixel at reduced (0, 0, 0), one at (2, 0, 0), three at (31, 31, 31)."""
    return Histogram(make_pixels((0, 0, 0), (16, 0, 0), *[(255, 255, 255)] * 3))


@pytest.fixture
def color_map(histogram: Histogram) -> ColorMap:
    """Boxes around each populated color. White is pushed first."""
    color_map = ColorMap()
    color_map.push(VBox(16, 31, 16, 31, 16, 31, histogram))
    color_map.push(VBox(0, 0, 0, 0, 0, 0, histogram))
    color_map.push(VBox(2, 2, 0, 0, 0, 0, histogram))
    return color_map


class TestPalette:
    def test_ascending_count_times_volume(self, color_map: ColorMap) -> None:
        """Palette is sorted by population * volume, ties in push order."""
        assert color_map.palette() == [(4, 4, 4), (20, 4, 4), (252, 252, 252)]

    def test_size(self, color_map: ColorMap) -> None:
        """Size is the number of boxes."""
        assert color_map.size() == 3
        assert len(color_map) == 3

    def test_palette_hex(self, color_map: ColorMap) -> None:
        """Palette colors can be returned as hex strings."""
        hexes = [x.lower() for x in color_map.palette_hex()]
        assert hexes == ["#040404", "#140404", "#fcfcfc"]

    def test_iteration(self, color_map: ColorMap) -> None:
        """Iterate over (box, color) pairs in palette order."""
        colors = [color for _, color in color_map]
        assert colors == color_map.palette()
        assert all(vbox.avg() == color for vbox, color in color_map)


class TestMap:
    def test_contained(self, color_map: ColorMap) -> None:
        """Return the color of the box containing the color."""
        assert color_map.map((3, 5, 7)) == (4, 4, 4)
        assert color_map.map((17, 0, 0)) == (20, 4, 4)
        assert color_map.map((128, 200, 255)) == (252, 252, 252)

    def test_first_containing_box(self, histogram: Histogram) -> None:
        """Where boxes overlap, the first box in queue order wins."""
        color_map = ColorMap()
        color_map.push(VBox(0, 31, 0, 31, 0, 31, histogram))
        color_map.push(VBox(0, 0, 0, 0, 0, 0, histogram))
        assert color_map.map((0, 0, 0)) == (4, 4, 4)
        assert color_map.map((255, 255, 255)) != (4, 4, 4)

    def test_falls_back_to_nearest(self, color_map: ColorMap) -> None:
        """Colors outside every box map to the nearest palette color."""
        assert color_map.map((0, 100, 0)) == (4, 4, 4)
        assert color_map.map((100, 100, 0)) == (20, 4, 4)
        assert color_map.map((0, 200, 200)) == (252, 252, 252)


class TestNearest:
    def test_nearest(self, color_map: ColorMap) -> None:
        """Find the palette color with the smallest Euclidean distance."""
        assert color_map.nearest((0, 0, 0)) == (4, 4, 4)
        assert color_map.nearest((200, 200, 200)) == (252, 252, 252)

    def test_ties_go_to_first(self, histogram: Histogram) -> None:
        """An exact tie goes to the first box in queue order."""
        color_map = ColorMap()
        color_map.push(VBox(2, 2, 0, 0, 0, 0, histogram))
        color_map.push(VBox(0, 0, 0, 0, 0, 0, histogram))
        assert color_map.nearest((12, 4, 4)) == (20, 4, 4)
        assert color_map.map((12, 4, 4)) == (20, 4, 4)

    def test_empty(self) -> None:
        """Raise ValueError if there are no colors."""
        with pytest.raises(ValueError):
            _ = ColorMap().nearest((0, 0, 0))
