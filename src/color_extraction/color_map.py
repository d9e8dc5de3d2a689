"""Map any color to the nearest color in a quantized palette.

:created: 2026-10-12
"""

from __future__ import annotations

import dataclasses
from typing import Iterator, Sequence

import numpy as np
from basic_colormath import rgb_to_hex

from color_extraction.priority_queue import PriorityQueue, natural_order
from color_extraction.vbox import Rgb, VBox


@dataclasses.dataclass(frozen=True)
class _BoxColor:
    """A final box and its average color."""

    vbox: VBox
    color: Rgb


def _compare_by_count_and_volume(a: _BoxColor, b: _BoxColor) -> int:
    """Order boxes by population * volume."""
    return natural_order(
        a.vbox.count() * a.vbox.volume(), b.vbox.count() * b.vbox.volume()
    )


class ColorMap:
    """The boxes that survive quantization, ordered by population * volume.

    Iteration, `palette`, and `map` all see the boxes in ascending population *
    volume order.
    """

    def __init__(self) -> None:
        self._boxes: PriorityQueue[_BoxColor] = PriorityQueue(
            _compare_by_count_and_volume
        )

    def push(self, vbox: VBox) -> None:
        """Add a box. Its average color is computed and cached now."""
        self._boxes.push(_BoxColor(vbox, vbox.avg()))

    def palette(self) -> list[Rgb]:
        """Get the average color of every box in ascending population * volume."""
        return self._boxes.map(lambda x: x.color)

    def palette_hex(self) -> list[str]:
        """Get the palette as hex strings."""
        return [rgb_to_hex(color) for color in self.palette()]

    def size(self) -> int:
        """Get the number of colors in the palette."""
        return self._boxes.size()

    def __len__(self) -> int:
        return self.size()

    def __iter__(self) -> Iterator[tuple[VBox, Rgb]]:
        return ((x.vbox, x.color) for x in self._boxes)

    def map(self, color: Sequence[int]) -> Rgb:
        """Map a color to a palette color.

        :param color: (r, g, b) in [0, 255]
        :return: the palette color of the first box containing color or, if no box
            contains it, the nearest palette color
        """
        for box in self._boxes:
            if box.vbox.contains(color):
                return box.color
        return self.nearest(color)

    def nearest(self, color: Sequence[int]) -> Rgb:
        """Find the palette color with the smallest Euclidean distance to color.

        :param color: (r, g, b) in [0, 255]
        :return: nearest palette color. Ties go to the first box in queue order.
        :raises ValueError: if the color map is empty
        """
        boxes = list(self._boxes)
        if not boxes:
            msg = "Cannot find the nearest color in an empty ColorMap."
            raise ValueError(msg)
        palette = np.array([x.color for x in boxes], dtype=float)
        target = np.array([float(x) for x in color[:3]])
        distances = np.linalg.norm(palette - target, axis=1)
        return boxes[int(np.argmin(distances))].color
