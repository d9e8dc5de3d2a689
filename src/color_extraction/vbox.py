"""A box-shaped subset of the reduced color cube.

All bounds are inclusive and in reduced (5-bit) color space. The population and
average color of a box are cached the first time they are requested. Changing the
bounds of a box does not clear the cache; pass `force=True` to recompute. A box
should only ever be mutated by the code that created it.

:created: 2026-10-12
"""

from __future__ import annotations

import enum
import itertools as it
from typing import Annotated, Iterator, Sequence, TypeAlias

import numpy as np
from numpy import typing as npt

from color_extraction.constants import RIGHT_SHIFT
from color_extraction.histogram import Cube, Histogram, PixelBuffer, to_pixel_array

Rgb: TypeAlias = Annotated[tuple[int, int, int], "3 ints [0, 255]"]

# number to multiply by to go from reduced to full bits
_MULTIPLIER = 1 << RIGHT_SHIFT
_MAX_8BIT = 255


class Axis(enum.IntEnum):
    """One of the three channels of the color cube."""

    RED = 0
    GREEN = 1
    BLUE = 2


def _bucket_centers(lower: int, upper: int) -> npt.NDArray[np.int64]:
    """Full-bit value at the center of each reduced value in [lower, upper].

    (v + 0.5) * 8 is always an integer, so weighted sums stay exact.
    """
    values = np.arange(lower, upper + 1, dtype=np.int64)
    return values * _MULTIPLIER + _MULTIPLIER // 2


class VBox:
    """Represents a cube-subset of the color space, with a distribution of colors."""

    def __init__(
        self,
        r1: int,
        r2: int,
        g1: int,
        g2: int,
        b1: int,
        b2: int,
        histogram: Histogram,
    ) -> None:
        """Create a box. All values use the reduced bit resolution.

        :param r1: minimum red value
        :param r2: maximum red value
        :param g1: minimum green value
        :param g2: maximum green value
        :param b1: minimum blue value
        :param b2: maximum blue value
        :param histogram: histogram to use for sampling. Shared, never modified.
        """
        self.r1 = r1
        self.r2 = r2
        self.g1 = g1
        self.g2 = g2
        self.b1 = b1
        self.b2 = b2
        self.histogram = histogram
        self._count: int | None = None
        self._avg: Rgb | None = None

    def __repr__(self) -> str:
        return (
            f"VBox(r=[{self.r1}, {self.r2}], g=[{self.g1}, {self.g2}], "
            + f"b=[{self.b1}, {self.b2}])"
        )

    def bounds(self, axis: Axis) -> tuple[int, int]:
        """Get the inclusive (lower, upper) bounds along one axis."""
        if axis == Axis.RED:
            return self.r1, self.r2
        if axis == Axis.GREEN:
            return self.g1, self.g2
        return self.b1, self.b2

    def set_bounds(self, axis: Axis, lower: int, upper: int) -> None:
        """Set the inclusive bounds along one axis. Cached values are not cleared."""
        if axis == Axis.RED:
            self.r1, self.r2 = lower, upper
        elif axis == Axis.GREEN:
            self.g1, self.g2 = lower, upper
        else:
            self.b1, self.b2 = lower, upper

    def widths(self) -> tuple[int, int, int]:
        """Get the inclusive extent of the box along the r, g, and b axes."""
        return (
            self.r2 - self.r1 + 1,
            self.g2 - self.g1 + 1,
            self.b2 - self.b1 + 1,
        )

    def volume(self) -> int:
        """Get the number of reduced colors inside the box."""
        rw, gw, bw = self.widths()
        return rw * gw * bw

    def samples(self) -> Cube:
        """Get the histogram counts inside the box as an (rw, gw, bw) array.

        An inverted box (upper < lower on any axis) returns an empty array.
        """
        return self.histogram.cube[
            self.r1 : self.r2 + 1, self.g1 : self.g2 + 1, self.b1 : self.b2 + 1
        ]

    def count(self, *, force: bool = False) -> int:
        """Get the number of pixels in the box.

        :param force: if True, recalculate even if a cached value exists
        :return: sum of histogram samples over every reduced color in the box
        """
        if self._count is None or force:
            self._count = int(self.samples().sum())
        return self._count

    def avg(self, *, force: bool = False) -> Rgb:
        """Get the population-weighted average color of the box at full precision.

        :param force: if True, recalculate even if a cached value exists
        :return: (r, g, b) in [0, 255]. If the box is empty, the center of the box.
        """
        if self._avg is not None and not force:
            return self._avg

        samples = self.samples()
        total = int(samples.sum())
        if total > 0:
            r_sum = int(samples.sum(axis=(1, 2)) @ _bucket_centers(self.r1, self.r2))
            g_sum = int(samples.sum(axis=(0, 2)) @ _bucket_centers(self.g1, self.g2))
            b_sum = int(samples.sum(axis=(0, 1)) @ _bucket_centers(self.b1, self.b2))
            self._avg = (r_sum // total, g_sum // total, b_sum // total)
        else:
            # an inverted box at the top of the cube would center at 256
            self._avg = (
                min(_MULTIPLIER * (self.r1 + self.r2 + 1) // 2, _MAX_8BIT),
                min(_MULTIPLIER * (self.g1 + self.g2 + 1) // 2, _MAX_8BIT),
                min(_MULTIPLIER * (self.b1 + self.b2 + 1) // 2, _MAX_8BIT),
            )
        return self._avg

    def contains(self, pixel: Sequence[int]) -> bool:
        """Check whether an 8-bit color falls inside the box.

        :param pixel: (r, g, b) in [0, 255]. Any further values are ignored.
        """
        r_val = int(pixel[0]) >> RIGHT_SHIFT
        g_val = int(pixel[1]) >> RIGHT_SHIFT
        b_val = int(pixel[2]) >> RIGHT_SHIFT
        return (
            self.r1 <= r_val <= self.r2
            and self.g1 <= g_val <= self.g2
            and self.b1 <= b_val <= self.b2
        )

    def colors(self) -> Iterator[tuple[int, int, int]]:
        """Iterate over every reduced color in the box, r outermost, b innermost.

        Each call starts a new iteration.
        """
        return it.product(
            range(self.r1, self.r2 + 1),
            range(self.g1, self.g2 + 1),
            range(self.b1, self.b2 + 1),
        )

    def copy(self) -> VBox:
        """Create a new box with the same bounds and histogram and an empty cache."""
        return VBox(self.r1, self.r2, self.g1, self.g2, self.b1, self.b2, self.histogram)


def vbox_from_pixel_data(pixel_buffer: PixelBuffer, histogram: Histogram) -> VBox:
    """Return the smallest box that contains all the pixels.

    :param pixel_buffer: rgba values, 4 per pixel
    :param histogram: histogram built from the same pixel buffer
    :return: a box tight around the reduced colors of every pixel
    """
    reduced = to_pixel_array(pixel_buffer)[:, :3] >> RIGHT_SHIFT
    mins = reduced.min(axis=0)
    maxs = reduced.max(axis=0)
    return VBox(
        int(mins[0]),
        int(maxs[0]),
        int(mins[1]),
        int(maxs[1]),
        int(mins[2]),
        int(maxs[2]),
        histogram,
    )
