"""Split a box at the median of its population along its longest axis.

The cut point is not exactly the median. Starting from the first coordinate where
the cumulative population passes half the total, the cut is pushed toward the
middle of the larger remaining side, then nudged so neither half is left without
samples where that can be avoided.

:created: 2026-10-12
"""

from __future__ import annotations

import logging
import math

import numpy as np

from color_extraction.errors import UncuttableBoxError
from color_extraction.histogram import Histogram
from color_extraction.vbox import Axis, VBox

# cumulative population keyed by the absolute coordinate on the split axis. Keys
# outside the box are absent and read as 0.
_SumByCoordinate = dict[int, int]


def get_split_axis(vbox: VBox) -> Axis:
    """Select the axis with the largest extent.

    :param vbox: box to split
    :return: the longest axis. Ties go to red, then green, then blue.
    """
    widths = vbox.widths()
    max_width = max(widths)
    return Axis(widths.index(max_width))


def _get_partial_sums(
    vbox: VBox, axis: Axis
) -> tuple[_SumByCoordinate, _SumByCoordinate, int]:
    """Accumulate the population of a box along one axis.

    :param vbox: box to measure
    :param axis: axis to accumulate along
    :return: (partial_sum, lookahead_sum, total) where partial_sum[v] is the
        population with axis coordinate <= v and lookahead_sum[v] is the population
        with axis coordinate > v
    """
    samples = vbox.samples()
    other_axes = tuple(int(a) for a in Axis if a != axis)
    cumulative = np.cumsum(samples.sum(axis=other_axes))
    total = int(cumulative[-1])
    lower, _ = vbox.bounds(axis)
    partial_sum = {lower + i: int(x) for i, x in enumerate(cumulative)}
    lookahead_sum = {k: total - v for k, v in partial_sum.items()}
    return partial_sum, lookahead_sum, total


def do_cut(
    vbox: VBox,
    partial_sum: _SumByCoordinate,
    lookahead_sum: _SumByCoordinate,
    total: int,
    axis: Axis,
) -> tuple[VBox, VBox]:
    """Cut a box in two along an axis.

    :param vbox: box to cut. Not modified.
    :param partial_sum: population at or below each coordinate on axis
    :param lookahead_sum: population above each coordinate on axis
    :param total: population of vbox
    :param axis: axis to cut along
    :return: two boxes that partition vbox along axis. The first covers
        [dim1, d2], the second [d2 + 1, dim2].
    :raises UncuttableBoxError: if no coordinate holds more than half the
        population. This cannot happen for a box with a count above 1.

    A box that is only one unit wide on axis produces a second box with inverted
    bounds [dim1 + 1, dim1] and no population.
    """
    dim1, dim2 = vbox.bounds(axis)

    for r in range(dim1, dim2 + 1):
        if partial_sum[r] <= total / 2:
            continue
        left = r - dim1
        right = dim2 - r
        if left <= right:
            d2 = min(dim2 - 1, math.floor(r + right / 2))
        else:
            d2 = max(dim1, math.floor(r - 1 - left / 2))

        # avoid 0-count boxes
        while not partial_sum.get(d2, 0):
            d2 += 1
        count2 = lookahead_sum.get(d2, 0)
        while not count2 and partial_sum.get(d2 - 1, 0):
            d2 -= 1
            count2 = lookahead_sum.get(d2, 0)

        vbox1 = vbox.copy()
        vbox2 = vbox.copy()
        vbox1.set_bounds(axis, dim1, d2)
        vbox2.set_bounds(axis, d2 + 1, dim2)
        return vbox1, vbox2

    msg = f"{vbox} has no coordinate holding more than half of {total} samples."
    raise UncuttableBoxError(msg)


def median_cut_apply(histogram: Histogram, vbox: VBox) -> tuple[VBox, VBox | None]:
    """Split a box into two.

    :param histogram: histogram the box samples from
    :param vbox: box to split. Not modified.
    :return: (vbox1, vbox2) partitioning vbox along its longest axis, or
        (vbox, None) if vbox is empty, holds a single sample, or covers a single
        reduced color.
    """
    if vbox.count() <= 1 or vbox.volume() == 1:
        return vbox, None

    axis = get_split_axis(vbox)
    partial_sum, lookahead_sum, total = _get_partial_sums(vbox, axis)
    vbox1, vbox2 = do_cut(vbox, partial_sum, lookahead_sum, total, axis)
    logging.debug(f"cut {vbox} on {axis.name.lower()} into {vbox1} and {vbox2}")
    return vbox1, vbox2
