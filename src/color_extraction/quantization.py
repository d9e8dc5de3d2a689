"""Reduce a pixel buffer to a small palette with the modified median-cut algorithm.

Quantization runs in two phases. Both repeatedly pop the most important box from a
priority queue, split it, and push the halves back.

1. Boxes are ordered by population until FRACT_BY_POPULATIONS of the requested
   colors exist. This gives the most common colors the most boxes.
2. The survivors are re-sorted by population * volume and split until the requested
   number of colors exists. This lets large, sparsely populated regions of the color
   cube claim a color of their own.

Each phase gives up after MAX_ITERATIONS split attempts, so an image with fewer
unique colors than requested returns a shorter palette.

:created: 2026-10-12
"""

from __future__ import annotations

import logging

from color_extraction.color_map import ColorMap
from color_extraction.constants import (
    FRACT_BY_POPULATIONS,
    MAX_COLORS,
    MAX_ITERATIONS,
    MIN_COLORS,
)
from color_extraction.errors import InvalidArgumentError
from color_extraction.histogram import Histogram, PixelBuffer, Pixels, to_pixel_array
from color_extraction.median_cut import median_cut_apply
from color_extraction.priority_queue import PriorityQueue, natural_order
from color_extraction.vbox import VBox, vbox_from_pixel_data


def _compare_by_count(a: VBox, b: VBox) -> int:
    return natural_order(a.count(), b.count())


def _compare_by_count_and_volume(a: VBox, b: VBox) -> int:
    return natural_order(a.count() * a.volume(), b.count() * b.volume())


def _iterate(histogram: Histogram, queue: PriorityQueue[VBox], target: float) -> None:
    """Split the largest box in queue until queue holds target boxes.

    :param histogram: histogram shared by every box in the queue
    :param queue: boxes to split. Updated in place.
    :param target: stop when the number of boxes reaches this value
    :effects: pops boxes from and pushes boxes to queue

    Every pop counts as one attempt, including pops of empty boxes, which are pushed
    back unsplit.
    """
    num_colors = queue.size()
    iterations = 0
    while iterations < MAX_ITERATIONS:
        if num_colors >= target:
            return
        iterations += 1
        vbox = queue.pop()
        if vbox.count() == 0:
            queue.push(vbox)
            continue
        vbox1, vbox2 = median_cut_apply(histogram, vbox)
        queue.push(vbox1)
        if vbox2 is not None:
            queue.push(vbox2)
            num_colors += 1
    logging.info(
        f"stopped after {MAX_ITERATIONS} iterations with {num_colors} of "
        + f"{target:g} colors"
    )


def _validate_arguments(pixel_buffer: PixelBuffer, max_colors: int) -> Pixels:
    """Fail before doing any work if the arguments cannot be quantized.

    :return: the pixel buffer as an (n, 4) array
    :raises InvalidArgumentError: if there is not at least one pixel or max_colors
        is not in [MIN_COLORS, MAX_COLORS]
    """
    if not MIN_COLORS <= max_colors <= MAX_COLORS:
        msg = (
            f"max_colors must be between {MIN_COLORS} and {MAX_COLORS}. "
            + f"Got {max_colors}."
        )
        raise InvalidArgumentError(msg)
    return to_pixel_array(pixel_buffer)


def quantize(pixel_buffer: PixelBuffer, max_colors: int) -> ColorMap:
    """Find a palette of at most max_colors colors representing a pixel buffer.

    :param pixel_buffer: rgba values, 4 per pixel. Alpha is ignored.
    :param max_colors: maximum number of colors in the palette [2, 256]
    :return: a ColorMap holding between 1 and max_colors colors
    :raises InvalidArgumentError: if there is not at least one pixel or max_colors
        is out of range
    """
    pixels = _validate_arguments(pixel_buffer, max_colors)

    histogram = Histogram(pixels)
    vbox = vbox_from_pixel_data(pixels, histogram)
    logging.info(
        f"quantizing {histogram.num_pixels} pixels to at most {max_colors} colors"
    )

    pq: PriorityQueue[VBox] = PriorityQueue(_compare_by_count)
    pq.push(vbox)

    # first set of colors, sorted by population
    _iterate(histogram, pq, FRACT_BY_POPULATIONS * max_colors)
    logging.debug(f"{pq.size()} boxes after sorting by population")

    # re-sort by the product of pixel occupancy times the size in color space
    pq2: PriorityQueue[VBox] = PriorityQueue(_compare_by_count_and_volume)
    while pq.size():
        pq2.push(pq.pop())

    _iterate(histogram, pq2, max_colors)

    color_map = ColorMap()
    while pq2.size():
        color_map.push(pq2.pop())
    logging.info(f"quantized to {color_map.size()} colors")
    return color_map
