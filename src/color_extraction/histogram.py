"""Count pixels in a bit-reduced color cube.

Each 8-bit channel is shifted right by RIGHT_SHIFT bits, leaving 5 significant bits
per channel and 32768 buckets in total. The reduced (r, g, b) triple of a bucket
maps to a single index, (r << 10) + (g << 5) + b, so the histogram can be stored
as a flat array or, equivalently, as a (32, 32, 32) cube indexed [r, g, b].

:created: 2026-10-12
"""

from __future__ import annotations

from typing import Annotated, Any, TypeAlias

import numpy as np
from numpy import typing as npt

from color_extraction.constants import (
    HISTOGRAM_SIZE,
    REDUCED_BITS_PER_CHANNEL,
    REDUCED_CHANNEL_SIZE,
    RIGHT_SHIFT,
)
from color_extraction.errors import InvalidArgumentError

# a flat, RGBA-interleaved pixel buffer: bytes, bytearray, a list of ints, or an
# array of any shape whose flattened values are [r, g, b, a, r, g, b, a, ...]
PixelBuffer: TypeAlias = Any

# (n, 4) array of rgba uint8 values
Pixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(n, 4)"]

# (32, 32, 32) array of sample counts indexed [r, g, b] in reduced space
Cube: TypeAlias = Annotated[npt.NDArray[np.intp], "(32, 32, 32)"]

_BYTES_PER_PIXEL = 4


def to_pixel_array(pixel_buffer: PixelBuffer) -> Pixels:
    """Interpret a flat pixel buffer as an (n, 4) array of rgba values.

    :param pixel_buffer: rgba values, 4 per pixel
    :return: (n, 4) uint8 array. Trailing values that do not make up a whole pixel
        are dropped.
    :raises InvalidArgumentError: if the buffer does not hold at least one pixel
    """
    if isinstance(pixel_buffer, (bytes, bytearray, memoryview)):
        flat = np.frombuffer(pixel_buffer, dtype=np.uint8)
    else:
        flat = np.asarray(pixel_buffer).reshape(-1)
        if flat.dtype != np.uint8:
            flat = np.clip(flat, 0, 255).astype(np.uint8)
    if len(flat) < _BYTES_PER_PIXEL:
        msg = (
            "There must be at least one pixel (4 values) in the pixel buffer. "
            + f"Got {len(flat)} values."
        )
        raise InvalidArgumentError(msg)
    num_pixels = len(flat) // _BYTES_PER_PIXEL
    return flat[: num_pixels * _BYTES_PER_PIXEL].reshape(num_pixels, _BYTES_PER_PIXEL)


def reduce_channel(value: int) -> int:
    """Reduce an 8-bit channel value to REDUCED_BITS_PER_CHANNEL bits."""
    return int(value) >> RIGHT_SHIFT


def get_color_index(r_val: Any, g_val: Any, b_val: Any) -> Any:
    """Map a reduced color to an index in the histogram.

    :param r_val: reduced red value [0, 31] or an array of them
    :param g_val: reduced green value [0, 31] or an array of them
    :param b_val: reduced blue value [0, 31] or an array of them
    :return: index [0, 32767] or an array of indices
    """
    return (
        (r_val << (2 * REDUCED_BITS_PER_CHANNEL))
        + (g_val << REDUCED_BITS_PER_CHANNEL)
        + b_val
    )


class Histogram:
    """Frequency of each reduced color in a pixel buffer.

    Built once from a buffer and read-only afterward, so one histogram can be shared
    by every box cut from it.
    """

    def __init__(self, pixel_buffer: PixelBuffer) -> None:
        """Count the reduced colors in a pixel buffer.

        :param pixel_buffer: rgba values, 4 per pixel. Alpha is ignored.
        :raises InvalidArgumentError: if the buffer does not hold at least one pixel
        """
        pixels = to_pixel_array(pixel_buffer)
        reduced = pixels[:, :3].astype(np.intp) >> RIGHT_SHIFT
        indices = get_color_index(reduced[:, 0], reduced[:, 1], reduced[:, 2])
        counts = np.bincount(indices, minlength=HISTOGRAM_SIZE).astype(np.intp)
        counts.flags.writeable = False
        self._counts = counts
        self.num_pixels = len(pixels)

    @property
    def counts(self) -> Annotated[npt.NDArray[np.intp], "(32768,)"]:
        """Sample count for every histogram index."""
        return self._counts

    @property
    def cube(self) -> Cube:
        """Sample counts as a read-only (32, 32, 32) view indexed [r, g, b]."""
        return self._counts.reshape((REDUCED_CHANNEL_SIZE,) * 3)

    def sample(self, r: int, g: int, b: int) -> int:
        """Get the number of samples in the bucket holding an 8-bit color.

        :param r: red [0, 255]
        :param g: green [0, 255]
        :param b: blue [0, 255]
        :return: number of pixels that reduce to the same bucket as (r, g, b)
        """
        return self.sample_reduced(
            reduce_channel(r), reduce_channel(g), reduce_channel(b)
        )

    def sample_reduced(self, r_val: int, g_val: int, b_val: int) -> int:
        """Get the number of samples in a bucket.

        :param r_val: reduced red [0, 31]
        :param g_val: reduced green [0, 31]
        :param b_val: reduced blue [0, 31]
        :return: number of pixels in the bucket, 0 if never observed
        """
        return int(self._counts[get_color_index(r_val, g_val, b_val)])
