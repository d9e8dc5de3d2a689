"""Reduce the number of pixels in a buffer before quantization.

:created: 2026-10-12
"""

from __future__ import annotations

from typing import Annotated

import numpy as np
from numpy import typing as npt

from color_extraction.errors import InvalidArgumentError
from color_extraction.histogram import PixelBuffer, to_pixel_array


def _round_half_up(value: float) -> int:
    """Round to the nearest integer, rounding .5 up instead of to even."""
    return int(np.floor(value + 0.5))


def downsample_pixel_data(
    pixel_buffer: PixelBuffer, factor: float
) -> Annotated[npt.NDArray[np.uint8], "(m * 4,)"]:
    """Keep approximately one of every `factor` pixels.

    :param pixel_buffer: rgba values, 4 per pixel
    :param factor: downsampling factor >= 1. 1 keeps every pixel.
    :return: flat uint8 array of max(1, round(n / factor)) pixels sampled at
        regular strides across the buffer
    :raises InvalidArgumentError: if factor < 1 or the buffer holds no pixel
    """
    if factor < 1:
        msg = f"Downsampling factor must be at least 1. Got {factor}."
        raise InvalidArgumentError(msg)
    pixels = to_pixel_array(pixel_buffer)
    num_pixels = len(pixels)
    new_num_pixels = max(1, _round_half_up(num_pixels / factor))
    sources = np.floor(np.arange(new_num_pixels) * num_pixels / new_num_pixels + 0.5)
    return pixels[sources.astype(np.intp)].reshape(-1)
