"""Extract a palette or a dominant color from an image.

These functions accept either a flat rgba pixel buffer or a PIL image, downsample
the pixels, and quantize what is left.

:created: 2026-10-12
"""

from __future__ import annotations

import logging
from typing import Annotated, TypeAlias

import numpy as np
from numpy import typing as npt
from PIL import Image

from color_extraction.defaults import (
    DOMINANT_PALETTE_SIZE,
    DOWNSAMPLING_FACTOR,
    MAX_DIM,
)
from color_extraction.downsampling import downsample_pixel_data
from color_extraction.histogram import PixelBuffer
from color_extraction.quantization import quantize
from color_extraction.vbox import Rgb

_FlatPixels: TypeAlias = Annotated[npt.NDArray[np.uint8], "(n * 4,)"]


def get_image_pixels(image: Image.Image) -> _FlatPixels:
    """Get a flat rgba buffer from a PIL image.

    :param image: any PIL image. Not modified.
    :return: rgba values, 4 per pixel, row by row

    Images larger than MAX_DIM in either dimension are shrunk to fit.
    """
    if max(image.size) > MAX_DIM:
        image = image.copy()
        image.thumbnail((MAX_DIM, MAX_DIM), Image.LANCZOS)
    return np.asarray(image.convert("RGBA"), dtype=np.uint8).reshape(-1)


def _as_pixel_buffer(pixels: PixelBuffer | Image.Image) -> PixelBuffer:
    if isinstance(pixels, Image.Image):
        return get_image_pixels(pixels)
    return pixels


def get_palette(
    pixels: PixelBuffer | Image.Image,
    color_count: int,
    downsampling_factor: float = DOWNSAMPLING_FACTOR,
) -> list[Rgb]:
    """Get a palette of at most color_count colors.

    :param pixels: rgba pixel buffer or PIL image
    :param color_count: maximum number of colors [2, 256]
    :param downsampling_factor: keep one of every this many pixels
    :return: palette colors in ascending population * volume order
    :raises InvalidArgumentError: if there are no pixels, color_count is out of
        range, or downsampling_factor < 1
    """
    pixel_data = downsample_pixel_data(_as_pixel_buffer(pixels), downsampling_factor)
    color_map = quantize(pixel_data, color_count)
    palette = color_map.palette()
    logging.debug(f"palette of {len(palette)} for {color_count} colors: {palette}")
    return palette


def get_color(
    pixels: PixelBuffer | Image.Image,
    downsampling_factor: float = DOWNSAMPLING_FACTOR,
) -> Rgb:
    """Get one representative color.

    :param pixels: rgba pixel buffer or PIL image
    :param downsampling_factor: keep one of every this many pixels
    :return: the color of the box with the largest population * volume in a
        DOMINANT_PALETTE_SIZE palette. This is the last palette color.
    """
    return get_palette(pixels, DOMINANT_PALETTE_SIZE, downsampling_factor)[-1]
