"""Import functions into the package namespace.

:created: 2026-10-12
"""

from color_extraction.color_map import ColorMap
from color_extraction.downsampling import downsample_pixel_data
from color_extraction.errors import InvalidArgumentError, UncuttableBoxError
from color_extraction.extraction import get_color, get_image_pixels, get_palette
from color_extraction.histogram import Histogram
from color_extraction.priority_queue import PriorityQueue
from color_extraction.quantization import quantize
from color_extraction.vbox import VBox

__all__ = [
    "ColorMap",
    "Histogram",
    "InvalidArgumentError",
    "PriorityQueue",
    "UncuttableBoxError",
    "VBox",
    "downsample_pixel_data",
    "get_color",
    "get_image_pixels",
    "get_palette",
    "quantize",
]
