"""Default values for palette extraction.

:created: 2026-10-12
"""

# Keep one of every DOWNSAMPLING_FACTOR pixels before building a histogram. The
# distribution of colors survives, and the histogram is built much faster.
DOWNSAMPLING_FACTOR = 10

# get_color returns the largest color of a palette this size.
DOMINANT_PALETTE_SIZE = 5

# Images larger than this in either dimension are shrunk before pixels are
# extracted. Downsampling would throw most of those pixels away anyway.
MAX_DIM = 500
