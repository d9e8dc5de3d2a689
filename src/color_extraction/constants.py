"""Constants and metaparameters for the median-cut quantizer.

:created: 2026-10-12
"""

BITS_PER_CHANNEL = 8

# Colors are bucketed with fewer bits per channel than the source image. This
# increases the chance of a collision in the histogram, so fewer samples are needed
# to get a meaningful distribution.
REDUCED_BITS_PER_CHANNEL = 5

RIGHT_SHIFT = BITS_PER_CHANNEL - REDUCED_BITS_PER_CHANNEL

# number of values per reduced channel (32) and buckets in the histogram (32768)
REDUCED_CHANNEL_SIZE = 1 << REDUCED_BITS_PER_CHANNEL
HISTOGRAM_SIZE = 1 << (3 * REDUCED_BITS_PER_CHANNEL)

# Upper limit on split attempts for each refinement phase. An image with fewer unique
# colors than requested will never reach the target, so this bounds the work.
MAX_ITERATIONS = 1000

# Fraction of the target palette generated while ordering boxes by population alone.
# The remaining colors are generated with boxes ordered by population * volume.
FRACT_BY_POPULATIONS = 0.75

MIN_COLORS = 2
MAX_COLORS = 256
