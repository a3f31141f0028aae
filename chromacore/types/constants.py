# No dependencies
CHANNEL_MAX = 255
HUE_360 = 360.0
PERCENT_MAX = 100.0

# sRGB transfer function
SRGB_DECODE_THRESHOLD = 0.04045
SRGB_ENCODE_THRESHOLD = 0.0031308
SRGB_LINEAR_SLOPE = 12.92
SRGB_GAMMA = 2.4
SRGB_OFFSET = 0.055

# Lookup table sizes for the transfer fast path
LUT_DECODE_SIZE = 256
LUT_ENCODE_SIZE = 4096

# Chroma below this is treated as gray in HSL
HSL_CHROMA_EPSILON = 1e-8
# OKLCH chroma below this has no meaningful hue
OKLCH_ACHROMATIC_EPSILON = 1e-5
# Bisection steps for OKLCH gamut mapping (~1e-7 relative precision)
GAMUT_SEARCH_ITERATIONS = 24

# WCAG relative luminance weights (linear light)
LUMINANCE_WEIGHTS = (0.2126, 0.7152, 0.0722)
# W3C compositing luminosity weights (non-separable blend modes)
BLEND_LUM_WEIGHTS = (0.3, 0.59, 0.11)
