"""Internal constants shared across the library."""

# ------------------------------------------------------------------
# Monitoring declaration type tags
# ------------------------------------------------------------------

MONITORING_THINQ2 = "THINQ2"
MONITORING_BINARY_BYTE = "BINARY(BYTE)"
MONITORING_BINARY_HEX = "BINARY(HEX)"

# Bits shifted into the accumulator per consumed element.
BYTE_SHIFT_WIDTH = 8
HEX_SHIFT_WIDTH = 16

# Range definitions without a usable step advance by one.
DEFAULT_RANGE_STEP = 1
