"""
Fixed values shared across ripple-utils
"""

# Seconds between the Unix epoch and 2000-01-01T00:00:00Z
RIPPLE_EPOCH_OFFSET = 0x386D4380

# Width of the decimal mantissa used in amount serialization
MANTISSA_DIGITS = 16

DEFAULT_FULFILLMENT_TYPE = "preimageSha256Fulfillment"
DEFAULT_CONDITION_TYPE = "preimageSha256Condition"

# Fixed cost of an Ed25519-SHA-256 condition
ED25519_COST = 131072

# Largest cost value the condition schema accepts
MAX_COST = 4294967295
