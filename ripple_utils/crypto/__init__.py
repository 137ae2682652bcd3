"""Crypto-condition utilities"""

from .conditions import (
    Condition,
    Fulfillment,
    Asn1Condition,
    Asn1Fulfillment,
    encode_ed25519_fingerprint_contents,
)

from .passphrase import (
    passphrase_to_fulfillment,
    passphrase_to_condition,
    ed25519_fulfillment,
    fulfillment_to_condition,
    validate_fulfillment,
)

__all__ = [
    # Codec
    "Condition",
    "Fulfillment",
    "Asn1Condition",
    "Asn1Fulfillment",
    "encode_ed25519_fingerprint_contents",
    # Passphrase helpers
    "passphrase_to_fulfillment",
    "passphrase_to_condition",
    "ed25519_fulfillment",
    "fulfillment_to_condition",
    "validate_fulfillment",
]
