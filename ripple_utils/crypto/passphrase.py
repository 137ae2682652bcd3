"""
Passphrase and key based crypto-conditions

Builds hex-encoded conditions and fulfillments, as used by escrow
transactions, on top of the codec in ``conditions``.
"""

from typing import Any, Dict, Union

import nacl.encoding
import nacl.exceptions
import nacl.hash
import nacl.signing

from ..constants import DEFAULT_CONDITION_TYPE, DEFAULT_FULFILLMENT_TYPE, ED25519_COST
from ..errors import InvalidHexError, UnsupportedConditionTypeError
from .conditions import Condition, Fulfillment, encode_ed25519_fingerprint_contents


def _sha256(data: bytes) -> bytes:
    return nacl.hash.sha256(data, encoder=nacl.encoding.RawEncoder)


def _to_hex(data: bytes) -> str:
    return data.hex().upper()


def _as_bytes(data: Union[str, bytes]) -> bytes:
    if not isinstance(data, str):
        return data
    try:
        return bytes.fromhex(data)
    except ValueError as e:
        raise InvalidHexError(data) from e


def passphrase_to_fulfillment(passphrase: str, type: str = DEFAULT_FULFILLMENT_TYPE) -> str:
    """
    Encode a passphrase as a PREIMAGE-SHA-256 fulfillment

    Args:
        passphrase: Secret whose UTF-8 bytes become the preimage
        type: Fulfillment type tag

    Returns:
        Uppercase hex of the DER-encoded fulfillment
    """
    descriptor = {
        "type": type,
        "value": {
            "preimage": passphrase.encode("utf-8"),
        },
    }
    return _to_hex(Fulfillment.encode(descriptor))


def passphrase_to_condition(passphrase: str, type: str = DEFAULT_CONDITION_TYPE) -> str:
    """
    Encode the condition that ``passphrase`` fulfills

    The fingerprint is SHA-256 of the UTF-8 passphrase and the cost is its
    length in bytes (not characters).

    Args:
        passphrase: Secret the condition commits to
        type: Condition type tag

    Returns:
        Uppercase hex of the DER-encoded condition
    """
    preimage = passphrase.encode("utf-8")
    descriptor = {
        "type": type,
        "value": {
            "fingerprint": _sha256(preimage),
            "cost": len(preimage),
        },
    }
    return _to_hex(Condition.encode(descriptor))


def ed25519_fulfillment(message: bytes, seed: bytes) -> str:
    """
    Sign ``message`` and encode an ED25519-SHA-256 fulfillment

    Args:
        message: Bytes to sign
        seed: 32-byte Ed25519 private key seed

    Returns:
        Uppercase hex of the DER-encoded fulfillment
    """
    signing_key = nacl.signing.SigningKey(seed)
    signature = signing_key.sign(message).signature

    descriptor = {
        "type": "ed25519Sha256Fulfillment",
        "value": {
            "publicKey": signing_key.verify_key.encode(),
            "signature": signature,
        },
    }
    return _to_hex(Fulfillment.encode(descriptor))


def _condition_for(descriptor: Dict[str, Any]) -> str:
    value = descriptor["value"]

    if descriptor["type"] == "preimageSha256Fulfillment":
        condition = {
            "type": "preimageSha256Condition",
            "value": {
                "fingerprint": _sha256(value["preimage"]),
                "cost": len(value["preimage"]),
            },
        }
    elif descriptor["type"] == "ed25519Sha256Fulfillment":
        contents = encode_ed25519_fingerprint_contents(value["publicKey"])
        condition = {
            "type": "ed25519Sha256Condition",
            "value": {
                "fingerprint": _sha256(contents),
                "cost": ED25519_COST,
            },
        }
    else:
        raise UnsupportedConditionTypeError(descriptor["type"])

    return _to_hex(Condition.encode(condition))


def fulfillment_to_condition(fulfillment: Union[str, bytes]) -> str:
    """
    Derive the condition a fulfillment satisfies

    Args:
        fulfillment: Fulfillment as hex string or raw DER bytes

    Returns:
        Uppercase hex of the DER-encoded condition

    Raises:
        InvalidHexError: ``fulfillment`` is a string but not valid hex
        MalformedEncodingError: bytes are not a valid fulfillment
    """
    return _condition_for(Fulfillment.decode(_as_bytes(fulfillment)))


def validate_fulfillment(
    fulfillment: Union[str, bytes],
    condition: Union[str, bytes],
    message: bytes = b"",
) -> bool:
    """
    Check that a fulfillment satisfies a condition

    Ed25519 fulfillments must also carry a valid signature over ``message``.

    Args:
        fulfillment: Fulfillment as hex string or raw DER bytes
        condition: Condition as hex string or raw DER bytes
        message: Signed message, for Ed25519 fulfillments

    Returns:
        True if the fulfillment matches the condition

    Raises:
        InvalidHexError: ``fulfillment`` or ``condition`` is a string but not valid hex
        MalformedEncodingError: ``fulfillment`` bytes are not a valid fulfillment
    """
    expected = _to_hex(_as_bytes(condition))
    descriptor = Fulfillment.decode(_as_bytes(fulfillment))

    if _condition_for(descriptor) != expected:
        return False

    if descriptor["type"] == "ed25519Sha256Fulfillment":
        value = descriptor["value"]
        verify_key = nacl.signing.VerifyKey(value["publicKey"])
        try:
            verify_key.verify(message, value["signature"])
        except nacl.exceptions.BadSignatureError:
            return False

    return True
