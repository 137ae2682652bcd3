"""
Crypto-condition binary codec

ASN.1 schema and DER encoding for conditions and fulfillments, following the
crypto-conditions draft (draft-thomas-crypto-conditions). Descriptors are plain
dicts of the form ``{"type": <choice name>, "value": {...}}``:

    {"type": "preimageSha256Fulfillment", "value": {"preimage": b"..."}}
    {"type": "preimageSha256Condition",
     "value": {"fingerprint": <32 bytes>, "cost": <int>}}

Only the simple (non-compound) types are supported: PREIMAGE-SHA-256 and
ED25519-SHA-256.
"""

from typing import Any, Dict, List

from pyasn1.codec.der import decoder as der_decoder
from pyasn1.codec.der import encoder as der_encoder
from pyasn1.codec.native import decoder as native_decoder
from pyasn1.codec.native import encoder as native_encoder
from pyasn1.error import PyAsn1Error
from pyasn1.type import constraint, namedtype, tag, univ

from ..constants import MAX_COST
from ..errors import MalformedEncodingError, UnsupportedConditionTypeError

Descriptor = Dict[str, Any]


def _context(number: int, constructed: bool = False) -> tag.Tag:
    tag_format = tag.tagFormatConstructed if constructed else tag.tagFormatSimple
    return tag.Tag(tag.tagClassContext, tag_format, number)


def _octets(number: int, size: int = 0) -> univ.OctetString:
    if size:
        return univ.OctetString().subtype(
            subtypeSpec=constraint.ValueSizeConstraint(size, size),
            implicitTag=_context(number),
        )
    return univ.OctetString().subtype(implicitTag=_context(number))


# =============================================================================
# ASN.1 schema
# =============================================================================

class SimpleSha256Condition(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("fingerprint", _octets(0, 32)),
        namedtype.NamedType("cost", univ.Integer().subtype(
            subtypeSpec=constraint.ValueRangeConstraint(0, MAX_COST),
            implicitTag=_context(1),
        )),
    )


class PreimageFulfillment(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("preimage", _octets(0)),
    )


class Ed25519Sha512Fulfillment(univ.Sequence):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("publicKey", _octets(0, 32)),
        namedtype.NamedType("signature", _octets(1, 64)),
    )


class Ed25519FingerprintContents(univ.Sequence):
    """Hashed to produce the fingerprint of an ED25519-SHA-256 condition"""
    componentType = namedtype.NamedTypes(
        namedtype.NamedType("publicKey", _octets(0, 32)),
    )


class Asn1Condition(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType(
            "preimageSha256Condition",
            SimpleSha256Condition().subtype(implicitTag=_context(0, constructed=True)),
        ),
        namedtype.NamedType(
            "ed25519Sha256Condition",
            SimpleSha256Condition().subtype(implicitTag=_context(4, constructed=True)),
        ),
    )


class Asn1Fulfillment(univ.Choice):
    componentType = namedtype.NamedTypes(
        namedtype.NamedType(
            "preimageSha256Fulfillment",
            PreimageFulfillment().subtype(implicitTag=_context(0, constructed=True)),
        ),
        namedtype.NamedType(
            "ed25519Sha256Fulfillment",
            Ed25519Sha512Fulfillment().subtype(implicitTag=_context(4, constructed=True)),
        ),
    )


# =============================================================================
# Codecs
# =============================================================================

class _ChoiceCodec:
    """Encode/decode descriptors against one CHOICE schema"""

    schema: Any = None

    @classmethod
    def types(cls) -> List[str]:
        """Type tags this codec accepts"""
        return [named.name for named in cls.schema.componentType.namedTypes]

    @classmethod
    def encode(cls, descriptor: Descriptor) -> bytes:
        """
        Encode a descriptor to DER

        Raises:
            UnsupportedConditionTypeError: unknown ``type`` tag
            pyasn1.error.PyAsn1Error: value does not fit the schema
        """
        type_name = descriptor.get("type")
        if type_name not in cls.types():
            raise UnsupportedConditionTypeError(type_name, cls.types())

        asn1_value = native_decoder.decode(
            {type_name: descriptor.get("value")},
            asn1Spec=cls.schema(),
        )
        return der_encoder.encode(asn1_value)

    @classmethod
    def decode(cls, data: bytes) -> Descriptor:
        """
        Decode DER bytes to a descriptor

        Raises:
            MalformedEncodingError: bytes are not a single valid encoding
        """
        try:
            asn1_value, rest = der_decoder.decode(data, asn1Spec=cls.schema())
        except PyAsn1Error as e:
            raise MalformedEncodingError(
                f"Cannot decode {cls.__name__.lower()}: {e}",
                {"length": len(data)},
            ) from e

        if rest:
            raise MalformedEncodingError(
                f"Trailing data after {cls.__name__.lower()}",
                {"trailing_bytes": len(rest)},
            )

        value = native_encoder.encode(asn1_value.getComponent())
        return {"type": asn1_value.getName(), "value": dict(value)}


class Condition(_ChoiceCodec):
    """Codec for condition descriptors"""
    schema = Asn1Condition


class Fulfillment(_ChoiceCodec):
    """Codec for fulfillment descriptors"""
    schema = Asn1Fulfillment


def encode_ed25519_fingerprint_contents(public_key: bytes) -> bytes:
    """DER of the fingerprint contents for an Ed25519 public key"""
    contents = native_decoder.decode(
        {"publicKey": public_key},
        asn1Spec=Ed25519FingerprintContents(),
    )
    return der_encoder.encode(contents)
