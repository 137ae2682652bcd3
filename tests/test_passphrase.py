"""
Unit tests for passphrase and Ed25519 crypto-conditions

Tests cover:
- Known condition / fulfillment encodings
- Determinism and sensitivity to the passphrase
- Cost is the UTF-8 byte length
- Deriving and validating conditions from fulfillments
- Ed25519 fulfillments (RFC 8032 test vector 1)
"""

import hashlib

import pytest

from ripple_utils.crypto import (
    Condition,
    Fulfillment,
    passphrase_to_condition,
    passphrase_to_fulfillment,
    ed25519_fulfillment,
    fulfillment_to_condition,
    validate_fulfillment,
)
from ripple_utils.errors import (
    InvalidHexError,
    MalformedEncodingError,
    UnsupportedConditionTypeError,
)


SHA256_TEST_HEX = "9F86D081884C7D659A2FEAA0C55AD015A3BF4F1B2B0B822CD15D6C15B0F00A08"
SHA256_EMPTY_HEX = "E3B0C44298FC1C149AFBF4C8996FB92427AE41E4649B934CA495991B7852B855"

# RFC 8032, section 7.1, TEST 1
RFC8032_SEED = bytes.fromhex("9d61b19deffd5a60ba844af492ec2cc44449c5697b326919703bac031cae7f60")
RFC8032_PUBLIC_KEY = "D75A980182B10AB7D54BFED3C964073A0EE172F3DAA62325AF021A68F707511A"
RFC8032_SIGNATURE = (
    "E5564300C360AC729086E2CC806E828A84877F1EB8E5D974D873E06522490155"
    "5FB8821590A33BACC61E39701CF9B46BD25BF5F0595BBE24655141438E7A100B"
)


# =============================================================================
# passphrase_to_condition
# =============================================================================


class TestPassphraseToCondition:
    def test_known_vector(self):
        assert passphrase_to_condition("test") == "A0258020" + SHA256_TEST_HEX + "810104"

    def test_empty_passphrase(self):
        assert passphrase_to_condition("") == "A0258020" + SHA256_EMPTY_HEX + "810100"

    def test_output_is_uppercase_hex(self):
        result = passphrase_to_condition("open sesame")
        assert result == result.upper()
        bytes.fromhex(result)

    def test_deterministic(self):
        assert passphrase_to_condition("test") == passphrase_to_condition("test")

    def test_one_character_changes_fingerprint(self):
        a = Condition.decode(bytes.fromhex(passphrase_to_condition("test")))
        b = Condition.decode(bytes.fromhex(passphrase_to_condition("tesT")))
        assert a["value"]["fingerprint"] != b["value"]["fingerprint"]

    def test_cost_is_utf8_byte_length(self):
        passphrase = "héllo €"
        assert len(passphrase) == 7
        descriptor = Condition.decode(bytes.fromhex(passphrase_to_condition(passphrase)))
        assert descriptor["value"]["cost"] == 10
        assert descriptor["value"]["fingerprint"] == hashlib.sha256(passphrase.encode("utf-8")).digest()

    def test_unsupported_type_propagates(self):
        with pytest.raises(UnsupportedConditionTypeError):
            passphrase_to_condition("test", type="prefixSha256Condition")


# =============================================================================
# passphrase_to_fulfillment
# =============================================================================


class TestPassphraseToFulfillment:
    def test_known_vector(self):
        assert passphrase_to_fulfillment("test") == "A0068004" + "74657374"

    def test_multibyte_preimage(self):
        assert passphrase_to_fulfillment("€") == "A0058003E282AC"

    def test_deterministic(self):
        assert passphrase_to_fulfillment("secret") == passphrase_to_fulfillment("secret")

    def test_decodes_back_to_passphrase(self):
        descriptor = Fulfillment.decode(bytes.fromhex(passphrase_to_fulfillment("日本")))
        assert descriptor["value"]["preimage"].decode("utf-8") == "日本"

    def test_unsupported_type_propagates(self):
        with pytest.raises(UnsupportedConditionTypeError):
            passphrase_to_fulfillment("test", type="preimageSha256Condition")


# =============================================================================
# fulfillment_to_condition / validate_fulfillment
# =============================================================================


class TestFulfillmentToCondition:
    @pytest.mark.parametrize("passphrase", ["", "test", "héllo €", "x" * 300])
    def test_matches_passphrase_condition(self, passphrase):
        fulfillment = passphrase_to_fulfillment(passphrase)
        assert fulfillment_to_condition(fulfillment) == passphrase_to_condition(passphrase)

    def test_accepts_bytes(self):
        fulfillment = bytes.fromhex(passphrase_to_fulfillment("test"))
        assert fulfillment_to_condition(fulfillment) == passphrase_to_condition("test")

    def test_accepts_lowercase_hex(self):
        fulfillment = passphrase_to_fulfillment("test").lower()
        assert fulfillment_to_condition(fulfillment) == passphrase_to_condition("test")

    def test_invalid_hex(self):
        with pytest.raises(InvalidHexError) as exc_info:
            fulfillment_to_condition("A0zz")
        assert isinstance(exc_info.value.__cause__, ValueError)

    def test_undecodable_bytes(self):
        with pytest.raises(MalformedEncodingError):
            fulfillment_to_condition(b"\x04\x01\x00")


class TestValidateFulfillment:
    def test_matching_passphrase(self):
        assert validate_fulfillment(
            passphrase_to_fulfillment("open sesame"),
            passphrase_to_condition("open sesame"),
        ) is True

    def test_wrong_passphrase(self):
        assert validate_fulfillment(
            passphrase_to_fulfillment("open sesame"),
            passphrase_to_condition("open barley"),
        ) is False

    def test_lowercase_condition(self):
        assert validate_fulfillment(
            passphrase_to_fulfillment("test"),
            passphrase_to_condition("test").lower(),
        ) is True

    def test_bytes_inputs(self):
        assert validate_fulfillment(
            bytes.fromhex(passphrase_to_fulfillment("test")),
            bytes.fromhex(passphrase_to_condition("test")),
        ) is True

    def test_invalid_fulfillment_hex(self):
        with pytest.raises(InvalidHexError):
            validate_fulfillment("not hex", passphrase_to_condition("test"))

    def test_invalid_condition_hex(self):
        with pytest.raises(InvalidHexError):
            validate_fulfillment(passphrase_to_fulfillment("test"), "A025zz")

    def test_undecodable_fulfillment(self):
        with pytest.raises(MalformedEncodingError):
            validate_fulfillment(b"\x04\x01\x00", passphrase_to_condition("test"))


# =============================================================================
# Ed25519
# =============================================================================


class TestEd25519Fulfillment:
    def test_rfc8032_vector(self):
        fulfillment = ed25519_fulfillment(b"", RFC8032_SEED)
        assert fulfillment == "A464" + "8020" + RFC8032_PUBLIC_KEY + "8140" + RFC8032_SIGNATURE

    def test_condition_layout(self):
        condition = fulfillment_to_condition(ed25519_fulfillment(b"", RFC8032_SEED))
        contents = bytes.fromhex("30228020" + RFC8032_PUBLIC_KEY)
        expected_fingerprint = hashlib.sha256(contents).hexdigest().upper()
        assert condition == "A4278020" + expected_fingerprint + "8103020000"

    def test_validates_signed_message(self):
        message = b"escrow finish"
        fulfillment = ed25519_fulfillment(message, RFC8032_SEED)
        condition = fulfillment_to_condition(fulfillment)
        assert validate_fulfillment(fulfillment, condition, message) is True

    def test_rejects_other_message(self):
        fulfillment = ed25519_fulfillment(b"escrow finish", RFC8032_SEED)
        condition = fulfillment_to_condition(fulfillment)
        assert validate_fulfillment(fulfillment, condition, b"escrow cancel") is False

    def test_rejects_other_key(self):
        fulfillment = ed25519_fulfillment(b"msg", RFC8032_SEED)
        other = fulfillment_to_condition(ed25519_fulfillment(b"msg", bytes(32)))
        assert validate_fulfillment(fulfillment, other, b"msg") is False
