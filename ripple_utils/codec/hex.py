"""
Hex, string and byte-array conversions

Two families live here:

- ``string_to_hex`` and friends treat every character as one byte (code point
  <= 255) and emit lowercase hex.
- ``convert_string_to_hex`` / ``convert_hex_to_string`` go through UTF-8 and
  handle any character; their hex output is uppercase.
"""

import re
from typing import Iterable, List

import nacl.encoding

from ..errors import InvalidHexError
from ..utils.debug import assert_that

_HEX_RE = re.compile(r"[0-9a-fA-F]*")


def _check_hex(h: str) -> None:
    if not _HEX_RE.fullmatch(h):
        raise InvalidHexError(h)


def string_to_hex(s: str) -> str:
    """One-byte-per-character string -> lowercase hex"""
    return "".join(format(ord(c), "02x") for c in s)


def hex_to_string(h: str) -> str:
    """
    Lowercase or uppercase hex -> one-byte-per-character string

    Odd-length input is accepted: the first character is read as a single hex
    digit and the rest as pairs, so ``"abc"`` decodes to ``"\\x0a\\xbc"``.

    Raises:
        InvalidHexError: if ``h`` contains a non-hex character
    """
    _check_hex(h)

    chars: List[str] = []
    i = 0

    if len(h) % 2:
        chars.append(chr(int(h[0], 16)))
        i = 1

    for j in range(i, len(h), 2):
        chars.append(chr(int(h[j:j + 2], 16)))

    return "".join(chars)


def string_to_array(s: str) -> List[int]:
    """String -> list of character codes"""
    return [ord(c) for c in s]


def hex_to_array(h: str) -> List[int]:
    """Hex -> list of byte values"""
    return string_to_array(hex_to_string(h))


def array_to_hex(values: Iterable[int]) -> str:
    """List of byte values -> lowercase hex, two digits per byte"""
    return "".join(format(b, "02x") for b in values)


def convert_string_to_hex(s: str) -> str:
    """UTF-8 encode ``s`` and return it as uppercase hex"""
    return nacl.encoding.HexEncoder.encode(s.encode("utf-8")).decode("ascii").upper()


def convert_hex_to_string(h: str) -> str:
    """
    Hex of UTF-8 bytes -> string

    Raises:
        InvalidHexError: if ``h`` is not an even-length hex string
        UnicodeDecodeError: if the bytes are not valid UTF-8
    """
    if len(h) % 2:
        raise InvalidHexError(h)
    _check_hex(h)
    return nacl.encoding.HexEncoder.decode(h.encode("ascii")).decode("utf-8")


def chunk_string(s: str, n: int, left_align: bool = False) -> List[str]:
    """
    Split ``s`` into pieces of length ``n``

    Args:
        s: String to split
        n: Chunk length (must be positive)
        left_align: Put the short remainder chunk first instead of last

    Returns:
        Ordered chunks; empty list for an empty string

    Example:
        >>> chunk_string("abcde", 2)
        ['ab', 'cd', 'e']
        >>> chunk_string("abcde", 2, left_align=True)
        ['a', 'bc', 'de']
    """
    assert_that(n > 0, "chunk length must be positive")

    chunks: List[str] = []
    i = 0

    if left_align:
        i = len(s) % n
        if i:
            chunks.append(s[:i])

    for j in range(i, len(s), n):
        chunks.append(s[j:j + n])

    return chunks
