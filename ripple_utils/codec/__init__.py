"""Hex / string / byte codecs"""

from .hex import (
    string_to_hex,
    hex_to_string,
    string_to_array,
    hex_to_array,
    array_to_hex,
    convert_string_to_hex,
    convert_hex_to_string,
    chunk_string,
)

__all__ = [
    "string_to_hex",
    "hex_to_string",
    "string_to_array",
    "hex_to_array",
    "array_to_hex",
    "convert_string_to_hex",
    "convert_hex_to_string",
    "chunk_string",
]
