"""Hex encoding helpers for 0x-prefixed strings."""

import re

from hexhash.errors import HexHashError

HEX_PREFIXES = ("0x", "0X")

_HEX_DIGITS = re.compile(r"[0-9a-fA-F]*")


class InvalidHexError(HexHashError, ValueError):
    """String is not an even-length run of hex digits."""

    message = "Invalid hex"


def strip_hex_prefix(value: str) -> str:
    """
    Remove a single leading 0x or 0X.

    Examples:
        >>> strip_hex_prefix("0x0a")
        '0a'

        >>> strip_hex_prefix("0x0x0a")
        '0x0a'
    """
    if value.startswith(HEX_PREFIXES):
        return value[2:]
    return value


def decode_hex(value: str) -> bytes:
    """
    Decode a hex string, with or without the 0x prefix.

    Digits are case-insensitive. Whitespace is not accepted anywhere.

    Args:
        value: Hex text such as "0x616263" or "616263"

    Returns:
        Decoded bytes

    Raises:
        InvalidHexError: If the digits have odd length or contain non-hex characters
    """
    digits = strip_hex_prefix(value)

    # bytes.fromhex skips whitespace, so validate first
    if len(digits) % 2 or not _HEX_DIGITS.fullmatch(digits):
        raise InvalidHexError()

    return bytes.fromhex(digits)


def encode_hex(data: bytes) -> str:
    """
    Encode bytes as lowercase hex with a 0x prefix.

    Examples:
        >>> encode_hex(b"abc")
        '0x616263'

        >>> encode_hex(b"")
        '0x'
    """
    return "0x" + data.hex()
