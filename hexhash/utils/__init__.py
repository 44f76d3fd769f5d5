"""Input, hex and logging helpers."""

from hexhash.utils.hex import decode_hex, encode_hex, strip_hex_prefix
from hexhash.utils.input import input_bytes, input_string
from hexhash.utils.logger import get_logger

__all__ = [
    "decode_hex",
    "encode_hex",
    "strip_hex_prefix",
    "input_bytes",
    "input_string",
    "get_logger",
]
