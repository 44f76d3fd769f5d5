"""Resolve command input from a positional argument or standard input."""

import sys
from typing import BinaryIO

from hexhash.errors import InvalidInputError


def _default_stream() -> BinaryIO:
    return sys.stdin.buffer


def input_string(value: str | None, stream: BinaryIO | None = None) -> str:
    """
    Return the input as text.

    If a positional value was supplied it is returned verbatim. Otherwise the
    whole stream is read as UTF-8 and its lines are rejoined with a single
    newline. A trailing newline at the end of the stream is dropped.

    Args:
        value: Positional argument, or None when absent
        stream: Binary stream to read (defaults to stdin)

    Returns:
        Input text

    Raises:
        InvalidInputError: If the stream cannot be read or is not valid UTF-8
    """
    if value is not None:
        return value

    if stream is None:
        stream = _default_stream()
    try:
        text = stream.read().decode("utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidInputError() from e

    *lines, last = text.split("\n")

    # \r is only part of the terminator when a \n follows it
    lines = [line.removesuffix("\r") for line in lines]
    if last:
        lines.append(last)

    return "\n".join(lines)


def input_bytes(value: str | None, stream: BinaryIO | None = None) -> bytes:
    """
    Return the input as raw bytes.

    A positional value is encoded as UTF-8; otherwise the stream contents are
    returned unchanged.

    Raises:
        InvalidInputError: If reading the stream fails
    """
    if value is not None:
        return value.encode("utf-8")

    if stream is None:
        stream = _default_stream()
    try:
        return stream.read()
    except OSError as e:
        raise InvalidInputError() from e
