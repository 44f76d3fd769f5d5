"""The hash operation: hex in, digest hex out."""

import logging
from typing import BinaryIO

from hexhash.core.algorithms import REGISTRY, AlgorithmRegistry
from hexhash.errors import ConversionFailedError, InvalidAlgorithmError
from hexhash.utils.hex import InvalidHexError, decode_hex, encode_hex
from hexhash.utils.input import input_string

logger = logging.getLogger(__name__)


def digest(name: str | None, data: bytes, registry: AlgorithmRegistry = REGISTRY) -> bytes:
    """
    Digest data with the named algorithm.

    Args:
        name: Registered algorithm name
        data: Bytes to digest
        registry: Registry to look the name up in

    Returns:
        Digest bytes

    Raises:
        InvalidAlgorithmError: If name is None or not registered
    """
    if name is None:
        raise InvalidAlgorithmError()

    algorithm = registry.get(name)
    if algorithm is None:
        raise InvalidAlgorithmError(name)

    logger.debug(f"Digesting {len(data)} bytes with {algorithm.name}")
    return algorithm.digest(data)


def hash_command(
    input_value: str | None,
    algorithm: str | None,
    stream: BinaryIO | None = None,
    registry: AlgorithmRegistry = REGISTRY,
) -> list[str]:
    """
    Run the hash command.

    Workflow:
    1. Resolve the input text (argument or stdin)
    2. Decode it as hex, with or without 0x
    3. Digest the bytes with the selected algorithm
    4. Return the digest as 0x-prefixed hex

    Args:
        input_value: Positional INPUT, or None to read the stream
        algorithm: Value of the -a flag
        stream: Binary stream used when input_value is None (defaults to stdin)
        registry: Registry to resolve algorithm in

    Returns:
        Single-element list holding the encoded digest

    Raises:
        InvalidInputError: If stdin cannot be read as text
        ConversionFailedError: If the input is not valid hex
        InvalidAlgorithmError: If the algorithm is missing or unknown
    """
    text = input_string(input_value, stream)

    try:
        data = decode_hex(text)
    except InvalidHexError as e:
        raise ConversionFailedError() from e

    result = digest(algorithm, data, registry)

    return [encode_hex(result)]
