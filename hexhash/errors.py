"""Errors raised by the hash pipeline.

Each error carries the short message the command line prints.
"""


class HexHashError(Exception):
    """Base class for all errors reported to the user."""

    message = "Unknown error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class InvalidInputError(HexHashError):
    """Standard input could not be read or decoded as text."""

    message = "Invalid input"


class ConversionFailedError(HexHashError):
    """Input was not valid hex after stripping the 0x prefix."""

    message = "Convert failed"


class InvalidAlgorithmError(HexHashError):
    """Algorithm name was missing or not registered."""

    message = "Invalid algorithm"

    def __init__(self, name: str | None = None):
        self.name = name
        super().__init__()
