"""Compute cryptographic digests of hex-encoded input."""

__version__ = "0.1.0"
