"""Command line interface."""

from hexhash.cli.main import main

__all__ = ["main"]
