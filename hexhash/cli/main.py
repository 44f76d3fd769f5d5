"""Command line entry point.

Usage:
    hexhash hash -a md5 0x616263
    echo 0x616263 | hexhash hash -a sha3_256
"""

import argparse
import sys
from collections.abc import Sequence

from pydantic import ValidationError

from hexhash import __version__
from hexhash.cli.commands import COMMANDS, Command
from hexhash.config.settings import get_settings
from hexhash.errors import HexHashError
from hexhash.utils.logger import get_logger, log_event

PROG = "hexhash"


def build_parser(commands: Sequence[Command] = COMMANDS) -> argparse.ArgumentParser:
    """Build the top-level parser with one subparser per command."""
    parser = argparse.ArgumentParser(prog=PROG, description="Hex toolbox: digest hex-encoded input")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)
    for command in commands:
        subparser = subparsers.add_parser(
            command.name,
            help=command.about,
            description=command.about,
            epilog=command.epilog(PROG),
            formatter_class=argparse.RawTextHelpFormatter,
        )
        command.configure(subparser)
        subparser.set_defaults(handler=command)

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Parse arguments, run the selected command and print its output.

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Process exit code: 0 on success, 1 on a reported error or bad configuration
    """
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"error: Invalid configuration\n{e}", file=sys.stderr)
        return 1

    logger = get_logger("hexhash", settings.log_file, settings.log_level)

    args = build_parser().parse_args(argv)
    command: Command = args.handler

    try:
        output = command.run(args)
    except HexHashError as e:
        log_event(logger, f"{command.name}_failed", e.message, command=command.name)
        print(f"error: {e.message}", file=sys.stderr)
        return 1

    log_event(logger, f"{command.name}_success", f"{command.name} completed", command=command.name)
    for line in output:
        print(line)

    return 0
