"""Command table for the command line interface.

Each command declares its arguments, the function that runs it, and a few
example cases. The cases are printed under --help and exercised by the tests.
"""

import argparse
from collections.abc import Callable
from dataclasses import dataclass, field

from hexhash.core.algorithms import REGISTRY
from hexhash.core.dispatcher import hash_command


@dataclass(frozen=True)
class Case:
    """An example invocation and the output it prints."""

    args: list[str]
    output: list[str]


@dataclass(frozen=True)
class Command:
    name: str
    about: str
    configure: Callable[[argparse.ArgumentParser], None]
    run: Callable[[argparse.Namespace], list[str]]
    cases: list[Case] = field(default_factory=list)

    def epilog(self, prog: str) -> str:
        """Render the example cases for --help."""
        if not self.cases:
            return ""

        lines = ["examples:"]
        for case in self.cases:
            lines.append(f"  {prog} {self.name} {' '.join(case.args)}")
            lines.extend(f"    {line}" for line in case.output)
        return "\n".join(lines)


def _configure_hash(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-a",
        dest="algorithm",
        metavar="ALGORITHM",
        required=True,
        help=REGISTRY.help_text(),
    )
    parser.add_argument(
        "input",
        metavar="INPUT",
        nargs="?",
        help="Hex input, with or without 0x (default: read stdin)",
    )


def _run_hash(args: argparse.Namespace) -> list[str]:
    return hash_command(args.input, args.algorithm)


HASH = Command(
    name="hash",
    about="Hex to hash",
    configure=_configure_hash,
    run=_run_hash,
    cases=[
        Case(["-a", "md5", "0x616263"], ["0x900150983cd24fb0d6963f7d28e17f72"]),
        Case(
            ["-a", "sha2_256", "0x616263"],
            ["0xba7816bf8f01cfea414140de5dae2223b00361a396177a9cb410ff61f20015ad"],
        ),
        Case(
            ["-a", "sha3_k_256", "0x616263"],
            ["0x4e03657aea45a94fc7d47ba826c8d667c0d1e6e33a64a036ec44f58fa12d6c45"],
        ),
        Case(["-a", "ripemd_160", "0x616263"], ["0x8eb208f7e05d987a9b044a8e98c6b087f15a0bfc"]),
    ],
)

COMMANDS = (HASH,)
