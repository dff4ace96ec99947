#!/usr/bin/env python3
"""Console driver: decode a delimited string and print the result."""

import logging
import sys
from typing import Any, Tuple

from plumbum import cli  # type: ignore[import-untyped]

from .catalog import decoder_for, decoder_names
from .decoding import DecodeError
from .loader import load, open_cursor
from .render import render

DEMO_INPUTS: Tuple[Tuple[str, str], ...] = (
    ("33", "int"),
    ("abc", "str"),
    ("3/apple/banana/cherry", "seq:str"),
    ("taro/3", "employee"),
    ("CatWorld/3/tama/5/mike/6/kuro/7", "company"),
)


class SlashLoadCLI(cli.Application):
    """Decode values from slash-delimited token strings."""

    PROGNAME = "slashload"
    VERSION = "0.1.0"

    verbose = cli.Flag(["-v", "--verbose"], help="Log decoder activity to stderr")

    def main(self, *args: str) -> int:
        if args:
            print(f"Unknown command: {args[0]}", file=sys.stderr)
            return 1
        if not self.nested_command:
            self.help()
            return 1
        if self.verbose:
            logging.basicConfig(level=logging.DEBUG)
        return 0


@SlashLoadCLI.subcommand("decode")
class DecodeCommand(cli.Application):
    """Decode SOURCE and print the value."""

    type_name = cli.SwitchAttr(
        ["-a", "--as"],
        str,
        default="company",
        help=f"Decoder name: {', '.join(decoder_names())}, or seq:<name>",
    )
    delimiter = cli.SwitchAttr(
        ["-d", "--delimiter"], str, default=None, help="Token delimiter (default: /)"
    )
    layout = cli.Flag(["--layout"], help="Print the record field layout after the value")

    def main(self, source: str) -> int:
        try:
            decoder = decoder_for(self.type_name)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            return 2

        try:
            cursor = open_cursor(
                source, delimiter=self.delimiter, record_layout=self.layout or None
            )
            value: Any = load(cursor, decoder)
        except (DecodeError, ValueError) as e:
            print(f"Decode error: {e}", file=sys.stderr)
            return 1

        print(render(value))
        for entry in cursor.snapshot_layout():
            offset = entry.meta["offset"]
            length = entry.meta["length_tokens"]
            print(f"  {entry.key}: {entry.kind} @{offset}+{length}")
        return 0


@SlashLoadCLI.subcommand("demo")
class DemoCommand(cli.Application):
    """Decode and print the built-in example inputs."""

    def main(self) -> int:
        for source, type_name in DEMO_INPUTS:
            print(render(load(source, decoder_for(type_name))))
        return 0


def main() -> None:
    SlashLoadCLI.run()


if __name__ == "__main__":
    main()
