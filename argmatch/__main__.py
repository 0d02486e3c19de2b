"""
Argmatch

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging
import sys
from argparse import Namespace
from typing import Sequence

from rich.markup import escape
from rich.table import Table

from argmatch import __version__
from argmatch.config import loader
from argmatch.console import console
from argmatch.exceptions import ArgMatchError
from argmatch.logger import logger
from argmatch.parser import ArgumentDefinition, Args
from argmatch.parsers import get_arg_parsers
from argmatch.utils import setup_logging


def find_definition(
    definitions: list[ArgumentDefinition], name: str
) -> ArgumentDefinition | None:
    """Find a definition by name or alias, with or without leading hyphens."""
    name = name.lstrip("-")
    return next(
        (definition for definition in definitions if definition.is_name_eq(name)), None
    )


def format_command(args: Namespace) -> int:
    definitions = loader(args.config)
    definition = find_definition(definitions, args.name)
    if definition is None:
        console.print(
            f"[red]No argument named '{escape(args.name)}' in "
            f"{escape(str(args.config))}[/]"
        )
        return 1
    for token in definition.format(args.value):
        console.print(token, markup=False)
    return 0


def parse_command(args: Namespace) -> int:
    definitions = loader(args.config)
    tokens = list(args.tokens)
    if tokens and tokens[0] == "--":
        tokens = tokens[1:]

    buffer = Args(tokens)
    results = buffer.parse(*definitions)

    table = Table(title="Matches")
    table.add_column("Argument", style="bold")
    table.add_column("Kind")
    table.add_column("Present")
    table.add_column("Value")
    for definition, result in zip(definitions, results):
        table.add_row(
            str(definition),
            str(definition.kind),
            "yes" if result else "no",
            "" if result.value is None else repr(result.value),
        )
    console.print(table)
    console.print(f"Remaining: {buffer.remaining!r}", markup=False)

    if args.strict and len(buffer):
        unrecognized = escape(" ".join(buffer.remaining))
        console.print(f"[red]Unrecognized arguments:[/] {unrecognized}")
        return 2
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    parsers = get_arg_parsers()
    args = parsers.parse_args(argv)

    setup_logging(
        mode=args.log_mode,
        console_log_level=logging.DEBUG if args.verbose else logging.WARNING,
    )

    if args.version:
        console.print(f"argmatch {__version__}")
        return 0

    commands = {"format": format_command, "parse": parse_command}
    command = commands.get(args.command)
    if command is None:
        parsers.root.print_help()
        return 1

    try:
        return command(args)
    except (ArgMatchError, FileNotFoundError, ValueError) as error:
        logger.debug("Command '%s' failed", args.command, exc_info=True)
        console.print(f"[red]Error:[/] {escape(str(error))}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
