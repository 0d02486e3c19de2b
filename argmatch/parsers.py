# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Provides the argparse parsers for the `argmatch` command.

Key Components:
- `ArgmatchParsers`: Container for the root parser and its subcommand parsers.
- `get_root_parser()`: Creates the root-level parser with global options.
- `get_subparsers()`: Attaches the subcommand group to the root parser.
- `get_arg_parsers()`: Builds the full parser suite (`format`, `parse`).
"""
from argparse import REMAINDER, ArgumentParser, Namespace, _SubParsersAction
from dataclasses import dataclass
from typing import Sequence


@dataclass
class ArgmatchParsers:
    """Defines the argument parsers for the argmatch CLI."""

    root: ArgumentParser
    subparsers: _SubParsersAction
    format: ArgumentParser
    parse: ArgumentParser

    def parse_args(self, args: Sequence[str] | None = None) -> Namespace:
        """Parse the command line arguments."""
        return self.root.parse_args(args)


def get_root_parser(
    prog: str | None = "argmatch",
    description: str | None = "Render and match command-line arguments declared in a config file.",
    epilog: str | None = "Tip: put '--' before the tokens given to 'parse'.",
) -> ArgumentParser:
    """
    Construct the root-level ArgumentParser for the argmatch CLI.

    Notes:
        ```
        Includes the following arguments:
            -v / --verbose       : Enable debug logging.
            --log-mode           : Console log format, 'cli' or 'json'.
            --version            : Print the argmatch version.
        ```
    """
    parser = ArgumentParser(prog=prog, description=description, epilog=epilog)
    parser.add_argument(
        "-v", "--verbose", action="store_true", help=f"Enable debug logging for {prog}."
    )
    parser.add_argument(
        "--log-mode",
        choices=["cli", "json"],
        default=None,
        help="Console log format (default: $ARGMATCH_LOG_MODE or 'cli').",
    )
    parser.add_argument("--version", action="store_true", help=f"Show {prog} version")
    return parser


def get_subparsers(
    parser: ArgumentParser,
    title: str = "Commands",
    description: str | None = "Available commands for the argmatch CLI.",
) -> _SubParsersAction:
    """
    Create and return a subparsers object for registering argmatch subcommands.

    Raises:
        TypeError: If `parser` is not an instance of `ArgumentParser`.
    """
    if not isinstance(parser, ArgumentParser):
        raise TypeError("parser must be an instance of ArgumentParser")
    return parser.add_subparsers(title=title, description=description, dest="command")


def get_arg_parsers(prog: str | None = "argmatch") -> ArgmatchParsers:
    """Create the root parser and the `format` and `parse` subcommand parsers."""
    root_parser = get_root_parser(prog=prog)
    subparsers = get_subparsers(root_parser)

    format_parser = subparsers.add_parser(
        "format",
        help="Render one argument definition into command-line tokens",
        description="Print the tokens a definition renders to, one per line.",
    )
    format_parser.add_argument(
        "-c", "--config", required=True, help="YAML or TOML file with the definitions"
    )
    format_parser.add_argument("name", help="Name or alias of the definition to render")
    format_parser.add_argument("value", nargs="?", help="Value for an option")

    parse_parser = subparsers.add_parser(
        "parse",
        help="Match the configured definitions against a list of tokens",
        description="Run one batch match and show the results and leftover tokens.",
    )
    parse_parser.add_argument(
        "-c", "--config", required=True, help="YAML or TOML file with the definitions"
    )
    parse_parser.add_argument(
        "--strict",
        action="store_true",
        help="Exit with status 2 if any token is left unmatched.",
    )
    parse_parser.add_argument(
        "tokens", nargs=REMAINDER, help="Tokens to match, usually after '--'"
    )

    return ArgmatchParsers(
        root=root_parser,
        subparsers=subparsers,
        format=format_parser,
        parse=parse_parser,
    )
