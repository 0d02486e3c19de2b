"""
Argmatch

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

from .argument import ArgumentDefinition, flag, option
from .argument_kind import ArgKind
from .formatted import FormattedArg, FormattedKind
from .matcher import Args, count_hyphens, parse, parse_from, parse_value
from .parser_types import ABSENT, FLAG_PRESENT, ArgMatch, ArgumentState
from .syntax import SyntaxOptions, ValueSeparator

__all__ = [
    "ABSENT",
    "FLAG_PRESENT",
    "ArgKind",
    "ArgMatch",
    "Args",
    "ArgumentDefinition",
    "ArgumentState",
    "FormattedArg",
    "FormattedKind",
    "SyntaxOptions",
    "ValueSeparator",
    "count_hyphens",
    "flag",
    "option",
    "parse",
    "parse_from",
    "parse_value",
]
