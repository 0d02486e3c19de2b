"""
Argmatch

Copyright (c) 2025 rtj.dev LLC.
Licensed under the MIT License. See LICENSE file for details.
"""

import logging

from .exceptions import (
    ArgMatchError,
    ArgumentDefinitionError,
    MissingValueError,
    UnrecognizedArgumentsError,
)
from .parser import (
    ABSENT,
    FLAG_PRESENT,
    ArgKind,
    ArgMatch,
    Args,
    ArgumentDefinition,
    FormattedArg,
    SyntaxOptions,
    flag,
    option,
    parse,
)

logger = logging.getLogger("argmatch")

__version__ = "0.1.0"

__all__ = [
    "ABSENT",
    "FLAG_PRESENT",
    "ArgKind",
    "ArgMatch",
    "ArgMatchError",
    "Args",
    "ArgumentDefinition",
    "ArgumentDefinitionError",
    "FormattedArg",
    "MissingValueError",
    "SyntaxOptions",
    "UnrecognizedArgumentsError",
    "flag",
    "option",
    "parse",
]
