# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines all custom exception classes used by argmatch.

Matching never raises for user input: tokens that do not match any definition
are left in the token sequence for the caller to report. The exceptions below
cover invalid definitions, caller contract violations and the optional strict
check on leftover tokens.

Exception Hierarchy:
- ArgMatchError
    ├── ArgumentDefinitionError
    ├── MissingValueError (also a ValueError)
    └── UnrecognizedArgumentsError
"""


class ArgMatchError(Exception):
    """Base exception for argmatch."""


class ArgumentDefinitionError(ArgMatchError):
    """Exception raised when an argument definition or its config is invalid."""


class MissingValueError(ArgMatchError, ValueError):
    """Exception raised when an option is formatted without a value."""


class UnrecognizedArgumentsError(ArgMatchError):
    """Exception raised when tokens remain after all definitions were matched."""

    def __init__(self, tokens: list[str]) -> None:
        self.tokens = list(tokens)
        super().__init__(f"Unrecognized arguments: {' '.join(self.tokens)}")
