# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `ArgKind`, the enum that tells a flag (presence only) apart from an
option (presence plus a text value).

Supports alias coercion for config-friendly values.

Example:
    ArgKind("flag")   → ArgKind.FLAG
    ArgKind("switch") → ArgKind.FLAG (via alias)
    ArgKind("value")  → ArgKind.OPTION (via alias)
"""
from __future__ import annotations

from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from argmatch.parser.argument import ArgumentDefinition


class ArgKind(Enum):
    """
    Kind of a command-line argument.

    Members:
        FLAG: A named switch with no value (`-n`, `--name`).
        OPTION: A named argument carrying a text value (`--name=value`,
            `--name value`, `-nvalue`, ...).
    """

    FLAG = "flag"
    OPTION = "option"

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "switch": "flag",
            "bool": "flag",
            "value": "option",
            "store": "option",
        }
        return aliases.get(value, value)

    @classmethod
    def _missing_(cls, value: object) -> ArgKind:
        if not isinstance(value, str):
            raise ValueError(f"Invalid {cls.__name__}: {value!r}")
        normalized = value.strip().lower()
        alias = cls._get_alias(normalized)
        for member in cls:
            if member.value == alias:
                return member
        valid = ", ".join(member.value for member in cls)
        raise ValueError(f"Invalid {cls.__name__}: '{value}'. Must be one of: {valid}")

    def with_name(self, name: str) -> ArgumentDefinition:
        """Create an `ArgumentDefinition` of this kind called `name`."""
        from argmatch.parser.argument import ArgumentDefinition

        return ArgumentDefinition(kind=self, name=name)

    def __str__(self) -> str:
        return self.value
