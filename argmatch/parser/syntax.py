# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `SyntaxOptions`, the flat set of facets that controls how an argument
definition is written on the command line and which spellings of it are
recognized while matching.

Facets:
- Hyphen count: `SINGLE_HYPHEN` (`-name`), `DOUBLE_HYPHEN` (`--name`).
  When neither is set, the prefix is inferred from the name length:
  one character gets one hyphen, anything longer gets two.
- Value separator (options only): `VALUE_SEP_EQUALS` (`--name=value`),
  `VALUE_SEP_NO_SPACE` (`-nvalue`), `VALUE_SEP_NEXT_ARG` (`--name value`).

The facets are independent and may be combined. When matching, separators are
tried in a fixed order: `=` first, then the end of the token (next-token), then
the no-space fallback.

Example:
    SyntaxOptions.DOUBLE_HYPHEN | SyntaxOptions.VALUE_SEP_EQUALS
    SyntaxOptions.from_names(["single", "no_space"])
"""
from __future__ import annotations

from enum import Enum, Flag
from typing import Iterable


class ValueSeparator(Enum):
    """How an option value was delimited from the option name."""

    EQUALS = "="
    NO_SPACE = ""
    NEXT_TOKEN = "next"

    @property
    def width(self) -> int | None:
        """Number of characters the separator occupies inline, None for next-token."""
        if self is ValueSeparator.NEXT_TOKEN:
            return None
        return len(self.value)


class SyntaxOptions(Flag):
    """
    Bit-set of syntax facets for an argument definition.

    Members:
        NONE: No explicit facet, everything is inferred.
        SINGLE_HYPHEN: Accept/emit a single leading hyphen.
        DOUBLE_HYPHEN: Accept/emit two leading hyphens.
        VALUE_SEP_NO_SPACE: Value follows the name directly (`-nvalue`).
        VALUE_SEP_EQUALS: Value follows an `=` (`--name=value`).
        VALUE_SEP_NEXT_ARG: Value is the following token (`--name value`).
    """

    NONE = 0
    SINGLE_HYPHEN = 1
    DOUBLE_HYPHEN = 2
    VALUE_SEP_NO_SPACE = 4
    VALUE_SEP_EQUALS = 8
    VALUE_SEP_NEXT_ARG = 16

    HYPHENS = SINGLE_HYPHEN | DOUBLE_HYPHEN
    SEPARATORS = VALUE_SEP_NO_SPACE | VALUE_SEP_EQUALS | VALUE_SEP_NEXT_ARG

    @classmethod
    def _get_alias(cls, value: str) -> str:
        aliases = {
            "single": "single_hyphen",
            "short": "single_hyphen",
            "double": "double_hyphen",
            "long": "double_hyphen",
            "no_space": "value_sep_no_space",
            "nospace": "value_sep_no_space",
            "equals": "value_sep_equals",
            "eq": "value_sep_equals",
            "next": "value_sep_next_arg",
            "next_arg": "value_sep_next_arg",
            "space": "value_sep_next_arg",
        }
        return aliases.get(value, value)

    @classmethod
    def _groups(cls) -> tuple[SyntaxOptions, ...]:
        return (cls.NONE, cls.HYPHENS, cls.SEPARATORS)

    @classmethod
    def from_names(cls, names: Iterable[str]) -> SyntaxOptions:
        """
        Build options from a list of facet names, as found in config files.

        Names are case-insensitive, `-` and `_` are interchangeable and the
        short aliases `single`, `double`, `equals`, `no_space` and `next` are
        accepted.

        Raises:
            ValueError: If a name does not match any facet.
        """
        opts = cls.NONE
        for name in names:
            if not isinstance(name, str):
                raise ValueError(f"Invalid {cls.__name__} name: {name!r}")
            normalized = cls._get_alias(name.strip().lower().replace("-", "_"))
            member = cls.__members__.get(normalized.upper())
            if member is None or member in cls._groups():
                valid = ", ".join(
                    facet.name.lower() for facet in cls if facet not in cls._groups()
                )
                raise ValueError(
                    f"Invalid {cls.__name__} name: '{name}'. Must be one of: {valid}"
                )
            opts |= member
        return opts

    @staticmethod
    def infer_hyphen_count(name: str) -> int:
        """One hyphen for single character names, two otherwise."""
        return 1 if len(name) == 1 else 2

    def hyphen_count_for(self, name: str) -> int:
        """Return the number of hyphens used when rendering `name`."""
        if SyntaxOptions.SINGLE_HYPHEN in self:
            return 1
        if SyntaxOptions.DOUBLE_HYPHEN in self:
            return 2
        return self.infer_hyphen_count(name)

    def is_hyphen_count(self, count: int, name: str) -> bool:
        """Check whether `count` leading hyphens are acceptable in front of `name`."""
        if not self & SyntaxOptions.HYPHENS:
            return count == self.infer_hyphen_count(name)
        return (count == 1 and SyntaxOptions.SINGLE_HYPHEN in self) or (
            count == 2 and SyntaxOptions.DOUBLE_HYPHEN in self
        )

    def parse_value_sep(self, remainder: str) -> ValueSeparator | None:
        """
        Resolve the separator for the text following a matched option name.

        Args:
            remainder (str): Token body after the option name.

        Returns:
            ValueSeparator | None: The separator in effect, or None if no
            enabled separator style fits the remainder.
        """
        separators = self & SyntaxOptions.SEPARATORS
        if not separators:
            separators = SyntaxOptions.VALUE_SEP_NEXT_ARG

        if remainder.startswith("=") and SyntaxOptions.VALUE_SEP_EQUALS in separators:
            return ValueSeparator.EQUALS
        if not remainder and SyntaxOptions.VALUE_SEP_NEXT_ARG in separators:
            return ValueSeparator.NEXT_TOKEN
        if SyntaxOptions.VALUE_SEP_NO_SPACE in separators:
            return ValueSeparator.NO_SPACE
        return None
