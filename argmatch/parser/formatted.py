# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines `FormattedArg`, the literal token(s) an argument definition renders to.

A `FormattedArg` is in one of three states: no token, one token, or two tokens
(an option name followed by its value as a separate word). Iterating consumes
it: tokens come out in emission order and the object steps down
`TWO -> ONE -> NONE`. To iterate again, render the definition again.

`str()` joins the remaining tokens with no separator. This is meant for logs
and debugging; the `TWO` form is not a single shell word.
"""
from __future__ import annotations

from enum import Enum


class FormattedKind(Enum):
    """State of a `FormattedArg`."""

    NONE = 0
    ONE = 1
    TWO = 2


class FormattedArg:
    """
    Zero, one or two command-line tokens produced by `ArgumentDefinition.format`.

    Example:
        tokens = list(option("name").format("value"))
        # tokens == ["--name", "value"]
    """

    __slots__ = ("_tokens",)

    def __init__(self, *tokens: str) -> None:
        if len(tokens) > 2:
            raise ValueError(f"FormattedArg holds at most two tokens, got {len(tokens)}")
        self._tokens: list[str] = list(tokens)

    @classmethod
    def none(cls) -> FormattedArg:
        return cls()

    @classmethod
    def one(cls, token: str) -> FormattedArg:
        return cls(token)

    @classmethod
    def two(cls, first: str, second: str) -> FormattedArg:
        return cls(first, second)

    @property
    def kind(self) -> FormattedKind:
        return FormattedKind(len(self._tokens))

    @property
    def tokens(self) -> tuple[str, ...]:
        """Remaining tokens, without consuming them."""
        return tuple(self._tokens)

    def take_next(self) -> str | None:
        """Remove and return the next token, or None when exhausted."""
        if not self._tokens:
            return None
        return self._tokens.pop(0)

    def __iter__(self) -> FormattedArg:
        return self

    def __next__(self) -> str:
        token = self.take_next()
        if token is None:
            raise StopIteration
        return token

    def __len__(self) -> int:
        return len(self._tokens)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, FormattedArg):
            return NotImplemented
        return self._tokens == other._tokens

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return "".join(self._tokens)

    def __repr__(self) -> str:
        args = ", ".join(repr(token) for token in self._tokens)
        return f"FormattedArg.{self.kind.name.lower()}({args})"
