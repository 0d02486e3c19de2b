# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Result and state models used by the matching engine.

Contents:
- `ArgMatch`: Outcome of matching one definition: absent, present as a flag,
  or present with a text value.
- `ArgumentState`: Tracks an `ArgMatch` while a batch scan is in progress.
"""
from __future__ import annotations

from dataclasses import dataclass

from argmatch.parser.argument import ArgumentDefinition


@dataclass(frozen=True)
class ArgMatch:
    """
    Outcome of matching one argument definition.

    Attributes:
        present (bool): The argument occurred in the token sequence.
        value (str | None): The extracted value. Always None for flags; None for
            an option given as the last token in next-token style.
    """

    present: bool = False
    value: str | None = None

    @classmethod
    def found(cls, value: str | None = None) -> ArgMatch:
        return cls(present=True, value=value)

    def __bool__(self) -> bool:
        return self.present

    def __repr__(self) -> str:
        if not self.present:
            return "ArgMatch.ABSENT"
        if self.value is None:
            return "ArgMatch.FLAG_PRESENT"
        return f"ArgMatch.found({self.value!r})"


ABSENT = ArgMatch()
FLAG_PRESENT = ArgMatch(present=True)


@dataclass
class ArgumentState:
    """Tracks a definition and what the current scan has found for it."""

    definition: ArgumentDefinition
    result: ArgMatch = ABSENT
    occurrences: int = 0

    def record(self, result: ArgMatch) -> None:
        """Record a match. Absent results never replace a found one."""
        if not result:
            return
        self.result = result
        self.occurrences += 1
