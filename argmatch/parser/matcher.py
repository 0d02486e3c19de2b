# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
This module implements the matching engine: one left-to-right scan over a list
of raw command-line tokens that resolves a batch of `ArgumentDefinition`s at
once and removes every token it consumes.

It does not know about positional arguments, types or help output. Whatever
is left in the token list after a scan is for the caller to interpret, usually
as positionals or as unknown arguments.

Public Interface:
- `count_hyphens(token)`: Length of the leading run of `-` characters.
- `parse_value(definition, index, tokens)`: Try one definition at one position.
- `parse_from(definitions, tokens)`: Batch scan, mutating `tokens` in place.
- `parse(tokens, definitions)`: Same as `parse_from` with the arguments swapped.
- `Args`: An owned token buffer with a `parse(*definitions)` method.

Example Usage:
    args = Args(["--name=value", "-v", "file.txt"])
    name, verbose = args.parse(
        option("name", opts=SyntaxOptions.VALUE_SEP_EQUALS),
        flag("v"),
    )
    # name.value == "value", bool(verbose) is True
    # args.remaining == ["file.txt"]

Scan Rules:
- At each position the definitions are tried in declared order. The first one
  that matches consumes its token(s) and the scan stays at the same index,
  since the next unexamined token has shifted into it. If none matches, the
  index advances.
- Every occurrence of a definition is consumed. If a definition occurs more
  than once, the last occurrence wins. A found result is never reset to
  absent by a later position.
- An option in next-token style that is the last token is consumed and
  reported as present with `value=None`.
"""
from __future__ import annotations

import sys
from typing import Iterable, Iterator, Sequence

from argmatch.exceptions import UnrecognizedArgumentsError
from argmatch.logger import logger
from argmatch.parser.argument import ArgumentDefinition
from argmatch.parser.parser_types import ABSENT, FLAG_PRESENT, ArgMatch, ArgumentState
from argmatch.parser.syntax import ValueSeparator


def count_hyphens(token: str) -> int:
    """Return the number of leading `-` characters in `token`."""
    return len(token) - len(token.lstrip("-"))


def _parse_flag(
    definition: ArgumentDefinition, index: int, tokens: list[str], hyphens: int
) -> ArgMatch:
    body = tokens[index][hyphens:]
    for name in definition.names:
        if body == name and definition.opts.is_hyphen_count(hyphens, name):
            del tokens[index]
            return FLAG_PRESENT
    return ABSENT


def _parse_option(
    definition: ArgumentDefinition, index: int, tokens: list[str], hyphens: int
) -> ArgMatch:
    body = tokens[index][hyphens:]
    for name in definition.names:
        if not body.startswith(name):
            continue
        if not definition.opts.is_hyphen_count(hyphens, name):
            continue
        separator = definition.opts.parse_value_sep(body[len(name) :])
        if separator is not None:
            break
    else:
        return ABSENT

    if separator is ValueSeparator.NEXT_TOKEN:
        del tokens[index]
        if index < len(tokens):
            return ArgMatch.found(tokens.pop(index))
        logger.debug("Option '%s' is the last token and has no value", definition.name)
        return ArgMatch.found(None)

    token = tokens.pop(index)
    return ArgMatch.found(token[hyphens + len(name) + separator.width :])


def parse_value(
    definition: ArgumentDefinition, index: int, tokens: list[str]
) -> ArgMatch:
    """
    Check whether the token at `index` is an occurrence of `definition`.

    On a match the consumed token(s) are removed from `tokens`: just the token
    at `index`, or that token and the one after it for next-token style
    options. Otherwise `tokens` is left untouched.

    Args:
        definition (ArgumentDefinition): The definition to look for.
        index (int): Position of the candidate token in `tokens`.
        tokens (list[str]): The live token list. Mutated on a match.

    Returns:
        ArgMatch: `ABSENT`, `FLAG_PRESENT`, or a match carrying the value.
    """
    hyphens = count_hyphens(tokens[index])
    if hyphens == 0:
        return ABSENT
    if definition.is_flag:
        return _parse_flag(definition, index, tokens, hyphens)
    return _parse_option(definition, index, tokens, hyphens)


def parse_from(
    definitions: Sequence[ArgumentDefinition], tokens: list[str]
) -> list[ArgMatch]:
    """
    Resolve every definition in `definitions` against `tokens` in one scan.

    Args:
        definitions (Sequence[ArgumentDefinition]): Definitions to resolve.
        tokens (list[str]): Raw tokens. Consumed tokens are removed in place.

    Returns:
        list[ArgMatch]: One result per definition, in the same order.
    """
    states = [ArgumentState(definition) for definition in definitions]
    index = 0
    while index < len(tokens):
        for state in states:
            token = tokens[index]
            result = parse_value(state.definition, index, tokens)
            if not result:
                continue
            state.record(result)
            if state.occurrences > 1:
                logger.debug(
                    "'%s' given %d times, keeping the value from %r",
                    state.definition.name,
                    state.occurrences,
                    token,
                )
            else:
                logger.debug("Matched '%s' at %d: %r", state.definition.name, index, result)
            break
        else:
            index += 1
    return [state.result for state in states]


def parse(
    tokens: list[str], definitions: Sequence[ArgumentDefinition]
) -> list[ArgMatch]:
    """Resolve `definitions` against `tokens`, removing matched tokens in place."""
    return parse_from(definitions, tokens)


class Args:
    """
    Owned buffer of command-line tokens that have not been parsed yet.

    Each call to `parse()` consumes the tokens it matches, so several batches
    of definitions can be resolved one after another against the same buffer.
    """

    def __init__(self, tokens: Iterable[str] = ()) -> None:
        self._tokens: list[str] = [str(token) for token in tokens]

    @classmethod
    def from_argv(cls, argv: Sequence[str] | None = None) -> Args:
        """Build a buffer from `argv`, defaulting to `sys.argv[1:]`."""
        if argv is None:
            argv = sys.argv[1:]
        return cls(argv)

    def parse(self, *definitions: ArgumentDefinition) -> list[ArgMatch]:
        """Resolve `definitions`, consuming the matched tokens from this buffer."""
        return parse_from(definitions, self._tokens)

    @property
    def remaining(self) -> list[str]:
        """A copy of the tokens not consumed so far."""
        return list(self._tokens)

    def expect_empty(self) -> None:
        """
        Raise if any token is left unparsed.

        Raises:
            UnrecognizedArgumentsError: If the buffer is not empty.
        """
        if self._tokens:
            raise UnrecognizedArgumentsError(self._tokens)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._tokens))

    def __repr__(self) -> str:
        return f"Args({self._tokens!r})"
