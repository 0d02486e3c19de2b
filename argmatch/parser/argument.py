# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""
Defines the `ArgumentDefinition` dataclass that describes one named
command-line argument: its kind, canonical name, aliases and syntax options.

Definitions are immutable values, usually declared once as module level
configuration, and are used in two directions:
- `format()` renders the definition and a value into literal tokens to pass
  to another program.
- `argmatch.parser.matcher` scans a token list to find occurrences of a batch
  of definitions and extract their values.

Key Attributes:
- `kind`: `ArgKind.FLAG` or `ArgKind.OPTION`
- `name`: Canonical name, without hyphens (e.g. `verbose`, `o`)
- `aliases`: Alternative names, tried in order after `name`
- `opts`: `SyntaxOptions` selecting hyphen count and separator styles

Example:
    VERBOSE = flag("verbose", "v")
    OUTPUT = option("output", opts=SyntaxOptions.VALUE_SEP_EQUALS)

    str(OUTPUT.format("out.txt"))  # "--output=out.txt"
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace

from argmatch.exceptions import ArgumentDefinitionError, MissingValueError
from argmatch.parser.argument_kind import ArgKind
from argmatch.parser.formatted import FormattedArg
from argmatch.parser.syntax import SyntaxOptions


@dataclass(frozen=True)
class ArgumentDefinition:
    """
    Represents a named command-line argument.

    Attributes:
        kind (ArgKind): Whether the argument is a flag or carries a value.
        name (str): The canonical name, checked first when matching.
        aliases (tuple[str, ...]): Alternative names, checked in order after `name`.
        opts (SyntaxOptions): Accepted hyphen counts and value separators.
    """

    kind: ArgKind
    name: str
    aliases: tuple[str, ...] = field(default_factory=tuple)
    opts: SyntaxOptions = SyntaxOptions.NONE

    def __post_init__(self) -> None:
        if not isinstance(self.kind, ArgKind):
            try:
                object.__setattr__(self, "kind", ArgKind(self.kind))
            except ValueError as error:
                raise ArgumentDefinitionError(str(error)) from error
        if not isinstance(self.name, str) or not self.name:
            raise ArgumentDefinitionError(
                f"Argument name must be a non-empty string, got {self.name!r}"
            )
        if isinstance(self.aliases, str):
            raise ArgumentDefinitionError(
                f"Aliases for '{self.name}' must be a sequence of strings, "
                f"got the string {self.aliases!r}"
            )
        aliases = tuple(self.aliases)
        for alias in aliases:
            if not isinstance(alias, str) or not alias:
                raise ArgumentDefinitionError(
                    f"Alias for '{self.name}' must be a non-empty string, got {alias!r}"
                )
        object.__setattr__(self, "aliases", aliases)
        if not isinstance(self.opts, SyntaxOptions):
            raise ArgumentDefinitionError(
                f"opts for '{self.name}' must be SyntaxOptions, got {self.opts!r}"
            )

    @property
    def names(self) -> tuple[str, ...]:
        """The name followed by the aliases, in matching order."""
        return (self.name, *self.aliases)

    @property
    def is_flag(self) -> bool:
        return self.kind is ArgKind.FLAG

    def with_aliases(self, *aliases: str) -> ArgumentDefinition:
        """Return a copy of this definition with `aliases` replaced."""
        return replace(self, aliases=aliases)

    def with_opts(self, opts: SyntaxOptions) -> ArgumentDefinition:
        """Return a copy of this definition with `opts` replaced."""
        return replace(self, opts=opts)

    def is_name_eq(self, text: str) -> bool:
        """Check whether `text` is exactly the name or one of the aliases."""
        return text in self.names

    def prefix(self) -> str:
        """Hyphen prefix used when rendering this definition."""
        return "-" * self.opts.hyphen_count_for(self.name)

    def format(self, value: str | None = None) -> FormattedArg:
        """
        Render this definition and `value` into command-line tokens.

        Flags ignore `value` and always render as a single token. Options use
        `=` if `VALUE_SEP_EQUALS` is set, otherwise no delimiter if
        `VALUE_SEP_NO_SPACE` is set, otherwise the value becomes a second token.

        Args:
            value (str | None): The option value. Ignored for flags.

        Returns:
            FormattedArg: One or two tokens.

        Raises:
            MissingValueError: If this is an option and `value` is None.
        """
        head = f"{self.prefix()}{self.name}"
        if self.is_flag:
            return FormattedArg.one(head)

        if value is None:
            raise MissingValueError(f"Option '{self.name}' requires a value to format")
        if SyntaxOptions.VALUE_SEP_EQUALS in self.opts:
            return FormattedArg.one(f"{head}={value}")
        if SyntaxOptions.VALUE_SEP_NO_SPACE in self.opts:
            return FormattedArg.one(f"{head}{value}")
        return FormattedArg.two(head, value)

    def __str__(self) -> str:
        return f"{self.prefix()}{self.name}"


def flag(
    name: str, *aliases: str, opts: SyntaxOptions = SyntaxOptions.NONE
) -> ArgumentDefinition:
    """Create a flag definition called `name`."""
    return ArgumentDefinition(kind=ArgKind.FLAG, name=name, aliases=aliases, opts=opts)


def option(
    name: str, *aliases: str, opts: SyntaxOptions = SyntaxOptions.NONE
) -> ArgumentDefinition:
    """Create an option definition called `name`."""
    return ArgumentDefinition(kind=ArgKind.OPTION, name=name, aliases=aliases, opts=opts)
