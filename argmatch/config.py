# Argmatch — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Configuration loader for argument definitions.

A config file declares a batch of definitions under an `arguments` key:

    arguments:
      - kind: flag
        name: verbose
        aliases: [v]
      - kind: option
        name: output
        aliases: [o]
        syntax: [equals, next]

The same structure is accepted in TOML as an array of `[[arguments]]` tables.
"""
from __future__ import annotations

from pathlib import Path
from typing import Any

import toml
import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

from argmatch.exceptions import ArgumentDefinitionError
from argmatch.logger import logger
from argmatch.parser.argument import ArgumentDefinition
from argmatch.parser.argument_kind import ArgKind
from argmatch.parser.syntax import SyntaxOptions


class RawArgument(BaseModel):
    """Raw argument model for argmatch configuration."""

    kind: ArgKind
    name: str = Field(min_length=1)
    aliases: list[str] = Field(default_factory=list)
    syntax: list[str] = Field(default_factory=list)

    @field_validator("kind", mode="before")
    @classmethod
    def validate_kind(cls, value: Any) -> ArgKind:
        return ArgKind(value)

    @field_validator("syntax", mode="before")
    @classmethod
    def validate_syntax(cls, value: Any) -> list[str]:
        if isinstance(value, str):
            value = [value]
        if not isinstance(value, (list, tuple)):
            raise ValueError("syntax must be a list of facet names.")
        SyntaxOptions.from_names(value)
        return list(value)

    @property
    def opts(self) -> SyntaxOptions:
        return SyntaxOptions.from_names(self.syntax)

    def to_definition(self) -> ArgumentDefinition:
        return ArgumentDefinition(
            kind=self.kind,
            name=self.name,
            aliases=tuple(self.aliases),
            opts=self.opts,
        )


def convert_arguments(raw_arguments: list[dict[str, Any]]) -> list[ArgumentDefinition]:
    """
    Validate raw argument entries and build definitions from them.

    Raises:
        ArgumentDefinitionError: If an entry is not a mapping or fails validation.
    """
    definitions = []
    for position, entry in enumerate(raw_arguments):
        if not isinstance(entry, dict):
            raise ArgumentDefinitionError(
                f"Argument #{position} must be a mapping, got {type(entry).__name__}"
            )
        try:
            raw_argument = RawArgument(**entry)
        except ValidationError as error:
            raise ArgumentDefinitionError(
                f"Invalid argument #{position} ({entry.get('name', '?')}): {error}"
            ) from error
        definitions.append(raw_argument.to_definition())
    return definitions


def loader(file_path: Path | str) -> list[ArgumentDefinition]:
    """
    Load argument definitions from a YAML or TOML file.

    Args:
        file_path (Path | str): Path to the config file.

    Returns:
        list[ArgumentDefinition]: The definitions, in file order.

    Raises:
        FileNotFoundError: If the file does not exist.
        ValueError: If the format is unsupported or the content has the wrong shape.
        ArgumentDefinitionError: If an argument entry is invalid.
    """
    if isinstance(file_path, (str, Path)):
        path = Path(file_path)
    else:
        raise TypeError("file_path must be a string or Path object.")

    if not path.is_file():
        raise FileNotFoundError(f"No such config file: {file_path}")

    suffix = path.suffix
    with path.open("r", encoding="UTF-8") as config_file:
        if suffix in (".yaml", ".yml"):
            raw_config = yaml.safe_load(config_file)
        elif suffix == ".toml":
            raw_config = toml.load(config_file)
        else:
            raise ValueError(f"Unsupported config format: {suffix}")

    if not isinstance(raw_config, dict) or not isinstance(
        raw_config.get("arguments"), list
    ):
        raise ValueError(
            "Configuration file must contain a dictionary with a list of arguments.\n"
            "Example:\n"
            "arguments:\n"
            "  - kind: 'option'\n"
            "    name: 'output'\n"
            "    syntax: ['equals']"
        )

    definitions = convert_arguments(raw_config["arguments"])
    logger.debug("Loaded %d argument definitions from %s", len(definitions), path)
    return definitions
