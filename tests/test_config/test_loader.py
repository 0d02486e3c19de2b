from pathlib import Path

import pytest

from argmatch.config import RawArgument, convert_arguments, loader
from argmatch.exceptions import ArgumentDefinitionError
from argmatch.parser import ArgKind, SyntaxOptions, flag, option, parse

YAML_CONFIG = """
arguments:
  - kind: flag
    name: verbose
    aliases: [v]
  - kind: option
    name: output
    aliases: [o]
    syntax: [equals, next]
  - kind: option
    name: j
    syntax: no_space
"""

TOML_CONFIG = """
[[arguments]]
kind = "flag"
name = "force"

[[arguments]]
kind = "option"
name = "define"
aliases = ["D"]
syntax = ["single", "no-space"]
"""


def test_load_yaml(tmp_path: Path):
    config = tmp_path / "args.yaml"
    config.write_text(YAML_CONFIG, encoding="UTF-8")

    definitions = loader(config)

    assert definitions == [
        flag("verbose", "v"),
        option(
            "output",
            "o",
            opts=SyntaxOptions.VALUE_SEP_EQUALS | SyntaxOptions.VALUE_SEP_NEXT_ARG,
        ),
        option("j", opts=SyntaxOptions.VALUE_SEP_NO_SPACE),
    ]


def test_load_toml(tmp_path: Path):
    config = tmp_path / "args.toml"
    config.write_text(TOML_CONFIG, encoding="UTF-8")

    definitions = loader(str(config))

    assert definitions == [
        flag("force"),
        option(
            "define",
            "D",
            opts=SyntaxOptions.SINGLE_HYPHEN | SyntaxOptions.VALUE_SEP_NO_SPACE,
        ),
    ]


def test_loaded_definitions_parse(tmp_path: Path):
    config = tmp_path / "args.yml"
    config.write_text(YAML_CONFIG, encoding="UTF-8")
    verbose, output, jobs = loader(config)

    tokens = ["-v", "-o", "out", "-j8"]
    results = parse(tokens, [verbose, output, jobs])
    assert [result.value for result in results] == [None, "out", "8"]
    assert tokens == []


def test_missing_file(tmp_path: Path):
    with pytest.raises(FileNotFoundError):
        loader(tmp_path / "missing.yaml")


def test_unsupported_suffix(tmp_path: Path):
    config = tmp_path / "args.json"
    config.write_text("{}", encoding="UTF-8")
    with pytest.raises(ValueError, match="Unsupported config format"):
        loader(config)


def test_bad_path_type():
    with pytest.raises(TypeError):
        loader(42)


@pytest.mark.parametrize("content", ["- a\n- b\n", "arguments: nope\n", "other: []\n", ""])
def test_wrong_shape(tmp_path: Path, content: str):
    config = tmp_path / "args.yaml"
    config.write_text(content, encoding="UTF-8")
    with pytest.raises(ValueError, match="list of arguments"):
        loader(config)


@pytest.mark.parametrize(
    "entry,message",
    [
        ({"kind": "positional", "name": "x"}, "Invalid argument #0"),
        ({"kind": "flag", "name": ""}, "Invalid argument #0"),
        ({"kind": "flag"}, "Invalid argument #0"),
        ({"kind": "option", "name": "x", "syntax": ["triple"]}, "Invalid argument #0"),
        ({"kind": "option", "name": "x", "syntax": 3}, "Invalid argument #0"),
    ],
)
def test_invalid_entries(entry, message):
    with pytest.raises(ArgumentDefinitionError, match=message):
        convert_arguments([entry])


def test_entry_not_a_mapping():
    with pytest.raises(ArgumentDefinitionError, match="must be a mapping"):
        convert_arguments(["verbose"])


def test_raw_argument_defaults():
    raw = RawArgument(kind="switch", name="quiet")
    assert raw.kind is ArgKind.FLAG
    assert raw.aliases == []
    assert raw.syntax == []
    assert raw.opts == SyntaxOptions.NONE
    assert raw.to_definition() == flag("quiet")
