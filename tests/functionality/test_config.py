"""
Tests for RuntimeConfig validation and CLI key=value parsing.
"""

import pytest
from pydantic import ValidationError

from solid_switcheroo.config import RuntimeConfig, parse_cli_key_values


def test_defaults():
  config = RuntimeConfig()
  assert config.source_modules == ["react"]
  assert config.root_alias == "React"
  assert config.component_adapter == "__component"
  assert config.dependency_resolver == "__resolveDep"
  assert config.extensions == [".js", ".jsx", ".mjs"]


def test_generated_names_must_be_identifiers():
  with pytest.raises(ValidationError):
    RuntimeConfig(component_adapter="not valid")
  with pytest.raises(ValidationError):
    RuntimeConfig(dependency_resolver="1st")

  assert RuntimeConfig(dependency_resolver=" $peek ").dependency_resolver == "$peek"


def test_parse_cli_key_values():
  parsed = parse_cli_key_values(["root_alias=none", "source_modules=react, preact/compat", "component_adapter=wrap"])
  assert parsed == {
    "root_alias": None,
    "source_modules": ["react", "preact/compat"],
    "component_adapter": "wrap",
  }


def test_parse_cli_skips_malformed_items(capsys):
  assert parse_cli_key_values(["novalue"]) == {}
  assert "Ignoring invalid config format" in capsys.readouterr().out
  assert parse_cli_key_values(None) == {}


def test_single_value_list_fields():
  config = RuntimeConfig(**parse_cli_key_values(["source_modules=preact", "extensions=jsx"]))
  assert config.source_modules == ["preact"]
  assert config.extensions == [".jsx"]
