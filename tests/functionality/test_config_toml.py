"""
Tests for Config Persistence (TOML).

Verifies that:
1. RuntimeConfig.load() picks up [tool.solid_switcheroo] from pyproject.toml.
2. Explicit overrides win over TOML settings.
3. File traversal finds toml in parent directories.
"""

import pytest
from solid_switcheroo.config import RuntimeConfig


@pytest.fixture
def toml_file(tmp_path):
  """Creates a dummy pyproject.toml in the temp dir."""
  fpath = tmp_path / "pyproject.toml"
  content = """
[tool.solid_switcheroo]
source_modules = ["react", "preact/compat"]
root_alias = "Preact"
extensions = ["jsx", ".TSX"]
"""
  fpath.write_text(content, encoding="utf-8")
  return fpath


def test_load_defaults_from_toml(tmp_path, toml_file):
  config = RuntimeConfig.load(search_path=tmp_path)

  assert config.source_modules == ["react", "preact/compat"]
  assert config.root_alias == "Preact"
  assert config.extensions == [".jsx", ".tsx"]
  assert config.component_adapter == "__component"


def test_overrides_win(tmp_path, toml_file):
  config = RuntimeConfig.load(overrides={"root_alias": None}, search_path=tmp_path)

  assert config.root_alias is None
  assert config.source_modules == ["react", "preact/compat"]


def test_toml_found_in_parent_directory(tmp_path, toml_file):
  nested = tmp_path / "src" / "components"
  nested.mkdir(parents=True)

  config = RuntimeConfig.load(search_path=nested)
  assert config.root_alias == "Preact"


def test_missing_toml_uses_defaults(tmp_path):
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.source_modules == ["react"]
  assert config.root_alias == "React"


def test_malformed_toml_is_ignored(tmp_path):
  (tmp_path / "pyproject.toml").write_text("[tool.solid_switcheroo\nbroken", encoding="utf-8")
  config = RuntimeConfig.load(search_path=tmp_path)
  assert config.root_alias == "React"
