"""
Runtime Configuration Store.

Holds the knobs of the transform engine: which modules count as the source
framework, which names the generated code calls into, and which files the CLI
picks up. Values come from ``[tool.solid_switcheroo]`` in the nearest
``pyproject.toml`` and can be overridden programmatically or from the CLI.
"""

import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from pydantic import BaseModel, Field, field_validator

if sys.version_info >= (3, 11):
  import tomllib
else:
  try:
    import tomli as tomllib
  except ImportError:
    tomllib = None  # type: ignore

_JS_IDENTIFIER = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


class RuntimeConfig(BaseModel):
  """
  Global configuration container for the transform engine.
  """

  source_modules: List[str] = Field(
    default_factory=lambda: ["react"],
    description="Module specifiers whose imports bind the source framework aliases.",
  )
  root_alias: Optional[str] = Field(
    "React",
    description="Root object name assumed in scope before any import binds one. None disables it.",
  )
  component_adapter: str = Field(
    "__component",
    description="Function called by generated code to normalise dynamic element types.",
  )
  dependency_resolver: str = Field(
    "__resolveDep",
    description="Function called by generated code to read a dependency's cached value.",
  )
  extensions: List[str] = Field(
    default_factory=lambda: [".js", ".jsx", ".mjs"],
    description="File suffixes picked up by directory conversion.",
  )

  @field_validator("source_modules", "extensions", mode="before")
  @classmethod
  def split_single_value(cls, v: Any) -> Any:
    """Accepts a lone string (e.g. from ``--config source_modules=react``) as a one-item list."""
    if isinstance(v, str):
      return [v]
    return v

  @field_validator("component_adapter", "dependency_resolver")
  @classmethod
  def validate_identifier(cls, v: str) -> str:
    """
    Ensures generated call names are valid JavaScript identifiers.

    Args:
        v (str): The configured name.

    Returns:
        str: The stripped name.

    Raises:
        ValueError: If the name is not an identifier.
    """
    v_clean = v.strip()
    if not _JS_IDENTIFIER.match(v_clean):
      raise ValueError(f"Not a JavaScript identifier: '{v_clean}'")
    return v_clean

  @field_validator("extensions")
  @classmethod
  def normalize_extensions(cls, v: List[str]) -> List[str]:
    """Lowercases suffixes and adds the leading dot when missing."""
    return [ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in v]

  @classmethod
  def load(
    cls,
    overrides: Optional[Dict[str, Any]] = None,
    search_path: Optional[Path] = None,
  ) -> "RuntimeConfig":
    """
    Loads configuration from pyproject.toml and applies overrides on top.

    Args:
        overrides (Optional[Dict]): Explicit values (e.g. parsed CLI flags).
        search_path (Optional[Path]): Directory to start searching for TOML config.

    Returns:
        RuntimeConfig: The fully resolved configuration object.
    """
    start_dir = search_path or Path.cwd()
    toml_config, _ = _load_toml_settings(start_dir)

    merged: Dict[str, Any] = dict(toml_config)
    merged.update(overrides or {})

    return cls(**merged)


def _load_toml_settings(start_path: Path) -> Tuple[Dict[str, Any], Optional[Path]]:
  """
  Searches the directory and its parents for 'pyproject.toml' and extracts config.

  Args:
      start_path (Path): Directory to start search from.

  Returns:
      Tuple[Dict, Optional[Path]]: The config dict and the directory it was found in.
  """
  if not tomllib:
    return {}, None

  current = start_path.resolve()

  for parent in [current, *current.parents]:
    toml_path = parent / "pyproject.toml"
    if toml_path.exists() and toml_path.is_file():
      try:
        with open(toml_path, "rb") as f:
          data = tomllib.load(f)
      except (OSError, tomllib.TOMLDecodeError):
        return {}, None

      tool_section = data.get("tool", {})
      return tool_section.get("solid_switcheroo", {}), parent

  return {}, None


def parse_cli_key_values(items: Optional[List[str]]) -> Dict[str, Any]:
  """
  Parses a list of 'key=value' strings into a dictionary.

  Comma separated values become lists (e.g. ``source_modules=react,preact``)
  and ``none`` becomes None.

  Args:
      items (Optional[List[str]]): List of raw CLI strings directly from argparse.

  Returns:
      Dict[str, Any]: Parsed dictionary.
  """
  if not items:
    return {}

  config: Dict[str, Any] = {}
  for item in items:
    if "=" not in item:
      print(f"⚠️  Ignoring invalid config format: '{item}'. Expected 'key=value'.")
      continue

    key, val_str = item.split("=", 1)
    key = key.strip()
    val_str = val_str.strip()

    final_val: Any = val_str
    if val_str.lower() == "none":
      final_val = None
    elif "," in val_str:
      final_val = [part.strip() for part in val_str.split(",") if part.strip()]

    config[key] = final_val

  return config
