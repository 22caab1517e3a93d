"""
Import Tracking Logic.

Binds local names imported from the source framework to their role:

*   ``import React from "react"`` / ``import * as React from "react"`` /
    ``import { default as React } from "react"`` -> root object.
*   ``import { createElement as h } from "react"`` -> tree-construction factory.
*   ``import { useEffect, useLayoutEffect as ule } from "react"`` -> effect hooks.

Import statements themselves are emitted unchanged.
"""

from typing import TYPE_CHECKING, Optional

from tree_sitter import Node

from solid_switcheroo.core.rewriter.nodes import node_text, string_value
from solid_switcheroo.enums import EffectFlavour

if TYPE_CHECKING:
  from solid_switcheroo.core.rewriter import JsxRewriter

FACTORY_EXPORT = "createElement"

_EFFECT_EXPORTS = {flavour.value: flavour for flavour in EffectFlavour}


class ImportMixin:
  """
  Mixin populating the alias scope from import declarations.
  """

  def rewrite_import_statement(self: "JsxRewriter", node: Node) -> Optional[str]:
    module = string_value(self.source, node.child_by_field_name("source"))
    if module is None or module not in self.config.source_modules:
      return None

    for clause in node.named_children:
      if clause.type != "import_clause":
        continue
      for binding in clause.named_children:
        if binding.type == "identifier":
          self._bind_root(self.text(binding))
        elif binding.type == "namespace_import":
          for name in binding.named_children:
            if name.type == "identifier":
              self._bind_root(self.text(name))
        elif binding.type == "named_imports":
          for specifier in binding.named_children:
            if specifier.type == "import_specifier":
              self._bind_specifier(specifier)

    return None

  def _bind_specifier(self: "JsxRewriter", specifier: Node) -> None:
    imported = specifier.child_by_field_name("name")
    alias = specifier.child_by_field_name("alias")
    if imported is None:
      return

    imported_name = _export_name(self.source, imported)
    local_name = self.text(alias) if alias is not None else imported_name

    if imported_name == "default":
      self._bind_root(local_name)
    elif imported_name == FACTORY_EXPORT:
      self.scope.factory_names.add(local_name)
      self.tracer.log_alias(local_name, "factory")
    elif imported_name in _EFFECT_EXPORTS:
      self.scope.effect_names[local_name] = _EFFECT_EXPORTS[imported_name]
      self.tracer.log_alias(local_name, imported_name)

  def _bind_root(self: "JsxRewriter", name: str) -> None:
    self.scope.root_names.add(name)
    self.tracer.log_alias(name, "root")


def _export_name(source: bytes, node: Node) -> str:
  # ``import { "default" as X }`` spells the export as a string.
  value = string_value(source, node)
  return value if value is not None else node_text(source, node)
