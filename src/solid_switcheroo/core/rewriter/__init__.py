"""
Rewriter Package.

This package provides the `JsxRewriter` class, composed of several mixins
to handle specific aspects of the source transformation:
- Imports: Binding local aliases to the source framework.
- Calls: Classifying tree-construction and effect-hook calls.
- Elements: ``createElement`` -> JSX literal.
- Effects: Materialising effect callback dependencies.
- Expressions: Deferring dynamic JSX expression containers.
"""

from solid_switcheroo.core.rewriter.base import BaseRewriter
from solid_switcheroo.core.rewriter.calls import CallMixin
from solid_switcheroo.core.rewriter.effects import EffectMixin
from solid_switcheroo.core.rewriter.elements import ElementMixin
from solid_switcheroo.core.rewriter.expressions import JsxExpressionMixin
from solid_switcheroo.core.rewriter.imports import ImportMixin
from solid_switcheroo.core.rewriter.scopes import AliasScope, AliasScopeStack


class JsxRewriter(
  ImportMixin,
  CallMixin,
  ElementMixin,
  EffectMixin,
  JsxExpressionMixin,
  BaseRewriter,
):
  """
  The main source transformer for solid-switcheroo.

  Inherits traversal and emission from `BaseRewriter` and one group of
  ``rewrite_<node_type>`` hooks from each mixin. This class is the entry point
  for the `TransformEngine`.
  """

  pass


__all__ = ["AliasScope", "AliasScopeStack", "JsxRewriter"]
