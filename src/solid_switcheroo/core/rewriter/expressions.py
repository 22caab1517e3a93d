"""
JSX Expression Container Logic.

The target runtime re-renders by re-invoking thunks, so an expression written
inline in JSX must not be evaluated eagerly. Containers whose expression is
not already an identifier, inline function or call are wrapped in an
immediately-invoked function, which the target compiler treats as dynamic:

.. code-block:: javascript

    <p>{count + 1}</p>         ->  <p>{(function(){return count + 1})()}</p>
    <p style={{color: c}}>     ->  <p style={{color: c}}>
    <p style={{color: a || b}}> -> <p style={{color: (function(){return a || b})()}}>
"""

from typing import TYPE_CHECKING, Optional

from tree_sitter import Node

from solid_switcheroo.core.edits import EditList
from solid_switcheroo.core.rewriter.nodes import STABLE_EXPRESSION_TYPES, first_expression

if TYPE_CHECKING:
  from solid_switcheroo.core.rewriter import JsxRewriter


class JsxExpressionMixin:
  """
  Mixin deferring dynamic JSX expressions to render time.
  """

  def rewrite_jsx_expression(self: "JsxRewriter", node: Node) -> Optional[str]:
    expression = first_expression(node)
    if expression is None or expression.type == "spread_element":
      return None
    if expression.type in STABLE_EXPRESSION_TYPES:
      return None
    if expression.type == "object":
      return f"{{{self._render_object_fields(expression)}}}"
    return f"{{{self.deferred(expression)}}}"

  def deferred(self: "JsxRewriter", expression: Node) -> str:
    """Renders `expression`, wrapped in an IIFE unless it is already stable."""
    rendered = self.emit(expression)
    if expression.type in STABLE_EXPRESSION_TYPES:
      return rendered
    return f"(function(){{return {rendered}}})()"

  def _render_object_fields(self: "JsxRewriter", obj: Node) -> str:
    edits = EditList()
    for child in obj.children:
      if child.type != "pair":
        self.collect(child, edits)
        continue
      value = child.child_by_field_name("value")
      for part in child.children:
        if value is not None and part.id == value.id:
          edits.replace(part, self.deferred(part))
        else:
          self.collect(part, edits)
    return edits.apply(self.source, obj.start_byte, obj.end_byte)
