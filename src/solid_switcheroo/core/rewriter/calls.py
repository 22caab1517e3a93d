"""
Call Classification Logic.

A call belongs to the source framework when its callee is either a tracked
alias (``h(...)``, ``useEffect(...)``) or a member of the root object
(``React.createElement(...)``). Classified calls are handed to the element or
effect rewrite; every other call is left alone and its arguments are visited
as usual.
"""

from typing import TYPE_CHECKING, Optional

from tree_sitter import Node

from solid_switcheroo.core.rewriter.imports import FACTORY_EXPORT
from solid_switcheroo.enums import EffectFlavour

if TYPE_CHECKING:
  from solid_switcheroo.core.rewriter import JsxRewriter


class CallMixin:
  """
  Mixin dispatching ``call_expression`` nodes.
  """

  def rewrite_call_expression(self: "JsxRewriter", node: Node) -> Optional[str]:
    if self.is_element_call(node):
      return self.rewrite_element(node)

    flavour = self.effect_flavour(node)
    if flavour is not None:
      return self.rewrite_effect(node, flavour)

    return None

  def is_element_call(self: "JsxRewriter", node: Node) -> bool:
    """True if `node` is a tree-construction call."""
    callee = node.child_by_field_name("function")
    if callee is None:
      return False
    if callee.type == "identifier":
      return self.scope.is_factory(self.text(callee))
    return self._root_member(callee) == FACTORY_EXPORT

  def effect_flavour(self: "JsxRewriter", node: Node) -> Optional[EffectFlavour]:
    """Returns the effect hook a call invokes, or None."""
    callee = node.child_by_field_name("function")
    if callee is None:
      return None
    if callee.type == "identifier":
      return self.scope.effect_flavour(self.text(callee))

    member = self._root_member(callee)
    if member is None:
      return None
    try:
      return EffectFlavour(member)
    except ValueError:
      return None

  def _root_member(self: "JsxRewriter", callee: Node) -> Optional[str]:
    """Returns ``prop`` for a ``<root>.prop`` callee, otherwise None."""
    if callee.type != "member_expression":
      return None
    obj = callee.child_by_field_name("object")
    prop = callee.child_by_field_name("property")
    if obj is None or prop is None or obj.type != "identifier":
      return None
    if not self.scope.is_root(self.text(obj)):
      return None
    return self.text(prop)
