"""
Element Rewriting Logic.

Turns ``createElement(type, props, ...children)`` into a JSX literal:

*   ``createElement("div", {className: "a"}, "hi")`` -> ``<div class="a">hi</div>``
*   ``createElement(Foo)`` -> ``<Foo />``
*   ``createElement(cond ? A : B, null, x)`` ->
    ``(function(){var TempCls=__component(cond ? A : B);return <TempCls>{x}</TempCls>})()``

The bound form is used whenever the type is not a string literal or a
capitalised identifier, since JSX can only name components with a bare
identifier and would read a lowercase one as native markup.
"""

from typing import TYPE_CHECKING, List, Optional

from tree_sitter import Node

from solid_switcheroo.core.naming import unique_name
from solid_switcheroo.core.rewriter.nodes import (
  JSX_ELEMENT_TYPES,
  call_arguments,
  is_attribute_name,
  string_value,
)

if TYPE_CHECKING:
  from solid_switcheroo.core.rewriter import JsxRewriter

TEMP_TAG_BASE = "TempCls"

_EMPTY_PROPS = frozenset({"null", "undefined"})
_JSX_TEXT_SPECIALS = frozenset("{}<>&\r\n")


class ElementMixin:
  """
  Mixin rewriting tree-construction calls into JSX.
  """

  def rewrite_element(self: "JsxRewriter", node: Node) -> Optional[str]:
    args = call_arguments(node)
    if not args or any(arg.type == "spread_element" for arg in args[:2]):
      return None

    type_node = args[0]
    props_node = args[1] if len(args) > 1 else None
    attrs = self.render_props(props_node)
    children = "".join(self._render_child(child) for child in args[2:])

    tag = self._static_tag(type_node)
    if tag is not None:
      if children:
        return f"<{tag}{attrs}>{children}</{tag}>"
      return f"<{tag}{attrs} />"

    adapter = self.config.component_adapter
    type_text = self.emit(type_node)
    temp = unique_name(TEMP_TAG_BASE, type_text, attrs, children, reserved=[adapter])
    return f"(function(){{var {temp}={adapter}({type_text});return <{temp}{attrs}>{children}</{temp}>}})()"

  def _static_tag(self: "JsxRewriter", type_node: Node) -> Optional[str]:
    """Returns a tag JSX can spell directly, or None when the bound form is needed."""
    value = string_value(self.source, type_node)
    if value is not None:
      return value if is_attribute_name(value) else None
    if type_node.type == "identifier":
      name = self.emit(type_node)
      if not name[:1].islower():
        return name
    return None

  def render_props(self: "JsxRewriter", node: Optional[Node]) -> str:
    """
    Renders a props argument as JSX attributes.

    Args:
        node: The second ``createElement`` argument, if any.

    Returns:
        str: Attributes, each preceded by a space (empty when there are none).
    """
    if node is None or node.type in _EMPTY_PROPS or self.text(node) == "undefined":
      return ""
    if node.type != "object":
      return f" {{...{self.emit(node)}}}"

    attrs: List[str] = []
    for prop in node.named_children:
      if prop.type == "comment":
        continue
      attrs.append(self._render_property(prop))
    return "".join(f" {attr}" for attr in attrs)

  def _render_property(self: "JsxRewriter", prop: Node) -> str:
    if prop.type == "spread_element":
      return f"{{{self.emit(prop)}}}"

    if prop.type == "shorthand_property_identifier":
      name = self.text(prop)
      value = self.scope.substitute(name, prop.start_byte) or name
      if is_attribute_name(name):
        return f"{_attribute_key(name)}={{{value}}}"

    if prop.type == "pair":
      key = self._property_key(prop.child_by_field_name("key"))
      value = prop.child_by_field_name("value")
      if key is not None and value is not None:
        if string_value(self.source, value) is not None:
          return f"{key}={self.emit(value)}"
        return f"{key}={{{self.emit(value)}}}"

    # Computed keys, numeric keys and methods survive as an object spread.
    return f"{{...{{{self.emit(prop)}}}}}"

  def _property_key(self: "JsxRewriter", key: Optional[Node]) -> Optional[str]:
    if key is None:
      return None
    if key.type == "property_identifier":
      name = self.text(key)
    else:
      name = string_value(self.source, key)
    if name is None or not is_attribute_name(name):
      return None
    return _attribute_key(name)

  def _render_child(self: "JsxRewriter", child: Node) -> str:
    if child.type in JSX_ELEMENT_TYPES:
      return self.emit(child)

    if child.type == "spread_element":
      argument = child.named_children[0] if child.named_children else None
      inner = self.emit(argument) if argument is not None else ""
      return f"{{{inner}}}"

    value = string_value(self.source, child)
    if value is not None:
      value = self.emit(child)[1:-1]
    if value and value == value.strip() and not (set(value) & _JSX_TEXT_SPECIALS):
      return value

    rendered = self.emit(child)
    if child.type == "call_expression" and self.is_element_call(child) and rendered.startswith("<"):
      return rendered
    return f"{{{rendered}}}"


def _attribute_key(name: str) -> str:
  return "class" if name == "className" else name
