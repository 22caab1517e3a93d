"""
Syntax node helpers shared by the rewrite mixins.

All helpers take tree-sitter nodes of the JavaScript grammar. Node type names
differ slightly between grammar releases (``function`` became
``function_expression``), so type sets list both spellings.
"""

import re
from typing import Iterator, List, Optional

from tree_sitter import Node

INLINE_FUNCTION_TYPES = frozenset({"arrow_function", "function_expression", "function", "generator_function"})

JSX_ELEMENT_TYPES = frozenset({"jsx_element", "jsx_self_closing_element", "jsx_fragment"})

JSX_TAG_PARENTS = frozenset({"jsx_opening_element", "jsx_closing_element", "jsx_self_closing_element"})

# Expression containers holding one of these are already lazy or already a call.
STABLE_EXPRESSION_TYPES = frozenset({"identifier", "call_expression"}) | INLINE_FUNCTION_TYPES

_ATTRIBUTE_NAME = re.compile(r"^[A-Za-z_$][\w$-]*(?::[A-Za-z_$][\w$-]*)?$")


def node_text(source: bytes, node: Node) -> str:
  """Decodes the source span covered by `node`."""
  return source[node.start_byte : node.end_byte].decode("utf-8")


def string_value(source: bytes, node: Optional[Node]) -> Optional[str]:
  """
  Returns the value of a plain string literal.

  Args:
      source (bytes): The encoded unit.
      node (Optional[Node]): Candidate node.

  Returns:
      Optional[str]: The literal's content, or None when `node` is not a
      string or contains escape sequences (their JSX meaning would differ).
  """
  if node is None or node.type != "string":
    return None
  if any(child.type == "escape_sequence" for child in node.children):
    return None
  return node_text(source, node)[1:-1]


def call_arguments(node: Node) -> List[Node]:
  """Returns the argument expressions of a ``call_expression`` (comments dropped)."""
  args = node.child_by_field_name("arguments")
  if args is None or args.type != "arguments":
    return []
  return [child for child in args.named_children if child.type != "comment"]


def first_expression(node: Node) -> Optional[Node]:
  """Returns the first named, non-comment child of `node`."""
  for child in node.named_children:
    if child.type != "comment":
      return child
  return None


def is_jsx_tag_name(node: Node) -> bool:
  """True if `node` is the tag name of a JSX opening, closing or self-closing element."""
  parent = node.parent
  return parent is not None and parent.type in JSX_TAG_PARENTS


def is_attribute_name(name: str) -> bool:
  """True if `name` can be written as a JSX attribute name."""
  return bool(_ATTRIBUTE_NAME.match(name))


def binding_names(source: bytes, node: Optional[Node]) -> Iterator[str]:
  """
  Yields the names bound by a declaration target or parameter pattern.

  Default values (``x = fallback``) are references, not bindings, and are skipped.

  Args:
      source (bytes): The encoded unit.
      node (Optional[Node]): Identifier or destructuring pattern.

  Yields:
      str: Each bound name.
  """
  if node is None:
    return
  kind = node.type
  if kind in ("identifier", "shorthand_property_identifier_pattern"):
    yield node_text(source, node)
  elif kind in ("assignment_pattern", "object_assignment_pattern"):
    yield from binding_names(source, node.child_by_field_name("left"))
  elif kind == "pair_pattern":
    yield from binding_names(source, node.child_by_field_name("value"))
  elif kind in ("object_pattern", "array_pattern", "rest_pattern", "formal_parameters"):
    for child in node.named_children:
      yield from binding_names(source, child)
