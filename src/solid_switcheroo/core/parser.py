"""
JavaScript/JSX parsing via tree-sitter.

Wraps the tree-sitter JavaScript grammar (which includes JSX) and turns
recoverable tree-sitter errors into a fatal `JsParseError`: the engine never
rewrites a partially understood unit.
"""

import logging
from typing import Iterator, Optional

from tree_sitter import Node, Tree
from tree_sitter_language_pack import get_parser

from solid_switcheroo.errors import JsParseError

logger = logging.getLogger(__name__)

LANGUAGE_NAME = "javascript"


class JsParser:
  """
  Thin wrapper over a tree-sitter `Parser` bound to the JavaScript grammar.
  """

  def __init__(self) -> None:
    self._parser = get_parser(LANGUAGE_NAME)

  def parse(self, source: bytes) -> Tree:
    """
    Parses UTF-8 encoded source into a syntax tree.

    Args:
        source (bytes): The encoded translation unit.

    Returns:
        Tree: The tree-sitter tree.

    Raises:
        JsParseError: If the tree contains ERROR or MISSING nodes.
    """
    tree = self._parser.parse(source)
    root = tree.root_node
    if root.has_error:
      bad = _first_error(root)
      if bad is None:
        raise JsParseError("Malformed JavaScript source")
      row, col = bad.start_point
      kind = f"missing {bad.type}" if bad.is_missing else "unexpected input"
      logger.debug("Parse failure at byte %d: %s", bad.start_byte, kind)
      raise JsParseError(f"Malformed JavaScript source: {kind}", line=row + 1, column=col + 1)
    return tree


def _first_error(node: Node) -> Optional[Node]:
  for candidate in walk(node):
    if candidate.type == "ERROR" or candidate.is_missing:
      return candidate
  return None


def walk(node: Node) -> Iterator[Node]:
  """
  Yields `node` and all descendants in source (pre-)order.

  Args:
      node (Node): Root of the walk.

  Yields:
      Node: Each node, parents before children.
  """
  stack = [node]
  while stack:
    current = stack.pop()
    yield current
    stack.extend(reversed(current.children))


_PARSER: Optional[JsParser] = None


def get_js_parser() -> JsParser:
  """Returns the process-wide parser, creating it on first use."""
  global _PARSER
  if _PARSER is None:
    _PARSER = JsParser()
  return _PARSER
