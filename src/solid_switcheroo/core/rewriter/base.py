"""
Base Rewriter Implementation.

This module provides the ``BaseRewriter`` class, the foundation of the
``JsxRewriter``. It handles:

1.  **Traversal**: Visiting the syntax tree in source order and dispatching to
    ``rewrite_<node_type>`` handlers provided by the mixins.
2.  **Cursor Discipline**: A node replaced by a handler is never descended
    into, so nested matches are only handled by the rule that owns them.
3.  **Emission**: Rendering any node's span with the replacements recorded
    beneath it (``emit``), which the mixins use to recurse into
    sub-expressions.
"""

import logging
from typing import Optional, Tuple

from tree_sitter import Node

from solid_switcheroo.config import RuntimeConfig
from solid_switcheroo.core.edits import EditList
from solid_switcheroo.core.rewriter.nodes import node_text
from solid_switcheroo.core.rewriter.scopes import AliasScope
from solid_switcheroo.core.tracer import TraceLogger

logger = logging.getLogger(__name__)


class BaseRewriter:
  """
  Source-order traversal with per-node-type rewrite hooks.

  A mixin opts into a node type by defining ``rewrite_<type>(node)``. The hook
  returns the replacement text for the node's full span, or None to leave the
  node alone and continue into its children.
  """

  def __init__(
    self,
    source: bytes,
    scope: AliasScope,
    config: RuntimeConfig,
    tracer: Optional[TraceLogger] = None,
    placeholder: Optional[Tuple[int, int]] = None,
  ):
    """
    Initializes the rewriter.

    Args:
        source: The encoded translation unit the tree was parsed from.
        scope: The alias scope of the unit being transformed.
        config: The runtime configuration object.
        tracer: Optional trace logger receiving mutation events.
        placeholder: Byte span of the pre-pass function name, erased on emit.
    """
    self.source = source
    self.scope = scope
    self.config = config
    self.tracer = tracer or TraceLogger()
    self.rewrites = 0
    self.placeholder = placeholder

  def text(self, node: Node) -> str:
    """Original source text of `node`."""
    return node_text(self.source, node)

  def rewrite(self, node: Node) -> Optional[str]:
    """Dispatches to the ``rewrite_<type>`` hook for `node`, if any."""
    handler = getattr(self, f"rewrite_{node.type}", None)
    if handler is None:
      return None
    return handler(node)

  def collect(self, node: Node, edits: EditList) -> None:
    """
    Records the replacements for `node` and its descendants into `edits`.

    Args:
        node: The subtree root.
        edits: Edit buffer for the enclosing render window.
    """
    if self._erase_placeholder(node, edits):
      return

    replacement = self.rewrite(node)
    if replacement is not None:
      edits.replace(node, replacement)
      self.rewrites += 1
      self.tracer.log_mutation(node.type, self.text(node), replacement)
      return

    for child in node.children:
      self.collect(child, edits)

  def _erase_placeholder(self, node: Node, edits: EditList) -> bool:
    # The fragment lives inside exactly one leaf: the function name, or a
    # string, template or comment token when the pre-pass matched inside one.
    if self.placeholder is None or node.child_count:
      return False
    start, end = self.placeholder
    if node.start_byte >= end or node.end_byte <= start:
      return False
    edits.replace_span(start, end, "")
    return True

  def collect_children(self, node: Node, edits: EditList) -> None:
    """Like `collect`, but never applies a rewrite to `node` itself."""
    for child in node.children:
      self.collect(child, edits)

  def emit(self, node: Node) -> str:
    """
    Renders `node` with every applicable rewrite, including on itself.

    Args:
        node: The node to render.

    Returns:
        str: The transformed text of the node's span.
    """
    edits = EditList()
    self.collect(node, edits)
    return edits.apply(self.source, node.start_byte, node.end_byte)

  def transform_tree(self, root: Node) -> str:
    """
    Renders the whole unit.

    Args:
        root: The ``program`` node.

    Returns:
        str: The rewritten translation unit.
    """
    edits = EditList()
    self.collect_children(root, edits)
    logger.debug("Applying %d top-level edits", len(edits))
    return edits.apply(self.source, 0, len(self.source))
