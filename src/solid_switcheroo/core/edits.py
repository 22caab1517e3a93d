"""
Span-based text editing.

Rewrites never mutate the syntax tree. Each rule records ``(start, end,
text)`` replacements against byte offsets of the original buffer, and
`EditList.apply` splices them in one pass with a monotonically advancing
cursor, so no source region is emitted twice.
"""

from dataclasses import dataclass
from typing import List

from tree_sitter import Node

from solid_switcheroo.errors import EditOverlapError


@dataclass(frozen=True)
class Edit:
  start: int
  end: int
  text: str


class EditList:
  """
  Ordered collection of non-overlapping replacements.
  """

  def __init__(self) -> None:
    self._edits: List[Edit] = []

  def __len__(self) -> int:
    return len(self._edits)

  def replace(self, node: Node, text: str) -> None:
    """Replaces the full span of `node`."""
    self._edits.append(Edit(node.start_byte, node.end_byte, text))

  def replace_span(self, start: int, end: int, text: str) -> None:
    """Replaces the byte range ``[start, end)``."""
    self._edits.append(Edit(start, end, text))

  def insert(self, offset: int, text: str) -> None:
    """Inserts `text` at `offset` without consuming source."""
    self._edits.append(Edit(offset, offset, text))

  def apply(self, source: bytes, start: int = 0, end: int = -1) -> str:
    """
    Renders ``source[start:end]`` with every edit spliced in.

    Args:
        source (bytes): The original UTF-8 buffer.
        start (int): First byte of the rendered window.
        end (int): End of the window (-1 for the end of the buffer).

    Returns:
        str: The decoded window with replacements applied.

    Raises:
        EditOverlapError: If two edits overlap or an edit leaves the window.
    """
    if end < 0:
      end = len(source)

    # Stable: insertions recorded at the same offset keep their order.
    ordered = sorted(self._edits, key=lambda e: (e.start, e.end))
    parts: List[str] = []
    cursor = start
    for edit in ordered:
      if edit.start < cursor or edit.end > end:
        raise EditOverlapError(f"Edit [{edit.start}, {edit.end}) overlaps emitted text ending at {cursor}")
      parts.append(source[cursor : edit.start].decode("utf-8"))
      parts.append(edit.text)
      cursor = edit.end
    parts.append(source[cursor:end].decode("utf-8"))
    return "".join(parts)
