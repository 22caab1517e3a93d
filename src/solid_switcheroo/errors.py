"""
Exception hierarchy for solid-switcheroo.

Parse failures are fatal for the translation unit that produced them. Edit
overlaps indicate a bug in a rewrite rule. Children errors are raised by the
hook layer's `Children.only`.
"""

from typing import Optional


class SwitcherooError(Exception):
  """Base class for all errors raised by this package."""


class JsParseError(SwitcherooError, ValueError):
  """
  Raised when the JavaScript/JSX source cannot be parsed.

  Attributes:
      line (int): 1-based line of the first offending node.
      column (int): 1-based column of the first offending node.
  """

  def __init__(self, message: str, line: Optional[int] = None, column: Optional[int] = None):
    self.line = line
    self.column = column
    if line is not None:
      message = f"{message} (line {line}, column {column})"
    super().__init__(message)


class EditOverlapError(SwitcherooError, RuntimeError):
  """Raised when two text edits claim overlapping source spans."""


class ChildrenError(SwitcherooError, ValueError):
  """Raised by `Children.only` when more than one child is supplied."""
