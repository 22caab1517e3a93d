"""
Textual pre-pass run before parsing.

A translation unit that *is* an anonymous function (``function () {...}`` as a
statement) is not valid JavaScript. The pre-pass gives the first such function
a throw-away name so the grammar accepts it. The rewriter erases the name
again by position, so generated code can never be mistaken for it.
"""

import re
from dataclasses import dataclass
from typing import Optional, Tuple

from solid_switcheroo.core.naming import unique_name

_ANONYMOUS_FUNCTION = re.compile(r"\bfunction(\s*)\(")

PLACEHOLDER_BASE = "___"


@dataclass(frozen=True)
class Placeholder:
  """A fragment inserted by the pre-pass: a space plus the generated name."""

  offset: int
  text: str

  def byte_span(self, prepared: str) -> Tuple[int, int]:
    """
    Locates the fragment in the encoded prepared text.

    Args:
        prepared (str): Text returned by `name_anonymous_function`.

    Returns:
        Tuple[int, int]: ``[start, end)`` byte offsets.
    """
    start = len(prepared[: self.offset].encode("utf-8"))
    return start, start + len(self.text.encode("utf-8"))


def name_anonymous_function(source: str) -> Tuple[str, Optional[Placeholder]]:
  """
  Inserts a unique identifier into the first anonymous ``function`` literal.

  Args:
      source (str): The raw translation unit.

  Returns:
      Tuple[str, Optional[Placeholder]]: The (possibly) modified text and the
      inserted fragment, or None when nothing was inserted.
  """
  match = _ANONYMOUS_FUNCTION.search(source)
  if not match:
    return source, None

  name = unique_name(PLACEHOLDER_BASE, source)
  paren = match.end() - 1
  placeholder = Placeholder(paren, f" {name}")
  return f"{source[:paren]}{placeholder.text}{source[paren:]}", placeholder
