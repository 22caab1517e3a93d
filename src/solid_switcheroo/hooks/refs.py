"""
`use_ref`.
"""

from typing import Any


class Ref:
  """Mutable box. Calling it assigns `current`, so it doubles as an attach callback."""

  __slots__ = ("current",)

  def __init__(self, current: Any = None):
    self.current = current

  def __call__(self, value: Any) -> None:
    self.current = value

  def __repr__(self) -> str:
    return f"Ref({self.current!r})"


def use_ref(initial: Any = None) -> Ref:
  return Ref(initial)
