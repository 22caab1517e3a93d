"""
Context primitive.

A context value is stored on an owner and found by walking up the owner
chain; `use_context` falls back to the context's default.
"""

import itertools
from typing import Any, Callable

from solid_switcheroo.runtime.reactive import Owner, get_owner, run_with_owner

_IDS = itertools.count(1)


class Context:
  """
  Identity plus default value of one context.
  """

  def __init__(self, default_value: Any = None):
    self.id = next(_IDS)
    self.default_value = default_value

  def provide(self, value: Any, render: Callable[[], Any]) -> Any:
    """
    Calls `render` in a child owner where this context resolves to `value`.

    Args:
        value: The provided value.
        render: Produces the subtree.

    Returns:
        What `render` returns.
    """
    owner = Owner(get_owner())
    owner.contexts[self.id] = value
    return run_with_owner(owner, render)

  def __repr__(self) -> str:
    return f"Context(id={self.id}, default={self.default_value!r})"


def create_context(default_value: Any = None) -> Context:
  return Context(default_value)


def use_context(context: Context) -> Any:
  """Returns the nearest provided value of `context`, or its default."""
  owner = get_owner()
  if owner is not None:
    found, value = owner.lookup(context.id)
    if found:
      return value
  return context.default_value
