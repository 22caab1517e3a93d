"""
State hooks: `use_state` and `use_reducer`.
"""

from typing import Any, Callable, Optional, Tuple

from solid_switcheroo.hooks.deps import Trackable
from solid_switcheroo.hooks.patch import CoalescedSignal, create_coalescing_signal


class StateValue(Trackable):
  """
  The value half of `use_state`.

  Calling it (or `get`) reads the current value and subscribes the running
  computation; a write still waiting for its microtask is visible here.
  """

  def __init__(self, source: CoalescedSignal):
    self._source = source

  def invoke(self) -> Any:
    return self._source.invoke()

  get = invoke

  @property
  def signal(self) -> Callable[[], Any]:
    """The underlying signal getter, without the pending-write overlay."""
    return self._source.read

  def value_of(self) -> Any:
    return self.get()

  def to_json(self) -> Any:
    return self.get()

  def __getattr__(self, name: str) -> Any:
    # Read-through to the current value, e.g. ``user.name`` or ``items.count(x)``.
    if name.startswith("_"):
      raise AttributeError(name)
    return getattr(self.get(), name)

  def __getitem__(self, key: Any) -> Any:
    return self.get()[key]

  def __repr__(self) -> str:
    return f"StateValue({self.peek()!r})"


def use_state(initial: Any = None) -> Tuple[StateValue, Callable[[Any], Any]]:
  """
  Args:
      initial: Initial value, or a zero-argument callable producing it.

  Returns:
      Tuple: ``(state, set_state)``.
  """
  if callable(initial):
    initial = initial()
  source, set_value = create_coalescing_signal(initial)
  return StateValue(source), set_value


def use_reducer(
  reducer: Callable[..., Any], initial_arg: Any, init: Optional[Callable[[Any], Any]] = None
) -> Tuple[StateValue, Callable[..., Any]]:
  """
  Args:
      reducer: ``reducer(state, *action) -> new_state``.
      initial_arg: Initial state, or the argument passed to `init`.
      init: Optional lazy initializer.

  Returns:
      Tuple: ``(state, dispatch)``.
  """
  initial = init(initial_arg) if init is not None else initial_arg
  source, set_value = create_coalescing_signal(initial)

  def dispatch(*action: Any) -> Any:
    return set_value(lambda current: reducer(current, *action))

  return StateValue(source), dispatch
