"""
Fine-grained reactive primitives.

A minimal signal/computation runtime with the semantics the hook layer relies
on:

*   Reading a signal inside a running computation subscribes that computation.
*   Writing a signal re-runs its subscribers synchronously (eager propagation),
    render effects before user effects, each group in subscription order.
*   Computations own whatever they create while running; re-running or
    disposing a computation disposes its children and runs its cleanups.

Ownership and the active observer are tracked in `ContextVar`s so that nested
runs restore the previous scope however they exit.
"""

import logging
from contextvars import ContextVar
from typing import Any, Callable, Dict, List, Optional, Tuple

logger = logging.getLogger(__name__)

_OWNER: ContextVar[Optional["Owner"]] = ContextVar("solid_switcheroo_owner", default=None)
_OBSERVER: ContextVar[Optional["Computation"]] = ContextVar("solid_switcheroo_observer", default=None)

_SCALARS = (int, float, complex, str, bytes, bool, type(None))


def default_equals(previous: Any, current: Any) -> bool:
  """Identity, or value equality for immutable scalars."""
  if previous is current:
    return True
  return type(previous) is type(current) and isinstance(current, _SCALARS) and previous == current


class Owner:
  """
  A disposal scope. Holds owned children, cleanup callbacks and context values.
  """

  def __init__(self, parent: Optional["Owner"] = None):
    self.parent = parent
    self.owned: List["Owner"] = []
    self.cleanups: List[Callable[[], Any]] = []
    self.contexts: Dict[int, Any] = {}
    self.disposed = False
    if parent is not None:
      parent.owned.append(self)

  def lookup(self, key: int) -> Tuple[bool, Any]:
    """Searches this owner and its ancestors for a context value."""
    owner: Optional[Owner] = self
    while owner is not None:
      if key in owner.contexts:
        return True, owner.contexts[key]
      owner = owner.parent
    return False, None

  def _clean(self) -> None:
    owned, self.owned = self.owned, []
    for child in reversed(owned):
      child.dispose()
    cleanups, self.cleanups = self.cleanups, []
    for cleanup in reversed(cleanups):
      cleanup()

  def dispose(self) -> None:
    """Disposes owned scopes and runs cleanups, newest first."""
    if self.disposed:
      return
    self._clean()
    self.disposed = True


class Computation(Owner):
  """
  A function re-run whenever a signal it read changes.
  """

  def __init__(self, fn: Callable[[Any], Any], value: Any = None, render: bool = False):
    super().__init__(_OWNER.get())
    self.fn = fn
    self.value = value
    self.render = render
    self.sources: List["Signal"] = []
    self.stale = False

  def run(self) -> None:
    if self.disposed:
      return
    self.stale = False
    self._unsubscribe()
    self._clean()
    owner_token = _OWNER.set(self)
    observer_token = _OBSERVER.set(self)
    try:
      self.value = self.fn(self.value)
    finally:
      _OBSERVER.reset(observer_token)
      _OWNER.reset(owner_token)

  def dispose(self) -> None:
    self._unsubscribe()
    super().dispose()

  def _unsubscribe(self) -> None:
    sources, self.sources = self.sources, []
    for signal in sources:
      signal.observers.pop(self, None)


class Signal:
  """
  A reactive value cell.
  """

  def __init__(self, value: Any, equals: Optional[Callable[[Any, Any], bool]] = None):
    self.value = value
    self.equals = equals or default_equals
    self.observers: Dict[Computation, None] = {}

  def read(self) -> Any:
    observer = _OBSERVER.get()
    if observer is not None and not observer.disposed and observer not in self.observers:
      self.observers[observer] = None
      observer.sources.append(self)
    return self.value

  def write(self, value: Any) -> Any:
    if self.equals(self.value, value):
      return value
    self.value = value
    if self.observers:
      _REACTOR.propagate(list(self.observers))
    return value


class _Reactor:
  """Runs stale computations until the graph settles."""

  def __init__(self) -> None:
    self.pending: List[Computation] = []
    self.flushing = False

  def propagate(self, observers: List[Computation]) -> None:
    for computation in observers:
      if not computation.stale:
        computation.stale = True
        self.pending.append(computation)
    if self.flushing:
      return

    self.flushing = True
    batch: List[Computation] = []
    try:
      while self.pending:
        batch, self.pending = self.pending, []
        batch.sort(key=lambda c: not c.render)
        for computation in batch:
          if computation.stale:
            computation.run()
    finally:
      # After a failure, computations that never ran must be schedulable again.
      for computation in batch + self.pending:
        computation.stale = False
      self.pending = []
      self.flushing = False


_REACTOR = _Reactor()


def reset_reactor() -> None:
  """Discards any in-flight propagation state."""
  global _REACTOR
  _REACTOR = _Reactor()


def create_signal(
  value: Any = None, equals: Optional[Callable[[Any, Any], bool]] = None
) -> Tuple[Callable[[], Any], Callable[[Any], Any]]:
  """
  Creates a signal.

  Args:
      value: Initial value.
      equals: Predicate deciding whether a write is a no-op.

  Returns:
      Tuple: ``(read, write)``. ``write`` stores its argument as-is.
  """
  signal = Signal(value, equals)
  return signal.read, signal.write


def create_effect(fn: Callable[[Any], Any], initial: Any = None) -> None:
  """Creates a user effect; runs now and after each change of what it read."""
  Computation(fn, initial, render=False).run()


def create_render_effect(fn: Callable[[Any], Any], initial: Any = None) -> None:
  """Creates a render effect; re-runs before user effects on every change."""
  Computation(fn, initial, render=True).run()


def create_root(fn: Callable[[Callable[[], None]], Any]) -> Any:
  """
  Runs `fn` in a new detached owner.

  Args:
      fn: Receives the root's ``dispose`` function.

  Returns:
      Whatever `fn` returns.
  """
  root = Owner()
  return run_with_owner(root, lambda: untrack(fn, root.dispose))


def run_with_owner(owner: Optional[Owner], fn: Callable[[], Any]) -> Any:
  """Runs `fn` with `owner` as the current owner."""
  token = _OWNER.set(owner)
  try:
    return fn()
  finally:
    _OWNER.reset(token)


def untrack(fn: Callable[..., Any], *args: Any) -> Any:
  """Calls `fn` without subscribing the current observer to anything it reads."""
  token = _OBSERVER.set(None)
  try:
    return fn(*args)
  finally:
    _OBSERVER.reset(token)


def on_cleanup(fn: Callable[[], Any]) -> Callable[[], Any]:
  """Registers `fn` to run when the current owner is disposed or re-run."""
  owner = _OWNER.get()
  if owner is None:
    logger.debug("on_cleanup called outside any owner; cleanup will never run")
  else:
    owner.cleanups.append(fn)
  return fn


def get_owner() -> Optional[Owner]:
  return _OWNER.get()


def get_listener() -> Optional[Computation]:
  """The computation currently tracking reads, if any."""
  return _OBSERVER.get()
