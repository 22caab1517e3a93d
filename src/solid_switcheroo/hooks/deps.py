"""
Dependency entries and dependency tracking.

A dependency-array entry is either a `PlainValue` (never tracked) or a
`Trackable` produced by a hook. Tracking a list invokes each trackable once
inside the caller's reactive scope and follows the trackable's own recorded
dependencies, so a memo listed as a dependency subscribes the caller to
everything the memo depends on.
"""

import abc
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Any, Iterable, Optional, Sequence, Set, Union

from solid_switcheroo.runtime import untrack


class _Validate:
  """Sentinel type; see `VALIDATE`."""

  def __repr__(self) -> str:
    return "VALIDATE"


VALIDATE = _Validate()
"""Passing this to a `Trackable` reads it without subscribing."""


class Trackable(abc.ABC):
  """
  A hook-produced value that can be tracked as a dependency.
  """

  @abc.abstractmethod
  def invoke(self) -> Any:
    """Reads the value, subscribing the current computation."""

  def peek(self) -> Any:
    """Reads the value without subscribing."""
    return untrack(self.invoke)

  def deps(self) -> Sequence[Any]:
    """Dependencies recorded when the wrapper was created."""
    return ()

  def __call__(self, *args: Any) -> Any:
    if len(args) == 1 and args[0] is VALIDATE:
      return self.peek()
    return self.invoke()


@dataclass(frozen=True)
class PlainValue:
  """A dependency entry with no reactive source."""

  value: Any


Dependency = Union[PlainValue, Trackable]

_ACTIVE_PASS: ContextVar[Optional[Set[int]]] = ContextVar("solid_switcheroo_track_pass", default=None)


def as_dependency(entry: Any) -> Dependency:
  if isinstance(entry, (Trackable, PlainValue)):
    return entry
  return PlainValue(entry)


def track_deps(deps: Optional[Iterable[Any]]) -> None:
  """
  Subscribes the current computation to every trackable in `deps`.

  Each trackable is invoked at most once per outermost call, however many
  paths lead to it. Nested calls made by the trackables themselves join the
  outer pass.

  Args:
      deps: Dependency-array entries. ``None`` tracks nothing.
  """
  if deps is None:
    return
  seen = _ACTIVE_PASS.get()
  if seen is not None:
    _track(deps, seen)
    return
  token = _ACTIVE_PASS.set(set())
  try:
    _track(deps, _ACTIVE_PASS.get())
  finally:
    _ACTIVE_PASS.reset(token)


def _track(deps: Iterable[Any], seen: Set[int]) -> None:
  for entry in deps:
    dep = as_dependency(entry)
    if isinstance(dep, PlainValue) or id(dep) in seen:
      continue
    seen.add(id(dep))
    dep.invoke()
    _track(dep.deps(), seen)


def resolve_dependency(value: Any) -> Any:
  """Current value of a dependency captured into an effect body."""
  dep = as_dependency(value)
  if isinstance(dep, PlainValue):
    return dep.value
  return dep.peek()
