"""
Memoisation hooks: `use_memo` and `use_callback`.
"""

from typing import Any, Callable, Iterable, List, Optional, Sequence

from solid_switcheroo.hooks.deps import VALIDATE, Trackable, track_deps
from solid_switcheroo.runtime import create_render_effect, untrack


class Memo(Trackable):
  """
  Cached result of a factory, refreshed whenever a dependency changes.
  """

  def __init__(self, deps: Optional[Iterable[Any]]):
    self._deps: List[Any] = list(deps or ())
    self._value: Any = None

  def invoke(self) -> Any:
    track_deps(self._deps)
    return self._value

  def peek(self) -> Any:
    return self._value

  def deps(self) -> Sequence[Any]:
    return self._deps

  def store(self, value: Any) -> None:
    self._value = value

  def __repr__(self) -> str:
    return f"{type(self).__name__}({self._value!r})"


class MemoCallback(Memo):
  """
  Memoised callback. Called with arguments, forwards them to the callback.
  """

  def __call__(self, *args: Any, **kwargs: Any) -> Any:
    if not args and not kwargs:
      return self.invoke()
    if len(args) == 1 and args[0] is VALIDATE and not kwargs:
      return self.peek()
    return self._value(*args, **kwargs)


def _memoize(memo: Memo, factory: Callable[[], Any]) -> Memo:
  def refresh(_: Any) -> None:
    track_deps(memo.deps())
    memo.store(untrack(factory))

  create_render_effect(refresh)
  return memo


def use_memo(factory: Callable[[], Any], deps: Optional[Iterable[Any]] = None) -> Memo:
  """
  Args:
      factory: Zero-argument callable; its reads are not tracked.
      deps: Dependency array.

  Returns:
      Memo: Wrapper whose call returns the cached value.
  """
  return _memoize(Memo(deps), factory)


def use_callback(callback: Callable[..., Any], deps: Optional[Iterable[Any]] = None) -> MemoCallback:
  return _memoize(MemoCallback(deps), lambda: callback)
