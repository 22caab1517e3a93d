"""
Context hooks.

`HookContext` wraps a runtime context and adds the provider and consumer
components of the React API.
"""

from typing import Any, Callable, Union

from solid_switcheroo import runtime


class HookContext:
  """
  A context object with ``Provider`` and ``Consumer`` components.
  """

  def __init__(self, default_value: Any = None):
    self.context = runtime.create_context(default_value)

  @property
  def default_value(self) -> Any:
    return self.context.default_value

  def Provider(self, value: Any = None, children: Any = None) -> Any:
    """
    Renders `children` with this context set to `value`.

    Args:
        value: Provided value.
        children: A render callable, or an already-built value returned as-is.
    """
    render = children if callable(children) else (lambda: children)
    return self.context.provide(value, render)

  def Consumer(self, children: Callable[[Any], Any]) -> Any:
    """Calls the render-prop `children` with the current context value."""
    return children(runtime.use_context(self.context))

  def __repr__(self) -> str:
    return f"HookContext(default={self.default_value!r})"


def create_context(default_value: Any = None) -> HookContext:
  return HookContext(default_value)


def use_context(context: Union[HookContext, runtime.Context]) -> Any:
  if isinstance(context, HookContext):
    context = context.context
  return runtime.use_context(context)
