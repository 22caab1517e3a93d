"""
Runtime element construction.

`create_element` covers element calls the transform engine left alone (spread
arguments, dynamic call sites). `resolve_component` is what the component
adapter emitted by the engine resolves to: it turns whatever was passed as an
element type into something callable with props.
"""

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Optional, Tuple

Component = Callable[[Dict[str, Any]], Any]


@dataclass(frozen=True)
class Element:
  """An intrinsic (string-tagged) element description."""

  tag: str
  props: Dict[str, Any] = field(default_factory=dict)
  children: Tuple[Any, ...] = ()


def _intrinsic(tag: str) -> Component:
  def render(props: Optional[Dict[str, Any]] = None) -> Element:
    props = dict(props or {})
    children = props.pop("children", ())
    if not isinstance(children, tuple):
      children = tuple(children) if isinstance(children, list) else (children,)
    if "className" in props:
      props["class"] = props.pop("className")
    return Element(tag, props, children)

  render.__name__ = f"intrinsic_{tag}"
  return render


def resolve_component(value: Any) -> Component:
  """
  Args:
      value: Element type: tag name, component callable, a prebuilt
          `Element`, or ``None``.

  Returns:
      Callable: Accepts a props dict and renders.

  Raises:
      TypeError: For any other value.
  """
  if isinstance(value, str):
    return _intrinsic(value)
  if isinstance(value, Element):
    return lambda props=None: value
  if value is None:
    return lambda props=None: None
  if callable(value):
    return value
  raise TypeError(f"Cannot use {type(value).__name__} as a component")


def create_element(type_: Any, props: Optional[Dict[str, Any]] = None, *children: Any) -> Any:
  """
  Renders an element of `type_`.

  Args:
      type_: See `resolve_component`.
      props: Attribute mapping; ``None`` means no attributes.
      *children: Children; one child is passed unwrapped.
  """
  merged = dict(props or {})
  if len(children) == 1:
    merged["children"] = children[0]
  elif children:
    merged["children"] = list(children)
  return resolve_component(type_)(merged)
