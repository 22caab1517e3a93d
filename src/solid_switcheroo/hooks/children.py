"""
`Children` utilities over a single child or a list of children.
"""

from typing import Any, Callable, List

from solid_switcheroo.errors import ChildrenError


def _as_list(children: Any) -> List[Any]:
  if isinstance(children, (list, tuple)):
    return list(children)
  return [children]


class Children:
  """
  Namespace mirroring ``React.Children``.
  """

  @staticmethod
  def map(children: Any, fn: Callable[[Any, int], Any]) -> List[Any]:
    """Maps `fn(child, index)` over children; ``None`` children pass through."""
    return [None if child is None else fn(child, index) for index, child in enumerate(_as_list(children))]

  @staticmethod
  def for_each(children: Any, fn: Callable[[Any, int], Any]) -> None:
    for index, child in enumerate(_as_list(children)):
      fn(child, index)

  @staticmethod
  def count(children: Any) -> int:
    return len(_as_list(children))

  @staticmethod
  def only(children: Any) -> Any:
    """
    Returns the single child.

    Raises:
        ChildrenError: If more than one child is given.
    """
    items = _as_list(children)
    if len(items) > 1:
      raise ChildrenError(f"Expected a single child, got {len(items)}")
    return items[0] if items else None

  @staticmethod
  def to_array(children: Any) -> List[Any]:
    return [child for child in _as_list(children) if child is not None]
