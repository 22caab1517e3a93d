"""
Alias Scope Management.

Every top-level transform pushes a fresh `AliasScope` onto an
`AliasScopeStack` owned by the engine and pops it when done, even on error.
Rules only consult the top scope: aliases bound while rewriting one unit are
visible to every recursive rewrite of that unit and invisible to any other
unit.
"""

from contextlib import contextmanager
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Set

from solid_switcheroo.enums import EffectFlavour


@dataclass(eq=False)
class Substitution:
  """
  Identifier replacements active inside one effect callback.

  Attributes:
      start (int): First byte of the callback.
      end (int): End byte of the callback.
      names (Dict[str, str]): Original name -> materialised copy.
  """

  start: int
  end: int
  names: Dict[str, str]

  def covers(self, offset: int) -> bool:
    return self.start <= offset < self.end


@dataclass(eq=False)
class AliasScope:
  """
  Names bound to the source framework within one translation unit.
  """

  root_names: Set[str] = field(default_factory=set)
  implicit_root: Optional[str] = None
  factory_names: Set[str] = field(default_factory=set)
  effect_names: Dict[str, EffectFlavour] = field(default_factory=dict)
  substitutions: List[Substitution] = field(default_factory=list)

  def is_root(self, name: str) -> bool:
    if self.root_names:
      return name in self.root_names
    return name == self.implicit_root

  def is_factory(self, name: str) -> bool:
    return name in self.factory_names

  def effect_flavour(self, name: str) -> Optional[EffectFlavour]:
    return self.effect_names.get(name)

  def substitute(self, name: str, offset: int) -> Optional[str]:
    """
    Looks up the materialised copy for `name` at byte `offset`.

    Frames are searched innermost first.

    Args:
        name (str): The referenced identifier.
        offset (int): Byte offset of the reference.

    Returns:
        Optional[str]: The replacement name, or None.
    """
    for frame in reversed(self.substitutions):
      if frame.covers(offset) and name in frame.names:
        return frame.names[name]
    return None

  @contextmanager
  def substituting(self, frame: Substitution) -> Iterator[Substitution]:
    """Activates `frame` for the duration of the block."""
    self.substitutions.append(frame)
    try:
      yield frame
    finally:
      self.substitutions.remove(frame)


class AliasScopeStack:
  """
  Stack of per-unit alias scopes.
  """

  def __init__(self) -> None:
    self._scopes: List[AliasScope] = []

  def __len__(self) -> int:
    return len(self._scopes)

  @property
  def current(self) -> AliasScope:
    """
    The scope of the unit being transformed.

    Raises:
        LookupError: If no transform is in progress.
    """
    if not self._scopes:
      raise LookupError("No active alias scope")
    return self._scopes[-1]

  @contextmanager
  def pushed(self, root_alias: Optional[str] = None) -> Iterator[AliasScope]:
    """
    Pushes a fresh scope for one transform and pops it unconditionally.

    Args:
        root_alias (Optional[str]): Root object name assumed before imports.

    Yields:
        AliasScope: The new scope.
    """
    scope = AliasScope(implicit_root=root_alias)
    self._scopes.append(scope)
    try:
      yield scope
    finally:
      self._scopes.remove(scope)
