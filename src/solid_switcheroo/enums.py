"""
Enumerations for solid-switcheroo.

Shared by the transform engine (which hook flavour an alias names) and the
runtime scheduler (in which phase an effect job fires).
"""

from enum import Enum, IntEnum


class Phase(IntEnum):
  """
  Effect firing phases. Lower values fire first within one scheduler batch.
  """

  INSERTION = 1
  LAYOUT = 2
  PASSIVE = 3


class EffectFlavour(str, Enum):
  """
  Effect hooks recognised by the transform engine, keyed by their exported name.
  """

  EFFECT = "useEffect"
  LAYOUT_EFFECT = "useLayoutEffect"
  INSERTION_EFFECT = "useInsertionEffect"

  @property
  def phase(self) -> Phase:
    """The scheduler phase the flavour maps to."""
    return _FLAVOUR_PHASES[self]


_FLAVOUR_PHASES = {
  EffectFlavour.EFFECT: Phase.PASSIVE,
  EffectFlavour.LAYOUT_EFFECT: Phase.LAYOUT,
  EffectFlavour.INSERTION_EFFECT: Phase.INSERTION,
}
