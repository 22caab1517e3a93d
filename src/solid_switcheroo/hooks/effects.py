"""
Effect hooks.

`use_effect`, `use_layout_effect` and `use_insertion_effect` share one
primitive. A tracking computation re-evaluates when a dependency changes and
queues at most one job in the phase scheduler; the job runs the previous
cleanup and then the effect. Insertion and layout effects track through render
effects, passive ones through user effects, and the scheduler fires a batch
in insertion, layout, passive order.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional

from solid_switcheroo.enums import EffectFlavour, Phase
from solid_switcheroo.hooks.deps import track_deps
from solid_switcheroo.runtime import (
  PhaseScheduler,
  create_effect,
  create_render_effect,
  get_scheduler,
  on_cleanup,
)

logger = logging.getLogger(__name__)

EffectCallback = Callable[[], Any]


@dataclass
class _EffectSlot:
  cleanup: Optional[Callable[[], Any]] = None
  pending: bool = False
  disposed: bool = False

  def run_cleanup(self) -> None:
    cleanup, self.cleanup = self.cleanup, None
    if cleanup is not None:
      cleanup()


def use_phased_effect(
  flavour: EffectFlavour,
  effect: EffectCallback,
  deps: Optional[Iterable[Any]] = None,
  scheduler: Optional[PhaseScheduler] = None,
) -> None:
  """
  Registers `effect` in the current owner.

  Args:
      flavour: Which hook is being emulated; picks the phase.
      effect: Zero-argument callable, optionally returning a cleanup.
      deps: Dependency array. ``None`` means run once.
      scheduler: Defaults to the process scheduler.
  """
  phase = flavour.phase
  if scheduler is None:
    scheduler = get_scheduler()
  slot = _EffectSlot()
  deps = None if deps is None else list(deps)

  def fire() -> None:
    slot.pending = False
    if slot.disposed:
      return
    slot.run_cleanup()
    result = effect()
    slot.cleanup = result if callable(result) else None

  def evaluate(_: Any) -> None:
    track_deps(deps)
    if slot.pending:
      return
    slot.pending = True
    scheduler.schedule(phase, fire)

  def dispose() -> None:
    slot.disposed = True
    slot.run_cleanup()

  on_cleanup(dispose)
  logger.debug("Registering %s (%s)", flavour.value, phase.name)
  if phase is Phase.PASSIVE:
    create_effect(evaluate)
  else:
    create_render_effect(evaluate)


def use_effect(effect: EffectCallback, deps: Optional[Iterable[Any]] = None) -> None:
  use_phased_effect(EffectFlavour.EFFECT, effect, deps)


def use_layout_effect(effect: EffectCallback, deps: Optional[Iterable[Any]] = None) -> None:
  use_phased_effect(EffectFlavour.LAYOUT_EFFECT, effect, deps)


def use_insertion_effect(effect: EffectCallback, deps: Optional[Iterable[Any]] = None) -> None:
  use_phased_effect(EffectFlavour.INSERTION_EFFECT, effect, deps)
