"""
Target runtime primitives.

The hook layer only talks to the runtime through the names exported here.
"""

from solid_switcheroo.runtime.context import Context, create_context, use_context
from solid_switcheroo.runtime.microtasks import (
  MicrotaskQueue,
  PhaseScheduler,
  get_microtask_queue,
  get_scheduler,
  reset_scheduling,
)
from solid_switcheroo.runtime.reactive import (
  Computation,
  Owner,
  Signal,
  create_effect,
  create_render_effect,
  create_root,
  create_signal,
  get_listener,
  get_owner,
  on_cleanup,
  reset_reactor,
  run_with_owner,
  untrack,
)


def reset_runtime() -> None:
  """Drops all pending microtasks, effect jobs and propagation state."""
  reset_scheduling()
  reset_reactor()


__all__ = [
  "Computation",
  "Context",
  "MicrotaskQueue",
  "Owner",
  "PhaseScheduler",
  "Signal",
  "create_context",
  "create_effect",
  "create_render_effect",
  "create_root",
  "create_signal",
  "get_listener",
  "get_microtask_queue",
  "get_owner",
  "get_scheduler",
  "on_cleanup",
  "reset_runtime",
  "run_with_owner",
  "untrack",
]
