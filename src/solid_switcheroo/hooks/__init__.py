"""
React hook emulation on top of the reactive runtime.

Hooks run once per component instance; dependency arrays become explicit
subscriptions via `track_deps`.
"""

from solid_switcheroo.hooks.children import Children
from solid_switcheroo.hooks.context import HookContext, create_context, use_context
from solid_switcheroo.hooks.deps import (
  VALIDATE,
  PlainValue,
  Trackable,
  as_dependency,
  resolve_dependency,
  track_deps,
)
from solid_switcheroo.hooks.effects import use_effect, use_insertion_effect, use_layout_effect, use_phased_effect
from solid_switcheroo.hooks.elements import Element, create_element, resolve_component
from solid_switcheroo.hooks.memo import Memo, MemoCallback, use_callback, use_memo
from solid_switcheroo.hooks.patch import CoalescedSignal, PendingWrite, create_coalescing_signal
from solid_switcheroo.hooks.refs import Ref, use_ref
from solid_switcheroo.hooks.state import StateValue, use_reducer, use_state

__all__ = [
  "VALIDATE",
  "Children",
  "CoalescedSignal",
  "Element",
  "HookContext",
  "Memo",
  "MemoCallback",
  "PendingWrite",
  "PlainValue",
  "Ref",
  "StateValue",
  "Trackable",
  "as_dependency",
  "create_coalescing_signal",
  "create_context",
  "create_element",
  "resolve_component",
  "resolve_dependency",
  "track_deps",
  "use_callback",
  "use_context",
  "use_effect",
  "use_insertion_effect",
  "use_layout_effect",
  "use_memo",
  "use_phased_effect",
  "use_reducer",
  "use_ref",
  "use_state",
]
