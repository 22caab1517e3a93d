"""
Tests for the effect hook family.

Verifies:
1. Effects fire on the next microtask, insertion -> layout -> passive.
2. Dependency changes re-fire the effect once per batch, after the previous cleanup.
3. Disposing the owner runs the last cleanup and cancels pending jobs.
"""

from solid_switcheroo.enums import EffectFlavour
from solid_switcheroo.hooks import (
  use_effect,
  use_insertion_effect,
  use_layout_effect,
  use_phased_effect,
  use_state,
)
from solid_switcheroo.runtime import MicrotaskQueue, PhaseScheduler, create_root, get_scheduler


def test_firing_order_is_insertion_layout_passive(flush):
  order = []

  def component(_dispose):
    use_effect(lambda: order.append("passive"))
    use_insertion_effect(lambda: order.append("insertion"))
    use_layout_effect(lambda: order.append("layout"))

  create_root(component)
  assert order == []

  flush()
  assert order == ["insertion", "layout", "passive"]


def test_effect_without_deps_runs_once(flush):
  count, set_count = use_state(0)
  runs = []
  create_root(lambda _d: use_effect(lambda: runs.append(count())))
  flush()

  set_count(1)
  flush()
  assert runs == [0]


def test_dependency_change_refires_after_cleanup(flush):
  count, set_count = use_state(0)
  log = []

  def effect():
    value = count.peek()
    log.append(f"effect {value}")
    return lambda: log.append(f"cleanup {value}")

  create_root(lambda _d: use_effect(effect, [count]))
  flush()
  set_count(1)
  flush()

  assert log == ["effect 0", "cleanup 0", "effect 1"]


def test_one_job_per_batch(flush):
  a, set_a = use_state(0)
  b, set_b = use_state(0)
  runs = []

  create_root(lambda _d: use_layout_effect(lambda: runs.append((a.peek(), b.peek())), [a, b]))
  flush()

  set_a(1)
  set_b(2)
  flush()
  assert runs == [(0, 0), (1, 2)]


def test_dispose_runs_cleanup_and_cancels_pending(flush):
  count, set_count = use_state(0)
  log = []

  def effect():
    log.append("effect")
    return lambda: log.append("cleanup")

  dispose = create_root(lambda d: (use_effect(effect, [count]), d)[1])
  flush()

  set_count(1)
  dispose()
  flush()
  assert log == ["effect", "cleanup"]


def test_non_callable_return_is_not_a_cleanup(flush):
  count, set_count = use_state(0)
  runs = []

  def effect():
    runs.append(count.peek())
    return "not a cleanup"

  create_root(lambda _d: use_effect(effect, [count]))
  flush()
  set_count(1)
  flush()
  assert runs == [0, 1]


def test_explicit_scheduler():
  queue = MicrotaskQueue()
  scheduler = PhaseScheduler(queue)
  fired = []

  create_root(lambda _d: use_phased_effect(EffectFlavour.INSERTION_EFFECT, lambda: fired.append(1), scheduler=scheduler))
  assert len(scheduler) == 1
  assert len(get_scheduler()) == 0
  queue.drain()
  assert fired == [1]
