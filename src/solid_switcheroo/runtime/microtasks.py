"""
Microtask queue and phase-ordered effect scheduler.

The microtask queue is the only suspension point of the runtime. Callbacks
run in FIFO order, untracked, either when a running asyncio loop gets to them
(``loop.call_soon``) or when `MicrotaskQueue.drain` is called explicitly.

`PhaseScheduler` sits on top: jobs scheduled in the same synchronous pass land
in one batch, flushed by a single microtask in `Phase` order (insertion,
layout, passive) and, within a phase, in scheduling order.
"""

import asyncio
import itertools
import logging
from collections import deque
from typing import Callable, Deque, List, Optional, Tuple

from solid_switcheroo.enums import Phase
from solid_switcheroo.runtime.reactive import untrack

logger = logging.getLogger(__name__)

Task = Callable[[], object]


class MicrotaskQueue:
  """
  FIFO of deferred callbacks.
  """

  def __init__(self) -> None:
    self._tasks: Deque[Task] = deque()
    self._draining = False
    self._loop_drain_pending = False

  def __len__(self) -> int:
    return len(self._tasks)

  def schedule(self, task: Task) -> None:
    """
    Appends `task` and requests a drain from the running event loop, if any.

    Args:
        task: Zero-argument callable.
    """
    self._tasks.append(task)
    self._request_loop_drain()

  def _request_loop_drain(self) -> None:
    if self._loop_drain_pending:
      return
    try:
      loop = asyncio.get_running_loop()
    except RuntimeError:
      return
    self._loop_drain_pending = True
    loop.call_soon(self._drain_from_loop)

  def _drain_from_loop(self) -> None:
    self._loop_drain_pending = False
    self.drain()

  def drain(self) -> int:
    """
    Runs queued tasks, including ones they schedule, until the queue is empty.

    Re-entrant calls return immediately; the outer drain picks their work up.
    If a task raises, the error propagates and the remaining tasks stay
    queued; under a running event loop another drain is requested for them.

    Returns:
        int: Number of tasks run.
    """
    if self._draining:
      return 0
    self._draining = True
    ran = 0
    try:
      while self._tasks:
        task = self._tasks.popleft()
        untrack(task)
        ran += 1
    finally:
      self._draining = False
      if self._tasks:
        self._request_loop_drain()
    if ran:
      logger.debug("Drained %d microtasks", ran)
    return ran

  async def settle(self) -> None:
    """Yields to the event loop until no microtask is left."""
    while self._tasks or self._loop_drain_pending:
      self.drain()
      await asyncio.sleep(0)


class PhaseScheduler:
  """
  Batches effect jobs and runs each batch in phase order on one microtask.
  """

  def __init__(self, queue: MicrotaskQueue) -> None:
    self._queue = queue
    self._jobs: List[Tuple[Phase, int, Task]] = []
    self._sequence = itertools.count()
    self._flush_pending = False

  def __len__(self) -> int:
    return len(self._jobs)

  def schedule(self, phase: Phase, job: Task) -> None:
    """
    Adds `job` to the current batch.

    Args:
        phase: When in the batch the job fires.
        job: Zero-argument callable.
    """
    self._jobs.append((phase, next(self._sequence), job))
    if not self._flush_pending:
      self._flush_pending = True
      self._queue.schedule(self._flush)

  def _flush(self) -> None:
    self._flush_pending = False
    batch = sorted(self._jobs, key=lambda entry: (entry[0], entry[1]))
    self._jobs = []
    for index, (_, _, job) in enumerate(batch):
      try:
        job()
      except Exception:
        # Keep the rest of the batch for the next flush, then surface the error.
        self._jobs = batch[index + 1 :] + self._jobs
        if self._jobs and not self._flush_pending:
          self._flush_pending = True
          self._queue.schedule(self._flush)
        raise


_QUEUE: Optional[MicrotaskQueue] = None
_SCHEDULER: Optional[PhaseScheduler] = None


def get_microtask_queue() -> MicrotaskQueue:
  global _QUEUE
  if _QUEUE is None:
    _QUEUE = MicrotaskQueue()
  return _QUEUE


def get_scheduler() -> PhaseScheduler:
  global _SCHEDULER
  if _SCHEDULER is None:
    _SCHEDULER = PhaseScheduler(get_microtask_queue())
  return _SCHEDULER


def reset_scheduling() -> None:
  """Replaces the process-wide queue and scheduler with fresh ones."""
  global _QUEUE, _SCHEDULER
  _QUEUE = MicrotaskQueue()
  _SCHEDULER = PhaseScheduler(_QUEUE)
