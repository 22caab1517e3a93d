"""
Write-coalescing signal.

Several writes in one synchronous task collapse into a single signal write on
the next microtask. Until then, reads see the pending value.
"""

import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional, Tuple

from solid_switcheroo.hooks.deps import Trackable
from solid_switcheroo.runtime import MicrotaskQueue, create_signal, get_microtask_queue, untrack

logger = logging.getLogger(__name__)


@dataclass
class PendingWrite:
  dirty: bool = False
  cache: Any = None


class CoalescedSignal(Trackable):
  """
  Read side of a coalescing signal.
  """

  def __init__(self, read: Callable[[], Any], cell: PendingWrite):
    self.read = read
    self.cell = cell

  def invoke(self) -> Any:
    value = self.read()
    if self.cell.dirty:
      return self.cell.cache
    return value


def create_coalescing_signal(
  value: Any = None, queue: Optional[MicrotaskQueue] = None
) -> Tuple[CoalescedSignal, Callable[[Any], Any]]:
  """
  Creates a signal whose writes are batched per task.

  Args:
      value: Initial value.
      queue: Microtask queue for the commit; defaults to the process queue.

  Returns:
      Tuple: ``(signal, set_value)``. ``set_value`` accepts a value or an
      updater called with the latest pending value, and returns the new
      pending value.
  """
  read, write = create_signal(value)
  cell = PendingWrite()
  if queue is None:
    queue = get_microtask_queue()

  def commit() -> None:
    pending = cell.cache
    cell.dirty = False
    cell.cache = None
    logger.debug("Committing coalesced write: %r", pending)
    write(pending)

  def set_value(next_value: Any) -> Any:
    if not cell.dirty:
      cell.cache = untrack(read)
      cell.dirty = True
      queue.schedule(commit)
    cell.cache = next_value(cell.cache) if callable(next_value) else next_value
    return cell.cache

  return CoalescedSignal(read, cell), set_value
