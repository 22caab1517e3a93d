"""
Pytest Configuration and Fixtures.

Includes:
- Syspath patching for local imports.
- Runtime isolation so queued microtasks and effect jobs never leak between tests.
- A recording console for asserting on CLI output.
"""

import sys
from pathlib import Path

import pytest
from rich.console import Console

# Add src to path so we can import 'solid_switcheroo' without installing it
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))

from solid_switcheroo.core import TransformEngine
from solid_switcheroo.runtime import get_microtask_queue, reset_runtime
from solid_switcheroo.utils.console import reset_console, set_console


@pytest.fixture(autouse=True)
def isolate_runtime():
  """Gives every test a fresh microtask queue and effect scheduler."""
  reset_runtime()
  yield
  reset_runtime()


@pytest.fixture
def flush():
  """Drains the process microtask queue (what the event loop would do next)."""
  return lambda: get_microtask_queue().drain()


@pytest.fixture
def engine():
  return TransformEngine()


@pytest.fixture
def recorded_console():
  """Routes console output into a recording Console for the duration of a test."""
  console = Console(record=True, width=200, color_system=None)
  set_console(console)
  yield console
  reset_console()
