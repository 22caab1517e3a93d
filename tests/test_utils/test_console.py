"""
Tests for CLI console output and package logging.
"""

import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from solid_switcheroo.utils.console import (
  configure_logging,
  console,
  log_error,
  log_info,
  log_success,
  log_warning,
  reset_console,
  set_console,
)


@pytest.fixture(autouse=True)
def cleanup_console():
  reset_console()
  yield
  reset_console()


def test_injected_console_captures_every_level():
  capture = Console(record=True, width=120)
  set_console(capture)

  log_info("info line")
  log_success("success line")
  log_warning("warning line")
  log_error("error line")

  output = capture.export_text()
  for fragment in ("ℹ️  info line", "✅ success line", "⚠️  warning line", "❌ error line"):
    assert fragment in output
  assert "SUCCESS" in output


def test_status_lines_render_markup():
  capture = Console(record=True, width=120)
  set_console(capture)

  log_success("Converted: [path]a.js[/path]")
  assert "Converted: a.js" in capture.export_text()


def test_debug_records_need_verbose():
  capture = Console(record=True, width=120)
  set_console(capture)
  engine_logger = logging.getLogger("solid_switcheroo.core.engine")

  engine_logger.debug("quiet detail")
  assert "quiet detail" not in capture.export_text()

  configure_logging(verbose=True)
  engine_logger.debug("Committing coalesced write: %r", ["[/x]"])
  assert "Committing coalesced write: ['[/x]']" in capture.export_text()


def test_root_logger_is_left_alone():
  set_console(Console(record=True))
  assert not any(isinstance(h, RichHandler) for h in logging.getLogger().handlers)
  assert logging.getLogger("solid_switcheroo").propagate is False


def test_reset_creates_fresh_backend():
  temp = Console()
  set_console(temp)
  assert console.backend is temp

  reset_console()
  assert console.backend is not temp


def test_proxy_forwards_to_backend():
  capture = Console(record=True)
  set_console(capture)

  console.print("[bold]direct[/bold]")
  assert console.export_text() == "direct\n"
  assert console.width == capture.width
