"""
Command-line output.

Everything the CLI reports goes through the ``solid_switcheroo`` logger tree,
rendered by a rich `RichHandler` onto one swappable Console:

*   ``solid_switcheroo.cli`` carries the user-facing status lines
    (`log_info`, `log_success`, ...), which may contain rich markup.
*   The engine and runtime modules log to their own children of the package
    logger at DEBUG level (rewrite counts, coalesced commits, drained
    microtasks). `configure_logging` with ``verbose=True`` shows them.

Only the package logger is configured; the root logger is left to the host
application.

Attributes:
    console (_ConsoleProxy): Stable reference to the active rich Console.
"""

import logging
from typing import Any

from rich.console import Console
from rich.logging import RichHandler
from rich.theme import Theme

PACKAGE_LOGGER = "solid_switcheroo"

SUCCESS_LEVEL_NUM = 25
logging.addLevelName(SUCCESS_LEVEL_NUM, "SUCCESS")

_THEME = Theme({"logging.level.success": "green", "path": "bold blue"})

_cli_logger = logging.getLogger(f"{PACKAGE_LOGGER}.cli")


class _ConsoleProxy:
  """
  Forwards to the active Console.

  The batch summary table and the package log handler both write here, so
  `set_console` redirects all CLI output at once.
  """

  def __init__(self) -> None:
    self._backend = Console(theme=_THEME)

  @property
  def backend(self) -> Console:
    return self._backend

  def use(self, backend: Console) -> None:
    self._backend = backend
    _attach_handler(backend)

  def __getattr__(self, name: str) -> Any:
    return getattr(self._backend, name)


def _attach_handler(backend: Console) -> None:
  package_logger = logging.getLogger(PACKAGE_LOGGER)
  for handler in list(package_logger.handlers):
    if isinstance(handler, RichHandler):
      package_logger.removeHandler(handler)

  # Markup is opt-in per record: debug records format arbitrary reprs.
  package_logger.addHandler(
    RichHandler(
      console=backend,
      show_time=False,
      show_path=False,
      markup=False,
      rich_tracebacks=True,
    )
  )
  package_logger.propagate = False


def configure_logging(verbose: bool = False) -> None:
  """
  Routes the package logger to the active console.

  Args:
      verbose (bool): Also show DEBUG records from the engine and runtime.
  """
  logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if verbose else logging.INFO)
  _attach_handler(console.backend)


console = _ConsoleProxy()
configure_logging()


def set_console(new_console: Console) -> None:
  """
  Sends CLI output (log lines and tables) to `new_console`.

  Args:
      new_console (Console): e.g. a recording Console in tests.
  """
  console.use(new_console)


def reset_console() -> None:
  """Back to a fresh stdout console at INFO level."""
  console.use(Console(theme=_THEME))
  logging.getLogger(PACKAGE_LOGGER).setLevel(logging.INFO)


def log_info(msg: str) -> None:
  """
  Args:
      msg (str): Message text; may include rich markup such as ``[path]``.
  """
  _cli_logger.info(f"ℹ️  {msg}", extra={"markup": True})


def log_success(msg: str) -> None:
  """Reports a completed step at the SUCCESS level (25)."""
  _cli_logger.log(SUCCESS_LEVEL_NUM, f"✅ {msg}", extra={"markup": True})


def log_warning(msg: str) -> None:
  _cli_logger.warning(f"⚠️  {msg}", extra={"markup": True})


def log_error(msg: str) -> None:
  _cli_logger.error(f"❌ {msg}", extra={"markup": True})
