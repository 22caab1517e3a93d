"""
CLI Command Handlers Facade.

Re-exports handlers from `solid_switcheroo.cli.handlers` so that the
dispatcher and tests have one import location.
"""

from solid_switcheroo.cli.handlers.convert import (
  handle_convert,
  _convert_single_file,
  _print_batch_summary,
)

__all__ = [
  "_convert_single_file",
  "_print_batch_summary",
  "handle_convert",
]
