"""
Main Entry Point for solid-switcheroo CLI.

This module handles argument parsing and dispatches to specific command
handlers defined in `solid_switcheroo.cli.commands`.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from solid_switcheroo import __version__
from solid_switcheroo.cli import commands
from solid_switcheroo.config import parse_cli_key_values
from solid_switcheroo.utils.console import configure_logging


def main(argv: Optional[List[str]] = None) -> int:
  """
  Main CLI entry point.

  Args:
      argv: Optional list of command line arguments (defaults to sys.argv).

  Returns:
      int: Exit code (0 for success, non-zero for failure).
  """
  parser = argparse.ArgumentParser(description="solid-switcheroo: React to Solid source transform")
  parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
  parser.add_argument("-v", "--verbose", action="store_true", help="Show debug logging from the engine and runtime")

  subparsers = parser.add_subparsers(dest="command", required=True)

  # --- Command: CONVERT ---
  cmd_conv = subparsers.add_parser("convert", help="Rewrite a JavaScript/JSX file or directory")
  cmd_conv.add_argument("path", type=Path, help="Input source file or directory")
  cmd_conv.add_argument("--out", type=Path, help="Output destination (file or dir)")
  cmd_conv.add_argument(
    "--json-trace", type=Path, default=None, help="Dump the execution trace (phases, rewrites) to a JSON file."
  )
  cmd_conv.add_argument(
    "--config",
    nargs="*",
    help="Configuration overrides in key=value format (e.g. root_alias=none source_modules=react,preact/compat)",
  )

  args = parser.parse_args(argv)
  configure_logging(verbose=args.verbose)

  if args.command == "convert":
    overrides = parse_cli_key_values(args.config)
    return commands.handle_convert(args.path, args.out, overrides, args.json_trace)

  return 0


if __name__ == "__main__":
  sys.exit(main())
