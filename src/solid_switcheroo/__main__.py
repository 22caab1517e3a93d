"""
Entry point for module execution (``python -m solid_switcheroo``).

This module delegates execution to the CLI handler in ``solid_switcheroo.cli.__main__``.
"""

import sys
from solid_switcheroo.cli.__main__ import main

if __name__ == "__main__":
  sys.exit(main())
