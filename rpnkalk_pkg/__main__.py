"""Main entry point for running rpnkalk_pkg as a module.

This allows running rpnkalk with:
    python -m rpnkalk_pkg
    python -m rpnkalk_pkg --health-check
    python -m rpnkalk_pkg -e "2+2"

This is equivalent to running:
    python -m rpnkalk_pkg.cli
    python rpnkalk.py
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
