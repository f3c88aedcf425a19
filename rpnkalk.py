#!/usr/bin/env python3
"""
rpnkalk - Infix Calculator

Main entry point for the rpnkalk calculator application.
This file serves as a thin wrapper that delegates all functionality
to the rpnkalk_pkg package.

Usage:
    python rpnkalk.py                    # Interactive REPL
    python rpnkalk.py -e "2+2"           # Evaluate expression
    python rpnkalk.py --help             # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for rpnkalk.

    Delegates all functionality to the rpnkalk_pkg.cli module,
    which handles argument parsing, expression evaluation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    from rpnkalk_pkg.cli import main_entry

    try:
        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1


if __name__ == "__main__":
    sys.exit(main())
