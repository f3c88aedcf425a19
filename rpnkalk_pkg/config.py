"""Centralized configuration for rpnkalk.

This module defines:
- Input validation limits (length)
- Display settings for results and history
- Tokenizer behaviour (lenient or strict)
- The operator precedence table and token regex

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with RPNKALK_)
"""

import os
import re
from types import MappingProxyType

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("rpnkalk")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Input validation limits
MAX_INPUT_LENGTH = int(os.getenv("RPNKALK_MAX_INPUT_LENGTH", "10000"))  # characters

# Decimal places used for "Result:" lines and history entries
DISPLAY_PRECISION = max(0, int(os.getenv("RPNKALK_DISPLAY_PRECISION", "2")))

# Report unrecognized characters instead of silently dropping them
STRICT_TOKENS = os.getenv("RPNKALK_STRICT_TOKENS", "false").lower() == "true"

# Clear the terminal before printing help or history
CLEAR_SCREEN = os.getenv("RPNKALK_CLEAR_SCREEN", "true").lower() == "true"

# Binary operators and their precedence rank; all are left-associative
PRECEDENCE = MappingProxyType({"+": 1, "-": 1, "*": 2, "/": 2})

TOKEN_REGEX = re.compile(
    r"(?P<number>\d+(?:\.\d+)?)"
    r"|(?P<operator>[+\-*/])"
    r"|(?P<lparen>\()"
    r"|(?P<rparen>\))"
    r"|(?P<unknown>[^\s\d+\-*/()]+)",
    re.ASCII,
)

REPL_COMMANDS = {
    "help": "help",
    "h": "help",
    "exit": "exit",
    "quit": "exit",
    "q": "exit",
    "show": "show",
    "s": "show",
}
