from __future__ import annotations

import argparse
import json
import math
import os
import subprocess
import sys
from enum import Enum

import sympy as sp

from . import config
from .api import evaluate_expression
from .config import REPL_COMMANDS, VERSION
from .history import History, format_value
from .logging_config import get_logger, setup_logging
from .types import EvalResult

logger = get_logger("cli")

HEALTH_CHECK_SAMPLES = (
    "2+3*4",
    "(2+3)*4",
    "10-3-2",
    "20/4/5",
    "1.5+2.25",
    "((7))",
    "100/8*(3-1.5)",
)


class CommandAction(Enum):
    """What the REPL should do after a line has been checked for commands."""

    NO_ACTION = 0
    CONTINUE = 1
    BREAK = 2


def _health_check() -> int:
    """Evaluate sample expressions and compare them with SymPy.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_passed = 0
    checks_failed = 0

    print("Running rpnkalk health check...")
    print("-" * 50)
    print(f"[OK] SymPy {sp.__version__} available as reference")

    for expr in HEALTH_CHECK_SAMPLES:
        res = evaluate_expression(expr, strict=True)
        expected = float(sp.sympify(expr))
        if res.ok and math.isclose(res.value, expected, rel_tol=1e-12):
            print(f"[OK] {expr} = {res.value!r}")
            checks_passed += 1
        else:
            print(f"[FAIL] {expr}: expected {expected!r}, got {res!r}")
            checks_failed += 1

    res = evaluate_expression("1/0")
    if res.failed_with("DIVISION_BY_ZERO"):
        print("[OK] Division by zero is reported")
        checks_passed += 1
    else:
        print(f"[FAIL] Division by zero not reported: {res!r}")
        checks_failed += 1

    print("-" * 50)
    print(f"Results: {checks_passed} passed, {checks_failed} failed")

    if checks_failed > 0:
        print("\n[WARN] Some health checks failed.")
        return 1

    print("\n[OK] All health checks passed!")
    return 0


def print_result_pretty(
    res: EvalResult, output_format: str = "human", show_postfix: bool = False
) -> None:
    """Print result in specified format.

    Args:
        res: Evaluation result
        output_format: "json" for JSON output, "human" for human-readable
        show_postfix: Also print the postfix form (human format only)
    """
    if output_format == "json":
        print(json.dumps(res.to_dict(), indent=2, ensure_ascii=False))
        return
    if not res.ok:
        print("Error:", res.error)
        return
    if show_postfix:
        print("Postfix:", res.postfix)
    print("Result:", format_value(res.value))


def clear_console() -> None:
    """Clear the terminal when enabled and attached to one."""
    if not config.CLEAR_SCREEN or not sys.stdout.isatty():
        return
    command = ["cmd", "/c", "cls"] if os.name == "nt" else ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError as e:
        logger.debug("Could not clear console: %s", e)


def print_help_text() -> None:
    """Print help text for REPL commands."""
    print(
        f"""rpnkalk version {VERSION}

Available commands:
  help / h    Show this help
  exit / q    Leave the calculator
  show / s    Show calculation history

Anything else is evaluated as an expression, for example:
  2 + 3 * 4        -> 14.00
  (2 + 3) * 4      -> 20.00
  1.5 + 2.25       -> 3.75

Supported: non-negative decimal numbers, + - * /, parentheses."""
    )


def show_history(history: History) -> None:
    if not len(history):
        print("History is empty")
        return
    print("Calculation history:")
    for line in history.lines():
        print(line)


def handle_command(raw: str, history: History) -> CommandAction:
    """Run a REPL meta-command if ``raw`` is one."""
    command = REPL_COMMANDS.get(raw.strip().lower())
    if command is None:
        return CommandAction.NO_ACTION

    logger.debug("REPL command: %s", command)
    if command == "help":
        clear_console()
        print_help_text()
        return CommandAction.CONTINUE
    if command == "show":
        clear_console()
        show_history(history)
        return CommandAction.CONTINUE
    print("Exiting the calculator")
    return CommandAction.BREAK


def repl_loop(
    history: History, output_format: str = "human", show_postfix: bool = False
) -> None:
    """Interactive loop; a failed expression never ends the session."""
    print("Type 'help' or 'h' to list the available commands")
    print()
    print("Enter an expression (or 'exit' / 'q' to quit):")

    while True:
        try:
            raw = input("> ").strip()
        except (EOFError, KeyboardInterrupt):
            print("\nGoodbye.")
            break
        if not raw:
            continue

        action = handle_command(raw, history)
        if action is CommandAction.BREAK:
            break
        if action is CommandAction.CONTINUE:
            continue

        res = evaluate_expression(raw)
        print_result_pretty(res, output_format, show_postfix=show_postfix)
        if res.ok:
            history.record(raw, res.value)


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for rpnkalk CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(
        prog="rpnkalk",
        description="Infix arithmetic calculator built on the shunting-yard algorithm",
    )
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Evaluate one expression and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-p", "--precision", type=int, help="Decimal places shown for results"
    )
    parser.add_argument(
        "--rpn", action="store_true", help="Also print the postfix form of expressions"
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        help="Reject unrecognized characters instead of ignoring them",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
        help="Set logging level",
    )
    parser.add_argument("--log-file", type=str, help="Write logs to file")
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check against SymPy reference results",
    )
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    # Apply CLI configuration overrides
    if args.precision is not None and args.precision >= 0:
        config.DISPLAY_PRECISION = int(args.precision)
    if args.strict:
        config.STRICT_TOKENS = True

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()
    if args.eval_expr is not None:
        expr = args.eval_expr.strip()
        res = evaluate_expression(expr)
        print_result_pretty(res, args.format, show_postfix=args.rpn)
        return 0 if res.ok else 1

    repl_loop(History(), output_format=args.format, show_postfix=args.rpn)
    return 0


if __name__ == "__main__":
    """Allow running the CLI module directly with python -m rpnkalk_pkg.cli"""
    sys.exit(main_entry())
