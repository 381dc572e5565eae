#!/usr/bin/env python3
# =============================================================================
# scripts/calc_interactive.py - Interactive Calculator
# =============================================================================
# Evaluates arithmetic expressions in the terminal using the same pipeline
# as the API.
#
# Usage:
#   python scripts/calc_interactive.py                    # interactive prompt
#   python scripts/calc_interactive.py "2+3*4" "(1-3)/2"  # evaluate and exit
#
# Commands:
#   /quit or /exit - Exit
#   /help          - Show help
# =============================================================================

import logging
import os
import sys

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from dotenv import load_dotenv
load_dotenv()

from core.expression import ExpressionError, calculate

logging.basicConfig(
    level=logging.DEBUG if os.getenv("DEBUG", "").lower() in ("1", "true", "yes") else logging.WARNING,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("calc_interactive")

HELP_TEXT = """
Enter an arithmetic expression, e.g.  (2 + 3) * 4

  Operators:   + - * /   (* and / bind tighter, equal precedence is left to right)
  Negation:    only at the start or right after "(":  -5 + 2,  3 * (-2)

Commands:
  /help   Show this help
  /quit   Exit (also /exit, Ctrl+D)
"""


def format_result(value: float) -> str:
    """Print whole numbers without a trailing .0, like the HTTP service's %v."""
    if value.is_integer():
        return str(int(value))
    return repr(value)


def evaluate_once(expression: str) -> tuple[str, bool]:
    """Return (text to print, ok)."""
    try:
        return format_result(calculate(expression)), True
    except ExpressionError as e:
        logger.debug(f"Rejected {expression!r}: {e!r}")
        return f"error: {e}", False


def run_batch(expressions: list[str]) -> int:
    for expression in expressions:
        text, ok = evaluate_once(expression)
        if not ok:
            print(text, file=sys.stderr)
            return 1
        print(text)
    return 0


def run_interactive() -> int:
    print("Calc - type /help for help, /quit to exit")

    while True:
        try:
            line = input("calc> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        command = line.strip()
        if not command:
            continue
        if command in ("/quit", "/exit"):
            return 0
        if command == "/help":
            print(HELP_TEXT)
            continue

        text, ok = evaluate_once(line)
        print(text, file=sys.stdout if ok else sys.stderr)


def main(argv: list[str] | None = None) -> int:
    args = sys.argv[1:] if argv is None else argv
    if args:
        return run_batch(args)
    return run_interactive()


if __name__ == "__main__":
    sys.exit(main())
