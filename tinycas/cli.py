"""Interactive read-evaluate-print loop for the calculator."""

from __future__ import annotations

import argparse
import sys

from .cas import Cas
from .lexer import CasError


def round_string(text: str) -> str:
    """Drop trailing zeros, and a dangling decimal point, from a decimal string."""
    if "." not in text:
        return text
    stripped = text.rstrip("0")
    return stripped[:-1] if stripped.endswith(".") else stripped


def format_result(value: float) -> str:
    """Format a value with at most five decimals and no trailing zeros."""
    return round_string(f"{value:.5f}")


def main(argv: list[str] | None = None) -> int:
    """Read statements from standard input until it ends, printing each result."""
    argparse.ArgumentParser(
        prog="tinycas",
        description="Evaluate expressions and assignments read from standard input.",
    ).parse_args(argv)

    cas = Cas()
    while True:
        sys.stdout.write("Eval: ")
        sys.stdout.flush()
        line = sys.stdin.readline()
        if not line:
            break
        try:
            name, value = cas.calc(line.rstrip("\r\n"))
        except (CasError, ArithmeticError, ValueError) as error:
            sys.stderr.write(f"\n{error}\n")
            continue
        sys.stdout.write(f"{name} = {format_result(value)}\n\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())