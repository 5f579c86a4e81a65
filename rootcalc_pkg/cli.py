"""Command-line front end for Rootcalc.

Usage:
    python -m rootcalc_pkg                          # Interactive loop
    python -m rootcalc_pkg -e "3+4i" -m complex     # Compute one value
    python -m rootcalc_pkg -e 2 -m arbitrary -p 50 --format json
"""

from __future__ import annotations

import argparse
import json
import sys

from .api import compute
from .config import DEFAULT_PRECISION, MAX_PRECISION, VERSION
from .formatter import format_trimmed
from .logging_config import get_logger, setup_logging
from .types import CalculationResult, ErrorKind, Mode

logger = get_logger("cli")

ERROR_MESSAGES = {
    ErrorKind.INVALID_INPUT: "Invalid input. Please enter a valid number.",
    ErrorKind.NEGATIVE_REAL: (
        "Cannot compute the real square root of a negative number. "
        "Try complex mode."
    ),
    ErrorKind.EMPTY_INPUT: "Please enter a value.",
    ErrorKind.INVALID_EXPRESSION: "Invalid expression.",
}

HELP_TEXT = """Enter a number or expression to take its square root.
Commands:
  :mode <real|complex|arbitrary|analytical>   switch mode
  :precision <n>                              decimal places for arbitrary mode
  :help                                       show this help
  quit, exit                                  leave"""


def render_human(result: CalculationResult) -> str:
    """Render a result as human-readable lines."""
    if not result.success:
        return f"Error: {ERROR_MESSAGES.get(result.error, 'Error')}"

    analytical = getattr(result, "analytical", None)
    value = getattr(result, "value", None)
    lines = [f"Result: {analytical or value}"]
    if analytical and value:
        lines.append(f"Approx: {value}")

    complex_value = getattr(result, "complex", None)
    if complex_value is not None and not complex_value.is_zero():
        lines.append(f"  Real part: {format_trimmed(complex_value.real)}")
        lines.append(f"  Imaginary part: {format_trimmed(complex_value.imaginary)}")
    return "\n".join(lines)


def render_json(result: CalculationResult) -> str:
    return json.dumps(result.to_dict(), ensure_ascii=False)


def _health_check() -> int:
    """Run health check to verify dependencies and basic operations.

    Returns:
        Exit code (0 for success, non-zero for failures)
    """
    checks_failed = 0

    print("Running Rootcalc health check...")
    print("-" * 50)

    try:
        import sympy as sp

        print(f"[OK] SymPy {sp.__version__} imported successfully")
    except ImportError as e:
        print(f"[FAIL] SymPy import failed: {e}")
        return 1

    checks = [
        ("Real square root", compute("16", Mode.REAL), "value", "4"),
        (
            "Complex square root",
            compute("3+4i", Mode.COMPLEX),
            "value",
            "2 + 1i",
        ),
        (
            "Arbitrary-precision square root",
            compute("2", Mode.ARBITRARY, 20),
            "value",
            "1.41421356237309504880",
        ),
        (
            "Analytical simplification",
            compute("3*4", Mode.ANALYTICAL),
            "analytical",
            "2√3",
        ),
    ]
    for label, result, field, expected in checks:
        actual = getattr(result, field, None)
        if result.success and actual == expected:
            print(f"[OK] {label} works")
        else:
            print(f"[FAIL] {label}: expected {expected!r}, got {result!r}")
            checks_failed += 1

    # Cross-check the radical simplifier against SymPy's own canonical form
    if sp.sqrt(12) == 2 * sp.sqrt(3):
        print("[OK] SymPy agrees: sqrt(12) = 2*sqrt(3)")
    else:
        print("[FAIL] SymPy radical cross-check failed")
        checks_failed += 1

    print("-" * 50)
    if checks_failed:
        print(f"Health check failed: {checks_failed} check(s) failed")
        return 1
    print("Health check passed")
    return 0


def repl(mode: Mode, precision: int, output_format: str = "human") -> int:
    """Interactive loop: compute each line in the current mode."""
    print(f"Rootcalc {VERSION} (mode: {mode.value}). Type :help for commands.")
    while True:
        try:
            line = input(">>> ")
        except (EOFError, KeyboardInterrupt):
            print()
            return 0

        text = line.strip()
        if text.lower() in ("quit", "exit"):
            return 0
        if text == ":help":
            print(HELP_TEXT)
            continue
        if text.startswith(":mode"):
            name = text[len(":mode"):].strip().lower()
            if name not in {m.value for m in Mode}:
                print(f"Unknown mode {name!r}; choose one of: "
                      + ", ".join(m.value for m in Mode))
                continue
            mode = Mode(name)
            print(f"Mode: {mode.value}")
            continue
        if text.startswith(":precision"):
            arg = text[len(":precision"):].strip()
            if not arg.isdigit() or int(arg) > MAX_PRECISION:
                print(f"Precision must be an integer from 0 to {MAX_PRECISION}")
                continue
            precision = int(arg)
            print(f"Precision: {precision}")
            continue

        result = compute(line, mode, precision)
        print(render_json(result) if output_format == "json" else render_human(result))


def main_entry(argv: list[str] | None = None) -> int:
    """
    Main entry point for Rootcalc CLI.

    Args:
        argv: Optional command-line arguments (defaults to sys.argv)

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = argparse.ArgumentParser(prog="rootcalc")
    parser.add_argument(
        "-e",
        "--eval",
        type=str,
        help="Compute one square root and exit (non-interactive)",
        dest="eval_expr",
    )
    parser.add_argument(
        "-m",
        "--mode",
        type=str,
        choices=[m.value for m in Mode],
        default=Mode.REAL.value,
        help="Computation mode (default: real)",
    )
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=DEFAULT_PRECISION,
        help=f"Decimal places for arbitrary mode (default: {DEFAULT_PRECISION})",
    )
    parser.add_argument(
        "-j",
        "--json",
        action="store_true",
        help="Emit JSON for machine parsing (same as --format json)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["json", "human"],
        default="human",
        help="Output format: json (machine-readable) or human (human-readable)",
    )
    parser.add_argument(
        "-v", "--version", action="store_true", help="Show program version"
    )
    parser.add_argument(
        "--log-level",
        type=str,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging level (default: ROOTCALC_LOG_LEVEL or WARNING)",
    )
    parser.add_argument(
        "--log-file",
        type=str,
        help="Also write logs to file (default: ROOTCALC_LOG_FILE)",
    )
    parser.add_argument(
        "--health-check",
        action="store_true",
        help="Run health check and verify dependencies",
    )
    args = parser.parse_args(argv)

    if not 0 <= args.precision <= MAX_PRECISION:
        parser.error(f"--precision must be between 0 and {MAX_PRECISION}")

    output_format = "json" if args.json else args.format

    setup_logging(level=args.log_level, log_file=args.log_file)
    logger.debug(
        "mode=%s precision=%d format=%s", args.mode, args.precision, output_format
    )

    if args.version:
        print(VERSION)
        return 0
    if args.health_check:
        return _health_check()

    mode = Mode(args.mode)
    if args.eval_expr is not None:
        result = compute(args.eval_expr, mode, args.precision)
        if output_format == "json":
            print(render_json(result))
        else:
            print(render_human(result))
        return 0 if result.success else 1

    return repl(mode, args.precision, output_format)


if __name__ == "__main__":
    sys.exit(main_entry())
