#!/usr/bin/env python3
"""
Rootcalc - Square Root Calculator

Main entry point for the Rootcalc square root calculator.
This file serves as a thin wrapper that delegates all functionality
to the rootcalc_pkg package.

Usage:
    python rootcalc.py                          # Interactive loop
    python rootcalc.py -e "3+4i" -m complex     # Compute one value
    python rootcalc.py --help                   # Show help
"""

from __future__ import annotations

import sys


def main() -> int:
    """
    Main entry point for Rootcalc.

    Delegates all functionality to the rootcalc_pkg.cli module,
    which handles argument parsing, computation, and output formatting.

    Returns:
        Exit code (0 for success, non-zero for errors).
    """
    try:
        from rootcalc_pkg.cli import main_entry

        return main_entry(sys.argv[1:])
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
        return 1
    except ImportError as e:
        print(f"Error: Failed to import rootcalc_pkg: {e}")
        print("Please ensure all dependencies are installed: pip install -e .")
        return 1


if __name__ == "__main__":
    sys.exit(main())
