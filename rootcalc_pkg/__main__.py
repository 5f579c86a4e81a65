"""Main entry point for running rootcalc_pkg as a module.

This allows running Rootcalc with:
    python -m rootcalc_pkg
    python -m rootcalc_pkg --health-check
    python -m rootcalc_pkg -e "3+4i" -m complex

This is equivalent to running:
    python -m rootcalc_pkg.cli
"""

from __future__ import annotations

import sys

from .cli import main_entry

if __name__ == "__main__":
    sys.exit(main_entry())
