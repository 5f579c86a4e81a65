"""Centralized configuration for Rootcalc.

This module defines:
- Default and guard precision for the arbitrary-precision engine
- Display precision for complex results
- Regex patterns for parsing numeric and complex literals
- Logging defaults

Configuration can be overridden via:
- CLI flags (see cli.py)
- Environment variables (prefixed with ROOTCALC_)
"""

import os
import re

# Version is defined in pyproject.toml [project] section
try:
    import importlib.metadata

    VERSION = importlib.metadata.version("rootcalc")
except Exception:
    # Fallback if package not installed
    VERSION = "1.0.0"

# Arbitrary-precision configuration
DEFAULT_PRECISION = int(os.getenv("ROOTCALC_DEFAULT_PRECISION", "10"))  # places
GUARD_DIGITS = int(
    os.getenv("ROOTCALC_GUARD_DIGITS", "10")
)  # extra digits carried during the decimal square root
MAX_PRECISION = int(
    os.getenv("ROOTCALC_MAX_PRECISION", "1000")
)  # upper bound accepted by the CLI

# Input validation limits
MAX_INPUT_LENGTH = int(
    os.getenv("ROOTCALC_MAX_INPUT_LENGTH", "4000")
)  # characters; keeps integer literals under the int-to-str digit limit
MAX_FIXED_DIGITS = int(
    os.getenv("ROOTCALC_MAX_FIXED_DIGITS", "10000000")
)  # digits in a fixed-scale arbitrary-precision result

# Radical simplification: integers up to this many digits are factored
# completely; larger ones only have prime factors up to FACTOR_SEARCH_LIMIT
# pulled out
MAX_FACTOR_DIGITS = int(os.getenv("ROOTCALC_MAX_FACTOR_DIGITS", "24"))
FACTOR_SEARCH_LIMIT = int(os.getenv("ROOTCALC_FACTOR_SEARCH_LIMIT", "100000"))

# Output formatting
COMPLEX_DISPLAY_PLACES = int(os.getenv("ROOTCALC_COMPLEX_DISPLAY_PLACES", "10"))
INTEGER_REPR_LIMIT = float(
    os.getenv("ROOTCALC_INTEGER_REPR_LIMIT", "1e16")
)  # integral floats below this print without a decimal point

# Logging
LOG_LEVEL = os.getenv("ROOTCALC_LOG_LEVEL", "WARNING")
LOG_FILE = os.getenv("ROOTCALC_LOG_FILE") or None

# Longest leading decimal literal, read the way a host float parser does
FLOAT_PREFIX_REGEX = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")

PURE_IMAGINARY_REGEX = re.compile(r"^([+-]?\d*\.?\d*)i$")
COMPLEX_REGEX = re.compile(r"^([+-]?\d*\.?\d+)([+-]\d*\.?\d*)i$")
COMPLEX_UNIT_REGEX = re.compile(r"^([+-]?\d*\.?\d+)([+-])i$")
WHITESPACE_REGEX = re.compile(r"\s")
