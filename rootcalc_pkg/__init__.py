"""Rootcalc package: square roots in real, complex, arbitrary-precision, and analytical modes."""

__all__ = [
    "config",
    "parser",
    "radicals",
    "engines",
    "analytical",
    "formatter",
    "cli",
    "types",
    "api",
    "logging_config",
]

# Public API exports

__api_exports__ = [
    "compute",
    "real_sqrt",
    "complex_sqrt",
    "arbitrary_sqrt",
    "analytical_sqrt",
]
