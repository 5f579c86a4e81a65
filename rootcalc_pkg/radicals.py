"""Integer radical helpers: perfect-square tests and square-factor extraction."""

from __future__ import annotations

import sympy as sp

from .config import FACTOR_SEARCH_LIMIT, MAX_FACTOR_DIGITS
from .logging_config import get_logger

logger = get_logger("radicals")


def integer_sqrt(n: int) -> int | None:
    """Return the exact integer square root of ``n``, or None if there is none."""
    if n < 0:
        return None
    root, exact = sp.integer_nthroot(n, 2)
    return int(root) if exact else None


def is_perfect_square(n: int) -> bool:
    return integer_sqrt(n) is not None


def extract_square_factor(n: int) -> tuple[int, int]:
    """Split ``√n`` into ``outside·√inside`` with the largest square pulled out.

    Each prime ``p`` of multiplicity ``e`` contributes ``p**(e // 2)`` to
    ``outside`` and ``p**(e % 2)`` to ``inside``. Integers longer than
    MAX_FACTOR_DIGITS are only searched for prime factors up to
    FACTOR_SEARCH_LIMIT; the unfactored remainder stays inside the radical.

    Args:
        n: Positive integer

    Returns:
        Tuple of (outside, inside) with ``outside**2 * inside == n``
    """
    if n < 10**MAX_FACTOR_DIGITS:
        factors = sp.factorint(n)
    else:
        logger.debug(
            "Partial factorization of a %d-bit radicand", n.bit_length()
        )
        factors = sp.factorint(n, limit=FACTOR_SEARCH_LIMIT)

    outside = 1
    inside = 1
    for prime, exponent in factors.items():
        outside *= prime ** (exponent // 2)
        inside *= prime ** (exponent % 2)
    return int(outside), int(inside)


def simplify_radical(n: int) -> str:
    """Render ``√n`` in canonical form, e.g. ``12`` -> ``"2√3"``.

    Examples:
        >>> simplify_radical(16)
        '4'
        >>> simplify_radical(7)
        '√7'
    """
    if n < 0:
        return f"√{n}·i"
    if n == 0:
        return "0"

    outside, inside = extract_square_factor(n)
    if inside == 1:
        return str(outside)
    if outside == 1:
        return f"√{inside}"
    return f"{outside}√{inside}"
