"""
Shared utility functions for predicates.

These are pure-Python helpers with no side effects on their inputs.
"""

from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Rational, Real
from typing import Any

# ---------------------------------------------------------------------------
# Numeric literal parsing
# ---------------------------------------------------------------------------

# Optional sign, digits with optional fraction (or a bare fraction),
# optional exponent.  Underscores, "inf" and "nan" are not accepted.
_DECIMAL_RE = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?$", re.ASCII)
_RADIX_RE = re.compile(r"^0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)$")
_INFINITY_RE = re.compile(r"^([+-]?)Infinity$")


def parse_number(text: str) -> float:
    """
    Parse *text* as a numeric literal.

    Supported formats (surrounding whitespace ignored):
    - decimal: ``"12"``, ``"-1.5"``, ``".5"``, ``"5."``, ``"1e3"``
    - unsigned radix integers: ``"0x1F"``, ``"0o17"``, ``"0b101"``
    - ``"Infinity"``, ``"+Infinity"``, ``"-Infinity"``

    Empty and whitespace-only text is zero.  Returns ``nan`` for
    anything else.  Never raises.
    """
    content = str(text).strip()
    if not content:
        return 0.0

    if _DECIMAL_RE.match(content):
        return float(content)

    if _RADIX_RE.match(content):
        # Exact integers beyond float range become infinity.
        try:
            return float(int(content, 0))
        except OverflowError:
            return math.inf

    im = _INFINITY_RE.match(content)
    if im:
        return -math.inf if im.group(1) == "-" else math.inf

    return math.nan


# ---------------------------------------------------------------------------
# Real-number helpers
# ---------------------------------------------------------------------------


def is_nan_number(value: Any) -> bool:
    """True for a NaN of any real type, including Decimal sNaN."""
    if isinstance(value, Decimal):
        return value.is_nan()
    if isinstance(value, float):
        return math.isnan(value)
    if isinstance(value, Real):
        return bool(value != value)
    return False


def is_finite_number(value: Any) -> bool:
    """True unless *value* is an infinity or NaN."""
    if isinstance(value, Decimal):
        return value.is_finite()
    if isinstance(value, Rational):
        return True
    if isinstance(value, Real):
        return math.isfinite(float(value))
    return False


def is_whole_number(value: Any) -> bool:
    """True for a finite number with no fractional part."""
    if not is_finite_number(value):
        return False
    if isinstance(value, int):
        return True
    if isinstance(value, Rational):
        return value.denominator == 1
    if isinstance(value, Decimal):
        return value == value.to_integral_value()
    return float(value).is_integer()


def has_sign_bit(value: Any) -> bool:
    """
    True if *value* carries a negative sign, including negative zero.

    ``-0.0 < 0`` is false, so the sign is read from the bit, not by
    comparison.
    """
    if isinstance(value, Decimal):
        return value.is_signed()
    if isinstance(value, float):
        return math.copysign(1.0, value) < 0
    return bool(value < 0)


__all__ = [
    "has_sign_bit",
    "is_finite_number",
    "is_nan_number",
    "is_whole_number",
    "parse_number",
]
