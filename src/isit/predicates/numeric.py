"""
Numeric predicates: number, numberish, numeric, nan, finite, infinity,
integer, float, positive, negative.

``number`` accepts exact ``int`` / ``float`` only.  ``numberish`` also
accepts boxed numbers: ``Decimal``, ``Fraction`` and any other
``numbers.Real`` or subclass instance.  ``bool`` is never a number.
``numeric`` adds strings holding a numeric literal (see
:func:`isit.utils.parse_number`), and every predicate after it converts
through that same path, so ``is_integer("123")`` is true.
"""

from __future__ import annotations

from decimal import Decimal
from numbers import Real
from typing import Any

from ..utils import (
    has_sign_bit,
    is_finite_number,
    is_nan_number,
    is_whole_number,
    parse_number,
)
from .strings import is_stringish


def is_number(value: Any) -> bool:
    return type(value) in (int, float) and not is_nan_number(value)


def is_numberish(value: Any) -> bool:
    return (
        isinstance(value, Real | Decimal)
        and not isinstance(value, bool)
        and not is_nan_number(value)
    )


def is_numeric(value: Any) -> bool:
    return is_numberish(value) or (
        is_stringish(value) and not is_nan_number(parse_number(value))
    )


def is_nan(value: Any) -> bool:
    return is_nan_number(value)


def is_finite(value: Any) -> bool:
    return is_numeric(value) and is_finite_number(_to_number(value))


def is_infinity(value: Any) -> bool:
    return is_numeric(value) and not is_finite_number(_to_number(value))


def is_integer(value: Any) -> bool:
    return is_numeric(value) and is_whole_number(_to_number(value))


def is_float(value: Any) -> bool:
    return is_finite(value) and not is_whole_number(_to_number(value))


def is_positive(value: Any) -> bool:
    """Greater than zero, or positive zero (``-0.0`` is not positive)."""
    if not is_numeric(value):
        return False
    number = _to_number(value)
    return number > 0 or (number == 0 and not has_sign_bit(number))


def is_negative(value: Any) -> bool:
    """Less than zero, or negative zero."""
    if not is_numeric(value):
        return False
    number = _to_number(value)
    return number < 0 or (number == 0 and has_sign_bit(number))


def _to_number(value: Any) -> Any:
    """Numeric value of a ``numeric`` input; numbers pass through unchanged."""
    if isinstance(value, str):
        return parse_number(value)
    return value
