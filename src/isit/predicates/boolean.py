"""
Boolean predicates: boolean, boolish, true, false, truthy, falsey.

``bool`` cannot be subclassed, so there are no boxed booleans; the
string forms ``"true"`` / ``"false"`` (any case, including ``str``
subclasses) are the only non-``bool`` values in this family.
"""

from __future__ import annotations

from typing import Any

from .strings import is_stringish


def is_boolean(value: Any) -> bool:
    return isinstance(value, bool)


def is_boolish(value: Any) -> bool:
    return is_boolean(value) or (
        is_stringish(value) and value.lower() in ("true", "false")
    )


def is_true(value: Any) -> bool:
    return value is True or (is_stringish(value) and value.lower() == "true")


def is_false(value: Any) -> bool:
    return value is False or (is_stringish(value) and value.lower() == "false")


def is_truthy(value: Any) -> bool:
    """Truthy by ``bool()``, excluding values classified as false (``"false"``)."""
    return _truth(value) and not is_false(value)


def is_falsey(value: Any) -> bool:
    return not _truth(value) or is_false(value)


def _truth(value: Any) -> bool:
    # bool() of NumPy-style arrays or objects with a broken __bool__
    # raises; such values count as truthy.
    try:
        return bool(value)
    except (TypeError, ValueError):
        return True
