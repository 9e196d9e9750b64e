"""Empty / blank predicates."""

from __future__ import annotations

import re
from collections.abc import Sized
from numbers import Integral
from typing import Any

from .callables import is_function
from .nil import is_nil
from .numeric import is_nan
from .objects import is_plain
from .strings import is_stringish

# Unicode whitespace plus the byte-order mark, which ``\s`` omits.
WHITESPACE_RE = re.compile(r"^[\s\ufeff]+$")


def is_empty(value: Any) -> bool:
    """
    True for nil, NaN, and anything that reports a count of zero.

    The count is probed in order: ``len()`` for sized values, then an
    integral ``size`` attribute, then the number of attributes of a plain
    record.  Callables are never empty, even sized ones.
    """
    if is_nil(value) or is_nan(value):
        return True
    if is_function(value):
        return False
    if isinstance(value, Sized):
        # 0-d arrays are Sized but refuse len(); fall through to ``size``.
        try:
            return len(value) == 0
        except (TypeError, ValueError):
            pass
    size = getattr(value, "size", None)
    if isinstance(size, Integral) and not isinstance(size, bool):
        return size == 0
    if is_plain(value):
        return len(vars(value)) == 0
    return False


def is_blank(value: Any) -> bool:
    """Empty, or a string made only of whitespace."""
    return is_empty(value) or (
        is_stringish(value) and WHITESPACE_RE.match(value) is not None
    )
