"""Callable predicates: function, generator."""

from __future__ import annotations

import inspect
from typing import Any


def is_function(value: Any) -> bool:
    """Anything callable: functions, methods, classes, ``__call__`` objects."""
    return callable(value)


def is_generator(value: Any) -> bool:
    return inspect.isgeneratorfunction(value)
