"""String and symbol predicates."""

from __future__ import annotations

from typing import Any


def is_string(value: Any) -> bool:
    """Exact ``str`` only; subclass instances are boxed strings."""
    return type(value) is str


def is_stringish(value: Any) -> bool:
    return isinstance(value, str)


def is_symbol(value: Any) -> bool:
    """A bare ``object()`` sentinel, Python's unique-identity token."""
    return type(value) is object
