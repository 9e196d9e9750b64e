"""Nil predicates: undefined, null, nil."""

from __future__ import annotations

from typing import Any

from ..sentinels import UNDEFINED


def is_undefined(value: Any) -> bool:
    return value is UNDEFINED


def is_null(value: Any) -> bool:
    return value is None


def is_nil(value: Any) -> bool:
    """True for ``None`` or ``UNDEFINED`` and nothing else."""
    return value is None or value is UNDEFINED
