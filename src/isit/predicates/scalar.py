"""Primitive / scalar predicates."""

from __future__ import annotations

from typing import Any

from .nil import is_nil
from .objects import is_objectbased


def is_scalar(value: Any) -> bool:
    return not is_nil(value) and not is_objectbased(value)


def is_primitive(value: Any) -> bool:
    return is_nil(value) or is_scalar(value)
