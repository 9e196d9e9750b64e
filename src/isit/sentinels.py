"""The absence sentinel, distinct from ``None``."""

from __future__ import annotations

from typing import Any, Final


class UndefinedType:
    """Type of :data:`UNDEFINED`, a falsy singleton meaning "no value at all".

    ``None`` is the explicit "no object" value; ``UNDEFINED`` marks a value
    that was never supplied (a missing key, an unset attribute).
    """

    _instance: UndefinedType | None = None

    def __new__(cls) -> UndefinedType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "UNDEFINED"

    def __reduce__(self) -> str:
        return "UNDEFINED"

    def __copy__(self) -> UndefinedType:
        return self

    def __deepcopy__(self, _memo: Any) -> UndefinedType:
        return self


UNDEFINED: Final = UndefinedType()


__all__ = ["UNDEFINED", "UndefinedType"]
