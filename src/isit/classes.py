"""
Class / instance matching.

A value matches a class specifier when it is an instance of one of the
given classes, or when one of the given names appears (case-insensitively)
in the value's class chain: the names of ``type(value).__mro__``, most
specific first.
"""

from __future__ import annotations

from typing import Any

from .sentinels import UNDEFINED


def normalize_specifier(specifier: Any) -> list[Any]:
    """
    Turn a specifier into an ordered list of raw tokens.

    - ``list`` / ``tuple`` → used as-is
    - ``str`` (including subclasses) → stripped, split on single spaces,
      empty fragments dropped
    - ``None`` / ``UNDEFINED`` → ``[]``
    - anything else (e.g. a class) → ``[specifier]``
    """
    if isinstance(specifier, list | tuple):
        return list(specifier)
    if isinstance(specifier, str):
        return [token for token in str(specifier).strip().split(" ") if token]
    if specifier is None or specifier is UNDEFINED:
        return []
    return [specifier]


def class_chain(value: Any) -> tuple[str, ...]:
    """Distinct class names of *value*'s type and its ancestors."""
    names: list[str] = []
    for cls in type(value).__mro__:
        if cls.__name__ not in names:
            names.append(cls.__name__)
    return tuple(names)


def matches_class(class_specifier: Any, value: Any) -> bool:
    """
    True if *value* is an instance of any class in *class_specifier*.

    Classes are checked with ``isinstance``; text names against the class
    chain, which is computed at most once per call and only if a name is
    present.  An empty specifier never matches.
    """
    classes = normalize_specifier(class_specifier)
    if not classes:
        return False

    value_classes: set[str] | None = None

    for cls in classes:
        if isinstance(cls, type):
            if _is_instance(value, cls):
                return True
        elif isinstance(cls, str):
            if value_classes is None:
                value_classes = {name.casefold() for name in class_chain(value)}
            if str(cls).casefold() in value_classes:
                return True
    return False


def _is_instance(value: Any, cls: type) -> bool:
    # Non-runtime protocols and parametrised generics refuse instance checks.
    try:
        return isinstance(value, cls)
    except TypeError:
        return False


__all__ = ["class_chain", "matches_class", "normalize_specifier"]
