"""Object and container predicates."""

from __future__ import annotations

import array
import inspect
import types
import weakref
from collections.abc import Iterable, Mapping, Set
from typing import Any

from .callables import is_function
from .nil import is_nil

# Exact types whose instances are primitives rather than objects.
# Subclass instances (e.g. of ``str``) are boxed objects.
PRIMITIVE_TYPES: frozenset[type] = frozenset({bool, int, float, complex, str, object})

PLAIN_TYPES: frozenset[type] = frozenset({dict, types.SimpleNamespace})

COLLECTION_TYPES: tuple[type, ...] = (
    Mapping,
    Set,
    weakref.WeakKeyDictionary,
    weakref.WeakSet,
)


def is_object(value: Any) -> bool:
    """Any non-nil, non-callable value that is not a bare primitive."""
    return (
        not is_nil(value)
        and not is_function(value)
        and type(value) not in PRIMITIVE_TYPES
    )


def is_objectbased(value: Any) -> bool:
    return is_object(value) or is_function(value)


def is_plain(value: Any) -> bool:
    """An exact ``dict`` or ``SimpleNamespace``; subclasses are not plain."""
    return type(value) in PLAIN_TYPES


def is_array(value: Any) -> bool:
    return isinstance(value, list | tuple)


def is_args(value: Any) -> bool:
    """A captured argument list, as produced by ``Signature.bind()``."""
    return isinstance(value, inspect.BoundArguments)


def is_buffer(value: Any) -> bool:
    return isinstance(value, bytes | bytearray | memoryview)


def is_collection(value: Any) -> bool:
    """A map or set container; plain records are not collections."""
    return not is_plain(value) and isinstance(value, COLLECTION_TYPES)


def is_iterable(value: Any) -> bool:
    return not is_nil(value) and isinstance(value, Iterable)


def is_typedarray(value: Any) -> bool:
    return isinstance(value, array.array)
