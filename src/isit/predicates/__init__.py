"""
Built-in predicates.

Provides one function per condition name, grouped by family, and a
factory function to create registries.

Usage::

    from isit.predicates import build_default_registry

    registry = build_default_registry()
    registry.get("numeric")("12.5")  # True
"""

from __future__ import annotations

from ..registry import Predicate, PredicateRegistry
from .boolean import (
    is_boolean,
    is_boolish,
    is_false,
    is_falsey,
    is_true,
    is_truthy,
)
from .callables import is_function, is_generator
from .empty import is_blank, is_empty
from .nil import is_nil, is_null, is_undefined
from .numeric import (
    is_finite,
    is_float,
    is_infinity,
    is_integer,
    is_nan,
    is_negative,
    is_number,
    is_numberish,
    is_numeric,
    is_positive,
)
from .objects import (
    is_args,
    is_array,
    is_buffer,
    is_collection,
    is_iterable,
    is_object,
    is_objectbased,
    is_plain,
    is_typedarray,
)
from .scalar import is_primitive, is_scalar
from .strings import is_string, is_stringish, is_symbol

DEFAULT_PREDICATES: dict[str, Predicate] = {
    # Nil
    "undefined": is_undefined,
    "undef": is_undefined,
    "null": is_null,
    "nil": is_nil,
    # Primitives & scalars
    "primitive": is_primitive,
    "scalar": is_scalar,
    # Booleans
    "boolean": is_boolean,
    "bool": is_boolean,
    "boolish": is_boolish,
    "true": is_true,
    "truthy": is_truthy,
    "false": is_false,
    "falsey": is_falsey,
    # Empty / blank
    "empty": is_empty,
    "blank": is_blank,
    # Functions
    "function": is_function,
    "generator": is_generator,
    # Numbers
    "number": is_number,
    "numberish": is_numberish,
    "numeric": is_numeric,
    "nan": is_nan,
    "finite": is_finite,
    "infinity": is_infinity,
    "integer": is_integer,
    "int": is_integer,
    "float": is_float,
    "positive": is_positive,
    "negative": is_negative,
    # Objects & arrays
    "objectbased": is_objectbased,
    "object": is_object,
    "plain": is_plain,
    "array": is_array,
    "args": is_args,
    "buffer": is_buffer,
    "collection": is_collection,
    "iterable": is_iterable,
    "typedarray": is_typedarray,
    # Strings
    "string": is_string,
    "stringish": is_stringish,
    # Symbol
    "symbol": is_symbol,
}


def build_default_registry() -> PredicateRegistry:
    """
    Create a registry with all built-in predicates.

    This factory function creates a fresh, unfrozen PredicateRegistry
    populated with every built-in predicate.  Use it as the starting
    point for a customised table.

    Returns:
        PredicateRegistry: A new registry instance with all predicates.

    Example:
        >>> registry = build_default_registry()
        >>> registry.get("positive")(0)
        True
    """
    registry = PredicateRegistry()
    registry.register_all(DEFAULT_PREDICATES)
    return registry


__all__ = [
    "DEFAULT_PREDICATES",
    "build_default_registry",
    "is_args",
    "is_array",
    "is_blank",
    "is_boolean",
    "is_boolish",
    "is_buffer",
    "is_collection",
    "is_empty",
    "is_false",
    "is_falsey",
    "is_finite",
    "is_float",
    "is_function",
    "is_generator",
    "is_infinity",
    "is_integer",
    "is_iterable",
    "is_nan",
    "is_negative",
    "is_nil",
    "is_null",
    "is_number",
    "is_numberish",
    "is_numeric",
    "is_object",
    "is_objectbased",
    "is_plain",
    "is_positive",
    "is_primitive",
    "is_scalar",
    "is_string",
    "is_stringish",
    "is_symbol",
    "is_true",
    "is_truthy",
    "is_typedarray",
    "is_undefined",
]
