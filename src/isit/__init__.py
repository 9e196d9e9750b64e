from .classes import class_chain, matches_class, normalize_specifier
from .config import DEFAULT_CONFIG, ConflictPolicy, DispatcherConfig
from .dispatcher import BoundCondition, Dispatcher
from .exceptions import (
    DuplicatePredicateError,
    IsitError,
    PredicateNotFoundError,
    PredicateRegistrationError,
)
from .predicates import DEFAULT_PREDICATES, build_default_registry
from .registry import Predicate, PredicateRegistry
from .sentinels import UNDEFINED, UndefinedType
from .utils import parse_number

DEFAULT_REGISTRY = build_default_registry().freeze()

isit = Dispatcher(DEFAULT_REGISTRY)
a = an = isit.a

__all__ = [
    # Entry points
    "isit",
    "a",
    "an",
    # Dispatcher
    "Dispatcher",
    "BoundCondition",
    "DispatcherConfig",
    "DEFAULT_CONFIG",
    "ConflictPolicy",
    # Registry
    "Predicate",
    "PredicateRegistry",
    "DEFAULT_PREDICATES",
    "DEFAULT_REGISTRY",
    "build_default_registry",
    # Class matching
    "class_chain",
    "matches_class",
    "normalize_specifier",
    # Sentinels
    "UNDEFINED",
    "UndefinedType",
    # Exceptions
    "IsitError",
    "DuplicatePredicateError",
    "PredicateRegistrationError",
    "PredicateNotFoundError",
    # Utilities
    "parse_number",
]
