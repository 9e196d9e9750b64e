"""
Condition dispatcher.

Parses a condition specifier into tokens, resolves negation and
aliases, looks each token up in a :class:`PredicateRegistry` (falling
back to class matching for unknown names) and ANDs the results with
short-circuiting.

Usage::

    from isit import isit

    isit("empty array", [])          # True
    isit("non-empty string", "x")    # True
    isit("dict", {})                 # True, class-name fallback
    is_array = isit("array")         # curried
    is_array([1, 2])                 # True
"""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from .classes import matches_class, normalize_specifier
from .config import DEFAULT_CONFIG, ConflictPolicy, DispatcherConfig
from .exceptions import PredicateRegistrationError
from .registry import Predicate, PredicateRegistry

logger = logging.getLogger(__name__)

# Distinguishes an omitted value from an explicit None / UNDEFINED.
_MISSING: Any = object()


class BoundCondition:
    """A specifier bound to a dispatcher, awaiting its value."""

    __slots__ = ("_dispatcher", "specifier")

    def __init__(self, dispatcher: Dispatcher, specifier: Any) -> None:
        self._dispatcher = dispatcher
        self.specifier = specifier

    def __call__(self, value: Any) -> bool:
        return self._dispatcher.evaluate(self.specifier, value)

    def __repr__(self) -> str:
        return f"<BoundCondition {self.specifier!r}>"


class Dispatcher:
    """
    Evaluates condition specifiers against values.

    A dispatcher never mutates its registry.  :meth:`extend` returns a new
    dispatcher over a copy, so the same instance can be shared freely.

    Registered predicates are also reachable as attributes::

        isit.numeric("1e3")   # True
        isit.float(1.5)       # True
    """

    def __init__(
        self,
        registry: PredicateRegistry,
        config: DispatcherConfig | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or DEFAULT_CONFIG

    @property
    def registry(self) -> PredicateRegistry:
        return self._registry

    @property
    def config(self) -> DispatcherConfig:
        return self._config

    @property
    def names(self) -> list[str]:
        """Registered predicate names."""
        return self._registry.names

    # -- evaluation ----------------------------------------------------------

    def __call__(self, specifier: Any, value: Any = _MISSING) -> Any:
        """
        Evaluate *specifier* against *value*.

        With no *value*, return a :class:`BoundCondition` instead.
        """
        if value is _MISSING:
            return BoundCondition(self, specifier)
        return self.evaluate(specifier, value)

    def evaluate(self, specifier: Any, value: Any) -> bool:
        """True if *value* satisfies every condition in *specifier*."""
        tokens = normalize_specifier(specifier)
        if not tokens:
            return False
        return all(self._check(token, value) for token in tokens)

    def _check(self, token: Any, value: Any) -> bool:
        if isinstance(token, type):
            return matches_class([token], value)

        name, negated = self._strip_negation(str(token))
        name = self._config.aliases.get(name, name)

        predicate = self._resolve(name)
        if predicate is not None:
            result = bool(predicate(value))
        else:
            logger.debug("No predicate named %r, matching as class name", name)
            result = matches_class([name], value)

        return not result if negated else result

    def _strip_negation(self, token: str) -> tuple[str, bool]:
        for prefix in self._config.negation_prefixes:
            if token.startswith(prefix):
                return token[len(prefix) :], True
        return token, False

    def _resolve(self, name: str) -> Predicate | None:
        if name in self._config.reserved:
            return None
        return self._registry.get(name)

    # -- class matching ------------------------------------------------------

    def a(self, class_specifier: Any, value: Any) -> bool:
        """True if *value* is an instance of any class named or given."""
        return matches_class(class_specifier, value)

    an = a

    # -- predicates ----------------------------------------------------------

    def predicate(self, name: str) -> Predicate:
        """
        Return the registered predicate for *name*.

        Raises:
            PredicateNotFoundError: If *name* is not registered.
        """
        return self._registry.require(name)

    def __getattr__(self, name: str) -> Predicate:
        # Only reached for names not found on the instance or class.
        if name.startswith("_"):
            raise AttributeError(name)
        predicate = self._registry.get(name)
        if predicate is None:
            raise AttributeError(
                f"{type(self).__name__!r} object has no predicate {name!r}"
            )
        return predicate

    # -- extension -----------------------------------------------------------

    def extend(
        self,
        predicates: Mapping[str, Predicate],
        *,
        on_conflict: ConflictPolicy | None = None,
    ) -> Dispatcher:
        """
        Return a new dispatcher whose table adds *predicates* to this one.

        This dispatcher and its registry are left untouched.  Collisions
        with existing names follow *on_conflict*, defaulting to the
        configured policy (``REJECT``).

        Raises:
            PredicateRegistrationError: On a rejected collision, or a name
                that begins with a negation prefix and so could never be
                dispatched to.
        """
        for name in predicates:
            for prefix in self._config.negation_prefixes:
                if isinstance(name, str) and name.startswith(prefix):
                    raise PredicateRegistrationError(
                        f"Predicate name '{name}' starts with negation "
                        f"prefix '{prefix}'",
                        name=name,
                        reason="negation_prefix",
                    )

        registry = self._registry.copy()
        registry.register_all(
            predicates, on_conflict=on_conflict or self._config.on_conflict
        )
        registry.freeze()
        logger.debug(
            "Extended dispatcher with %d predicate(s): %s",
            len(predicates),
            ", ".join(predicates),
        )
        return type(self)(registry, self._config)

    def __repr__(self) -> str:
        return f"<Dispatcher {self._registry!r}>"


__all__ = ["BoundCondition", "Dispatcher"]
