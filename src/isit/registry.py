"""
Predicate registry.

Maps condition names to single-argument boolean predicates.  A registry
is built once, frozen, and then only read; extension copies it instead
of mutating a shared instance.

New predicates are added with ``register()`` or ``register_all()``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import Any

from .config import ConflictPolicy
from .exceptions import (
    DuplicatePredicateError,
    PredicateNotFoundError,
    PredicateRegistrationError,
)

logger = logging.getLogger(__name__)

Predicate = Callable[[Any], bool]


class PredicateRegistry:
    """
    Registry of predicate functions keyed by condition name.

    Usage::

        registry = PredicateRegistry()
        registry.register("zero", lambda v: v == 0)

        registry.get("zero")(0)  # True

    Names are case-sensitive, non-empty and contain no whitespace.
    Registering a second, different predicate under an existing name is
    resolved by the ``on_conflict`` policy (``REJECT`` by default).
    """

    def __init__(
        self,
        predicates: Mapping[str, Predicate] | None = None,
        *,
        on_conflict: ConflictPolicy = ConflictPolicy.REJECT,
    ) -> None:
        self._predicates: dict[str, Predicate] = {}
        self._frozen = False
        self.on_conflict = on_conflict
        if predicates:
            self.register_all(predicates)

    # -- registration --------------------------------------------------------

    def register(
        self,
        name: str,
        predicate: Predicate,
        *,
        on_conflict: ConflictPolicy | None = None,
    ) -> None:
        """Register ``predicate`` under ``name``."""
        if self._frozen:
            raise PredicateRegistrationError(
                f"Cannot register '{name}': registry is frozen",
                name=name,
                reason="frozen",
            )
        _validate_name(name)
        if not callable(predicate):
            raise PredicateRegistrationError(
                f"Predicate for '{name}' is not callable: {predicate!r}",
                name=name,
                reason="not_callable",
            )

        existing = self._predicates.get(name)
        if existing is not None and existing is not predicate:
            policy = on_conflict or self.on_conflict
            if policy is ConflictPolicy.REJECT:
                raise DuplicatePredicateError(
                    name, _describe(existing), _describe(predicate), policy
                )
            if policy is ConflictPolicy.IGNORE:
                logger.debug("Ignored duplicate predicate %s", name)
                return
            logger.debug(
                "Overriding predicate %s: %s -> %s",
                name,
                _describe(existing),
                _describe(predicate),
            )

        self._predicates[name] = predicate
        logger.debug("Registered predicate %s -> %s", name, _describe(predicate))

    def register_all(
        self,
        predicates: Mapping[str, Predicate],
        *,
        on_conflict: ConflictPolicy | None = None,
    ) -> None:
        """Register every ``name -> predicate`` pair, in mapping order."""
        for name, predicate in predicates.items():
            self.register(name, predicate, on_conflict=on_conflict)

    def freeze(self) -> PredicateRegistry:
        """Disallow further registration.  Returns ``self`` for chaining."""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    def copy(self) -> PredicateRegistry:
        """Return an unfrozen registry with the same entries."""
        clone = PredicateRegistry(on_conflict=self.on_conflict)
        clone._predicates = dict(self._predicates)
        return clone

    # -- look-up -------------------------------------------------------------

    def get(self, name: str) -> Predicate | None:
        """Return the registered predicate or ``None``."""
        return self._predicates.get(name)

    def require(self, name: str) -> Predicate:
        """
        Return the registered predicate.

        Raises:
            PredicateNotFoundError: If ``name`` is not registered.
        """
        predicate = self.get(name)
        if predicate is None:
            raise PredicateNotFoundError(name, list(self._predicates))
        return predicate

    def has(self, name: str) -> bool:
        return name in self._predicates

    @property
    def names(self) -> list[str]:
        return list(self._predicates)

    def __contains__(self, name: object) -> bool:
        return name in self._predicates

    def __iter__(self) -> Iterator[str]:
        return iter(self._predicates)

    def __len__(self) -> int:
        return len(self._predicates)

    def __repr__(self) -> str:
        state = "frozen" if self._frozen else "open"
        return f"<PredicateRegistry {len(self)} predicates, {state}>"


def _validate_name(name: Any) -> None:
    if not isinstance(name, str) or not name or name != "".join(name.split()):
        raise PredicateRegistrationError(
            f"Invalid predicate name {name!r}: must be a non-empty string "
            "without whitespace",
            name=name if isinstance(name, str) else None,
            reason="invalid_name",
        )


def _describe(predicate: Predicate) -> str:
    return getattr(predicate, "__qualname__", None) or repr(predicate)


__all__ = ["Predicate", "PredicateRegistry"]
