"""
Exception hierarchy with fuzzy-match suggestions.

Evaluation never raises; these errors surface only from registry
management and explicit predicate look-ups.  All exceptions inherit from
``IsitError`` and provide ``to_dict()`` for structured reporting.
"""

from __future__ import annotations

from difflib import get_close_matches
from typing import Any

from .config import ConflictPolicy


class IsitError(Exception):
    """Base exception for all isit errors."""

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": self.__class__.__name__,
            "message": str(self),
        }


class PredicateRegistrationError(IsitError):
    """
    A predicate could not be added to a registry.

    ``reason`` is one of ``"frozen"``, ``"invalid_name"``,
    ``"not_callable"``, ``"negation_prefix"`` or ``"duplicate"``.
    """

    def __init__(
        self,
        message: str,
        name: str | None = None,
        *,
        reason: str | None = None,
    ) -> None:
        self.message = message
        self.name = name
        self.reason = reason
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PREDICATE_REGISTRATION_ERROR",
            "message": self.message,
            "name": self.name,
            "reason": self.reason,
        }


class DuplicatePredicateError(PredicateRegistrationError):
    """A different predicate is already registered under the name."""

    def __init__(
        self,
        name: str,
        existing: str,
        incoming: str,
        policy: ConflictPolicy = ConflictPolicy.REJECT,
    ) -> None:
        self.existing = existing
        self.incoming = incoming
        self.policy = policy
        super().__init__(
            f"Duplicate predicate '{name}': {existing} already registered, "
            f"cannot register {incoming} (on_conflict={policy.value})",
            name=name,
            reason="duplicate",
        )

    def to_dict(self) -> dict[str, Any]:
        payload = super().to_dict()
        payload.update(
            existing=self.existing,
            incoming=self.incoming,
            policy=self.policy.value,
        )
        return payload


class PredicateNotFoundError(IsitError):
    """
    Unknown predicate name requested.

    Provides fuzzy-matched suggestions for likely intended names.
    """

    def __init__(self, name: str, valid_names: list[str]) -> None:
        self.name = name
        self.valid_names = valid_names
        self.suggestions = get_close_matches(name, valid_names, n=3, cutoff=0.6)

        message = f"Unknown predicate: '{name}'."
        if self.suggestions:
            message += f" Did you mean: {', '.join(self.suggestions)}?"
        message += f" Valid predicates: {', '.join(sorted(valid_names)[:10])}..."
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        return {
            "error": "PREDICATE_NOT_FOUND",
            "name": self.name,
            "suggestions": self.suggestions,
            "valid_names": sorted(self.valid_names),
        }


__all__ = [
    "DuplicatePredicateError",
    "IsitError",
    "PredicateNotFoundError",
    "PredicateRegistrationError",
]
