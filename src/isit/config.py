"""Dispatcher configuration models."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class ConflictPolicy(str, Enum):
    """Policies for a predicate name that is already registered.

    - **REJECT**: raise ``PredicateRegistrationError``.
    - **OVERRIDE**: the last registration wins.
    - **IGNORE**: keep the existing predicate and drop the new one.
    """

    REJECT = "REJECT"
    OVERRIDE = "OVERRIDE"
    IGNORE = "IGNORE"


class DispatcherConfig(BaseModel):
    """Configuration for condition-specifier parsing and extension."""

    model_config = ConfigDict(frozen=True)

    # Checked in order; only the first matching prefix is stripped.
    negation_prefixes: tuple[str, ...] = ("non-", "!")

    # Applied after negation stripping, before table look-up.
    aliases: dict[str, str] = Field(default_factory=lambda: {"arguments": "args"})

    # Names that always resolve through class matching, never the table.
    reserved: frozenset[str] = frozenset({"a", "an"})

    on_conflict: ConflictPolicy = ConflictPolicy.REJECT


DEFAULT_CONFIG = DispatcherConfig()


__all__ = ["DEFAULT_CONFIG", "ConflictPolicy", "DispatcherConfig"]
