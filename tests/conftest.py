"""Shared fixtures for isit tests."""

from __future__ import annotations

from numbers import Real

import pytest

from isit import Dispatcher
from isit.predicates import build_default_registry


class Reading:
    """A float-backed real number that is not a float."""

    def __init__(self, value):
        self.value = float(value)

    def __float__(self):
        return self.value

    def __eq__(self, other):
        return self.value == float(other)

    def __ne__(self, other):
        return self.value != float(other)

    def __lt__(self, other):
        return self.value < float(other)

    def __gt__(self, other):
        return self.value > float(other)

    def __hash__(self):
        return hash(self.value)


Real.register(Reading)


@pytest.fixture
def registry():
    """Fresh, unfrozen registry with every built-in predicate."""
    return build_default_registry()


@pytest.fixture
def dispatcher(registry):
    """Dispatcher over a frozen default registry."""
    return Dispatcher(registry.freeze())


@pytest.fixture
def reading():
    """Factory for registered ``numbers.Real`` values backed by a float."""
    return Reading
