"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from morphic import TypeRegistry, get_registry


class Animal:
    """Identity handle used across tests."""


def speak():
    return "..."


@pytest.fixture
def registry():
    """Fresh TypeRegistry instance."""
    return TypeRegistry()


@pytest.fixture
def animal_registry(registry):
    """Registry with Animal defined: capability speak, tracked property name."""
    registry.define(Animal, [speak], ["name"])
    return registry


@pytest.fixture
def animal_cls():
    return Animal


@pytest.fixture
def default_registry():
    """The module-level registry, emptied after the test."""
    reg = get_registry()
    yield reg
    reg.clear()
