"""Descriptor models: descriptors, baselines and registration errors."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

from morphic.core.types import Identity


class InvalidCapability(TypeError):
    """Raised when a value cannot be registered as a capability.

    Attributes:
        value: The rejected callable, name or property entry.
    """

    def __init__(self, message: str, value: Any = None) -> None:
        super().__init__(message)
        self.value = value


@dataclass(frozen=True, slots=True)
class Baseline:
    """Generic identity assigned to an object after it renounces a type."""

    name: str

    def __repr__(self) -> str:
        return f"Baseline({self.name!r})"


SEQUENCE = Baseline("sequence")
RECORD = Baseline("record")


@dataclass(frozen=True, slots=True)
class TypeDescriptor:
    """Immutable snapshot of the capabilities registered under an identity."""

    identity: Identity
    capabilities: Mapping[str, Callable[..., Any]] = field(
        default_factory=lambda: MappingProxyType({})
    )
    tracked_properties: frozenset[str] = frozenset()

    @property
    def capability_names(self) -> frozenset[str]:
        """Names an object must expose as callables to match structurally."""
        return frozenset(self.capabilities)

    @property
    def field_names(self) -> frozenset[str]:
        """Every field name this descriptor owns on an extended object."""
        return self.capability_names | self.tracked_properties

    def is_empty(self) -> bool:
        """Check whether the descriptor requires no capabilities.

        Returns:
            True if no capability is registered, False otherwise.
        """
        return not self.capabilities


@dataclass(slots=True)
class _DescriptorState:
    """Mutable per-identity state held by a registry."""

    capabilities: dict[str, Callable[..., Any]] = field(default_factory=dict)
    tracked_properties: set[str] = field(default_factory=set)

    def snapshot(self, identity: Identity) -> TypeDescriptor:
        return TypeDescriptor(
            identity=identity,
            capabilities=MappingProxyType(dict(self.capabilities)),
            tracked_properties=frozenset(self.tracked_properties),
        )
