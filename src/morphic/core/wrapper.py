"""Tagged wrapper pairing a value with a type identity.

Unlike become_type, wrapping never mutates the value. Capabilities are bound to
the wrapped value, so they receive it as their first argument:

    def describe(self):
        return f"{self['name']} the animal"

    registry.define(Animal, [describe])
    rex = as_instance({"name": "Rex"}, Animal, registry=registry)
    rex.describe()   # "Rex the animal"
    rex.name         # "Rex", read through to the wrapped value
"""

from __future__ import annotations

from types import MethodType
from typing import Any

from morphic.core.descriptor import TypeDescriptor, TypeRegistry, resolve_registry
from morphic.core.fields import fields_of
from morphic.core.operations import is_type
from morphic.core.types import Identity

_MISSING = object()


class TypedInstance[T]:
    """A value together with the descriptor it is viewed as."""

    __slots__ = ("_value", "_descriptor")

    def __init__(self, value: T, descriptor: TypeDescriptor) -> None:
        self._value = value
        self._descriptor = descriptor

    def unwrap(self) -> T:
        """Return the original value."""
        return self._value

    @property
    def identity(self) -> Identity:
        """Return the identity this value is tagged with."""
        return self._descriptor.identity

    @property
    def descriptor(self) -> TypeDescriptor:
        """Return the descriptor snapshot taken when wrapping."""
        return self._descriptor

    @property
    def value_type(self) -> type[T]:
        """Return the type of the wrapped value."""
        return type(self._value)

    def satisfies(self, identity: Identity, *, registry: TypeRegistry | None = None) -> bool:
        """Check membership by tag, then structurally against the wrapped value."""
        if identity == self._descriptor.identity:
            return True
        return is_type(self._value, identity, registry=registry)

    def __getattr__(self, name: str) -> Any:
        if name in TypedInstance.__slots__:
            raise AttributeError(name)
        fn = self._descriptor.capabilities.get(name)
        if fn is not None:
            return MethodType(fn, self._value)
        value = fields_of(self._value).get(name, _MISSING)
        if value is _MISSING:
            raise AttributeError(
                f"{type(self._value).__name__!r} viewed as {self.identity!r} has no field {name!r}"
            )
        return value

    def __repr__(self) -> str:
        return f"TypedInstance({self._value!r}, identity={self.identity!r})"


def as_instance[T](
    value: T, identity: Identity, *, registry: TypeRegistry | None = None
) -> TypedInstance[T]:
    """Wrap value as an instance of identity without mutating it.

    Args:
        value: Value to wrap.
        identity: Descriptor handle. Undefined identities wrap with no capabilities.
        registry: Registry to read from. Defaults to the module-level registry.

    Returns:
        Wrapper holding value and a snapshot of the descriptor.
    """
    return TypedInstance(value, resolve_registry(registry).get(identity))
