"""Field access adapters for target objects.

A target is any structural record. Mappings store fields as keys, every other
object stores them as attributes:

    fields_of({"name": "Rex"}).get("name")               # "Rex"
    fields_of(SimpleNamespace(name="Rex")).get("name")   # "Rex"
"""

from __future__ import annotations

from collections.abc import MutableMapping
from typing import Any, Protocol


class Fields(Protocol):
    """Uniform view over the named fields of a target object."""

    def get(self, name: str, default: Any = None) -> Any:
        """Read a field, returning default when absent."""
        ...

    def set(self, name: str, value: Any) -> None:
        """Write a field."""
        ...

    def delete(self, name: str) -> bool:
        """Remove a field. Returns True if it existed."""
        ...

    def has(self, name: str) -> bool:
        """Check if a field is present."""
        ...


class MappingFields:
    """Fields stored as keys of a mutable mapping."""

    __slots__ = ("_target",)

    def __init__(self, target: MutableMapping[str, Any]) -> None:
        self._target = target

    def get(self, name: str, default: Any = None) -> Any:
        return self._target.get(name, default)

    def set(self, name: str, value: Any) -> None:
        self._target[name] = value

    def delete(self, name: str) -> bool:
        if name not in self._target:
            return False
        del self._target[name]
        return True

    def has(self, name: str) -> bool:
        return name in self._target


class AttributeFields:
    """Fields stored as attributes.

    Reads see class-level attributes too, so methods defined on the target's
    class count as capabilities. Deletes only remove what the instance holds.
    """

    __slots__ = ("_target",)

    def __init__(self, target: Any) -> None:
        self._target = target

    def get(self, name: str, default: Any = None) -> Any:
        return getattr(self._target, name, default)

    def set(self, name: str, value: Any) -> None:
        setattr(self._target, name, value)

    def delete(self, name: str) -> bool:
        try:
            delattr(self._target, name)
        except AttributeError:
            return False
        return True

    def has(self, name: str) -> bool:
        return hasattr(self._target, name)


def fields_of(target: Any) -> Fields:
    """Get the field adapter matching a target's structure.

    Args:
        target: Object whose fields should be accessed.

    Returns:
        MappingFields for mutable mappings, AttributeFields otherwise.
    """
    if isinstance(target, MutableMapping):
        return MappingFields(target)
    return AttributeFields(target)
