"""Type descriptor registry and capability decorator.

Usage:
    class Animal: ...

    def speak(self):
        return "..."

    registry = TypeRegistry()
    registry.define(Animal, [speak], ["name"])

    # Or against the default registry:
    @capability(Animal)
    def speak(self):
        return "..."
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import TYPE_CHECKING, Any, TypeVar

from morphic.config import MorphicSettings
from morphic.core.descriptor.models import (
    InvalidCapability,
    TypeDescriptor,
    _DescriptorState,
)
from morphic.core.types import Identity

if TYPE_CHECKING:
    from morphic.core.baseline import BaselinePredicate, BaselineResolver

logger = logging.getLogger(__name__)

F = TypeVar("F", bound=Callable[..., Any])


def _capability_name(fn: Any) -> str:
    """Resolve the name a callable is registered under.

    Args:
        fn: Candidate capability.

    Returns:
        The callable's own __name__.

    Raises:
        InvalidCapability: If fn is not callable or has no identifier name.
    """
    if not callable(fn):
        raise InvalidCapability(f"Capability {fn!r} is not callable", fn)
    name = getattr(fn, "__name__", None)
    if not isinstance(name, str) or not name.isidentifier():
        raise InvalidCapability(
            f"Capability {fn!r} has no resolvable name; register it through renamed_fns",
            fn,
        )
    return name


def _validate_renamed(renamed_fns: Mapping[str, Any]) -> None:
    for name, fn in renamed_fns.items():
        if not isinstance(name, str) or not name:
            raise InvalidCapability(f"Capability name {name!r} must be a non-empty string", name)
        if not callable(fn):
            raise InvalidCapability(f"Capability {name!r} maps to non-callable {fn!r}", fn)


def _validate_props(prop_names: Iterable[Any]) -> list[str]:
    if isinstance(prop_names, str):
        raise InvalidCapability("prop_names must be a sequence of names, not a string", prop_names)
    props = list(prop_names)
    for prop in props:
        if not isinstance(prop, str):
            raise InvalidCapability(f"Tracked property name {prop!r} must be a string", prop)
    return props


class TypeRegistry:
    """Registry mapping identities to their capability sets.

    Descriptors are created lazily on first registration and only ever grow.
    Registries perform no locking: concurrent definition against one identity
    needs external synchronization.
    """

    def __init__(self, settings: MorphicSettings | None = None) -> None:
        """Initialize empty type registry.

        Args:
            settings: Registry configuration. Defaults to MorphicSettings().
        """
        self._settings = settings if settings is not None else MorphicSettings()
        self._descriptors: dict[Identity, _DescriptorState] = {}
        self._resolvers: list[BaselineResolver] = []

    @property
    def settings(self) -> MorphicSettings:
        """Configuration this registry was built with."""
        return self._settings

    @property
    def baseline_resolvers(self) -> tuple[BaselineResolver, ...]:
        """Extra baseline resolvers, in lookup order."""
        return tuple(self._resolvers)

    def define(
        self,
        identity: Identity,
        named_fns: Iterable[Callable[..., Any]] = (),
        prop_names: Iterable[str] = (),
        renamed_fns: Mapping[str, Callable[..., Any]] | None = None,
    ) -> None:
        """Register capabilities and tracked properties under an identity.

        Named functions are registered first, then renamed ones, so a renamed
        entry overwrites a named one with the same key. Later registrations of
        a name always win.

        Args:
            identity: Descriptor handle. Must be hashable.
            named_fns: Callables registered under their own __name__.
            prop_names: Property names tracked for removal on retraction.
            renamed_fns: Mapping of capability name to callable.

        Raises:
            InvalidCapability: If any input cannot be registered. Raised before
                the descriptor is modified.
        """
        renamed = dict(renamed_fns or {})
        try:
            named = [(_capability_name(fn), fn) for fn in named_fns]
            _validate_renamed(renamed)
            props = _validate_props(prop_names)
        except InvalidCapability as e:
            logger.debug("Rejected registration for %r: %s", identity, e)
            raise

        state = self._descriptors.get(identity)
        if state is None:
            state = self._descriptors[identity] = _DescriptorState()

        state.capabilities.update(named)
        state.capabilities.update(renamed)
        state.tracked_properties.update(props)
        logger.debug(
            "Defined %r: capabilities=%s tracked=%s",
            identity,
            sorted(state.capabilities),
            sorted(state.tracked_properties),
        )

    def get(self, identity: Identity) -> TypeDescriptor:
        """Get a snapshot of the descriptor for an identity.

        Args:
            identity: Descriptor handle to look up.

        Returns:
            Descriptor snapshot. Undefined identities yield an empty descriptor.
        """
        state = self._descriptors.get(identity)
        if state is None:
            return TypeDescriptor(identity=identity)
        return state.snapshot(identity)

    def is_defined(self, identity: Identity) -> bool:
        """Check if anything was ever registered under an identity.

        Args:
            identity: Descriptor handle to check.

        Returns:
            True if the identity has a descriptor, False otherwise.
        """
        return identity in self._descriptors

    def identities(self) -> Iterator[Identity]:
        """Iterate defined identities in registration order."""
        return iter(list(self._descriptors))

    def add_baseline(self, predicate: BaselinePredicate, baseline: Identity) -> None:
        """Add a structural category for fallback identity inference.

        Newer resolvers take precedence over older ones and over the built-in
        sequence/record categories.

        Args:
            predicate: Returns True for objects in the category.
            baseline: Identity assigned to matching objects on retraction.
        """
        self._resolvers.insert(0, (predicate, baseline))

    def clear(self) -> None:
        """Drop every descriptor and custom baseline resolver."""
        self._descriptors.clear()
        self._resolvers.clear()

    def __contains__(self, identity: object) -> bool:
        return self.is_defined(identity)  # type: ignore[arg-type]

    def __len__(self) -> int:
        return len(self._descriptors)


# Module-level registry instance
_registry = TypeRegistry()


def get_registry() -> TypeRegistry:
    """Access the default type registry.

    Returns:
        The process-local TypeRegistry instance.
    """
    return _registry


def resolve_registry(registry: TypeRegistry | None) -> TypeRegistry:
    """Return registry, or the default registry when None."""
    return registry if registry is not None else _registry


def capability(
    identity: Identity, *, name: str | None = None, registry: TypeRegistry | None = None
) -> Callable[[F], F]:
    """Register the decorated function as a capability of identity.

    Supports two forms:
        @capability(Animal)                 # registered under fn.__name__
        @capability(Animal, name="speak")   # registered under an explicit name

    Args:
        identity: Descriptor handle to register against.
        name: Explicit capability name. Defaults to the function's own name.
        registry: Target registry. Defaults to the module-level registry.

    Returns:
        Decorator returning the function unchanged.

    Raises:
        InvalidCapability: If the function cannot be registered.
    """
    target = resolve_registry(registry)

    def decorator(fn: F) -> F:
        if name is None:
            target.define(identity, named_fns=[fn])
        else:
            target.define(identity, renamed_fns={name: fn})
        return fn

    return decorator
