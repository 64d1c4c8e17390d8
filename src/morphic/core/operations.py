"""Extension, membership and retraction of types on arbitrary objects.

Usage:
    registry.define(Animal, [speak], ["name"])

    rex = become_type({"name": "Rex"}, Animal, registry=registry)
    is_type(rex, Animal, registry=registry)      # True
    renounce_type(rex, Animal, registry=registry)
    is_type(rex, Animal, registry=registry)      # False
    type_of(rex, registry=registry)              # RECORD

All operations accept an explicit registry and fall back to the default one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Mapping
from typing import Any, TypeVar

from morphic.core.baseline import infer_baseline
from morphic.core.descriptor import TypeRegistry, resolve_registry
from morphic.core.fields import fields_of
from morphic.core.membership import available_capabilities, capabilities_satisfied
from morphic.core.types import Identity

logger = logging.getLogger(__name__)

T = TypeVar("T")

_MISSING = object()


def define_type(
    identity: Identity,
    named_fns: Iterable[Callable[..., Any]] = (),
    prop_names: Iterable[str] = (),
    renamed_fns: Mapping[str, Callable[..., Any]] | None = None,
    *,
    registry: TypeRegistry | None = None,
) -> None:
    """Register capabilities under an identity. See TypeRegistry.define."""
    resolve_registry(registry).define(identity, named_fns, prop_names, renamed_fns)


def become_type(target: T, identity: Identity, *, registry: TypeRegistry | None = None) -> T:
    """Attach an identity's capabilities to target and tag it with the identity.

    Capabilities are attached as shared references to the registered callables,
    copied at call time. Fields unrelated to the descriptor are left alone.

    Args:
        target: Mapping or attribute-bearing object to extend in place.
        identity: Descriptor handle. Undefined identities attach nothing.
        registry: Registry to read from. Defaults to the module-level registry.

    Returns:
        The same target.
    """
    reg = resolve_registry(registry)
    descriptor = reg.get(identity)
    fields = fields_of(target)

    for name, fn in descriptor.capabilities.items():
        fields.set(name, fn)
    fields.set(reg.settings.identity_field, identity)

    logger.debug(
        "Extended %s with %r (%d capabilities)",
        type(target).__name__,
        identity,
        len(descriptor.capabilities),
    )
    return target


def is_type(obj: Any, identity: Identity, *, registry: TypeRegistry | None = None) -> bool:
    """Check whether obj is tagged with identity or exposes all its capabilities.

    Args:
        obj: Object to test. Never mutated.
        identity: Descriptor handle.
        registry: Registry to read from. Defaults to the module-level registry.

    Returns:
        True on a nominal or structural match, False otherwise.
    """
    reg = resolve_registry(registry)
    tag = fields_of(obj).get(reg.settings.identity_field, _MISSING)
    if tag is not _MISSING and (tag is identity or tag == identity):
        return True

    required = reg.get(identity).capability_names
    return capabilities_satisfied(
        available_capabilities(obj, required),
        required,
        vacuous=reg.settings.empty_descriptor_matches,
    )


def renounce_type(
    obj: T,
    identity: Identity,
    fallback: Identity | None = None,
    *,
    registry: TypeRegistry | None = None,
) -> T:
    """Remove an identity's capabilities and tracked properties from obj.

    Args:
        obj: Object to retract in place.
        identity: Descriptor handle whose fields are removed.
        fallback: Identity to tag obj with afterwards. Inferred from obj's
            structure (SEQUENCE or RECORD, or a registered baseline) when None.
        registry: Registry to read from. Defaults to the module-level registry.

    Returns:
        The same obj.
    """
    reg = resolve_registry(registry)
    descriptor = reg.get(identity)
    fields = fields_of(obj)

    removed = [name for name in sorted(descriptor.field_names) if fields.delete(name)]

    if fallback is None:
        fallback = infer_baseline(obj, reg.baseline_resolvers)
    fields.set(reg.settings.identity_field, fallback)

    logger.debug(
        "Retracted %r from %s: removed=%s fallback=%r",
        identity,
        type(obj).__name__,
        removed,
        fallback,
    )
    return obj


def type_of(obj: Any, *, registry: TypeRegistry | None = None) -> Identity | None:
    """Get the identity obj is currently tagged with.

    Returns:
        The stored identity, or None if obj was never extended or retracted.
    """
    reg = resolve_registry(registry)
    return fields_of(obj).get(reg.settings.identity_field)
