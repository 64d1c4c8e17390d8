"""Descriptor functionality: models, registry and decorator."""

from morphic.core.descriptor.core import (
    TypeRegistry,
    capability,
    get_registry,
    resolve_registry,
)
from morphic.core.descriptor.models import (
    RECORD,
    SEQUENCE,
    Baseline,
    InvalidCapability,
    TypeDescriptor,
)

__all__ = [
    # Models
    "TypeDescriptor",
    "Baseline",
    "SEQUENCE",
    "RECORD",
    "InvalidCapability",
    # Core
    "TypeRegistry",
    "capability",
    "get_registry",
    "resolve_registry",
]
