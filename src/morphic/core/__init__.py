"""Core functionalities: descriptors, field access and type operations.

Architecture Note:
    core/ holds the registry plus pure functions over it. The only state lives
    in TypeRegistry instances; every operation reads a registry and touches
    nothing but the object it is given.
"""

from morphic.core.baseline import infer_baseline, is_sequence_like
from morphic.core.descriptor import (
    RECORD,
    SEQUENCE,
    Baseline,
    InvalidCapability,
    TypeDescriptor,
    TypeRegistry,
    capability,
    get_registry,
)
from morphic.core.fields import AttributeFields, Fields, MappingFields, fields_of
from morphic.core.membership import (
    available_capabilities,
    capabilities_satisfied,
    missing_capabilities,
)
from morphic.core.operations import (
    become_type,
    define_type,
    is_type,
    renounce_type,
    type_of,
)
from morphic.core.types import Identity
from morphic.core.wrapper import TypedInstance, as_instance

__all__ = [
    # Types
    "Identity",
    # Descriptor
    "TypeDescriptor",
    "TypeRegistry",
    "InvalidCapability",
    "capability",
    "get_registry",
    # Baselines
    "Baseline",
    "SEQUENCE",
    "RECORD",
    "infer_baseline",
    "is_sequence_like",
    # Fields
    "Fields",
    "MappingFields",
    "AttributeFields",
    "fields_of",
    # Membership
    "available_capabilities",
    "capabilities_satisfied",
    "missing_capabilities",
    # Operations
    "define_type",
    "become_type",
    "is_type",
    "renounce_type",
    "type_of",
    # Wrapper
    "TypedInstance",
    "as_instance",
]
