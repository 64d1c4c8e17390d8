"""morphic: retroactive structural types for plain Python objects.

Usage:
    from morphic import define_type, become_type, is_type, renounce_type

    class Animal: ...

    def speak():
        return "..."

    define_type(Animal, [speak], ["name"])

    rex = become_type({"name": "Rex"}, Animal)
    is_type(rex, Animal)        # True
    rex["speak"]()              # "..."

    renounce_type(rex, Animal)
    is_type(rex, Animal)        # False
"""

import logging

__version__ = "0.1.0"

# Core primitives
from morphic.core import (
    RECORD,
    SEQUENCE,
    Baseline,
    Identity,
    InvalidCapability,
    TypeDescriptor,
    TypedInstance,
    TypeRegistry,
    as_instance,
    become_type,
    capability,
    define_type,
    get_registry,
    is_type,
    renounce_type,
    type_of,
)

# Configuration
from morphic.config import MorphicSettings

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Version
    "__version__",
    # Core
    "Identity",
    "TypeDescriptor",
    "TypeRegistry",
    "InvalidCapability",
    "capability",
    "get_registry",
    "define_type",
    "become_type",
    "is_type",
    "renounce_type",
    "type_of",
    # Baselines
    "Baseline",
    "SEQUENCE",
    "RECORD",
    # Wrapper
    "TypedInstance",
    "as_instance",
    # Config
    "MorphicSettings",
]
