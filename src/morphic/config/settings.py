"""Configuration settings using Pydantic Settings.

Provides typed configuration for type registries with environment variable support.

Usage:
    from morphic.config import MorphicSettings

    # Load from environment variables (MORPHIC_*)
    settings = MorphicSettings()

    # Or override with explicit values
    settings = MorphicSettings(empty_descriptor_matches=False)
    registry = TypeRegistry(settings=settings)
"""

from __future__ import annotations

try:
    from pydantic import field_validator
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install morphic"
    ) from e


class MorphicSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for type registries.

    Attributes:
        identity_field: Field name used to store an object's current type identity.
        empty_descriptor_matches: Whether a descriptor with no capabilities
            structurally matches every object. When False, empty descriptors
            only match objects tagged with their identity.

    Environment Variables:
        MORPHIC_IDENTITY_FIELD
        MORPHIC_EMPTY_DESCRIPTOR_MATCHES
    """

    model_config = SettingsConfigDict(
        env_prefix="MORPHIC_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    identity_field: str = "__type_identity__"
    empty_descriptor_matches: bool = True

    @field_validator("identity_field")
    @classmethod
    def _identity_field_is_identifier(cls, value: str) -> str:
        if not value.isidentifier():
            raise ValueError(f"identity_field must be a valid identifier, got {value!r}")
        return value
