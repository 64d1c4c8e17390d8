"""Configuration module using Pydantic Settings.

Usage:
    from morphic.config import MorphicSettings

    settings = MorphicSettings(identity_field="_kind")
"""

from morphic.config.settings import MorphicSettings

__all__ = [
    "MorphicSettings",
]
