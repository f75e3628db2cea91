"""Configuration module using Pydantic Settings.

Usage:
    from sceneref.config import ResolverSettings

    settings = ResolverSettings(emit_warnings=True)
"""

from sceneref.config.settings import ResolverSettings

__all__ = [
    "ResolverSettings",
]
