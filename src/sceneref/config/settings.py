"""Configuration settings using Pydantic Settings.

Provides typed resolver configuration with environment variable support.

Usage:
    from sceneref.config import ResolverSettings

    # Load from environment variables (SCENEREF_*)
    settings = ResolverSettings()

    # Or override with explicit values
    settings = ResolverSettings(emit_warnings=True)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install pydantic-settings"
    ) from e


class ResolverSettings(BaseSettings):  # type: ignore[misc]
    """Configuration for the field resolver.

    Attributes:
        emit_warnings: Also surface every diagnostic through ``warnings.warn``.
        report_empty_scalars: Treat a scalar field with no match as a failure
            (reported unless the directive suppresses errors).
        subtree_miss_is_fatal: Let a by-name-in-subtree miss propagate as an
            exception. When False it is handled like any other lookup miss.

    Environment Variables:
        SCENEREF_EMIT_WARNINGS
        SCENEREF_REPORT_EMPTY_SCALARS
        SCENEREF_SUBTREE_MISS_IS_FATAL
    """

    model_config = SettingsConfigDict(
        env_prefix="SCENEREF_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    emit_warnings: bool = False
    report_empty_scalars: bool = True
    subtree_miss_is_fatal: bool = True
