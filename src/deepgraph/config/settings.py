"""Configuration settings using Pydantic Settings.

Provides typed defaults for the deep operations with environment variable
support.

Usage:
    from deepgraph.config import DeepSettings

    # Load from environment variables (DEEP_*)
    settings = DeepSettings()

    # Or override with explicit values
    settings = DeepSettings(clone_preserves_immutable=True)
    options = CloneOptions.from_settings(settings)
"""

from __future__ import annotations

try:
    from pydantic_settings import BaseSettings, SettingsConfigDict
except ImportError as e:
    raise ImportError(
        "pydantic-settings is required for config module. "
        "Install with: pip install deepgraph[config]"
    ) from e


class DeepSettings(BaseSettings):  # type: ignore[misc]
    """Defaults for clone options.

    Attributes:
        clone_preserves_immutable: Keep writable/configurable flags and record
            extensibility when cloning.
        clone_preserves_enumerable: Keep the enumerable flag when cloning.

    Environment Variables:
        DEEP_CLONE_PRESERVES_IMMUTABLE
        DEEP_CLONE_PRESERVES_ENUMERABLE
    """

    model_config = SettingsConfigDict(
        env_prefix="DEEP_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    clone_preserves_immutable: bool = False
    clone_preserves_enumerable: bool = True
