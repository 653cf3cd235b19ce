"""Configuration module using Pydantic Settings.

Provides typed defaults for the deep operations with environment variable support.

Usage:
    from deepgraph.config import DeepSettings

    settings = DeepSettings(clone_preserves_immutable=True)
"""

from deepgraph.config.settings import DeepSettings

__all__ = [
    "DeepSettings",
]
