"""Operation models: clone options.

Usage:
    clone(value, CloneOptions(preserves_immutable=True))
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from deepgraph.config import DeepSettings


@dataclass(frozen=True, slots=True)
class CloneOptions:
    """How clone treats descriptors and values it has no rule for."""

    preserves_immutable: bool = False
    """Keep writable/configurable flags and record extensibility. Otherwise every
    property is writable and configurable and every record extensible."""

    preserves_enumerable: bool = True
    """Keep the enumerable flag. Otherwise every property is enumerable."""

    fallback: Callable[[Any], Any] | None = None
    """Duplicates values of no known kind. None = generic per-attribute copy."""

    @classmethod
    def from_settings(cls, settings: DeepSettings | None = None) -> CloneOptions:
        """Build options from settings (environment variables DEEP_*).

        Args:
            settings: Settings to read, loaded from the environment if omitted.

        Returns:
            Options carrying the configured flags and no fallback.
        """
        # Late import: pydantic-settings is an optional dependency
        from deepgraph.config import DeepSettings

        settings = settings or DeepSettings()
        return cls(
            preserves_immutable=settings.clone_preserves_immutable,
            preserves_enumerable=settings.clone_preserves_enumerable,
        )
