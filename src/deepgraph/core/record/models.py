"""Property descriptor models.

A descriptor is exactly one of two shapes. The engines read descriptors to
copy, combine or intersect properties; the value behind an accessor is only
reachable by calling its getter, which the engines never do.

Usage:
    data = DataDescriptor(value=1, writable=False)
    accessor = AccessorDescriptor(get=lambda record: 42)
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any

Getter = Callable[[Any], Any]
"""Called with the owning record, returns the property value."""

Setter = Callable[[Any, Any], None]
"""Called with the owning record and the new value."""


@dataclass(frozen=True, slots=True)
class DataDescriptor:
    """Property holding a literal value."""

    value: Any = None
    writable: bool = True
    enumerable: bool = True
    configurable: bool = True

    def with_flags(self, **flags: bool) -> DataDescriptor:
        """Copy with some of writable/enumerable/configurable replaced."""
        return replace(self, **flags)

    def with_value(self, value: Any) -> DataDescriptor:
        """Copy holding another value, flags unchanged."""
        return replace(self, value=value)


@dataclass(frozen=True, slots=True)
class AccessorDescriptor:
    """Property computed by a getter and/or stored by a setter."""

    get: Getter | None = None
    set: Setter | None = None
    enumerable: bool = True
    configurable: bool = True

    def with_flags(self, **flags: bool) -> AccessorDescriptor:
        """Copy with enumerable/configurable replaced (writable is ignored)."""
        flags.pop("writable", None)
        return replace(self, **flags)


Descriptor = DataDescriptor | AccessorDescriptor
