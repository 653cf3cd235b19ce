"""Keyed record with per-property descriptors.

Usage:
    record = Record(name="alice")
    record.define_property("id", DataDescriptor(7, writable=False))
    record.define_property("upper", AccessorDescriptor(get=lambda r: r["name"].upper()))

    record["name"]  # "alice"
    record["upper"]  # "ALICE", calls the getter
    record.get_own_property_descriptor("upper")  # no call

Iteration, len() and equality only consider enumerable properties, the same
way a plain mapping view of the record would.
"""

from __future__ import annotations

from collections.abc import Iterator, MutableMapping
from typing import Any, Self

from deepgraph.core.record.models import AccessorDescriptor, DataDescriptor, Descriptor


class Record(MutableMapping[Any, Any]):
    """Mutable mapping whose own properties each carry a descriptor.

    Args:
        data: Optional mapping or iterable of pairs, defined as plain data properties.
        **kwargs: More plain data properties.
    """

    __slots__ = ("_properties", "_extensible")

    def __init__(self, data: Any = None, /, **kwargs: Any) -> None:
        self._properties: dict[Any, Descriptor] = {}
        self._extensible = True
        if data is not None:
            self.update(data)
        if kwargs:
            self.update(kwargs)

    @classmethod
    def _empty(cls) -> Self:
        """Allocate an empty, extensible record of this type without calling __init__."""
        record = cls.__new__(cls)
        Record.__init__(record)
        return record

    # Descriptors

    def own_keys(self) -> list[Any]:
        """All own property keys, enumerable or not, in definition order."""
        return list(self._properties)

    def own_descriptors(self) -> list[tuple[Any, Descriptor]]:
        """All own (key, descriptor) pairs, enumerable or not, in definition order."""
        return list(self._properties.items())

    def has_own_property(self, key: Any) -> bool:
        """Check if the record defines the key itself."""
        return key in self._properties

    def get_own_property_descriptor(self, key: Any) -> Descriptor | None:
        """Get the descriptor of an own property.

        Args:
            key: Property key.

        Returns:
            The descriptor, or None if the record has no such property.
        """
        return self._properties.get(key)

    def define_property(self, key: Any, descriptor: Descriptor) -> None:
        """Define or redefine a property.

        Args:
            key: Property key.
            descriptor: Descriptor to install.

        Raises:
            TypeError: If the key is new and the record is not extensible, or the
                existing property is not configurable and the change is not
                allowed (only lowering writable or writing a writable value).
        """
        current = self._properties.get(key)
        if current is None:
            if not self._extensible:
                raise TypeError(f"Cannot define property {key!r}: record is not extensible")
        elif not current.configurable and not _allowed_redefinition(current, descriptor):
            raise TypeError(f"Cannot redefine non-configurable property {key!r}")
        self._properties[key] = descriptor

    def delete_property(self, key: Any) -> None:
        """Remove an own property.

        Raises:
            KeyError: If the property does not exist.
            TypeError: If the property is not configurable.
        """
        descriptor = self._properties[key]
        if not descriptor.configurable:
            raise TypeError(f"Cannot delete non-configurable property {key!r}")
        del self._properties[key]

    # Extensibility

    def is_extensible(self) -> bool:
        """Check if new properties can be added."""
        return self._extensible

    def prevent_extensions(self) -> Self:
        """Forbid adding new properties."""
        self._extensible = False
        return self

    def seal(self) -> Self:
        """Make every property non-configurable and forbid new properties."""
        for key, descriptor in self._properties.items():
            self._properties[key] = descriptor.with_flags(configurable=False)
        return self.prevent_extensions()

    def freeze(self) -> Self:
        """Seal the record and make every data property read-only."""
        for key, descriptor in self._properties.items():
            self._properties[key] = descriptor.with_flags(configurable=False, writable=False)
        return self.prevent_extensions()

    def is_sealed(self) -> bool:
        """Check if the record is non-extensible and no property is configurable."""
        if self._extensible:
            return False
        return not any(d.configurable for d in self._properties.values())

    def is_frozen(self) -> bool:
        """Check if the record is sealed and no data property is writable."""
        if not self.is_sealed():
            return False
        return not any(
            isinstance(d, DataDescriptor) and d.writable for d in self._properties.values()
        )

    # Mapping protocol

    def __getitem__(self, key: Any) -> Any:
        descriptor = self._properties[key]
        if isinstance(descriptor, DataDescriptor):
            return descriptor.value
        if descriptor.get is None:
            return None
        return descriptor.get(self)

    def __setitem__(self, key: Any, value: Any) -> None:
        descriptor = self._properties.get(key)
        if descriptor is None:
            self.define_property(key, DataDescriptor(value))
        elif isinstance(descriptor, AccessorDescriptor):
            if descriptor.set is None:
                raise TypeError(f"Cannot set property {key!r}: accessor has no setter")
            descriptor.set(self, value)
        elif not descriptor.writable:
            raise TypeError(f"Cannot assign to read-only property {key!r}")
        else:
            self._properties[key] = DataDescriptor(
                value,
                writable=descriptor.writable,
                enumerable=descriptor.enumerable,
                configurable=descriptor.configurable,
            )

    def __delitem__(self, key: Any) -> None:
        self.delete_property(key)

    def __contains__(self, key: object) -> bool:
        return key in self._properties

    def __iter__(self) -> Iterator[Any]:
        return (key for key, d in self._properties.items() if d.enumerable)

    def __len__(self) -> int:
        return sum(1 for d in self._properties.values() if d.enumerable)

    def __eq__(self, other: object) -> bool:
        """Compare enumerable properties without invoking accessors.

        Data properties compare by value, accessors by their get/set functions.
        Against a plain mapping only data properties can be equal.
        """
        if isinstance(other, Record):
            mine = {k: _payload(d) for k, d in self._properties.items() if d.enumerable}
            theirs = {k: _payload(d) for k, d in other._properties.items() if d.enumerable}
            return mine == theirs
        if isinstance(other, dict):
            mine_data: dict[Any, Any] = {}
            for key, descriptor in self._properties.items():
                if not descriptor.enumerable:
                    continue
                if isinstance(descriptor, AccessorDescriptor):
                    return False
                mine_data[key] = descriptor.value
            return mine_data == other
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        parts = []
        for key, descriptor in self._properties.items():
            if isinstance(descriptor, AccessorDescriptor):
                parts.append(f"{key!r}: <accessor>")
            else:
                parts.append(f"{key!r}: {descriptor.value!r}")
        return f"{type(self).__name__}({{{', '.join(parts)}}})"


def _payload(descriptor: Descriptor) -> tuple[Any, ...]:
    if isinstance(descriptor, DataDescriptor):
        return ("data", descriptor.value)
    return ("accessor", descriptor.get, descriptor.set)


def _allowed_redefinition(current: Descriptor, new: Descriptor) -> bool:
    """Changes permitted on a non-configurable property."""
    if new.configurable or new.enumerable != current.enumerable:
        return False
    if isinstance(current, AccessorDescriptor):
        return (
            isinstance(new, AccessorDescriptor)
            and new.get is current.get
            and new.set is current.set
        )
    if not isinstance(new, DataDescriptor):
        return False
    if current.writable:
        return True
    return not new.writable and new.value is current.value
