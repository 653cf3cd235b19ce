"""Deep clone preserving shared and circular structure.

Every composite is registered in the identity memo as soon as its empty
duplicate exists, before its children are cloned. A later reference to the
same original, shared or circular, resolves to that duplicate.

Usage:
    node = {"name": "root"}
    node["self"] = node
    copy_ = clone(node)
    assert copy_["self"] is copy_
"""

from __future__ import annotations

import copy
import datetime
import decimal
import enum
import fractions
import pathlib
import re
import types
import uuid
import warnings
from typing import Any, TypeVar

from deepgraph.core.memo import IdentityMemo
from deepgraph.core.record import DataDescriptor, Record, relaxed
from deepgraph.core.tags import TypeTag, classify, empty_like
from deepgraph.core.types import Fresh
from deepgraph.operations.models import CloneOptions

T = TypeVar("T")

_ATOMIC_TYPES: tuple[type, ...] = (
    datetime.date,
    datetime.time,
    datetime.timedelta,
    datetime.tzinfo,
    decimal.Decimal,
    fractions.Fraction,
    uuid.UUID,
    pathlib.PurePath,
    re.Pattern,
    tuple,
    frozenset,
    range,
)
"""Immutable leaf kinds duplicated with their own copy protocol."""

_SHARED_TYPES: tuple[type, ...] = (
    type,
    enum.Enum,
    types.ModuleType,
    types.FunctionType,
    types.BuiltinFunctionType,
    types.MethodType,
)
"""Code objects and enum members, never duplicated."""


def clone(value: T, options: CloneOptions | None = None) -> Fresh[T]:
    """Deep-clone a value.

    Args:
        value: Value to clone.
        options: Descriptor and fallback handling, defaults to CloneOptions().

    Returns:
        Duplicate sharing no list, set, dict or Record with the original.
        Shared references and cycles are reproduced among the duplicates.
    """
    return _Cloner(options or CloneOptions()).clone(value)


class _Cloner:
    """One clone walk: options plus the identity memo of the call."""

    def __init__(self, options: CloneOptions) -> None:
        self._options = options
        self._memo = IdentityMemo()
        self._warned = False
        self._handlers = {
            TypeTag.SEQUENCE: self._clone_sequence,
            TypeTag.SET: self._clone_set,
            TypeTag.MAP: self._clone_map,
            TypeTag.RECORD: self._clone_record,
            TypeTag.OTHER: self._clone_other,
        }

    def clone(self, value: Any) -> Any:
        tag = classify(value)
        if tag is TypeTag.PRIMITIVE:
            return value
        if value in self._memo:
            return self._memo.get(value)
        return self._handlers[tag](value)

    def _clone_sequence(self, value: list[Any]) -> list[Any]:
        duplicate = self._memo.put(value, empty_like(value))
        duplicate.extend(self.clone(item) for item in value)
        return duplicate

    def _clone_set(self, value: set[Any]) -> set[Any]:
        duplicate = self._memo.put(value, empty_like(value))
        for member in value:
            duplicate.add(self.clone(member))
        return duplicate

    def _clone_map(self, value: dict[Any, Any]) -> dict[Any, Any]:
        duplicate = self._memo.put(value, empty_like(value))
        for key, item in value.items():
            duplicate[self.clone(key)] = self.clone(item)
        return duplicate

    def _clone_record(self, value: Record) -> Record:
        duplicate = self._memo.put(value, empty_like(value))
        for key, descriptor in value.own_descriptors():
            item = self.clone(descriptor.value) if isinstance(descriptor, DataDescriptor) else None
            duplicate.define_property(
                key,
                relaxed(
                    descriptor,
                    item,
                    preserves_immutable=self._options.preserves_immutable,
                    preserves_enumerable=self._options.preserves_enumerable,
                ),
            )
        if self._options.preserves_immutable and not value.is_extensible():
            duplicate.prevent_extensions()
        return duplicate

    def _clone_other(self, value: Any) -> Any:
        if isinstance(value, _SHARED_TYPES):
            return value
        if isinstance(value, _ATOMIC_TYPES):
            return self._memo.put(value, copy.copy(value))
        if self._options.fallback is not None:
            return self._memo.put(value, self._options.fallback(value))
        return self._copy_structure(value)

    def _copy_structure(self, value: Any) -> Any:
        """Generic fallback: copy the instance and clone each attribute."""
        state = getattr(value, "__dict__", None)
        if not isinstance(state, dict):
            if not self._warned:
                warnings.warn(
                    f"clone() has no structural copy for {type(value).__name__}. "
                    f"Falling back to a shallow copy.",
                    stacklevel=2,
                )
                self._warned = True
            return self._memo.put(value, copy.copy(value))

        duplicate = self._memo.put(value, copy.copy(value))
        if duplicate is value:
            # __copy__ handed back the original; sharing it leaves it untouched
            return duplicate
        target = vars(duplicate)
        for name, attribute in list(state.items()):
            target[name] = self.clone(attribute)
        return duplicate
