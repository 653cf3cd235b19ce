"""Shared test fixtures."""

import sys

import pytest

# Ensure src is in path
sys.path.insert(0, "src")

from dataclasses import dataclass, field
from typing import Any

from deepgraph import AccessorDescriptor, DataDescriptor, Record


@dataclass
class GetterSpy:
    """Counts calls of the getters it hands out."""

    calls: int = 0
    getters: list[Any] = field(default_factory=list)

    def getter(self, value: Any) -> Any:
        def get(record: Any) -> Any:
            self.calls += 1
            return value

        self.getters.append(get)
        return get


@pytest.fixture
def spy() -> GetterSpy:
    """Fresh getter spy."""
    return GetterSpy()


def record_with(key: Any, descriptor: DataDescriptor | AccessorDescriptor) -> Record:
    """Record holding a single property defined with an explicit descriptor."""
    record = Record()
    record.define_property(key, descriptor)
    return record


@pytest.fixture
def make_record():
    return record_with
