"""Shared test fixtures."""

from __future__ import annotations

import pytest

from custom_mapper.core.mapper import ObjectMapper
from custom_mapper.core.registry import MappingRegistry


@pytest.fixture
def registry() -> MappingRegistry:
    """Fresh registry, isolated from the process-wide default."""
    return MappingRegistry()


@pytest.fixture
def mapper(registry: MappingRegistry) -> ObjectMapper:
    """ObjectMapper bound to the fresh registry."""
    return ObjectMapper(registry)


@pytest.fixture
def calls():
    """Records (source, include_children) pairs seen by test mappers.

    Usage:
        def to_dto(source, include_children):
            calls.append((source, include_children))
    """
    return []
