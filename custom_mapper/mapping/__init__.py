"""Mapping layer - resolution, bridging and additional data merge."""

from __future__ import annotations

from custom_mapper.mapping.accessor import PropertyAccessor, record_items
from custom_mapper.mapping.bridge import run_blocking, run_in_thread
from custom_mapper.mapping.merge import AdditionalDataMerger
from custom_mapper.mapping.protocol import AsyncMapper, SupportsAdditionalData, SyncMapper
from custom_mapper.mapping.resolver import MappingResolver

__all__ = [
    "MappingResolver",
    "AdditionalDataMerger",
    "PropertyAccessor",
    "record_items",
    "run_blocking",
    "run_in_thread",
    "SyncMapper",
    "AsyncMapper",
    "SupportsAdditionalData",
]
