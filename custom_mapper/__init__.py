"""CustomMapper - registry-driven object-to-object mapping."""

from __future__ import annotations

from custom_mapper.core.config import MapperConfig
from custom_mapper.core.enums import RoutineKind
from custom_mapper.core.exceptions import (
    AdditionalDataError,
    CustomMapperError,
    InvalidRegistrationError,
    MappingError,
    MappingNotConfiguredError,
    RegistryError,
)
from custom_mapper.core.mapper import ObjectMapper
from custom_mapper.core.proxy import DynamicProxyDetector, ProxyTypeDetector
from custom_mapper.core.registry import MapperSlot, MappingKey, MappingRegistry
from custom_mapper.mapping.accessor import PropertyAccessor
from custom_mapper.mapping.merge import AdditionalDataMerger
from custom_mapper.mapping.protocol import AsyncMapper, SupportsAdditionalData, SyncMapper
from custom_mapper.mapping.resolver import MappingResolver

__all__ = [
    # Mapper
    "ObjectMapper",
    "MapperConfig",
    # Registry
    "MappingRegistry",
    "MappingKey",
    "MapperSlot",
    "MappingResolver",
    "RoutineKind",
    # Protocols
    "SyncMapper",
    "AsyncMapper",
    "SupportsAdditionalData",
    # Collaborators
    "ProxyTypeDetector",
    "DynamicProxyDetector",
    "PropertyAccessor",
    "AdditionalDataMerger",
    # Exceptions
    "CustomMapperError",
    "RegistryError",
    "InvalidRegistrationError",
    "MappingError",
    "MappingNotConfiguredError",
    "AdditionalDataError",
]
