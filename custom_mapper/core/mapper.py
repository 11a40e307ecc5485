"""Object mapper facade.

The ObjectMapper resolves the effective source type, looks up the mapper
registered for (source type, target type), runs it in whichever flavor it
was registered with, and applies additional data to the result.

Both entry points work for both flavors:

- map() on an async mapper blocks the calling thread until the mapper's
  coroutine completes.
- map_async() on a sync mapper runs it in a worker thread.
"""

from __future__ import annotations

import inspect
from collections.abc import Callable, Iterable
from typing import Any, TypeVar

from custom_mapper.core.config import MapperConfig
from custom_mapper.core.enums import RoutineKind
from custom_mapper.core.proxy import DynamicProxyDetector, ProxyTypeDetector, effective_type
from custom_mapper.core.registry import MapperSlot, MappingRegistry
from custom_mapper.mapping.accessor import PropertyAccessor
from custom_mapper.mapping.bridge import resolve_awaitable, run_blocking, run_in_thread
from custom_mapper.mapping.merge import AdditionalDataMerger
from custom_mapper.mapping.resolver import MappingResolver

T = TypeVar("T")


class ObjectMapper:
    """Maps objects between registered type pairs.

    Args:
        registry: Registry to resolve mappers from. Defaults to the
            process-wide MappingRegistry.default().
        config: Mapper defaults. Defaults to MapperConfig().
        proxy_detector: Decides which runtime classes are proxies.
        accessor: Property accessor used to write additional data. Defaults
            to a PropertyAccessor honouring config.strict_additional_data.
    """

    def __init__(
        self,
        registry: MappingRegistry | None = None,
        config: MapperConfig | None = None,
        *,
        proxy_detector: ProxyTypeDetector | None = None,
        accessor: PropertyAccessor | None = None,
    ) -> None:
        self._registry = registry if registry is not None else MappingRegistry.default()
        self._config = config or MapperConfig()
        self._resolver = MappingResolver(self._registry)
        self._proxy_detector = proxy_detector or DynamicProxyDetector()
        self._merger = AdditionalDataMerger(
            accessor or PropertyAccessor(strict=self._config.strict_additional_data)
        )

    @classmethod
    def from_config(
        cls,
        config: MapperConfig,
        registry: MappingRegistry | None = None,
    ) -> ObjectMapper:
        """Create an ObjectMapper from a MapperConfig.

        Args:
            config: MapperConfig instance
            registry: MappingRegistry instance, or None for the default one

        Returns:
            ObjectMapper instance
        """
        return cls(registry, config)

    @property
    def registry(self) -> MappingRegistry:
        return self._registry

    @property
    def config(self) -> MapperConfig:
        return self._config

    @property
    def proxy_detector(self) -> ProxyTypeDetector:
        return self._proxy_detector

    # --- Registration shortcuts ---

    def register(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register a synchronous mapper on the underlying registry."""
        return self._registry.register(source_type, target_type, mapper)

    def register_async(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register an asynchronous mapper on the underlying registry."""
        return self._registry.register_async(source_type, target_type, mapper)

    def add(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register a mapper, detecting its flavor."""
        return self._registry.add(source_type, target_type, mapper)

    def mapping(self, source_type: type, target_type: type) -> Callable[[Any], Any]:
        """Decorator registering a mapper for the pair."""
        return self._registry.mapping(source_type, target_type)

    # --- Single item ---

    def map(
        self,
        source: Any,
        target_type: type[T],
        *,
        source_type: type | None = None,
        include_children: bool | None = None,
        additional_data: Any = None,
    ) -> T | None:
        """Map source to an instance of target_type.

        If only an asynchronous mapper is registered for the pair, this call
        blocks until the mapper's coroutine completes.

        Args:
            source: Value to map. None maps to None without a lookup.
            target_type: Class to map to.
            source_type: Explicit source class. When given, the registry is
                queried with it as is and proxy normalization is skipped.
            include_children: Also map child entities. Defaults to
                config.include_children.
            additional_data: Named values written onto the result.

        Returns:
            The mapped target, or None.

        Raises:
            MappingNotConfiguredError: If no mapper is registered for the pair.
            AdditionalDataError: If additional data cannot be applied.
        """
        if source is None:
            return None

        slot = self._resolve(source, target_type, source_type, RoutineKind.SYNC)
        children = self._include_children(include_children)

        if slot.is_sync:
            target = slot.routine(source, children)
        else:
            target = run_blocking(resolve_awaitable(slot.routine(source, children)))

        return self._merger.merge(target, additional_data)

    async def map_async(
        self,
        source: Any,
        target_type: type[T],
        *,
        source_type: type | None = None,
        include_children: bool | None = None,
        additional_data: Any = None,
    ) -> T | None:
        """Map source to an instance of target_type asynchronously.

        If only a synchronous mapper is registered for the pair, it runs in a
        worker thread. Arguments match map().
        """
        if source is None:
            return None

        slot = self._resolve(source, target_type, source_type, RoutineKind.ASYNC)
        children = self._include_children(include_children)

        if slot.is_async and inspect.iscoroutinefunction(slot.routine):
            target = await slot.routine(source, children)
        else:
            # Non-coroutine routines run in a worker thread.
            target = await resolve_awaitable(
                await run_in_thread(slot.routine, source, children)
            )

        return self._merger.merge(target, additional_data)

    # --- Batch ---

    def map_many(
        self,
        sources: Iterable[Any] | None,
        target_type: type[T],
        *,
        source_type: type | None = None,
        include_children: bool | None = None,
        additional_data: Any = None,
    ) -> list[T]:
        """Map every source in order, omitting None results.

        The first failing element aborts the batch; no partial result is
        returned.
        """
        targets: list[T] = []
        if sources is None:
            return targets

        for source in sources:
            target = self.map(
                source,
                target_type,
                source_type=source_type,
                include_children=include_children,
                additional_data=additional_data,
            )
            if target is not None:
                targets.append(target)
        return targets

    async def map_many_async(
        self,
        sources: Iterable[Any] | None,
        target_type: type[T],
        *,
        source_type: type | None = None,
        include_children: bool | None = None,
        additional_data: Any = None,
    ) -> list[T]:
        """Asynchronous map_many(). Elements are awaited one after another."""
        targets: list[T] = []
        if sources is None:
            return targets

        for source in sources:
            target = await self.map_async(
                source,
                target_type,
                source_type=source_type,
                include_children=include_children,
                additional_data=additional_data,
            )
            if target is not None:
                targets.append(target)
        return targets

    # --- Internals ---

    def _resolve(
        self,
        source: Any,
        target_type: type,
        source_type: type | None,
        prefer: RoutineKind,
    ) -> MapperSlot:
        return self._resolver.resolve(self._source_type(source, source_type), target_type, prefer)

    def _source_type(self, source: Any, source_type: type | None) -> type:
        """Effective source type: explicit type, else runtime type minus proxy layer."""
        if source_type is not None:
            return source_type
        runtime_type = type(source)
        if not self._config.normalize_proxies:
            return runtime_type
        return effective_type(runtime_type, self._proxy_detector)

    def _include_children(self, include_children: bool | None) -> bool:
        if include_children is None:
            return self._config.include_children
        return include_children
