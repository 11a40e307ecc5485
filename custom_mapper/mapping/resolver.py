"""Mapping resolver - picks the routine to run for a type pair.

The synchronous entry point prefers a synchronous routine and falls back to
an asynchronous one; the asynchronous entry point uses the mirror order.
Whichever flavor is found, the caller learns it from the returned slot and
bridges accordingly.
"""

from __future__ import annotations

import structlog

from custom_mapper.core.enums import RoutineKind
from custom_mapper.core.exceptions import MappingNotConfiguredError
from custom_mapper.core.registry import MapperSlot, MappingRegistry

logger = structlog.get_logger(__name__)


class MappingResolver:
    """Resolves (source type, target type) pairs against a MappingRegistry."""

    def __init__(self, registry: MappingRegistry) -> None:
        self._registry = registry

    @property
    def registry(self) -> MappingRegistry:
        return self._registry

    def resolve(
        self,
        source_type: type,
        target_type: type,
        prefer: RoutineKind = RoutineKind.SYNC,
    ) -> MapperSlot:
        """Find the slot for a type pair.

        Args:
            source_type: Effective source type.
            target_type: Requested target type.
            prefer: Flavor the caller would rather run. A slot holding the
                other flavor is still returned and must be bridged.

        Returns:
            The registered slot.

        Raises:
            MappingNotConfiguredError: If nothing is registered for the
                exact ordered pair.
        """
        slot = self._registry.lookup(source_type, target_type)
        if slot is None:
            logger.debug(
                "Mapping not configured",
                source_type=source_type.__qualname__,
                target_type=target_type.__qualname__,
            )
            raise MappingNotConfiguredError(source_type, target_type)

        if slot.kind is not prefer:
            logger.debug(
                "Bridging mapper flavor",
                mapping=str(slot.key),
                registered=slot.kind.value,
                requested=prefer.value,
            )
        return slot
