"""Mapper protocols.

A mapper converts one source instance into one target instance. Authors
implement either the synchronous or the asynchronous flavor and register it
for a (source type, target type) pair. The ObjectMapper bridges between the
two, so a pair registered with either flavor can be mapped from both
``map`` and ``map_async``.
"""

from __future__ import annotations

from typing import Any, Protocol, TypeVar, runtime_checkable

S = TypeVar("S", contravariant=True)
T = TypeVar("T", covariant=True)


@runtime_checkable
class SyncMapper(Protocol[S, T]):
    """Synchronous mapper protocol."""

    def map(self, source: S, include_children: bool) -> T | None:
        """Map a source instance to a target instance."""
        ...


@runtime_checkable
class AsyncMapper(Protocol[S, T]):
    """Asynchronous mapper protocol."""

    async def map_async(self, source: S, include_children: bool) -> T | None:
        """Map a source instance to a target instance asynchronously."""
        ...


@runtime_checkable
class SupportsAdditionalData(Protocol):
    """Target types that apply additional data to themselves.

    When a mapped target implements this, the merger hands it the whole
    name/value bag instead of writing attributes one by one.
    """

    def apply_additional_data(self, values: dict[str, Any]) -> None:
        """Apply named overrides to this instance."""
        ...
