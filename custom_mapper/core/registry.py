"""Mapping registry - holds one mapper routine per ordered type pair.

Keys are ``(source_type, target_type)`` pairs; direction matters, so
``(User, UserDTO)`` and ``(UserDTO, User)`` are unrelated entries. Each key
owns a single slot holding either a synchronous or an asynchronous routine,
never both: registering again for the same key replaces the slot.
"""

from __future__ import annotations

import inspect
import threading
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, ClassVar

import structlog

from custom_mapper.core.enums import RoutineKind
from custom_mapper.core.exceptions import InvalidRegistrationError

logger = structlog.get_logger(__name__)

Routine = Callable[[Any, bool], Any]


@dataclass(frozen=True)
class MappingKey:
    """Ordered (source type, target type) pair."""

    source_type: type
    target_type: type

    def __str__(self) -> str:
        return f"{self.source_type.__qualname__} => {self.target_type.__qualname__}"


@dataclass(frozen=True)
class MapperSlot:
    """Current occupant of a registry entry.

    ``routine`` is the normalized callable ``(source, include_children)``;
    ``mapper`` is the object that was registered.
    """

    source_type: type
    target_type: type
    kind: RoutineKind
    routine: Routine
    mapper: Any

    @property
    def key(self) -> MappingKey:
        return MappingKey(self.source_type, self.target_type)

    @property
    def is_sync(self) -> bool:
        return self.kind is RoutineKind.SYNC

    @property
    def is_async(self) -> bool:
        return self.kind is RoutineKind.ASYNC


def _check_types(source_type: Any, target_type: Any) -> None:
    for cls in (source_type, target_type):
        if not isinstance(cls, type):
            raise InvalidRegistrationError(
                source_type, target_type, f"{cls!r} is not a class"
            )


def _sync_routine(source_type: type, target_type: type, mapper: Any) -> Routine:
    """Extract the synchronous callable from a mapper object or function."""
    if mapper is None:
        raise InvalidRegistrationError(source_type, target_type, "mapper is None")
    method = getattr(mapper, "map", None)
    if callable(method) and not inspect.iscoroutinefunction(method):
        return method  # type: ignore[no-any-return]
    if inspect.iscoroutinefunction(method) or inspect.iscoroutinefunction(mapper):
        raise InvalidRegistrationError(
            source_type,
            target_type,
            "coroutine functions must be registered with register_async()",
        )
    if callable(mapper):
        return mapper  # type: ignore[no-any-return]
    raise InvalidRegistrationError(
        source_type, target_type, f"{mapper!r} is neither callable nor defines map()"
    )


def _async_routine(source_type: type, target_type: type, mapper: Any) -> Routine:
    """Extract the asynchronous callable from a mapper object or function."""
    if mapper is None:
        raise InvalidRegistrationError(source_type, target_type, "mapper is None")
    method = getattr(mapper, "map_async", None)
    if callable(method):
        return method  # type: ignore[no-any-return]
    method = getattr(mapper, "map", None)
    if inspect.iscoroutinefunction(method):
        return method  # type: ignore[no-any-return]
    if callable(mapper):
        return mapper  # type: ignore[no-any-return]
    raise InvalidRegistrationError(
        source_type,
        target_type,
        f"{mapper!r} is neither callable nor defines map_async()",
    )


def detect_kind(mapper: Any) -> RoutineKind | None:
    """Guess the flavor of a mapper, or None if it is ambiguous or unusable.

    Detection order:
    1. Coroutine function -> ASYNC
    2. Object defining only map_async(), or an async map() -> ASYNC
    3. Object defining only a plain map() -> SYNC
    4. Any other callable -> SYNC
    """
    if inspect.iscoroutinefunction(mapper):
        return RoutineKind.ASYNC
    sync_method = getattr(mapper, "map", None)
    has_async = callable(getattr(mapper, "map_async", None))
    if inspect.iscoroutinefunction(sync_method):
        return None if has_async else RoutineKind.ASYNC
    has_sync = callable(sync_method)
    if has_sync and has_async:
        return None
    if has_async:
        return RoutineKind.ASYNC
    if has_sync or callable(mapper):
        return RoutineKind.SYNC
    return None


class MappingRegistry:
    """Thread-safe table of mapper slots keyed by MappingKey.

    Registrations normally happen once at startup, but lookups and
    registrations may run concurrently from any thread. A single lock guards
    the whole table; a racing lookup sees the table either before or after
    a registration lands.
    """

    _default: ClassVar[MappingRegistry | None] = None
    _default_lock: ClassVar[threading.Lock] = threading.Lock()

    def __init__(self) -> None:
        self._slots: dict[MappingKey, MapperSlot] = {}
        self._lock = threading.RLock()

    @classmethod
    def default(cls) -> MappingRegistry:
        """Process-wide registry, created on first access."""
        if cls._default is None:
            with cls._default_lock:
                if cls._default is None:
                    cls._default = cls()
        return cls._default

    def register(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register a synchronous mapper, replacing any existing slot.

        Args:
            source_type: Class of the values to map from.
            target_type: Class of the values to map to.
            mapper: A SyncMapper object or a plain callable
                ``(source, include_children) -> target``.

        Returns:
            The slot now stored for the pair.

        Raises:
            InvalidRegistrationError: If mapper is None or not usable as a
                synchronous routine.
        """
        _check_types(source_type, target_type)
        routine = _sync_routine(source_type, target_type, mapper)
        return self._store(
            MapperSlot(source_type, target_type, RoutineKind.SYNC, routine, mapper)
        )

    def register_async(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register an asynchronous mapper, replacing any existing slot.

        Args:
            source_type: Class of the values to map from.
            target_type: Class of the values to map to.
            mapper: An AsyncMapper object, an object with an async map(),
                or a callable ``(source, include_children)`` returning an
                awaitable. A callable that is not a coroutine function is
                called in a worker thread by ObjectMapper.map_async().

        Returns:
            The slot now stored for the pair.

        Raises:
            InvalidRegistrationError: If mapper is None or not callable.
        """
        _check_types(source_type, target_type)
        routine = _async_routine(source_type, target_type, mapper)
        return self._store(
            MapperSlot(source_type, target_type, RoutineKind.ASYNC, routine, mapper)
        )

    def add(self, source_type: type, target_type: type, mapper: Any) -> MapperSlot:
        """Register a mapper whose flavor is detected from its shape."""
        if mapper is None:
            raise InvalidRegistrationError(source_type, target_type, "mapper is None")
        kind = detect_kind(mapper)
        if kind is None:
            raise InvalidRegistrationError(
                source_type,
                target_type,
                "cannot tell whether mapper is sync or async; "
                "use register() or register_async()",
            )
        if kind is RoutineKind.ASYNC:
            return self.register_async(source_type, target_type, mapper)
        return self.register(source_type, target_type, mapper)

    def mapping(self, source_type: type, target_type: type) -> Callable[[Any], Any]:
        """Decorator form of add().

        Usage:
            @registry.mapping(User, UserDTO)
            def user_to_dto(user, include_children):
                ...
        """

        def _decorator(mapper: Any) -> Any:
            self.add(source_type, target_type, mapper)
            return mapper

        return _decorator

    def _store(self, slot: MapperSlot) -> MapperSlot:
        key = slot.key
        with self._lock:
            previous = self._slots.get(key)
            self._slots[key] = slot
        logger.debug(
            "Mapper registered",
            mapping=str(key),
            kind=slot.kind.value,
            replaced=previous is not None,
        )
        return slot

    def lookup(self, source_type: type, target_type: type) -> MapperSlot | None:
        """Return the slot registered for the pair, or None."""
        with self._lock:
            return self._slots.get(MappingKey(source_type, target_type))

    def has(self, source_type: type, target_type: type) -> bool:
        """Check if a mapper is registered for the pair."""
        return self.lookup(source_type, target_type) is not None

    @property
    def keys(self) -> list[MappingKey]:
        """List all registered keys, sorted by their display name."""
        with self._lock:
            return sorted(self._slots, key=str)

    def __contains__(self, key: object) -> bool:
        with self._lock:
            return key in self._slots

    def __len__(self) -> int:
        """Number of registered type pairs."""
        with self._lock:
            return len(self._slots)
