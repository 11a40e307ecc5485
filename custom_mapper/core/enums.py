"""Routine flavor enumeration."""

from __future__ import annotations

from enum import Enum


class RoutineKind(Enum):
    """Flavor of a registered mapper routine."""

    SYNC = "sync"
    ASYNC = "async"
