"""Proxy type detection.

Lazy-loading layers often hand out instances of generated subclasses that
stand in for a domain class. Such a proxy class should be mapped with the
mapper registered for the domain class it wraps, so the facade collapses
it to its declared base type before looking up the registry.
"""

from __future__ import annotations

import threading
from typing import Protocol, runtime_checkable

PROXY_BASE_ATTR = "__proxy_base__"


@runtime_checkable
class ProxyTypeDetector(Protocol):
    """Protocol for deciding whether a class is a proxy of another class."""

    def is_proxy_type(self, cls: type) -> bool:
        """Return True if cls is a proxy over a declared type."""
        ...

    def declared_base_type(self, cls: type) -> type:
        """Return the declared type a proxy class stands in for."""
        ...


class DynamicProxyDetector:
    """Default proxy detector.

    A class is treated as a proxy when it declares a ``__proxy_base__``
    class attribute in its own namespace, or when it was marked with
    mark_proxy(). The declared base is ``__proxy_base__`` if present,
    otherwise the first base class.
    """

    def __init__(self) -> None:
        self._marked: set[type] = set()
        self._lock = threading.Lock()

    def mark_proxy(self, cls: type) -> type:
        """Mark cls as a proxy of its first base class. Usable as a decorator.

        Raises:
            TypeError: If cls neither declares ``__proxy_base__`` nor has a
                base class other than object.
        """
        if PROXY_BASE_ATTR not in vars(cls) and cls.__bases__[0] is object:
            raise TypeError(
                f"{cls.__qualname__} has no base class to stand in for; "
                f"set {PROXY_BASE_ATTR} or subclass the proxied type"
            )
        with self._lock:
            self._marked.add(cls)
        return cls

    def is_proxy_type(self, cls: type) -> bool:
        if PROXY_BASE_ATTR in vars(cls):
            return True
        with self._lock:
            return cls in self._marked

    def declared_base_type(self, cls: type) -> type:
        base = vars(cls).get(PROXY_BASE_ATTR)
        if isinstance(base, type):
            return base
        return cls.__bases__[0]


def effective_type(cls: type, detector: ProxyTypeDetector) -> type:
    """Collapse one proxy layer, returning cls itself for non-proxies."""
    if detector.is_proxy_type(cls):
        return detector.declared_base_type(cls)
    return cls
