"""Name-based property access on arbitrary objects.

Supports dataclasses, Pydantic models, plain classes, and mutable mappings.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, MutableMapping
from typing import Any

import structlog
from pydantic import BaseModel

from custom_mapper.core.exceptions import AdditionalDataError

logger = structlog.get_logger(__name__)


def _declared_fields(instance: Any) -> set[str]:
    """Field names declared by the instance's class (Pydantic or dataclass)."""
    if isinstance(instance, BaseModel):
        return set(type(instance).model_fields)
    if dataclasses.is_dataclass(instance):
        return {f.name for f in dataclasses.fields(instance)}
    return set()


def record_items(data: Any) -> dict[str, Any]:
    """Flatten a lightweight record into a name -> value dict.

    Accepts mappings, Pydantic models, dataclass instances, named tuples,
    and any object with a ``__dict__``. Nested values are passed through
    untouched.
    """
    if isinstance(data, Mapping):
        return dict(data)
    if isinstance(data, BaseModel):
        return {name: getattr(data, name) for name in type(data).model_fields}
    if dataclasses.is_dataclass(data) and not isinstance(data, type):
        return {f.name: getattr(data, f.name) for f in dataclasses.fields(data)}
    if isinstance(data, tuple) and hasattr(data, "_asdict"):
        return dict(data._asdict())
    try:
        return dict(vars(data))
    except TypeError:
        raise TypeError(
            f"Additional data must be a mapping or record object, got {type(data).__name__}"
        ) from None


class PropertyAccessor:
    """Reads and writes named properties.

    Missing-property policy:
    - strict=True: writing a name the target has no attribute for raises
      AdditionalDataError.
    - strict=False: the name is skipped and a warning is logged.

    A write the target itself rejects (read-only property, frozen
    dataclass, Pydantic validation failure) always raises
    AdditionalDataError.
    """

    def __init__(self, strict: bool = True) -> None:
        self.strict = strict

    def get_value(self, instance: Any, name: str) -> Any:
        """Read a named value from a mapping or an object attribute."""
        if isinstance(instance, Mapping):
            return instance[name]
        return getattr(instance, name)

    def has_property(self, instance: Any, name: str) -> bool:
        """Check whether instance exposes a property called name."""
        if isinstance(instance, MutableMapping):
            return True
        return name in _declared_fields(instance) or hasattr(instance, name)

    def set_value(self, instance: Any, name: str, value: Any) -> bool:
        """Write value onto the property called name.

        Returns:
            True if the value was written, False if it was skipped.

        Raises:
            AdditionalDataError: If the write fails, or in strict mode if the
                target has no such property.
        """
        target_class = type(instance).__name__
        if not self.has_property(instance, name):
            if self.strict:
                raise AdditionalDataError(target_class, name, "no such attribute")
            logger.warning(
                "Skipping additional data field", target=target_class, field=name
            )
            return False

        if isinstance(instance, MutableMapping):
            instance[name] = value
            return True

        try:
            setattr(instance, name, value)
        except (AttributeError, TypeError, ValueError) as e:
            raise AdditionalDataError(target_class, name, str(e)) from e
        return True
