"""CustomMapper exception hierarchy.

Failures raised by registered mapper routines are never wrapped: they reach
the caller exactly as the routine raised them.
"""

from __future__ import annotations


def _type_name(cls: object) -> str:
    return getattr(cls, "__qualname__", None) or repr(cls)


class CustomMapperError(Exception):
    """Base exception for all CustomMapper errors."""


# --- Registry ---


class RegistryError(CustomMapperError):
    """Base for mapping registry errors."""


class InvalidRegistrationError(RegistryError):
    """Raised when a mapper cannot be registered for a type pair."""

    def __init__(self, source_type: type, target_type: type, detail: str) -> None:
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(
            f"Cannot register mapper for {_type_name(source_type)} => "
            f"{_type_name(target_type)}: {detail}"
        )


# --- Mapping ---


class MappingError(CustomMapperError):
    """Base for mapping errors."""


class MappingNotConfiguredError(MappingError):
    """Raised when no mapper is registered for an ordered type pair."""

    def __init__(self, source_type: type, target_type: type) -> None:
        self.source_type = source_type
        self.target_type = target_type
        super().__init__(
            f"No mapping configuration found for {_type_name(source_type)} => "
            f"{_type_name(target_type)}"
        )


class AdditionalDataError(MappingError):
    """Raised when additional data cannot be written onto a mapped target."""

    def __init__(self, target_class: str, field_name: str, detail: str) -> None:
        self.target_class = target_class
        self.field_name = field_name
        super().__init__(f"Cannot set '{field_name}' on {target_class}: {detail}")
