"""Additional data merge step.

Runs after every successful mapping and writes caller supplied named
overrides onto the mapped target.
"""

from __future__ import annotations

from typing import Any, TypeVar

from custom_mapper.mapping.accessor import PropertyAccessor, record_items
from custom_mapper.mapping.protocol import SupportsAdditionalData

T = TypeVar("T")


class AdditionalDataMerger:
    """Apply a bag of named values to a mapped target.

    Targets implementing SupportsAdditionalData receive the whole bag via
    apply_additional_data(); everything else is written name by name
    through the PropertyAccessor, which decides what happens to names the
    target does not have.
    """

    def __init__(self, accessor: PropertyAccessor | None = None) -> None:
        self._accessor = accessor or PropertyAccessor()

    @property
    def accessor(self) -> PropertyAccessor:
        return self._accessor

    def merge(self, target: T | None, additional_data: Any = None) -> T | None:
        """Return target with additional data applied.

        A None target stays None, and a None bag leaves target untouched.
        """
        if target is None or additional_data is None:
            return target

        values = record_items(additional_data)
        if not values:
            return target

        if isinstance(target, SupportsAdditionalData):
            target.apply_additional_data(values)
            return target

        for name, value in values.items():
            self._accessor.set_value(target, name, value)
        return target
