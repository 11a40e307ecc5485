"""Unit tests for AdditionalDataMerger and PropertyAccessor."""

from __future__ import annotations

from collections import namedtuple
from dataclasses import dataclass, field
from types import SimpleNamespace
from typing import Any

import pytest
from pydantic import BaseModel, ConfigDict

from custom_mapper.core.exceptions import AdditionalDataError
from custom_mapper.mapping.accessor import PropertyAccessor, record_items
from custom_mapper.mapping.merge import AdditionalDataMerger


@dataclass
class ProductDC:
    Name: str = ""
    Count: int = 0


@dataclass(frozen=True)
class FrozenProduct:
    Name: str = ""


class ProductPydantic(BaseModel):
    model_config = ConfigDict(validate_assignment=True)

    name: str = ""
    count: int = 0


class ProductPlain:
    def __init__(self) -> None:
        self.name = ""
        self.count = 0

    @property
    def label(self) -> str:
        return self.name.upper()


@dataclass
class SelfMerging:
    values: dict[str, Any] = field(default_factory=dict)

    def apply_additional_data(self, values: dict[str, Any]) -> None:
        self.values.update(values)


class TestAdditionalDataMerger:
    def test_writes_named_values(self) -> None:
        target = ProductDC()
        result = AdditionalDataMerger().merge(target, {"Name": "X", "Count": 5})
        assert result is target
        assert target.Name == "X"
        assert target.Count == 5

    def test_none_target_stays_none(self) -> None:
        assert AdditionalDataMerger().merge(None, {"Name": "X"}) is None

    def test_none_data_leaves_target_untouched(self) -> None:
        target = ProductDC(Name="A", Count=1)
        assert AdditionalDataMerger().merge(target, None) == ProductDC(Name="A", Count=1)

    def test_empty_data_leaves_target_untouched(self) -> None:
        target = ProductDC(Name="A", Count=1)
        assert AdditionalDataMerger().merge(target, {}) == ProductDC(Name="A", Count=1)

    def test_record_object_as_additional_data(self) -> None:
        target = ProductPlain()
        AdditionalDataMerger().merge(target, SimpleNamespace(name="Y", count=2))
        assert target.name == "Y"
        assert target.count == 2

    def test_pydantic_target(self) -> None:
        target = ProductPydantic()
        AdditionalDataMerger().merge(target, {"name": "Z", "count": 9})
        assert target.name == "Z"
        assert target.count == 9

    def test_pydantic_validation_failure_raises(self) -> None:
        with pytest.raises(AdditionalDataError, match="count"):
            AdditionalDataMerger().merge(ProductPydantic(), {"count": "many"})

    def test_dict_target(self) -> None:
        target: dict[str, Any] = {"name": "old"}
        AdditionalDataMerger().merge(target, {"name": "new", "extra": 1})
        assert target == {"name": "new", "extra": 1}

    def test_unknown_field_raises_in_strict_mode(self) -> None:
        with pytest.raises(AdditionalDataError, match="Missing") as exc_info:
            AdditionalDataMerger().merge(ProductDC(), {"Missing": 1})
        assert exc_info.value.target_class == "ProductDC"
        assert exc_info.value.field_name == "Missing"

    def test_unknown_field_skipped_in_lenient_mode(self) -> None:
        merger = AdditionalDataMerger(PropertyAccessor(strict=False))
        target = merger.merge(ProductDC(), {"Missing": 1, "Name": "ok"})
        assert target == ProductDC(Name="ok")
        assert not hasattr(target, "Missing")

    def test_frozen_target_raises(self) -> None:
        with pytest.raises(AdditionalDataError, match="Name"):
            AdditionalDataMerger().merge(FrozenProduct(), {"Name": "X"})

    def test_read_only_property_raises(self) -> None:
        with pytest.raises(AdditionalDataError, match="label"):
            AdditionalDataMerger().merge(ProductPlain(), {"label": "X"})

    def test_self_merging_target_receives_whole_bag(self) -> None:
        target = SelfMerging()
        AdditionalDataMerger().merge(target, {"a": 1, "b": 2})
        assert target.values == {"a": 1, "b": 2}


class TestPropertyAccessor:
    def test_get_value_from_object(self) -> None:
        assert PropertyAccessor().get_value(ProductDC(Name="A"), "Name") == "A"

    def test_get_value_from_mapping(self) -> None:
        assert PropertyAccessor().get_value({"Name": "A"}, "Name") == "A"

    def test_set_value_reports_skip(self) -> None:
        accessor = PropertyAccessor(strict=False)
        assert accessor.set_value(ProductDC(), "Missing", 1) is False
        assert accessor.set_value(ProductDC(), "Name", "x") is True

    def test_has_property(self) -> None:
        accessor = PropertyAccessor()
        assert accessor.has_property(ProductPydantic(), "name")
        assert accessor.has_property(ProductPlain(), "label")
        assert not accessor.has_property(ProductPlain(), "missing")


class TestRecordItems:
    def test_mapping(self) -> None:
        assert record_items({"a": 1}) == {"a": 1}

    def test_dataclass(self) -> None:
        assert record_items(ProductDC(Name="n", Count=2)) == {"Name": "n", "Count": 2}

    def test_pydantic(self) -> None:
        assert record_items(ProductPydantic(name="n")) == {"name": "n", "count": 0}

    def test_namedtuple(self) -> None:
        Point = namedtuple("Point", ["x", "y"])
        assert record_items(Point(1, 2)) == {"x": 1, "y": 2}

    def test_plain_object(self) -> None:
        assert record_items(SimpleNamespace(a=1)) == {"a": 1}

    def test_unsupported_raises(self) -> None:
        with pytest.raises(TypeError, match="int"):
            record_items(42)
