"""
Tests for to_json / from_json and the JSONBuilder.

Builder contract:
    - add_node sets a key (last write wins) and returns the builder
    - build_json returns an independent deep copy and resets the builder
"""

from dataclasses import dataclass
from typing import Optional

import pytest

from jsonbuilder import JSONBuilder, from_json, to_json
from jsonbuilder.mapper import ConversionError, JSONMapper, MapperConfig
from jsonbuilder.named_fields import NamedFields, SelectorRegistry, json_named_fields

registry = SelectorRegistry()


@json_named_fields(
    NamedFields("short", ["sku", "price"]),
    NamedFields("narrow", ["sku", "price"]),
    NamedFields("narrow", ["price"]),
    NamedFields("everything", []),
    registry=registry,
)
@dataclass
class Product:
    sku: str
    price: int
    details: dict


@dataclass
class Plain:
    a: int
    b: int


@dataclass
class Optionals:
    a: Optional[int]
    b: Optional[int]


def make_product() -> Product:
    return Product(sku="P-1", price=10, details={"sku": "inner", "weight": 3})


class TestToJson:
    """Test object -> filtered tree conversion."""

    def test_without_name(self):
        tree = to_json(make_product(), registry=registry)
        assert tree == {"sku": "P-1", "price": 10, "details": {"sku": "inner", "weight": 3}}

    def test_with_name(self):
        tree = to_json(make_product(), "short", registry=registry)
        assert tree == {"sku": "P-1", "price": 10}

    def test_unknown_name_returns_everything(self):
        assert to_json(make_product(), "nope", registry=registry) == to_json(make_product())

    def test_duplicate_names_narrow(self):
        assert to_json(make_product(), "narrow", registry=registry) == {"price": 10}

    def test_empty_selector_returns_everything(self):
        assert to_json(make_product(), "everything", registry=registry) == to_json(make_product())

    def test_type_without_selectors(self):
        assert to_json(Plain(a=1, b=2), "short", registry=registry) == {"a": 1, "b": 2}

    def test_custom_mapper(self):
        mapper = JSONMapper(MapperConfig(exclude_none=True))
        assert to_json(Optionals(a=None, b=1), mapper=mapper) == {"b": 1}


class TestFromJson:
    """Test tree -> object conversion."""

    def test_roundtrip(self):
        product = make_product()
        assert from_json(to_json(product), Product) == product

    def test_incompatible(self):
        with pytest.raises(ConversionError):
            from_json({"sku": "P-1"}, Product)


class TestJSONBuilder:
    """Test composing trees."""

    def test_new_instance_is_empty(self):
        builder = JSONBuilder.new_instance()
        assert len(builder) == 0
        assert builder.build_json() == {}

    def test_add_node_chains(self):
        builder = JSONBuilder.new_instance()
        assert builder.add_node("a", 1) is builder

    def test_build(self):
        result = (
            JSONBuilder.new_instance()
            .add_node("product", to_json(make_product(), "short", registry=registry))
            .add_node("count", 1)
            .build_json()
        )
        assert result == {"product": {"sku": "P-1", "price": 10}, "count": 1}

    def test_last_write_wins(self):
        result = JSONBuilder().add_node("a", 1).add_node("a", [2]).build_json()
        assert result == {"a": [2]}

    def test_add_object(self):
        builder = JSONBuilder.new_instance(registry=registry)
        builder.add_object("full", make_product()).add_object("short", make_product(), "short")
        result = builder.build_json()
        assert result["short"] == {"sku": "P-1", "price": 10}
        assert set(result["full"]) == {"sku", "price", "details"}

    def test_build_resets(self):
        builder = JSONBuilder.new_instance()
        builder.add_node("a", 1)
        assert builder.build_json() == {"a": 1}
        assert builder.build_json() == {}

    def test_reuse_after_build(self):
        builder = JSONBuilder.new_instance()
        builder.add_node("a", 1).build_json()
        assert builder.add_node("b", 2).build_json() == {"b": 2}

    def test_result_is_independent(self):
        builder = JSONBuilder.new_instance()
        nested = {"x": [1, 2]}
        builder.add_node("n", nested)
        first = builder.build_json()
        first["n"]["x"].append(3)
        assert nested == {"x": [1, 2]}

        builder.add_node("n", nested)
        second = builder.build_json()
        assert second == {"n": {"x": [1, 2]}}

    def test_mutating_result_does_not_touch_builder(self):
        builder = JSONBuilder.new_instance()
        result = builder.build_json()
        result["leak"] = True
        assert builder.build_json() == {}
