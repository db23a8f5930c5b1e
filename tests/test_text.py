"""
Tests for JSON / YAML text helpers.
"""

import pytest

from jsonbuilder.examples import build_example_article
from jsonbuilder.mapper import ConversionError
from jsonbuilder import to_json
from jsonbuilder.text import tree_from_json, tree_from_yaml, tree_to_json, tree_to_yaml


def test_json_text_roundtrip():
    tree = to_json(build_example_article(), "summary")
    assert tree_from_json(tree_to_json(tree)) == tree


def test_yaml_text_roundtrip():
    tree = to_json(build_example_article())
    assert tree_from_yaml(tree_to_yaml(tree)) == tree


def test_yaml_keeps_key_order():
    text = tree_to_yaml({"b": 1, "a": 2})
    assert text.index("b:") < text.index("a:")


def test_json_sort_keys():
    assert tree_to_json({"b": 1, "a": 2}, sort_keys=True) == '{"a": 2, "b": 1}'


def test_invalid_json():
    with pytest.raises(ConversionError):
        tree_from_json("{not json")


def test_invalid_yaml():
    with pytest.raises(ConversionError):
        tree_from_yaml("a: [1, 2")


def test_unencodable_json():
    with pytest.raises(ConversionError) as exc_info:
        tree_to_json({"a": object()})
    assert isinstance(exc_info.value.cause, TypeError)


def test_unencodable_yaml():
    with pytest.raises(ConversionError):
        tree_to_yaml({"a": object()})
