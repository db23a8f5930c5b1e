"""
Text helpers for JSON trees (JSON / YAML strings).

Trees are already plain Python data, so these are direct calls into
json and PyYAML. Encoding and decoding errors are reported as
ConversionError.
"""
from __future__ import annotations

import json
from typing import Optional

import yaml

from jsonbuilder.mapper import ConversionError, Tree


def tree_to_json(tree: Tree, *, indent: Optional[int] = None, sort_keys: bool = False) -> str:
    try:
        return json.dumps(tree, indent=indent, sort_keys=sort_keys)
    except (TypeError, ValueError) as e:
        raise ConversionError(f"Tree is not JSON encodable: {e}", cause=e) from e


def tree_from_json(text: str) -> Tree:
    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ConversionError(f"Invalid JSON: {e}", cause=e) from e


def tree_to_yaml(tree: Tree) -> str:
    try:
        return yaml.safe_dump(tree, sort_keys=False)
    except yaml.YAMLError as e:
        raise ConversionError(f"Tree is not YAML encodable: {e}", cause=e) from e


def tree_from_yaml(text: str) -> Tree:
    try:
        return yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise ConversionError(f"Invalid YAML: {e}", cause=e) from e


__all__ = ["tree_to_json", "tree_from_json", "tree_to_yaml", "tree_from_yaml"]
