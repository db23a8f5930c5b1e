"""
JSON building entry points.

    to_json(obj, name)   object -> tree, optionally restricted to a selector
    from_json(tree, cls) tree -> object
    JSONBuilder          composes several trees into one object tree

Example:
    response = (
        JSONBuilder.new_instance()
        .add_object("article", article, "summary")
        .add_node("total", 42)
        .build_json()
    )
"""

from __future__ import annotations

import copy
import logging
from typing import Any, Dict, Optional, Type, TypeVar

from jsonbuilder.filtering import apply_selector
from jsonbuilder.mapper import MAPPER, JSONMapper, Tree
from jsonbuilder.named_fields import SelectorRegistry

logger = logging.getLogger(__name__)

T = TypeVar("T")


def to_json(
    obj: Any,
    name: Optional[str] = None,
    *,
    mapper: Optional[JSONMapper] = None,
    registry: Optional[SelectorRegistry] = None,
) -> Tree:
    """
    Convert an object to a JSON tree.

    If `name` matches no selector declared on the object's class, the
    whole object is returned.

    Args:
        obj: Object to convert
        name: Optional selector name declared with json_named_field(s)
        mapper: Converter to use (defaults to MAPPER)
        registry: Declarations to consult (defaults to the global registry)

    Returns:
        JSON tree

    Raises:
        ConversionError: If the object cannot be converted
    """
    mapper = MAPPER if mapper is None else mapper
    tree = mapper.serialize(obj)
    return apply_selector(tree, type(obj), name, registry=registry)


def from_json(node: Tree, cls: Type[T], *, mapper: Optional[JSONMapper] = None) -> T:
    """
    Convert a JSON tree to an instance of `cls`.

    Raises:
        ConversionError: If the tree does not fit `cls`
    """
    mapper = MAPPER if mapper is None else mapper
    return mapper.deserialize(node, cls)


class JSONBuilder:
    """
    Accumulates named trees into one JSON object.

    add_node / add_object return the builder so calls can be chained.
    build_json hands back an independent copy and empties the builder,
    which can then be reused for the next object.

    A builder is not thread-safe: use one per composed object.
    """

    def __init__(
        self,
        mapper: Optional[JSONMapper] = None,
        registry: Optional[SelectorRegistry] = None,
    ) -> None:
        self.mapper = MAPPER if mapper is None else mapper
        self.registry = registry
        self._node: Dict[str, Tree] = {}

    @classmethod
    def new_instance(cls, **kwargs: Any) -> "JSONBuilder":
        return cls(**kwargs)

    def add_node(self, key: str, node: Tree) -> "JSONBuilder":
        """Set `key` to `node`, replacing any previous value."""
        self._node[key] = node
        return self

    def add_object(self, key: str, obj: Any, name: Optional[str] = None) -> "JSONBuilder":
        """Convert `obj` (optionally through selector `name`) and set it at `key`."""
        tree = to_json(obj, name, mapper=self.mapper, registry=self.registry)
        return self.add_node(key, tree)

    def build_json(self) -> Dict[str, Tree]:
        """Return a deep copy of the accumulated object and reset the builder."""
        result = copy.deepcopy(self._node)
        self._clean()
        return result

    def _clean(self) -> None:
        logger.debug("Resetting builder")
        self._node = {}

    def __len__(self) -> int:
        return len(self._node)


__all__ = ["JSONBuilder", "to_json", "from_json"]
