"""
Object <-> JSON tree conversion.

Thin layer over pydantic's TypeAdapter. Every supported object (pydantic
models and dataclasses, stdlib dataclasses, TypedDicts, containers and
scalars) is turned into plain JSON-compatible Python data:
dict / list / str / int / float / bool / None.

Fields declared with `Field(exclude=True)` never reach the tree. That is
pydantic's own visibility rule and is independent of named selectors.

A single default mapper, MAPPER, is built at import time and never
reconfigured. Code that needs other settings builds its own JSONMapper.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Type, TypeVar, Union

from pydantic import PydanticUserError, TypeAdapter, ValidationError
from pydantic_core import PydanticSerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")

Tree = Union[Dict[str, Any], List[Any], str, int, float, bool, None]


class ConversionError(Exception):
    """
    Raised when an object cannot be mapped to a tree, or a tree to a type.

    Properties:
        target: The type involved in the failed conversion (may be None)
        cause: The underlying exception (also set as __cause__)
    """

    def __init__(self, message: str, target: Any = None, cause: Optional[BaseException] = None):
        super().__init__(message)
        self.target = target
        self.cause = cause


@dataclass(frozen=True)
class MapperConfig:
    """
    Settings fixed when a JSONMapper is built.

    Properties:
        by_alias: Write and read field aliases instead of attribute names
        exclude_none: Drop fields whose value is None
        strict: Use pydantic strict mode when reading trees back
    """

    by_alias: bool = False
    exclude_none: bool = False
    strict: bool = False


def _type_name(target: Any) -> str:
    return getattr(target, "__name__", repr(target))


class JSONMapper:
    """Converts objects to JSON trees and back using pydantic."""

    def __init__(self, config: Optional[MapperConfig] = None) -> None:
        self.config = config if config is not None else MapperConfig()
        self._adapters: Dict[Any, TypeAdapter] = {}

    def adapter_for(self, target: Any) -> TypeAdapter:
        """
        Return the cached TypeAdapter for `target`, building it on first use.

        Raises:
            ConversionError: If pydantic cannot build a schema for `target`
        """
        adapter = self._adapters.get(target)
        if adapter is not None:
            return adapter
        try:
            adapter = TypeAdapter(target)
        except PydanticUserError as e:
            raise ConversionError(
                f"No JSON mapping available for {_type_name(target)}: {e}",
                target=target,
                cause=e,
            ) from e
        logger.debug("Built type adapter for %s", _type_name(target))
        self._adapters[target] = adapter
        return adapter

    def serialize(self, obj: Any) -> Tree:
        """
        Convert `obj` to a JSON tree.

        Args:
            obj: Any object pydantic can describe

        Returns:
            A fresh tree owned by the caller

        Raises:
            ConversionError: If the object's type is not mappable
        """
        if obj is None:
            return None
        target = type(obj)
        adapter = self.adapter_for(target)
        try:
            return adapter.dump_python(
                obj,
                mode="json",
                by_alias=self.config.by_alias,
                exclude_none=self.config.exclude_none,
            )
        except PydanticSerializationError as e:
            raise ConversionError(
                f"Failed to serialize {_type_name(target)}: {e}", target=target, cause=e
            ) from e

    def deserialize(self, tree: Tree, target: Type[T]) -> T:
        """
        Build an instance of `target` from a JSON tree.

        Field keys are read the way serialize writes them: aliases when
        by_alias is set, attribute names otherwise.

        Raises:
            ConversionError: If the tree does not fit `target`
        """
        adapter = self.adapter_for(target)
        try:
            return adapter.validate_python(
                tree,
                strict=self.config.strict,
                by_alias=self.config.by_alias,
                by_name=not self.config.by_alias,
            )
        except ValidationError as e:
            raise ConversionError(
                f"Cannot convert tree to {_type_name(target)}: {e}", target=target, cause=e
            ) from e


# Process-wide default mapper, configured once.
MAPPER = JSONMapper()


__all__ = ["ConversionError", "JSONMapper", "MapperConfig", "MAPPER", "Tree"]
