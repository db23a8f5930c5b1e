"""
JSON Builder Package

Converts domain objects into JSON trees, optionally restricted to a named
subset of their fields, and composes several trees into one.

    @json_named_field("summary", ["id", "title"])
    class Article(BaseModel):
        id: int
        title: str
        body: str

    to_json(article)             -> {"id": ..., "title": ..., "body": ...}
    to_json(article, "summary")  -> {"id": ..., "title": ...}

Filtering only ever touches the top level of a tree.
"""

from jsonbuilder.builder import JSONBuilder, from_json, to_json
from jsonbuilder.filtering import apply_selector, prune_tree
from jsonbuilder.mapper import MAPPER, ConversionError, JSONMapper, MapperConfig, Tree
from jsonbuilder.named_fields import (
    REGISTRY,
    NamedFields,
    SelectorRegistry,
    json_named_field,
    json_named_fields,
)

__version__ = "0.1.0"

__all__ = [
    "JSONBuilder",
    "to_json",
    "from_json",
    "apply_selector",
    "prune_tree",
    "ConversionError",
    "JSONMapper",
    "MapperConfig",
    "MAPPER",
    "Tree",
    "NamedFields",
    "SelectorRegistry",
    "REGISTRY",
    "json_named_field",
    "json_named_fields",
]
