"""
Selector filtering for serialized trees.

Given the full JSON tree of an object and a requested selector name,
removes every top-level key not allowed by the matching NamedFields
declarations of the object's class.

Rules:
    - No name requested: tree returned untouched
    - No declaration with that name: tree returned untouched
    - Declaration with an empty field list: equivalent to declaring no
      selector at all, tree returned untouched
    - Several declarations share the name: each is applied in turn,
      so the result is their intersection
    - Only the top level is pruned; nested values are kept as they are

IMPORTANT: The tree is modified in place and the same object is returned.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Optional

from jsonbuilder.named_fields import REGISTRY, SelectorRegistry

logger = logging.getLogger(__name__)


def prune_tree(tree: Dict[str, Any], fields: Iterable[str]) -> Dict[str, Any]:
    """
    Remove from `tree` every top-level key not listed in `fields`.

    An empty `fields` keeps the tree as is.
    """
    allowed = set(fields)
    if not allowed:
        return tree

    removed = [key for key in tree if key not in allowed]
    for key in removed:
        del tree[key]
    if removed:
        logger.debug("Pruned keys %s", removed)
    return tree


def apply_selector(
    tree: Any,
    cls: type,
    name: Optional[str],
    registry: Optional[SelectorRegistry] = None,
) -> Any:
    """
    Restrict a serialized tree to the fields of the selector `name`.

    Args:
        tree: Full serialized tree of an instance of `cls`
        cls: Exact class of the serialized object
        name: Requested selector name, or None for no filtering
        registry: Where declarations are looked up (defaults to REGISTRY)

    Returns:
        The same tree object, pruned if a declaration matched

    Raises:
        TypeError: If a non-empty declaration matched but the tree is not
            an object node
    """
    if name is None:
        return tree

    registry = REGISTRY if registry is None else registry
    matches = registry.match(cls, name)
    if not matches:
        logger.debug("No selector '%s' declared on %s, keeping all fields", name, cls.__name__)
        return tree

    for declaration in matches:
        if declaration.is_empty:
            continue
        if not isinstance(tree, dict):
            raise TypeError(
                f"Selector '{name}' of {cls.__name__} needs an object tree, "
                f"got {type(tree).__name__}"
            )
        prune_tree(tree, declaration.fields)

    return tree


__all__ = ["apply_selector", "prune_tree"]
