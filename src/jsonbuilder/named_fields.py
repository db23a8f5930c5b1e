"""
Named Field Declarations

Declares which fields of a type may appear in its JSON tree when the
caller asks for a named subset.

A declaration is attached to a class once, at definition time:

    @json_named_field("summary", ["id", "title"])
    @dataclass
    class Article:
        id: int
        title: str
        body: str

or several at once:

    @json_named_fields(
        NamedFields("summary", ["id", "title"]),
        NamedFields("preview", ["id", "title", "body"]),
    )
    @dataclass
    class Article:
        ...

ARCHITECTURAL RULE:
    Declarations are data only. They are read at call time by the
    filtering layer and never changed after the class is defined.
    Lookup is by exact class: subclasses do not inherit declarations.
"""

from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional, Tuple, Type, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class NamedFields:
    """
    A named allow-list of top-level field names.

    Properties:
        name:
            Selector name requested by callers (e.g. "summary")

        fields:
            Field names kept when this declaration is applied.
            An empty tuple means "keep everything".

    IMPORTANT:
        This object is immutable (frozen=True).
        `fields` is normalised to a tuple of strings on creation.
    """

    name: str
    fields: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not self.name:
            raise ValueError(f"Declaration name must be a non-empty string, got {self.name!r}")
        if isinstance(self.fields, str):
            raise TypeError(
                f"Fields of '{self.name}' must be an iterable of names, not a single string"
            )
        object.__setattr__(self, "fields", tuple(str(f) for f in self.fields))

    @property
    def is_empty(self) -> bool:
        return not self.fields


class SelectorRegistry:
    """
    Maps classes to the NamedFields declared on them.

    Registration happens once per class (normally through the decorators
    below). After that the registry is only read, so concurrent lookups
    need no locking.
    """

    def __init__(self) -> None:
        self._declarations: Dict[type, List[NamedFields]] = {}

    def register(self, cls: type, *declarations: NamedFields) -> None:
        """
        Attach declarations to a class, after any already attached.

        Args:
            cls: The class the declarations describe
            declarations: NamedFields to attach, in order

        Raises:
            TypeError: If cls is not a class or a declaration is not NamedFields
        """
        if not isinstance(cls, type):
            raise TypeError(f"Declarations can only be attached to classes, got {cls!r}")
        for declaration in declarations:
            if not isinstance(declaration, NamedFields):
                raise TypeError(f"Expected NamedFields, got {type(declaration).__name__}")
        self._declarations.setdefault(cls, []).extend(declarations)

    def declarations_for(self, cls: type) -> Tuple[NamedFields, ...]:
        """
        Return every declaration attached to `cls` itself, in attachment order.

        Declarations on base classes are not included.
        """
        return tuple(self._declarations.get(cls, ()))

    def match(self, cls: type, name: str) -> List[NamedFields]:
        """
        Find all declarations on `cls` called `name`.

        Args:
            cls: Exact class of the serialized object
            name: Requested selector name

        Returns:
            Matching declarations in attachment order.
            An empty list means no declaration matched.
        """
        return [d for d in self.declarations_for(cls) if d.name == name]

    def __contains__(self, cls: object) -> bool:
        return cls in self._declarations


# Process-wide registry filled by the decorators at class definition time.
REGISTRY = SelectorRegistry()


def json_named_fields(
    *declarations: NamedFields, registry: Optional[SelectorRegistry] = None
) -> Callable[[Type[T]], Type[T]]:
    """
    Class decorator attaching several NamedFields declarations.

    Args:
        declarations: NamedFields to attach, in order
        registry: Target registry (defaults to the module-level REGISTRY)

    Returns:
        Decorator returning the class unchanged
    """
    target = REGISTRY if registry is None else registry

    def decorate(cls: Type[T]) -> Type[T]:
        target.register(cls, *declarations)
        return cls

    return decorate


def json_named_field(
    name: str, fields: Iterable[str], registry: Optional[SelectorRegistry] = None
) -> Callable[[Type[T]], Type[T]]:
    """Class decorator attaching a single NamedFields declaration."""
    return json_named_fields(NamedFields(name, fields), registry=registry)


__all__ = [
    "NamedFields",
    "SelectorRegistry",
    "REGISTRY",
    "json_named_field",
    "json_named_fields",
]
