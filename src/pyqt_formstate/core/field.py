"""Logical identifier for a form field."""

from dataclasses import dataclass, field as dataclass_field
from typing import Any, Generic, Iterator, List, Tuple, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Field(Generic[T]):
    """
    Name-keyed handle for a form field holding values of type ``T``.

    The ``name`` must be unique within a form. Two handles with the same name
    are the same field for storage and validation, whatever ``value_type``
    they declare. ``value_type`` is only used to tag stored values so a read
    through a handle declaring a different type fails loudly.

    Handles carry no state and are cheap to create, so they are usually
    declared once as module-level constants::

        EMAIL = Field.text("email")
        TERMS = Field.boolean("terms")
    """

    name: str
    value_type: Any = dataclass_field(default=object, compare=False)

    def __iter__(self) -> Iterator[str]:
        # Allows ``name, = field``
        yield self.name

    @classmethod
    def text(cls, name: str) -> "Field[str]":
        return cls(name, str)

    @classmethod
    def boolean(cls, name: str) -> "Field[bool]":
        return cls(name, bool)

    @classmethod
    def integer(cls, name: str) -> "Field[int]":
        return cls(name, int)

    @classmethod
    def number(cls, name: str) -> "Field[float]":
        return cls(name, float)

    @classmethod
    def float_range(cls, name: str) -> "Field[Tuple[float, float]]":
        """Field holding an inclusive ``(start, end)`` pair, e.g. a range slider."""
        return cls(name, Tuple[float, float])

    @classmethod
    def list_of(cls, name: str, item_type: Any = object) -> "Field[List[Any]]":
        """Field holding an ordered selection of ``item_type`` values."""
        return cls(name, List[item_type])
