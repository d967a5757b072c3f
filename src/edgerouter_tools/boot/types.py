"""
AST for config.boot documents.

A document is a tree of settings::

    interfaces {
        ethernet eth0 {
            address 192.168.0.1/24
            disable
        }
    }

``Value`` and ``ObjectValue`` are closed unions of frozen dataclasses.
Every consumer dispatches over all of their members; the AST is immutable
once built and every text fragment is an owned copy of the source text.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Union

from .grammar import TRAILING_LINE_COUNT


@dataclass(frozen=True)
class Object:
    """
    Ordered body of a ``{ ... }`` block.

    Entries keep their source order and duplicates (a config.boot file
    lists ``address`` once per address).
    """

    entries: tuple[ObjectValue, ...] = ()

    def __post_init__(self):
        # Any iterable is accepted; entries are always stored as a tuple
        object.__setattr__(self, "entries", tuple(self.entries))

    def __iter__(self) -> Iterator[ObjectValue]:
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)

    def keys(self) -> list[str]:
        """Names of the entries in source order."""
        return [entry.name for entry in self.entries]

    def get(self, name: str, instance: Optional[str] = None) -> Optional[ObjectValue]:
        """
        First entry called ``name``, or None.

        With ``instance`` only ``ObjectKeyValue`` entries of that instance
        match, e.g. ``interfaces.get("ethernet", "eth0")``.
        """
        for entry in self.find_all(name):
            if instance is None or getattr(entry, "instance", None) == instance:
                return entry
        return None

    def find_all(self, name: str) -> list[ObjectValue]:
        """All entries called ``name``."""
        return [entry for entry in self.entries if entry.name == name]

    def iter_all(self) -> Iterator[ObjectValue]:
        """Depth-first iteration over every entry below this object."""
        for entry in self.entries:
            yield entry
            value = getattr(entry, "value", None)
            if isinstance(value, Object):
                yield from value.iter_all()


@dataclass(frozen=True)
class String:
    """Text that appeared quoted in the source (quotes not included)."""

    text: str


@dataclass(frozen=True)
class UnquotedString:
    """Any unquoted scalar: numbers, addresses, bare words."""

    text: str


@dataclass(frozen=True)
class Boolean:
    value: bool


@dataclass(frozen=True)
class Null:
    pass


Value = Union[Object, String, UnquotedString, Boolean, Null]


@dataclass(frozen=True)
class Key:
    """Bare flag such as ``disable``."""

    name: str


@dataclass(frozen=True)
class KeyValue:
    """Setting followed by a scalar or a nested object."""

    name: str
    value: Value


@dataclass(frozen=True)
class ObjectKeyValue:
    """
    Named instance of a category: ``ethernet eth0 { ... }``.

    Category and instance stay separate so the two-token header can be
    written back.
    """

    category: str
    instance: str
    value: Value

    def __post_init__(self):
        if not isinstance(self.value, Object):
            raise TypeError(
                f"Named instance '{self.category} {self.instance}' must hold an object, "
                f"got {type(self.value).__name__}"
            )

    @property
    def name(self) -> str:
        return self.category


ObjectValue = Union[Key, KeyValue, ObjectKeyValue]


@dataclass(frozen=True)
class File:
    """
    A parsed config.boot document.

    Attributes:
        values: Root value; an ``Object`` holding a single ``KeyValue``
            when produced by the parser.
        trailing_lines: The three opaque lines after the root object.
    """

    values: Value
    trailing_lines: tuple[str, ...]

    def __post_init__(self):
        object.__setattr__(self, "trailing_lines", tuple(self.trailing_lines))
        if len(self.trailing_lines) != TRAILING_LINE_COUNT:
            raise ValueError(
                f"Expected {TRAILING_LINE_COUNT} trailing lines, got {len(self.trailing_lines)}"
            )

    @property
    def root(self) -> Optional[ObjectValue]:
        """The first root entry, or None for a non-object root."""
        if isinstance(self.values, Object) and self.values.entries:
            return self.values.entries[0]
        return None

    def find(self, *path: str) -> Optional[ObjectValue]:
        """
        Follow entry names down from the root.

        Example:
            doc.find("interfaces", "ethernet")
        """
        current: Value = self.values
        found: Optional[ObjectValue] = None
        for name in path:
            if not isinstance(current, Object):
                return None
            found = current.get(name)
            if found is None:
                return None
            current = getattr(found, "value", Null())
        return found

    def serialize(self) -> str:
        """Render canonical config.boot text (see ``serialize_file``)."""
        from .serializer import serialize_file

        return serialize_file(self)
