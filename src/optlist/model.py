"""Data model for option lists: the Absent sentinel, value kinds and entries."""

from __future__ import annotations

import enum
import numbers
from collections.abc import Iterable, Mapping, Sequence, Set
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Iterator

from .errors import UnknownKindError


# ---------------------------------------------------------------------------
# Absent — singleton for "no value"
# ---------------------------------------------------------------------------

class _AbsentType:
    """Sentinel stored as the value of a name that was given no value."""

    _instance: _AbsentType | None = None

    def __new__(cls) -> _AbsentType:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "Absent"

    def __bool__(self) -> bool:
        return False

    def __reduce__(self) -> str:
        return "Absent"


Absent = _AbsentType()


# ---------------------------------------------------------------------------
# Kind
# ---------------------------------------------------------------------------

class Kind(Enum):
    Absent = auto()
    Scalar = auto()
    Sequence = auto()
    Mapping = auto()
    Set = auto()
    Callable = auto()
    Object = auto()

    @property
    def structured(self) -> bool:
        return self not in (Kind.Absent, Kind.Scalar)

    @classmethod
    def parse(cls, name: Any) -> Kind:
        """Look up a kind by enum name or reference-type alias.

        ``"sequence"``, ``"Mapping"`` and aliases such as ``"ARRAY"``,
        ``"HASH"`` and ``"CODE"`` are all accepted, case-insensitively.
        """
        kind = None
        if isinstance(name, str):
            kind = _KIND_ALIASES.get(name.strip().upper())
        if kind is None:
            raise UnknownKindError(name)
        return kind


_KIND_ALIASES: dict[str, Kind] = {k.name.upper(): k for k in Kind}
_KIND_ALIASES.update({
    "ARRAY": Kind.Sequence,
    "LIST": Kind.Sequence,
    "HASH": Kind.Mapping,
    "DICT": Kind.Mapping,
    "CODE": Kind.Callable,
    "FUNCTION": Kind.Callable,
    "FROZENSET": Kind.Set,
    "RECORD": Kind.Object,
})

_SCALAR_TYPES = (str, bytes, bytearray, numbers.Number, enum.Enum)


def kind_of(value: Any) -> Kind:
    """Classify *value* into one of the closed set of kinds."""
    if value is None or value is Absent:
        return Kind.Absent
    if isinstance(value, _SCALAR_TYPES):
        return Kind.Scalar
    if isinstance(value, Mapping):
        return Kind.Mapping
    if isinstance(value, Set):
        return Kind.Set
    if isinstance(value, Sequence):
        return Kind.Sequence
    if callable(value):
        return Kind.Callable
    return Kind.Object


def is_structured(value: Any) -> bool:
    return kind_of(value).structured


def is_absent(value: Any) -> bool:
    return value is None or value is Absent


KindSpec = Kind | str | Iterable[Kind | str]


def normalize_kinds(must_be: KindSpec | None) -> frozenset[Kind] | None:
    """Turn a ``must_be`` argument into a set of accepted kinds.

    ``None`` (or an empty string) means "any structured value" and gives
    ``None`` back.  A single kind (or kind name) and a one-element collection
    of it give the same result.  An empty collection accepts nothing.
    """
    if must_be is None or must_be == "":
        return None
    if isinstance(must_be, (Kind, str)):
        must_be = [must_be]
    return frozenset(k if isinstance(k, Kind) else Kind.parse(k) for k in must_be)


# ---------------------------------------------------------------------------
# Entry
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class Entry:
    name: Any
    value: Any = Absent

    def __iter__(self) -> Iterator[Any]:
        # Unpacks like a (name, value) pair
        yield self.name
        yield self.value

    def __repr__(self) -> str:
        return f"Entry({self.name!r}, {self.value!r})"


OptList = list[Entry]
OptMap = dict[Any, Any]
