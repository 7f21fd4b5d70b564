"""Canonicalizer: loose name/value lists → ordered (name, value) entries."""

from __future__ import annotations

import logging
from collections.abc import Hashable, Iterable, Mapping
from typing import Any

from .errors import DisallowedValueKindError, DuplicateNameError
from .model import (
    Absent,
    Entry,
    KindSpec,
    OptList,
    OptMap,
    is_absent,
    is_structured,
    kind_of,
    normalize_kinds,
)

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Public entry points
# ---------------------------------------------------------------------------

def canonicalize(
    opt_list: Any,
    moniker: str | None = None,
    require_unique: bool = False,
    must_be: KindSpec | None = None,
) -> OptList:
    """Normalize *opt_list* into a list of :class:`Entry` pairs.

    Every name is a scalar; a name directly followed by a structured value
    (sequence, mapping, set, callable or other object) takes it as its value.
    Any other name gets :data:`Absent`::

        canonicalize(["a", "b", [1, 2]])
        → [Entry("a", Absent), Entry("b", [1, 2])]

    A ``None`` (or ``Absent``) following a name is consumed as an explicit
    "no value" marker.  Mapping input keeps each key and drops non-structured
    values.

    *moniker* only labels error messages.  With *require_unique* a repeated
    name raises :class:`DuplicateNameError`; with *must_be* a value whose kind
    is not accepted raises :class:`DisallowedValueKindError`.
    """
    if is_absent(opt_list) or not opt_list:
        return []

    allowed = normalize_kinds(must_be)
    items = _as_items(opt_list)

    result: OptList = []
    seen: set[Any] = set()
    last = len(items) - 1
    i = 0

    while i <= last:
        name = items[i]

        if require_unique:
            key = _seen_key(name)
            if key in seen:
                logger.debug("duplicate name %r in %s opt list", name, moniker)
                raise DuplicateNameError(name, moniker)
            seen.add(key)

        if i == last:
            value = Absent
        elif is_absent(items[i + 1]):
            value = Absent
            i += 1
        elif is_structured(items[i + 1]):
            i += 1
            value = items[i]
        else:
            value = Absent

        if allowed is not None and value is not Absent:
            kind = kind_of(value)
            if kind not in allowed:
                logger.debug("rejected %s value for %r in %s opt list", kind.name, name, moniker)
                raise DisallowedValueKindError(kind, allowed, moniker)

        result.append(Entry(name, value))
        i += 1

    return result


def expand(
    opt_list: Any,
    moniker: str | None = None,
    must_be: KindSpec | None = None,
) -> OptMap:
    """Canonicalize *opt_list* with unique names and fold it into a dict."""
    if is_absent(opt_list) or not opt_list:
        return {}
    entries = canonicalize(opt_list, moniker, True, must_be)
    return {entry.name: entry.value for entry in entries}


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _as_items(opt_list: Any) -> list[Any]:
    """Flatten mapping input, or materialize sequence input, into a list."""
    if isinstance(opt_list, Mapping):
        items: list[Any] = []
        for key, value in opt_list.items():
            # Every key gets a value slot so a structured key is never read as a value
            items.append(key)
            items.append(value if is_structured(value) else Absent)
        return items
    if isinstance(opt_list, (str, bytes, bytearray)) or not isinstance(opt_list, Iterable):
        raise TypeError(
            f"opt list must be a mapping or a sequence, not {type(opt_list).__name__}"
        )
    return list(opt_list)


def _seen_key(name: Any) -> Any:
    # Unhashable names (structured values in a name slot) compare by identity
    if isinstance(name, Hashable):
        try:
            hash(name)
        except TypeError:
            pass
        else:
            return name
    return ("<id>", id(name))
