"""OptListPolicy — reusable settings for canonicalizing one kind of opt list."""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from .canonical import canonicalize, expand
from .errors import DEFAULT_MONIKER, OptListError
from .model import Kind, OptList, OptMap, normalize_kinds

_CONFIG_KEYS = {
    "moniker": "moniker",
    "require_unique": "require_unique",
    "unique": "require_unique",
    "must_be": "must_be",
}


@dataclass(frozen=True)
class OptListPolicy:
    """Bundles a moniker, a uniqueness flag and the accepted value kinds.

    Usage::

        imports = OptListPolicy("import", require_unique=True, must_be="mapping")
        imports.canonicalize(["json", "yaml", {"safe": True}])
        imports.expand({"json": None})

    ``must_be`` is normalized to a ``frozenset`` of :class:`Kind` on
    construction, so a bad kind name fails here rather than on first use.
    """

    moniker: str = DEFAULT_MONIKER
    require_unique: bool = False
    must_be: frozenset[Kind] | None = field(default=None)

    def __post_init__(self) -> None:
        # Frozen: bypass __setattr__ to store the normalized kinds
        object.__setattr__(self, "must_be", normalize_kinds(self.must_be))

    # -- Normalization --------------------------------------------------

    def canonicalize(self, opt_list: Any) -> OptList:
        return canonicalize(opt_list, self.moniker, self.require_unique, self.must_be)

    def expand(self, opt_list: Any) -> OptMap:
        return expand(opt_list, self.moniker, self.must_be)

    # -- Construction helpers -------------------------------------------

    def replace(self, **changes: Any) -> OptListPolicy:
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_mapping(cls, config: Mapping[str, Any]) -> OptListPolicy:
        """Build a policy from a plain config mapping (e.g. parsed JSON).

        Recognized keys: ``moniker``, ``require_unique`` (or ``unique``) and
        ``must_be``.  Unknown keys raise :class:`OptListError`.
        """
        kwargs: dict[str, Any] = {}
        for key, value in config.items():
            target = _CONFIG_KEYS.get(key)
            if target is None:
                raise OptListError(f"unknown opt list policy setting {key!r}")
            kwargs[target] = value
        if "require_unique" in kwargs:
            kwargs["require_unique"] = bool(kwargs["require_unique"])
        return cls(**kwargs)

    def describe(self) -> dict[str, Any]:
        """Return the settings as plain, display-friendly values."""
        kinds = None
        if self.must_be is not None:
            kinds = sorted(k.name for k in self.must_be)
        return {
            "moniker": self.moniker,
            "require_unique": self.require_unique,
            "must_be": kinds,
        }
