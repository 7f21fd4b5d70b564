"""Exceptions raised while normalizing option lists."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Iterable

if TYPE_CHECKING:
    from .model import Kind

DEFAULT_MONIKER = "unnamed"


class OptListError(ValueError):
    """Base class for all option-list normalization failures."""

    def __init__(self, message: str, moniker: str | None = None) -> None:
        super().__init__(message)
        self.moniker = moniker


class DuplicateNameError(OptListError):
    def __init__(self, name: Any, moniker: str | None = None) -> None:
        super().__init__(
            f"multiple definitions provided for {name} in {moniker or DEFAULT_MONIKER} opt list",
            moniker,
        )
        self.name = name


class DisallowedValueKindError(OptListError):
    def __init__(
        self,
        kind: Kind,
        allowed: Iterable[Kind] = (),
        moniker: str | None = None,
    ) -> None:
        super().__init__(
            f"{kind.name} values are not valid in {moniker or DEFAULT_MONIKER} opt list",
            moniker,
        )
        self.kind = kind
        self.allowed = frozenset(allowed)


class UnknownKindError(OptListError):
    """Raised when a ``must_be`` kind name does not match any Kind."""

    def __init__(self, name: Any) -> None:
        super().__init__(f"unknown value kind {name!r}")
        self.name = name
