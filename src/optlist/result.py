"""Ok / Err wrappers for callers that prefer explicit error returns."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Generic, TypeVar, Union

from .canonical import canonicalize, expand
from .errors import OptListError
from .model import KindSpec, OptList, OptMap

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value


@dataclass(frozen=True)
class Err:
    error: OptListError

    @property
    def is_ok(self) -> bool:
        return False

    def unwrap(self):
        """Re-raise the captured error."""
        raise self.error


Result = Union[Ok[T], Err]


def try_canonicalize(
    opt_list: Any,
    moniker: str | None = None,
    require_unique: bool = False,
    must_be: KindSpec | None = None,
) -> Result[OptList]:
    try:
        return Ok(canonicalize(opt_list, moniker, require_unique, must_be))
    except OptListError as exc:
        return Err(exc)


def try_expand(
    opt_list: Any,
    moniker: str | None = None,
    must_be: KindSpec | None = None,
) -> Result[OptMap]:
    try:
        return Ok(expand(opt_list, moniker, must_be))
    except OptListError as exc:
        return Err(exc)
