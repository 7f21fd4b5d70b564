"""optlist — normalize loose name/value option lists into canonical entries."""

import logging

from .model import Absent, Entry, Kind, OptList, OptMap, is_structured, kind_of
from .errors import (
    DisallowedValueKindError,
    DuplicateNameError,
    OptListError,
    UnknownKindError,
)
from .canonical import canonicalize, expand
from .result import Err, Ok, try_canonicalize, try_expand
from .policy import OptListPolicy

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "canonicalize",
    "expand",
    "try_canonicalize",
    "try_expand",
    "Absent",
    "Entry",
    "Kind",
    "OptList",
    "OptMap",
    "kind_of",
    "is_structured",
    "Ok",
    "Err",
    "OptListPolicy",
    "OptListError",
    "DuplicateNameError",
    "DisallowedValueKindError",
    "UnknownKindError",
]
