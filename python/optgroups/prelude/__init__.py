import dataclasses
import inspect
import logging
import os
import re
import sys
from dataclasses import dataclass
from typing import (
    Any,
    Callable,
    Dict,
    Generic,
    Iterator,
    List,
    NoReturn,
    Optional,
    Sequence,
    Set,
    Tuple,
    TypeVar,
    Union,
)

from .prelude import (
    KgError,
    StrDict,
    SupportsWrite,
    impossible,
    override,
    pluralize,
)

LOG = logging.getLogger("optgroups")
del logging

__all__ = [
    "dataclasses",
    "inspect",
    "os",
    "re",
    "sys",
    "dataclass",
    "Any",
    "Callable",
    "Dict",
    "Generic",
    "Iterator",
    "List",
    "NoReturn",
    "Optional",
    "Sequence",
    "Set",
    "Tuple",
    "TypeVar",
    "Union",
    "override",
    "KgError",
    "StrDict",
    "SupportsWrite",
    "impossible",
    "pluralize",
    "LOG",
]
