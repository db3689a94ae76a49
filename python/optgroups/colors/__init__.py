from .colors import (
    eprint_ as eprint,
    error,
    print_ as print,
    red,
    strip,
)

__all__ = [
    "eprint",
    "error",
    "print",
    "red",
    "strip",
]
