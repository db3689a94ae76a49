from .strhelper import basename, numeric_range, split_string

__all__ = [
    "basename",
    "numeric_range",
    "split_string",
]
