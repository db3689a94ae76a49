from .option import (
    ArgRange,
    Callback,
    Option,
    OptionView,
    Switch,
    Valued,
    as_callback,
)

__all__ = [
    "ArgRange",
    "Callback",
    "Option",
    "OptionView",
    "Switch",
    "Valued",
    "as_callback",
]
