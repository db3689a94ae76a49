from .commands import Commands
from .dispatch import dispatch, program_name
from .option import ArgRange, Option, OptionView, Switch, Valued
from .program import Program
from .usage import ConfigError, UsageError, raise_usage

__all__ = [
    "ArgRange",
    "Commands",
    "ConfigError",
    "Option",
    "OptionView",
    "Program",
    "Switch",
    "UsageError",
    "Valued",
    "dispatch",
    "program_name",
    "raise_usage",
]
