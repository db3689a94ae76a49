from .commands import CommandHandler, Commands

__all__ = [
    "CommandHandler",
    "Commands",
]
