from .dispatch import Main, dispatch, log_level, program_name

__all__ = [
    "Main",
    "dispatch",
    "log_level",
    "program_name",
]
