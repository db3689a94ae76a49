from .program import Group, GroupBuilder, Program

__all__ = [
    "Group",
    "GroupBuilder",
    "Program",
]
