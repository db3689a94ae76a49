from ..prelude import *


class ConfigError(KgError):
    """Raised at registration time, e.g. for inconsistent positional bounds."""


class ArgumentError(Exception):
    # Recoverable: the parser tries the next group when an attempt raises this.
    pass


class UsageError(Exception):
    error: Optional[str]
    lines: List[str]

    def __init__(self, lines: List[str], error: Optional[str] = None) -> None:
        super().__init__(format_usage(lines, error=error))
        self.error = error
        self.lines = lines

    @property
    def usage(self) -> str:
        return format_usage(self.lines)


USAGE_PREFIX = "usage: "


def format_usage(lines: List[str], *, error: Optional[str] = None) -> str:
    """
    Formats usage lines like:

        missing required argument: --out
        usage: prog --out <value> <arg>
               prog --help

    """
    builder: List[str] = []
    if error:
        builder.append(error)

    indent = " " * len(USAGE_PREFIX)
    for i, line in enumerate(lines):
        builder.append((USAGE_PREFIX if i == 0 else indent) + line)

    return "\n".join(builder)


def usage_line(
    program: str, fragments: List[str], min_args: int, max_args: Optional[int]
) -> str:
    # `max_args is None` means any number of positional arguments.
    parts: List[str] = []
    if program:
        parts.append(program)

    parts.extend(fragments)
    parts.extend(["<arg>"] * min_args)

    if max_args is None:
        parts.append("[<arg>...]")
    elif max_args > min_args:
        optional = "[<arg>]"
        for _ in range(max_args - min_args - 1):
            optional = f"[<arg> {optional}]"
        parts.append(optional)

    return " ".join(parts)


def raise_usage(
    *lines: str, program: str = "", error: Optional[str] = None
) -> NoReturn:
    """
    Aborts with a hand-written usage message, e.g. from a command handler that takes no
    options of its own.
    """
    prefix = f"{program} " if program else ""
    raise UsageError([prefix + line for line in lines], error=error)
