import logging
import textwrap
import traceback

from .. import colors
from ..prelude import *
from ..strhelper import basename
from ..usage import UsageError

Main = Callable[[List[str]], Any]


def program_name(argv: Optional[List[str]] = None) -> str:
    if argv is None:
        argv = sys.argv

    env_program_name = os.environ.get("OPTGROUPS_PROGRAM_NAME", "")
    if env_program_name:
        return env_program_name

    return basename(argv[0]) if argv else ""


def dispatch(
    main: Main,
    *,
    argv: Optional[List[str]] = None,
    bail_on_error: bool = True,
    log_init: Optional[Callable[[int], None]] = None,
) -> Any:
    """
    Runs `main` on the command-line arguments (without the program name).

    A `UsageError` raised by `main` is printed to stderr and the process exits with status 1.
    A `KgError`, e.g. a `ConfigError` from a bad option declaration, is reported with its
    traceback. With `bail_on_error=False`, both propagate to the caller instead.
    """
    if argv is None:
        argv = sys.argv

    if log_init is not None:
        log_init(log_level())

    try:
        return main(argv[1:])
    except UsageError as e:
        if not bail_on_error:
            raise e

        if e.error:
            colors.error(e.error)
        colors.eprint(e.usage)
        sys.exit(1)
    except KgError as e:
        if not bail_on_error:
            raise e

        colors.eprint(traceback.format_exc(), end="", flush=True)
        colors.eprint()
        colors.eprint("The command failed due to a Python exception.")
        colors.eprint()
        colors.eprint(textwrap.indent(e.to_human_str(), prefix="  "))
        colors.eprint()
        sys.exit(1)


def log_level() -> int:
    env_log_level = os.environ.get("OPTGROUPS_LOG_LEVEL", "").lower()
    if not env_log_level:
        return logging.WARN

    if env_log_level == "error":
        return logging.ERROR
    elif env_log_level in ("warn", "warning"):
        return logging.WARN
    elif env_log_level == "info":
        return logging.INFO
    elif env_log_level == "debug":
        return logging.DEBUG
    else:
        raise KgError("unknown log level", s=env_log_level)
