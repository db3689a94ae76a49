from ..option import ArgRange
from ..prelude import *
from ..usage import ConfigError, UsageError

C = TypeVar("C")

CommandHandler = Callable[[C, ArgRange], Any]


class Commands(Generic[C]):
    """
    Dispatches on the first word of the command line:

        commands = Commands[Context]("prog")
        commands.command("list", main_list).command("show", main_show)
        commands.parse(context, sys.argv, 1)

    The handler is called with the context and the arguments after the command word.
    """

    program: str
    _commands: Dict[str, CommandHandler[C]]

    def __init__(self, program: str = "") -> None:
        self.program = program
        self._commands = {}

    def command(self, name: str, f: CommandHandler[C]) -> "Commands[C]":
        if not name:
            raise ConfigError("command name must not be empty")

        if name in self._commands:
            raise ConfigError("duplicate command", name=name)

        self._commands[name] = f
        return self

    def names(self) -> List[str]:
        return list(self._commands)

    def parse(self, context: C, argv: Sequence[str], start: int = 0) -> Any:
        if start >= len(argv):
            LOG.debug("no command given")
            self.usage()

        name = argv[start]
        f = self._commands.get(name)
        if f is None:
            LOG.debug("unknown command: %s", name)
            self.usage()

        return f(context, ArgRange(argv=argv, start=start + 1, end=len(argv)))

    def help(self) -> List[str]:
        prefix = f"{self.program} " if self.program else ""
        return [prefix + name for name in self._commands]

    def usage(self) -> NoReturn:
        raise UsageError(self.help())
