"""
Group-based option parser.

A `Program` holds an ordered list of alternative groups. Each group is a set of options plus
the number of positional arguments it accepts. `Program.parse` tries the groups in the order
they were declared and the first one that accepts the command line wins:

    options = {}
    program = Program("prog")
    program.optional("--verbose", lambda: options.update(verbose=True))
    program.required("--out", lambda o: options.update(out=o.value)).args(1)
    program.optional("--help", program.usage)
    rest = program.parse(sys.argv, 1)

Option mistakes (an unknown option, a missing value) make the parser fall back to the next
group; if no group matches, the first such mistake is reported together with the usage lines
of every group. A wrong number of positional arguments is reported immediately.
"""

from ..option import ArgRange, Option, as_callback
from ..prelude import *
from ..usage import ArgumentError, ConfigError, UsageError, usage_line

OPTION_MARKER = "-"
END_OF_OPTIONS = "--"


@dataclass
class Group:
    options: Dict[str, Option]
    min_args: int
    # `None` means unbounded.
    max_args: Optional[int]

    def find(self, token: str) -> Optional[Tuple[Option, Optional[str]]]:
        """
        Looks up `token` as an option name, or as `name=value`.

        Returns the option and its inline value, which is `None` unless the `=` form was used.
        """
        option = self.options.get(token)
        if option is not None:
            return option, None

        if "=" in token:
            name, value = token.split("=", maxsplit=1)
            option = self.options.get(name)
            if option is not None:
                return option, value

        return None

    def sorted_options(self) -> List[Option]:
        return [self.options[name] for name in sorted(self.options)]

    def reset(self) -> None:
        for option in self.options.values():
            option.reset()

    def accepts(self, count: int) -> bool:
        if count < self.min_args:
            return False

        return self.max_args is None or count <= self.max_args


class GroupBuilder:
    _options: Dict[str, Option]
    _min_args: Optional[int]
    _max_args: Optional[int]
    _bounded: bool

    def __init__(self) -> None:
        self._options = {}
        self._min_args = None
        self._max_args = None
        self._bounded = False

    def add(self, option: Option) -> None:
        if not option.name:
            raise ConfigError("option name must not be empty")

        if option.name in self._options:
            raise ConfigError("duplicate option in group", name=option.name)

        self._options[option.name] = option

    def bounds(self, min_args: Optional[int], max_args: Optional[int]) -> None:
        if min_args is None and max_args is not None:
            raise ConfigError(
                "maximum number of arguments given without a minimum", max=max_args
            )

        if min_args is not None and min_args < 0:
            raise ConfigError("minimum number of arguments is negative", min=min_args)

        if min_args is not None and max_args is not None and min_args > max_args:
            raise ConfigError(
                "minimum number of arguments exceeds the maximum",
                min=min_args,
                max=max_args,
            )

        self._min_args = min_args
        self._max_args = max_args
        self._bounded = True

    def is_empty(self) -> bool:
        return not self._options and not self._bounded

    def build(self) -> Group:
        if self._min_args is None:
            # no positional arguments unless they were declared
            min_args, max_args = 0, 0
        else:
            min_args, max_args = self._min_args, self._max_args

        return Group(options=dict(self._options), min_args=min_args, max_args=max_args)


class Program:
    program: str
    _groups: List[Group]
    _group: GroupBuilder
    _errors: List[str]

    def __init__(self, program: str = "") -> None:
        self.program = program
        self._groups = []
        self._group = GroupBuilder()
        self._errors = []

    def required(self, name: str, f: Any) -> "Program":
        """
        Adds a required option to the current group.

        `f` takes no arguments for a switch. For an option that takes a value, it is passed an
        `OptionView` of the match.
        """
        self._group.add(Option(name=name, required=True, callback=as_callback(f)))
        return self

    def optional(self, name: str, f: Any) -> "Program":
        self._group.add(Option(name=name, required=False, callback=as_callback(f)))
        return self

    def group(self) -> "Program":
        """Ends the current group; later options go into a new alternative group."""
        self._groups.append(self._group.build())
        self._group = GroupBuilder()
        return self

    def args(
        self, min_args: Optional[int] = None, max_args: Optional[int] = None
    ) -> "Program":
        """
        Sets the positional arguments accepted by the current group and ends it.

        `args()` accepts none, `args(n)` accepts at least `n`, and `args(n, m)` accepts between
        `n` and `m`.
        """
        self._group.bounds(min_args, max_args)
        return self.group()

    @property
    def errors(self) -> List[str]:
        return list(self._errors)

    def parse(self, argv: Sequence[str], start: int = 0) -> ArgRange:
        """
        Parses `argv[start:]` and returns the positional arguments left after the options.

        The callbacks of the matched options are called, in command-line order, only once a
        group has accepted the whole command line.
        """
        if not self._group.is_empty() or not self._groups:
            self.group()

        self._errors = []
        for i, group in enumerate(self._groups):
            LOG.debug("trying option group %d of %d", i + 1, len(self._groups))
            try:
                rest = self._parse_group(group, argv, start)
            except ArgumentError as e:
                LOG.debug("option group %d failed: %s", i + 1, e)
                self._errors.append(str(e))
            else:
                LOG.debug("option group %d matched", i + 1)
                return rest

        self.usage(self._errors[0])

    def help(self) -> List[str]:
        groups = list(self._groups)
        if not self._group.is_empty() or not groups:
            groups.append(self._group.build())

        return [
            usage_line(
                self.program,
                [option.help_fragment() for option in group.sorted_options()],
                group.min_args,
                group.max_args,
            )
            for group in groups
        ]

    def usage(self, error: Optional[str] = None) -> NoReturn:
        """
        Raises a `UsageError` listing every group, e.g. from the callback of a `--help` option.
        """
        raise UsageError(self.help(), error=error)

    def _parse_group(self, group: Group, argv: Sequence[str], start: int) -> ArgRange:
        group.reset()
        # an option can be repeated, so each match records its own value
        matches: List[Tuple[Option, str]] = []
        pending: Optional[Option] = None

        index = start
        end = len(argv)
        while index < end:
            token = argv[index]
            if pending is not None:
                pending.value = token
                pending.matched = True
                matches.append((pending, token))
                pending = None
                index += 1
                continue

            found = group.find(token)
            if found is not None:
                option, inline_value = found
                if option.is_value_option:
                    if inline_value is not None:
                        option.value = inline_value
                        option.matched = True
                        matches.append((option, inline_value))
                    else:
                        pending = option
                else:
                    if inline_value is not None:
                        raise ArgumentError(f"illegal option value: {token}")

                    option.matched = True
                    matches.append((option, ""))
                index += 1
            elif token == END_OF_OPTIONS:
                index += 1
                break
            elif token.startswith(OPTION_MARKER):
                raise ArgumentError(f"unknown option: {token}")
            else:
                break

        if pending is not None:
            raise ArgumentError(f"missing option value: {pending.name}")

        for option in group.sorted_options():
            if option.required and not option.matched:
                raise ArgumentError(f"missing required argument: {option.name}")

        if not group.accepts(end - index):
            LOG.debug(
                "wrong number of arguments: %s (min: %d, max: %s)",
                pluralize(end - index, "argument"),
                group.min_args,
                group.max_args,
            )
            self.usage()

        for option, value in matches:
            option.value = value
            option.exec()

        return ArgRange(argv=argv, start=index, end=end)
