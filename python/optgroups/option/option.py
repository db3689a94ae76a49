"""
The option model: a named switch or value-bearing flag registered in a group.

An option's callback decides which kind it is. A callback taking no arguments makes a switch
(`--verbose`); a callback taking one argument makes a value option (`--print x` or
`--print=x`), and is passed a read-only `OptionView` of the match to read `value` from.
"""

from ..prelude import *
from ..usage import ConfigError


@dataclass(frozen=True)
class Switch:
    f: Callable[[], Any]


@dataclass(frozen=True)
class Valued:
    f: Callable[["OptionView"], Any]


Callback = Union[Switch, Valued]


def as_callback(f: Any) -> Callback:
    """
    Tags a plain callable as a `Switch` or a `Valued` callback according to its signature.

    Callables that are already tagged are returned unchanged.
    """
    if isinstance(f, (Switch, Valued)):
        return f

    if not callable(f):
        raise ConfigError("option callback is not callable", callback=f)

    try:
        sig = inspect.signature(f)
    except (TypeError, ValueError):
        raise ConfigError(
            "cannot inspect option callback; wrap it in `Switch` or `Valued`",
            callback=f,
        ) from None

    positional = [
        param
        for param in sig.parameters.values()
        if param.kind
        in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
        and param.default is inspect.Parameter.empty
    ]
    match len(positional):
        case 0:
            return Switch(f)
        case 1:
            return Valued(f)
        case n:
            raise ConfigError(
                "option callback must take zero or one arguments", callback=f, n=n
            )


@dataclass(frozen=True)
class OptionView:
    name: str
    required: bool
    is_value_option: bool
    matched: bool
    value: str


class Option:
    _name: str
    _required: bool
    _callback: Callback
    # `matched` and `value` belong to the current parse attempt; see `reset`.
    matched: bool
    value: str

    def __init__(self, name: str, required: bool, callback: Callback) -> None:
        self._name = name
        self._required = required
        self._callback = callback
        self.matched = False
        self.value = ""

    @property
    def name(self) -> str:
        return self._name

    @property
    def required(self) -> bool:
        return self._required

    @property
    def callback(self) -> Callback:
        return self._callback

    @property
    def is_value_option(self) -> bool:
        return isinstance(self._callback, Valued)

    def view(self) -> OptionView:
        return OptionView(
            name=self._name,
            required=self._required,
            is_value_option=self.is_value_option,
            matched=self.matched,
            value=self.value,
        )

    def reset(self) -> None:
        self.matched = False
        self.value = ""

    def exec(self) -> None:
        match self._callback:
            case Switch(f):
                f()
            case Valued(f):
                f(self.view())
            case _:
                impossible()

    def help_fragment(self) -> str:
        fragment = f"{self.name} <value>" if self.is_value_option else self.name
        return fragment if self.required else f"[{fragment}]"

    @override
    def __repr__(self) -> str:
        return (
            f"Option(name={self._name!r}, required={self._required!r}, "
            f"matched={self.matched!r}, value={self.value!r})"
        )


@dataclass(frozen=True)
class ArgRange:
    """
    The tokens `argv[start:end]`, without copying `argv`.

    `Program.parse` returns one of these to mark the positional arguments left over after the
    options were consumed.
    """

    argv: Sequence[str]
    start: int
    end: int

    def __len__(self) -> int:
        return self.end - self.start

    def __iter__(self) -> Iterator[str]:
        for i in range(self.start, self.end):
            yield self.argv[i]

    def __getitem__(self, i: int) -> str:
        if i < 0:
            i += len(self)

        if not 0 <= i < len(self):
            raise IndexError(i)

        return self.argv[self.start + i]

    @property
    def empty(self) -> bool:
        return self.start == self.end

    def to_list(self) -> List[str]:
        return list(self)
