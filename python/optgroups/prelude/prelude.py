from typing import Any, Dict, List, NoReturn, Protocol

from typing_extensions import override


StrDict = Dict[str, Any]


class SupportsWrite(Protocol):
    def write(self, s: str, /) -> int: ...


class KgError(Exception):
    _values: StrDict

    def __init__(self, msg: str, **values: Any) -> None:
        super().__init__(msg, values)
        self._values = values

    def to_human_str(self) -> str:
        builder: List[str] = []
        builder.append(f"{self.args[0]}")
        for key, value in self._values.items():
            builder.append(f"  {key}: {value!r}")
        return "\n".join(builder)

    @override
    def __str__(self) -> str:
        if not self._values:
            return self.args[0]

        values = ", ".join(f"{key}={value!r}" for key, value in self._values.items())
        return f"{self.args[0]} ({values})"


def pluralize(n: int, word: str, plural: str = "") -> str:
    if not plural:
        plural = word + "s"
    return f"{n:,} {word}" if n == 1 else f"{n:,} {plural}"


def impossible() -> NoReturn:
    raise Exception("This code path should never be reached.")
