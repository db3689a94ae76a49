from ..prelude import *


def split_string(s: str, delim: str, *, include_empties: bool = False) -> List[str]:
    """
    Splits `s` at every `delim`.

    Unless `include_empties` is true, consecutive delimiters are folded into one and no empty
    strings are returned.
    """
    parts = s.split(delim)
    if include_empties:
        return parts

    return [part for part in parts if part]


def numeric_range(s: str, min: int, max: int) -> Set[int]:
    """
    Parses a description of a set of numbers like `1,3-5,8-`.

    Open-ended ranges take their missing end from `min` (`-3`) or `max` (`8-`).
    """
    result: Set[int] = set()
    for part in split_string(s, ","):
        bounds = split_string(part, "-", include_empties=True)
        if len(bounds) > 2:
            raise KgError("bad range", s=s)

        first = _parse_bound(bounds[0], default=min, s=s)
        if len(bounds) == 2:
            last = _parse_bound(bounds[1], default=max, s=s)
            result.update(range(first, last + 1))
        else:
            result.add(first)

    return result


def _parse_bound(bound: str, *, default: int, s: str) -> int:
    if not bound:
        return default

    try:
        return int(bound)
    except ValueError:
        raise KgError("bad number in range", s=s, number=bound) from None


def basename(path: str) -> str:
    # `os.path.basename` would return '' for a trailing slash
    return split_string(path, "/")[-1] if path.strip("/") else path
