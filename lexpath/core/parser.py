from __future__ import annotations

import typing as t

from .exceptions import InvalidArgument
from .separator import DEFAULT, SeparatorStrategy


CURDIR = "."
PARDIR = ".."


def split_segments(text: str, sep: str) -> list[str]:
    if not sep:
        raise InvalidArgument("empty separator")

    return text.split(sep)


def normalize(text: str, strategy: SeparatorStrategy = DEFAULT) -> tuple[str, ...]:
    """Parse ``text`` into normalized path segments.

    Empty and ``.`` segments are dropped and every ``..`` that follows a real
    segment cancels it. A leading ``..`` is kept for a relative path, since it
    points above an unknown starting directory, and dropped for an absolute
    one, since nothing is above the root. An absolute path is marked by the
    separator itself at index 0.
    """
    sep = strategy.sep
    is_absolute = text.startswith(sep)

    parts: list[str] = []
    for segment in split_segments(text, sep):
        if not segment or segment == CURDIR:
            continue

        if segment == PARDIR:
            if parts and parts[-1] != PARDIR:
                parts.pop()
            elif not is_absolute:
                parts.append(PARDIR)
            continue

        parts.append(segment)

    if is_absolute:
        parts.insert(0, sep)

    return tuple(parts)


def render(parts: t.Sequence[str], strategy: SeparatorStrategy = DEFAULT) -> str:
    sep = strategy.sep

    if not parts:
        return CURDIR
    elif parts[0] == sep:
        return sep + sep.join(parts[1:])
    else:
        return sep.join(parts)
