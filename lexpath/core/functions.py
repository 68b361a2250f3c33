"""Path manipulation on plain strings, in the manner of :mod:`os.path`."""

from __future__ import annotations

import os
import typing as t

from .filesystem import FileSystemProbe, local
from .parser import normalize, render
from .separator import DEFAULT, SeparatorStrategy


def join(parts: t.Iterable[str], strategy: SeparatorStrategy = DEFAULT) -> str:
    """Join path segments into a complete path.

    A separator is added between segments as needed but separators already in
    a segment are left alone, so ``join(["/abc//", "xyz"])`` is
    ``"/abc//xyz"``. An absolute segment discards everything before it, and an
    empty final segment leaves the result with a trailing separator.
    """
    sep = strategy.sep
    parts = list(parts)

    joined = ""
    for i, part in enumerate(parts):
        if part.startswith(sep):
            joined = part
        else:
            joined += part

        if not joined.endswith(sep) and i != len(parts) - 1:
            joined += sep

    return joined


def split(path: str, strategy: SeparatorStrategy = DEFAULT) -> tuple[str, str]:
    """Split a path into directory and name components.

    If the path has a trailing separator the name is empty. Joining the two
    halves gives back an equivalent but not necessarily identical path.
    """
    sep = strategy.sep

    pos = path.rfind(sep)
    if pos < 0:
        return "", path

    pos += len(sep)
    head, tail = path[:pos], path[pos:]
    if head.strip(sep):
        # strip trailing separators unless this is the root directory
        head = head.rstrip(sep)

    return head, tail


def dirname(path: str, strategy: SeparatorStrategy = DEFAULT) -> str:
    return split(path, strategy)[0]


def basename(path: str, strategy: SeparatorStrategy = DEFAULT) -> str:
    return split(path, strategy)[1]


def normpath(path: str, strategy: SeparatorStrategy = DEFAULT) -> str:
    return render(normalize(path, strategy), strategy)


def abspath(path: str, strategy: SeparatorStrategy = DEFAULT) -> str:
    """Return the normalized path, joined to the working directory if relative."""
    if isabs(path, strategy):
        return normpath(path, strategy)

    return normpath(join([os.getcwd(), path], strategy), strategy)


def isabs(path: str, strategy: SeparatorStrategy = DEFAULT) -> bool:
    return path.startswith(strategy.sep)


def splitext(path: str) -> tuple[str, str]:
    """Split a path into a root and an extension.

    The last dot anywhere in ``path`` starts the extension, unless it is the
    very first character.
    """
    pos = path.rfind(".")
    if pos <= 0:
        return path, ""

    return path[:pos], path[pos:]


def exists(path: str, probe: FileSystemProbe = local) -> bool:
    return probe.exists(path)


def isfile(path: str, probe: FileSystemProbe = local) -> bool:
    return probe.is_file(path)


def isdir(path: str, probe: FileSystemProbe = local) -> bool:
    return probe.is_dir(path)


def islink(path: str, probe: FileSystemProbe = local) -> bool:
    return probe.is_symlink(path)
