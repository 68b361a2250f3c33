from __future__ import annotations

import os
import typing as t

from functools import total_ordering

from .exceptions import InvalidArgument
from .functions import join, splitext
from .parser import CURDIR, PARDIR, normalize, render
from .separator import DEFAULT, SeparatorStrategy


PathLike = t.Union[str, os.PathLike, "PureBasePath"]


@total_ordering
class PureBasePath:
    """A lexical path value that never touches the filesystem.

    The path is normalized when it is created, so ``PureBasePath("abc")`` and
    ``PureBasePath("./abc/")`` are the same value. Comparison is lexical: it
    does not resolve symlinks or fold case, and ordering says nothing about
    the directory hierarchy.
    """

    __slots__ = ("_parts", "_strategy")

    def __init__(self, path: PathLike = CURDIR, *, strategy: SeparatorStrategy | None = None):
        if isinstance(path, PureBasePath) and strategy in (None, path._strategy):
            self._strategy = path._strategy
            self._parts = path._parts
        else:
            self._strategy = strategy or DEFAULT
            self._parts = normalize(os.fspath(path), self._strategy)

    def __eq__(self, other):
        if not isinstance(other, PureBasePath):
            return NotImplemented

        return self._parts == other._parts and self._strategy == other._strategy

    def __fspath__(self) -> str:
        return str(self)

    def __hash__(self):
        return hash((self._parts, self._strategy.sep))

    def __lt__(self, other):
        if not isinstance(other, PureBasePath):
            return NotImplemented

        return str(self) < str(other)

    def __repr__(self):
        return f"{type(self).__name__}({str(self)!r})"

    def __rtruediv__(self, other: str | os.PathLike) -> PureBasePath:
        try:
            return type(self)(other, strategy=self._strategy).joinpath(self)
        except TypeError:
            return NotImplemented

    def __str__(self):
        return render(self._parts, self._strategy)

    def __truediv__(self, other: PathLike) -> PureBasePath:
        try:
            return self.joinpath(other)
        except TypeError:
            return NotImplemented

    def _derive(self, parts: t.Iterable[str]) -> PureBasePath:
        path = object.__new__(type(self))
        path._strategy = self._strategy
        path._parts = tuple(parts)
        return path

    @property
    def _is_root(self) -> bool:
        return not self._parts or self._parts == (self._strategy.sep,)

    def is_absolute(self) -> bool:
        return bool(self._parts) and self._parts[0] == self._strategy.sep

    def joinpath(self, *others: PathLike) -> PureBasePath:
        """Join this path with other paths.

        An absolute path in ``others`` replaces everything to its left.
        """
        texts = [str(self)] + [os.fspath(other) for other in others]
        return type(self)(join(texts, self._strategy), strategy=self._strategy)

    @property
    def name(self) -> str:
        if self._is_root:
            return ""

        return self._parts[-1]

    @property
    def parent(self) -> PureBasePath:
        if self._is_root:
            return self

        return self._derive(self._parts[:-1])

    @property
    def parents(self) -> list[PureBasePath]:
        parents = []

        path = self
        while not path._is_root:
            path = path.parent
            parents.append(path)

        return parents

    @property
    def parts(self) -> tuple[str, ...]:
        return self._parts

    def relative_to(self, other: PathLike) -> PureBasePath:
        """Return this path relative to ``other``.

        ``other`` must be a leading part of this path, otherwise
        :class:`InvalidArgument` is raised. Every path is relative to the
        empty path ``"."``.
        """
        if not isinstance(other, PureBasePath):
            other = type(self)(other, strategy=self._strategy)

        count = len(other._parts)
        if self._parts[:count] != other._parts:
            raise InvalidArgument(f"{str(self)!r} is not relative to {str(other)!r}")

        return self._derive(self._parts[count:])

    @property
    def root(self) -> str:
        return self._strategy.sep if self.is_absolute() else ""

    @property
    def stem(self) -> str:
        name = self.name
        if name == PARDIR:
            return name

        stem, suffix = splitext(name)
        if suffix == ".":
            # a bare trailing dot is not an extension
            stem += suffix

        return stem

    @property
    def strategy(self) -> SeparatorStrategy:
        return self._strategy

    @property
    def suffix(self) -> str:
        name = self.name
        if name == PARDIR:
            return ""

        suffix = splitext(name)[1]
        return "" if suffix == "." else suffix

    @property
    def suffixes(self) -> list[str]:
        name = self.name
        if name.startswith(".") or name.endswith("."):
            return []

        return [f".{suffix}" for suffix in name.split(".")[1:]]

    def with_name(self, name: str) -> PureBasePath:
        if self._is_root:
            raise InvalidArgument(f"{str(self)!r} has an empty name")

        if name in (CURDIR, PARDIR) or not self._strategy.name_pattern().fullmatch(name):
            raise InvalidArgument(f"Invalid name {name!r}")

        return self._derive(self._parts[:-1] + (name,))

    def with_suffix(self, suffix: str) -> PureBasePath:
        if not self._strategy.suffix_pattern().fullmatch(suffix):
            raise InvalidArgument(f"Invalid suffix {suffix!r}")

        return self.with_name(self.stem + suffix)
