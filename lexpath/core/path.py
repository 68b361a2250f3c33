from __future__ import annotations

import contextlib
import logging
import os
import typing as t

from functools import total_ordering

from .exceptions import InvalidArgument, OSFailure
from .filesystem import FileSystem, local
from .parser import CURDIR
from .pure import PathLike, PureBasePath
from .separator import SeparatorStrategy


logger = logging.getLogger("lexpath")


@contextlib.contextmanager
def _os_failure(path: str):
    try:
        yield
    except OSFailure:
        raise
    except OSError as e:
        failure = OSFailure.from_error(e, path)
        logger.debug("%s", failure)
        raise failure from e


@total_ordering
class Path:
    """A path that can be used to access the filesystem.

    A ``Path`` wraps a :class:`PureBasePath` instead of inheriting from it, so
    it is not a ``PureBasePath`` itself; call :meth:`pure` to get one. All the
    lexical methods forward to the wrapped value and every filesystem method
    goes through ``fs``, the local filesystem unless given otherwise.
    """

    MODES = "rwxa"

    __slots__ = ("_base", "_fs")

    def __init__(
        self,
        path: PathLike | Path = CURDIR,
        *,
        strategy: SeparatorStrategy | None = None,
        fs: FileSystem | None = None,
    ):
        if isinstance(path, Path):
            fs = fs or path._fs
            path = path._base

        self._base = PureBasePath(path, strategy=strategy)
        self._fs: FileSystem = fs or local

    def __eq__(self, other):
        if not isinstance(other, Path):
            return NotImplemented

        return self._base == other._base

    def __fspath__(self) -> str:
        return str(self._base)

    def __hash__(self):
        return hash(self._base)

    def __lt__(self, other):
        if not isinstance(other, Path):
            return NotImplemented

        return self._base < other._base

    def __repr__(self):
        return f"Path({str(self)!r})"

    def __rtruediv__(self, other: str | os.PathLike) -> Path:
        try:
            base = PureBasePath(other, strategy=self._base.strategy)
            return self._wrap(base.joinpath(self._base))
        except TypeError:
            return NotImplemented

    def __str__(self):
        return str(self._base)

    def __truediv__(self, other: PathLike | Path) -> Path:
        try:
            return self.joinpath(other)
        except TypeError:
            return NotImplemented

    def _wrap(self, base: PureBasePath) -> Path:
        path = object.__new__(type(self))
        path._base = base
        path._fs = self._fs
        return path

    # Lexical methods, forwarded to the wrapped PureBasePath

    def is_absolute(self) -> bool:
        return self._base.is_absolute()

    def joinpath(self, *others: PathLike | Path) -> Path:
        return self._wrap(self._base.joinpath(*others))

    @property
    def name(self) -> str:
        return self._base.name

    @property
    def parent(self) -> Path:
        return self._wrap(self._base.parent)

    @property
    def parents(self) -> list[Path]:
        return [self._wrap(parent) for parent in self._base.parents]

    @property
    def parts(self) -> tuple[str, ...]:
        return self._base.parts

    def relative_to(self, other: PathLike | Path) -> Path:
        if isinstance(other, Path):
            other = other._base

        return self._wrap(self._base.relative_to(other))

    @property
    def root(self) -> str:
        return self._base.root

    @property
    def stem(self) -> str:
        return self._base.stem

    @property
    def suffix(self) -> str:
        return self._base.suffix

    @property
    def suffixes(self) -> list[str]:
        return self._base.suffixes

    def with_name(self, name: str) -> Path:
        return self._wrap(self._base.with_name(name))

    def with_suffix(self, suffix: str) -> Path:
        return self._wrap(self._base.with_suffix(suffix))

    # Filesystem methods

    @classmethod
    def cwd(cls, fs: FileSystem | None = None) -> Path:
        return cls(os.getcwd(), fs=fs)

    def exists(self) -> bool:
        return self._fs.exists(str(self))

    def is_dir(self) -> bool:
        return self._fs.is_dir(str(self))

    def is_file(self) -> bool:
        return self._fs.is_file(str(self))

    def is_symlink(self) -> bool:
        return self._fs.is_symlink(str(self))

    def iterdir(self) -> list[Path]:
        """List the contents of this directory.

        Unlike :meth:`pathlib.Path.iterdir` the complete list is returned.
        """
        with _os_failure(str(self)):
            names = self._fs.list_children(str(self))

        return [self / name for name in names]

    def mkdir(self, mode: int = 0o777, parents: bool = False, exist_ok: bool = False):
        """Create a directory at this path.

        With ``parents`` any missing ancestors are created too, otherwise the
        parent directory must already exist. An existing directory is an
        error unless ``exist_ok`` is set.
        """
        path = str(self)

        if not parents and not self.parent.is_dir():
            raise OSFailure("No such directory", str(self.parent))

        if self.is_dir():
            if not exist_ok:
                raise OSFailure("Directory exists", path)
            return

        if parents:
            for parent in reversed(self.parents):
                if not parent.is_dir():
                    parent._make_dir(mode)

        self._make_dir(mode)

    def _make_dir(self, mode: int):
        path = str(self)

        logger.debug("Creating directory %s", path)

        with _os_failure(path):
            try:
                self._fs.mkdir(path, mode)
            except FileExistsError:
                # lost a race against another creator of the same directory
                if not self.is_dir():
                    raise

    def open(self, mode: str = "r", **kwargs) -> t.IO:
        """Open the file at this path.

        ``mode`` follows :func:`open` and must start with one of ``r``, ``w``,
        ``x`` or ``a``. Any extra keyword arguments are passed through.
        """
        if not mode or mode[0] not in self.MODES:
            raise InvalidArgument(f"Invalid file mode: {mode!r}")

        with _os_failure(str(self)):
            return self._fs.open(str(self), mode, **kwargs)

    def pure(self) -> PureBasePath:
        return self._base

    def read_bytes(self) -> bytes:
        with self.open("rb") as f:
            return f.read()

    def read_text(self, encoding: str | None = None, errors: str | None = None) -> str:
        with self.open("rt", encoding=encoding, errors=errors) as f:
            return f.read()

    def rmdir(self):
        """Remove the empty directory at this path."""
        path = str(self)

        logger.debug("Removing directory %s", path)

        with _os_failure(path):
            self._fs.rmdir(path)

    def symlink_to(self, target: PathLike | Path):
        path = str(self)
        target = os.fspath(target)

        logger.debug("Linking %s to %s", path, target)

        with _os_failure(path):
            self._fs.symlink(target, path)

    def unlink(self):
        """Remove the file at this path. Use :meth:`rmdir` for directories."""
        path = str(self)

        logger.debug("Removing file %s", path)

        with _os_failure(path):
            self._fs.unlink(path)

    def write_bytes(self, data: bytes):
        with self.open("wb") as f:
            f.write(data)

    def write_text(self, data: str, encoding: str | None = None, errors: str | None = None):
        with self.open("wt", encoding=encoding, errors=errors) as f:
            f.write(data)
