from __future__ import annotations

import os
import stat
import typing as t


class FileSystemProbe(t.Protocol):
    def exists(self, path: str) -> bool:
        ...

    def is_file(self, path: str) -> bool:
        ...

    def is_dir(self, path: str) -> bool:
        ...

    def is_symlink(self, path: str) -> bool:
        ...


class FileIO(t.Protocol):
    def open(self, path: str, mode: str = "r", **kwargs) -> t.IO:
        ...

    def mkdir(self, path: str, mode: int = 0o777):
        ...

    def rmdir(self, path: str):
        ...

    def unlink(self, path: str):
        ...

    def symlink(self, target: str, path: str):
        ...

    def list_children(self, path: str) -> list[str]:
        ...


class FileSystem(FileSystemProbe, FileIO, t.Protocol):
    pass


class LocalFileSystem:
    """The local filesystem, accessed through :mod:`os`.

    Probes report ``False`` for anything that can't be looked up, including
    the empty path. Every other operation lets the :class:`OSError` through.
    """

    def _stat(self, path: str, follow_symlinks: bool = True) -> os.stat_result | None:
        try:
            return os.stat(path, follow_symlinks=follow_symlinks)
        except (OSError, ValueError):
            return None

    def exists(self, path: str) -> bool:
        return self._stat(path) is not None

    def is_file(self, path: str) -> bool:
        info = self._stat(path)
        return info is not None and stat.S_ISREG(info.st_mode)

    def is_dir(self, path: str) -> bool:
        info = self._stat(path)
        return info is not None and stat.S_ISDIR(info.st_mode)

    def is_symlink(self, path: str) -> bool:
        info = self._stat(path, follow_symlinks=False)
        return info is not None and stat.S_ISLNK(info.st_mode)

    def open(self, path: str, mode: str = "r", **kwargs) -> t.IO:
        return open(path, mode, **kwargs)

    def mkdir(self, path: str, mode: int = 0o777):
        os.mkdir(path, mode)

    def rmdir(self, path: str):
        os.rmdir(path)

    def unlink(self, path: str):
        os.unlink(path)

    def symlink(self, target: str, path: str):
        os.symlink(target, path)

    def list_children(self, path: str) -> list[str]:
        # os.listdir never includes the "." and ".." entries
        return os.listdir(path)


local = LocalFileSystem()
