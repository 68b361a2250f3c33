"""Temporary directories built on :class:`lexpath.core.path.Path`."""

from __future__ import annotations

import logging
import os
import secrets
import weakref

from .core.exceptions import OSFailure
from .core.functions import abspath, isdir, join
from .core.path import Path


logger = logging.getLogger("lexpath")

ENVIRONMENT_VARIABLES = ("TMPDIR", "TEMP", "TMP")
STANDARD_DIRECTORIES = ("/tmp", "/var/tmp", "/usr/tmp")

_tempdir: str | None = None


def gettempdir() -> str:
    """Return the directory used for temporary files.

    The ``TMPDIR``, ``TEMP`` and ``TMP`` environment variables are tried
    first, then a few standard directories. The current working directory is
    the last resort. The choice is made on the first call only.
    """
    global _tempdir

    if _tempdir is None:
        candidates = [os.environ.get(name) for name in ENVIRONMENT_VARIABLES]
        candidates.extend(STANDARD_DIRECTORIES)

        _tempdir = next((c for c in candidates if c and isdir(c)), os.curdir)
        logger.debug("Using %s for temporary files", _tempdir)

    # a relative choice follows the working directory
    return abspath(_tempdir)


class TemporaryDirectory:
    """A uniquely named directory that is deleted along with its contents.

    Use it as a context manager or call :meth:`cleanup` when done. The
    directory is also removed once the object is garbage collected.
    """

    ATTEMPTS = 100

    def __init__(self, suffix: str = "", prefix: str = "tmp", dir: str | None = None):
        if not dir:
            dir = gettempdir()

        for _ in range(self.ATTEMPTS):
            path = Path(join([dir, f"{prefix}{secrets.token_hex(4)}{suffix}"]))
            try:
                path.mkdir(0o700)
            except OSFailure:
                if path.exists():
                    continue
                raise
            break
        else:
            raise OSFailure("No usable temporary directory name", dir)

        logger.debug("Created temporary directory %s", path)
        self.path = path
        self._finalizer = weakref.finalize(self, _remove, path)

    def __enter__(self) -> str:
        return self.name

    def __exit__(self, exc_type, exc_value, traceback):
        self.cleanup()

    def __repr__(self):
        return f"<{type(self).__name__} {self.name!r}>"

    @property
    def name(self) -> str:
        return str(self.path)

    def cleanup(self):
        """Delete the directory and everything in it."""
        self._finalizer()


def _remove(path: Path):
    if path.exists():
        logger.debug("Removing temporary directory %s", path)
        rmtree(path)


def rmtree(root: Path):
    """Delete ``root`` and everything in it.

    Symlinks are removed, never followed.
    """
    for item in root.iterdir():
        if item.is_dir() and not item.is_symlink():
            rmtree(item)
        else:
            item.unlink()

    root.rmdir()
