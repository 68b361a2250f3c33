from __future__ import annotations

import typing as t

from dataclasses import dataclass

from .exceptions import InvalidArgument, OSFailure, PathError


T = t.TypeVar("T")


@dataclass(frozen=True)
class Result(t.Generic[T]):
    """The outcome of a path operation: either a value or a :class:`PathError`."""

    value: T | None = None
    error: PathError | None = None

    def __bool__(self):
        return self.ok

    @property
    def is_invalid_argument(self) -> bool:
        return isinstance(self.error, InvalidArgument)

    @property
    def is_os_failure(self) -> bool:
        return isinstance(self.error, OSFailure)

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> T:
        if self.error is not None:
            raise self.error
        return self.value


def attempt(func: t.Callable[..., T], *args, **kwargs) -> Result[T]:
    """Call ``func`` and capture any :class:`PathError` it raises.

    For example ``attempt(path.with_name, "def/")`` gives a failed result
    whose ``is_invalid_argument`` is true, instead of raising.
    """
    try:
        return Result(value=func(*args, **kwargs))
    except PathError as e:
        return Result(error=e)
