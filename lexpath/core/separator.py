import os
import re

from dataclasses import dataclass

from .exceptions import InvalidArgument


@dataclass(frozen=True)
class SeparatorStrategy:
    """The separator used to split and render paths.

    Only a single hierarchical separator is supported; there is no notion of
    drives or alternate separators.
    """

    sep: str

    def __post_init__(self):
        if not self.sep:
            raise InvalidArgument("empty separator")

    @property
    def escaped(self) -> str:
        return re.escape(self.sep)

    def name_pattern(self) -> re.Pattern:
        return re.compile(f"(?:(?!{self.escaped}).)+", re.DOTALL)

    def suffix_pattern(self) -> re.Pattern:
        return re.compile(f"(?:\\.(?:(?!{self.escaped}).)+)?", re.DOTALL)


POSIX = SeparatorStrategy("/")
WINDOWS = SeparatorStrategy("\\")

DEFAULT = WINDOWS if os.sep == WINDOWS.sep else POSIX
