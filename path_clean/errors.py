"""Exception hierarchy for path-clean."""

from __future__ import annotations

import os
import typing as t


class PathCleanError(Exception):
    """Base class for all path-clean errors."""


class InvalidInputError(PathCleanError, ValueError):
    """
    Raised when a base directory is not an absolute path.

    Attributes
    ----------
    path : str
        The offending base directory, as text.
    """

    def __init__(self, path: os.PathLike[str] | str) -> None:
        self.path = os.fspath(path)
        msg = f"Base directory {self.path} is not absolute"
        super().__init__(msg)


class UnrepresentablePathError(PathCleanError, OSError):
    """
    Raised when a computed path cannot be converted to text for cleaning.

    Attributes
    ----------
    path : str
        The path that could not be converted.
    """

    def __init__(self, path: str) -> None:
        self.path = path
        # ``backslashreplace`` keeps lone surrogates printable in the message.
        shown = path.encode("utf-8", "backslashreplace").decode("utf-8")
        msg = f"Path {shown} cannot be converted to string"
        super().__init__(msg)


class UnknownDialectError(PathCleanError, ValueError):
    """Raised when a dialect name does not match any known dialect."""

    def __init__(self, name: str, known: t.Iterable[str] = ()) -> None:
        self.name = name
        msg = f"Unknown path dialect {name!r}"
        if choices := sorted(known):
            msg = f"{msg}; expected one of {', '.join(choices)}"
        super().__init__(msg)


__all__ = [
    "InvalidInputError",
    "PathCleanError",
    "UnknownDialectError",
    "UnrepresentablePathError",
]
