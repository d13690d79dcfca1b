"""Path grammar for the supported path dialects.

A dialect describes how a textual path is taken apart and put back together:
which characters separate segments, which separator is written on output and
how rootedness is detected. Dialects are immutable strategy objects; the
cleaning algorithm receives one and never inspects the host platform itself.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as t

from .errors import UnknownDialectError


@dc.dataclass(frozen=True, slots=True)
class PathDialect:
    """
    Separator rules for one family of path syntax.

    Attributes
    ----------
    name : str
        Short identifier used in reprs and log messages.
    canonical_separator : str
        The single character written between segments on output.
    separators : str
        Every character recognised as a separator, canonical one included.
    """

    name: str
    canonical_separator: str
    separators: str

    def __post_init__(self) -> None:
        """Validate the separator configuration."""
        if len(self.canonical_separator) != 1:
            msg = "canonical_separator must be a single character"
            raise ValueError(msg)
        if self.canonical_separator not in self.separators:
            msg = "separators must include canonical_separator"
            raise ValueError(msg)

    def is_separator_char(self, char: str) -> bool:
        """Return ``True`` when *char* is a separator in this dialect."""
        return len(char) == 1 and char in self.separators

    def is_exact_separator(self, path: str) -> bool:
        """Return ``True`` when *path* is exactly one separator (the root)."""
        return self.is_separator_char(path)

    def starts_with_separator(self, path: str) -> bool:
        """Return ``True`` when *path* is rooted."""
        return path.startswith(tuple(self.separators))

    def trim_trailing_separators(self, path: str) -> str:
        """Strip every trailing separator character from *path*."""
        return path.rstrip(self.separators)

    def split_on_separators(self, path: str) -> list[str]:
        """
        Split *path* on any separator, keeping empty substrings.

        Empty entries mark leading, trailing or repeated separators, so
        ``"/a//b"`` splits into ``["", "a", "", "b"]`` and ``""`` into
        ``[""]``.
        """
        if len(self.separators) == 1:
            return path.split(self.separators)
        return re.split(f"[{re.escape(self.separators)}]", path)

    def join_with_separator(self, segments: t.Iterable[str]) -> str:
        """Join *segments* with the canonical separator."""
        return self.canonical_separator.join(segments)

    def prepend_root(self, path: str) -> str:
        """Return *path* with one canonical separator in front."""
        return self.canonical_separator + path


UNIX: t.Final[PathDialect] = PathDialect(
    name="unix", canonical_separator="/", separators="/"
)
WINDOWS: t.Final[PathDialect] = PathDialect(
    name="windows", canonical_separator="\\", separators="\\/"
)

_DIALECT_ALIASES: t.Final[dict[str, PathDialect]] = {
    "unix": UNIX,
    "posix": UNIX,
    "windows": WINDOWS,
    "nt": WINDOWS,
    "win32": WINDOWS,
}


def get_dialect(dialect: PathDialect | str) -> PathDialect:
    """Return the dialect named by *dialect*, passing instances through."""
    if isinstance(dialect, PathDialect):
        return dialect
    try:
        return _DIALECT_ALIASES[dialect.strip().lower()]
    except KeyError:
        raise UnknownDialectError(dialect, _DIALECT_ALIASES) from None


__all__ = [
    "UNIX",
    "WINDOWS",
    "PathDialect",
    "get_dialect",
]
