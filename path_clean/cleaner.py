"""Lexical path cleaning.

:func:`clean_for_dialect` rewrites a path into its shortest equivalent form
using string manipulation only:

1. Repeated separators collapse into one.
2. ``.`` segments are removed.
3. A ``..`` segment removes the preceding normal segment.
4. ``..`` segments directly after the root are removed.
5. ``..`` segments at the start of a relative path are kept, since there is
   nothing known above them to cancel against.

The file system is never consulted, so symlinks are not resolved.
"""

from __future__ import annotations

import typing as t

from .dialect import UNIX, WINDOWS, get_dialect
from .platform import host_dialect

if t.TYPE_CHECKING:  # pragma: no cover - typing only
    from .dialect import PathDialect

_CURRENT_DIR: t.Final[str] = "."
_PARENT_DIR: t.Final[str] = ".."


def _special_path(dialect: PathDialect, path: str) -> str | None:
    """Return the cleaned form of the root, ``""``, ``.`` or ``..``."""
    if dialect.is_exact_separator(path):
        return dialect.canonical_separator
    if path in ("", _CURRENT_DIR):
        return _CURRENT_DIR
    if path == _PARENT_DIR:
        return _PARENT_DIR
    return None


def _can_backtrack(segment: str) -> bool:
    """Return ``True`` when a following ``..`` may cancel *segment*."""
    return segment not in (_CURRENT_DIR, _PARENT_DIR)


def clean_for_dialect(dialect: PathDialect | str, path: str) -> str:
    """Return the cleaned form of *path* under *dialect*.

    *dialect* may be a :class:`~path_clean.dialect.PathDialect` or a name such
    as ``"unix"`` or ``"windows"``. The result is never empty.
    """
    dialect = get_dialect(dialect)

    if (special := _special_path(dialect, path)) is not None:
        return special

    is_rooted = dialect.starts_with_separator(path)
    segments = dialect.split_on_separators(dialect.trim_trailing_separators(path))
    num_segments = len(segments)

    out: list[str] = []
    for segment in segments:
        if not segment:
            continue
        if segment == _CURRENT_DIR:
            if num_segments == 1:
                out.append(segment)
            continue
        if segment == _PARENT_DIR:
            previous = out.pop() if out else None
            if previous is not None and not _can_backtrack(previous):
                out.extend((previous, segment))
            elif previous is None and not is_rooted:
                out.append(segment)
            continue
        out.append(segment)

    cleaned = dialect.join_with_separator(out)
    if is_rooted:
        cleaned = dialect.prepend_root(cleaned)
    return cleaned or _CURRENT_DIR


def clean(path: str) -> str:
    """Clean *path* using the host platform's dialect."""
    return clean_for_dialect(host_dialect(), path)


def clean_unix(path: str) -> str:
    """Clean *path* using Unix rules regardless of the host."""
    return clean_for_dialect(UNIX, path)


def clean_windows(path: str) -> str:
    """Clean *path* using Windows rules regardless of the host."""
    return clean_for_dialect(WINDOWS, path)


__all__ = [
    "clean",
    "clean_for_dialect",
    "clean_unix",
    "clean_windows",
]
