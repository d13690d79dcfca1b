""":mod:`pathlib` integration for lexical cleaning.

Both helpers produce host :class:`~pathlib.Path` objects, so they always clean
with the host's own dialect and ignore the dialect override.
"""

from __future__ import annotations

import os
from pathlib import Path

from .cleaner import clean_for_dialect
from .platform import native_dialect


class CleanPath(Path):
    """A :class:`~pathlib.Path` that can clean itself lexically."""

    def clean(self) -> CleanPath:
        """Return a new path with redundant segments removed."""
        return type(self)(clean_for_dialect(native_dialect(), os.fspath(self)))


def clean_path(path: os.PathLike[str] | str) -> Path:
    """Return *path* cleaned with the host dialect as a :class:`Path`."""
    return Path(clean_for_dialect(native_dialect(), os.fspath(path)))


__all__ = ["CleanPath", "clean_path"]
