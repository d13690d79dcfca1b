"""Lexical path cleaning without file-system access.

:func:`clean` rewrites a textual path into its shortest equivalent form and
:func:`make_absolute` resolves a path against a caller-supplied base
directory. Neither function reads the disk, so symlinks are never followed.
"""

from __future__ import annotations

from .absolute import make_absolute
from .cleaner import clean, clean_for_dialect, clean_unix, clean_windows
from .dialect import UNIX, WINDOWS, PathDialect, get_dialect
from .errors import (
    InvalidInputError,
    PathCleanError,
    UnknownDialectError,
    UnrepresentablePathError,
)
from .pathlib_ext import CleanPath, clean_path
from .platform import DIALECT_OVERRIDE_ENV, host_dialect, native_dialect

__all__ = [
    "DIALECT_OVERRIDE_ENV",
    "UNIX",
    "WINDOWS",
    "CleanPath",
    "InvalidInputError",
    "PathCleanError",
    "PathDialect",
    "UnknownDialectError",
    "UnrepresentablePathError",
    "clean",
    "clean_for_dialect",
    "clean_path",
    "clean_unix",
    "clean_windows",
    "get_dialect",
    "host_dialect",
    "make_absolute",
    "native_dialect",
]
