"""Host platform helpers for choosing the default path dialect.

Keeping the selection here lets :func:`path_clean.clean` stay a thin wrapper
while the cleaning algorithm itself remains unaware of the host.
"""

from __future__ import annotations

import functools
import logging
import os
import sys
import typing as t

from .dialect import UNIX, WINDOWS, PathDialect, get_dialect
from .errors import UnknownDialectError

logger = logging.getLogger(__name__)

IS_WINDOWS = os.name == "nt"

# Tests and cross-platform tooling set this to clean paths with a foreign
# dialect, for example ``windows`` on a Linux host.
DIALECT_OVERRIDE_ENV: t.Final[str] = "PATH_CLEAN_DIALECT_OVERRIDE"


def _normalise(platform: str) -> str:
    """Return a lowercase version of *platform* suitable for lookups."""
    return platform.strip().lower()


def _dialect_for_platform(platform: str) -> PathDialect:
    """Map a ``sys.platform``-style name or dialect name to a dialect."""
    name = _normalise(platform)
    if name.startswith("win") or name == "nt":
        return WINDOWS
    try:
        return get_dialect(name)
    except UnknownDialectError:
        # Every other operating system uses forward slashes.
        return UNIX


@functools.cache
def _resolve_override(override: str) -> PathDialect | None:
    """Resolve an override value, logging the outcome once per value."""
    try:
        dialect = get_dialect(override)
    except UnknownDialectError:
        logger.warning(
            "Ignoring %s=%r: not a recognised path dialect",
            DIALECT_OVERRIDE_ENV,
            override,
        )
        return None
    logger.debug("Using %s dialect from %s", dialect.name, DIALECT_OVERRIDE_ENV)
    return dialect


def _override_dialect() -> PathDialect | None:
    """Return the dialect requested via the environment, if any."""
    override = os.getenv(DIALECT_OVERRIDE_ENV)
    if not override:
        return None
    return _resolve_override(override)


def native_dialect() -> PathDialect:
    """Return the dialect matching the host's :mod:`pathlib` flavour."""
    return WINDOWS if IS_WINDOWS else UNIX


def host_dialect(platform: str | None = None) -> PathDialect:
    """
    Return the dialect used by :func:`path_clean.clean`.

    An explicit *platform* wins, then :data:`DIALECT_OVERRIDE_ENV`, then the
    interpreter's ``sys.platform``.
    """
    if platform:
        return _dialect_for_platform(platform)

    if (override := _override_dialect()) is not None:
        return override

    if IS_WINDOWS:
        return WINDOWS
    return _dialect_for_platform(sys.platform)


__all__ = [
    "DIALECT_OVERRIDE_ENV",
    "IS_WINDOWS",
    "host_dialect",
    "native_dialect",
]
