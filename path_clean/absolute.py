"""Resolve paths against a base directory without touching the file system."""

from __future__ import annotations

import logging
import os
from pathlib import Path, PurePath

from .cleaner import clean_for_dialect
from .errors import InvalidInputError, UnrepresentablePathError
from .platform import native_dialect

logger = logging.getLogger(__name__)


def _path_to_text(path: Path) -> str:
    """Return *path* as text, rejecting values that cannot round-trip."""
    text = os.fspath(path)
    try:
        text.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise UnrepresentablePathError(text) from exc
    return text


def make_absolute(
    base_dir: os.PathLike[str] | str, path: os.PathLike[str] | str
) -> Path:
    """
    Return *path* made absolute against *base_dir*, then cleaned.

    Relative *path* values are appended to *base_dir*; an absolute *path*
    replaces it, following :mod:`pathlib` join rules. A *path* with no
    components (``""`` or ``"."``) yields *base_dir* itself. The joined value
    is cleaned with the host dialect, so neither argument needs to exist.

    Parameters
    ----------
    base_dir : os.PathLike[str] | str
        Absolute directory to resolve against, typically the working
        directory captured by the caller.
    path : os.PathLike[str] | str
        Target path, relative or absolute.

    Returns
    -------
    Path
        The cleaned absolute path.

    Raises
    ------
    InvalidInputError
        If *base_dir* is not absolute.
    UnrepresentablePathError
        If the joined path cannot be converted to text.
    """
    base = Path(base_dir)
    if not base.is_absolute():
        raise InvalidInputError(base_dir)

    if PurePath(path).parts:
        joined = base / path
    else:
        logger.debug("Target %r has no components; using base %s", path, base)
        joined = base

    text = _path_to_text(joined)
    return Path(clean_for_dialect(native_dialect(), text))


__all__ = ["make_absolute"]
