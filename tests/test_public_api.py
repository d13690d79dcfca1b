"""Checks for the package's public surface."""

from __future__ import annotations

import pytest

import path_clean


@pytest.mark.parametrize("name", path_clean.__all__)
def test_public_names_are_exported(name: str) -> None:
    """Every name listed in ``__all__`` resolves on the package."""
    assert hasattr(path_clean, name)


def test_error_hierarchy() -> None:
    """All library errors share a common base class."""
    for error in (
        path_clean.InvalidInputError,
        path_clean.UnrepresentablePathError,
        path_clean.UnknownDialectError,
    ):
        assert issubclass(error, path_clean.PathCleanError)


def test_clean_for_dialect_rejects_unknown_dialect_name() -> None:
    """Unresolvable dialect names fail before cleaning starts."""
    with pytest.raises(path_clean.UnknownDialectError):
        path_clean.clean_for_dialect("amiga", "a/b")
