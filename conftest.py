"""Global test configuration and shared fixtures."""

from __future__ import annotations

import typing as t

import pytest

import path_clean.platform
from path_clean.platform import DIALECT_OVERRIDE_ENV


@pytest.fixture(autouse=True)
def clear_dialect_override(
    monkeypatch: pytest.MonkeyPatch,
) -> t.Generator[None, None, None]:
    """Ensure a stray dialect override never leaks into a test."""
    monkeypatch.delenv(DIALECT_OVERRIDE_ENV, raising=False)
    path_clean.platform._resolve_override.cache_clear()
    yield
    path_clean.platform._resolve_override.cache_clear()
