# ruff: noqa: S101
"""pytest-bdd steps for absolute path resolution scenarios."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from pytest_bdd import given, parsers, then, when

from path_clean import InvalidInputError, PathCleanError, make_absolute


@dc.dataclass(slots=True)
class Resolution:
    """Outcome of a ``make_absolute`` call within a scenario."""

    result: Path | None = None
    error: PathCleanError | None = None


@given(parsers.re(r'the base directory "(?P<base>.*)"'), target_fixture="base_dir")
def given_base_dir(base: str) -> str:
    """Provide the base directory to resolve against."""
    return base


@when(
    parsers.re(r'the target "(?P<target>.*)" is made absolute'),
    target_fixture="resolution",
)
def resolve_target(base_dir: str, target: str) -> Resolution:
    """Resolve *target* against the scenario base directory."""
    try:
        return Resolution(result=make_absolute(base_dir, target))
    except PathCleanError as exc:
        return Resolution(error=exc)


@then(parsers.cfparse('the absolute path should be "{expected}"'))
def check_absolute_path(resolution: Resolution, expected: str) -> None:
    """Ensure resolution succeeded with the expected path."""
    assert resolution.error is None, f"unexpected error: {resolution.error}"
    assert resolution.result == Path(expected)
    assert str(resolution.result) == expected


@then(parsers.cfparse('an invalid input error should mention "{text}"'))
def check_invalid_input(resolution: Resolution, text: str) -> None:
    """Ensure resolution failed because the base directory was relative."""
    assert isinstance(resolution.error, InvalidInputError)
    assert text in str(resolution.error)
