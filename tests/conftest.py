# topmark:header:start
#
#   project      : AdventRun
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Pytest configuration for the AdventRun test suite.

This file sets up global fixtures and the logging configuration for test runs.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from adventrun.config import logging
from adventrun.registry.solvers import SolverEntry, SolverRegistry

if TYPE_CHECKING:
    from collections.abc import Iterator
    from pathlib import Path

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.integration`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_integration: DecoratorType[Any] = as_typed_mark(pytest.mark.integration)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_solvers: DecoratorType[Any] = as_typed_mark(pytest.mark.solvers)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_adventrun_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure neither the log level nor color is forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv("ADVENTRUN_LOG_LEVEL", raising=False)
    monkeypatch.delenv("FORCE_COLOR", raising=False)
    monkeypatch.delenv("NO_COLOR", raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the logging level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run the test from an empty project directory.

    The default input location (``inputs/dNN.txt``) and config discovery both
    depend on the working directory, so tests that rely on them chdir here.

    Returns:
        Path: The temporary working directory (contains an empty ``inputs/``).
    """
    cwd: Path = tmp_path / "proj"
    (cwd / "inputs").mkdir(parents=True)
    monkeypatch.chdir(cwd)
    return cwd


def write_input(base: Path, day: int, text: str) -> Path:
    """Write ``text`` to the default input location for ``day`` under ``base``."""
    path: Path = base / "inputs" / f"d{day:02d}.txt"
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(text.encode("utf-8"))
    return path


@pytest.fixture
def temporary_entry() -> Iterator[Callable[[SolverEntry], SolverEntry]]:
    """Register ad-hoc solver entries for the duration of one test.

    Yields:
        Callable[[SolverEntry], SolverEntry]: Registers an entry and returns it.
    """
    SolverRegistry.days()  # compose built-in days first
    added: list[int] = []

    def _register(entry: SolverEntry) -> SolverEntry:
        SolverRegistry.register(entry)
        added.append(entry.day)
        return entry

    try:
        yield _register
    finally:
        for day in added:
            SolverRegistry.unregister(day)
