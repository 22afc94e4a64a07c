# topmark:header:start
#
#   project      : ScoreFlow
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 The ScoreFlow Authors
#
# topmark:header:end

"""Pytest configuration for the ScoreFlow test suite.

This file sets up global fixtures and customizes the logging configuration for test runs,
and provides small builders shared by the test modules.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `scoreflow.config.MutableConfig` (mutable), then
      `freeze()` into a `scoreflow.config.Config`.
    - Do **not** mutate a frozen `Config`. If you need to tweak one,
      call `Config.thaw()`, edit the returned `MutableConfig`,
      then `freeze()` again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest

from scoreflow.cli.console import ClickConsole
from scoreflow.config import MutableConfig, logging
from scoreflow.core.models import Student
from scoreflow.pipeline.context import ProcessingContext

if TYPE_CHECKING:
    from collections.abc import Iterable

    from scoreflow.config import Config

F = TypeVar("F", bound=Callable[..., object])

# It takes a Callable (F) and returns the same Callable (F).
DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.pipeline`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_pipeline: DecoratorType[Any] = as_typed_mark(pytest.mark.pipeline)
mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.mark.parametrize`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.mark.parametrize`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`.

    Args:
        *args (Any): Positional arguments forwarded to `pytest.hookimpl`.
        **kwargs (Any): Keyword arguments forwarded to `pytest.hookimpl`.

    Returns:
        Callable[[F], F]: A decorator that preserves the wrapped function's type.
    """
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


@pytest.fixture(autouse=True)
def silence_scoreflow_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure ScoreFlow's runtime log level is not forced via env during tests.

    Args:
        monkeypatch (pytest.MonkeyPatch): Pytest monkeypatch fixture used to manipulate
            environment variables.
    """
    monkeypatch.delenv(logging.LOG_LEVEL_ENV_VAR, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE for the whole test session.

    Args:
        config (pytest.Config): The pytest configuration object.
    """
    logging.setup_logging(level=logging.TRACE_LEVEL)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides.

    Args:
        **overrides (Any): `Config` field names and values applied before freezing.

    Returns:
        Config: An immutable configuration snapshot for use in tests.
    """
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m.freeze()


def make_console() -> tuple[ClickConsole, io.StringIO]:
    """Return a color-less console writing to an in-memory buffer.

    Returns:
        tuple[ClickConsole, io.StringIO]: The console and the buffer receiving its output.
    """
    out = io.StringIO()
    err = io.StringIO()
    return ClickConsole(enable_color=False, out=out, err=err), out


def make_students(*scores: float) -> list[Student]:
    """Return students with ids ``1..n`` carrying the given scores, in order."""
    return [Student(id=i, score=score) for i, score in enumerate(scores, start=1)]


def make_context(students: Iterable[Student] = ()) -> tuple[ProcessingContext, io.StringIO]:
    """Return a processing context over ``students`` and its output buffer."""
    console, out = make_console()
    return ProcessingContext(students=list(students), console=console), out
