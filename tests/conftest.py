# topmark:header:start
#
#   project      : TsDef
#   file         : conftest.py
#   file_relpath : tests/conftest.py
#   license      : MIT
#   copyright    : (c) 2026 TsDef contributors
#
# topmark:header:end

"""Pytest configuration for the TsDef test suite.

Sets up global fixtures, logging and Hypothesis profiles.

Notes:
    Tests should respect the immutable/mutable configuration split:

    - Build configs using `tsdef.config.model.MutableConfig` (mutable), then
      `freeze()` into a `tsdef.config.model.Config`.
    - Do **not** mutate a frozen `Config`. To tweak one, call `Config.thaw()`,
      edit the returned `MutableConfig`, then `freeze()` again.
"""

from __future__ import annotations

import io
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar, cast

import pytest
from hypothesis import settings

from tsdef.config import logging
from tsdef.config.logging import LOG_LEVEL_ENV
from tsdef.config.model import MutableConfig

if TYPE_CHECKING:
    from pathlib import Path

    from tsdef.config.model import Config

F = TypeVar("F", bound=Callable[..., object])

DecoratorType = Callable[[F], F]


def as_typed_mark(mark: Any) -> DecoratorType[Any]:
    """Wrap a pytest mark so static type checkers preserve the function type.

    Args:
        mark (Any): A pytest mark decorator such as `pytest.mark.cli`.

    Returns:
        DecoratorType[Any]: A decorator that preserves the wrapped function's type.
    """

    def _decorator(func: F) -> F:
        return cast("F", mark(func))

    return _decorator


mark_cli: DecoratorType[Any] = as_typed_mark(pytest.mark.cli)
mark_property: DecoratorType[Any] = as_typed_mark(pytest.mark.property)


def parametrize(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.mark.parametrize`."""
    mark: pytest.MarkDecorator = pytest.mark.parametrize(*args, **kwargs)
    return as_typed_mark(mark)


def hookimpl(*args: Any, **kwargs: Any) -> Callable[[F], F]:
    """Typed wrapper for `pytest.hookimpl`."""
    return as_typed_mark(pytest.hookimpl(*args, **kwargs))


settings.register_profile("default", max_examples=100, deadline=None)
settings.register_profile("thorough", max_examples=2000, deadline=None)
settings.load_profile("default")


@pytest.fixture(autouse=True)
def silence_tsdef_logging(monkeypatch: pytest.MonkeyPatch) -> None:
    """Ensure TsDef's runtime log level is not forced via env during tests.

    This avoids accidental DEBUG/TRACE noise when the developer has exported
    ``TSDEF_LOG_LEVEL`` in their shell.

    Args:
        monkeypatch (pytest.MonkeyPatch): Used to remove the environment variable.
    """
    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)


@hookimpl(tryfirst=True)
def pytest_configure(config: pytest.Config) -> None:  # pylint: disable=unused-argument
    """Set the log level to TRACE so failing tests show full diagnostics."""
    logging.setup_logging(level=logging.TRACE_LEVEL)


@pytest.fixture
def isolation(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run a test in an empty project directory.

    Config discovery looks at the working directory, so tests that must not
    pick up the repository's own ``pyproject.toml`` use this fixture.

    Returns:
        Path: The temporary working directory.
    """
    cwd: Path = tmp_path / "proj"
    cwd.mkdir()
    monkeypatch.chdir(cwd)
    return cwd


class FailingSink(io.StringIO):
    """Text sink that raises `OSError` once ``fail_after`` writes succeeded."""

    def __init__(self, fail_after: int) -> None:
        super().__init__()
        self.fail_after: int = fail_after
        self.writes: int = 0

    def write(self, s: str, /) -> int:
        if self.writes >= self.fail_after:
            raise OSError("sink closed")
        self.writes += 1
        return super().write(s)


def make_config(**overrides: Any) -> Config:
    """Return a frozen `Config` built from defaults and overrides."""
    return make_mutable_config(**overrides).freeze()


def make_mutable_config(**overrides: Any) -> MutableConfig:
    """Return a defaults-based mutable builder with ``overrides`` applied verbatim."""
    m: MutableConfig = MutableConfig.from_defaults()
    for k, v in overrides.items():
        setattr(m, k, v)
    return m
