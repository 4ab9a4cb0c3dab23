"""
Shared pytest fixtures for ExtendedEnum tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.

Provider modules used by the tests live in tests/fixtures, which is on the
pythonpath (see pyproject.toml).
"""

import pathlib as _pathlib
import typing as _typing

import pytest as _pytest

import extendedenum.config.settings as settings
import extendedenum.config.sources as sources

# Environment keys that should be cleared for isolated tests
ENV_KEYS_TO_CLEAR = [
    "EXTENDEDENUM_CONFIG_DIR",
    "EXTENDEDENUM_CONFIG_PATH",
]


@_pytest.fixture(autouse=True)
def clean_env(monkeypatch: _pytest.MonkeyPatch) -> None:
    """Isolate every test from deployment configuration in the environment."""
    for key in ENV_KEYS_TO_CLEAR:
        monkeypatch.delenv(key, raising=False)


@_pytest.fixture
def isolated_settings(tmp_path: _pathlib.Path) -> settings.Settings:
    """Settings whose user config directory is an empty temporary directory."""
    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    return settings.Settings(config_dir=config_dir, config_path="")


@_pytest.fixture
def make_source() -> _typing.Callable[..., sources.ConfigSource]:
    """
    Factory for ConfigSource instances.

    Usage:
        def test_something(make_source):
            source = make_source(10, providers={"pkg.Mod": "constants"})
    """

    def _make(
        priority: int,
        *,
        chain_next_file: bool = False,
        chain_remove_sections: _typing.Iterable[str] = (),
        providers: dict[str, str] | None = None,
        alternates: dict[str, str] | None = None,
        origin: str | None = None,
    ) -> sources.ConfigSource:
        return sources.ConfigSource(
            priority=priority,
            chain_next_file=chain_next_file,
            chain_remove_sections=frozenset(chain_remove_sections),
            providers=providers or {},
            alternates=alternates or {},
            origin=origin or f"source-{priority}",
        )

    return _make
