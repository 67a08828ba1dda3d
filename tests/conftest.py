"""
Shared pytest fixtures for dotspace tests.

This file is automatically loaded by pytest. Fixtures defined here are
available to all test files without explicit imports.
"""

import os as _os
import pathlib as _pathlib
import typing as _typing

import click.testing as _click_testing
import pytest as _pytest


@_pytest.fixture(autouse=True)
def isolated_config(
    tmp_path: _pathlib.Path,
    monkeypatch: _pytest.MonkeyPatch,
) -> _pathlib.Path:
    """
    Keep the user's real config and DOTSPACE_* env vars out of every test.

    Points DOTSPACE_CONFIG_DIR at an empty temp directory and runs the test
    from tmp_path, so no project config is picked up either.

    Returns:
        The user config directory used for this test.
    """
    for key in list(_os.environ):
        if key.startswith("DOTSPACE_"):
            monkeypatch.delenv(key)
    monkeypatch.delenv("NO_COLOR", raising=False)
    config_dir = tmp_path / "user-config"
    config_dir.mkdir()
    monkeypatch.setenv("DOTSPACE_CONFIG_DIR", str(config_dir))
    monkeypatch.chdir(tmp_path)
    return config_dir


@_pytest.fixture
def cli_runner() -> _click_testing.CliRunner:
    """Click test runner."""
    return _click_testing.CliRunner()


@_pytest.fixture
def nested_config() -> dict[str, _typing.Any]:
    """A small nested document with falsy leaves and a list."""
    return {
        "server": {"host": "localhost", "port": 3000},
        "database": {"user": "admin", "password": None, "pool": {"size": 0}},
        "features": ["auth", "cache"],
        "debug": False,
        "name": "",
    }
