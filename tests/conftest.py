"""Pytest fixtures for all tests."""
import pytest
from loguru import logger
from typer.testing import CliRunner

ENV_VARS = ("MAYBE_HEX_INT_TYPE", "MAYBE_HEX_OUTPUT", "MAYBE_HEX_LOG_LEVEL")


@pytest.fixture
def runner(loguru_reset):
    """CLI runner for invoking the typer app in-process."""
    return CliRunner()


@pytest.fixture
def clean_env(monkeypatch):
    """Drop MAYBE_HEX_* variables so config defaults are deterministic.
    
    Each variable is set before being deleted so monkeypatch also removes any
    value a .env file loads during the test.
    """
    for name in ENV_VARS:
        monkeypatch.setenv(name, "")
        monkeypatch.delenv(name)
    return monkeypatch


@pytest.fixture
def loguru_reset():
    """Drop sinks added by the CLI and re-silence the library afterwards."""
    yield logger
    logger.remove()
    logger.disable("maybe_hex")


@pytest.fixture
def user_config(tmp_path):
    """Write a user YAML config and return its path."""
    def _write(text: str):
        path = tmp_path / "maybe-hex.yaml"
        path.write_text(text)
        return path
    return _write
