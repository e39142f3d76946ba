"""
Shared pytest configuration for the schemavec test suite.

This file centralizes reusable testing utilities so that:
    • CLI tests share one CliRunner factory
    • Column-record fixtures load consistently
    • Small, collision-free configs are easy to build
"""

import json
from pathlib import Path

import pytest
from typer.testing import CliRunner

from schemavec.config import EmbeddingConfig

# ============================================================================
# FIXTURE DIRECTORY
# ============================================================================
FIXTURES_DIR = Path(__file__).parent / "fixtures"


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provides a fresh Typer CliRunner instance for CLI tests."""
    return CliRunner()


@pytest.fixture
def fixture_path():
    """Absolute path of a file under tests/fixtures/."""

    def _path(name: str) -> Path:
        return FIXTURES_DIR / name

    return _path


@pytest.fixture
def load_json_fixture():
    """Load a JSON fixture from tests/fixtures/ as Python data."""

    def _loader(name: str):
        path = FIXTURES_DIR / name
        return json.loads(path.read_text(encoding="utf-8"))

    return _loader


@pytest.fixture
def small_config() -> EmbeddingConfig:
    """16 slots: small enough to reason about slot positions by hand."""
    return EmbeddingConfig(embedding_size=16)


@pytest.fixture
def wide_config() -> EmbeddingConfig:
    """Wide enough that the handful of words in a test schema never collide."""
    return EmbeddingConfig(embedding_size=1024)


@pytest.fixture(autouse=True)
def clean_schemavec_env(monkeypatch):
    """Keep a developer's SCHEMAVEC_* settings out of the tests."""
    for name in (
        "SCHEMAVEC_EMBEDDING_SIZE",
        "SCHEMAVEC_GENERATOR_WEIGHTS",
        "SCHEMAVEC_REMOVE_STOP_WORDS",
        "SCHEMAVEC_WINDOW_DECAY",
        "SCHEMAVEC_WINDOW_RADIUS",
    ):
        monkeypatch.delenv(name, raising=False)
