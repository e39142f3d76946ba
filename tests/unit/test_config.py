"""Unit tests for EmbeddingConfig validation and environment loading."""

import pytest

from schemavec.config import DEFAULT_EMBEDDING_SIZE, EmbeddingConfig, parse_generator_weights
from schemavec.embedding import PrimaryKeyAwareEmbeddingGenerator
from schemavec.errors import ConfigurationError


def test_defaults() -> None:
    config = EmbeddingConfig()

    assert config.embedding_size == DEFAULT_EMBEDDING_SIZE == 3072
    assert config.generator_weights == {"enhanced": 1.0, "primary_key": 1.0, "foreign_key": 1.0}
    assert config.remove_stop_words is False
    assert config.window_decay == 0.5
    assert config.window_radius == 1


@pytest.mark.parametrize("size", [0, -8, 3.5, True, "16"])
def test_invalid_embedding_size_fails_fast(size) -> None:
    with pytest.raises(ConfigurationError):
        EmbeddingConfig(embedding_size=size)


def test_unknown_generator_name_is_rejected() -> None:
    with pytest.raises(ConfigurationError, match="Unknown generator"):
        EmbeddingConfig(generator_weights={"semantic": 1.0})


@pytest.mark.parametrize("weight", [-1.0, float("nan"), float("inf"), "heavy"])
def test_invalid_generator_weight_is_rejected(weight) -> None:
    with pytest.raises(ConfigurationError):
        EmbeddingConfig(generator_weights={"enhanced": weight})


def test_weight_overrides_are_validated() -> None:
    with pytest.raises(ConfigurationError, match="unknown variant"):
        EmbeddingConfig(weight_overrides={"learned": {"base": 2.0}})
    with pytest.raises(ConfigurationError, match="Unknown weight"):
        EmbeddingConfig(weight_overrides={"enhanced": {"bonus": 2.0}})


def test_weight_overrides_replace_only_named_entries() -> None:
    config = EmbeddingConfig(weight_overrides={"primary_key": {"entity": 7.0}})

    table = config.weights_for("primary_key", PrimaryKeyAwareEmbeddingGenerator.default_weights)

    assert table["entity"] == 7.0
    assert table["primary_key_extra"] == 15.0
    assert PrimaryKeyAwareEmbeddingGenerator.default_weights["entity"] == 2.0


@pytest.mark.parametrize("decay", [0.0, 1.5, -0.1])
def test_window_decay_must_be_in_unit_interval(decay: float) -> None:
    with pytest.raises(ConfigurationError):
        EmbeddingConfig(window_decay=decay)


def test_parse_generator_weights() -> None:
    assert parse_generator_weights("enhanced=2, primary_key=0.5,") == {
        "enhanced": 2.0,
        "primary_key": 0.5,
    }
    with pytest.raises(ConfigurationError):
        parse_generator_weights("enhanced")
    with pytest.raises(ConfigurationError):
        parse_generator_weights("enhanced=lots")


def test_from_env_reads_schemavec_variables(monkeypatch) -> None:
    monkeypatch.setenv("SCHEMAVEC_EMBEDDING_SIZE", "64")
    monkeypatch.setenv("SCHEMAVEC_GENERATOR_WEIGHTS", "enhanced=1,foreign_key=3")
    monkeypatch.setenv("SCHEMAVEC_REMOVE_STOP_WORDS", "yes")
    monkeypatch.setenv("SCHEMAVEC_WINDOW_DECAY", "0.25")
    monkeypatch.setenv("SCHEMAVEC_WINDOW_RADIUS", "2")

    config = EmbeddingConfig.from_env()

    assert config.embedding_size == 64
    assert config.generator_weights == {"enhanced": 1.0, "foreign_key": 3.0}
    assert config.remove_stop_words is True
    assert config.window_decay == 0.25
    assert config.window_radius == 2


def test_from_env_rejects_garbage(monkeypatch) -> None:
    monkeypatch.setenv("SCHEMAVEC_EMBEDDING_SIZE", "big")
    with pytest.raises(ConfigurationError):
        EmbeddingConfig.from_env()

    monkeypatch.setenv("SCHEMAVEC_EMBEDDING_SIZE", "32")
    monkeypatch.setenv("SCHEMAVEC_REMOVE_STOP_WORDS", "maybe")
    with pytest.raises(ConfigurationError):
        EmbeddingConfig.from_env()
