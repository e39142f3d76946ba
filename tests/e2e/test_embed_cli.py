"""CLI tests for `schemavec embed run` and `schemavec embed compare`."""

import json

import pytest

from schemavec.cli.main import cli


def test_embed_run_prints_json(cli_runner, fixture_path) -> None:
    result = cli_runner.invoke(
        cli,
        ["embed", "run", "--columns-path", str(fixture_path("shop_columns.json")), "--embedding-size", "32"],
    )

    assert result.exit_code == 0, result.output
    payload = json.loads(result.stdout)
    assert payload["generator"] == "combined"
    assert payload["embedding_size"] == 32
    assert len(payload["embedding"]) == 32


def test_embed_run_single_generator_to_file(cli_runner, fixture_path, tmp_path) -> None:
    output = tmp_path / "embedding.json"

    result = cli_runner.invoke(
        cli,
        [
            "embed", "run",
            "--columns-path", str(fixture_path("shop_columns.json")),
            "--generator", "primary_key",
            "--embedding-size", "16",
            "--output", str(output),
            "--verbose",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "Generating embeddings..." in result.stdout
    payload = json.loads(output.read_text(encoding="utf-8"))
    assert payload["generator"] == "primary_key"
    assert len(payload["embedding"]) == 16


def test_embed_run_uses_schema_text_when_given(cli_runner, fixture_path, tmp_path) -> None:
    ddl = tmp_path / "schema.sql"
    ddl.write_text("create table users (id int primary key, name varchar(50))", encoding="utf-8")

    result = cli_runner.invoke(
        cli,
        [
            "embed", "run",
            "--columns-path", str(fixture_path("shop_columns.json")),
            "--schema-path", str(ddl),
            "--embedding-size", "16",
            "--with-learned",
            "--generator", "learned",
        ],
    )

    assert result.exit_code == 0, result.output
    assert len(json.loads(result.stdout)["embedding"]) == 16


def test_embed_run_reports_configuration_errors(cli_runner, fixture_path, monkeypatch) -> None:
    monkeypatch.setenv("SCHEMAVEC_GENERATOR_WEIGHTS", "mystery=1")

    result = cli_runner.invoke(
        cli, ["embed", "run", "--columns-path", str(fixture_path("shop_columns.json"))]
    )

    assert result.exit_code == 1
    assert "Unknown generator" in result.output


def test_embed_run_rejects_unknown_generator_option(cli_runner, fixture_path) -> None:
    result = cli_runner.invoke(
        cli,
        ["embed", "run", "--columns-path", str(fixture_path("shop_columns.json")), "--generator", "nope"],
    )

    assert result.exit_code != 0


def test_embed_compare_prints_similarity(cli_runner, fixture_path) -> None:
    same = cli_runner.invoke(
        cli,
        [
            "embed", "compare",
            "--left", str(fixture_path("shop_columns.json")),
            "--right", str(fixture_path("shop_columns.json")),
            "--embedding-size", "256",
        ],
    )
    different = cli_runner.invoke(
        cli,
        [
            "embed", "compare",
            "--left", str(fixture_path("shop_columns.json")),
            "--right", str(fixture_path("library_columns.json")),
            "--embedding-size", "256",
        ],
    )

    assert same.exit_code == 0, same.output
    assert different.exit_code == 0, different.output
    assert float(same.stdout) == pytest.approx(1.0)
    assert float(different.stdout) < float(same.stdout)


def test_embed_run_with_learned_changes_combined_embedding(cli_runner, fixture_path) -> None:
    args = ["embed", "run", "--columns-path", str(fixture_path("shop_columns.json")), "--embedding-size", "32"]

    plain = cli_runner.invoke(cli, args)
    blended = cli_runner.invoke(cli, args + ["--with-learned"])

    assert plain.exit_code == 0, plain.output
    assert blended.exit_code == 0, blended.output
    plain_vector = json.loads(plain.stdout)["embedding"]
    blended_vector = json.loads(blended.stdout)["embedding"]
    assert plain_vector != pytest.approx(blended_vector)


def test_embed_compare_accepts_learned_weight_from_environment(cli_runner, fixture_path, monkeypatch) -> None:
    monkeypatch.setenv("SCHEMAVEC_GENERATOR_WEIGHTS", "enhanced=1,learned=1")

    result = cli_runner.invoke(
        cli,
        [
            "embed", "compare",
            "--left", str(fixture_path("shop_columns.json")),
            "--right", str(fixture_path("library_columns.json")),
            "--embedding-size", "64",
        ],
    )

    assert result.exit_code == 0, result.output
    assert -1.0 <= float(result.stdout) <= 1.0


def test_embed_compare_with_learned_flag(cli_runner, fixture_path) -> None:
    result = cli_runner.invoke(
        cli,
        [
            "embed", "compare",
            "--left", str(fixture_path("shop_columns.json")),
            "--right", str(fixture_path("shop_columns.json")),
            "--embedding-size", "64",
            "--with-learned",
        ],
    )

    assert result.exit_code == 0, result.output
    assert float(result.stdout) == pytest.approx(1.0)
