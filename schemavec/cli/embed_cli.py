"""
Embedding command group for the schemavec CLI.

Public surface:

    • `embed_app` → mounted in schemavec/cli/main.py as:

          schemavec embed run --columns-path columns.json [--schema-path schema.sql]
          schemavec embed compare --left a.json --right b.json

The commands are thin wrappers: they load column records, build an
EmbeddingConfig from the environment, and delegate to
schemavec.pipeline.embed_schema().
"""

import json
from pathlib import Path
from typing import Any, Dict, Optional

import typer

from schemavec.config import GENERATOR_NAMES, EmbeddingConfig
from schemavec.embedding import LearnedEmbeddingAdapter, WordIndex
from schemavec.errors import SchemaEmbeddingError
from schemavec.logging_utils import log_debug, log_error, log_verbose
from schemavec.pipeline import embed_schema
from schemavec.schema import load_columns, metadata_from_columns, render_create_table
from schemavec.similarity import cosine_similarity

embed_app = typer.Typer(
    help="Generate schema embeddings and compare schemas by similarity."
)


def _build_config(embedding_size: Optional[int], with_learned: bool = False) -> EmbeddingConfig:
    config = EmbeddingConfig.from_env()
    generator_weights = dict(config.generator_weights)
    # --with-learned blends the learned vector in even when the environment
    # leaves it unweighted.
    if with_learned and not generator_weights.get("learned"):
        generator_weights["learned"] = 1.0
    if embedding_size is None and generator_weights == config.generator_weights:
        return config
    return EmbeddingConfig(
        embedding_size=embedding_size if embedding_size is not None else config.embedding_size,
        generator_weights=generator_weights,
        weight_overrides=config.weight_overrides,
        remove_stop_words=config.remove_stop_words,
        window_decay=config.window_decay,
        window_radius=config.window_radius,
    )


def run_embed(
    columns_path: Path,
    schema_path: Optional[Path] = None,
    generator: str = "combined",
    embedding_size: Optional[int] = None,
    with_learned: bool = False,
    parallel: bool = False,
    verbose: bool = False,
    debug: bool = False,
    word_index: Optional[WordIndex] = None,
) -> Dict[str, Any]:
    """
    Embed the schema described by a column-records JSON file.

    Returns a dict with the generator name, embedding size, vocabulary size
    and the vector itself.
    """
    if generator != "combined" and generator not in GENERATOR_NAMES:
        raise typer.BadParameter(
            f"Unknown generator {generator!r}. Choose one of: combined, {', '.join(GENERATOR_NAMES)}."
        )

    config = _build_config(embedding_size, with_learned=with_learned)
    log_debug(f"embedding_size={config.embedding_size} weights={config.generator_weights}", debug)

    log_verbose(f"Loading column records from {columns_path}...", verbose)
    records = load_columns(columns_path)
    metadata = metadata_from_columns(records)
    log_debug(repr(metadata), debug)

    if schema_path is not None:
        schema_text = schema_path.read_text(encoding="utf-8")
    else:
        schema_text = render_create_table(records)

    learned = None
    if with_learned or generator == "learned" or "learned" in config.generator_weights:
        learned = LearnedEmbeddingAdapter(target_size=config.embedding_size)

    log_verbose("Generating embeddings...", verbose)
    result = embed_schema(
        schema_text, metadata, config, learned=learned, parallel=parallel, word_index=word_index
    )
    log_debug(f"vocabulary_size={result['vocabulary_size']}", debug)

    vector = result["embedding"] if generator == "combined" else result["vectors"][generator]
    return {
        "generator": generator,
        "embedding_size": len(vector),
        "vocabulary_size": result["vocabulary_size"],
        "embedding": vector,
    }


# ---------------------------------------------------------------------------
# Command: schemavec embed run
# ---------------------------------------------------------------------------
@embed_app.command("run")
def embed_command(
    columns_path: Path = typer.Option(
        ...,
        "--columns-path",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="JSON list of introspected column records.",
    ),
    schema_path: Optional[Path] = typer.Option(
        None,
        "--schema-path",
        exists=True,
        file_okay=True,
        dir_okay=False,
        readable=True,
        help="CREATE TABLE text to embed. Rendered from the column records when omitted.",
    ),
    generator: str = typer.Option(
        "combined",
        "--generator",
        help="Which vector to output: combined, enhanced, primary_key, foreign_key or learned.",
        show_default=True,
    ),
    embedding_size: Optional[int] = typer.Option(
        None,
        "--embedding-size",
        help="Override SCHEMAVEC_EMBEDDING_SIZE.",
    ),
    with_learned: bool = typer.Option(
        False,
        "--with-learned",
        help=(
            "Blend in the learned-embedding adapter (offline deterministic model), "
            "at weight 1 unless SCHEMAVEC_GENERATOR_WEIGHTS sets one."
        ),
    ),
    parallel: bool = typer.Option(False, "--parallel", help="Run extractors concurrently."),
    output: Optional[Path] = typer.Option(
        None,
        "--output",
        file_okay=True,
        dir_okay=False,
        writable=True,
        help="Write the embedding JSON here instead of stdout.",
    ),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
    debug: bool = typer.Option(False, "--debug", help="Show diagnostic output on stderr."),
) -> None:
    """Embed a schema and print or save the resulting vector as JSON."""
    try:
        payload = run_embed(
            columns_path=columns_path,
            schema_path=schema_path,
            generator=generator,
            embedding_size=embedding_size,
            with_learned=with_learned,
            parallel=parallel,
            verbose=verbose,
            debug=debug,
        )
    except SchemaEmbeddingError as exc:
        log_error(f"Embedding failed: {exc}")
        raise typer.Exit(code=1)

    if output is None:
        typer.echo(json.dumps(payload))
        return

    with output.open("w", encoding="utf-8") as f:
        json.dump(payload, f)
    log_verbose(f"Embedding written to: {output}", verbose)


# ---------------------------------------------------------------------------
# Command: schemavec embed compare
# ---------------------------------------------------------------------------
@embed_app.command("compare")
def compare_command(
    left: Path = typer.Option(..., "--left", exists=True, dir_okay=False, help="First column-records JSON."),
    right: Path = typer.Option(..., "--right", exists=True, dir_okay=False, help="Second column-records JSON."),
    embedding_size: Optional[int] = typer.Option(None, "--embedding-size", help="Override SCHEMAVEC_EMBEDDING_SIZE."),
    with_learned: bool = typer.Option(False, "--with-learned", help="Blend in the learned-embedding adapter."),
    verbose: bool = typer.Option(False, "--verbose", help="Show progress messages."),
) -> None:
    """Print the cosine similarity of two schemas' combined embeddings."""
    # Both schemas must hash through one vocabulary to be comparable.
    shared = WordIndex()
    try:
        a, b = (
            run_embed(
                path,
                embedding_size=embedding_size,
                with_learned=with_learned,
                verbose=verbose,
                word_index=shared,
            )["embedding"]
            for path in (left, right)
        )
        score = cosine_similarity(a, b)
    except SchemaEmbeddingError as exc:
        log_error(f"Comparison failed: {exc}")
        raise typer.Exit(code=1)

    typer.echo(f"{score:.6f}")
