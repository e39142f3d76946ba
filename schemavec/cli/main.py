"""
Root entrypoint for the schemavec CLI.

This module defines the top-level `schemavec` command and mounts the
sub-apps from modules under schemavec/cli/:

    • schemavec/cli/embed_cli.py  →  `schemavec embed ...`

Typical use:

    schemavec embed run --columns-path columns.json --output embedding.json
    schemavec embed compare --left a.json --right b.json
"""

from dotenv import load_dotenv
import typer

from .embed_cli import embed_app

# Load SCHEMAVEC_* settings from a .env file, if present.
load_dotenv()

cli = typer.Typer(
    help=(
        "schemavec command-line interface.\n\n"
        "Turns a database schema (a JSON dump of introspected column "
        "records) into a fixed-length embedding vector:\n\n"
        "    schemavec embed run --columns-path columns.json\n\n"
        "and compares schemas by cosine similarity:\n\n"
        "    schemavec embed compare --left a.json --right b.json"
    )
)

cli.add_typer(embed_app, name="embed")

if __name__ == "__main__":
    cli()
