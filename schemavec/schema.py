"""
Schema metadata helpers.

The database connection and the introspection query live outside
schemavec. What arrives here is an ordered list of ColumnRecord rows; this
module turns those rows into the SchemaMetadata the extractors consume and,
for the CLI, into CREATE TABLE text.
"""

import json
from pathlib import Path
from typing import Dict, Iterable, List, Optional, Sequence, Union

from schemavec.errors import ConfigurationError
from schemavec.types import ColumnRecord, ForeignKeyRef

ForeignKeyInput = Union[str, ForeignKeyRef]


def _clean(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def coerce_foreign_keys(foreign_keys: Iterable[ForeignKeyInput]) -> List[ForeignKeyRef]:
    """
    Normalize foreign keys to lowercase ForeignKeyRef dicts.

    Plain strings become refs with no referenced entity. Entries with an
    empty column name are dropped.
    """
    refs: List[ForeignKeyRef] = []
    for fk in foreign_keys:
        if isinstance(fk, str):
            ref = ForeignKeyRef(column=_clean(fk))
        else:
            ref = ForeignKeyRef(column=_clean(fk.get("column")))
            if fk.get("referenced_table"):
                ref["referenced_table"] = _clean(fk.get("referenced_table"))
            if fk.get("referenced_column"):
                ref["referenced_column"] = _clean(fk.get("referenced_column"))
        if ref["column"]:
            refs.append(ref)
    return refs


class SchemaMetadata:
    """
    Structured facts about a schema, alongside its rendered text.

    Attributes
    ----------
    entities : List[str]
        Table and column names in introspection order, without duplicates.
    primary_key : str
        The primary key column, or "" when the schema has none.
    foreign_keys : List[ForeignKeyRef]
        Foreign key columns with their referenced table/column when known.
    """

    def __init__(
        self,
        entities: Optional[Sequence[str]] = None,
        primary_key: str = "",
        foreign_keys: Optional[Sequence[ForeignKeyInput]] = None,
    ) -> None:
        self.entities: List[str] = list(entities or [])
        self.primary_key = primary_key or ""
        self.foreign_keys: List[ForeignKeyRef] = coerce_foreign_keys(foreign_keys or [])

    def __repr__(self) -> str:
        return (
            f"SchemaMetadata(entities={self.entities!r}, primary_key={self.primary_key!r}, "
            f"foreign_keys={self.foreign_keys!r})"
        )


def metadata_from_columns(records: Sequence[ColumnRecord]) -> SchemaMetadata:
    """
    Derive SchemaMetadata from introspected column records.

    • entities: each table name followed by its column names, first-seen order
    • primary_key: the first column flagged as a primary key
    • foreign_keys: every column flagged as a foreign key, with its reference
    """
    entities: List[str] = []
    seen = set()
    primary_key = ""
    foreign_keys: List[ForeignKeyRef] = []

    for record in records:
        for name in (record.get("table"), record.get("column")):
            if name and name not in seen:
                seen.add(name)
                entities.append(name)

        if record.get("is_primary_key") and not primary_key:
            primary_key = record.get("column", "")

        if record.get("is_foreign_key"):
            foreign_keys.append(
                ForeignKeyRef(
                    column=record.get("column", ""),
                    referenced_table=record.get("referenced_table"),
                    referenced_column=record.get("referenced_column"),
                )
            )

    return SchemaMetadata(entities=entities, primary_key=primary_key, foreign_keys=foreign_keys)


def render_create_table(records: Sequence[ColumnRecord]) -> str:
    """
    Render column records as CREATE TABLE statements, one per table.

    This is a plain reference renderer so the CLI can embed a schema from a
    column dump alone. Callers with their own DDL can pass that text instead.
    """
    tables: Dict[str, List[ColumnRecord]] = {}
    for record in records:
        tables.setdefault(record.get("table", ""), []).append(record)

    statements = []
    for table, columns in tables.items():
        lines = []
        constraints = []
        for column in columns:
            parts = [column.get("column", ""), column.get("data_type", "")]
            if not column.get("is_nullable", True):
                parts.append("NOT NULL")
            if column.get("is_identity"):
                parts.append("IDENTITY")
            if column.get("is_primary_key"):
                parts.append("PRIMARY KEY")
            lines.append("  " + " ".join(p for p in parts if p))

            if column.get("is_foreign_key") and column.get("referenced_table"):
                target = column["referenced_table"]
                if column.get("referenced_column"):
                    target += f"({column['referenced_column']})"
                constraints.append(f"  FOREIGN KEY ({column.get('column', '')}) REFERENCES {target}")

        body = ",\n".join(lines + constraints)
        statements.append(f"CREATE TABLE {table} (\n{body}\n);")

    return "\n\n".join(statements)


def load_columns(path: Path) -> List[ColumnRecord]:
    """
    Load a JSON list of column records.

    Raises ConfigurationError when the file is not a JSON list of objects.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except UnicodeDecodeError as exc:
        raise ConfigurationError(f"{path} is not UTF-8 encoded: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"{path} is not valid JSON: {exc}") from exc
    if not isinstance(data, list) or not all(isinstance(row, dict) for row in data):
        raise ConfigurationError(f"{path} must contain a JSON list of column records.")
    return data
