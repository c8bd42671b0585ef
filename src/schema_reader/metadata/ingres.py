"""
Ingres metadata reader.

Reads primary keys, check constraints, unique constraints and foreign keys
from the Ingres standard catalogs (iikeys, iiconstraints, iiref_constraints).
Ingres pads its catalog names to fixed width, so every name is trimmed in
the SQL itself.

Unique and foreign key catalogs do not list their columns; the column list
is recovered from the constraint definition text, e.g.
``FOREIGN KEY (al_ccode) REFERENCES "martin".country(ct_code)``.
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Iterable, List, Optional, Type, TypeVar

from schema_reader.metadata.base import R, describe_filter, fetch_rows
from schema_reader.metadata.registry import register_reader
from schema_reader.models import (
    CheckConstraintRow,
    ForeignKeyRow,
    PrimaryKeyRow,
    QueryKind,
    TableQuery,
    UniqueKeyRow,
)

logger = logging.getLogger(__name__)

# reference: http://docs.ingres.com/ingres/10.0/opensql-reference-guide/5067-the-iiconstraints-catalog

PRIMARY_KEYS_SQL = """SELECT
trim(constraint_name) AS constraint_name,
trim(table_name) AS table_name,
trim(schema_name) AS schema_name,
trim(column_name) AS column_name,
key_position AS ordinal_position
FROM iikeys
WHERE
    (trim(table_name) = @tableName OR @tableName IS NULL) AND
    (trim(schema_name) = @schemaOwner OR @schemaOwner IS NULL)"""

CHECK_CONSTRAINTS_SQL = """SELECT
trim(constraint_name) AS constraint_name,
trim(table_name) AS table_name,
trim(schema_name) AS schema_name,
text_segment AS expression
FROM iiconstraints
WHERE
    constraint_type = 'C' AND
    (trim(table_name) = @tableName OR @tableName IS NULL) AND
    (trim(schema_name) = @schemaOwner OR @schemaOwner IS NULL)"""

UNIQUE_KEYS_SQL = """SELECT
trim(constraint_name) AS constraint_name,
trim(table_name) AS table_name,
trim(schema_name) AS schema_name,
text_segment
FROM iiconstraints
WHERE
    constraint_type = 'U' AND
    (trim(table_name) = @tableName OR @tableName IS NULL) AND
    (trim(schema_name) = @schemaOwner OR @schemaOwner IS NULL)"""

# ref_* names are char(256)
FOREIGN_KEYS_SQL = """SELECT
trim(c.ref_constraint_name) AS constraint_name,
trim(c.ref_table_name) AS table_name,
trim(c.ref_schema_name) AS schema_name,
trim(c.unique_constraint_name) AS unique_constraint_name,
trim(c.unique_table_name) AS fk_table,
i.text_segment
FROM iiref_constraints c
JOIN iiconstraints i ON c.ref_constraint_name = i.constraint_name AND c.ref_schema_name = i.schema_name
WHERE
    (trim(c.ref_table_name) = @tableName OR @tableName IS NULL) AND
    (trim(c.ref_schema_name) = @schemaOwner OR @schemaOwner IS NULL)"""

Row = TypeVar("Row", UniqueKeyRow, ForeignKeyRow)


def parse_column_names(text: Optional[str]) -> List[str]:
    """
    Extract the column names from constraint definition text.

    Only the first parenthesized group is read, so the referenced columns
    of a foreign key are never returned. Quotes and surrounding spaces are
    stripped from each name.

    Raises:
        IndexError: if there is no ``)`` after the first ``(``
    """
    if not text:
        return []

    start = text.find("(") + 1
    end = text.find(")", start)
    if end < 0:
        raise IndexError(f"Unterminated column list in constraint text: {text!r}")

    return [name.strip('" ') for name in text[start:end].split(",")]


def expand_column_rows(rows: Iterable[Row]) -> List[Row]:
    """
    Return one row per (constraint, column) pair.

    Each input row yields a copy carrying its first column; rows for any
    further columns are appended after all input rows, in source order.
    Rows with no text segment pass through with column_name unset.
    """
    primary: List[Row] = []
    additions: List[Row] = []

    for row in rows:
        names = parse_column_names(row.text_segment)
        if not names:
            primary.append(row)
            continue

        primary.append(replace(row, column_name=names[0]))
        # multi-column keys: no ordinal position is available
        additions.extend(replace(row, column_name=name) for name in names[1:])

    return primary + additions


@register_reader("ingres", "ingres.client", "ca.ingres", "ingres.odbc")
class IngresMetadataExtractor:
    """
    Reads constraint metadata from an Ingres database.

    The connection is borrowed from the caller and never closed here.

    Note: Ingres also has sequences and identity columns, but there is no
    catalog for identity; it shows only in the column default.
    """

    def __init__(
        self,
        connection,
        owner: Optional[str] = None,
        paramstyle: str = "qmark",
    ):
        """
        Initialize reader.

        Args:
            connection: Open DB-API connection
            owner: Schema owner filter (None for all schemas)
            paramstyle: Bind style of the driver behind ``connection``
        """
        self.connection = connection
        self.owner = owner
        self.paramstyle = paramstyle

    def _query(self, kind: QueryKind, sql: str, row_type: Type[R], table_name: Optional[str]) -> List[R]:
        parameters = TableQuery(table_name=table_name, schema_owner=self.owner).to_parameters()
        logger.debug(f"Ingres {kind.value} ({describe_filter(parameters)})")
        return fetch_rows(self.connection, sql, parameters, row_type, self.paramstyle)

    def primary_keys(self, table_name: Optional[str] = None) -> List[PrimaryKeyRow]:
        """Get primary key columns, one row per key column."""
        return self._query(QueryKind.PRIMARY_KEYS, PRIMARY_KEYS_SQL, PrimaryKeyRow, table_name)

    def check_constraints(self, table_name: Optional[str] = None) -> List[CheckConstraintRow]:
        """Get check constraints with their expression text."""
        return self._query(
            QueryKind.CHECK_CONSTRAINTS, CHECK_CONSTRAINTS_SQL, CheckConstraintRow, table_name
        )

    def unique_keys(self, table_name: Optional[str] = None) -> List[UniqueKeyRow]:
        """Get unique constraints, one row per constrained column."""
        rows = self._query(QueryKind.UNIQUE_CONSTRAINTS, UNIQUE_KEYS_SQL, UniqueKeyRow, table_name)
        return expand_column_rows(rows)

    def foreign_keys(self, table_name: Optional[str] = None) -> List[ForeignKeyRow]:
        """Get foreign keys, one row per referencing column."""
        rows = self._query(QueryKind.FOREIGN_KEYS, FOREIGN_KEYS_SQL, ForeignKeyRow, table_name)
        return expand_column_rows(rows)
