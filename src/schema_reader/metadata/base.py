"""
Shared pieces for provider catalog readers.

Readers are plain classes that satisfy the CatalogReader protocol; there is
no concrete base class to inherit from. The helpers here render the
``@name`` bind markers used in the SQL templates into whatever paramstyle
the DB-API driver expects and turn cursor results into typed rows.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, List, Optional, Protocol, Sequence, Tuple, Type, TypeVar, Union

from schema_reader.models import (
    CatalogRow,
    CheckConstraintRow,
    ForeignKeyRow,
    PrimaryKeyRow,
    QueryKind,
    UniqueKeyRow,
)

logger = logging.getLogger(__name__)

BIND_MARKER = re.compile(r"@(\w+)")

PARAMSTYLES = ("qmark", "named", "pyformat", "format", "numeric")

Parameters = Union[Dict[str, Any], List[Any]]

R = TypeVar("R", bound=CatalogRow)


class CatalogReader(Protocol):
    """Capabilities every provider reader offers."""

    def primary_keys(self, table_name: Optional[str] = None) -> List[PrimaryKeyRow]:
        ...

    def check_constraints(self, table_name: Optional[str] = None) -> List[CheckConstraintRow]:
        ...

    def unique_keys(self, table_name: Optional[str] = None) -> List[UniqueKeyRow]:
        ...

    def foreign_keys(self, table_name: Optional[str] = None) -> List[ForeignKeyRow]:
        ...


def render_sql(
    sql: str,
    parameters: Dict[str, Any],
    paramstyle: str = "qmark",
) -> Tuple[str, Parameters]:
    """
    Rewrite ``@name`` markers for a DB-API paramstyle.

    Args:
        sql: SQL text with ``@name`` bind markers
        parameters: Values keyed by marker name (without the ``@``)
        paramstyle: Target DB-API paramstyle

    Returns:
        Tuple of (sql, parameters) ready for ``cursor.execute``. Positional
        styles repeat a value once per occurrence of its marker.
    """
    if paramstyle not in PARAMSTYLES:
        raise ValueError(
            f"Unsupported paramstyle: {paramstyle}. Expected one of {', '.join(PARAMSTYLES)}"
        )

    if paramstyle == "named":
        return BIND_MARKER.sub(r":\1", sql), dict(parameters)
    if paramstyle == "pyformat":
        return BIND_MARKER.sub(r"%(\1)s", sql), dict(parameters)

    positional: List[Any] = []

    def _positional(match: re.Match) -> str:
        positional.append(parameters[match.group(1)])
        if paramstyle == "numeric":
            return f":{len(positional)}"
        if paramstyle == "format":
            return "%s"
        return "?"

    rendered = BIND_MARKER.sub(_positional, sql)
    return rendered, positional


def fetch_rows(
    connection,
    sql: str,
    parameters: Dict[str, Any],
    row_type: Type[R],
    paramstyle: str = "qmark",
) -> List[R]:
    """
    Execute one catalog query and map every result row to ``row_type``.

    Driver errors are not caught. The connection is borrowed; only the
    cursor opened here is closed.
    """
    rendered, bound = render_sql(sql, parameters, paramstyle)

    cursor = connection.cursor()
    try:
        cursor.execute(rendered, bound)
        names = [column[0].lower() for column in cursor.description]
        rows = [row_type.from_dict(dict(zip(names, values))) for values in cursor.fetchall()]
    finally:
        cursor.close()

    logger.debug(f"{row_type.kind.value}: {len(rows)} rows")
    return rows


def read_catalog(
    reader: CatalogReader,
    kind: Union[QueryKind, str],
    table_name: Optional[str] = None,
) -> List[CatalogRow]:
    """Run the reader query matching ``kind``."""
    methods = {
        QueryKind.PRIMARY_KEYS: reader.primary_keys,
        QueryKind.CHECK_CONSTRAINTS: reader.check_constraints,
        QueryKind.UNIQUE_CONSTRAINTS: reader.unique_keys,
        QueryKind.FOREIGN_KEYS: reader.foreign_keys,
    }
    return methods[QueryKind(kind)](table_name)


def describe_filter(parameters: Dict[str, Any]) -> str:
    """Human readable summary of the bind values, for log messages."""
    parts: Sequence[str] = [
        f"{name}={value if value is not None else '*'}" for name, value in parameters.items()
    ]
    return ", ".join(parts)
