"""
Metadata readers for database system catalogs.

Each engine has one reader implementing the CatalogReader protocol;
readers are looked up by provider name through the registry.
"""

from schema_reader.metadata.base import CatalogReader, fetch_rows, read_catalog, render_sql
from schema_reader.metadata.ingres import (
    IngresMetadataExtractor,
    expand_column_rows,
    parse_column_names,
)
from schema_reader.metadata.registry import (
    available_providers,
    get_reader,
    register_reader,
    resolve_reader,
)

__all__ = [
    "CatalogReader",
    "IngresMetadataExtractor",
    "available_providers",
    "expand_column_rows",
    "fetch_rows",
    "get_reader",
    "parse_column_names",
    "read_catalog",
    "register_reader",
    "render_sql",
    "resolve_reader",
]
