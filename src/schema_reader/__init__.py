"""
Schema Reader - database catalog metadata for code generation

Reads keys and constraints from a database engine's system catalogs into
typed rows, and emits the dependency manifests used by generated projects.

Features:
- Ingres catalog reader (iikeys, iiconstraints, iiref_constraints)
- Column lists decoded from unique/foreign key definition text
- Provider lookup by name
- packages.config manifests for Entity Framework and Fluent NHibernate
"""

__version__ = "0.1.0"
__author__ = "DSR Team"

from schema_reader.models import (
    CheckConstraintRow,
    DependencyManifest,
    ForeignKeyRow,
    PackageReference,
    PrimaryKeyRow,
    QueryKind,
    TableQuery,
    UniqueKeyRow,
)

from schema_reader.metadata import (
    CatalogReader,
    IngresMetadataExtractor,
    get_reader,
    read_catalog,
)

from schema_reader.codegen import (
    write_entity_framework_net4,
    write_fluent_nhibernate_net4,
)

__all__ = [
    # Core models
    "QueryKind",
    "TableQuery",
    "PrimaryKeyRow",
    "CheckConstraintRow",
    "UniqueKeyRow",
    "ForeignKeyRow",
    "PackageReference",
    "DependencyManifest",
    # Readers
    "CatalogReader",
    "IngresMetadataExtractor",
    "get_reader",
    "read_catalog",
    # Code generation
    "write_entity_framework_net4",
    "write_fluent_nhibernate_net4",
]
