"""
Core data models for the schema_reader package.

Defines the catalog row records returned by provider readers, the query
filter passed to every catalog query, and the dependency manifest types
used by the code generation writers.
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any, ClassVar, Dict, List, Optional, Tuple


class QueryKind(str, Enum):
    """Logical catalog queries every provider reader answers."""
    PRIMARY_KEYS = "PrimaryKeys"
    CHECK_CONSTRAINTS = "CheckConstraints"
    UNIQUE_CONSTRAINTS = "UniqueConstraints"
    FOREIGN_KEYS = "ForeignKeys"


@dataclass(frozen=True)
class TableQuery:
    """Filter for a catalog query. None means match any."""
    table_name: Optional[str] = None
    schema_owner: Optional[str] = None

    def to_parameters(self) -> Dict[str, Optional[str]]:
        """Bind parameters keyed by the names used in the SQL templates."""
        return {
            "tableName": self.table_name,
            "schemaOwner": self.schema_owner,
        }


@dataclass
class CatalogRow:
    """Base for catalog query records; subclasses declare the columns."""
    kind: ClassVar[QueryKind]

    @classmethod
    def column_names(cls) -> List[str]:
        """Logical column names in declaration order."""
        return [f.name for f in fields(cls)]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by column name."""
        return {name: getattr(self, name) for name in self.column_names()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]):
        """
        Create from a row dictionary.

        Keys are matched case-insensitively; columns the row does not carry
        fall back to the field default.
        """
        lowered = {str(k).lower(): v for k, v in data.items()}
        kwargs = {}
        for f in fields(cls):
            if f.name in lowered:
                kwargs[f.name] = lowered[f.name]
        return cls(**kwargs)


@dataclass
class PrimaryKeyRow(CatalogRow):
    """One primary key column."""
    kind: ClassVar[QueryKind] = QueryKind.PRIMARY_KEYS

    constraint_name: str
    table_name: str
    schema_name: str
    column_name: str
    ordinal_position: Optional[int] = None


@dataclass
class CheckConstraintRow(CatalogRow):
    """A check constraint; the expression is kept as free text."""
    kind: ClassVar[QueryKind] = QueryKind.CHECK_CONSTRAINTS

    constraint_name: str
    table_name: str
    schema_name: str
    expression: Optional[str] = None


@dataclass
class UniqueKeyRow(CatalogRow):
    """One column of a unique constraint, decoded from text_segment."""
    kind: ClassVar[QueryKind] = QueryKind.UNIQUE_CONSTRAINTS

    constraint_name: str
    table_name: str
    schema_name: str
    text_segment: Optional[str] = None
    column_name: Optional[str] = None


@dataclass
class ForeignKeyRow(CatalogRow):
    """One referencing column of a foreign key, decoded from text_segment."""
    kind: ClassVar[QueryKind] = QueryKind.FOREIGN_KEYS

    constraint_name: str
    table_name: str
    schema_name: str
    unique_constraint_name: Optional[str] = None
    fk_table: Optional[str] = None
    text_segment: Optional[str] = None
    column_name: Optional[str] = None


ROW_TYPES: Dict[QueryKind, type] = {
    QueryKind.PRIMARY_KEYS: PrimaryKeyRow,
    QueryKind.CHECK_CONSTRAINTS: CheckConstraintRow,
    QueryKind.UNIQUE_CONSTRAINTS: UniqueKeyRow,
    QueryKind.FOREIGN_KEYS: ForeignKeyRow,
}


@dataclass(frozen=True)
class PackageReference:
    """A single package entry in a packages.config manifest."""
    id: str
    version: str
    target_framework: str

    def to_dict(self) -> Dict[str, str]:
        return {
            "id": self.id,
            "version": self.version,
            "target_framework": self.target_framework,
        }


@dataclass(frozen=True)
class DependencyManifest:
    """Named, immutable set of package references."""
    name: str
    packages: Tuple[PackageReference, ...] = field(default_factory=tuple)

    @property
    def package_ids(self) -> List[str]:
        """Return the package ids in manifest order."""
        return [p.id for p in self.packages]

    def render(self) -> str:
        """Render as a packages.config XML document."""
        lines = [
            '<?xml version="1.0" encoding="utf-8"?>',
            "<packages>",
        ]
        for package in self.packages:
            lines.append(
                f'  <package id="{package.id}" version="{package.version}" '
                f'targetFramework="{package.target_framework}" />'
            )
        lines.append("</packages>")
        return "\n".join(lines)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "name": self.name,
            "packages": [p.to_dict() for p in self.packages],
        }
