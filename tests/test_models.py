"""Tests for core data models."""

import pytest

from schema_reader.models import (
    ROW_TYPES,
    CheckConstraintRow,
    DependencyManifest,
    ForeignKeyRow,
    PackageReference,
    PrimaryKeyRow,
    QueryKind,
    TableQuery,
    UniqueKeyRow,
)


class TestTableQuery:
    """Tests for TableQuery."""

    def test_defaults_match_any(self):
        assert TableQuery().to_parameters() == {"tableName": None, "schemaOwner": None}

    def test_parameters(self):
        query = TableQuery(table_name="airline", schema_owner="martin")
        assert query.to_parameters() == {"tableName": "airline", "schemaOwner": "martin"}

    def test_frozen(self):
        query = TableQuery()
        with pytest.raises(AttributeError):
            query.table_name = "airline"


class TestCatalogRows:
    """Tests for the per-kind row records."""

    def test_kinds(self):
        assert PrimaryKeyRow.kind == QueryKind.PRIMARY_KEYS
        assert CheckConstraintRow.kind == QueryKind.CHECK_CONSTRAINTS
        assert UniqueKeyRow.kind == QueryKind.UNIQUE_CONSTRAINTS
        assert ForeignKeyRow.kind == QueryKind.FOREIGN_KEYS
        assert all(ROW_TYPES[kind].kind == kind for kind in QueryKind)

    def test_column_names(self):
        assert PrimaryKeyRow.column_names() == [
            "constraint_name", "table_name", "schema_name", "column_name", "ordinal_position",
        ]
        assert ForeignKeyRow.column_names() == [
            "constraint_name", "table_name", "schema_name",
            "unique_constraint_name", "fk_table", "text_segment", "column_name",
        ]

    def test_from_dict_case_insensitive(self):
        row = CheckConstraintRow.from_dict({
            "CONSTRAINT_NAME": "$c1",
            "table_name": "airline",
            "Schema_Name": "martin",
            "Expression": "CHECK (x > 0)",
        })
        assert row.constraint_name == "$c1"
        assert row.schema_name == "martin"
        assert row.expression == "CHECK (x > 0)"

    def test_from_dict_ignores_extra_columns(self):
        row = UniqueKeyRow.from_dict({
            "constraint_name": "$u1",
            "table_name": "airline",
            "schema_name": "martin",
            "text_segment": "UNIQUE (a)",
            "text_sequence": 1,
        })
        assert row.column_name is None

    def test_serialization(self):
        row = PrimaryKeyRow("$pk", "route", "ingres", "rt_airline", 1)
        assert PrimaryKeyRow.from_dict(row.to_dict()) == row


class TestDependencyManifest:
    """Tests for DependencyManifest."""

    def test_render_single(self):
        manifest = DependencyManifest(
            name="demo",
            packages=(PackageReference("Dapper", "1.13", "net45"),),
        )
        assert manifest.render().splitlines() == [
            '<?xml version="1.0" encoding="utf-8"?>',
            "<packages>",
            '  <package id="Dapper" version="1.13" targetFramework="net45" />',
            "</packages>",
        ]

    def test_to_dict(self):
        manifest = DependencyManifest(
            name="demo",
            packages=(PackageReference("Dapper", "1.13", "net45"),),
        )
        assert manifest.to_dict() == {
            "name": "demo",
            "packages": [{"id": "Dapper", "version": "1.13", "target_framework": "net45"}],
        }

    def test_immutable(self):
        manifest = DependencyManifest(name="demo")
        with pytest.raises(AttributeError):
            manifest.name = "other"
