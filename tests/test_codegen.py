"""Tests for packages.config writers."""

import pytest

from schema_reader.codegen import (
    MANIFESTS,
    get_manifest,
    write_entity_framework_net4,
    write_fluent_nhibernate_net4,
)

ENTITY_FRAMEWORK_EXPECTED = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<packages>\n"
    '  <package id="EntityFramework" version="6.0.1" targetFramework="net40" />\n'
    "</packages>"
)

FLUENT_NHIBERNATE_EXPECTED = (
    '<?xml version="1.0" encoding="utf-8"?>\n'
    "<packages>\n"
    '  <package id="FluentNHibernate" version="1.3.0.733" targetFramework="net40" />\n'
    '  <package id="Iesi.Collections" version="3.2.0.4000" targetFramework="net40" />\n'
    '  <package id="NHibernate" version="3.3.3.4001" targetFramework="net40" />\n'
    "</packages>"
)


class TestPackagesWriter:

    def test_entity_framework_text(self):
        assert write_entity_framework_net4() == ENTITY_FRAMEWORK_EXPECTED

    def test_fluent_nhibernate_text(self):
        assert write_fluent_nhibernate_net4() == FLUENT_NHIBERNATE_EXPECTED

    def test_stable_across_calls(self):
        assert write_entity_framework_net4() == write_entity_framework_net4()
        assert write_fluent_nhibernate_net4() == write_fluent_nhibernate_net4()
        assert write_entity_framework_net4() != write_fluent_nhibernate_net4()

    def test_no_trailing_newline(self):
        assert not write_entity_framework_net4().endswith("\n")


class TestManifestLookup:

    def test_targets(self):
        assert sorted(MANIFESTS) == ["entityframework", "fluentnhibernate"]

    def test_case_insensitive(self):
        manifest = get_manifest("FluentNHibernate")
        assert manifest.package_ids == ["FluentNHibernate", "Iesi.Collections", "NHibernate"]

    def test_unknown_target(self):
        with pytest.raises(ValueError, match="Unknown target"):
            get_manifest("linq2sql")
