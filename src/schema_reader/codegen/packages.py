"""
packages.config writers for generated .NET projects.

The two documents are fixed; any change to a package id or version here is
a change in generated output.
"""

from __future__ import annotations

from typing import Dict

from schema_reader.models import DependencyManifest, PackageReference

ENTITY_FRAMEWORK_NET4 = DependencyManifest(
    name="entityframework",
    packages=(
        PackageReference("EntityFramework", "6.0.1", "net40"),
    ),
)

FLUENT_NHIBERNATE_NET4 = DependencyManifest(
    name="fluentnhibernate",
    packages=(
        PackageReference("FluentNHibernate", "1.3.0.733", "net40"),
        PackageReference("Iesi.Collections", "3.2.0.4000", "net40"),
        PackageReference("NHibernate", "3.3.3.4001", "net40"),
    ),
)

MANIFESTS: Dict[str, DependencyManifest] = {
    ENTITY_FRAMEWORK_NET4.name: ENTITY_FRAMEWORK_NET4,
    FLUENT_NHIBERNATE_NET4.name: FLUENT_NHIBERNATE_NET4,
}


def write_entity_framework_net4() -> str:
    """packages.config for an Entity Framework 6 project on .NET 4."""
    return ENTITY_FRAMEWORK_NET4.render()


def write_fluent_nhibernate_net4() -> str:
    """packages.config for a Fluent NHibernate project on .NET 4."""
    return FLUENT_NHIBERNATE_NET4.render()


def get_manifest(target: str) -> DependencyManifest:
    """Look up a manifest by target name (case-insensitive)."""
    key = target.lower()
    if key not in MANIFESTS:
        raise ValueError(f"Unknown target: {target}. Available: {', '.join(sorted(MANIFESTS))}")
    return MANIFESTS[key]
