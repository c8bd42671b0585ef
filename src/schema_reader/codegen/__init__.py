"""Code generation artifacts."""

from schema_reader.codegen.packages import (
    MANIFESTS,
    get_manifest,
    write_entity_framework_net4,
    write_fluent_nhibernate_net4,
)

__all__ = [
    "MANIFESTS",
    "get_manifest",
    "write_entity_framework_net4",
    "write_fluent_nhibernate_net4",
]
