"""
Output module for writing catalog results and manifests.

Supports:
- YAML dump of catalog rows
- One CSV per query kind (via pandas)
- packages.config manifests
"""

from schema_reader.output.writer import OutputWriter, rows_to_frame

__all__ = [
    "OutputWriter",
    "rows_to_frame",
]
