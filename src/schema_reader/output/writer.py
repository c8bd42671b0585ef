"""
Output Writer - writes catalog rows and manifests to disk.

Output Structure:
    output/
    ├── constraints.yaml        # All rows, grouped by query kind
    ├── csv/                    # One CSV per query kind
    │   ├── primarykeys.csv
    │   └── ...
    └── packages.config         # Dependency manifest
"""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, List, Optional, Sequence, Type

import pandas as pd
import yaml

from schema_reader.models import ROW_TYPES, CatalogRow, DependencyManifest, QueryKind

logger = logging.getLogger(__name__)


def rows_to_frame(
    rows: Sequence[CatalogRow],
    row_type: Optional[Type[CatalogRow]] = None,
) -> pd.DataFrame:
    """
    Project catalog rows into a DataFrame.

    Args:
        rows: Rows of a single query kind
        row_type: Record type, used for the columns when ``rows`` is empty

    Returns:
        DataFrame with one column per record field, in declaration order
    """
    if row_type is None and rows:
        row_type = type(rows[0])
    columns = row_type.column_names() if row_type else []

    return pd.DataFrame([row.to_dict() for row in rows], columns=columns)


class OutputWriter:
    """Writes catalog query results and manifests under one directory."""

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)

    def write_yaml(
        self,
        results: Dict[QueryKind, List[CatalogRow]],
        filename: str = "constraints.yaml",
        **context: Any,
    ) -> Path:
        """Dump all rows, grouped by query kind, as YAML."""
        document = {
            "generated_at": datetime.now().isoformat(),
            **context,
            "results": {
                QueryKind(kind).value: [row.to_dict() for row in rows]
                for kind, rows in results.items()
            },
        }

        path = self.output_dir / filename
        with open(path, "w") as f:
            yaml.safe_dump(document, f, default_flow_style=False, sort_keys=False)

        logger.info(f"Wrote {sum(len(r) for r in results.values())} rows to {path}")
        return path

    def write_csv(self, results: Dict[QueryKind, List[CatalogRow]]) -> Dict[QueryKind, Path]:
        """Write one CSV per query kind."""
        csv_dir = self.output_dir / "csv"
        csv_dir.mkdir(parents=True, exist_ok=True)

        output_paths = {}
        for kind, rows in results.items():
            kind = QueryKind(kind)
            df = rows_to_frame(rows, ROW_TYPES[kind])
            path = csv_dir / f"{kind.value.lower()}.csv"
            df.to_csv(path, index=False, na_rep="")
            output_paths[kind] = path
            logger.info(f"Wrote {len(df)} rows to {path}")

        return output_paths

    def write_manifest(
        self,
        manifest: DependencyManifest,
        filename: str = "packages.config",
    ) -> Path:
        """Write a dependency manifest exactly as rendered."""
        path = self.output_dir / filename
        # newline="" keeps the rendered bytes unchanged on every platform
        with open(path, "w", encoding="utf-8", newline="") as f:
            f.write(manifest.render())

        logger.info(f"Wrote {manifest.name} manifest to {path}")
        return path
