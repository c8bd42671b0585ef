"""
Reader configuration.

Loaded from a YAML file such as:

    provider: ingres
    connection_string: "DRIVER={Ingres};SERVER=(local);DATABASE=demodb"
    schema_owner: martin
    paramstyle: qmark
    output_dir: output
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from schema_reader.metadata.base import PARAMSTYLES

logger = logging.getLogger(__name__)

CONNECTION_ENV_VAR = "SCHEMA_READER_CONNECTION"


@dataclass
class ReaderConfig:
    """Settings for a catalog read."""
    provider: str = "ingres"
    connection_string: Optional[str] = None
    schema_owner: Optional[str] = None
    paramstyle: str = "qmark"
    output_dir: Path = field(default_factory=lambda: Path("output"))

    def __post_init__(self):
        if isinstance(self.output_dir, str):
            self.output_dir = Path(self.output_dir)
        if self.paramstyle not in PARAMSTYLES:
            raise ValueError(f"Unsupported paramstyle: {self.paramstyle}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "provider": self.provider,
            "connection_string": self.connection_string,
            "schema_owner": self.schema_owner,
            "paramstyle": self.paramstyle,
            "output_dir": str(self.output_dir),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> ReaderConfig:
        """Create from dictionary."""
        return cls(
            provider=data.get("provider") or "ingres",
            connection_string=data.get("connection_string"),
            schema_owner=data.get("schema_owner"),
            paramstyle=data.get("paramstyle") or "qmark",
            output_dir=Path(data.get("output_dir") or "output"),
        )

    @classmethod
    def from_yaml(cls, path: Path) -> ReaderConfig:
        """
        Load from a YAML file; a missing file gives the defaults.

        SCHEMA_READER_CONNECTION, when set, replaces the file's
        connection_string.
        """
        path = Path(path)
        if not path.exists():
            logger.warning(f"Config file not found: {path}")
            return cls.from_environment()

        with open(path, "r") as f:
            data = yaml.safe_load(f) or {}

        logger.info(f"Loaded reader config from {path}")
        return cls.from_dict(data).with_environment()

    @classmethod
    def from_environment(cls) -> ReaderConfig:
        """Defaults, with the connection string taken from the environment."""
        return cls().with_environment()

    def with_environment(self) -> ReaderConfig:
        """Apply SCHEMA_READER_CONNECTION to this config, if set."""
        env_conn = os.environ.get(CONNECTION_ENV_VAR)
        if env_conn:
            logger.debug(f"Connection string taken from {CONNECTION_ENV_VAR}")
            self.connection_string = env_conn
        return self
