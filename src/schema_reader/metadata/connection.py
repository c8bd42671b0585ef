"""
ODBC connection helper used by the CLI.

Readers never open connections themselves; callers pass one in and are
responsible for closing it.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)

ODBC_PARAMSTYLE = "qmark"


def open_connection(connection_string: str):
    """
    Open an ODBC connection.

    Args:
        connection_string: ODBC connection string, e.g.
            "DRIVER={Ingres};SERVERTYPE=INGRES;SERVER=(local);DATABASE=demodb"

    Returns:
        pyodbc connection (caller closes it)
    """
    import pyodbc

    conn = pyodbc.connect(connection_string, autocommit=True)
    logger.info(f"Connected via ODBC ({_redact(connection_string)})")
    return conn


def _redact(connection_string: str) -> str:
    """Hide password values before logging a connection string."""
    parts = []
    for part in connection_string.split(";"):
        key, sep, _ = part.partition("=")
        if sep and key.strip().lower() in ("pwd", "password"):
            parts.append(f"{key}=***")
        else:
            parts.append(part)
    return ";".join(parts)
