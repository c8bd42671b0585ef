"""
Provider registry.

Maps provider identifiers (as found in connection configuration) to the
reader class for that engine. Lookups are case-insensitive.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, List, Optional, Type

logger = logging.getLogger(__name__)

_READERS: Dict[str, Type] = {}
_CANONICAL: Dict[str, List[str]] = {}


def register_reader(name: str, *aliases: str) -> Callable[[Type], Type]:
    """
    Class decorator registering a reader under a name and its aliases.

    Example:
        @register_reader("ingres", "ingres.client")
        class IngresMetadataExtractor:
            ...
    """
    def decorator(cls: Type) -> Type:
        keys = [name.lower()] + [alias.lower() for alias in aliases]
        for key in keys:
            if key in _READERS and _READERS[key] is not cls:
                logger.warning(f"Provider '{key}' re-registered: {_READERS[key].__name__} -> {cls.__name__}")
            _READERS[key] = cls
        _CANONICAL[name.lower()] = keys[1:]
        return cls

    return decorator


def resolve_reader(provider: str) -> Type:
    """Return the reader class registered for ``provider``."""
    key = provider.strip().lower()
    if key not in _READERS:
        raise ValueError(
            f"Unknown provider: {provider}. Available: {', '.join(available_providers())}"
        )
    return _READERS[key]


def get_reader(
    provider: str,
    connection,
    owner: Optional[str] = None,
    paramstyle: str = "qmark",
):
    """
    Build a reader for ``provider`` bound to an open connection.

    Args:
        provider: Provider identifier, e.g. "ingres" or "Ingres.Client"
        connection: Open DB-API connection (borrowed, not closed)
        owner: Schema owner filter
        paramstyle: Bind style of the connection's driver

    Returns:
        Reader instance implementing CatalogReader
    """
    reader_cls = resolve_reader(provider)
    logger.debug(f"Using {reader_cls.__name__} for provider '{provider}'")
    return reader_cls(connection, owner=owner, paramstyle=paramstyle)


def available_providers() -> List[str]:
    """Canonical provider names, sorted."""
    return sorted(_CANONICAL)


def provider_aliases(name: str) -> List[str]:
    return list(_CANONICAL.get(name.lower(), []))
