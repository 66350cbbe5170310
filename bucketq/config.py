# file: config.py

"""Backend selection and construction.

``StorageConfig`` centralizes the knobs a caller may set; anything left as
``None`` falls back to the defaults in ``bucketq.constants``. Backends are
looked up by name in a small registry so surrounding code can swap the
in-memory store for a durable one without touching call-sites.
"""

import logging
import os
from dataclasses import dataclass, replace
from typing import Callable, Dict, Mapping, Optional

from .constants import DEFAULT_BACKEND, DEFAULT_DB_PATH, DEFAULT_TABLE, ENV_PREFIX
from .duck import DuckStorage
from .exceptions import UnknownBackendError
from .memory import PriorityBucketStore
from .storage import Storage

BackendFactory = Callable[["StorageConfig", Optional[logging.Logger]], Storage]


@dataclass
class StorageConfig:
    """Per-store tunables centralizing runtime configuration."""

    backend: str = None
    db_path: str = None
    table: str = None

    def __post_init__(self):
        if self.backend is None:
            self.backend = DEFAULT_BACKEND
        if self.db_path is None:
            self.db_path = DEFAULT_DB_PATH
        if self.table is None:
            self.table = DEFAULT_TABLE
        self.backend = self.backend.lower()

    @classmethod
    def from_env(
        cls, prefix: str = ENV_PREFIX, environ: Optional[Mapping[str, str]] = None
    ) -> "StorageConfig":
        """Build a config from ``<prefix>BACKEND``, ``DB_PATH`` and ``TABLE``."""
        environ = os.environ if environ is None else environ
        return cls(
            backend=environ.get(f"{prefix}BACKEND"),
            db_path=environ.get(f"{prefix}DB_PATH"),
            table=environ.get(f"{prefix}TABLE"),
        )


def _memory_backend(config: StorageConfig, logger: Optional[logging.Logger]) -> Storage:
    return PriorityBucketStore(logger=logger)


def _duckdb_backend(config: StorageConfig, logger: Optional[logging.Logger]) -> Storage:
    return DuckStorage(config.db_path, table=config.table, logger=logger)


_BACKENDS: Dict[str, BackendFactory] = {
    "memory": _memory_backend,
    "duckdb": _duckdb_backend,
}


def register_backend(name: str, factory: BackendFactory) -> None:
    """Register ``factory`` under ``name``, replacing any previous entry."""
    _BACKENDS[name.lower()] = factory


def available_backends():
    return sorted(_BACKENDS)


def create_storage(
    config: Optional[StorageConfig] = None,
    logger: Optional[logging.Logger] = None,
    **overrides,
) -> Storage:
    """
    Create a store for the configured backend.

    Args:
        config: Settings to use (defaults to ``StorageConfig()``)
        logger: Logger handed to the backend
        **overrides: Field overrides applied on top of ``config``

    Returns:
        A fresh, empty store

    Raises:
        UnknownBackendError: if the backend name is not registered

    Example:
        store = create_storage(backend="duckdb", db_path="items.duckdb")
    """
    config = config or StorageConfig()
    if overrides:
        config = replace(config, **overrides)

    factory = _BACKENDS.get(config.backend)
    if factory is None:
        raise UnknownBackendError(
            f"Unknown storage backend {config.backend!r}; "
            f"expected one of {available_backends()}"
        )

    return factory(config, logger)
