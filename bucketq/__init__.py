from .config import (
    StorageConfig,
    available_backends,
    create_storage,
    register_backend,
)
from .constants import (
    MAX_PRIORITY,
    MIN_PRIORITY,
)
from .data_models import (
    StorageItem,
)
from .duck import (
    DuckStorage,
)
from .exceptions import (
    StorageClosedError,
    StorageError,
    UnknownBackendError,
)
from .memory import (
    PriorityBucketStore,
)
from .storage import (
    Storage,
)


__all__ = [
    # storage exports
    "Storage",
    "PriorityBucketStore",
    "DuckStorage",
    # data model exports
    "StorageItem",
    # config exports
    "StorageConfig",
    "create_storage",
    "register_backend",
    "available_backends",
    # constants
    "MIN_PRIORITY",
    "MAX_PRIORITY",
    # exceptions
    "StorageError",
    "StorageClosedError",
    "UnknownBackendError",
    # default storage helpers
    "get_default_storage",
    "close_default_storage",
]

import threading

_process_storage = None
_process_storage_lock = threading.Lock()


def get_default_storage(config: "StorageConfig" = None) -> "Storage":
    """Get or create the process-wide default store.

    The first call decides the backend; ``config`` is ignored once a store
    exists. The returned store itself is not synchronized.
    """
    global _process_storage

    with _process_storage_lock:
        if _process_storage is None:
            _process_storage = create_storage(config)
        return _process_storage


def close_default_storage():
    """Close the default store (useful for cleanup in tests)."""
    global _process_storage

    with _process_storage_lock:
        if _process_storage is not None:
            _process_storage.close()
            _process_storage = None
