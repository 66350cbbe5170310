class StorageError(Exception):
    """Raised when a backend fails to persist or restore its items."""
    pass


class StorageClosedError(StorageError):
    """Raised when a durability call is made on a closed store."""
    pass


class UnknownBackendError(ValueError):
    """Raised when a configuration names a backend that is not registered."""
    pass
