# file: storage.py

"""
Abstract storage contract shared by every bucketq backend.

Callers depend on ``Storage`` only, never on a concrete variant. Backends
must guarantee:

- ``pop`` returns items by descending priority, FIFO within a priority,
  and ``None`` (not an exception) when nothing is available.
- ``dump`` does not observably change the live items.
- ``load`` followed by ``pop`` reproduces the same ordering for whatever
  data was recorded by the last ``dump``.
"""

from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from .data_models import BytesLike, StorageItem


class Storage(ABC):
    """Priority-ordered store of opaque byte payloads."""

    @abstractmethod
    def push(self, priority: int, payload: BytesLike) -> None:
        """Append ``payload`` behind earlier items of the same priority."""

    @abstractmethod
    def pop(self, count: int) -> Optional[List[StorageItem]]:
        """Remove and return up to ``count`` items, or ``None`` if none."""

    @abstractmethod
    def max_priority(self) -> Optional[int]:
        """Return the highest priority currently holding items."""

    @abstractmethod
    def dump(self) -> None:
        """Persist live items. No-op for volatile backends."""

    @abstractmethod
    def load(self) -> None:
        """Replace live items with the persisted ones."""

    @abstractmethod
    def clear(self) -> None:
        """Discard every stored item."""

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def stats(self) -> Dict[int, int]:
        """Item count per priority, for priorities holding items."""

    # ========================================================================
    # Conveniences built on the abstract operations
    # ========================================================================

    def peek_max_priority(self) -> Optional[int]:
        return self.max_priority()

    def persist(self) -> None:
        self.dump()

    def restore(self) -> None:
        self.load()

    def is_empty(self) -> bool:
        return self.max_priority() is None

    def drain(self) -> List[StorageItem]:
        """Pop every stored item in retrieval order."""
        items = self.pop(len(self))
        return items if items is not None else []

    def close(self) -> None:
        """Release backend resources."""

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
