# file: memory.py

"""
In-memory priority bucket store.

Items are kept in one FIFO bucket (a ``deque``) per priority value. ``pop``
repeatedly drains the front of the highest non-empty bucket until the
requested number of items is collected or nothing is left.

Example:
    from bucketq import PriorityBucketStore

    store = PriorityBucketStore()
    store.push(2, b"low")
    store.push(10, b"high")

    items = store.pop(2)
    # [StorageItem(priority=10, payload=b'high'),
    #  StorageItem(priority=2, payload=b'low')]
"""

import logging
from collections import deque
from typing import Deque, Dict, List, Optional

from .data_models import BytesLike, StorageItem
from .storage import Storage


class PriorityBucketStore(Storage):
    """
    Volatile store keyed by priority.

    Not thread-safe: callers sharing one instance across threads must
    serialize access themselves. ``dump`` and ``load`` are no-ops.
    """

    def __init__(self, logger: Optional[logging.Logger] = None):
        self.logger = logger or logging.getLogger(__name__)
        # Emptied buckets are left in place; max_priority skips them.
        self._buckets: Dict[int, Deque[StorageItem]] = {}

    def push(self, priority: int, payload: BytesLike) -> None:
        item = StorageItem.create(priority, payload)
        bucket = self._buckets.get(priority)
        if bucket is None:
            bucket = self._buckets[priority] = deque()
        bucket.append(item)

    def pop(self, count: int) -> Optional[List[StorageItem]]:
        """
        Remove up to ``count`` items, highest priority first.

        Args:
            count: Maximum number of items to return

        Returns:
            The items in retrieval order, or None when no item was
            collected (empty store or count <= 0). Fewer than ``count``
            items is not an error.
        """
        items: List[StorageItem] = []

        while len(items) < count:
            priority = self.max_priority()
            if priority is None:
                break

            bucket = self._buckets[priority]
            take = min(count - len(items), len(bucket))
            for _ in range(take):
                items.append(bucket.popleft())

        if not items:
            return None

        self.logger.debug(f"Popped {len(items)} of {count} requested items")
        return items

    def max_priority(self) -> Optional[int]:
        best = None
        for priority, bucket in self._buckets.items():
            if bucket and (best is None or priority > best):
                best = priority
        return best

    def dump(self) -> None:
        pass

    def load(self) -> None:
        pass

    def clear(self) -> None:
        self._buckets.clear()
        self.logger.debug("Cleared all buckets")

    def stats(self) -> Dict[int, int]:
        return {
            priority: len(bucket)
            for priority, bucket in sorted(self._buckets.items(), reverse=True)
            if bucket
        }

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets.values())

    def _snapshot(self) -> List[StorageItem]:
        """Every live item in retrieval order, without removing any."""
        items: List[StorageItem] = []
        for priority in sorted(self._buckets, reverse=True):
            items.extend(self._buckets[priority])
        return items

    def _replace(self, items: List[StorageItem]) -> None:
        """Reset live state to ``items``, pushed in the given order."""
        self._buckets = {}
        for item in items:
            self._buckets.setdefault(item.priority, deque()).append(item)

    def __repr__(self) -> str:
        return f"<PriorityBucketStore items={len(self)} buckets={len(self._buckets)}>"
