# file: data_models.py

"""bucketq.data_models
=====================

Value types shared by every storage backend.

- ``StorageItem``: an immutable pair of ``priority`` and ``payload``.
    Backends hand these back from ``pop`` and never mutate them after
    insertion. The payload is opaque: the store does not look inside it.

Payloads are normalized to ``bytes`` when an item is built through
``StorageItem.create``. Passing a ``bytearray`` or ``memoryview`` is
accepted, but the item keeps its own copy so later changes to the
caller's buffer do not leak into stored data.
"""

from dataclasses import dataclass
from typing import Tuple, Union

BytesLike = Union[bytes, bytearray, memoryview]


@dataclass(frozen=True)
class StorageItem:
    """A payload tagged with the priority it was pushed at.

    Attributes:
        priority: Retrieval precedence; higher values are popped first.
        payload: Opaque byte content.
    """

    priority: int
    payload: bytes

    @classmethod
    def create(cls, priority: int, payload: BytesLike) -> "StorageItem":
        """Build an item, copying mutable buffers into ``bytes``."""
        if not isinstance(payload, bytes):
            payload = bytes(payload)
        return cls(priority=priority, payload=payload)

    def as_tuple(self) -> Tuple[int, bytes]:
        return (self.priority, self.payload)

    def __repr__(self) -> str:
        preview = self.payload[:16]
        suffix = "..." if len(self.payload) > 16 else ""
        return f"StorageItem(priority={self.priority}, payload={preview!r}{suffix})"
