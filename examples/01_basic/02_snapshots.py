"""Persist items to DuckDB and restore them in a new store.

# Difficulty: beginner
"""

import os
import tempfile
import uuid

from bucketq import StorageConfig, create_storage

db_path = os.path.join(tempfile.gettempdir(), f"bucketq-{uuid.uuid4().hex}.db")
config = StorageConfig(backend="duckdb", db_path=db_path)

with create_storage(config) as store:
    store.push(1, b"report")
    store.push(5, b"alert")
    store.dump()
    print(f"Dumped {len(store)} items to {db_path}")

with create_storage(config) as store:
    store.load()
    for item in store.drain():
        print(f"{item.priority}: {item.payload.decode()}")

os.unlink(db_path)
