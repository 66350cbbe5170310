# file: duck.py

"""
DuckDB-backed durable store.

Live items are held exactly as in ``PriorityBucketStore``; the database
only stores snapshots. ``dump`` writes every live item to one table and
``load`` rebuilds the buckets from it, so push and pop stay in-memory
fast and the file is touched only when the caller asks for it.

Example:
    from bucketq import DuckStorage

    with DuckStorage("items.duckdb") as store:
        store.push(5, b"payload")
        store.dump()

    with DuckStorage("items.duckdb") as store:
        store.load()
        store.pop(1)  # [StorageItem(priority=5, payload=b'payload')]
"""

import logging
from typing import List, Optional

import duckdb

from .constants import DEFAULT_DB_PATH, DEFAULT_TABLE
from .data_models import StorageItem
from .exceptions import StorageClosedError, StorageError
from .memory import PriorityBucketStore


class DuckStorage(PriorityBucketStore):
    """
    Priority bucket store with DuckDB snapshots.

    A single connection is owned per instance. ``":memory:"`` keeps the
    snapshot inside this process, which is mostly useful for tests.
    """

    def __init__(
        self,
        db_path: str = DEFAULT_DB_PATH,
        table: str = DEFAULT_TABLE,
        logger: Optional[logging.Logger] = None,
    ):
        if not table.isidentifier():
            raise ValueError(f"Invalid table name: {table!r}")

        super().__init__(logger=logger or logging.getLogger(__name__))
        self.db_path = db_path
        self.table = table
        self._conn: Optional[duckdb.DuckDBPyConnection] = duckdb.connect(db_path)

        try:
            self._create_schema(self._conn)
        except Exception:
            self._conn.close()
            self._conn = None
            raise

    def _create_schema(self, conn):
        """Create the snapshot table on the given connection."""
        conn.execute(f"""
            CREATE TABLE IF NOT EXISTS {self.table} (
                priority INTEGER NOT NULL,
                seq BIGINT NOT NULL,
                payload BLOB NOT NULL
            )
        """)

    @property
    def conn(self) -> duckdb.DuckDBPyConnection:
        if self._conn is None:
            raise StorageClosedError(f"Storage at {self.db_path} is closed")
        return self._conn

    @property
    def closed(self) -> bool:
        return self._conn is None

    # ========================================================================
    # Durability
    # ========================================================================

    def dump(self) -> None:
        """Replace the stored snapshot with the current live items.

        Live items are left untouched and can still be popped.

        Raises:
            StorageClosedError: if the store was closed
            StorageError: if DuckDB rejects the write
        """
        conn = self.conn

        rows = []
        seq_by_priority = {}
        for item in self._snapshot():
            seq = seq_by_priority.get(item.priority, 0)
            seq_by_priority[item.priority] = seq + 1
            rows.append([item.priority, seq, item.payload])

        try:
            conn.execute("BEGIN TRANSACTION")
            conn.execute(f"DELETE FROM {self.table}")
            if rows:
                conn.executemany(
                    f"INSERT INTO {self.table} (priority, seq, payload) VALUES (?, ?, ?)",
                    rows,
                )
            conn.execute("COMMIT")
        except duckdb.Error as e:
            conn.execute("ROLLBACK")
            self.logger.error(f"Failed to dump {len(rows)} items to {self.db_path}: {e}")
            raise StorageError(f"Dump to {self.db_path} failed: {e}") from e

        self.logger.info(f"Dumped {len(rows)} items to {self.db_path}")

    def load(self) -> None:
        """Replace live items with the stored snapshot.

        Raises:
            StorageClosedError: if the store was closed
            StorageError: if DuckDB rejects the read
        """
        conn = self.conn

        try:
            cursor = conn.execute(f"""
                SELECT priority, payload FROM {self.table}
                ORDER BY priority DESC, seq ASC
            """)
            results = cursor.fetchall()
        except duckdb.Error as e:
            self.logger.error(f"Failed to load items from {self.db_path}: {e}")
            raise StorageError(f"Load from {self.db_path} failed: {e}") from e

        items: List[StorageItem] = [
            StorageItem.create(priority, payload) for priority, payload in results
        ]
        self._replace(items)

        self.logger.info(f"Loaded {len(items)} items from {self.db_path}")

    def snapshot_size(self) -> int:
        """Number of items in the stored snapshot."""
        result = self.conn.execute(f"SELECT COUNT(*) FROM {self.table}").fetchone()
        return result[0] if result else 0

    def close(self) -> None:
        """Close the database connection. Safe to call more than once."""
        if self._conn is None:
            return

        self._conn.close()
        self._conn = None
        self.logger.debug(f"Closed storage at {self.db_path}")

    def __repr__(self) -> str:
        state = "closed" if self.closed else "open"
        return f"<DuckStorage {self.db_path!r} items={len(self)} {state}>"
