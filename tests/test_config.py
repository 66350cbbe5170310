# file: test_config.py

"""
Tests for backend configuration, the backend registry, and the
process-wide default store helpers in ``bucketq/__init__.py``.
"""

import pytest

from bucketq import (
    DuckStorage,
    PriorityBucketStore,
    StorageConfig,
    UnknownBackendError,
    available_backends,
    close_default_storage,
    create_storage,
    get_default_storage,
    register_backend,
)
from bucketq.config import _BACKENDS
from bucketq.constants import DEFAULT_DB_PATH, DEFAULT_TABLE


class TestStorageConfig:
    """Test StorageConfig defaults and parsing."""

    def test_defaults(self):
        """Test unset fields fall back to constants."""
        config = StorageConfig()

        assert config.backend == "memory"
        assert config.db_path == DEFAULT_DB_PATH
        assert config.table == DEFAULT_TABLE

    def test_backend_name_normalized(self):
        """Test backend names are case-insensitive."""
        assert StorageConfig(backend="DuckDB").backend == "duckdb"

    def test_from_env(self):
        """Test reading settings from an environment mapping."""
        config = StorageConfig.from_env(
            environ={
                "BUCKETQ_BACKEND": "duckdb",
                "BUCKETQ_DB_PATH": "/tmp/items.db",
                "BUCKETQ_TABLE": "outbox",
            }
        )

        assert config.backend == "duckdb"
        assert config.db_path == "/tmp/items.db"
        assert config.table == "outbox"

    def test_from_env_missing_values(self):
        """Test missing variables use defaults."""
        config = StorageConfig.from_env(environ={})
        assert config == StorageConfig()

    def test_from_env_custom_prefix(self):
        """Test a custom variable prefix."""
        config = StorageConfig.from_env(prefix="APP_", environ={"APP_BACKEND": "duckdb"})
        assert config.backend == "duckdb"

    def test_from_env_reads_os_environ(self, monkeypatch):
        """Test os.environ is used when no mapping is given."""
        monkeypatch.setenv("BUCKETQ_TABLE", "from_env")
        assert StorageConfig.from_env().table == "from_env"


class TestCreateStorage:
    """Test the backend factory."""

    def test_default_is_memory(self):
        """Test the default backend is the volatile store."""
        store = create_storage()
        assert type(store) is PriorityBucketStore

    def test_duckdb_backend(self):
        """Test selecting the DuckDB backend."""
        store = create_storage(StorageConfig(backend="duckdb", table="queue_items"))
        try:
            assert isinstance(store, DuckStorage)
            assert store.table == "queue_items"
        finally:
            store.close()

    def test_overrides(self):
        """Test keyword overrides on top of a config."""
        store = create_storage(StorageConfig(), backend="duckdb")
        try:
            assert isinstance(store, DuckStorage)
        finally:
            store.close()

    def test_unknown_backend(self):
        """Test unknown names raise UnknownBackendError."""
        with pytest.raises(UnknownBackendError) as exc_info:
            create_storage(backend="redis")

        assert "redis" in str(exc_info.value)

    def test_register_backend(self):
        """Test custom factories can be registered."""
        created = []

        def factory(config, logger):
            store = PriorityBucketStore(logger=logger)
            created.append(store)
            return store

        register_backend("Custom", factory)
        try:
            assert "custom" in available_backends()
            store = create_storage(backend="custom")
            assert created == [store]
        finally:
            _BACKENDS.pop("custom", None)

    def test_available_backends(self):
        """Test built-in backends are listed."""
        assert {"memory", "duckdb"} <= set(available_backends())


class TestDefaultStorage:
    """Test the process-wide default store."""

    def teardown_method(self):
        """Clean up after each test."""
        close_default_storage()

    def test_creates_store(self):
        """Test a store is created on first use."""
        store = get_default_storage()
        assert isinstance(store, PriorityBucketStore)

    def test_reuses_store(self):
        """Test the same instance is returned."""
        assert get_default_storage() is get_default_storage()

    def test_close_resets(self):
        """Test closing forgets the instance."""
        first = get_default_storage()
        close_default_storage()

        assert get_default_storage() is not first

    def test_config_used_on_first_call(self):
        """Test the first config decides the backend."""
        store = get_default_storage(StorageConfig(backend="duckdb"))
        assert isinstance(store, DuckStorage)

        close_default_storage()
        assert store.closed

    def test_close_when_none_exists(self):
        """Test closing without a store does not error."""
        close_default_storage()
