"""Opinionated default constants for bucketq.

Keep defaults here. Callers may override behavior via arguments or
``StorageConfig``, but centralizing values avoids magic numbers spread
through the codebase.
"""

# Documented priority range. Values are compared as plain integers and
# are not validated against these bounds.
MIN_PRIORITY = 0
MAX_PRIORITY = 65535

# Backend selection defaults
DEFAULT_BACKEND = "memory"
DEFAULT_DB_PATH = ":memory:"

# Snapshot table used by the DuckDB backend
DEFAULT_TABLE = "storage_items"

# Environment variable prefix read by StorageConfig.from_env
ENV_PREFIX = "BUCKETQ_"
