from typing import Optional

from psycopg.rows import dict_row
from psycopg_pool import ConnectionPool

from healthsync.config import settings
from healthsync.data_access.store import KeyValueStore
from healthsync.infra import log_utils

SCHEMA = """
CREATE TABLE IF NOT EXISTS kv_store (
    key TEXT PRIMARY KEY,
    value TEXT NOT NULL,
    updated_at TIMESTAMPTZ NOT NULL DEFAULT now()
);
"""


class PostgresStore(KeyValueStore):
    """
    A Metrics Store implementation that uses a PostgreSQL table as the backend.
    Every key is a row in `kv_store`; the value column holds the JSON text.
    """

    def __init__(self, conninfo: Optional[str] = None, min_size: int = 1, max_size: int = 3):
        conninfo = conninfo or settings.DATABASE_URL
        if not conninfo:
            raise ValueError("PostgresStore needs DATABASE_URL or an explicit conninfo")
        # The dashboard is single-threaded, so a small pool is plenty.
        self.pool = ConnectionPool(
            conninfo=conninfo,
            min_size=min_size,
            max_size=max_size,
            kwargs={"row_factory": dict_row},
        )
        self.ensure_schema()

    def ensure_schema(self) -> None:
        log_utils.log_message("[PostgresStore] Ensuring kv_store schema")
        with self.pool.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(SCHEMA)

    def _read_raw(self, key: str) -> Optional[str]:
        with self.pool.connection() as conn:
            with conn.cursor() as cur:
                cur.execute("SELECT value FROM kv_store WHERE key = %s;", (key,))
                row = cur.fetchone()
        return row["value"] if row else None

    def _write_raw(self, key: str, raw: str) -> None:
        with self.pool.connection() as conn:
            with conn.cursor() as cur:
                cur.execute(
                    """
                    INSERT INTO kv_store (key, value) VALUES (%s, %s)
                    ON CONFLICT (key) DO UPDATE SET
                        value = EXCLUDED.value, updated_at = now();
                    """,
                    (key, raw),
                )

    def _delete_raw(self, key: str) -> None:
        with self.pool.connection() as conn:
            with conn.cursor() as cur:
                cur.execute("DELETE FROM kv_store WHERE key = %s;", (key,))

    def close(self) -> None:
        self.pool.close()
