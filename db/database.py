"""SQLite database connection helper and initialization."""
import logging
import os
import sqlite3
from contextlib import contextmanager

from config.settings import DB_PATH

log = logging.getLogger(__name__)
SCHEMA_PATH = os.path.join(os.path.dirname(__file__), 'schema.sql')


def get_db():
    conn = sqlite3.connect(DB_PATH, timeout=5)
    conn.row_factory = sqlite3.Row
    conn.execute("PRAGMA foreign_keys=ON")
    conn.execute("PRAGMA journal_mode=WAL")
    return conn


def init_db():
    conn = get_db()
    try:
        with open(SCHEMA_PATH, 'r') as f:
            conn.executescript(f.read())
        conn.commit()
        log.info("Database initialized at %s", DB_PATH)
    finally:
        conn.close()


@contextmanager
def transaction():
    """Yield one connection holding the write lock until commit or rollback.

    Pass it as conn= to query_db / execute_db so every statement in the
    block sees and writes the same snapshot.
    """
    conn = get_db()
    conn.isolation_level = None
    try:
        conn.execute("BEGIN IMMEDIATE")
        try:
            yield conn
        except Exception:
            conn.execute("ROLLBACK")
            raise
        conn.execute("COMMIT")
    finally:
        conn.close()


def query_db(sql, params=(), one=False, conn=None):
    owned = conn is None
    if owned:
        conn = get_db()
    try:
        cur = conn.execute(sql, params)
        rows = [dict(row) for row in cur.fetchall()]
        return rows[0] if (one and rows) else (None if one else rows)
    except sqlite3.Error as e:
        log.error("query_db error: %s | SQL: %s", e, sql[:200])
        raise
    finally:
        if owned:
            conn.close()


def execute_db(sql, params=(), conn=None):
    """Run one write. Commits unless it belongs to a caller's transaction."""
    owned = conn is None
    if owned:
        conn = get_db()
    try:
        cur = conn.execute(sql, params)
        if owned:
            conn.commit()
        return cur.lastrowid
    except sqlite3.Error as e:
        log.error("execute_db error: %s | SQL: %s", e, sql[:200])
        raise
    finally:
        if owned:
            conn.close()
