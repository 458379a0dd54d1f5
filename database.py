import logging
import sqlite3
import threading
from contextlib import contextmanager
from database_schemas import (
    TABLE_SCHEMAS,
    SEED_DEFAULT_USER,
    DEFAULT_USER_ID,
    DEFAULT_USER_NAME,
    DEFAULT_USER_EMAIL
)
from errors import ConnectionUnavailable, ConstraintViolation, StorageError

DB_NAME = 'socialApp.db'

logger = logging.getLogger(__name__)

_conn = None
_open_lock = threading.Lock()
# Serializes statement blocks on the shared handle
_statement_lock = threading.RLock()


def _open_connection(path: str) -> sqlite3.Connection:
    try:
        conn = sqlite3.connect(path, check_same_thread=False)
        conn.execute("PRAGMA foreign_keys = ON")
    except sqlite3.Error as e:
        logger.error("Failed to open database: %s", path, exc_info=e)
        raise ConnectionUnavailable(f"Unable to open database {path}") from e
    logger.info("Database opened: %s", path)
    return conn


def get_connection() -> sqlite3.Connection:
    """Return the shared connection, opening it on first use.

    Concurrent first callers all receive the same handle.
    """
    global _conn
    conn = _conn
    if conn is not None:
        return conn
    with _open_lock:
        if _conn is None:
            _conn = _open_connection(DB_NAME)
        return _conn


def _is_open(conn: sqlite3.Connection) -> bool:
    # in_transaction raises ProgrammingError once the handle is closed
    try:
        conn.in_transaction
    except sqlite3.ProgrammingError:
        return False
    return True


def _discard(conn: sqlite3.Connection) -> None:
    """Forget a dead handle so the next get_connection() reopens."""
    global _conn
    with _open_lock:
        if _conn is conn:
            _conn = None
    logger.warning("Discarded closed database handle: %s", DB_NAME)


def close_db() -> None:
    global _conn
    with _open_lock:
        conn, _conn = _conn, None
    if conn is not None:
        with _statement_lock:
            conn.close()
        logger.info("Database closed: %s", DB_NAME)


@contextmanager
def get_db():
    """Yield the shared connection inside a single transaction.

    Commits on success and rolls back whenever the commit did not happen,
    KeyboardInterrupt included. sqlite3 errors are mapped onto the errors
    module.
    """
    conn = get_connection()
    with _statement_lock:
        committed = False
        try:
            yield conn
            conn.commit()
            committed = True
        except sqlite3.IntegrityError as e:
            logger.error("Constraint violation", exc_info=e)
            raise ConstraintViolation(str(e)) from e
        except sqlite3.ProgrammingError as e:
            if not _is_open(conn):
                logger.error("Database handle unusable", exc_info=e)
                _discard(conn)
                raise ConnectionUnavailable(str(e)) from e
            logger.error("Storage error", exc_info=e)
            raise StorageError(str(e)) from e
        except sqlite3.Error as e:
            logger.error("Storage error", exc_info=e)
            raise StorageError(str(e)) from e
        finally:
            if not committed and _is_open(conn):
                conn.rollback()


def init_db():
    with get_db() as conn:
        cursor = conn.cursor()
        for schema in TABLE_SCHEMAS:
            cursor.execute(schema)
        cursor.execute(SEED_DEFAULT_USER, (DEFAULT_USER_ID, DEFAULT_USER_NAME, DEFAULT_USER_EMAIL))
    logger.info("Schema ready in %s", DB_NAME)


if __name__ == "__main__":
    init_db()
