"""Test fixtures: every test gets its own SQLite file."""

import pytest

import database


@pytest.fixture(autouse=True)
def db_path(tmp_path, monkeypatch):
    """Point the shared connection at a fresh temporary database."""
    path = str(tmp_path / "test.db")
    database.close_db()
    monkeypatch.setattr(database, "DB_NAME", path)
    database.init_db()
    yield path
    database.close_db()


@pytest.fixture
def raw_conn(db_path):
    """Direct handle for assertions that bypass the query layer."""
    return database.get_connection()


@pytest.fixture
def set_created_at(raw_conn):
    """Force a row's created_at so ordering tests do not depend on the clock."""

    def _set(table, row_id, timestamp):
        raw_conn.execute(f"UPDATE {table} SET created_at = ? WHERE id = ?", (timestamp, row_id))
        raw_conn.commit()

    return _set
