import sqlite3

import pytest

from bistro.database import Database


def test_execute_creates_and_fills_table():
    with Database(":memory:") as db:
        db.execute("CREATE TABLE t (x INTEGER); INSERT INTO t VALUES (7);")
        rows = db.connection.execute("SELECT x FROM t").fetchall()
        assert rows == [(7,)]


def test_execute_raises_on_bad_sql():
    with Database(":memory:") as db:
        with pytest.raises(RuntimeError, match="^SQL error: "):
            db.execute("SELEC nonsense;")


def test_foreign_keys_are_enabled():
    with Database(":memory:") as db:
        (value,) = db.connection.execute("PRAGMA foreign_keys").fetchone()
        assert value == 1


def test_file_database_uses_wal(tmp_path):
    with Database(tmp_path / "r.db") as db:
        (mode,) = db.connection.execute("PRAGMA journal_mode").fetchone()
        assert mode == "wal"


def test_execute_file_runs_statements(tmp_path):
    schema = tmp_path / "schema.sql"
    schema.write_text("CREATE TABLE a (n TEXT); INSERT INTO a VALUES ('hi');")
    with Database(":memory:") as db:
        db.execute_file(schema)
        assert db.connection.execute("SELECT n FROM a").fetchall() == [("hi",)]


def test_execute_file_missing_raises(tmp_path):
    missing = tmp_path / "missing.sql"
    with Database(":memory:") as db:
        with pytest.raises(RuntimeError, match="Cannot open SQL file"):
            db.execute_file(missing)


def test_open_failure_raises(tmp_path):
    with pytest.raises(RuntimeError, match="Failed to open database"):
        Database(tmp_path / "no_such_dir" / "x.db")


def test_context_manager_closes_connection():
    with Database(":memory:") as db:
        connection = db.connection
    assert db.connection is None
    with pytest.raises(sqlite3.ProgrammingError):
        connection.execute("SELECT 1")


def test_data_persists_across_opens(tmp_path):
    path = tmp_path / "p.db"
    with Database(path) as db:
        db.execute("CREATE TABLE k (v TEXT); INSERT INTO k VALUES ('kept');")
    with Database(path) as db:
        assert db.connection.execute("SELECT v FROM k").fetchall() == [("kept",)]