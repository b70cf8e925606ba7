import pytest

from bistro.database import Database
from bistro.models import Table
from bistro.table_repository import TableRepository

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS tables ("
    "  id TEXT PRIMARY KEY,"
    "  table_number INTEGER NOT NULL,"
    "  capacity INTEGER NOT NULL,"
    "  status TEXT NOT NULL"
    ");"
)


@pytest.fixture
def repo():
    with Database(":memory:") as db:
        db.execute(SCHEMA)
        yield TableRepository(db)


def test_create_and_find_by_id(repo):
    repo.create(Table(id="table-001", table_number=1, capacity=4, status="AVAILABLE"))

    found = repo.find_by_id("table-001")
    assert found is not None
    assert found.id == "table-001"
    assert found.table_number == 1
    assert found.capacity == 4
    assert found.status == "AVAILABLE"


def test_find_all_returns_all_tables(repo):
    repo.create(Table(id="fa-table-001", table_number=10, capacity=4, status="AVAILABLE"))
    repo.create(Table(id="fa-table-002", table_number=11, capacity=6, status="AVAILABLE"))
    repo.create(Table(id="fa-table-003", table_number=12, capacity=2, status="OCCUPIED"))

    all_tables = repo.find_all()
    assert len(all_tables) >= 3
    assert {t.id for t in all_tables} == {"fa-table-001", "fa-table-002", "fa-table-003"}


def test_update_status(repo):
    repo.create(Table(id="table-004", table_number=4, capacity=8, status="AVAILABLE"))

    repo.update_status("table-004", "OCCUPIED")
    found = repo.find_by_id("table-004")
    assert found is not None
    assert found.status == "OCCUPIED"

    repo.update_status("table-004", "AVAILABLE")
    assert repo.find_by_id("table-004").status == "AVAILABLE"


def test_find_missing_returns_none(repo):
    assert repo.find_by_id("table-404") is None