import pytest

from bistro.database import Database
from bistro.models import Reservation
from bistro.reservation_repository import ReservationRepository

SCHEMA = (
    "CREATE TABLE IF NOT EXISTS seatings ("
    "  id TEXT PRIMARY KEY,"
    "  table_id TEXT NOT NULL,"
    "  cover_count INTEGER NOT NULL DEFAULT 0,"
    "  is_walk_in INTEGER NOT NULL DEFAULT 0,"
    "  reservation_name TEXT,"
    "  seated_at TEXT,"
    "  cleared_at TEXT"
    ");"
)


@pytest.fixture
def db():
    with Database(":memory:") as database:
        database.execute(SCHEMA)
        yield database


@pytest.fixture
def repo(db):
    return ReservationRepository(db)


def test_create_unplanned_and_find_by_id(repo):
    repo.create(Reservation(id="res-001", table_id="table-001", guest_count=3,
                            type="UNPLANNED", seated_at="2026-04-10T18:30:00"))

    found = repo.find_by_id("res-001")
    assert found is not None
    assert found.id == "res-001"
    assert found.table_id == "table-001"
    assert found.guest_count == 3
    assert found.type == "UNPLANNED"
    assert found.seated_at == "2026-04-10T18:30:00"
    assert found.cleared_at == ""


def test_create_reserved_and_find_by_id(repo):
    repo.create(Reservation(id="res-002", table_id="table-002", guest_count=4,
                            type="RESERVED", reservation_name="Johnson",
                            seated_at="2026-04-10T19:00:00"))

    found = repo.find_by_id("res-002")
    assert found is not None
    assert found.type == "RESERVED"
    assert found.reservation_name == "Johnson"
    assert found.guest_count == 4


def test_update_marks_cleared(repo):
    repo.create(Reservation(id="res-003", table_id="table-003", guest_count=2,
                            type="UNPLANNED", seated_at="2026-04-10T20:00:00"))

    repo.update("res-003", "2026-04-10T21:45:00")

    found = repo.find_by_id("res-003")
    assert found is not None
    assert found.cleared_at == "2026-04-10T21:45:00"


def test_find_all_returns_all_reservations(repo):
    repo.create(Reservation(id="fa-res-001", table_id="table-001", guest_count=2,
                            type="UNPLANNED", seated_at="2026-04-10T17:00:00"))
    repo.create(Reservation(id="fa-res-002", table_id="table-002", guest_count=4,
                            type="RESERVED", reservation_name="Smith",
                            seated_at="2026-04-10T17:30:00"))
    repo.create(Reservation(id="fa-res-003", table_id="table-003", guest_count=3,
                            type="UNPLANNED", seated_at="2026-04-10T18:00:00"))

    all_reservations = repo.find_all()
    assert len(all_reservations) >= 3
    types = {r.type for r in all_reservations}
    assert "UNPLANNED" in types
    assert "RESERVED" in types


def test_walk_in_flag_stored_in_seatings(repo, db):
    repo.create(Reservation(id="res-004", table_id="table-004", guest_count=5,
                            type="UNPLANNED", seated_at="2026-04-10T18:00:00"))
    row = db.connection.execute(
        "SELECT cover_count, is_walk_in, reservation_name FROM seatings WHERE id='res-004'"
    ).fetchone()
    assert row == (5, 1, None)


def test_find_missing_returns_none(repo):
    assert repo.find_by_id("res-404") is None