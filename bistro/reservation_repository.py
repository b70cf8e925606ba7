"""Storage of reservations in the ``seatings`` table.

Columns map onto the model as ``cover_count`` -> ``guest_count`` and
``is_walk_in`` -> ``type`` ("UNPLANNED" when set, "RESERVED" otherwise).
"""

from __future__ import annotations

from typing import List, Optional

from bistro.models import Reservation

_COLUMNS = "id, table_id, cover_count, is_walk_in, reservation_name, seated_at, cleared_at"


def _row_to_reservation(row) -> Reservation:
    res_id, table_id, covers, is_walk_in, name, seated, cleared = row
    return Reservation(
        id=res_id,
        table_id=table_id,
        guest_count=covers,
        type="UNPLANNED" if is_walk_in else "RESERVED",
        reservation_name=name or "",
        seated_at=seated or "",
        cleared_at=cleared or "",
    )


class ReservationRepository:
    """Reads and writes :class:`Reservation` records."""

    def __init__(self, database):
        self._database = database

    def create(self, reservation):
        self._database.connection.execute(
            f"INSERT INTO seatings ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            (
                reservation.id,
                reservation.table_id,
                reservation.guest_count,
                1 if reservation.type == "UNPLANNED" else 0,
                reservation.reservation_name or None,
                reservation.seated_at or None,
                reservation.cleared_at or None,
            ),
        )

    def find_by_id(self, reservation_id) -> Optional[Reservation]:
        row = self._database.connection.execute(
            f"SELECT {_COLUMNS} FROM seatings WHERE id=?", (reservation_id,)
        ).fetchone()
        return _row_to_reservation(row) if row is not None else None

    def find_all(self) -> List[Reservation]:
        rows = self._database.connection.execute(f"SELECT {_COLUMNS} FROM seatings")
        return [_row_to_reservation(row) for row in rows]

    def update(self, reservation_id, cleared_at):
        self._database.connection.execute(
            "UPDATE seatings SET cleared_at=? WHERE id=?", (cleared_at, reservation_id)
        )