"""Storage of dining tables in the ``tables`` table."""

from __future__ import annotations

from typing import List, Optional

from bistro.models import Table

_COLUMNS = "id, table_number, capacity, status"


def _row_to_table(row) -> Table:
    table_id, number, capacity, status = row
    return Table(id=table_id, table_number=number, capacity=capacity, status=status)


class TableRepository:
    """Reads and writes :class:`Table` records."""

    def __init__(self, database):
        self._database = database

    def create(self, table):
        self._database.connection.execute(
            f"INSERT INTO tables ({_COLUMNS}) VALUES (?, ?, ?, ?)",
            (table.id, table.table_number, table.capacity, table.status),
        )

    def find_by_id(self, table_id) -> Optional[Table]:
        row = self._database.connection.execute(
            f"SELECT {_COLUMNS} FROM tables WHERE id=?", (table_id,)
        ).fetchone()
        return _row_to_table(row) if row is not None else None

    def find_all(self) -> List[Table]:
        rows = self._database.connection.execute(f"SELECT {_COLUMNS} FROM tables")
        return [_row_to_table(row) for row in rows]

    def update_status(self, table_id, status):
        self._database.connection.execute(
            "UPDATE tables SET status=? WHERE id=?", (status, table_id)
        )