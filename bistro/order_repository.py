"""Storage of orders and their lines in the ``orders`` and ``order_lines`` tables."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from bistro.models import Order, OrderLine

_ORDER_COLUMNS = "id, table_number, status, created_at"
_LINE_COLUMNS = (
    "id, order_id, item_id, status, fire_at_offset_minutes, fired_at, plated_at"
)


@dataclass
class OrderWithLines:
    """An order together with all of its lines."""

    order: Order
    lines: List[OrderLine] = field(default_factory=list)


def _row_to_order(row) -> Order:
    order_id, table_number, status, created_at = row
    return Order(
        id=order_id,
        table_number=table_number,
        status=status,
        created_at=created_at or "",
    )


def _row_to_order_line(row) -> OrderLine:
    line_id, order_id, item_id, status, offset, fired_at, plated_at = row
    return OrderLine(
        id=line_id,
        order_id=order_id,
        item_id=item_id,
        status=status,
        fire_at_offset_minutes=offset,
        fired_at=fired_at or "",
        plated_at=plated_at or "",
    )


class OrderRepository:
    """Reads and writes orders along with their :class:`OrderLine` records."""

    def __init__(self, database):
        self._database = database

    def create(self, order, lines: Iterable[OrderLine] = ()):
        connection = self._database.connection
        connection.execute(
            f"INSERT INTO orders ({_ORDER_COLUMNS}) VALUES (?, ?, ?, ?)",
            (order.id, order.table_number, order.status, order.created_at),
        )
        connection.executemany(
            f"INSERT INTO order_lines ({_LINE_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?)",
            [
                (
                    line.id,
                    line.order_id,
                    line.item_id,
                    line.status,
                    line.fire_at_offset_minutes,
                    line.fired_at or None,
                    line.plated_at or None,
                )
                for line in lines
            ],
        )

    def _lines_for(self, order_id) -> List[OrderLine]:
        rows = self._database.connection.execute(
            f"SELECT {_LINE_COLUMNS} FROM order_lines WHERE order_id=?", (order_id,)
        )
        return [_row_to_order_line(row) for row in rows]

    def find_by_id(self, order_id) -> Optional[OrderWithLines]:
        row = self._database.connection.execute(
            f"SELECT {_ORDER_COLUMNS} FROM orders WHERE id=?", (order_id,)
        ).fetchone()
        if row is None:
            return None
        return OrderWithLines(_row_to_order(row), self._lines_for(order_id))

    def find_all(self) -> List[OrderWithLines]:
        rows = self._database.connection.execute(
            f"SELECT {_ORDER_COLUMNS} FROM orders"
        ).fetchall()
        orders = [_row_to_order(row) for row in rows]
        return [OrderWithLines(order, self._lines_for(order.id)) for order in orders]

    def update_status(self, order_id, status):
        self._database.connection.execute(
            "UPDATE orders SET status=? WHERE id=?", (status, order_id)
        )