"""Storage of menu items in the ``items`` table."""

from __future__ import annotations

from typing import List, Optional

from bistro.models import Item

_COLUMNS = (
    "id, name, description, price_cents, prep_time_minutes, "
    "cooking_method, station, ingredient_cost_cents, supplier_price_cents, is_available"
)


def _row_to_item(row) -> Item:
    (item_id, name, description, price, prep, method, station,
     ingredient_cost, supplier_price, available) = row
    return Item(
        id=item_id,
        name=name,
        description=description or "",
        price_cents=price,
        prep_time_minutes=prep,
        cooking_method=method,
        station=station,
        ingredient_cost_cents=ingredient_cost,
        supplier_price_cents=supplier_price,
        is_available=bool(available),
    )


class ItemRepository:
    """Reads and writes :class:`Item` records."""

    def __init__(self, database):
        self._database = database

    def create(self, item):
        self._database.connection.execute(
            f"INSERT INTO items ({_COLUMNS}) VALUES (?, ?, ?, ?, ?, ?, ?, ?, ?, ?)",
            (
                item.id,
                item.name,
                item.description or None,
                item.price_cents,
                item.prep_time_minutes,
                item.cooking_method,
                item.station,
                item.ingredient_cost_cents,
                item.supplier_price_cents,
                1 if item.is_available else 0,
            ),
        )

    def find_by_id(self, item_id) -> Optional[Item]:
        row = self._database.connection.execute(
            f"SELECT {_COLUMNS} FROM items WHERE id = ?", (item_id,)
        ).fetchone()
        return _row_to_item(row) if row is not None else None

    def find_all(self) -> List[Item]:
        rows = self._database.connection.execute(f"SELECT {_COLUMNS} FROM items")
        return [_row_to_item(row) for row in rows]

    def update(self, item):
        self._database.connection.execute(
            "UPDATE items SET name=?, description=?, price_cents=?, prep_time_minutes=?, "
            "cooking_method=?, station=?, ingredient_cost_cents=?, supplier_price_cents=?, "
            "is_available=? WHERE id=?",
            (
                item.name,
                item.description or None,
                item.price_cents,
                item.prep_time_minutes,
                item.cooking_method,
                item.station,
                item.ingredient_cost_cents,
                item.supplier_price_cents,
                1 if item.is_available else 0,
                item.id,
            ),
        )

    def update_availability(self, item_id, available):
        self._database.connection.execute(
            "UPDATE items SET is_available=? WHERE id=?",
            (1 if available else 0, item_id),
        )