"""Application services that create and update restaurant records."""

from __future__ import annotations

import secrets
from datetime import datetime, timezone
from typing import Iterable, List, Optional

from bistro.models import Item, Order, OrderLine, Reservation, Table
from bistro.order_repository import OrderWithLines


def generate_id() -> str:
    """Return a random identifier of 32 lowercase hex digits."""
    return secrets.token_hex(16)


def current_timestamp() -> str:
    """Return the current UTC time as ``YYYY-MM-DDTHH:MM:SSZ``."""
    return datetime.now(timezone.utc).strftime("%Y-%m-%dT%H:%M:%SZ")


class ItemService:
    """Creates and updates menu items."""

    def __init__(self, repository):
        self._repository = repository

    def create_item(self, name, description, price_cents, prep_time_minutes,
                    cooking_method, station, ingredient_cost_cents,
                    supplier_price_cents) -> str:
        item = Item(
            id=generate_id(),
            name=name,
            description=description,
            price_cents=price_cents,
            prep_time_minutes=prep_time_minutes,
            cooking_method=cooking_method,
            station=station,
            ingredient_cost_cents=ingredient_cost_cents,
            supplier_price_cents=supplier_price_cents,
            is_available=True,
        )
        self._repository.create(item)
        return item.id

    def get_items(self) -> List[Item]:
        return self._repository.find_all()

    def get_item(self, item_id) -> Optional[Item]:
        return self._repository.find_by_id(item_id)

    def update_item(self, item_id, name, description, price_cents, prep_time_minutes,
                    cooking_method, station, ingredient_cost_cents,
                    supplier_price_cents):
        """Overwrite an item's details; the item is marked available again."""
        self._repository.update(Item(
            id=item_id,
            name=name,
            description=description,
            price_cents=price_cents,
            prep_time_minutes=prep_time_minutes,
            cooking_method=cooking_method,
            station=station,
            ingredient_cost_cents=ingredient_cost_cents,
            supplier_price_cents=supplier_price_cents,
            is_available=True,
        ))

    def update_availability(self, item_id, available):
        self._repository.update_availability(item_id, available)


class OrderService:
    """Places orders and tracks their status."""

    def __init__(self, repository):
        self._repository = repository

    def create_order(self, table_number, item_ids: Iterable[str]) -> str:
        order = Order(
            id=generate_id(),
            table_number=table_number,
            status="OPEN",
            created_at=current_timestamp(),
        )
        lines = [
            OrderLine(id=generate_id(), order_id=order.id, item_id=item_id,
                      status="PENDING")
            for item_id in item_ids
        ]
        self._repository.create(order, lines)
        return order.id

    def get_orders(self) -> List[OrderWithLines]:
        return self._repository.find_all()

    def get_order(self, order_id) -> Optional[OrderWithLines]:
        return self._repository.find_by_id(order_id)

    def update_order_status(self, order_id, status):
        self._repository.update_status(order_id, status)


class TableService:
    """Adds dining tables and tracks their status."""

    def __init__(self, repository):
        self._repository = repository

    def create_table(self, table_number, capacity) -> str:
        table = Table(id=generate_id(), table_number=table_number,
                      capacity=capacity, status="AVAILABLE")
        self._repository.create(table)
        return table.id

    def get_tables(self) -> List[Table]:
        return self._repository.find_all()

    def get_table(self, table_id) -> Optional[Table]:
        return self._repository.find_by_id(table_id)

    def update_table_status(self, table_id, status):
        self._repository.update_status(table_id, status)


class ReservationService:
    """Seats parties and records when their tables are cleared."""

    def __init__(self, repository):
        self._repository = repository

    def create_reservation(self, table_id, guest_count, reservation_type, name) -> str:
        reservation = Reservation(
            id=generate_id(),
            table_id=table_id,
            guest_count=guest_count,
            type=reservation_type,
            reservation_name=name,
            seated_at=current_timestamp(),
        )
        self._repository.create(reservation)
        return reservation.id

    def get_reservations(self) -> List[Reservation]:
        return self._repository.find_all()

    def get_reservation(self, reservation_id) -> Optional[Reservation]:
        return self._repository.find_by_id(reservation_id)

    def update_reservation(self, reservation_id, cleared_at):
        self._repository.update(reservation_id, cleared_at)