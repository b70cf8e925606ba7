"""Plain records stored by the repositories."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class Item:
    """A menu item with its kitchen and cost details."""

    id: str = ""
    name: str = ""
    description: str = ""
    price_cents: int = 0
    prep_time_minutes: int = 0
    cooking_method: str = ""
    station: str = ""
    ingredient_cost_cents: int = 0
    supplier_price_cents: int = 0
    is_available: bool = True


@dataclass
class Order:
    """An order placed at a table."""

    id: str = ""
    table_number: int = 0
    status: str = ""
    created_at: str = ""


@dataclass
class OrderLine:
    """One item within an order."""

    id: str = ""
    order_id: str = ""
    item_id: str = ""
    status: str = ""
    fire_at_offset_minutes: Optional[int] = None
    fired_at: str = ""
    plated_at: str = ""


@dataclass
class Reservation:
    """A party seated at a table; ``type`` is "RESERVED" or "UNPLANNED"."""

    id: str = ""
    table_id: str = ""
    guest_count: int = 0
    type: str = ""
    reservation_name: str = ""
    seated_at: str = ""
    cleared_at: str = ""


@dataclass
class Table:
    """A dining table."""

    id: str = ""
    table_number: int = 0
    capacity: int = 0
    status: str = ""