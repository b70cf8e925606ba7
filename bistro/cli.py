"""Command-line entry point that serves the restaurant API."""

from __future__ import annotations

import argparse

from bistro.api import create_app
from bistro.database import Database
from bistro.item_repository import ItemRepository
from bistro.order_repository import OrderRepository
from bistro.reservation_repository import ReservationRepository
from bistro.services import ItemService, OrderService, ReservationService, TableService
from bistro.table_repository import TableRepository

DEFAULT_DB_PATH = "restaurant.db"
DEFAULT_PORT = 8081
SCHEMA_PATH = "db/schema.sql"


def parse_args(argv=None) -> argparse.Namespace:
    """Read ``--db`` and ``--port``; other arguments are ignored."""
    parser = argparse.ArgumentParser(prog="bistro", description="Restaurant API server.")
    parser.add_argument("--db", default=DEFAULT_DB_PATH, help="SQLite database path")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args, _unknown = parser.parse_known_args(argv)
    return args


def build_app(database):
    """Wire repositories, services and routes over ``database``."""
    return create_app(
        ItemService(ItemRepository(database)),
        OrderService(OrderRepository(database)),
        TableService(TableRepository(database)),
        ReservationService(ReservationRepository(database)),
    )


def main(argv=None) -> int:
    args = parse_args(argv)
    with Database(args.db) as database:
        database.execute_file(SCHEMA_PATH)
        app = build_app(database)
        print(f"Non-DDD Restaurant API running on port {args.port}", flush=True)
        app.run(host="0.0.0.0", port=args.port)
    return 0