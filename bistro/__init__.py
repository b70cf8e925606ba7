"""Restaurant management HTTP API for items, orders, tables and reservations, backed by SQLite."""

__version__ = "0.1.0"