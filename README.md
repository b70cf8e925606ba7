# bistro

A small HTTP API for running a restaurant's front and back of house: menu
items, orders with their order lines, tables and reservations. Data lives in a
SQLite database.

## Installing

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Running the server

```
bistro --db restaurant.db --port 8081
```

- `--db` is the path of the SQLite database file (default `restaurant.db`).
- `--port` is the port to listen on (default `8081`). The server listens on all
  interfaces, using Flask's built-in server.

Other command-line arguments are ignored.

On start-up the command runs the SQL in `db/schema.sql`, relative to the
current directory, so run it from a directory that holds that schema file. The
database is opened with WAL journalling and foreign keys switched on.

## Endpoints

All request and response bodies are JSON. A body that is not valid JSON gets a
`400` response with `{"error": "invalid JSON"}`. Fields left out of a request
body take their defaults (empty string, `0`, or as noted). A body that is not a
JSON object, or a field of the wrong JSON type (for example a string where a
number is expected), gets a `500` response with an `error` message. Numbers
given with a fractional part are truncated to whole numbers.

### Menu items

- `GET /api/items` — list all items.
- `POST /api/items` — create an item from `name`, `description`,
  `price_cents`, `prep_time_minutes`, `cooking_method`, `station`,
  `ingredient_cost_cents`, `supplier_price_cents`. New items are available.
  Answers `201` with `{"id": ...}`.
- `PUT /api/items/<id>` — replace an item's fields (same body as `POST`); the
  item is marked available again.
- `PATCH /api/items/<id>/availability` — set `is_available` (default `true`).

### Orders

- `GET /api/orders` — list orders, each with its `lines`.
- `POST /api/orders` — create an order from `table_number` and a list of
  `item_ids` (strings). The order starts `OPEN`, each line `PENDING`, and
  `created_at` is the current UTC time as `YYYY-MM-DDTHH:MM:SSZ`. Answers `201`
  with `{"id": ...}`.
- `PUT /api/orders/<id>/status` — set the order's `status`.

### Tables

- `GET /api/tables` — list tables.
- `POST /api/tables` — create a table from `table_number` and `capacity`; it
  starts `AVAILABLE`. Answers `201` with `{"id": ...}`.
- `PUT /api/tables/<id>/status` — set the table's `status`.

### Reservations

- `GET /api/reservations` — list reservations.
- `POST /api/reservations` — create a reservation from `table_id`,
  `guest_count`, `type` (`RESERVED`, the default, or `UNPLANNED` for a walk-in)
  and `reservation_name`. `seated_at` is set to the current UTC time. Answers
  `201` with `{"id": ...}`.
- `PUT /api/reservations/<id>` — set `cleared_at`.

Successful updates answer `{"ok": true}`. Generated ids are 32 lower-case
hexadecimal characters.

## Using it as a library

The layers can be wired by hand, for instance against an in-memory database:

```python
from bistro.database import Database
from bistro.table_repository import TableRepository
from bistro.services import TableService

with Database(":memory:") as db:
    db.execute(
        "CREATE TABLE tables (id TEXT PRIMARY KEY, table_number INTEGER NOT NULL,"
        " capacity INTEGER NOT NULL, status TEXT NOT NULL);"
    )
    tables = TableService(TableRepository(db))
    table_id = tables.create_table(5, 4)
    tables.update_table_status(table_id, "OCCUPIED")
    print(tables.get_table(table_id))
```

- `bistro.database.Database` wraps a SQLite connection; `execute` and
  `execute_file` run SQL scripts and raise `RuntimeError` on failure.
- `bistro.models` holds the `Item`, `Order`, `OrderLine`, `Reservation` and
  `Table` dataclasses.
- `ItemRepository`, `OrderRepository`, `TableRepository` and
  `ReservationRepository` read and write those records; reservations are kept
  in a `seatings` table.
- `bistro.services` holds `ItemService`, `OrderService`, `TableService` and
  `ReservationService`, plus `generate_id` and `current_timestamp`.
- `bistro.api.create_app` builds the Flask application from the four services,
  and `bistro.cli.build_app` does the whole wiring from a `Database`.

## What it does not do

- The package does not ship or create the database schema. The `bistro`
  command expects a `db/schema.sql` file providing the `items`, `orders`,
  `order_lines`, `tables` and `seatings` tables.
- There are no endpoints for deleting records or fetching a single record.
- Statuses are stored as given; no transitions are checked. Updating an id that
  does not exist changes nothing and still answers `{"ok": true}`.