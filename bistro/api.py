"""HTTP routes for items, orders, tables and reservations."""

from __future__ import annotations

import json

from flask import Flask, Response, request

_JSON_MIMETYPE = "application/json"
_INVALID_JSON = {"error": "invalid JSON"}
_OK = {"ok": True}


class _FieldTypeError(TypeError):
    """A request body field holds a value of the wrong JSON type."""


def _dump(payload) -> str:
    return json.dumps(payload, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _json_response(payload, status=200) -> Response:
    return Response(_dump(payload), status=status, mimetype=_JSON_MIMETYPE)


def _parse_body():
    """Return the request body as a dict, or None when it is not valid JSON."""
    try:
        body = json.loads(request.get_data())
    except ValueError:
        return None
    if not isinstance(body, dict):
        raise _FieldTypeError("request body must be a JSON object")
    return body


def _field(body, key, default):
    """Fetch ``key`` from ``body``, requiring the JSON type of ``default``."""
    if key not in body:
        return default
    value = body[key]
    if isinstance(default, bool):
        if isinstance(value, bool):
            return value
        expected = "boolean"
    elif isinstance(default, int):
        if isinstance(value, (int, float)):
            return int(value)
        expected = "number"
    else:
        if isinstance(value, str):
            return value
        expected = "string"
    raise _FieldTypeError(f"field '{key}' must be a {expected}")


def item_to_json(item) -> dict:
    """Represent an item as a JSON-ready dict."""
    return {
        "id": item.id,
        "name": item.name,
        "description": item.description,
        "price_cents": item.price_cents,
        "prep_time_minutes": item.prep_time_minutes,
        "cooking_method": item.cooking_method,
        "station": item.station,
        "ingredient_cost_cents": item.ingredient_cost_cents,
        "supplier_price_cents": item.supplier_price_cents,
        "is_available": item.is_available,
    }


def _order_line_to_json(line) -> dict:
    return {
        "id": line.id,
        "order_id": line.order_id,
        "item_id": line.item_id,
        "status": line.status,
        "fired_at": line.fired_at,
        "plated_at": line.plated_at,
        "fire_at_offset_minutes": line.fire_at_offset_minutes,
    }


def order_to_json(order_with_lines) -> dict:
    """Represent an order and its lines as a JSON-ready dict."""
    order = order_with_lines.order
    return {
        "id": order.id,
        "table_number": order.table_number,
        "status": order.status,
        "created_at": order.created_at,
        "lines": [_order_line_to_json(line) for line in order_with_lines.lines],
    }


def table_to_json(table) -> dict:
    """Represent a dining table as a JSON-ready dict."""
    return {
        "id": table.id,
        "table_number": table.table_number,
        "capacity": table.capacity,
        "status": table.status,
    }


def reservation_to_json(reservation) -> dict:
    """Represent a reservation as a JSON-ready dict."""
    return {
        "id": reservation.id,
        "table_id": reservation.table_id,
        "guest_count": reservation.guest_count,
        "type": reservation.type,
        "reservation_name": reservation.reservation_name,
        "seated_at": reservation.seated_at,
        "cleared_at": reservation.cleared_at,
    }


def _item_fields(body) -> dict:
    return {
        "name": _field(body, "name", ""),
        "description": _field(body, "description", ""),
        "price_cents": _field(body, "price_cents", 0),
        "prep_time_minutes": _field(body, "prep_time_minutes", 0),
        "cooking_method": _field(body, "cooking_method", ""),
        "station": _field(body, "station", ""),
        "ingredient_cost_cents": _field(body, "ingredient_cost_cents", 0),
        "supplier_price_cents": _field(body, "supplier_price_cents", 0),
    }


def create_app(item_service, order_service, table_service, reservation_service) -> Flask:
    """Build the Flask application serving the restaurant API."""
    app = Flask(__name__)

    @app.errorhandler(_FieldTypeError)
    def _bad_field(exc):
        return _json_response({"error": str(exc)}, status=500)

    # Items

    @app.get("/api/items")
    def list_items():
        return _json_response([item_to_json(item) for item in item_service.get_items()])

    @app.post("/api/items")
    def create_item():
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        item_id = item_service.create_item(**_item_fields(body))
        return _json_response({"id": item_id}, status=201)

    @app.put("/api/items/<item_id>")
    def update_item(item_id):
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        item_service.update_item(item_id, **_item_fields(body))
        return _json_response(_OK)

    @app.patch("/api/items/<item_id>/availability")
    def update_item_availability(item_id):
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        item_service.update_availability(item_id, _field(body, "is_available", True))
        return _json_response(_OK)

    # Orders

    @app.get("/api/orders")
    def list_orders():
        return _json_response([order_to_json(o) for o in order_service.get_orders()])

    @app.post("/api/orders")
    def create_order():
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        table_number = _field(body, "table_number", 0)
        item_ids = []
        raw_ids = body.get("item_ids")
        if isinstance(raw_ids, list):
            for value in raw_ids:
                if not isinstance(value, str):
                    raise _FieldTypeError("field 'item_ids' must hold strings")
                item_ids.append(value)
        order_id = order_service.create_order(table_number, item_ids)
        return _json_response({"id": order_id}, status=201)

    @app.put("/api/orders/<order_id>/status")
    def update_order_status(order_id):
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        order_service.update_order_status(order_id, _field(body, "status", ""))
        return _json_response(_OK)

    # Tables

    @app.get("/api/tables")
    def list_tables():
        return _json_response([table_to_json(t) for t in table_service.get_tables()])

    @app.post("/api/tables")
    def create_table():
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        table_id = table_service.create_table(
            _field(body, "table_number", 0), _field(body, "capacity", 0)
        )
        return _json_response({"id": table_id}, status=201)

    @app.put("/api/tables/<table_id>/status")
    def update_table_status(table_id):
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        table_service.update_table_status(table_id, _field(body, "status", ""))
        return _json_response(_OK)

    # Reservations

    @app.get("/api/reservations")
    def list_reservations():
        return _json_response(
            [reservation_to_json(r) for r in reservation_service.get_reservations()]
        )

    @app.post("/api/reservations")
    def create_reservation():
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        reservation_id = reservation_service.create_reservation(
            _field(body, "table_id", ""),
            _field(body, "guest_count", 0),
            _field(body, "type", "RESERVED"),
            _field(body, "reservation_name", ""),
        )
        return _json_response({"id": reservation_id}, status=201)

    @app.put("/api/reservations/<reservation_id>")
    def update_reservation(reservation_id):
        body = _parse_body()
        if body is None:
            return _json_response(_INVALID_JSON, status=400)
        reservation_service.update_reservation(
            reservation_id, _field(body, "cleared_at", "")
        )
        return _json_response(_OK)

    return app