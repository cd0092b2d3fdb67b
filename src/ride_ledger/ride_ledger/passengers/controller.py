from __future__ import annotations

from flask import Flask, request

from ..common.http import api_errors, fail, json_body, ok
from ..container import Container
from .model import NewPassenger


def register(app: Flask, container: Container) -> None:
    svc = container.passenger_service

    @app.route("/api/passengers", methods=["GET"], endpoint="passengers_list")
    @api_errors
    def passengers_list():
        kind = (request.args.get("kind") or "all").lower()
        if kind == "regular":
            return ok(svc.list_regular())
        if kind == "random":
            return ok(svc.list_random())
        if kind != "all":
            return fail("kind must be one of: all, regular, random")
        return ok(svc.list_passengers())

    @app.route("/api/passengers", methods=["POST"], endpoint="passengers_create")
    @api_errors
    def passengers_create():
        data = json_body()
        new = NewPassenger(
            name=str(data.get("name") or ""),
            phone=str(data.get("phone") or ""),
            profession=data.get("profession"),
            pickup_location=str(data.get("pickup_location") or ""),
            drop_location=str(data.get("drop_location") or ""),
            school_office_info=data.get("school_office_info"),
            is_regular=data.get("is_regular", False),
        )
        return ok(svc.add_passenger(new), 201)

    @app.route("/api/passengers/<passenger_id>", methods=["PATCH"], endpoint="passengers_update")
    @api_errors
    def passengers_update(passenger_id: str):
        return ok(svc.update_passenger(passenger_id, **json_body()))

    @app.route("/api/passengers/<passenger_id>", methods=["DELETE"], endpoint="passengers_delete")
    @api_errors
    def passengers_delete(passenger_id: str):
        svc.delete_passenger(passenger_id)
        return ok()
