from __future__ import annotations

from flask import Flask, request

from ..common.datetime_utils import now_local
from ..common.http import api_errors, fail, json_body, ok
from ..container import Container
from ..core.enums import Attendance, RidePeriod, RideStatus
from ..ledger.selectors import attendance_is, for_passenger, recent_rides, select, status_is
from .model import NewRide


def register(app: Flask, container: Container) -> None:
    svc = container.ride_service

    @app.route("/api/rides", methods=["GET"], endpoint="rides_list")
    @api_errors
    def rides_list():
        try:
            period = RidePeriod((request.args.get("period") or "all").lower())
            status = RideStatus(request.args["status"]) if request.args.get("status") else None
            attendance = Attendance(request.args["attendance"]) if request.args.get("attendance") else None
        except ValueError:
            return fail("Invalid period, status or attendance filter")

        predicates = []
        if status:
            predicates.append(status_is(status))
        if attendance:
            predicates.append(attendance_is(attendance))
        if request.args.get("passenger_id"):
            predicates.append(for_passenger(request.args["passenger_id"]))

        rides = recent_rides(svc.list_rides(), now_local(), period)
        return ok(select(rides, *predicates))

    @app.route("/api/rides", methods=["POST"], endpoint="rides_create")
    @api_errors
    def rides_create():
        data = json_body()
        new = NewRide(
            passenger_id=data.get("passenger_id"),
            passenger_name=str(data.get("passenger_name") or ""),
            pickup_location=str(data.get("pickup_location") or ""),
            drop_location=str(data.get("drop_location") or ""),
            pickup_time=data.get("pickup_time"),
            fare=data.get("fare"),
            notes=data.get("notes"),
        )
        return ok(svc.add_ride(new), 201)

    @app.route("/api/rides/<ride_id>", methods=["PATCH"], endpoint="rides_update")
    @api_errors
    def rides_update(ride_id: str):
        return ok(svc.update_ride(ride_id, **json_body()))

    @app.route("/api/rides/<ride_id>", methods=["DELETE"], endpoint="rides_delete")
    @api_errors
    def rides_delete(ride_id: str):
        svc.delete_ride(ride_id)
        return ok()

    @app.route("/api/rides/<ride_id>/attendance", methods=["POST"], endpoint="rides_attendance")
    @api_errors
    def rides_attendance(ride_id: str):
        return ok(svc.mark_attendance(ride_id, str(json_body().get("attendance") or "")))

    @app.route("/api/rides/<ride_id>/start", methods=["POST"], endpoint="rides_start")
    @api_errors
    def rides_start(ride_id: str):
        return ok(svc.start_ride(ride_id))

    @app.route("/api/rides/<ride_id>/complete", methods=["POST"], endpoint="rides_complete")
    @api_errors
    def rides_complete(ride_id: str):
        return ok(svc.complete_ride(ride_id, json_body().get("fare", 0)))

    @app.route("/api/rides/<ride_id>/cancel", methods=["POST"], endpoint="rides_cancel")
    @api_errors
    def rides_cancel(ride_id: str):
        return ok(svc.cancel_ride(ride_id))
