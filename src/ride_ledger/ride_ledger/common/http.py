from __future__ import annotations

import dataclasses
import logging
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from functools import wraps
from typing import Any

from flask import jsonify, request

from ..core.exceptions import DomainError, NotFoundError

logger = logging.getLogger(__name__)


def to_jsonable(value: Any) -> Any:
    """Dataclasses/enums/decimals/dates to plain JSON values (money as strings)."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        return {f.name: to_jsonable(getattr(value, f.name)) for f in dataclasses.fields(value)}
    if isinstance(value, Enum):
        return value.value
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    if isinstance(value, dict):
        return {str(k): to_jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_jsonable(v) for v in value]
    return value


def ok(data: Any = None, status: int = 200):
    return jsonify({"success": True, "data": to_jsonable(data)}), status


def fail(message: str, status: int = 400):
    return jsonify({"success": False, "message": message}), status


def json_body() -> dict:
    data = request.get_json(silent=True)
    return data if isinstance(data, dict) else {}


def api_errors(view):
    """Translate domain errors raised by services into JSON responses."""

    @wraps(view)
    def wrapper(*args, **kwargs):
        try:
            return view(*args, **kwargs)
        except NotFoundError as e:
            return fail(str(e), 404)
        except DomainError as e:
            return fail(str(e), 400)
        except Exception:
            logger.exception("Unhandled error in %s", request.path)
            return fail("Internal error", 500)

    return wrapper
