import enum
import json
from dataclasses import asdict
from datetime import datetime
from typing import Any

from flask import Response


def to_json_serializable(obj: Any) -> Any:
    """
    Convert an object to a JSON serializable format.
    Handles enum values, datetimes, dataclasses, and other common types.

    Args:
        obj: The object to convert

    Returns:
        A JSON serializable representation of the object
    """
    if obj is None:
        return None
    elif isinstance(obj, enum.Enum):
        return obj.value
    elif isinstance(obj, (str, int, float, bool)):
        return obj
    elif isinstance(obj, datetime):
        return obj.isoformat()
    elif isinstance(obj, (list, tuple)):
        return [to_json_serializable(item) for item in obj]
    elif isinstance(obj, dict):
        return {str(k): to_json_serializable(v) for k, v in obj.items()}
    elif hasattr(obj, "to_json"):
        return to_json_serializable(obj.to_json())
    elif hasattr(obj, "__dataclass_fields__"):
        return to_json_serializable(asdict(obj))
    else:
        # Last resort: string representation (e.g. Firestore sentinels)
        return str(obj)


def json_response(payload: Any, status: int = 200) -> Response:
    """
    Build an application/json response from a dict, dataclass or report.

    Args:
        payload: The body to serialize
        status: The HTTP status code

    Returns:
        A Flask Response carrying the serialized body
    """
    return Response(
        json.dumps(to_json_serializable(payload)),
        status=status,
        mimetype="application/json",
    )
