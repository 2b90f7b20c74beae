"""Turn the service's JSON body into an ``Activity``.

Fields are read in a fixed order and the first failure wins. An ``error``
key short-circuits extraction entirely.
"""

import math

from pydantic import AnyUrl, TypeAdapter, ValidationError

from boredapi.client.errors import ApiError, BadResponse
from boredapi.models.activity import Activity, ActivityType

ERROR_FIELD = "error"
ROOT_FIELD = "<root>"
LINK_FIELD = "link"

U64_MAX = 2**64 - 1
U64_MAX_DIGITS = len(str(U64_MAX))

_URL_ADAPTER = TypeAdapter(AnyUrl)


def decode_activity(payload: object) -> Activity:
    if not isinstance(payload, dict):
        raise BadResponse(ROOT_FIELD, f"expected an object, got {_json_type(payload)}")

    if ERROR_FIELD in payload:
        message = payload[ERROR_FIELD]
        if isinstance(message, str):
            raise ApiError(message)
        raise BadResponse(ERROR_FIELD, f"expected a string, got {_json_type(message)}")

    description = _require_str(payload, "activity")
    if not description:
        raise BadResponse("activity", "empty description")
    accessibility = _require_number(payload, "accessibility")
    activity_type = _parse_activity_type(_require_str(payload, "type"))
    participants = _require_count(payload, "participants")
    price = _require_number(payload, "price")
    link = _parse_link(payload)
    key = _parse_key(_require_str(payload, "key"))

    return Activity(
        description=description,
        accessibility=accessibility,
        activity_type=activity_type,
        participants=participants,
        price=price,
        link=link,
        key=key,
    )


def _json_type(value: object) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def _require(payload: dict, field: str) -> object:
    if field not in payload:
        raise BadResponse(field, "missing")
    return payload[field]


def _require_str(payload: dict, field: str) -> str:
    value = _require(payload, field)
    if not isinstance(value, str):
        raise BadResponse(field, f"expected a string, got {_json_type(value)}")
    return value


def _require_number(payload: dict, field: str) -> float:
    value = _require(payload, field)
    # JSON booleans are not numbers even though bool subclasses int.
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise BadResponse(field, f"expected a number, got {_json_type(value)}")
    try:
        number = float(value)
    except OverflowError:
        raise BadResponse(field, "number out of range") from None
    if not math.isfinite(number):
        raise BadResponse(field, f"expected a finite number, got {value!r}")
    return number


def _require_count(payload: dict, field: str) -> int:
    value = _require(payload, field)
    if isinstance(value, bool) or not isinstance(value, int):
        raise BadResponse(field, f"expected an integer, got {_json_type(value)}")
    if value < 0 or value > U64_MAX:
        raise BadResponse(field, "expected an unsigned 64-bit integer")
    return value


def _parse_activity_type(value: str) -> ActivityType:
    try:
        return ActivityType(value)
    except ValueError:
        raise BadResponse("type", f"unknown activity type {value!r}") from None


def _parse_link(payload: dict) -> str | None:
    if LINK_FIELD not in payload:
        return None
    value = payload[LINK_FIELD]
    if not isinstance(value, str):
        raise BadResponse(LINK_FIELD, f"expected a string, got {_json_type(value)}")
    if value == "":
        return None
    try:
        _URL_ADAPTER.validate_python(value)
    except ValidationError:
        raise BadResponse(LINK_FIELD, f"not an absolute URL: {value!r}") from None
    return value


def _parse_key(value: str) -> int:
    if not value or not value.isascii() or not value.isdigit():
        raise BadResponse("key", f"expected a numeric string, got {value!r}")
    digits = value.lstrip("0") or "0"
    # Length check first: int() refuses very long digit strings.
    if len(digits) > U64_MAX_DIGITS or int(digits) > U64_MAX:
        raise BadResponse("key", "exceeds the unsigned 64-bit range")
    return int(digits)
