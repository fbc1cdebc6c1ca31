# fotition_client/domain/common/iso8601.py
from __future__ import annotations

from datetime import datetime, timezone


class InvalidDateTime(ValueError):
    def __init__(self, value: object):
        super().__init__(f"Not an ISO 8601 date-time: {value!r}")
        self.value = value


def parse_datetime(text: str) -> datetime:
    """
    Parse an ISO 8601 date-time as sent by the API.

    A trailing "Z" means UTC; values without an offset are taken as UTC.
    """
    if not isinstance(text, str):
        raise InvalidDateTime(text)

    raw = text.strip()
    if raw[-1:] in ("Z", "z"):
        raw = raw[:-1] + "+00:00"

    try:
        value = datetime.fromisoformat(raw)
    except ValueError as e:
        raise InvalidDateTime(text) from e

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value


def format_datetime(value: datetime) -> str:
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc).isoformat().replace("+00:00", "Z")
