from .iso8601 import InvalidDateTime, format_datetime, parse_datetime
from .models import ApiObject, IsoDateTime

__all__ = [
    "ApiObject",
    "IsoDateTime",
    "InvalidDateTime",
    "format_datetime",
    "parse_datetime",
]
