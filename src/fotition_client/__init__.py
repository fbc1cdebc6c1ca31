from .api_client import ApiClient, ApiError, MissingPathParam
from .core.config import Settings
from .domain.common import ApiObject, IsoDateTime, InvalidDateTime, format_datetime, parse_datetime
from .domain.files import FileUpload, MissingParamName
from .domain.query import CollectionFormat, QueryParamCollection

__all__ = [
    "ApiClient",
    "ApiError",
    "ApiObject",
    "CollectionFormat",
    "FileUpload",
    "InvalidDateTime",
    "IsoDateTime",
    "MissingParamName",
    "MissingPathParam",
    "QueryParamCollection",
    "Settings",
    "format_datetime",
    "parse_datetime",
]
