# fotition_client/domain/common/models.py
from __future__ import annotations

from datetime import datetime, timezone
from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer
from pydantic.alias_generators import to_camel

from fotition_client.domain.common.iso8601 import format_datetime, parse_datetime


def _coerce_datetime(value: Any) -> Any:
    if isinstance(value, str):
        return parse_datetime(value)
    if isinstance(value, datetime) and value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


# datetime field that always comes back aware and goes out as UTC "Z"
IsoDateTime = Annotated[
    datetime,
    BeforeValidator(_coerce_datetime),
    PlainSerializer(format_datetime, return_type=str, when_used="json"),
]


class ApiObject(BaseModel):
    """
    Base for generated API models.

    Fields are snake_case in Python and camelCase on the wire. Unknown keys
    sent by the server are ignored so older clients keep working.
    """
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="ignore",
    )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ApiObject":
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)
