# fotition_client/domain/query/value_objects.py
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import StrEnum
from typing import Any, Iterable

from fotition_client.domain.common.iso8601 import format_datetime


class CollectionFormat(StrEnum):
    CSV = "csv"
    SSV = "ssv"
    TSV = "tsv"
    PIPES = "pipes"
    MULTI = "multi"


_SEPARATORS = {
    CollectionFormat.CSV: ",",
    CollectionFormat.SSV: " ",
    CollectionFormat.TSV: "\t",
    CollectionFormat.PIPES: "|",
}


def render_query_value(value: Any) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, datetime):
        return format_datetime(value)
    return str(value)


@dataclass(frozen=True, slots=True)
class QueryParamCollection:
    """An array-valued query parameter and the format used to serialize it."""
    values: tuple[Any, ...]
    format: CollectionFormat = CollectionFormat.CSV

    def __init__(self, values: Iterable[Any], format: CollectionFormat | str = CollectionFormat.CSV) -> None:
        object.__setattr__(self, "values", tuple(values))
        # raises ValueError for unknown formats
        object.__setattr__(self, "format", CollectionFormat(format))

    def to_params(self, key: str) -> list[tuple[str, str]]:
        rendered = [render_query_value(v) for v in self.values]
        if not rendered:
            return []

        if self.format is CollectionFormat.MULTI:
            return [(key, v) for v in rendered]

        return [(key, _SEPARATORS[self.format].join(rendered))]
