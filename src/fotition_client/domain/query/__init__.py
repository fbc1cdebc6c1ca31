from .value_objects import CollectionFormat, QueryParamCollection, render_query_value

__all__ = [
    "CollectionFormat",
    "QueryParamCollection",
    "render_query_value",
]
