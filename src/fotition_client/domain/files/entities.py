# fotition_client/domain/files/entities.py
from __future__ import annotations

from dataclasses import FrozenInstanceError, dataclass, field
from typing import Any

_READ_ONLY_FIELDS = frozenset({"name", "mime_type", "data"})


@dataclass(slots=True)
class FileUpload:
    """
    A file sent as one part of a multipart/form-data request.

    name, mime_type and data are fixed once the constructor returns.
    param_name (the form field the part is submitted under) starts empty
    and is assigned by the caller before the request is built.
    """
    name: str
    mime_type: str
    data: bytes
    param_name: str = field(default="", init=False)

    def __post_init__(self) -> None:
        # own an immutable copy of the payload
        object.__setattr__(self, "data", bytes(self.data))

    def __setattr__(self, key: str, value: Any) -> None:
        if key in _READ_ONLY_FIELDS and hasattr(self, key):
            raise FrozenInstanceError(f"cannot assign to field {key!r}")
        object.__setattr__(self, key, value)

    def __delattr__(self, key: str) -> None:
        # param_name may be reassigned but never removed
        if key in _READ_ONLY_FIELDS or key == "param_name":
            raise FrozenInstanceError(f"cannot delete field {key!r}")
        object.__delattr__(self, key)

    @property
    def size_bytes(self) -> int:
        return len(self.data)
