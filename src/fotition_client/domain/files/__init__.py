from .entities import FileUpload
from .errors import MissingParamName

__all__ = [
    "FileUpload",
    "MissingParamName",
]
