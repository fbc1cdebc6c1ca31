# fotition_client/api_client.py
from __future__ import annotations

import functools
import logging
import re
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple
from urllib.parse import quote

import httpx

from fotition_client.core.config import Settings, settings as default_settings
from fotition_client.domain.common.models import ApiObject
from fotition_client.domain.files import FileUpload, MissingParamName
from fotition_client.domain.query import QueryParamCollection, render_query_value

logger = logging.getLogger(__name__)

_PATH_PARAM = re.compile(r"\{([^{}/]+)\}")
_DEFAULT_MIME_TYPE = "application/octet-stream"


class ApiError(RuntimeError):
    """Raised when an HTTP/API error occurs, with a human-readable message."""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code = status_code


class MissingPathParam(Exception):
    def __init__(self, name: str, path: str):
        super().__init__(f"Missing value for path parameter '{name}' in {path}")
        self.name = name


def unwrap_error(e: Exception) -> str:
    """Extract a human-readable error message from httpx exceptions."""
    if isinstance(e, httpx.HTTPStatusError):
        # The request reached the server, but the response had an error code
        try:
            data = e.response.json()
            detail = data.get("detail") if isinstance(data, dict) else data
            return f"{e.response.status_code} {e.response.reason_phrase}: {detail}"
        except ValueError:
            return f"{e.response.status_code} {e.response.reason_phrase}"

    elif isinstance(e, httpx.TimeoutException):
        return "Request timed out."

    elif isinstance(e, httpx.ConnectError):
        return "Failed to connect to server. Is it running?"

    elif isinstance(e, httpx.RequestError):
        # DNS failures, protocol errors, etc.
        return f"Request failed: {e.__class__.__name__}: {e}"

    else:
        return str(e)


def handle_httpx_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except httpx.HTTPError as e:
            message = unwrap_error(e)
            logger.warning("API request failed: %s", message)
            status_code = e.response.status_code if isinstance(e, httpx.HTTPStatusError) else None
            raise ApiError(message, status_code=status_code) from e

    return wrapper


def _to_jsonable(body: Any) -> Any:
    if isinstance(body, ApiObject):
        return body.to_dict()
    if isinstance(body, Mapping):
        return {key: _to_jsonable(value) for key, value in body.items()}
    if isinstance(body, (list, tuple)):
        return [_to_jsonable(item) for item in body]
    return body


class ApiClient:
    """
    Runtime HTTP client used by generated Fotition API classes.

    Builds requests from path/query/body parameters and sends FileUpload
    values as multipart/form-data parts named by their param_name.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._settings = settings or default_settings
        auth = None
        if self._settings.USERNAME is not None:
            auth = httpx.BasicAuth(self._settings.USERNAME, self._settings.PASSWORD or "")

        self._client = httpx.Client(
            base_url=self._settings.HOST.rstrip("/"),
            timeout=self._settings.TIMEOUT,
            verify=self._settings.VERIFY_SSL,
            auth=auth,
            transport=transport,
        )

    @property
    def settings(self) -> Settings:
        return self._settings

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def _auth_headers(self) -> Dict[str, str]:
        headers: Dict[str, str] = {}
        if self._settings.ACCESS_TOKEN:
            headers["Authorization"] = f"Bearer {self._settings.ACCESS_TOKEN}"
        if self._settings.API_KEY:
            prefix = self._settings.API_KEY_PREFIX
            value = f"{prefix} {self._settings.API_KEY}" if prefix else self._settings.API_KEY
            headers[self._settings.API_KEY_HEADER] = value
        return headers

    @staticmethod
    def _render_path(path: str, path_params: Optional[Mapping[str, Any]]) -> str:
        params = path_params or {}

        def substitute(match: re.Match) -> str:
            name = match.group(1)
            if params.get(name) is None:
                raise MissingPathParam(name, path)
            return quote(render_query_value(params[name]), safe="")

        return _PATH_PARAM.sub(substitute, path)

    @staticmethod
    def _query_params(query: Optional[Mapping[str, Any]]) -> List[Tuple[str, str]]:
        out: List[Tuple[str, str]] = []
        for key, value in (query or {}).items():
            if value is None:
                continue
            if isinstance(value, QueryParamCollection):
                out.extend(value.to_params(key))
            else:
                out.append((key, render_query_value(value)))
        return out

    @staticmethod
    def _multipart_files(files: Optional[Iterable[FileUpload]]) -> List[Tuple[str, Tuple[str, bytes, str]]]:
        parts: List[Tuple[str, Tuple[str, bytes, str]]] = []
        for upload in files or ():
            if not upload.param_name:
                raise MissingParamName(upload.name)
            # httpx omits filename= and writes a blank Content-Type for empty values
            filename = upload.name or upload.param_name
            mime_type = upload.mime_type or _DEFAULT_MIME_TYPE
            parts.append((upload.param_name, (filename, upload.data, mime_type)))
        return parts

    @staticmethod
    def _decode(resp: httpx.Response) -> Any:
        if not resp.content:
            return None
        content_type = resp.headers.get("content-type", "")
        if "json" not in content_type:
            return resp.text
        try:
            return resp.json()
        except ValueError as e:
            raise ApiError(f"Invalid JSON in response from {resp.request.url}", status_code=resp.status_code) from e

    @handle_httpx_errors
    def request(
        self,
        method: str,
        path: str,
        *,
        path_params: Optional[Mapping[str, Any]] = None,
        query: Optional[Mapping[str, Any]] = None,
        headers: Optional[Mapping[str, str]] = None,
        json: Any = None,
        form: Optional[Mapping[str, Any]] = None,
        files: Optional[Iterable[FileUpload]] = None,
    ) -> Any:
        """
        Send one API request and return the decoded response body.

        - files become multipart parts; every FileUpload needs a param_name
        - form fields without files are sent url-encoded
        - an empty body returns None, a non-JSON body returns text
        """
        url = self._render_path(path, path_params)
        uploads = list(files or ())
        parts = self._multipart_files(uploads)
        merged_headers = {**self._auth_headers(), **(headers or {})}
        data = {k: render_query_value(v) for k, v in (form or {}).items() if v is not None}

        if self._settings.DEBUG:
            logger.debug(
                "%s %s files=%s",
                method.upper(),
                url,
                [(p.param_name, p.name, p.size_bytes) for p in uploads],
            )

        resp = self._client.request(
            method.upper(),
            url,
            params=self._query_params(query) or None,
            headers=merged_headers or None,
            json=_to_jsonable(json) if json is not None else None,
            data=data or None,
            files=parts or None,
        )

        if self._settings.DEBUG:
            logger.debug("%s %s -> %s", method.upper(), url, resp.status_code)

        resp.raise_for_status()
        return self._decode(resp)

    def upload(
        self,
        path: str,
        *files: FileUpload,
        form: Optional[Mapping[str, Any]] = None,
        path_params: Optional[Mapping[str, Any]] = None,
        method: str = "POST",
    ) -> Any:
        """
        POST one or more files as multipart/form-data.
        """
        return self.request(method, path, path_params=path_params, form=form, files=files)
