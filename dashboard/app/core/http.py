"""HTTP client for the dashboard's REST backend."""

from __future__ import annotations

import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Mapping, Optional, Sequence, Tuple

import httpx

from .config import Settings, settings as default_settings

logger = logging.getLogger(__name__)

FileField = Tuple[str, bytes]
"""(filename, content) pair for multipart uploads."""


class BackendRequestError(RuntimeError):
    """Raised when the backend cannot be reached or answers with a non-2xx status."""

    def __init__(self, message: str, *, status_code: Optional[int] = None, detail: Any = None) -> None:
        super().__init__(message)
        self.status_code = status_code
        self.detail = detail


class ApiClient:
    """Thin JSON / multipart wrapper around ``httpx.Client``.

    Form verbs always send ``multipart/form-data``, with or without files.

    Every call is a single attempt. Failures surface as
    :class:`BackendRequestError` and are never retried here.
    """

    def __init__(
        self,
        base_url: str,
        *,
        timeout: Optional[float] = None,
        transport: Optional[httpx.BaseTransport] = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        client_kwargs: Dict[str, Any] = {"base_url": self.base_url}
        if timeout is not None:
            client_kwargs["timeout"] = timeout
        if transport is not None:
            client_kwargs["transport"] = transport
        self._client = httpx.Client(**client_kwargs)

    # ------------------------------------------------------------------ verbs
    def get_json(self, path: str, *, params: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("GET", path, params=params)

    def post_json(self, path: str, payload: Any) -> Any:
        return self._request("POST", path, json=payload)

    def put_json(self, path: str, payload: Any) -> Any:
        return self._request("PUT", path, json=payload)

    def post_form(
        self,
        path: str,
        data: Mapping[str, str],
        *,
        files: Optional[Sequence[Tuple[str, FileField]]] = None,
    ) -> Any:
        return self._request("POST", path, files=_multipart_fields(data, files))

    def put_form(
        self,
        path: str,
        data: Mapping[str, str],
        *,
        files: Optional[Sequence[Tuple[str, FileField]]] = None,
    ) -> Any:
        return self._request("PUT", path, files=_multipart_fields(data, files))

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def url_for(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def close(self) -> None:
        self._client.close()

    # ------------------------------------------------------------------ internal
    def _request(self, method: str, path: str, **kwargs: Any) -> Any:
        kwargs = {key: value for key, value in kwargs.items() if value is not None}
        try:
            response = self._client.request(method, path, **kwargs)
        except httpx.HTTPError as exc:
            raise BackendRequestError(f"{method} {path} failed: {exc}") from exc

        if response.is_error:
            detail = self._extract_detail(response)
            raise BackendRequestError(
                f"{method} {path} returned {response.status_code}",
                status_code=response.status_code,
                detail=detail,
            )

        if not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            return response.text

    @staticmethod
    def _extract_detail(response: httpx.Response) -> Any:
        try:
            payload = response.json()
        except ValueError:
            return response.text or None
        if isinstance(payload, dict) and "detail" in payload:
            return payload["detail"]
        return payload


def _multipart_fields(
    data: Mapping[str, str],
    files: Optional[Sequence[Tuple[str, FileField]]],
) -> List[Tuple[str, Tuple[Optional[str], bytes]]]:
    """Encode form fields as filename-less parts so forms are always multipart."""

    fields: List[Tuple[str, Tuple[Optional[str], bytes]]] = [
        (name, (None, str(value).encode("utf-8"))) for name, value in data.items()
    ]
    fields.extend(files or ())
    return fields


def create_client(
    config: Optional[Settings] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> ApiClient:
    """Build an :class:`ApiClient` from settings."""

    config = config or default_settings
    return ApiClient(
        config.resolved_api_base_url,
        timeout=config.request_timeout,
        transport=transport,
    )


@contextmanager
def open_client(
    config: Optional[Settings] = None,
    *,
    transport: Optional[httpx.BaseTransport] = None,
) -> Iterator[ApiClient]:
    """Context manager yielding a client that is closed on exit."""

    client = create_client(config, transport=transport)
    try:
        yield client
    finally:
        client.close()
