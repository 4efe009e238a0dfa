"""Request verbs shared by clients.

``HttpRequestsMixin`` is the seam resource wrappers bind to: they supply only
a path and parameters, and the mixin turns the owning client's configuration
into URI, headers and transport settings for each call. Nothing is cached
between calls, so a derived client issues requests with its own snapshot.

Failure modes:
    - HTTP status >= 400 raises ``ClientError`` carrying status, classified
      code and the parsed body.
    - Transport failures (timeouts, connection errors) raise ``ClientError``
      with ``status_code=None``.
    - With ``log_errors`` enabled, both are logged as ``http.error`` first.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping, Optional

import httpx

from ...config.defaults import JSON_CONTENT_TYPE
from ..client_config import ClientConfig
from ..errors import ClientError, classify_exception, classify_status
from ..headers import build_headers
from ..logging import LogContext, get_logger, log_event
from .client import MiddlewareHook, build_httpx_client
from .uri import build_uri

_logger = get_logger("oai_client.http")


def _parse_body(response: httpx.Response) -> Any:
    try:
        return response.json()
    except ValueError:
        return response.text


def _split_multipart(parameters: Mapping[str, Any]) -> tuple[Dict[str, Any], Dict[str, Any]]:
    """Separate file-like values (sent as files) from plain form fields."""
    files: Dict[str, Any] = {}
    data: Dict[str, Any] = {}
    for key, value in parameters.items():
        if hasattr(value, "read"):
            files[key] = value
        else:
            data[key] = value if isinstance(value, (str, bytes)) else str(value)
    return files, data


class HttpRequestsMixin:
    """Request verbs over an ``httpx`` transport.

    Hosts provide ``config``, ``access_token``, ``middleware_hook`` and
    ``transport``.
    """

    config: ClientConfig
    access_token: str
    middleware_hook: MiddlewareHook
    transport: Optional[httpx.BaseTransport]

    # -------------------- Public verbs --------------------

    def get(self, path: str, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        return self._request("GET", path, params=parameters)

    def post(self, path: str) -> Any:
        return self._request("POST", path)

    def json_post(
        self,
        path: str,
        parameters: Optional[Mapping[str, Any]] = None,
        query_parameters: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._request("POST", path, params=query_parameters, json=dict(parameters or {}))

    def multipart_post(self, path: str, parameters: Optional[Mapping[str, Any]] = None) -> Any:
        files, data = _split_multipart(parameters or {})
        return self._request("POST", path, data=data, files=files or None, content_type=None)

    def delete(self, path: str) -> Any:
        return self._request("DELETE", path)

    def uri(self, path: str) -> str:
        """Absolute URI for ``path`` under this client's configuration."""
        return build_uri(self.config, path)

    # -------------------- Internals --------------------

    def _request(
        self,
        method: str,
        path: str,
        *,
        params: Optional[Mapping[str, Any]] = None,
        json: Any = None,
        data: Optional[Mapping[str, Any]] = None,
        files: Optional[Mapping[str, Any]] = None,
        content_type: Optional[str] = JSON_CONTENT_TYPE,
    ) -> Any:
        ctx = LogContext(client_id=hex(id(self)), method=method, path=path)
        headers = build_headers(self.config, access_token=self.access_token, content_type=content_type)
        url = httpx.URL(self.uri(path))
        if params:
            # keep query already on the URI (Azure api-version)
            url = url.copy_merge_params(dict(params))
        with build_httpx_client(self.config, middleware_hook=self.middleware_hook, transport=self.transport) as conn:
            try:
                response = conn.request(
                    method,
                    url,
                    headers=headers,
                    json=json,
                    data=data,
                    files=files,
                )
            except httpx.HTTPError as exc:
                raise self._transport_error(exc, ctx) from exc
            if response.is_error:
                raise self._status_error(response, ctx)
            log_event(_logger, "http.request", ctx, level=logging.DEBUG, status=response.status_code)
            return _parse_body(response)

    def _status_error(self, response: httpx.Response, ctx: LogContext) -> ClientError:
        body = _parse_body(response)
        code = classify_status(response.status_code)
        if self.config.log_errors:
            log_event(_logger, "http.error", ctx, level=logging.ERROR, status=response.status_code, error_code=code.value, body=body)
        return ClientError(
            code=code,
            message=f"{ctx.method} {ctx.path} failed with HTTP {response.status_code}",
            status_code=response.status_code,
            body=body,
        )

    def _transport_error(self, exc: httpx.HTTPError, ctx: LogContext) -> ClientError:
        code = classify_exception(exc)
        if self.config.log_errors:
            log_event(_logger, "http.error", ctx, level=logging.ERROR, error_code=code.value, error=type(exc).__name__)
        return ClientError(code=code, message=f"{ctx.method} {ctx.path} failed: {type(exc).__name__}", raw=exc)


__all__ = ["HttpRequestsMixin"]
