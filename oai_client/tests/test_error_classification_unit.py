"""Unit tests for error classification mapping."""

from __future__ import annotations

import httpx
import pytest

from oai_client.base.errors import ClientError, ErrorCode, classify_exception, classify_status


class _StatusExc(Exception):
    def __init__(self, status_code: int):
        super().__init__(f"status {status_code}")
        self.status_code = status_code


@pytest.mark.parametrize(
    "status,expected",
    [
        (400, ErrorCode.VALIDATION),
        (401, ErrorCode.AUTH),
        (403, ErrorCode.AUTH),
        (404, ErrorCode.NOT_FOUND),
        (409, ErrorCode.CONFLICT),
        (429, ErrorCode.RATE_LIMIT),
        (500, ErrorCode.SERVER_ERROR),
        (502, ErrorCode.TRANSIENT),
        (503, ErrorCode.UNAVAILABLE),
        (504, ErrorCode.TIMEOUT),
        (599, ErrorCode.SERVER_ERROR),
        (418, ErrorCode.UNKNOWN),
    ],
)
def test_status_mapping(status, expected):
    assert classify_status(status) is expected
    assert classify_exception(_StatusExc(status)) is expected


def test_httpx_status_error_uses_response_status():
    request = httpx.Request("GET", "https://api.example.com/v1/models")
    response = httpx.Response(401, request=request)
    exc = httpx.HTTPStatusError("unauthorized", request=request, response=response)
    assert classify_exception(exc) is ErrorCode.AUTH


def test_transport_exceptions():
    request = httpx.Request("GET", "https://api.example.com/")
    assert classify_exception(httpx.ReadTimeout("slow", request=request)) is ErrorCode.TIMEOUT
    assert classify_exception(httpx.ConnectError("refused", request=request)) is ErrorCode.CONNECTION
    assert classify_exception(TimeoutError()) is ErrorCode.TIMEOUT


def test_client_error_passthrough_and_str():
    err = ClientError(code=ErrorCode.RATE_LIMIT, message="slow down", status_code=429)
    assert classify_exception(err) is ErrorCode.RATE_LIMIT
    assert str(err) == "[rate_limit 429] slow down"
    assert str(ClientError(code=ErrorCode.CONNECTION, message="down")) == "[connection] down"


def test_unknown_fallback():
    assert classify_exception(RuntimeError("???")) is ErrorCode.UNKNOWN


def test_error_codes_cover_request_failures_only():
    # configuration mistakes raise ConfigurationError, never a ClientError code
    assert {c.value for c in ErrorCode} == {
        "auth",
        "rate_limit",
        "timeout",
        "connection",
        "transient",
        "validation",
        "not_found",
        "conflict",
        "server_error",
        "unavailable",
        "unknown",
    }
