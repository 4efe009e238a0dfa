"""``repr(client)`` exposes configuration but never secrets."""

from __future__ import annotations

import pytest

from oai_client import Client
from oai_client.base.client_config import ClientConfig
from oai_client.base.diagnostics import REDACTED, format_client, secret_values

API_KEY = "sk-123456789"  # nosec B105 - test credential
ORGANIZATION_ID = "org-123456789"
EXTRA_HEADERS = {"Other-Auth": "key-123456789"}
URI_BASE = "https://example.com/"
REQUEST_TIMEOUT = 500


@pytest.fixture()
def client() -> Client:
    return Client(
        uri_base=URI_BASE,
        request_timeout=REQUEST_TIMEOUT,
        access_token=API_KEY,
        organization_id=ORGANIZATION_ID,
        extra_headers=EXTRA_HEADERS,
    )


def test_does_not_expose_sensitive_information(client):
    text = repr(client)
    assert API_KEY not in text
    assert ORGANIZATION_ID not in text
    assert EXTRA_HEADERS["Other-Auth"] not in text


def test_does_expose_non_sensitive_information(client):
    text = repr(client)
    assert repr(URI_BASE) in text
    assert repr(REQUEST_TIMEOUT) in text
    assert hex(id(client)) in text
    assert Client.__name__ in text
    assert text.startswith("<oai_client.client.Client object at ")


def test_derived_clients_hide_admin_token():
    client = Client(admin_token="adm-987654321").beta(assistants="v2").admin()  # nosec B106
    text = repr(client)
    assert "adm-987654321" not in text
    assert "assistants" in text


def test_secret_embedded_in_public_field_is_redacted():
    client = Client(uri_base="https://gw.example.com/sk-abcdef1234/", access_token="sk-abcdef1234")  # nosec B106
    text = repr(client)
    assert "sk-abcdef1234" not in text
    assert REDACTED in text


def test_secret_matching_type_name_is_redacted():
    client = Client(access_token="Client")  # nosec B106 - test credential
    text = repr(client)
    assert "Client" not in text
    assert text.startswith(f"<oai_client.client.{REDACTED} object at ")


def test_secret_fields_are_tagged():
    assert set(ClientConfig.secret_fields()) == {"access_token", "admin_token", "organization_id", "extra_headers"}


def test_secret_values_include_every_extra_header_value(client):
    assert secret_values(client) >= {API_KEY, ORGANIZATION_ID, "key-123456789"}


def test_format_client_matches_repr(client):
    assert format_client(client) == repr(client)
