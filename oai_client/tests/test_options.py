"""Tests for ``ClientOptions`` presence tracking and resolution."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from oai_client import Client, ClientOptions, configure
from oai_client.base.client_config import ClientConfig, resolve_client_config
from oai_client.base.options import coerce_options
from oai_client.config import Configuration


def test_provided_reports_only_set_non_none_fields():
    opts = ClientOptions(access_token="", organization_id=None, request_timeout=3)  # nosec B106
    assert opts.provided() == {"access_token": "", "request_timeout": 3}


def test_unknown_option_rejected():
    with pytest.raises(ValidationError):
        ClientOptions(acess_token="typo")  # nosec B106 - test credential
    with pytest.raises(ValidationError):
        Client(acess_token="typo")  # nosec B106 - test credential


def test_value_types_are_not_checked_at_construction():
    client = Client(request_timeout=1.5, extra_headers={"X-Retry": 3})
    assert client.request_timeout == 1.5
    assert client.extra_headers == {"X-Retry": 3}
    assert ClientOptions(log_errors="sometimes").provided() == {"log_errors": "sometimes"}


def test_keyword_overrides_win_over_options():
    merged = coerce_options(ClientOptions(uri_base="https://a/", request_timeout=1), {"uri_base": "https://b/"})
    assert merged.uri_base == "https://b/"
    assert merged.request_timeout == 1
    assert merged.model_fields_set == {"uri_base", "request_timeout"}


def test_mapping_options_accepted():
    client = Client({"uri_base": "https://mapping/"}, request_timeout=4)
    assert client.uri_base == "https://mapping/"
    assert client.request_timeout == 4


def test_explicit_empty_string_overrides_default():
    configure(access_token="global-token")  # nosec B106 - test credential
    cfg = resolve_client_config(ClientOptions(access_token=""))  # nosec B106
    assert cfg.access_token == ""


def test_none_organization_inherits():
    cfg = resolve_client_config(ClientOptions(organization_id=None), Configuration(organization_id="org-default"))
    assert cfg.organization_id == "org-default"


def test_extra_headers_replace_not_merge():
    cfg = resolve_client_config(
        ClientOptions(extra_headers={"X-Own": "1"}),
        Configuration(extra_headers={"X-Default": "1"}),
    )
    assert dict(cfg.extra_headers) == {"X-Own": "1"}


def test_snapshot_is_immutable_and_detached():
    source = {"X-Own": "1"}
    cfg = resolve_client_config(ClientOptions(extra_headers=source), Configuration())
    source["X-Own"] = "2"
    assert cfg.extra_headers["X-Own"] == "1"
    with pytest.raises(TypeError):
        cfg.extra_headers["X-New"] = "3"  # type: ignore[index]
    with pytest.raises(AttributeError):
        cfg.uri_base = "https://elsewhere/"  # type: ignore[misc]


def test_snapshot_is_hashable():
    a = ClientConfig(extra_headers={"X": "1"}, beta_flags={"assistants": "v2"})
    b = ClientConfig(extra_headers={"X": "1"}, beta_flags={"assistants": "v2"})
    assert a == b
    assert hash(a) == hash(b)
    assert a != ClientConfig(extra_headers={"X": "2"})


def test_azure_api_type_is_case_insensitive():
    assert ClientConfig(api_type=" Azure ").azure is True
    assert ClientConfig(api_type="openai").azure is False


def test_middleware_hook_option_used_when_no_keyword():
    calls = []
    client = Client(ClientOptions(middleware_hook=calls.append))
    assert client.middleware_hook == calls.append
