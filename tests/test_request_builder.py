"""Tests for RequestBuilder."""

import httpx
import pytest

from dnsloom.exceptions import ConfigurationError
from dnsloom.request_builder import RequestBuilder
from dnsloom.types import HttpMethod, RequestData


def test_new_request_defaults_to_get_without_extras():
    request = RequestBuilder("/whoami").request
    assert request == RequestData(path="/whoami")
    assert request.method is HttpMethod.GET
    assert request.headers == []
    assert request.params == []
    assert request.body is None


def test_for_path_discards_previous_state():
    builder = RequestBuilder()
    builder.for_path("/1010/domains")
    builder.method(HttpMethod.POST)
    builder.add_parameter(("sort", "id:asc"))
    builder.add_headers([("X-Custom", "1")])
    builder.add_json_payload({"name": "example.com"})

    assert builder.for_path("/1010/domains").request == RequestBuilder(
        "/1010/domains"
    ).request


def test_reset_then_use_without_path_raises():
    builder = RequestBuilder("/accounts").reset()
    with pytest.raises(ConfigurationError, match="no path set"):
        builder.add_parameter(("page", "1"))
    with pytest.raises(ConfigurationError):
        _ = builder.request


def test_duplicate_parameters_and_headers_are_kept_in_order():
    builder = RequestBuilder("/search")
    builder.add_parameter(("type", "A"))
    builder.add_parameters([("type", "MX"), ("name", "www")])
    builder.add_headers([("X-Trace", "a"), ("X-Trace", "b")])

    request = builder.request
    assert request.params == [("type", "A"), ("type", "MX"), ("name", "www")]
    assert request.headers == [("X-Trace", "a"), ("X-Trace", "b")]


def test_pagination_adds_per_page_then_page():
    builder = RequestBuilder("/1010/domains")
    builder.pagination(per_page=5, page=3)
    assert builder.request.params == [("per_page", "5"), ("page", "3")]


def test_json_payload_overwrites_previous_body():
    builder = RequestBuilder("/1010/domains")
    builder.add_json_payload({"name": "first.com"})
    builder.add_json_payload({"name": "second.com"})
    assert builder.request.body == '{"name":"second.com"}'


def test_url_joins_path_onto_versioned_root():
    request = RequestData(path="/1010/domains")
    assert request.url("https://api.dnsimple.com/v2/") == (
        "https://api.dnsimple.com/v2/1010/domains"
    )


def test_build_request_keeps_colons_and_encodes_commas():
    request = RequestData(
        path="/1010/zones/example.com/records",
        params=[("sort", "id:asc,name:desc"), ("name_like", "example")],
    )

    with httpx.Client() as client:
        built = request.build_request(client, "https://api.dnsimple.com/v2/")

    assert str(built.url) == (
        "https://api.dnsimple.com/v2/1010/zones/example.com/records"
        "?sort=id:asc%2Cname:desc&name_like=example"
    )


def test_build_request_without_parameters_has_no_query():
    with httpx.Client() as client:
        built = RequestData(path="/1010/domains").build_request(
            client, "https://api.dnsimple.com/v2/"
        )

    assert str(built.url) == "https://api.dnsimple.com/v2/1010/domains"
    assert built.url.query == b""
