"""
Tests for the remote catalog gateway (httpx.MockTransport, no network).
"""

from __future__ import annotations

import json

import httpx
import pytest

from pricing_catalog.domain.entities.catalog_item import CatalogItem
from pricing_catalog.infrastructure.catalog.catalog_gateway import (
    MISSING_KEY_ERROR,
    HttpCatalogGateway,
    normalize_catalog_payload,
)


class RecordingTransport(httpx.MockTransport):
    def __init__(self, responder) -> None:
        self.requests: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return responder(request)

        super().__init__(handler)


def _gateway(transport: httpx.MockTransport, api_key: str | None = "secret") -> HttpCatalogGateway:
    return HttpCatalogGateway(
        api_url="https://catalog.test/api",
        api_key=api_key,
        payload={"operation": "catalog_v2", "catalog_id": "230", "type": "1"},
        transport=transport,
    )


@pytest.mark.asyncio
async def test_missing_key_skips_network():
    transport = RecordingTransport(lambda request: httpx.Response(200, json=[]))

    for key in ("", "   "):
        result = await _gateway(transport, api_key=key).fetch()
        assert result.items == ()
        assert result.error == MISSING_KEY_ERROR

    assert transport.requests == []


@pytest.mark.asyncio
async def test_request_carries_key_header_and_fixed_body(raw_catalog):
    transport = RecordingTransport(lambda request: httpx.Response(200, json=raw_catalog))

    result = await _gateway(transport).fetch()

    assert result.ok
    assert [item.id for item in result.items] == [1, 2, 3, 7]
    assert len(transport.requests) == 1
    request = transport.requests[0]
    assert request.method == "POST"
    assert request.headers["x-api-key"] == "secret"
    assert json.loads(request.content) == {"operation": "catalog_v2", "catalog_id": "230", "type": "1"}


@pytest.mark.asyncio
async def test_catalog_and_data_envelopes_normalize_identically(raw_catalog):
    catalog_env = await _gateway(RecordingTransport(lambda r: httpx.Response(200, json={"catalog": raw_catalog}))).fetch()
    data_env = await _gateway(RecordingTransport(lambda r: httpx.Response(200, json={"data": raw_catalog}))).fetch()

    assert catalog_env.items == data_env.items
    assert len(catalog_env.items) == len(raw_catalog)
    assert data_env.error is None


@pytest.mark.asyncio
async def test_unknown_shape_is_empty_not_error():
    result = await _gateway(RecordingTransport(lambda r: httpx.Response(200, json={"items": [1, 2]}))).fetch()
    assert result.items == ()
    assert result.error is None


@pytest.mark.asyncio
async def test_non_success_status_becomes_error():
    result = await _gateway(RecordingTransport(lambda r: httpx.Response(503))).fetch()
    assert result.items == ()
    assert result.error == "Failed to fetch catalog: 503 Service Unavailable"


@pytest.mark.asyncio
async def test_transport_failure_becomes_error():
    def boom(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    result = await _gateway(RecordingTransport(boom)).fetch()
    assert result.items == ()
    assert result.error == "connection refused"


@pytest.mark.asyncio
async def test_invalid_json_body_becomes_error():
    result = await _gateway(RecordingTransport(lambda r: httpx.Response(200, text="<html>oops</html>"))).fetch()
    assert result.items == ()
    assert result.error


def test_normalize_prefers_catalog_over_data():
    assert normalize_catalog_payload({"catalog": [1], "data": [2]}) == [1]
    assert normalize_catalog_payload({"catalog": "nope", "data": [2]}) == [2]
    assert normalize_catalog_payload(None) == []
    assert normalize_catalog_payload("text") == []


@pytest.mark.asyncio
async def test_malformed_entries_are_skipped_and_fields_default(raw_catalog):
    body = [raw_catalog[0], "not-an-item", {"id": "12"}]
    result = await _gateway(RecordingTransport(lambda r: httpx.Response(200, json=body))).fetch()

    assert [item.id for item in result.items] == [1, 12]
    sparse = result.items[1]
    assert sparse.service_name == ""
    assert sparse.rating is None
    assert sparse.is_discounted is False


@pytest.mark.asyncio
async def test_out_of_range_numbers_do_not_escape_fetch():
    body = b'{"catalog": [{"id": 1e999, "service_name": "Trademark Filing", "customers": 1e999, "price": 499}]}'
    transport = RecordingTransport(
        lambda r: httpx.Response(200, content=body, headers={"content-type": "application/json"})
    )

    result = await _gateway(transport).fetch()

    assert result.error is None
    (item,) = result.items
    assert item.id is None
    assert item.customers == 0
    assert item.service_name == "Trademark Filing"


@pytest.mark.asyncio
async def test_decode_failure_is_reported_as_error(monkeypatch):
    def explode(entry):
        raise ValueError("bad entry")

    monkeypatch.setattr(CatalogItem, "from_payload", explode)
    transport = RecordingTransport(lambda r: httpx.Response(200, json={"catalog": [{"id": 1}]}))

    result = await _gateway(transport).fetch()

    assert result.items == ()
    assert result.error == "bad entry"
