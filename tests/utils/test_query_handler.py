"""
Test cases for batch query execution and frame assembly
"""
from datetime import datetime, timezone

import httpx
import pytest

from netconf_datasource.schemas import QueryDataRequest, QueryType
from netconf_datasource.utils.device_data import DeviceDataFetcher, ExtractedPoint
from netconf_datasource.utils.query_handler import build_frame, query_data


def make_request(*queries) -> QueryDataRequest:
    return QueryDataRequest.model_validate({"queries": list(queries)})


def test_build_frame_int():
    points = [
        ExtractedPoint(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), value=42),
        ExtractedPoint(timestamp=datetime(2024, 1, 1, 0, 0, 1, 500000, tzinfo=timezone.utc), value=7),
    ]

    frame = build_frame("A", QueryType.INT, points).model_dump(by_alias=True)

    assert frame["schema"]["name"] == "response"
    assert frame["schema"]["refId"] == "A"
    assert [field["name"] for field in frame["schema"]["fields"]] == ["time", "value"]
    assert frame["schema"]["fields"][0]["type"] == "time"
    assert frame["schema"]["fields"][1]["type"] == "number"
    assert frame["schema"]["fields"][1]["typeInfo"]["frame"] == "int64"
    assert frame["data"]["values"] == [[1704067200000, 1704067201500], [42, 7]]


def test_build_frame_contains():
    points = [ExtractedPoint(timestamp=datetime(2024, 1, 1, tzinfo=timezone.utc), value=True)]

    frame = build_frame("B", QueryType.CONTAINS, points).model_dump(by_alias=True)

    assert frame["schema"]["fields"][1]["type"] == "boolean"
    assert frame["schema"]["fields"][1]["typeInfo"]["frame"] == "bool"
    assert frame["data"]["values"] == [[1704067200000], [True]]


def test_build_frame_empty():
    frame = build_frame("A", QueryType.INT, []).model_dump(by_alias=True)
    assert frame["data"]["values"] == [[], []]


@pytest.mark.asyncio
async def test_query_data_isolates_failures(aggregator_client, aggregator):
    """A malformed query gets its own error while its sibling still returns a frame"""
    aggregator.respond_with(json=[{"timestamp": "2024-01-01T00:00:00Z", "xml": "<load>42</load>"}])
    request = make_request(
        {"refId": "A", "json": "{not json"},
        {"refId": "B", "json": {"xpath": "/sys/load", "device": "d1", "type": "int"}},
    )

    response = await query_data(request, DeviceDataFetcher(aggregator_client))

    assert response.responses["A"].status == 400
    assert response.responses["A"].error.startswith("json unmarshal:")
    assert response.responses["A"].frames == []

    assert response.responses["B"].status == 200
    assert response.responses["B"].error is None
    assert response.responses["B"].frames[0].data.values == [[1704067200000], [42]]


@pytest.mark.asyncio
async def test_query_data_upstream_failure_does_not_abort_batch(aggregator_client, aggregator):
    def handler(request):
        if request.url.path.endswith("/broken"):
            return httpx.Response(500, text="boom")
        return httpx.Response(200, json=[{"timestamp": "2024-01-01T00:00:00Z", "xml": "<up/>"}])
    aggregator.handler = handler
    request = make_request(
        {"refId": "A", "json": {"xpath": "/x", "device": "broken", "type": "int"}},
        {"refId": "B", "json": {"xpath": "/x", "device": "d1", "type": "contains", "containsString": "up"}},
    )

    response = await query_data(request, DeviceDataFetcher(aggregator_client))

    assert response.responses["A"].status == 500
    assert "500" in response.responses["A"].error
    assert "boom" in response.responses["A"].error
    assert response.responses["B"].frames[0].data.values == [[1704067200000], [True]]
    # Queries run one after another, in request order
    assert [r.url.path for r in aggregator.requests] == ["/timeseries/broken", "/timeseries/d1"]


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "query_json, message",
    [
        ({"xpath": "/x", "device": "d1", "type": "float"}, "unsupported query type: float"),
        ({"xpath": "/x", "device": "", "type": "int"}, "device ID is required"),
        ({"xpath": "", "device": "d1", "type": "int"}, "xpathQuery is required"),
        ({"xpath": "/x", "device": "d1", "type": "contains"}, "containsString is required"),
    ],
)
async def test_query_data_client_errors(aggregator_client, aggregator, query_json, message):
    response = await query_data(make_request({"refId": "A", "json": query_json}), DeviceDataFetcher(aggregator_client))

    assert response.responses["A"].status == 400
    assert message in response.responses["A"].error
    assert aggregator.requests == []


@pytest.mark.asyncio
@pytest.mark.parametrize("raw", [None, "[1, 2]", '{"xpath": 5}', {"device": ["d1"]}])
async def test_query_data_decode_errors(aggregator_client, raw):
    response = await query_data(make_request({"refId": "A", "json": raw}), DeviceDataFetcher(aggregator_client))

    assert response.responses["A"].status == 400
    assert response.responses["A"].error.startswith("json unmarshal:")


@pytest.mark.asyncio
async def test_query_data_empty_batch(aggregator_client):
    response = await query_data(make_request(), DeviceDataFetcher(aggregator_client))
    assert response.responses == {}
