"""
Shared fixtures: a fake aggregator served through httpx.MockTransport and a
TestClient wired to it through dependency overrides.
"""
import json
from typing import Callable, Generator, List

import httpx
import pytest
from fastapi.testclient import TestClient

from netconf_datasource.api import deps
from netconf_datasource.main import app
from netconf_datasource.schemas import PluginSettings
from netconf_datasource.utils.aggregator import AggregatorClient

AGGREGATOR_ADDRESS = "http://agg:8080"

class FakeAggregator:
    """
    Records every request and answers with `handler`, which tests replace.
    The default handler serves an empty device list and an empty time series.
    """

    def __init__(self):
        self.requests: List[httpx.Request] = []
        self.handler: Callable[[httpx.Request], httpx.Response] = self.default_handler

    @staticmethod
    def default_handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json=[])

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self.handler(request)

    def respond_with(self, status_code: int = 200, **kwargs) -> None:
        self.handler = lambda request: httpx.Response(status_code, **kwargs)

    def fail_with(self, exc_type=httpx.ConnectError, message: str = "connection refused") -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise exc_type(message, request=request)
        self.handler = handler

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self)


@pytest.fixture
def aggregator() -> FakeAggregator:
    return FakeAggregator()


@pytest.fixture
def plugin_settings() -> PluginSettings:
    return PluginSettings(address=AGGREGATOR_ADDRESS)


@pytest.fixture
def aggregator_client(plugin_settings: PluginSettings, aggregator: FakeAggregator) -> AggregatorClient:
    return AggregatorClient(plugin_settings, timeout=10.0, transport=aggregator.transport)


@pytest.fixture
def json_data() -> str:
    return json.dumps({"address": AGGREGATOR_ADDRESS})


@pytest.fixture
def client(aggregator: FakeAggregator, json_data: str) -> Generator[TestClient, None, None]:
    """
    TestClient whose deployed settings point at the fake aggregator
    """
    app.dependency_overrides[deps.get_default_json_data] = lambda: json_data
    app.dependency_overrides[deps.get_upstream_transport] = lambda: aggregator.transport
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()