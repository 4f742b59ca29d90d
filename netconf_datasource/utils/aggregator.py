import json
from typing import Any, List, Optional

import httpx

from netconf_datasource.core.config import settings
from netconf_datasource.core.exceptions import (
    UpstreamPayloadError,
    UpstreamStatusError,
    UpstreamTransportError,
)
from netconf_datasource.schemas.settings import PluginSettings, validate_address
from netconf_datasource.utils.logger import get_logger

logger = get_logger(__name__)

# httpx adds Content-Type: application/json for JSON bodies
REQUEST_HEADERS = {"Accept": "*/*"}


class AggregatorClient:
    """
    HTTP client for the NETCONF aggregator API.
    Every call is attempted once with the configured timeout; a fresh
    connection pool is opened per call and closed when it returns.
    """

    def __init__(
        self,
        plugin_settings: PluginSettings,
        timeout: Optional[float] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.plugin_settings = plugin_settings
        self.timeout = timeout if timeout is not None else settings.UPSTREAM_TIMEOUT_SECONDS
        self.transport = transport

    @property
    def address(self) -> str:
        return self.plugin_settings.address

    def ensure_configured(self) -> None:
        validate_address(self.address)

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self.timeout, transport=self.transport, follow_redirects=True)

    async def _send(self, method: str, path: str, action: str, **kwargs) -> bytes:
        self.ensure_configured()
        url = f"{self.plugin_settings.base_url}{path}"
        logger.debug(f"{method} {url}")

        try:
            async with self._client() as client:
                response = await client.request(method, url, headers=REQUEST_HEADERS, **kwargs)
        except httpx.RequestError as e:
            logger.error(f"Aggregator request {method} {url} failed: {str(e)}")
            raise UpstreamTransportError(f"failed to {action}: {str(e) or type(e).__name__}") from e

        if response.status_code != httpx.codes.OK:
            logger.error(f"Aggregator returned status {response.status_code} for {method} {url}")
            raise UpstreamStatusError(response.status_code, response.text)

        return response.content

    async def get_devices_raw(self) -> bytes:
        """GET {address}/devices, body returned untouched"""
        return await self._send("GET", "/devices", "fetch devices")

    async def get_timeseries_raw(self, device_id: str, xpath_query: str) -> bytes:
        """POST {address}/timeseries/{device_id}, body returned untouched"""
        return await self._send(
            "POST",
            f"/timeseries/{device_id}",
            "fetch device data",
            json={"xpathQuery": xpath_query},
        )

    async def get_timeseries(self, device_id: str, xpath_query: str) -> List[Any]:
        """POST {address}/timeseries/{device_id}, decoded into a list of records"""
        body = await self.get_timeseries_raw(device_id, xpath_query)
        try:
            records = json.loads(body)
        except ValueError as e:
            raise UpstreamPayloadError(f"failed to parse response JSON: {str(e)}") from e
        if not isinstance(records, list):
            raise UpstreamPayloadError(
                f"failed to parse response JSON: expected an array, got {type(records).__name__}"
            )
        return records
