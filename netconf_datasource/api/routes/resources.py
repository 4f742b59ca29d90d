from typing import Any, Awaitable, List
from fastapi import APIRouter, Depends, Response, status
from fastapi.responses import JSONResponse

from netconf_datasource.api import deps
from netconf_datasource.core.exceptions import DatasourceConfigError, UpstreamError
from netconf_datasource.schemas import DeviceRecord, PluginSettings
from netconf_datasource.utils.aggregator import AggregatorClient
from netconf_datasource.utils.logger import get_logger

logger = get_logger("api.resources")

router = APIRouter()


def resource_error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


async def forward(call: Awaitable[bytes]) -> Response:
    """
    Await an aggregator call and pass its body through as JSON, or turn the
    failure into an {"error": ...} response
    """
    try:
        body = await call
    except DatasourceConfigError as e:
        logger.error(f"Resource call rejected: {str(e)}")
        return resource_error(status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))
    except UpstreamError as e:
        logger.error(f"Resource call failed: {str(e)}")
        return resource_error(e.status_code or status.HTTP_500_INTERNAL_SERVER_ERROR, str(e))

    return Response(content=body, media_type="application/json")


@router.get("/devices", responses={200: {"model": List[DeviceRecord]}})
async def list_devices(
    *,
    plugin_settings: PluginSettings = Depends(deps.get_plugin_settings),
    transport: Any = Depends(deps.get_upstream_transport),
) -> Any:
    """
    Device inventory from the aggregator, forwarded unchanged
    """
    logger.debug(f"Listing devices from {plugin_settings.address or '<unset>'}")
    client = AggregatorClient(plugin_settings, transport=transport)
    return await forward(client.get_devices_raw())


@router.get("/devices/{device}/data")
async def get_device_data(
    *,
    device: str,
    xpathQuery: str = "",
    plugin_settings: PluginSettings = Depends(deps.get_plugin_settings),
    transport: Any = Depends(deps.get_upstream_transport),
) -> Any:
    """
    Raw time series records of one device for an XPATH query
    """
    if not xpathQuery:
        return resource_error(status.HTTP_400_BAD_REQUEST, "xpathQuery is required")

    client = AggregatorClient(plugin_settings, transport=transport)
    return await forward(client.get_timeseries_raw(device, xpathQuery))


@router.api_route("/{path:path}", methods=["GET", "POST", "PUT", "PATCH", "DELETE"])
async def resource_not_found(path: str) -> Any:
    logger.debug(f"Resource not found: {path}")
    return resource_error(status.HTTP_404_NOT_FOUND, "Resource not found")
