from typing import Any
from fastapi import APIRouter, Depends

from netconf_datasource.api import deps
from netconf_datasource.schemas import QueryDataRequest, QueryDataResponse
from netconf_datasource.utils.aggregator import AggregatorClient
from netconf_datasource.utils.device_data import DeviceDataFetcher
from netconf_datasource.utils.logger import get_logger
from netconf_datasource.utils.query_handler import query_data

logger = get_logger("api.query")

router = APIRouter()


@router.post("", response_model=QueryDataResponse, response_model_exclude_none=True)
async def run_queries(
    *,
    request: QueryDataRequest,
    default_json_data: str = Depends(deps.get_default_json_data),
    transport: Any = Depends(deps.get_upstream_transport),
) -> Any:
    """
    Execute a batch of panel queries, one DataResponse per refId
    """
    json_data = deps.resolve_json_data(request.pluginContext, default_json_data)
    plugin_settings = deps.load_settings_or_500(json_data)

    logger.info(f"Running {len(request.queries)} queries against {plugin_settings.address or '<unset>'}")

    fetcher = DeviceDataFetcher(AggregatorClient(plugin_settings, transport=transport))
    return await query_data(request, fetcher)
