from typing import Any
from fastapi import APIRouter, Depends

from netconf_datasource.api import deps
from netconf_datasource.schemas import CheckHealthRequest, CheckHealthResult
from netconf_datasource.utils.health import check_health
from netconf_datasource.utils.logger import get_logger

logger = get_logger("api.health")

router = APIRouter()


@router.get("", response_model=CheckHealthResult)
def health_check(
    default_json_data: str = Depends(deps.get_default_json_data),
) -> Any:
    """
    Check the settings the service was deployed with
    """
    return check_health(default_json_data)


@router.post("", response_model=CheckHealthResult)
def health_check_with_context(
    *,
    request: CheckHealthRequest,
    default_json_data: str = Depends(deps.get_default_json_data),
) -> Any:
    """
    Check the instance settings sent by the host (the "Save & test" button)
    """
    result = check_health(deps.resolve_json_data(request.pluginContext, default_json_data))
    logger.info(f"Health check: {result.status.value} ({result.message})")
    return result
