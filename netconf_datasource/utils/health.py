from typing import Any

from netconf_datasource.core.exceptions import PluginSettingsError
from netconf_datasource.schemas.health import CheckHealthResult, HealthStatus
from netconf_datasource.schemas.settings import load_plugin_settings
from netconf_datasource.utils.logger import get_logger

logger = get_logger(__name__)


def check_health(json_data: Any) -> CheckHealthResult:
    """
    Report whether the data source is usable with the given instance settings.
    Only the configuration is inspected, the aggregator is not contacted.
    """
    try:
        config = load_plugin_settings(json_data)
    except PluginSettingsError as e:
        logger.error(f"Health check: {str(e)}")
        return CheckHealthResult(status=HealthStatus.ERROR, message="Unable to load settings")

    logger.debug(f"Health check config: {config}")

    if not config.address:
        return CheckHealthResult(status=HealthStatus.ERROR, message="Address is missing")

    return CheckHealthResult(status=HealthStatus.OK, message="Data source is working")
