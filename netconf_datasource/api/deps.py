# Dependency injection for the API

from typing import Any, Optional

import httpx
from fastapi import Depends, HTTPException, status

from netconf_datasource.core.config import settings
from netconf_datasource.core.exceptions import PluginSettingsError
from netconf_datasource.schemas.query import PluginContext
from netconf_datasource.schemas.settings import PluginSettings, load_plugin_settings
from netconf_datasource.utils.logger import get_logger

logger = get_logger("api")


def get_default_json_data() -> str:
    """Instance settings the service was deployed with"""
    return settings.DATASOURCE_JSON_DATA


def get_upstream_transport() -> Optional[httpx.AsyncBaseTransport]:
    """Transport for aggregator calls; None means httpx's default network transport"""
    return None


def resolve_json_data(plugin_context: Optional[PluginContext], default_json_data: Any) -> Any:
    """Settings sent along with the request win over the deployed ones"""
    if plugin_context and plugin_context.dataSourceInstanceSettings:
        return plugin_context.dataSourceInstanceSettings.jsonData
    return default_json_data


def load_settings_or_500(json_data: Any) -> PluginSettings:
    try:
        return load_plugin_settings(json_data)
    except PluginSettingsError as e:
        logger.error(f"error loading settings: {str(e)}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"error loading settings: {str(e)}",
        )


def get_plugin_settings(
    json_data: str = Depends(get_default_json_data),
) -> PluginSettings:
    return load_settings_or_500(json_data)
