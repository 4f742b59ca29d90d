from netconf_datasource.schemas.settings import PluginSettings, load_plugin_settings, validate_address
from netconf_datasource.schemas.frame import DataFrame, FrameSchema, FieldSchema, FieldTypeInfo, FrameData
from netconf_datasource.schemas.query import (
    QueryType,
    QueryModel,
    DataQuery,
    PluginContext,
    QueryDataRequest,
    DataResponse,
    QueryDataResponse,
)
from netconf_datasource.schemas.health import HealthStatus, CheckHealthRequest, CheckHealthResult
from netconf_datasource.schemas.device import DeviceRecord
