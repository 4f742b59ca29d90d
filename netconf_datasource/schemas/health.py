from enum import Enum
from typing import Optional
from pydantic import BaseModel

from netconf_datasource.schemas.query import PluginContext


class HealthStatus(str, Enum):
    OK = "OK"
    ERROR = "ERROR"


class CheckHealthRequest(BaseModel):
    pluginContext: Optional[PluginContext] = None


class CheckHealthResult(BaseModel):
    status: HealthStatus
    message: str
