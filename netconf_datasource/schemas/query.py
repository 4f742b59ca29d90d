from enum import Enum
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, ConfigDict, Field

from netconf_datasource.schemas.frame import DataFrame


class QueryType(str, Enum):
    INT = "int"
    CONTAINS = "contains"


# Query model as stored in the panel JSON by the query editor
class QueryModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    xpath: str = ""
    device: str = ""
    type: str = ""
    contains_string: Optional[str] = Field(default=None, alias="containsString")


class DataQuery(BaseModel):
    """A single panel query; `json` is decoded into a QueryModel per query"""
    refId: str
    json_: Any = Field(default=None, alias="json")

    model_config = ConfigDict(populate_by_name=True)


class DataSourceInstanceSettings(BaseModel):
    jsonData: Any = None


class PluginContext(BaseModel):
    dataSourceInstanceSettings: Optional[DataSourceInstanceSettings] = None


class QueryDataRequest(BaseModel):
    pluginContext: Optional[PluginContext] = None
    queries: List[DataQuery] = []


class DataResponse(BaseModel):
    frames: List[DataFrame] = []
    error: Optional[str] = None
    status: int = 200


class QueryDataResponse(BaseModel):
    responses: Dict[str, DataResponse] = {}
