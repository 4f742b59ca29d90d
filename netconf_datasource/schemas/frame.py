"""
Grafana data frame, JSON encoding.

A frame is serialized as its schema (field names and types) plus the column
values, e.g.

    {
        "schema": {"name": "response", "refId": "A", "fields": [
            {"name": "time", "type": "time", "typeInfo": {"frame": "time.Time"}},
            {"name": "value", "type": "number", "typeInfo": {"frame": "int64"}}
        ]},
        "data": {"values": [[1704067200000], [42]]}
    }

Time columns hold epoch milliseconds.
"""
from typing import Any, List, Optional
from pydantic import BaseModel, ConfigDict, Field


class FieldTypeInfo(BaseModel):
    frame: str


class FieldSchema(BaseModel):
    name: str
    type: str
    typeInfo: FieldTypeInfo


class FrameSchema(BaseModel):
    name: str
    refId: Optional[str] = None
    fields: List[FieldSchema]


class FrameData(BaseModel):
    values: List[List[Any]]


class DataFrame(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    frame_schema: FrameSchema = Field(alias="schema")
    data: FrameData
