from typing import Optional
from pydantic import BaseModel, ConfigDict


# Device as listed by the aggregator; forwarded untouched, documented only
class DeviceRecord(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    server: Optional[str] = None
    port: Optional[int] = None
