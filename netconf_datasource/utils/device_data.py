import re
from dataclasses import dataclass
from datetime import datetime
from typing import Any, List, Optional, Union

from netconf_datasource.core.exceptions import QueryValidationError, UnsupportedQueryTypeError
from netconf_datasource.schemas.query import QueryType
from netconf_datasource.utils.aggregator import AggregatorClient
from netconf_datasource.utils.extract import contains_string, extract_first_integer
from netconf_datasource.utils.logger import get_logger

logger = get_logger(__name__)

RFC3339_RE = re.compile(
    r"\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}(\.\d+)?(Z|[+-]\d{2}:\d{2})", re.ASCII
)
# datetime only keeps microseconds
EXCESS_FRACTION_RE = re.compile(r"(\.\d{6})\d+", re.ASCII)


@dataclass(frozen=True)
class ExtractedPoint:
    timestamp: datetime
    value: Union[int, bool]


def parse_query_type(query_type: Union[str, QueryType]) -> QueryType:
    try:
        return QueryType(query_type)
    except ValueError:
        raise UnsupportedQueryTypeError(str(query_type))


def parse_rfc3339(value: Any) -> Optional[datetime]:
    """
    Parse an RFC3339 timestamp, returning None when it is missing or malformed.
    A UTC offset (or "Z") is mandatory.
    """
    if not isinstance(value, str) or not RFC3339_RE.fullmatch(value):
        return None
    try:
        parsed = datetime.fromisoformat(EXCESS_FRACTION_RE.sub(r"\1", value).replace("Z", "+00:00"))
    except ValueError:
        return None
    if parsed.tzinfo is None:
        return None
    return parsed


class DeviceDataFetcher:
    """
    Fetches a device's time series from the aggregator and extracts one value
    per record according to the query type.
    """

    def __init__(self, client: AggregatorClient):
        self.client = client

    async def get_device_data(
        self,
        device_id: str,
        xpath_query: str,
        query_type: Union[str, QueryType],
        query_string: Optional[str] = None,
    ) -> List[ExtractedPoint]:
        # Everything below is checked before the aggregator is called
        self.client.ensure_configured()
        if not device_id:
            raise QueryValidationError("device ID is required")
        if not xpath_query:
            raise QueryValidationError("xpathQuery is required")
        qtype = parse_query_type(query_type)
        if qtype == QueryType.CONTAINS and not query_string:
            raise QueryValidationError("containsString is required for contains queries")

        records = await self.client.get_timeseries(device_id, xpath_query)

        points = []
        for item in records:
            if not isinstance(item, dict):
                continue
            xml_data = item.get("xml")
            if not isinstance(xml_data, str):
                continue

            timestamp = parse_rfc3339(item.get("timestamp"))
            if timestamp is None:
                logger.warning(
                    f"Skipping record with malformed timestamp {item.get('timestamp')!r} "
                    f"for device {device_id}"
                )
                continue

            if qtype == QueryType.INT:
                value = extract_first_integer(xml_data)
            else:
                value = contains_string(xml_data, query_string)
            points.append(ExtractedPoint(timestamp=timestamp, value=value))

        logger.info(
            f"Extracted {len(points)} of {len(records)} records for device {device_id} ({qtype.value})"
        )
        return points
