"""
Batch query execution.

Queries are executed one after another; a failing query is reported in its
own DataResponse and never stops the rest of the batch.
"""
from typing import Any, List

from pydantic import ValidationError

from netconf_datasource.core.exceptions import (
    DatasourceConfigError,
    QueryValidationError,
    UpstreamError,
)
from netconf_datasource.schemas.frame import (
    DataFrame,
    FieldSchema,
    FieldTypeInfo,
    FrameData,
    FrameSchema,
)
from netconf_datasource.schemas.query import (
    DataResponse,
    QueryDataRequest,
    QueryDataResponse,
    QueryModel,
    QueryType,
)
from netconf_datasource.utils.device_data import DeviceDataFetcher, ExtractedPoint, parse_query_type
from netconf_datasource.utils.logger import get_logger

logger = get_logger(__name__)

STATUS_BAD_REQUEST = 400
STATUS_INTERNAL = 500

VALUE_FIELD_TYPES = {
    QueryType.INT: FieldSchema(name="value", type="number", typeInfo=FieldTypeInfo(frame="int64")),
    QueryType.CONTAINS: FieldSchema(name="value", type="boolean", typeInfo=FieldTypeInfo(frame="bool")),
}
TIME_FIELD = FieldSchema(name="time", type="time", typeInfo=FieldTypeInfo(frame="time.Time"))


def error_response(status: int, message: str) -> DataResponse:
    return DataResponse(status=status, error=message)


def decode_query_model(raw: Any) -> QueryModel:
    if isinstance(raw, (str, bytes)):
        return QueryModel.model_validate_json(raw)
    return QueryModel.model_validate(raw)


def build_frame(ref_id: str, query_type: QueryType, points: List[ExtractedPoint]) -> DataFrame:
    timestamps = [int(point.timestamp.timestamp() * 1000) for point in points]
    if query_type == QueryType.INT:
        values = [int(point.value) for point in points]
    else:
        values = [bool(point.value) for point in points]

    return DataFrame(
        schema=FrameSchema(
            name="response",
            refId=ref_id,
            fields=[TIME_FIELD, VALUE_FIELD_TYPES[query_type]],
        ),
        data=FrameData(values=[timestamps, values]),
    )


async def query_data(request: QueryDataRequest, fetcher: DeviceDataFetcher) -> QueryDataResponse:
    response = QueryDataResponse()

    for query in request.queries:
        ref_id = query.refId

        try:
            qm = decode_query_model(query.json_)
        except ValidationError as e:
            logger.error(f"Query {ref_id}: could not decode query model: {str(e)}")
            response.responses[ref_id] = error_response(STATUS_BAD_REQUEST, f"json unmarshal: {str(e)}")
            continue

        try:
            points = await fetcher.get_device_data(qm.device, qm.xpath, qm.type, qm.contains_string)
        except QueryValidationError as e:
            logger.error(f"Query {ref_id}: invalid query: {str(e)}")
            response.responses[ref_id] = error_response(STATUS_BAD_REQUEST, f"invalid query: {str(e)}")
            continue
        except (DatasourceConfigError, UpstreamError) as e:
            logger.error(f"Query {ref_id}: data fetch error: {str(e)}")
            response.responses[ref_id] = error_response(STATUS_INTERNAL, f"data fetch error: {str(e)}")
            continue

        query_type = parse_query_type(qm.type)
        response.responses[ref_id] = DataResponse(frames=[build_frame(ref_id, query_type, points)])

    return response
