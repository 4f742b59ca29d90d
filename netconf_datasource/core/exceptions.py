"""
Error taxonomy for the data source.

Configuration errors and client errors are raised before any network call is
made. Upstream errors carry the aggregator's status code and body text as-is.
"""
from typing import Optional


class DatasourceError(Exception):
    """Base class for every error raised by the data source"""


class PluginSettingsError(DatasourceError):
    """Persisted instance settings could not be decoded"""


class DatasourceConfigError(DatasourceError):
    """The aggregator address is missing or malformed"""


class QueryValidationError(DatasourceError):
    """A query is missing a required field or carries an invalid value"""


class UnsupportedQueryTypeError(QueryValidationError):
    def __init__(self, query_type: str):
        self.query_type = query_type
        super().__init__(f"unsupported query type: {query_type}")


class UpstreamError(DatasourceError):
    """The aggregator call failed"""

    status_code: Optional[int] = None


class UpstreamStatusError(UpstreamError):
    def __init__(self, status_code: int, body: str):
        self.status_code = status_code
        self.body = body
        super().__init__(f"API returned status {status_code}: {body}")


class UpstreamTransportError(UpstreamError):
    """Connection failure or timeout talking to the aggregator"""


class UpstreamPayloadError(UpstreamError):
    """The aggregator answered 200 with a body that is not the expected JSON"""
