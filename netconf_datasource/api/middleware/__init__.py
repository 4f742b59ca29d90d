from netconf_datasource.api.middleware.request_logger import RequestLoggingMiddleware
