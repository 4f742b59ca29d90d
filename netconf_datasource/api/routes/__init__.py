from netconf_datasource.api.routes.query import router as query_router
from netconf_datasource.api.routes.resources import router as resources_router
from netconf_datasource.api.routes.health import router as health_router
