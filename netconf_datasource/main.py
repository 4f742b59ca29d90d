from fastapi import FastAPI
from netconf_datasource.api.routes import (
    query_router,
    resources_router,
    health_router,
)
from netconf_datasource.core.config import settings
from netconf_datasource.api.middleware import RequestLoggingMiddleware
from netconf_datasource.utils.logger import get_logger

# Initialize logger
logger = get_logger("app")

app = FastAPI(
    title=settings.PROJECT_NAME,
    description="Queries a NETCONF aggregator for device telemetry and returns Grafana data frames",
    version="0.1.0",
)

# Add request logging middleware
app.add_middleware(RequestLoggingMiddleware)

# Include API routes
app.include_router(query_router, prefix="/query", tags=["query"])
app.include_router(resources_router, prefix="/resources", tags=["resources"])
app.include_router(health_router, prefix="/health", tags=["health"])

# Startup event
@app.on_event("startup")
async def startup_event():
    logger.info(f"Starting {settings.PROJECT_NAME}")


# Shutdown event
@app.on_event("shutdown")
async def shutdown_event():
    logger.info(f"Shutting down {settings.PROJECT_NAME}")


@app.get("/")
def read_root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}
