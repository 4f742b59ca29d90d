import uvicorn

from netconf_datasource.core.config import settings


def main() -> None:
    uvicorn.run(
        "netconf_datasource.main:app",
        host=settings.HOST,
        port=settings.PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


if __name__ == "__main__":
    main()
