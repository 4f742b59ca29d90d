from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "NETCONF Aggregator Data Source"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = 8000

    # Persisted data source instance settings (the "jsonData" blob)
    DATASOURCE_JSON_DATA: str = "{}"

    # Upstream aggregator
    UPSTREAM_TIMEOUT_SECONDS: float = 10.0

    # Logging
    LOG_LEVEL: str = "info"
    LOG_TO_FILE: bool = False
    LOG_DIR: str = "./logs"
    LOG_TIMEZONE: str = "UTC"

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True

settings = Settings()
