from functools import lru_cache
from pathlib import Path
from secrets import token_urlsafe
from typing import List

from dotenv import load_dotenv
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

REPO_ROOT = Path(__file__).resolve().parents[2]
ENV_FILES = [REPO_ROOT / ".env"]

for env_path in ENV_FILES:
    if env_path.exists():
        load_dotenv(env_path, override=False)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(case_sensitive=False, extra="allow", populate_by_name=True)

    app_name: str = Field(default="PageQuery API", alias="APP_NAME")
    app_env: str = Field(default="dev", alias="APP_ENV")
    api_prefix: str = Field(default="/api", alias="API_PREFIX")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")

    database_url: str = Field(default="sqlite:///./pagequery.db", alias="DATABASE_URL")

    # Listing defaults
    default_page_limit: int = Field(default=20, ge=1, alias="DEFAULT_PAGE_LIMIT")
    max_page_limit: int = Field(default=100, ge=1, alias="MAX_PAGE_LIMIT")
    clamp_current_page: bool = Field(default=False, alias="CLAMP_CURRENT_PAGE")

    jwt_secret: str = Field(default_factory=lambda: token_urlsafe(32), alias="JWT_SECRET")
    jwt_algorithm: str = Field(default="HS256", alias="JWT_ALGORITHM")
    jwt_expires_minutes: int = Field(default=60, alias="JWT_EXPIRES_MINUTES")

    backend_cors_origins_raw: str = Field(default="http://localhost:5173", alias="BACKEND_CORS_ORIGINS")

    enable_prometheus_metrics: bool = Field(default=True, alias="ENABLE_PROMETHEUS_METRICS")
    prometheus_metrics_path: str = Field(default="/metrics/prometheus", alias="PROMETHEUS_METRICS_PATH")
    otel_exporter_otlp_endpoint: str | None = Field(
        default=None,
        alias="OTEL_EXPORTER_OTLP_ENDPOINT",
        description="OTLP HTTP endpoint for exporting traces",
    )
    otel_exporter_otlp_headers: str | None = Field(
        default=None,
        alias="OTEL_EXPORTER_OTLP_HEADERS",
        description="Comma separated key=value pairs added to OTLP requests",
    )
    otel_service_name: str | None = Field(default=None, alias="OTEL_SERVICE_NAME")

    @property
    def backend_cors_origins(self) -> List[str]:
        return [origin.strip() for origin in self.backend_cors_origins_raw.split(",") if origin.strip()]


@lru_cache
def get_settings() -> Settings:
    settings = Settings()
    if settings.default_page_limit > settings.max_page_limit:
        raise RuntimeError("DEFAULT_PAGE_LIMIT must not exceed MAX_PAGE_LIMIT")
    return settings
