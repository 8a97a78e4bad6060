"""
Configuration Schemas.

One strict pydantic model per file in config/settings/. AppConfig
validates each YAML file against its model when it is first loaded, so a
typo such as `max_limt` or `level: VERBOSE` stops the server and the CLI
at startup with the offending key named.

    application.yaml    -> ApplicationSchema
    database.yaml       -> DatabaseSchema
    logging.yaml        -> LoggingSchema
    observability.yaml  -> ObservabilitySchema
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, model_validator


class _StrictBase(BaseModel):
    model_config = ConfigDict(extra="forbid")


# application.yaml

class ServerSchema(_StrictBase):
    """Where uvicorn binds and where the CLI sends its requests."""

    host: str
    port: int = Field(ge=1, le=65535)


class CorsSchema(_StrictBase):
    origins: list[str]


class PaginationSchema(_StrictBase):
    """Page size for /family-members, /equipment and /workouts."""

    default_limit: int = Field(ge=1)
    max_limit: int = Field(ge=1)

    @model_validator(mode="after")
    def _default_within_max(self) -> "PaginationSchema":
        if self.default_limit > self.max_limit:
            raise ValueError("default_limit must not exceed max_limit")
        return self


class TimeoutsSchema(_StrictBase):
    """Seconds. database is the asyncpg connect timeout, cli_request the CLI's HTTP timeout."""

    database: int = Field(ge=1)
    cli_request: int = Field(ge=1)


class ApplicationSchema(_StrictBase):
    name: str
    version: str
    description: str
    environment: Literal["development", "test", "production"]
    debug: bool
    api_prefix: str
    server: ServerSchema
    cors: CorsSchema
    pagination: PaginationSchema
    timeouts: TimeoutsSchema


# database.yaml

class DatabaseSchema(_StrictBase):
    """PostgreSQL connection and pool settings. The password lives in config/.env."""

    host: str
    port: int = Field(ge=1, le=65535)
    name: str
    user: str
    pool_size: int = Field(ge=1)
    max_overflow: int = Field(ge=0)
    pool_timeout: int = Field(ge=1)
    pool_recycle: int
    echo: bool


# logging.yaml

class ConsoleHandlerSchema(_StrictBase):
    enabled: bool


class FileHandlerSchema(_StrictBase):
    enabled: bool
    path: str
    max_bytes: int = Field(ge=1)
    backup_count: int = Field(ge=0)


class HandlersSchema(_StrictBase):
    console: ConsoleHandlerSchema
    file: FileHandlerSchema


class LoggingSchema(_StrictBase):
    level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
    format: Literal["json", "console"]
    handlers: HandlersSchema


# observability.yaml

class HealthChecksSchema(_StrictBase):
    """/health/ready gives the database this many seconds before reporting 503."""

    ready_timeout_seconds: int = Field(ge=1)


class ObservabilitySchema(_StrictBase):
    health_checks: HealthChecksSchema
