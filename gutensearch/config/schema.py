"""Configuration schema using Pydantic."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Base(BaseModel):
    """Base model that accepts both camelCase and snake_case keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ElasticsearchConfig(Base):
    """Elasticsearch endpoint."""

    scheme: str = "http"
    host: str = "localhost"
    port: int = 9200
    index: str = ""  # Empty searches every index
    timeout: float = 10.0

    @property
    def base_url(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"


class PostgresConfig(Base):
    """PostgreSQL connection settings."""

    dsn: str = ""  # Full conninfo/URL, takes precedence over the fields below
    host: str = "localhost"
    port: int = 5432
    database: str = ""
    user: str = ""
    password: str = ""

    def conninfo(self) -> str:
        if self.dsn:
            return self.dsn
        parts = {
            "host": self.host,
            "port": str(self.port),
            "dbname": self.database,
            "user": self.user,
            "password": self.password,
        }
        return " ".join(f"{key}={_quote(value)}" for key, value in parts.items() if value)


class SearchConfig(Base):
    """Search and comparison behavior."""

    result_limit: int = Field(default=10, ge=1)
    dispatch_timeout: float = Field(default=0.0, ge=0.0)  # 0 disables the timeout
    phrases_file: str = ""

    @property
    def phrases_path(self) -> Path | None:
        return Path(self.phrases_file).expanduser() if self.phrases_file else None


class Config(Base):
    """Root configuration for gutensearch."""

    elasticsearch: ElasticsearchConfig = Field(default_factory=ElasticsearchConfig)
    postgres: PostgresConfig = Field(default_factory=PostgresConfig)
    search: SearchConfig = Field(default_factory=SearchConfig)


def _quote(value: str) -> str:
    if value and not any(ch in value for ch in " '\\"):
        return value
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"
