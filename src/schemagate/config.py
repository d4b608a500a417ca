"""Application configuration via environment variables."""

from pydantic import BaseModel
from pydantic_settings import BaseSettings


class SchemaSettings(BaseModel):
    """Schema source and cache policy consumed by the validator core."""

    location: str
    fallback_location: str | None = None
    cache_enabled: bool = True
    # Seconds; 0 loads once, >0 checks the source mtime on every access
    reload_interval: int = 0


class Settings(BaseSettings):
    # Schema
    schema_location: str = "classpath:schemas/order-request.schema.json"
    schema_fallback_location: str | None = None
    schema_cache_enabled: bool = True
    schema_reload_interval: int = 0

    # CORS
    cors_allowed_origins: list[str] = ["http://localhost:5173", "http://localhost:3000"]

    # Server
    host: str = "0.0.0.0"
    port: int = 8080
    log_level: str = "info"
    json_logs: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "env_prefix": "SCHEMAGATE_",
    }

    @property
    def schema_settings(self) -> SchemaSettings:
        """Return the schema block handed to the validator core."""
        return SchemaSettings(
            location=self.schema_location,
            fallback_location=self.schema_fallback_location or None,
            cache_enabled=self.schema_cache_enabled,
            reload_interval=self.schema_reload_interval,
        )


settings = Settings()
