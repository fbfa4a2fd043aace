"""Application Configuration — environment-driven settings via pydantic-settings.

Invariants:
    - Settings computed once per process; components receive them explicitly
    - get_settings() is cached (lru_cache) — single instance per process
    - Any NODE_ENV other than "production" runs in development mode

Design Decisions:
    - ALLOWED_ORIGINS kept as the raw comma-separated string; the parsed
      frozenset is derived on access
"""

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application settings from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env", case_sensitive=False, extra="ignore",
        frozen=True,
    )

    # Server
    port: int = 3000
    host: str = "0.0.0.0"
    node_env: str = "development"
    app_name: str = "Express Server"

    # CORS
    allowed_origins: str = ""

    # Observability
    log_level: str = "INFO"
    log_format: str = "json"

    @property
    def is_development(self) -> bool:
        return self.node_env != "production"

    @property
    def allowed_origin_set(self) -> frozenset[str]:
        """Parse ALLOWED_ORIGINS into a set, dropping blanks.

        Example: "https://a.com, https://b.com" -> {"https://a.com", "https://b.com"}
        """
        return frozenset(
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        )


@lru_cache
def get_settings() -> Settings:
    return Settings()
