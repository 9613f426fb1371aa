"""Process configuration loaded from the environment."""
import logging
from functools import lru_cache

from pydantic import Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

logger = logging.getLogger("plane-mcp.config")

DEFAULT_API_URL = "https://api.plane.so/api/v1/workspaces"


class ConfigurationError(Exception):
    """Raised when required environment configuration is missing."""

    def __init__(self, missing: list[str]):
        self.missing = missing
        super().__init__(
            f"Missing required environment variable(s): {', '.join(missing)}"
        )


class Settings(BaseSettings):
    """Plane connection settings.

    Read once at startup from ``PLANE_*`` environment variables (or a ``.env``
    file) and never mutated afterwards.
    """

    model_config = SettingsConfigDict(
        env_prefix="PLANE_",
        env_file=".env",
        extra="ignore",
        frozen=True,
    )

    api_key: str = Field(..., min_length=1)
    workspace_slug: str = Field(..., min_length=1)
    api_url: str = DEFAULT_API_URL

    @field_validator("api_url", mode="before")
    @classmethod
    def default_api_url(cls, value):
        if value is None or not str(value).strip():
            return DEFAULT_API_URL
        return str(value).strip().rstrip("/")

    @property
    def base_url(self) -> str:
        """Workspace-scoped root for every API request."""
        return f"{self.api_url}/{self.workspace_slug}"

    def __repr__(self) -> str:
        # Keep the API key out of logs and tracebacks
        return f"Settings(api_url={self.api_url!r}, workspace_slug={self.workspace_slug!r})"


_ENV_NAMES = {
    "api_key": "PLANE_API_KEY",
    "workspace_slug": "PLANE_WORKSPACE_SLUG",
    "api_url": "PLANE_API_URL",
}


def load_settings(**overrides) -> Settings:
    """Build settings, translating validation failures into ConfigurationError."""
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        missing = []
        for error in e.errors():
            field = str(error["loc"][0]) if error["loc"] else "unknown"
            name = _ENV_NAMES.get(field, field)
            if name not in missing:
                missing.append(name)
        raise ConfigurationError(missing) from e

    if settings.api_url == DEFAULT_API_URL:
        logger.info(
            f"PLANE_API_URL is not set, falling back to default url: {DEFAULT_API_URL}"
        )
    return settings


@lru_cache
def get_settings() -> Settings:
    """Get the process-wide settings (loaded on first use)."""
    return load_settings()
