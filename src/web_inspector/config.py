"""Runtime configuration loaded from the environment."""

from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


DEFAULT_USER_AGENT = "Mozilla/5.0 (compatible; WebInspector/1.0; +https://github.com/web-inspector/web-inspector)"
DEFAULT_ACCEPT = "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8"


class Settings(BaseSettings):
    """Settings for fetching and logging.

    Every field can be set through a ``WEB_INSPECTOR_`` prefixed
    environment variable, e.g. ``WEB_INSPECTOR_TIMEOUT=5``.
    """

    model_config = SettingsConfigDict(env_prefix="WEB_INSPECTOR_", extra="ignore")

    timeout: float = Field(default=10.0, gt=0, description="Hard fetch timeout in seconds.")
    user_agent: str = Field(default=DEFAULT_USER_AGENT, description="User-Agent sent with every request.")
    accept: str = Field(default=DEFAULT_ACCEPT, description="Accept header sent with every request.")
    log_level: str = Field(default="INFO", description="Minimum log level.")
    log_json: bool = Field(default=False, description="Render logs as JSON lines.")

    @property
    def request_headers(self) -> dict[str, str]:
        return {"User-Agent": self.user_agent, "Accept": self.accept}


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Return the process-wide settings instance."""
    return Settings()
