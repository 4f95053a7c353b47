"""Pydantic Settings — loads configuration from environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    model_config = {"env_file": ".env", "env_prefix": "MESSENGER_", "extra": "ignore"}

    app_secret: str
    validation_token: str
    page_access_token: str

    # Token used for Graph page lookups; the page token is used when unset
    worker_page_access_token: str = ""

    graph_api_url: str = "https://graph.facebook.com"
    graph_api_version: str = "v19.0"
    graph_timeout_seconds: float = 3.0

    require_signature: bool = True
    privacy_policy_url: str = (
        "https://datadatbot.tk/privacypolicy/privacypolicybirdsbot.html"
    )
    log_level: str = "INFO"

    @property
    def graph_access_token(self) -> str:
        return self.worker_page_access_token or self.page_access_token


@lru_cache
def get_settings() -> Settings:
    return Settings()  # type: ignore[call-arg]
