from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

class ClientSettings(BaseSettings):
    REVIEW_API_URL: str = "http://localhost:3000"
    # must exceed the gateway UPSTREAM_TIMEOUT
    REQUEST_TIMEOUT: float = 20.0
    XP_DB_PATH: str = ".codesensei.db"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")


@lru_cache
def get_settings():
    return ClientSettings()
