from functools import lru_cache
from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="CAMPUSCARE_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
    )

    app_name: str = "CampusCare"
    debug: bool = False
    log_level: str = "INFO"

    database_url: str = "sqlite:///./campuscare.db"

    # ======== auth ========
    secret_key: str = "CHANGE_ME_LATER"
    algorithm: str = "HS256"
    access_token_expire_minutes: int = 60

    # ======== chat ========
    max_message_length: int = 500
    confidence_jitter: bool = False

    cors_origins: List[str] = ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()


settings = get_settings()
