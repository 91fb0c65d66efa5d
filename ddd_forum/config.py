from typing import List

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    app_name: str = "DDD-Forum API"
    host: str = "0.0.0.0"
    port: int = Field(default=3000)
    database_url: str = Field(default="sqlite:///./ddd_forum.db")
    log_level: str = "INFO"
    cors_allow_origins: List[str] = Field(default_factory=lambda: ["*"])

    @field_validator("log_level")
    @classmethod
    def normalise_log_level(cls, value: str) -> str:
        # logging only accepts upper-case level names
        return value.strip().upper()


settings = Settings()
