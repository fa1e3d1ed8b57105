# paxbot/settings.py
import os
from pathlib import Path
from typing import Optional

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from .consts import SEARCH_SCORE_THRESHOLD, SEARCH_SUGGEST_THRESHOLD

ROOT = Path(__file__).resolve().parents[1]


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="Paxbot")
    ENV: str = Field(default=os.getenv("APP_ENV", "dev"))
    DEBUG: bool = Field(default=True)
    LOG_LEVEL: str = Field(default="INFO")

    # content
    CONTENT_PATH: Path = Field(default=ROOT / "content" / "content.yaml")

    # commands
    COMMAND_PREFIX: str = Field(default="?")
    ASK_COMMAND: str = Field(default="pax")
    UTIL_PREFIX: str = Field(default="!pax")

    # search
    SEARCH_SCORE_THRESHOLD: float = Field(default=SEARCH_SCORE_THRESHOLD)
    SEARCH_SUGGEST_THRESHOLD: float = Field(default=SEARCH_SUGGEST_THRESHOLD)

    # response cache; unset means entries live for the process lifetime
    CACHE_MAX_ENTRIES: Optional[int] = None
    CACHE_TTL_SECONDS: Optional[float] = None

    # webhook chat client
    WEBHOOK_URL: Optional[str] = None

    model_config = SettingsConfigDict(
        env_file=".env.dev",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def ask_trigger(self) -> str:
        return f"{self.COMMAND_PREFIX}{self.ASK_COMMAND}"


settings = Settings()
