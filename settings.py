"""
Настройки локализации из переменных окружения и .env
"""

from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from culture import Culture

ENV_FILE_NAME = ".env"
load_dotenv(Path(__file__).parent / ENV_FILE_NAME)


class Settings(BaseSettings):
    DEFAULT_CULTURE: Optional[str] = "de-DE"  # пусто -> культура системы
    RESOURCE_PACKAGE: str = "text_resources"
    RESOURCE_DIR: Optional[Path] = None  # если задан, важнее пакета
    RESOURCE_BASE_NAME: str = "texts"
    LOG_LEVEL: str = "INFO"
    LOG_FILE: bool = False

    @field_validator("DEFAULT_CULTURE")
    @classmethod
    def check_culture(cls, v: Optional[str]) -> Optional[str]:
        if v is None or not v.strip():
            return None
        # ValueError из Culture превращается в ValidationError
        return Culture(v).name

    @field_validator("LOG_LEVEL")
    @classmethod
    def upper_level(cls, v: str) -> str:
        v = v.strip().upper()
        if v not in {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}:
            raise ValueError(f"Unknown log level {v}")
        return v

    model_config = SettingsConfigDict(
        env_prefix="LOCALIZATION_",
        env_file=ENV_FILE_NAME,
        env_file_encoding="utf-8",
        extra="ignore",
    )


settings = Settings()
