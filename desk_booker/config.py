"""
Настройки приложения на основе pydantic-settings.

Значения читаются из переменных окружения с префиксом DESK_BOOKER_
или из файла .env. Настройки загружаются один раз и кэшируются.
"""

from functools import lru_cache
from typing import Any, List, Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Настройки сервиса бронирования столов."""

    model_config = SettingsConfigDict(
        env_prefix="DESK_BOOKER_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        case_sensitive=False,
    )

    storage: Literal["memory", "json"] = Field(
        default="memory",
        description="Хранилище бронирований",
    )
    bookings_file: str = Field(
        default="data/desk_bookings.json",
        description="Путь к JSON-файлу с бронированиями",
    )
    desk_ids: List[int] = Field(
        default_factory=lambda: [1, 2, 3, 4, 5],
        description="Идентификаторы столов в порядке выдачи",
    )
    log_level: str = Field(default="INFO", description="Уровень логирования")

    @field_validator("storage", mode="before")
    @classmethod
    def storage_lower(cls, v: Any) -> Any:
        return v.lower() if isinstance(v, str) else v

    @field_validator("desk_ids")
    @classmethod
    def desk_ids_are_valid(cls, v: List[int]) -> List[int]:
        if not v:
            raise ValueError("Нужен хотя бы один стол")
        if len(set(v)) != len(v):
            raise ValueError("Идентификаторы столов не должны повторяться")
        return v

    @field_validator("log_level")
    @classmethod
    def log_level_upper(cls, v: str) -> str:
        return v.upper()


@lru_cache
def get_settings() -> Settings:
    """Возвращает закэшированный экземпляр настроек."""
    return Settings()
