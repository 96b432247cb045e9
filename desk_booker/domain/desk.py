"""
Сущности стола и бронирования стола.
"""

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict


class Desk(BaseModel):
    """Рабочий стол, который можно забронировать на день."""

    model_config = ConfigDict(frozen=True)

    id: int
    description: Optional[str] = None


class DeskBooking(BaseModel):
    """Бронирование стола на конкретную дату.

    Идентификатор остается пустым, пока бронирование не сохранено:
    его присваивает хранилище бронирований.
    """

    id: Optional[int] = None
    first_name: str
    last_name: str
    email: str
    date: date
    desk_id: int

    @property
    def is_saved(self) -> bool:
        return self.id is not None
