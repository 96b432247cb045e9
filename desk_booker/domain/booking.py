"""
Запрос на бронирование стола и результат его обработки.
"""

from datetime import date
from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, model_validator


class DeskBookingResultCode(str, Enum):
    """Коды результата бронирования."""

    SUCCESS = "success"
    NO_DESK_AVAILABLE = "no_desk_available"


class DeskBookingBase(BaseModel):
    """Общие поля запроса и результата: кто бронирует и на какую дату."""

    first_name: str
    last_name: str
    email: str
    date: date


class DeskBookingRequest(DeskBookingBase):
    """Запрос на бронирование стола."""

    model_config = ConfigDict(frozen=True)


class DeskBookingResult(DeskBookingBase):
    """Результат обработки запроса на бронирование."""

    code: DeskBookingResultCode
    desk_booking_id: Optional[int] = None

    @model_validator(mode="after")
    def booking_id_only_on_success(self) -> "DeskBookingResult":
        has_id = self.desk_booking_id is not None
        if has_id != (self.code == DeskBookingResultCode.SUCCESS):
            raise ValueError(
                "Идентификатор бронирования задается только при успешном бронировании"
            )
        return self

    @property
    def is_success(self) -> bool:
        return self.code == DeskBookingResultCode.SUCCESS
