"""
Доменная модель контекста бронирования столов.
"""

from .booking import DeskBookingRequest, DeskBookingResult, DeskBookingResultCode
from .desk import Desk, DeskBooking
from .exceptions import (
    ArgumentNullException,
    DeskAlreadyBookedException,
    DomainException,
)

__all__ = [
    # Сущности
    "Desk",
    "DeskBooking",
    # Запрос и результат
    "DeskBookingRequest",
    "DeskBookingResult",
    "DeskBookingResultCode",
    # Исключения
    "DomainException",
    "ArgumentNullException",
    "DeskAlreadyBookedException",
]
