from abc import ABC, abstractmethod
from datetime import date
from typing import List

from desk_booker.domain.desk import Desk, DeskBooking


class DeskRepository(ABC):
    """Абстрактный источник сведений о свободных столах."""

    @abstractmethod
    def get_available_desks(self, booking_date: date) -> List[Desk]:
        """Возвращает столы, свободные на указанную дату.

        Порядок столов значим: обработчик запросов берет первый из них.
        """
        raise NotImplementedError


class DeskBookingRepository(ABC):
    """Абстрактный репозиторий бронирований столов."""

    @abstractmethod
    def save(self, desk_booking: DeskBooking) -> None:
        """Сохраняет бронирование и присваивает ему идентификатор."""
        raise NotImplementedError
