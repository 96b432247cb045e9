"""
Реализации репозиториев контекста бронирования столов.

Хранилища бронирований сами следят за тем, чтобы один стол
не был забронирован дважды на одну дату.
"""

import json
import logging
from datetime import date
from pathlib import Path
from typing import Dict, Iterable, List, Union

from desk_booker.application.repositories import DeskBookingRepository, DeskRepository
from desk_booker.domain.desk import Desk, DeskBooking
from desk_booker.domain.exceptions import DeskAlreadyBookedException

logger = logging.getLogger(__name__)


class InMemoryDeskBookingRepository(DeskBookingRepository):
    """Реализация репозитория бронирований в памяти."""

    def __init__(self) -> None:
        self._bookings: Dict[int, DeskBooking] = {}
        self._next_id = 1

    def save(self, desk_booking: DeskBooking) -> None:
        """Сохраняет новое бронирование и присваивает ему следующий номер."""
        if desk_booking.id is not None:
            raise ValueError(f"Бронирование с id {desk_booking.id} уже сохранено")
        self._ensure_desk_is_free(desk_booking)

        desk_booking.id = self._next_id
        self._next_id += 1
        self._bookings[desk_booking.id] = desk_booking
        logger.info(
            "Сохранено бронирование #%s: стол %s на %s",
            desk_booking.id,
            desk_booking.desk_id,
            desk_booking.date,
        )

    def get_by_id(self, booking_id: int) -> DeskBooking:
        if booking_id not in self._bookings:
            raise KeyError(f"Booking with id {booking_id} not found")
        return self._bookings[booking_id]

    def find_by_date(self, booking_date: date) -> List[DeskBooking]:
        return [
            booking
            for booking in self._bookings.values()
            if booking.date == booking_date
        ]

    def list_all(self) -> List[DeskBooking]:
        return list(self._bookings.values())

    def _ensure_desk_is_free(self, desk_booking: DeskBooking) -> None:
        for booking in self.find_by_date(desk_booking.date):
            if booking.desk_id == desk_booking.desk_id:
                logger.warning(
                    "Повторное бронирование стола %s на %s отклонено",
                    desk_booking.desk_id,
                    desk_booking.date,
                )
                raise DeskAlreadyBookedException(
                    desk_booking.desk_id, desk_booking.date
                )


class JsonFileDeskBookingRepository(InMemoryDeskBookingRepository):
    """Репозиторий бронирований, хранящий данные в JSON-файле."""

    def __init__(self, file_path: Union[str, Path]):
        """
        Инициализирует репозиторий.

        Args:
            file_path: Путь к JSON-файлу с бронированиями
        """
        super().__init__()
        self._file_path = Path(file_path)
        self._load_data()

    def save(self, desk_booking: DeskBooking) -> None:
        """Сохраняет бронирование в памяти и в файле.

        Если файл записать не удалось, бронирование удаляется из памяти,
        а его номер освобождается.
        """
        super().save(desk_booking)
        try:
            self._save_data()
        except OSError:
            logger.error(
                "Не удалось записать %s, бронирование #%s отменено",
                self._file_path,
                desk_booking.id,
            )
            del self._bookings[desk_booking.id]
            self._next_id = desk_booking.id
            desk_booking.id = None
            raise

    def _load_data(self) -> None:
        """Загружает бронирования из JSON-файла."""
        if not self._file_path.exists():
            return

        raw_data = self._file_path.read_text(encoding="utf-8")
        if not raw_data.strip():
            return

        for item in json.loads(raw_data):
            booking = DeskBooking.model_validate(item)
            self._bookings[booking.id] = booking

        if self._bookings:
            self._next_id = max(self._bookings) + 1
        logger.debug(
            "Загружено %s бронирований из %s", len(self._bookings), self._file_path
        )

    def _save_data(self) -> None:
        """Сохраняет бронирования в JSON-файл."""
        # Создаем директорию, если она не существует
        self._file_path.parent.mkdir(parents=True, exist_ok=True)

        data = [booking.model_dump(mode="json") for booking in self._bookings.values()]
        with open(self._file_path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)


class InMemoryDeskRepository(DeskRepository):
    """Источник свободных столов поверх репозитория бронирований.

    Стол свободен на дату, если на эту дату для него нет бронирования.
    Столы возвращаются в том порядке, в котором переданы при создании.
    """

    def __init__(
        self,
        desks: Iterable[Desk],
        booking_repository: InMemoryDeskBookingRepository,
    ) -> None:
        self._desks: List[Desk] = list(desks)
        self._booking_repository = booking_repository

    def get_available_desks(self, booking_date: date) -> List[Desk]:
        booked_desk_ids = {
            booking.desk_id
            for booking in self._booking_repository.find_by_date(booking_date)
        }
        return [desk for desk in self._desks if desk.id not in booked_desk_ids]

    def list_all(self) -> List[Desk]:
        return list(self._desks)
