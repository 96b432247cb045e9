"""
Обработчик запросов на бронирование стола.

Проверяет запрос, подбирает свободный стол на дату,
сохраняет бронирование и возвращает результат.
"""

import logging
from abc import ABC, abstractmethod
from typing import Optional

from desk_booker.application.repositories import DeskBookingRepository, DeskRepository
from desk_booker.domain.booking import (
    DeskBookingRequest,
    DeskBookingResult,
    DeskBookingResultCode,
)
from desk_booker.domain.desk import DeskBooking
from desk_booker.domain.exceptions import ArgumentNullException

logger = logging.getLogger(__name__)


class IDeskBookingRequestProcessor(ABC):
    """Интерфейс обработчика запросов на бронирование."""

    @abstractmethod
    def book_desk(self, request: DeskBookingRequest) -> DeskBookingResult:
        raise NotImplementedError


class DeskBookingRequestProcessor(IDeskBookingRequestProcessor):
    """Сервис приложения, бронирующий стол по запросу сотрудника."""

    def __init__(
        self,
        desk_booking_repository: DeskBookingRepository,
        desk_repository: DeskRepository,
    ):
        self._desk_booking_repository = desk_booking_repository
        self._desk_repository = desk_repository

    def book_desk(self, request: Optional[DeskBookingRequest]) -> DeskBookingResult:
        """Бронирует первый свободный стол на дату из запроса.

        Ошибки хранилищ не перехватываются и передаются вызывающему коду.
        """
        if request is None:
            raise ArgumentNullException("request")

        logger.debug(
            "Запрос на бронирование стола на %s от %s", request.date, request.email
        )

        available_desks = self._desk_repository.get_available_desks(request.date)
        # Порядок определяет источник, здесь столы не сортируются
        desk = next(iter(available_desks), None)
        if desk is None:
            logger.debug("Нет свободных столов на %s", request.date)
            return self._create_result(
                request, DeskBookingResultCode.NO_DESK_AVAILABLE
            )

        desk_booking = DeskBooking(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            date=request.date,
            desk_id=desk.id,
        )
        self._desk_booking_repository.save(desk_booking)
        logger.debug(
            "Стол %s забронирован, бронирование #%s", desk.id, desk_booking.id
        )

        return self._create_result(
            request, DeskBookingResultCode.SUCCESS, desk_booking.id
        )

    @staticmethod
    def _create_result(
        request: DeskBookingRequest,
        code: DeskBookingResultCode,
        desk_booking_id: Optional[int] = None,
    ) -> DeskBookingResult:
        return DeskBookingResult(
            first_name=request.first_name,
            last_name=request.last_name,
            email=request.email,
            date=request.date,
            code=code,
            desk_booking_id=desk_booking_id,
        )
