"""
Обработчик страницы бронирования стола.

Переводит данные формы в запрос на бронирование, передает его
обработчику запросов и решает, что показать пользователю.
"""

import logging
from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping, Optional

from pydantic import ValidationError

from desk_booker.application.processor import IDeskBookingRequestProcessor
from desk_booker.domain.booking import DeskBookingRequest, DeskBookingResultCode

logger = logging.getLogger(__name__)

CONFIRMATION_PAGE = "BookDeskConfirmation"
NO_DESK_AVAILABLE_MESSAGE = "Нет свободных столов на выбранную дату"
MODEL_PREFIX = "DeskBookingRequest"
DATE_ERROR_KEY = f"{MODEL_PREFIX}.date"


@dataclass(frozen=True)
class PageResult:
    """Повторный показ текущей страницы (например, с ошибками формы)."""

    pass


@dataclass(frozen=True)
class RedirectToPageResult(PageResult):
    """Переход на другую страницу."""

    page_name: str = ""
    route_values: Dict[str, Any] = field(default_factory=dict)


class BookDeskModel:
    """Модель страницы бронирования стола.

    Ошибки формы относятся к последнему привязанному запросу: новый запрос
    (через bind или присваивание) сбрасывает их.
    """

    def __init__(self, processor: IDeskBookingRequestProcessor):
        self._processor = processor
        self._desk_booking_request: Optional[DeskBookingRequest] = None
        self.model_errors: Dict[str, List[str]] = {}

    @property
    def desk_booking_request(self) -> Optional[DeskBookingRequest]:
        return self._desk_booking_request

    @desk_booking_request.setter
    def desk_booking_request(self, request: Optional[DeskBookingRequest]) -> None:
        self._desk_booking_request = request
        self.model_errors = {}

    @property
    def is_valid(self) -> bool:
        return not self.model_errors

    def add_model_error(self, key: str, message: str) -> None:
        self.model_errors.setdefault(key, []).append(message)

    def bind(self, form: Mapping[str, Any]) -> None:
        """Заполняет запрос из данных формы, ошибки попадают в model_errors."""
        try:
            self.desk_booking_request = DeskBookingRequest.model_validate(dict(form))
        except ValidationError as e:
            self.desk_booking_request = None
            for error in e.errors():
                field_name = ".".join(str(part) for part in error["loc"])
                self.add_model_error(f"{MODEL_PREFIX}.{field_name}", error["msg"])

    def on_post(self) -> PageResult:
        """Обрабатывает отправку формы бронирования."""
        if not self.is_valid:
            return PageResult()

        result = self._processor.book_desk(self.desk_booking_request)

        if result.code == DeskBookingResultCode.SUCCESS:
            return RedirectToPageResult(
                page_name=CONFIRMATION_PAGE,
                route_values={
                    "desk_booking_id": result.desk_booking_id,
                    "first_name": result.first_name,
                },
            )

        logger.info(
            "Бронирование на %s не выполнено: %s", result.date, result.code.value
        )
        self.add_model_error(DATE_ERROR_KEY, NO_DESK_AVAILABLE_MESSAGE)
        return PageResult()
