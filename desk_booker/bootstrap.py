from typing import Any, Dict, Optional

from desk_booker.application.processor import DeskBookingRequestProcessor
from desk_booker.config import Settings, get_settings
from desk_booker.domain.desk import Desk
from desk_booker.infrastructure.repositories import (
    InMemoryDeskBookingRepository,
    InMemoryDeskRepository,
    JsonFileDeskBookingRepository,
)
from desk_booker.web.book_desk import BookDeskModel


def bootstrap_app(settings: Optional[Settings] = None) -> Dict[str, Any]:
    """Создает и настраивает все компоненты приложения."""
    settings = settings or get_settings()

    # 1. Хранилище бронирований выбирается настройками
    if settings.storage == "json":
        booking_repository: InMemoryDeskBookingRepository = (
            JsonFileDeskBookingRepository(settings.bookings_file)
        )
    else:
        booking_repository = InMemoryDeskBookingRepository()

    # 2. Свободные столы вычисляются по уже сохраненным бронированиям
    desk_repository = InMemoryDeskRepository(
        desks=[Desk(id=desk_id) for desk_id in settings.desk_ids],
        booking_repository=booking_repository,
    )

    # 3. Обработчик запросов и страница получают зависимости извне
    processor = DeskBookingRequestProcessor(
        desk_booking_repository=booking_repository,
        desk_repository=desk_repository,
    )

    return {
        "booking_repository": booking_repository,
        "desk_repository": desk_repository,
        "processor": processor,
        "book_desk_model": BookDeskModel(processor),
    }
