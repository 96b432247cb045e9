"""
Общие фикстуры для тестов сервиса бронирования столов.
"""

from datetime import date

import pytest

from desk_booker.domain.booking import DeskBookingRequest
from desk_booker.domain.desk import Desk


@pytest.fixture
def booking_date() -> date:
    return date(2020, 1, 28)


@pytest.fixture
def desk_booking_request(booking_date: date) -> DeskBookingRequest:
    """Фикстура запроса на бронирование от Алана Ширера."""
    return DeskBookingRequest(
        first_name="Alan",
        last_name="Shearer",
        email="AlanShearer@gmail.com",
        date=booking_date,
    )


@pytest.fixture
def desks() -> list:
    return [Desk(id=7), Desk(id=8), Desk(id=9)]
