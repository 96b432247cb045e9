"""
Тесты доменных моделей: запрос, результат, стол и бронирование.
"""

from datetime import date, datetime

import pytest
from pydantic import ValidationError

from desk_booker.domain.booking import (
    DeskBookingRequest,
    DeskBookingResult,
    DeskBookingResultCode,
)
from desk_booker.domain.desk import Desk, DeskBooking
from desk_booker.domain.exceptions import (
    ArgumentNullException,
    DeskAlreadyBookedException,
    DomainException,
)


def test_request_is_immutable(desk_booking_request: DeskBookingRequest):
    with pytest.raises(ValidationError):
        desk_booking_request.first_name = "Kevin"


def test_request_accepts_iso_date_string():
    request = DeskBookingRequest(
        first_name="Alan",
        last_name="Shearer",
        email="AlanShearer@gmail.com",
        date="2020-01-28",
    )
    assert request.date == date(2020, 1, 28)


def test_request_rejects_date_with_time_component():
    with pytest.raises(ValidationError):
        DeskBookingRequest(
            first_name="Alan",
            last_name="Shearer",
            email="AlanShearer@gmail.com",
            date=datetime(2020, 1, 28, 10, 30),
        )


def test_request_requires_all_fields():
    with pytest.raises(ValidationError):
        DeskBookingRequest(first_name="Alan", last_name="Shearer")


def test_desk_is_immutable():
    desk = Desk(id=7)
    with pytest.raises(ValidationError):
        desk.id = 8


def test_desk_booking_has_no_id_until_saved(booking_date: date):
    booking = DeskBooking(
        first_name="Alan",
        last_name="Shearer",
        email="AlanShearer@gmail.com",
        date=booking_date,
        desk_id=7,
    )
    assert booking.id is None
    assert not booking.is_saved

    booking.id = 5
    assert booking.is_saved


class TestDeskBookingResult:
    """Тесты инварианта: id бронирования есть только при успехе."""

    def test_success_with_booking_id(self, booking_date: date):
        result = DeskBookingResult(
            first_name="Alan",
            last_name="Shearer",
            email="AlanShearer@gmail.com",
            date=booking_date,
            code=DeskBookingResultCode.SUCCESS,
            desk_booking_id=5,
        )
        assert result.is_success
        assert result.desk_booking_id == 5

    def test_no_desk_available_without_booking_id(self, booking_date: date):
        result = DeskBookingResult(
            first_name="Alan",
            last_name="Shearer",
            email="AlanShearer@gmail.com",
            date=booking_date,
            code=DeskBookingResultCode.NO_DESK_AVAILABLE,
        )
        assert not result.is_success
        assert result.desk_booking_id is None

    def test_success_without_booking_id_is_rejected(self, booking_date: date):
        with pytest.raises(ValidationError):
            DeskBookingResult(
                first_name="Alan",
                last_name="Shearer",
                email="AlanShearer@gmail.com",
                date=booking_date,
                code=DeskBookingResultCode.SUCCESS,
            )

    def test_failure_with_booking_id_is_rejected(self, booking_date: date):
        with pytest.raises(ValidationError):
            DeskBookingResult(
                first_name="Alan",
                last_name="Shearer",
                email="AlanShearer@gmail.com",
                date=booking_date,
                code=DeskBookingResultCode.NO_DESK_AVAILABLE,
                desk_booking_id=5,
            )


def test_argument_null_exception_names_parameter():
    error = ArgumentNullException("request")

    assert error.param_name == "request"
    assert isinstance(error, DomainException)
    assert isinstance(error, ValueError)
    assert "request" in str(error)


def test_desk_already_booked_exception_carries_desk_and_date(booking_date: date):
    error = DeskAlreadyBookedException(7, booking_date)

    assert error.desk_id == 7
    assert error.date == booking_date
    assert "2020-01-28" in str(error)
