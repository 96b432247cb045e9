"""
Исключения контекста бронирования столов.
"""

from datetime import date


class DomainException(Exception):
    """Базовое исключение для доменных ошибок."""

    pass


class ArgumentNullException(DomainException, ValueError):
    """Исключение: обязательный аргумент не передан."""

    def __init__(self, param_name: str):
        super().__init__(f"Аргумент '{param_name}' не может быть None.")
        self.param_name = param_name


class DeskAlreadyBookedException(DomainException):
    """Исключение: стол уже забронирован на эту дату."""

    def __init__(self, desk_id: int, booking_date: date):
        super().__init__(
            f"Стол {desk_id} уже забронирован на {booking_date.isoformat()}."
        )
        self.desk_id = desk_id
        self.date = booking_date
