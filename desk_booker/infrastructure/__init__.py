"""
Инфраструктурный слой: реализации хранилищ столов и бронирований.
"""

from .repositories import (
    InMemoryDeskBookingRepository,
    InMemoryDeskRepository,
    JsonFileDeskBookingRepository,
)

__all__ = [
    "InMemoryDeskBookingRepository",
    "JsonFileDeskBookingRepository",
    "InMemoryDeskRepository",
]
