"""
Прикладной слой: порты хранилищ и обработчик запросов на бронирование.
"""

from .processor import DeskBookingRequestProcessor, IDeskBookingRequestProcessor
from .repositories import DeskBookingRepository, DeskRepository

__all__ = [
    "DeskRepository",
    "DeskBookingRepository",
    "IDeskBookingRequestProcessor",
    "DeskBookingRequestProcessor",
]
