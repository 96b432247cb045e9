"""
Слой представления: обработчики страниц бронирования.
"""

from .book_desk import BookDeskModel, PageResult, RedirectToPageResult

__all__ = ["BookDeskModel", "PageResult", "RedirectToPageResult"]
