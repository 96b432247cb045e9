"""
Сервис бронирования рабочих столов (Desk Booker).

Отвечает за выделение одного общего стола сотруднику на выбранную дату:
- Проверку запроса на бронирование
- Подбор свободного стола
- Сохранение бронирования
"""

__version__ = "0.1.0"
