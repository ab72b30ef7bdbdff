"""
Форматтеры логов: JSON для файлов и агрегаторов, цветной pretty для консоли.
"""

import logging
from datetime import datetime, timezone

from pythonjsonlogger import jsonlogger

from src.core.settings import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """
    JSON форматтер с обязательными полями timestamp, level и logger.

    Поля из `extra=` попадают в запись как есть.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(settings.logging.JSON_FIELDS, *args, **kwargs)

    def add_fields(self, log_record, record, message_dict):
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.fromtimestamp(
            record.created, tz=timezone.utc
        ).isoformat()
        log_record["level"] = record.levelname
        log_record["logger"] = record.name


class PrettyFormatter(logging.Formatter):
    """Цветной однострочный формат для локальной разработки."""

    def __init__(self):
        super().__init__(fmt=settings.logging.PRETTY_FORMAT, datefmt="%H:%M:%S")
