"""
Модуль настройки логирования.

Содержит функцию setup_logging для централизованной настройки логирования приложения:
- Очищает старые обработчики root-логгера
- Добавляет консольный обработчик с форматтером (pretty/json)
- Добавляет файловый обработчик с JSON-форматтером, если задан LOG_FILE
- Подавляет лишние логи от сторонних библиотек

Usage:
    from src.core.logging import setup_logging
    setup_logging()
"""

import logging
import os
from pathlib import Path

from src.core.settings import settings

from .formatters import CustomJsonFormatter, PrettyFormatter


def setup_logging():
    """
    Настраивает систему логирования в приложении.

    Ошибка открытия файла логов не останавливает запуск: остаётся консольный вывод.
    """
    root = logging.getLogger()

    for handler in list(root.handlers):
        root.removeHandler(handler)

    console_formatter = (
        CustomJsonFormatter()
        if settings.logging.is_json_format
        else PrettyFormatter()
    )
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(console_formatter)
    root.addHandler(console_handler)

    log_file = settings.logging.LOG_FILE
    if log_file:
        try:
            log_path = Path(log_file)
            if not log_path.parent.exists():
                os.makedirs(str(log_path.parent), exist_ok=True)

            file_handler = logging.FileHandler(
                filename=log_path,
                mode=settings.logging.FILE_MODE,
                encoding=settings.logging.ENCODING,
            )
            file_handler.setFormatter(CustomJsonFormatter())
            root.addHandler(file_handler)
        except (PermissionError, OSError) as e:
            root.warning("Не удалось открыть файл логов %s: %s", log_file, e)

    root.setLevel(settings.logging.LOG_LEVEL)

    # Оставляем только WARNING и выше
    for logger_name in [
        "sqlalchemy.engine",
        "aiosqlite",
        "botocore",
        "aiobotocore",
        "urllib3",
    ]:
        logging.getLogger(logger_name).setLevel(logging.WARNING)
