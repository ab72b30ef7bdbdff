"""
Инициализация модуля сервисов.

Exports:
    - BaseService: Базовый класс для всех сервисов
    - SessionMixin: Миксин для работы с сессией БД
    - command: Декоратор публичной операции (возвращает Result)
"""

from .base import BaseService, SessionMixin, command

__all__ = [
    "BaseService",
    "SessionMixin",
    "command",
]
