"""
Модуль побочных эффектов команд.

SideEffectChannel отделяет гарантированный результат команды от
best-effort действий (журнал, уведомления, кэш).
"""

from .side_effects import Effect, SideEffectChannel, SideEffectReport

__all__ = ["Effect", "SideEffectChannel", "SideEffectReport"]
