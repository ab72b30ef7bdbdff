"""
Позиции задач в колонке доски (fractional indexing).

Позиция новой или перемещённой задачи вычисляется между соседями,
поэтому при перетаскивании обновляется одна строка, без перенумерации
остальных задач колонки.

Известное ограничение: многократная вставка между одними и теми же
соседями исчерпывает точность float, и позиции совпадают. Перенумерации
здесь нет; при совпадении пишется WARNING.
"""

import logging
from typing import Sequence

logger = logging.getLogger(__name__)


def compute_insertion_order(column_orders: Sequence[float], destination_index: int) -> float:
    """
    Позиция для вставки в колонку.

    Args:
        column_orders: Позиции задач колонки по возрастанию (без перемещаемой).
        destination_index: Индекс, на который встаёт задача.

    Returns:
        float: 0 для пустой колонки; первая - 1 в начале; последняя + 1 в
        конце; иначе середина между соседями.

    Raises:
        ValueError: Для отрицательного индекса.

    Example:
        >>> compute_insertion_order([0.0, 1.0, 2.0], 1)
        0.5
    """
    if destination_index < 0:
        raise ValueError("destination_index не может быть отрицательным")
    if not column_orders:
        return 0.0
    if destination_index == 0:
        return column_orders[0] - 1
    if destination_index >= len(column_orders):
        return column_orders[-1] + 1

    before = column_orders[destination_index - 1]
    after = column_orders[destination_index]
    order = (before + after) / 2
    if not before < order < after:
        logger.warning(
            "Позиция %r не помещается между %r и %r: точность исчерпана",
            order,
            before,
            after,
            extra={"destination_index": destination_index},
        )
    return order
