"""Позиция задачи при вставке в колонку доски."""
import logging

import pytest

from src.services.v1.ordering import compute_insertion_order


def test_empty_column_starts_at_zero():
    assert compute_insertion_order([], 0) == 0.0
    assert compute_insertion_order([], 5) == 0.0


def test_insert_at_head_goes_before_first():
    assert compute_insertion_order([3.0, 4.0], 0) == 2.0


def test_insert_past_end_goes_after_last():
    assert compute_insertion_order([0.0, 1.0, 2.0], 3) == 3.0
    assert compute_insertion_order([0.0, 1.0, 2.0], 10) == 3.0


def test_insert_between_neighbours_takes_midpoint():
    # Колонка [0, 1, 2], позиция 1
    assert compute_insertion_order([0.0, 1.0, 2.0], 1) == 0.5


@pytest.mark.parametrize(
    "orders",
    [
        [0.0, 1.0, 2.0],
        [-5.0, -4.5, 10.0, 10.25],
        [1.0, 1.5, 1.75, 1.875],
    ],
)
def test_result_is_strictly_between_neighbours(orders):
    for index in range(len(orders) + 1):
        value = compute_insertion_order(orders, index)
        assert value not in orders
        if index > 0:
            assert value > orders[index - 1]
        if index < len(orders):
            assert value < orders[index]


def test_negative_index_rejected():
    with pytest.raises(ValueError):
        compute_insertion_order([1.0], -1)


def test_collapsed_midpoint_is_reported(caplog):
    low = 1.0
    high = low + 2.220446049250313e-16
    with caplog.at_level(logging.WARNING):
        value = compute_insertion_order([low, high], 1)
    assert value in (low, high)
    assert any(record.levelno == logging.WARNING for record in caplog.records)
