from __future__ import annotations

import pytest

from fibtree.calculator import compute, digit_count
from fibtree.error_msg import DomainViolation

CANONICAL = [0, 1, 1, 2, 3, 5, 8, 13, 21, 34, 55, 89, 144, 233, 377, 610]


@pytest.mark.unit
def test_compute_matches_canonical_sequence():
    assert [compute(n) for n in range(len(CANONICAL))] == CANONICAL


@pytest.mark.unit
def test_compute_known_values():
    assert compute(0) == 0
    assert compute(1) == 1
    assert compute(10) == 55
    assert compute(50) == 12586269025
    assert compute(100) == 354224848179261915075


@pytest.mark.unit
def test_compute_recurrence_holds_for_large_indices():
    assert compute(1000) == compute(999) + compute(998)


@pytest.mark.unit
def test_compute_rejects_negative_index():
    with pytest.raises(DomainViolation) as excinfo:
        compute(-1)
    assert excinfo.value.index == -1
    assert isinstance(excinfo.value, ValueError)


@pytest.mark.unit
@pytest.mark.parametrize("bad", [3.5, 5.0, "10", None, True])
def test_compute_rejects_non_integer_index(bad):
    with pytest.raises(TypeError):
        compute(bad)


@pytest.mark.unit
@pytest.mark.parametrize(
    "value",
    [0, 1, 9, 10, 11, 99, 100, 999, 1000, 10**17 - 1, 10**17, 2**64, 10**300 - 1, 10**300],
)
def test_digit_count_matches_decimal_rendering(value):
    assert digit_count(value) == len(str(value))


@pytest.mark.unit
def test_digit_count_of_fibonacci_numbers():
    assert digit_count(compute(50)) == 11
    assert digit_count(compute(1000)) == 209


@pytest.mark.unit
def test_digit_count_rejects_invalid_values():
    with pytest.raises(ValueError):
        digit_count(-5)
    with pytest.raises(TypeError):
        digit_count(1.5)
