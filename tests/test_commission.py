"""
Unit tests for commission arithmetic.
"""
import pytest

from app.core.commission import calculate_commission, COMMISSION_RATE_PERCENT


def test_commission_rate_is_thirty_percent():
    assert COMMISSION_RATE_PERCENT == 30


@pytest.mark.parametrize(
    "amount_paid, expected",
    [
        (1000, 300),
        (999, 299),
        (980, 294),
        (3, 0),
        (0, 0),
        (10000, 3000),
    ],
)
def test_commission_is_floored(amount_paid, expected):
    assert calculate_commission(amount_paid) == expected


def test_commission_has_no_float_drift():
    """Exact multiples of 10 yield exact integer commissions."""
    for amount in range(0, 100000, 10):
        assert calculate_commission(amount) == amount * 3 // 10
