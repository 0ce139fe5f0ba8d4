from __future__ import annotations

from math import exp, isclose

import pytest

from interest_calculator.core.compound_interest import calculate, calculate_continuous
from interest_calculator.core.errors import InvalidPrincipal, InvalidTime

FREQUENCIES = [1, 2, 4, 12, 52, 365, 8760]


@pytest.mark.parametrize(
    "principal, rate, time",
    [
        (1000, 5, 10),
        (250.75, 12.5, 3),
        (50000, 0.5, 30),
        (1, 100, 1),
    ],
)
def test_total_grows_with_frequency_up_to_continuous_limit(principal, rate, time):
    """
    More frequent compounding never lowers the total, and never passes continuous compounding.
    """
    limit = calculate_continuous(principal, rate, time)
    prev = 0.0
    for n in FREQUENCIES:
        result = calculate(principal, rate, time, n)
        assert result.total >= prev, f"total dropped at n={n}"
        assert result.total <= limit.total
        assert result.total >= result.principal
        assert result.interest >= 0
        prev = result.total


def test_large_frequency_approaches_continuous_limit():
    continuous = calculate_continuous(1000, 5, 10)
    daily = calculate(1000, 5, 10, 365)
    near_continuous = calculate(1000, 5, 10, 1_000_000)

    assert isclose(continuous.total, 1000 * exp(0.5), abs_tol=0.01)
    assert continuous.total - near_continuous.total <= 0.01
    assert near_continuous.total >= daily.total


def test_continuous_interest_is_total_minus_principal():
    result = calculate_continuous(2000, 10, 1)

    assert isclose(result.total, 2210.34, abs_tol=0.01)
    assert round(result.total - result.principal, 2) == result.interest


def test_continuous_uses_same_input_rules():
    with pytest.raises(InvalidPrincipal):
        calculate_continuous("", 5, 1)
    with pytest.raises(InvalidTime):
        calculate_continuous(1000, 5, 0)
