from __future__ import annotations

import math
from math import isclose

import pytest

from vorsorge.core.accumulation import (
    calculate_future_value,
    clamp,
    compute_future_value,
    monthly_rate,
)
from vorsorge.schemas.accumulation import FutureValueRequest, RateConvention


@pytest.mark.parametrize("rate", [-20.0, 0.0, 6.0, 50.0])
def test_zero_months_returns_initial_balance(rate):
    assert compute_future_value(1234.5, 500.0, 0, rate) == 1234.5


def test_zero_rate_is_plain_sum():
    """With 0 % return the balance is exactly the sum of contributions."""
    assert compute_future_value(0, 125.0, 360, 0) == 125.0 * 360
    assert compute_future_value(1000, 10.0, 12, 0) == 1120.0


def test_known_annuity_value():
    # 100/month for 12 months at 12 % nominal -> 1 % per month
    expected = 100 * ((1.01 ** 12 - 1) / 0.01)
    assert isclose(compute_future_value(0, 100, 12, 12), expected, rel_tol=1e-12)
    assert isclose(expected, 1268.25, abs_tol=0.01)


def test_lump_sum_compounds_monthly():
    assert isclose(compute_future_value(1000, 0, 24, 6), 1000 * 1.005 ** 24, rel_tol=1e-12)


def test_negative_rate_loses_value():
    balance = compute_future_value(0, 100, 120, -10)
    assert 0 < balance < 100 * 120


def test_months_are_floored_and_negatives_clamped():
    assert compute_future_value(0, 100, 12.9, 6) == compute_future_value(0, 100, 12, 6)
    assert compute_future_value(-500, -100, 12, 6) == 0.0
    assert compute_future_value(200, 100, -3, 6) == 200


def test_tiny_rate_uses_linear_sum():
    # 1e-10 % p.a. gives a monthly rate far below the epsilon
    assert compute_future_value(0, 50, 10, 1e-10) == 500.0


def test_monotonic_in_inputs():
    base = compute_future_value(1000, 100, 120, 5)
    assert compute_future_value(2000, 100, 120, 5) >= base
    assert compute_future_value(1000, 150, 120, 5) >= base
    assert compute_future_value(1000, 100, 121, 5) >= base


def test_overflow_saturates_instead_of_raising():
    assert compute_future_value(1, 1, 10_000_000, 50) == math.inf


def test_effective_convention_compounds_to_annual_rate():
    i = monthly_rate(6, RateConvention.EFFECTIVE)
    assert isclose((1 + i) ** 12, 1.06, rel_tol=1e-12)
    nominal = compute_future_value(1000, 0, 12, 6)
    effective = compute_future_value(1000, 0, 12, 6, RateConvention.EFFECTIVE)
    assert isclose(effective, 1060.0, rel_tol=1e-12)
    assert nominal > effective


def test_clamp_handles_nan_and_infinity():
    assert clamp(float("nan"), 0, 10) == 0
    assert clamp(float("inf"), 0, 10) == 10
    assert clamp(float("-inf"), -50, 50) == -50


def test_request_wrapper_matches_function():
    request = FutureValueRequest(initial_balance=100, monthly_contribution=50, months=24, annual_return_pct=4)
    response = calculate_future_value(request)
    assert response.balance == compute_future_value(100, 50, 24, 4)
    assert calculate_future_value(request) == response


def test_request_wrapper_clamps_return_rate():
    low = calculate_future_value(FutureValueRequest(initial_balance=1000, months=1, annual_return_pct=-3000))
    nan = calculate_future_value(FutureValueRequest(initial_balance=1000, months=1, annual_return_pct=float("nan")))
    high = calculate_future_value(FutureValueRequest(initial_balance=1000, months=1, annual_return_pct=400))

    assert low.balance == compute_future_value(1000, 0, 1, -50)
    assert nan.balance == low.balance
    assert high.balance == compute_future_value(1000, 0, 1, 50)
