"""Monthly-compounding future value of a contribution stream."""

from __future__ import annotations

import logging
import math

from vorsorge.schemas.accumulation import (
    FutureValueRequest,
    FutureValueResponse,
    RateConvention,
)

logger = logging.getLogger(__name__)

# Below this monthly rate the annuity factor would divide by (almost) zero.
ZERO_RATE_EPSILON = 1e-12

# Input ranges the calculators accept before clamping.
RETURN_PCT_LIMIT = 50.0
MAX_YEARS = 80.0


def clamp(value: float, lower: float, upper: float) -> float:
    """Limit ``value`` to ``[lower, upper]``; NaN falls back to ``lower``."""
    if math.isnan(value):
        return lower
    return max(lower, min(upper, value))


def clamp_return_pct(annual_return_pct: float) -> float:
    return clamp(annual_return_pct, -RETURN_PCT_LIMIT, RETURN_PCT_LIMIT)


def non_negative(value: float) -> float:
    """Floor ``value`` at 0, treating NaN as 0."""
    return value if value > 0 else 0.0


def whole_months(months: float) -> int:
    """Floor a month count to a whole number of periods (never negative)."""
    if not math.isfinite(months) or months <= 0:
        return 0
    return int(math.floor(months))


def monthly_rate(annual_return_pct: float, convention: RateConvention = RateConvention.NOMINAL) -> float:
    """Derive the per-month rate from an annual percentage.

    ``NOMINAL`` divides the annual rate by 12, ``EFFECTIVE`` takes the twelfth
    root so that twelve months compound to exactly the annual rate. For the
    same input the nominal convention yields the higher ending balance when
    the rate is positive.
    """
    annual = annual_return_pct / 100
    if convention is RateConvention.EFFECTIVE:
        if annual <= -1:
            return -1.0
        return (1 + annual) ** (1 / 12) - 1
    return annual / 12


def growth_factor(rate: float, periods: int) -> float:
    """Return ``(1 + rate) ** periods``, saturating to ``inf`` on overflow."""
    try:
        return math.pow(1 + rate, periods)
    except OverflowError:
        return math.inf


def compute_future_value(
    initial_balance: float,
    monthly_contribution: float,
    months: float,
    annual_return_pct: float,
    convention: RateConvention = RateConvention.NOMINAL,
) -> float:
    """Balance after ``months`` end-of-month contributions.

    FV = initial * (1+i)^n + P * ((1+i)^n - 1) / i
    """
    initial = non_negative(initial_balance)
    contribution = non_negative(monthly_contribution)
    n = whole_months(months)

    if n == 0:
        return initial

    i = monthly_rate(annual_return_pct, convention)
    if abs(i) < ZERO_RATE_EPSILON:
        return initial + contribution * n

    factor = growth_factor(i, n)
    return initial * factor + contribution * ((factor - 1) / i)


def calculate_future_value(request: FutureValueRequest) -> FutureValueResponse:
    """Evaluate a validated future-value request."""
    rate = clamp_return_pct(request.annual_return_pct)
    balance = compute_future_value(
        initial_balance=request.initial_balance,
        monthly_contribution=request.monthly_contribution,
        months=request.months,
        annual_return_pct=rate,
        convention=request.convention,
    )
    logger.debug(
        "future value over %s months at %s%% (%s): %.2f",
        request.months,
        rate,
        request.convention.value,
        balance,
    )
    return FutureValueResponse(balance=balance)
