"""Pension depot: subsidised contributions compounded over the savings term."""

from __future__ import annotations

import logging

from vorsorge.core.accumulation import (
    MAX_YEARS,
    clamp,
    clamp_return_pct,
    compute_future_value,
    whole_months,
)
from vorsorge.core.subsidy import compute_subsidy
from vorsorge.schemas.depot import DepotRequest, DepotResult, InputMode

logger = logging.getLogger(__name__)

MAX_AMOUNT = 100000.0


def compute_depot(request: DepotRequest) -> DepotResult:
    """Subsidy breakdown plus the capital reached after ``years`` of saving.

    Own contribution and subsidy are paid in as one monthly amount; the
    one-off bonus is invested once at the start.
    """
    amount = clamp(request.amount, 0.0, MAX_AMOUNT)
    annual_own = amount * 12 if request.input_mode is InputMode.MONTHLY else amount

    subsidy = compute_subsidy(
        annual_contribution=annual_own,
        child_count=request.child_count,
        rate_tier=request.rate_tier,
        bonus=request.early_career_bonus,
    )
    total_monthly = subsidy.total_into_contract / 12
    months = whole_months(clamp(request.years, 0.0, MAX_YEARS) * 12)
    rate = clamp_return_pct(request.annual_return_pct)

    final_balance = compute_future_value(
        initial_balance=subsidy.one_off_bonus,
        monthly_contribution=total_monthly,
        months=months,
        annual_return_pct=rate,
    )
    total_paid_in = subsidy.one_off_bonus + total_monthly * months
    logger.debug("depot over %d months: paid in %.2f, final %.2f", months, total_paid_in, final_balance)

    return DepotResult(
        subsidy=subsidy,
        own_monthly=subsidy.own_contribution / 12,
        subsidy_monthly=subsidy.total_subsidy / 12,
        total_monthly=total_monthly,
        months=months,
        annual_return_pct=rate,
        final_balance=final_balance,
        total_paid_in=total_paid_in,
        profit=final_balance - total_paid_in,
    )
