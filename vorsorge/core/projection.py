"""Month-by-month compounding simulation with a yearly trace."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, List, NamedTuple

from vorsorge.core.accumulation import (
    MAX_YEARS,
    clamp,
    clamp_return_pct,
    monthly_rate,
    non_negative,
    whole_months,
)
from vorsorge.schemas.accumulation import RateConvention
from vorsorge.schemas.projection import (
    YearlyProjection,
    YearlyProjectionRequest,
    YearlySnapshot,
)

logger = logging.getLogger(__name__)


class MonthState(NamedTuple):
    month: int
    balance: float
    paid_in: float


def _simulate_months(
    initial_balance: float,
    monthly_contribution: float,
    years: float,
    annual_return_pct: float,
    convention: RateConvention,
) -> Iterator[MonthState]:
    start = non_negative(initial_balance)
    monthly = non_negative(monthly_contribution)
    months = whole_months(clamp(years, 0.0, MAX_YEARS) * 12)
    rate = monthly_rate(clamp_return_pct(annual_return_pct), convention)

    balance = start
    # starting capital counts as paid in
    paid = start
    for month in range(1, months + 1):
        balance *= 1 + rate
        balance += monthly
        paid += monthly
        yield MonthState(month, balance, paid)


def _year_end_snapshots(states: Iterable[MonthState]) -> Iterator[YearlySnapshot]:
    for state in states:
        if state.month % 12 == 0:
            yield YearlySnapshot(
                year_index=state.month // 12,
                cumulative_paid_in=state.paid_in,
                end_of_year_balance=state.balance,
            )


def iter_yearly_snapshots(
    initial_balance: float,
    monthly_contribution: float,
    years: float,
    annual_return_pct: float,
    convention: RateConvention = RateConvention.EFFECTIVE,
) -> Iterator[YearlySnapshot]:
    """Lazily yield one snapshot per completed year, in chronological order."""
    return _year_end_snapshots(
        _simulate_months(initial_balance, monthly_contribution, years, annual_return_pct, convention)
    )


def compute_yearly_projection(
    initial_balance: float,
    monthly_contribution: float,
    years: float,
    annual_return_pct: float,
    convention: RateConvention = RateConvention.EFFECTIVE,
) -> YearlyProjection:
    """Run the simulation to the end of the term and collect the yearly trace.

    Returns the final balance, the total paid in (starting capital included),
    the profit and one snapshot per completed year.
    """
    states = list(
        _simulate_months(initial_balance, monthly_contribution, years, annual_return_pct, convention)
    )
    snapshots: List[YearlySnapshot] = list(_year_end_snapshots(states))
    if states:
        balance, paid = states[-1].balance, states[-1].paid_in
    else:
        balance = paid = non_negative(initial_balance)

    logger.debug("projected %d full years, final balance %.2f", len(snapshots), balance)
    return YearlyProjection(
        final_balance=balance,
        total_paid_in=paid,
        profit=balance - paid,
        yearly_snapshots=snapshots,
    )


def calculate_yearly_projection(request: YearlyProjectionRequest) -> YearlyProjection:
    return compute_yearly_projection(
        initial_balance=request.initial_balance,
        monthly_contribution=request.monthly_contribution,
        years=request.years,
        annual_return_pct=request.annual_return_pct,
        convention=request.convention,
    )
