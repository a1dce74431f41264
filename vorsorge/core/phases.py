"""Two-phase contribution schedules.

Phase 1 accrues a subsidised monthly contribution; phase 2 (optional) carries
the phase-1 balance forward with a private-only contribution. Paid-in totals
are plain ``monthly * months`` sums, kept next to the compounded balances so
both can be shown side by side.
"""

from __future__ import annotations

import logging

from vorsorge.core.accumulation import (
    clamp,
    clamp_return_pct,
    compute_future_value,
    non_negative,
    whole_months,
)
from vorsorge.schemas.accumulation import ProjectionInput
from vorsorge.schemas.phases import (
    EarlyStartRequest,
    EarlyStartResult,
    PhasedScheduleInput,
    PhasedScheduleResult,
)

logger = logging.getLogger(__name__)

# Early-start pension: the state pays from the 6th to the 18th birthday.
EARLY_START_AGE = 6
PHASE_BOUNDARY_AGE = 18
MAX_STATE_CONTRIBUTION = 10.0
MAX_PRIVATE_CONTRIBUTION = 100000.0
MAX_TARGET_AGE = 100


def paid_in(monthly_contribution: float, months: float) -> float:
    """Sum of contributions without any returns."""
    return non_negative(monthly_contribution) * whole_months(months)


def compute_phased_schedule(schedule: PhasedScheduleInput) -> PhasedScheduleResult:
    """Chain the two phases into one balance trajectory.

    Without a second phase the final balance is the phase-1 balance. Return
    rates are clamped to the accepted range before compounding.
    """
    phase1 = schedule.phase1
    phase1_balance = compute_future_value(
        initial_balance=phase1.initial_balance,
        monthly_contribution=phase1.monthly_contribution,
        months=phase1.months,
        annual_return_pct=clamp_return_pct(phase1.annual_return_pct),
    )

    phase2 = schedule.phase2
    if phase2 is None:
        return PhasedScheduleResult(
            phase1_balance=phase1_balance,
            final_balance=phase1_balance,
            phase1_paid_in=paid_in(phase1.monthly_contribution, phase1.months),
            phase2_paid_in=0.0,
        )

    final_balance = compute_future_value(
        initial_balance=phase1_balance,
        monthly_contribution=phase2.monthly_contribution,
        months=phase2.months,
        annual_return_pct=clamp_return_pct(phase2.annual_return_pct),
    )
    logger.debug(
        "phase boundary balance %.2f, final balance %.2f after %s more months",
        phase1_balance,
        final_balance,
        phase2.months,
    )
    return PhasedScheduleResult(
        phase1_balance=phase1_balance,
        final_balance=final_balance,
        phase1_paid_in=paid_in(phase1.monthly_contribution, phase1.months),
        phase2_paid_in=paid_in(phase2.monthly_contribution, phase2.months),
    )


def compute_early_start(request: EarlyStartRequest) -> EarlyStartResult:
    """Project the early-start pension from age 6 to 18 and optionally beyond."""
    birth_year = int(clamp(request.birth_year, 1900, 2100))
    months_contributed = (PHASE_BOUNDARY_AGE - EARLY_START_AGE) * 12

    state = clamp(request.monthly_state, 0.0, MAX_STATE_CONTRIBUTION)
    private = clamp(request.monthly_private, 0.0, MAX_PRIVATE_CONTRIBUTION)
    rate = clamp_return_pct(request.annual_return_pct)

    target_age = clamp(request.grow_to_age, PHASE_BOUNDARY_AGE, MAX_TARGET_AGE)
    if request.continue_after_18:
        extra_months = whole_months((target_age - PHASE_BOUNDARY_AGE) * 12)
        private_after = clamp(request.private_after_18, 0.0, MAX_PRIVATE_CONTRIBUTION)
    else:
        extra_months = 0
        private_after = 0.0

    phase1 = ProjectionInput(
        monthly_contribution=state + private,
        months=months_contributed,
        annual_return_pct=rate,
        initial_balance=0.0,
    )
    phase2 = None
    if extra_months:
        phase2 = ProjectionInput(
            monthly_contribution=private_after,
            months=extra_months,
            annual_return_pct=rate,
        )
    schedule = compute_phased_schedule(PhasedScheduleInput(phase1=phase1, phase2=phase2))

    return EarlyStartResult(
        birth_year=birth_year,
        start_age=EARLY_START_AGE,
        end_age=PHASE_BOUNDARY_AGE,
        start_year=birth_year + EARLY_START_AGE,
        end_year=birth_year + PHASE_BOUNDARY_AGE,
        months_contributed=months_contributed,
        annual_return_pct=rate,
        monthly_state=state,
        monthly_private=private,
        total_monthly_phase1=state + private,
        total_state_paid=state * months_contributed,
        total_private_paid_phase1=private * months_contributed,
        continue_after_18=request.continue_after_18,
        target_age=target_age,
        extra_months=extra_months,
        private_after_18=private_after,
        total_private_paid_phase2=schedule.phase2_paid_in,
        capital_at_boundary=schedule.phase1_balance,
        capital_at_target=schedule.final_balance,
    )
