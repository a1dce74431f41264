"""Data contracts for two-phase contribution schedules."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from vorsorge.schemas.accumulation import ProjectionInput


class PhasedScheduleInput(BaseModel):
    """A subsidised first phase, optionally followed by a private-only phase.

    The initial balance of ``phase2`` is ignored: the second phase always
    starts from the balance reached at the end of ``phase1``.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    phase1: ProjectionInput
    phase2: Optional[ProjectionInput] = None


class PhasedScheduleResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    phase1_balance: float
    final_balance: float
    phase1_paid_in: float
    phase2_paid_in: float


class EarlyStartRequest(BaseModel):
    """Inputs of the early-start pension (state contributions from age 6 to 18)."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    birth_year: int = 2020
    monthly_state: float = Field(10.0, description="State contribution per month, capped at 10.")
    monthly_private: float = 0.0
    continue_after_18: bool = False
    private_after_18: float = 0.0
    grow_to_age: float = 67
    annual_return_pct: float = 6.0


class EarlyStartResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    birth_year: int
    start_age: int
    end_age: int
    start_year: int
    end_year: int
    months_contributed: int
    annual_return_pct: float

    monthly_state: float
    monthly_private: float
    total_monthly_phase1: float

    total_state_paid: float
    total_private_paid_phase1: float

    continue_after_18: bool
    target_age: float
    extra_months: int
    private_after_18: float
    total_private_paid_phase2: float

    capital_at_boundary: float
    capital_at_target: float
