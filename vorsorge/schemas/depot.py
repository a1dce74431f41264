"""Data contracts for the pension-depot calculator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from vorsorge.schemas.subsidy import RateTier, SubsidyResult


class InputMode(str, Enum):
    MONTHLY = "monthly"
    YEARLY = "yearly"


class DepotRequest(BaseModel):
    """Own contribution, subsidy facts and investment assumptions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    amount: float = Field(100.0, description="Own contribution, per month or per year depending on input_mode.")
    input_mode: InputMode = InputMode.MONTHLY
    child_count: int = 0
    rate_tier: RateTier = RateTier.TIER_A
    early_career_bonus: bool = False
    annual_return_pct: float = 6.0
    years: float = 30


class DepotResult(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    subsidy: SubsidyResult
    own_monthly: float
    subsidy_monthly: float
    total_monthly: float
    months: int
    annual_return_pct: float
    final_balance: float
    total_paid_in: float
    profit: float
