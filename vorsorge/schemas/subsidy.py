"""Data contracts for the tiered subsidy (Zulage) calculator."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RateTier(str, Enum):
    """Regulatory period selecting the tier-1 matching rate."""

    TIER_A = "2027_2028"
    TIER_B = "from_2029"


class ContributionInput(BaseModel):
    """Own contribution and household facts that drive the subsidy."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    annual_amount: float = Field(1200.0, description="Own contribution per year.")
    child_count: int = Field(0, description="Children eligible for the child subsidy, clamped to [0, 12].")
    rate_tier: RateTier = RateTier.TIER_A
    early_career_bonus: bool = Field(False, description="Grants the one-off bonus for contracts opened before 25.")


class SubsidyResult(BaseModel):
    """Breakdown of the subsidy earned on one year of own contributions."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    own_contribution: float
    eligible_amount: float
    base_subsidy: float
    tier1_subsidy: float
    tier2_subsidy: float
    child_subsidy_per_child: float
    child_subsidy_total: float
    total_subsidy: float
    total_into_contract: float
    funding_rate: float = Field(..., ge=0)
    one_off_bonus: float
    was_capped: bool
