"""Data contracts for the yearly compounding projection."""

from typing import List

from pydantic import BaseModel, ConfigDict, Field

from vorsorge.schemas.accumulation import RateConvention


class YearlyProjectionRequest(BaseModel):
    """Inputs for a month-by-month simulation with a yearly trace."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    initial_balance: float = 0.0
    monthly_contribution: float = 100.0
    years: float = Field(30, description="Term in years, clamped to [0, 80].")
    annual_return_pct: float = 6.0
    convention: RateConvention = RateConvention.EFFECTIVE


class YearlySnapshot(BaseModel):
    """State of the simulation at the end of a completed year."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    year_index: int = Field(..., ge=1)
    cumulative_paid_in: float
    end_of_year_balance: float


class YearlyProjection(BaseModel):
    model_config = ConfigDict(extra="forbid", frozen=True)

    final_balance: float
    total_paid_in: float
    profit: float
    yearly_snapshots: List[YearlySnapshot]
