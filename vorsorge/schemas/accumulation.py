"""Data contracts for future-value calculations."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class RateConvention(str, Enum):
    """How an annual return percentage is spread over monthly periods."""

    NOMINAL = "nominal"
    EFFECTIVE = "effective"


class ProjectionInput(BaseModel):
    """Inputs required to project a monthly contribution stream forward."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    monthly_contribution: float = Field(
        0.0,
        description="Contribution paid at the end of every month. Negative values count as 0.",
    )
    months: float = Field(0, description="Number of monthly periods; floored to a whole number.")
    annual_return_pct: float = Field(
        6.0,
        description="Annual return in whole percent (6 means 6 %). May be negative.",
    )
    initial_balance: float = Field(0.0, description="Balance at month 0. Negative values count as 0.")


class FutureValueRequest(ProjectionInput):
    """Projection inputs plus the rate convention to apply."""

    convention: RateConvention = RateConvention.NOMINAL


class FutureValueResponse(BaseModel):
    """Balance after the last monthly period."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    balance: float
