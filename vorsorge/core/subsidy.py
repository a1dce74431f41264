"""Tiered state subsidy (Zulage) on annual own contributions.

Subsidy is paid per euro of own contribution, in two bands:

* 0 – 1.200 €: 0,30 € per euro (2027–2028) or 0,35 € per euro (from 2029)
* 1.200 – 1.800 €: 0,20 € per euro

Each child adds 0,25 € per euro on the first 1.200 € (max. 300 € per child).
Contributions above 1.800 € still flow into the contract but earn nothing.
"""

from __future__ import annotations

import logging
from typing import Dict

from vorsorge.core.accumulation import clamp, non_negative
from vorsorge.schemas.subsidy import ContributionInput, RateTier, SubsidyResult

logger = logging.getLogger(__name__)

ELIGIBLE_CAP = 1800.0
TIER1_LIMIT = 1200.0
TIER2_WIDTH = ELIGIBLE_CAP - TIER1_LIMIT
TIER1_RATES: Dict[RateTier, float] = {
    RateTier.TIER_A: 0.30,
    RateTier.TIER_B: 0.35,
}
TIER2_RATE = 0.20
CHILD_RATE = 0.25
MAX_CHILDREN = 12
ONE_OFF_BONUS = 200.0


def compute_subsidy(
    annual_contribution: float,
    child_count: int = 0,
    rate_tier: RateTier = RateTier.TIER_A,
    bonus: bool = False,
) -> SubsidyResult:
    """Split the subsidy on ``annual_contribution`` into its components.

    Inputs are clamped, never rejected. The funding rate relates the total
    subsidy to the full own contribution, including any part above the cap.
    """
    own = non_negative(annual_contribution)
    children = int(clamp(child_count, 0, MAX_CHILDREN))

    eligible = min(own, ELIGIBLE_CAP)

    tier1_base = min(eligible, TIER1_LIMIT)
    tier2_base = min(max(eligible - TIER1_LIMIT, 0.0), TIER2_WIDTH)
    tier1 = tier1_base * TIER1_RATES[RateTier(rate_tier)]
    tier2 = tier2_base * TIER2_RATE
    base = tier1 + tier2

    # child subsidy stops at the tier-1 limit, not at the eligible cap
    per_child = min(eligible, TIER1_LIMIT) * CHILD_RATE
    child_total = per_child * children

    total = base + child_total
    was_capped = own > ELIGIBLE_CAP
    if was_capped:
        logger.debug("own contribution %.2f above eligible cap %.2f", own, ELIGIBLE_CAP)

    return SubsidyResult(
        own_contribution=own,
        eligible_amount=eligible,
        base_subsidy=base,
        tier1_subsidy=tier1,
        tier2_subsidy=tier2,
        child_subsidy_per_child=per_child,
        child_subsidy_total=child_total,
        total_subsidy=total,
        total_into_contract=own + total,
        funding_rate=total / own if own > 0 else 0.0,
        one_off_bonus=ONE_OFF_BONUS if bonus else 0.0,
        was_capped=was_capped,
    )


def calculate_subsidy(contribution: ContributionInput) -> SubsidyResult:
    return compute_subsidy(
        annual_contribution=contribution.annual_amount,
        child_count=contribution.child_count,
        rate_tier=contribution.rate_tier,
        bonus=contribution.early_career_bonus,
    )
