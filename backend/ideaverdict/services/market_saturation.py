"""Market Saturation.

Two views of market saturation:

- ``assess_market_saturation``: looks an idea up in a small database of
  known saturated markets and returns a score penalty when saturation
  exceeds 80%.
- ``MarketSaturationConstraints``: models paid-acquisition response per
  business-model type with a Hill function
  ``alpha * s**gamma / (beta**gamma + s**gamma)``.

Rules
-----
- NO API calls
- Pure deterministic math
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional


def _clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


# ===================================================================== #
#  Saturation database                                                    #
# ===================================================================== #

MARKET_SATURATION_DB: Dict[str, Dict] = {
    "project management": {
        "saturation": 95,
        "major_competitors": ["Asana", "Monday.com", "Notion", "Trello", "ClickUp"],
        "typical_cac": 1200,
        "reasoning": "Dominated by billion-dollar incumbents with free alternatives",
    },
    "crm": {
        "saturation": 90,
        "major_competitors": ["Salesforce", "HubSpot", "Pipedrive"],
        "typical_cac": 800,
        "reasoning": "Mature market with established enterprise relationships",
    },
    "email marketing": {
        "saturation": 85,
        "major_competitors": ["Mailchimp", "Constant Contact", "SendGrid"],
        "typical_cac": 300,
        "reasoning": "Commoditized with strong network effects",
    },
}

PENALTY_SATURATION_THRESHOLD = 80
PENALTY_MAX_SCORE = 25

_NON_ALNUM = re.compile(r"[^a-z0-9\s]")


@dataclass(frozen=True)
class SaturationPenalty:
    max_score: int
    reasoning: str
    competitors: List[str]
    recommended_cac: int
    saturation: int


def _extract_keywords(idea: str) -> List[str]:
    return _NON_ALNUM.sub(" ", (idea or "").lower()).split()


def _find_market_match(keywords: List[str]) -> Optional[str]:
    keyword_set = set(keywords)
    best: Optional[str] = None
    best_score = 0
    for market in MARKET_SATURATION_DB:
        score = sum(1 for kw in market.split() if kw in keyword_set)
        if score > best_score:
            best, best_score = market, score
    return best


def assess_market_saturation(idea: str) -> Optional[SaturationPenalty]:
    """Penalty for a known saturated market, or ``None``."""
    market = _find_market_match(_extract_keywords(idea))
    if market is None:
        return None
    data = MARKET_SATURATION_DB[market]
    if data["saturation"] <= PENALTY_SATURATION_THRESHOLD:
        return None
    return SaturationPenalty(
        max_score=PENALTY_MAX_SCORE,
        reasoning=data["reasoning"],
        competitors=list(data["major_competitors"]),
        recommended_cac=data["typical_cac"],
        saturation=data["saturation"],
    )


# ===================================================================== #
#  Hill-function constraint model                                         #
# ===================================================================== #

@dataclass(frozen=True)
class MarketContext:
    spend_index: float
    saturation_pct: float
    demand_elasticity: Optional[float] = None


@dataclass(frozen=True)
class SaturationParameters:
    alpha: float
    beta: float
    gamma: float


@dataclass
class SaturationModel:
    alpha_cap: float
    beta_inflection: float
    gamma_shape: float
    constraint_function: Callable[[float], float] = field(repr=False)


MODEL_PARAMETERS: Dict[str, SaturationParameters] = {
    "saas": SaturationParameters(1.2, 0.8, 2.1),
    "marketplace": SaturationParameters(1.5, 1.2, 1.8),
    "ecommerce": SaturationParameters(1.1, 0.6, 2.3),
    "services": SaturationParameters(0.95, 0.9, 1.7),
    "physical-subscription": SaturationParameters(1.05, 0.7, 2.0),
    "unknown": SaturationParameters(1.0, 1.0, 2.0),
}
_DEFAULT_PARAMETERS = SaturationParameters(1.0, 1.0, 2.0)

# Paid-channel dynamics make ecommerce and physical subscriptions steeper
_SATURATION_RATES: Dict[str, float] = {
    "ecommerce": 2.3,
    "physical-subscription": 2.1,
    "marketplace": 1.8,
    "services": 1.7,
    "saas": 2.0,
}


def hill_response(spend: float, params: SaturationParameters) -> float:
    num = params.alpha * spend ** params.gamma
    den = params.beta ** params.gamma + spend ** params.gamma
    if den == 0:
        return 0.0
    return _clamp(num / den, 0.0, 1.0)


class MarketSaturationConstraints:
    """Per-model saturation caps for paid acquisition."""

    def calculate_saturation_cap(self, business_model: str, context: MarketContext) -> SaturationModel:
        params = MODEL_PARAMETERS.get(business_model, _DEFAULT_PARAMETERS)
        return SaturationModel(
            alpha_cap=self._max_response(context, params),
            beta_inflection=self._inflection_point(context),
            gamma_shape=_SATURATION_RATES.get(business_model, 2.0),
            constraint_function=lambda spend: hill_response(spend, params),
        )

    @staticmethod
    def _max_response(context: MarketContext, params: SaturationParameters) -> float:
        if context.demand_elasticity is None:
            elasticity = 1.0
        else:
            elasticity = _clamp(context.demand_elasticity, 0.3, 1.0)
        sat = _clamp(context.saturation_pct, 0, 100)
        if sat >= 95:
            penalty = 0.5
        elif sat >= 90:
            penalty = 0.65
        elif sat >= 80:
            penalty = 0.8
        else:
            penalty = 1.0
        return _clamp(params.alpha * elasticity * penalty, 0.3, 1.0)

    @staticmethod
    def _inflection_point(context: MarketContext) -> float:
        sat = _clamp(context.saturation_pct, 0, 100)
        adjustment = 1.4 if sat >= 90 else 1.2 if sat >= 80 else 1.0
        return round(adjustment + (0.1 if context.spend_index > 1 else 0.0), 3)
