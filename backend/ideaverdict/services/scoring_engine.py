"""Deterministic Scoring Engine.

Converts raw validation signals, market data and a weight vector into
ten base dimension scores (0-10), up to four conditional dimension
scores, and an overall score (0-100).

Reality checks
--------------
- Saturation: literal category phrases ("project management", "crm",
  "email marketing") or a SaaS productivity DNA cap market_quality at
  2 (>= 90% saturation) or 4 (>= 75%).
- Differentiation: more than three generic feature mentions without
  novelty language cap differentiation at 1.
- Distribution: a saturated or incumbent-heavy category with generic
  features caps gtm at 2.

Rules
-----
- NO API calls
- NO LLMs
- Each blend's sub-weights sum to 1.0
- Pure deterministic math
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Dict, List, Optional

from .. import constants as C
from ..schemas.dna_schema import BusinessDNA, MarketIntelligence
from ..schemas.validation_schema import ScoreCard, ValidationInput
from .pattern_matcher import contains_any, count_hits
from .weighting_engine import IndustryWeights


def clamp(value: float, lo: float = 0.0, hi: float = 10.0) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round halves away from zero for positive values (``Math.round`` style).

    Python's ``round`` uses banker's rounding, which would turn 64.5
    into 64.
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


def _nz(value: Optional[float], default: float = 0.0) -> float:
    """Numeric value or *default* when missing / NaN."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if math.isnan(value):
        return default
    return float(value)


def _signal(value: Optional[float]) -> float:
    return clamp(_nz(value, 0))


@dataclass
class ComputedScores:
    problem: float
    underserved: float
    feasibility: float
    differentiation: float
    demand_signals: float
    wtp: float
    market_quality: float
    gtm: float
    execution: float
    risk: float
    network_effects: Optional[float] = None
    regulatory_compliance: Optional[float] = None
    supply_demand_balance: Optional[float] = None
    viral_potential: Optional[float] = None
    overall: int = 0

    def get(self, dimension: str) -> Optional[float]:
        return getattr(self, dimension, None)

    def as_dict(self) -> Dict[str, float]:
        return {k: v for k, v in asdict(self).items() if v is not None}

    def to_scorecard(self) -> ScoreCard:
        """Public score card: dimensions rounded to 1 decimal, wtp renamed."""
        values = {
            ("willingness_to_pay" if k == "wtp" else k): (v if k == "overall" else round_half_up(v, 1))
            for k, v in self.as_dict().items()
        }
        return ScoreCard(**values)


@dataclass
class SaturationProfile:
    saturation: int
    major_competitors: List[str] = field(default_factory=list)
    red_flags: List[str] = field(default_factory=list)


# =============================================================================
# Reality checks
# =============================================================================

def detect_market_saturation(idea_text: str, dna: BusinessDNA) -> SaturationProfile:
    text = (idea_text or "").lower()
    for term, saturation, competitors, red_flags in C.SATURATED_CATEGORIES:
        if term in text:
            return SaturationProfile(saturation, list(competitors), list(red_flags))
    if dna.industry == "saas" and contains_any(text, ("management", "productivity")):
        return SaturationProfile(C.SAAS_PRODUCTIVITY_SATURATION)
    return SaturationProfile(C.DEFAULT_SATURATION)


def real_opportunity(idea_text: str) -> float:
    """Demand-vs-supply ceiling for market quality."""
    text = (idea_text or "").lower()
    for term, cap in C.REAL_OPPORTUNITY_CAPS:
        if term in text:
            return cap
    return C.DEFAULT_REAL_OPPORTUNITY


def assess_differentiation(idea_text: str) -> float:
    """1 for a generic feature list without novelty claims, else 5."""
    text = (idea_text or "").lower()
    if count_hits(text, C.GENERIC_FEATURES) > 3 and not contains_any(text, C.NOVELTY_TERMS):
        return 1
    return 5


def score_tam(tam_usd: float, dna: BusinessDNA) -> float:
    billions = tam_usd / 1_000_000_000
    if dna.scale == "global":
        tiers = ((100, 10), (50, 8), (20, 6))
        floor = 4
    elif dna.scale == "national":
        tiers = ((10, 10), (5, 8), (1, 6))
        floor = 4
    else:
        tiers = ((1, 10), (0.5, 8))
        floor = 6
    for threshold, score in tiers:
        if billions > threshold:
            return score
    return floor


def score_growth_rate(growth_rate: float) -> float:
    for threshold, score in ((0.20, 10), (0.15, 8), (0.10, 6), (0.05, 4)):
        if growth_rate > threshold:
            return score
    return 2


# =============================================================================
# Dimension blends
# =============================================================================

def _base_scores(inp: ValidationInput) -> Dict[str, float]:
    text = (inp.idea_text or "").lower()
    attr = inp.attributes

    problem = (
        _signal(inp.unavoidable) * 0.35
        + _signal(inp.urgency) * 0.25
        + _signal(inp.pain_gain_ratio) * 0.25
        + _signal(inp.whitespace) * 0.15
    )

    def a(name: str) -> float:
        return _nz(getattr(attr, name, None) if attr else None, 0)

    attr_diff = (
        a("Disruptive") * 0.35
        + a("Defensible") * 0.35
        + a("Discontinuous") * 0.15
        + ((a("SocialNeed") + a("Growth") + a("Achievement")) / 3) * 0.15
    )
    differentiation = _signal(inp.competition_density) * 0.5 + clamp(attr_diff) * 0.5
    differentiation = min(differentiation, assess_differentiation(text))

    interviews_n = _nz(inp.interviews, 0)
    interviews = clamp(6 if interviews_n >= 10 else interviews_n / 2)
    positive = clamp(round_half_up(_nz(inp.interviews_positive_pct, 0) / 10))
    waitlist = clamp(round_half_up(_nz(inp.waitlist_conv_rate_pct, 0) / 10))
    lois_n = _nz(inp.lois, 0)
    lois = clamp(6 if lois_n > 5 else lois_n)
    preorders_n = _nz(inp.preorders, 0)
    preorders = clamp(10 if preorders_n > 20 else preorders_n / 2)
    demand_signals = clamp(
        interviews * 0.25 + positive * 0.2 + waitlist * 0.25 + lois * 0.15 + preorders * 0.15
    )

    wtp = clamp(
        _signal(inp.willingness_to_pay) * 0.7
        + clamp(7 if _nz(inp.price_point, 0) > 0 else 0) * 0.3
    )

    ltv = _nz(inp.ltv_estimate, 0)
    cac = _nz(inp.cac_estimate, 0)
    if ltv > 0 and cac > 0:
        unit_economics = 9 if ltv / cac >= 3 else 2
    else:
        unit_economics = 5
    gtm = clamp(_signal(inp.channels_clarity) * 0.6 + unit_economics * 0.4)
    if "project management" in text:
        gtm = min(gtm, 3)

    runway = _nz(inp.capital_runway_months, 0)
    execution = clamp(
        _signal(inp.team_experience) * 0.7 + clamp(8 if runway >= 6 else runway / 2) * 0.3
    )

    risk = clamp(
        10
        - (
            _nz(inp.regulatory_risk, 0) * 0.5
            + _nz(inp.platform_dependency_risk, 0) * 0.25
            + _nz(inp.safety_risk, 0) * 0.25
        )
    )

    return {
        "problem": problem,
        "underserved": _signal(inp.underserved),
        "feasibility": _signal(inp.feasibility),
        "differentiation": differentiation,
        "demand_signals": demand_signals,
        "wtp": wtp,
        "gtm": gtm,
        "execution": execution,
        "risk": risk,
    }


def _market_quality(inp: ValidationInput, market: MarketIntelligence, dna: BusinessDNA) -> float:
    research_weight = clamp(_nz(inp.market_data_weight, 0.6), 0, 1)
    tam_blend = _nz(inp.tam_quality, 5) * (1 - research_weight) + score_tam(market.tam_usd, dna) * research_weight
    growth_blend = (
        _nz(inp.growth_rate_quality, 5) * (1 - research_weight)
        + score_growth_rate(market.growth_rate) * research_weight
    )
    mq = clamp(tam_blend * 0.5 + growth_blend * 0.3 + market.competition_level * 0.2)

    saturation = detect_market_saturation(inp.idea_text, dna).saturation
    if saturation >= 90:
        mq = min(mq, 2)
    elif saturation >= 75:
        mq = min(mq, 4)
    mq = min(mq, real_opportunity(inp.idea_text))
    return clamp(mq)


def _network_potential(dna: BusinessDNA) -> float:
    return {"strong": 8, "weak": 5}.get(dna.network_effects, 2)


def _conditional_scores(
    inp: ValidationInput, dna: BusinessDNA, market: MarketIntelligence
) -> Dict[str, float]:
    attr = inp.attributes
    growth = (attr.Growth if attr else None) or 0
    recognition = (attr.Recognition if attr else None) or 0
    social = (attr.SocialNeed if attr else None) or 0

    scores: Dict[str, float] = {}
    if dna.customer_type == "marketplace":
        demand = _nz(inp.interviews, 0) + _nz(inp.waitlist_signups, 0)
        scores["supply_demand_balance"] = clamp(
            (8 if demand > 20 else 4) + _nz(inp.feasibility, 5) * 0.6
        )
        if dna.network_effects == "strong":
            scores["network_effects"] = clamp(7 + (growth + recognition) * 0.3)
        else:
            scores["network_effects"] = clamp(5 if dna.network_effects == "weak" else 2)

    if dna.regulatory_complexity == "high":
        scores["regulatory_compliance"] = clamp(
            (10 - _nz(inp.regulatory_risk, 5)) * 0.4
            + _nz(inp.team_experience, 5) * 0.4
            + clamp(10 - len(market.regulatory_barriers)) * 0.2
        )

    if dna.network_effects != "none":
        scores["viral_potential"] = clamp(
            ((recognition + growth + social) / 3) * 0.6 + _network_potential(dna) * 0.4
        )
    return scores


def weighted_overall(scores: Dict[str, float], weights: IndustryWeights) -> int:
    """Weighted average over dimensions present in both maps, scaled to 0-100."""
    total_score = 0.0
    total_weight = 0.0
    for dimension, weight in weights.items():
        score = scores.get(dimension)
        if score is None:
            continue
        total_score += score * weight
        total_weight += weight
    if total_weight <= 0:
        return 0
    return int(round_half_up(total_score / total_weight * 10))


def compute_scores(
    inp: ValidationInput,
    dna: BusinessDNA,
    market: MarketIntelligence,
    weights: IndustryWeights,
) -> ComputedScores:
    """Score one idea.

    Parameters
    ----------
    inp : ValidationInput
        Raw signals; missing values fall back to neutral defaults.
    dna : BusinessDNA
        Decides which conditional dimensions apply.
    market : MarketIntelligence
        Research data blended into market quality.
    weights : IndustryWeights
        Unnormalized weights; normalized over present dimensions.
    """
    scores = _base_scores(inp)
    scores["market_quality"] = _market_quality(inp, market, dna)
    scores.update(_conditional_scores(inp, dna, market))

    saturation = detect_market_saturation(inp.idea_text, dna)
    if (saturation.saturation >= 90 or len(saturation.major_competitors) >= 3) and assess_differentiation(
        inp.idea_text
    ) <= 2:
        scores["gtm"] = min(scores["gtm"], 2)

    overall = weighted_overall(scores, weights)
    print(f"📊 [SCORING] overall={overall} dims={len(scores)} saturation={saturation.saturation}%")
    return ComputedScores(**scores, overall=overall)
