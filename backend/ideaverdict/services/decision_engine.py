"""Decision Engine.

Turns computed scores into one of three terminal states
(GO / REVIEW / NO-GO) with reasoning, risks and highlights.

Evaluation order
----------------
1. Red flags; any *kill* flag returns NO-GO immediately.
2. Literal override for generic project-management tools.
3. Industry thresholds (go, review); REVIEW cites the two weakest areas.
4. Non-kill flags and QC advisories are appended to risks.
5. Highlights come from fixed per-dimension thresholds.

Rules
-----
- NO API calls
- Single evaluation, no retries
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, List, Tuple

from .. import constants as C
from ..schemas.dna_schema import BusinessDNA, MarketIntelligence
from ..schemas.validation_schema import RecommendationStatus, ValidationInput
from .scoring_engine import ComputedScores


@dataclass(frozen=True)
class DecisionContext:
    scores: ComputedScores
    dna: BusinessDNA
    market: MarketIntelligence
    input: ValidationInput

    @property
    def text(self) -> str:
        return (self.input.idea_text or "").lower()


@dataclass(frozen=True)
class RedFlag:
    id: str
    when: Callable[[DecisionContext], bool]
    message: str
    kill: bool = False


@dataclass(frozen=True)
class QCRule:
    id: str
    when: Callable[[DecisionContext], bool]
    message: str
    severity: str = "med"


@dataclass
class Decision:
    status: RecommendationStatus
    reasoning: str
    risks: List[str] = field(default_factory=list)
    highlights: List[str] = field(default_factory=list)


# =============================================================================
# Flag and rule tables
# =============================================================================

UNIVERSAL_FLAGS = [
    RedFlag("illegal", lambda ctx: bool(ctx.input.illegal_or_prohibited), "Illegal or prohibited domain", kill=True),
    RedFlag(
        "no-problem",
        lambda ctx: ctx.scores.problem < 3 and ctx.scores.underserved < 3,
        "No compelling problem identified",
        kill=True,
    ),
    RedFlag("impossible", lambda ctx: ctx.scores.feasibility < 2, "Not feasible with reasonable resources", kill=True),
]

FINTECH_FLAGS = [
    RedFlag(
        "regulatory-nightmare",
        lambda ctx: (ctx.input.regulatory_risk or 0) >= 8 and (ctx.input.team_experience or 0) < 4,
        "High regulatory risk without domain expertise",
        kill=True,
    ),
]

MARKETPLACE_FLAGS = [
    RedFlag(
        "chicken-egg-unsolved",
        lambda ctx: ctx.scores.supply_demand_balance is not None and ctx.scores.supply_demand_balance < 3,
        "No clear solution to marketplace chicken-and-egg problem",
    ),
]

MARKET_REALITY_FLAGS = [
    RedFlag(
        "incumbent-domination",
        lambda ctx: any(term in ctx.text for term in C.INCUMBENT_DOMINATED_TERMS),
        "Market dominated by billion-dollar incumbents with strong network effects",
    ),
    RedFlag(
        "generic-feature-set",
        lambda ctx: ctx.scores.differentiation < 3
        and (ctx.input.competition_density if ctx.input.competition_density is not None else 5) < 3,
        "Generic features in crowded market - unclear path to customer acquisition",
    ),
    RedFlag(
        "pricing-unrealistic",
        lambda ctx: "project management" in ctx.text and "$29" in ctx.text,
        "Pricing below market leaders suggests unsustainable unit economics",
    ),
]

BASE_QC_RULES = [
    QCRule("low-urgency", lambda ctx: ctx.scores.problem < 4, "Low customer urgency - validate problem intensity"),
    QCRule(
        "weak-demand",
        lambda ctx: ctx.scores.demand_signals < 5,
        "Insufficient demand validation - run more customer interviews",
        severity="high",
    ),
]

SUBSCRIPTION_QC_RULES = [
    QCRule(
        "subscription-retention-risk",
        lambda ctx: ctx.scores.wtp < 6 and ctx.scores.problem < 7,
        "Subscription model requires strong value proposition",
        severity="high",
    ),
]

NETWORK_QC_RULES = [
    QCRule(
        "network-effects-strategy",
        lambda ctx: ctx.scores.viral_potential is not None and ctx.scores.viral_potential < 5,
        "Network business needs clearer viral/growth strategy",
    ),
]

PM_OVERRIDE_REASONING = (
    "Entering oversaturated market against billion-dollar incumbents with generic "
    "feature set and lower pricing. No clear differentiation or customer acquisition "
    "advantage identified."
)


def red_flags_for(dna: BusinessDNA) -> List[RedFlag]:
    flags = list(UNIVERSAL_FLAGS)
    if dna.industry == "fintech":
        flags += FINTECH_FLAGS
    if dna.customer_type == "marketplace":
        flags += MARKETPLACE_FLAGS
    return flags + MARKET_REALITY_FLAGS


def qc_rules_for(dna: BusinessDNA) -> List[QCRule]:
    rules = list(BASE_QC_RULES)
    if dna.business_model == "subscription":
        rules += SUBSCRIPTION_QC_RULES
    if dna.network_effects == "strong":
        rules += NETWORK_QC_RULES
    return rules


def evaluate_red_flags(
    scores: ComputedScores,
    dna: BusinessDNA,
    market: MarketIntelligence,
    inp: ValidationInput,
) -> Tuple[List[RedFlag], List[RedFlag]]:
    """Return (triggered, killers) for one idea."""
    ctx = DecisionContext(scores, dna, market, inp)
    triggered = [flag for flag in red_flags_for(dna) if flag.when(ctx)]
    return triggered, [flag for flag in triggered if flag.kill]


def decision_thresholds(dna: BusinessDNA) -> Tuple[int, int]:
    return C.DECISION_THRESHOLDS.get(dna.industry, C.DEFAULT_DECISION_THRESHOLDS)


def weakest_areas(scores: ComputedScores, dna: BusinessDNA, limit: int = 2) -> List[str]:
    """The *limit* weakest areas, preferring those below their concern threshold."""
    candidates: List[Tuple[str, float, float]] = [
        ("problem urgency", scores.problem, 6),
        ("market opportunity", scores.market_quality, 6),
        ("demand validation", scores.demand_signals, 5),
        ("execution feasibility", scores.feasibility, 6),
        ("competitive differentiation", scores.differentiation, 5),
    ]
    if dna.customer_type == "marketplace" and scores.supply_demand_balance is not None:
        candidates.append(("marketplace dynamics", scores.supply_demand_balance, 6))
    if dna.regulatory_complexity == "high" and scores.regulatory_compliance is not None:
        candidates.append(("regulatory compliance", scores.regulatory_compliance, 6))

    weak = [c for c in candidates if c[1] < c[2]] or candidates
    return [name for name, _, _ in sorted(weak, key=lambda c: c[1])[:limit]]


def generate_highlights(scores: ComputedScores, dna: BusinessDNA) -> List[str]:
    highlights: List[str] = []
    if scores.problem >= 8:
        highlights.append("Strong problem-solution fit identified")
    if scores.market_quality >= 8:
        highlights.append(f"Attractive {dna.industry} market opportunity")
    if scores.demand_signals >= 7:
        highlights.append("Positive early demand indicators")
    if scores.differentiation >= 7:
        highlights.append("Clear competitive advantages")
    if scores.execution >= 8:
        highlights.append("Strong execution capability")
    if scores.network_effects is not None and scores.network_effects >= 8:
        highlights.append("Strong network effects potential")
    if scores.viral_potential is not None and scores.viral_potential >= 7:
        highlights.append("High viral growth potential")
    return highlights


def _recommend(ctx: DecisionContext) -> Tuple[RecommendationStatus, str]:
    scores, dna = ctx.scores, ctx.dna
    overall = scores.overall

    if "project management" in ctx.text and scores.market_quality <= 3 and scores.differentiation <= 2:
        return "NO-GO", PM_OVERRIDE_REASONING

    go, review = decision_thresholds(dna)
    if overall >= go:
        return "GO", (
            f"Strong validation across key dimensions with {overall}% overall score. "
            f"{dna.industry} market conditions favorable."
        )
    if overall >= review:
        return "REVIEW", f"Moderate potential ({overall}%) but address: {', '.join(weakest_areas(scores, dna))}"
    return "NO-GO", f"Significant challenges with {overall}% score. Consider pivot or alternative approach."


def make_decision(
    scores: ComputedScores,
    dna: BusinessDNA,
    market: MarketIntelligence,
    inp: ValidationInput,
) -> Decision:
    """Decide GO / REVIEW / NO-GO for one scored idea."""
    triggered, killers = evaluate_red_flags(scores, dna, market, inp)

    if killers:
        print(f"⚠️ [DECISION] Kill flags: {', '.join(k.id for k in killers)}")
        return Decision(
            status="NO-GO",
            reasoning="Critical issues identified: " + "; ".join(k.message for k in killers),
            risks=[flag.message for flag in triggered],
            highlights=[],
        )

    ctx = DecisionContext(scores, dna, market, inp)
    advisories = [rule for rule in qc_rules_for(dna) if rule.when(ctx)]
    status, reasoning = _recommend(ctx)
    print(f"✅ [DECISION] {status} (overall={scores.overall})")
    return Decision(
        status=status,
        reasoning=reasoning,
        risks=[flag.message for flag in triggered] + [rule.message for rule in advisories],
        highlights=generate_highlights(scores, dna),
    )
