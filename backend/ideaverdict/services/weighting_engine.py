"""Weighting Engine.

Maps a ``BusinessDNA`` to an unnormalized dimension-weight vector and
explains the choice in human-readable form.

Dispatch (first match wins, each branch merged over the base weights):
marketplace customer -> high regulatory complexity -> SaaS industry ->
physical/DTC subscription -> strong network effects -> base.

Rules
-----
- NO API calls
- Weights are positive and need not sum to anything
- Pure deterministic lookup
"""

from __future__ import annotations

from typing import Callable, Dict, List

from .. import constants as C
from ..schemas.dna_schema import BusinessDNA, SelectedDimension, ValidationStrategy

IndustryWeights = Dict[str, float]


def _is_physical_subscription(dna: BusinessDNA) -> bool:
    return dna.business_model == "physical-subscription" or (
        dna.business_model == "subscription" and dna.industry in ("ecommerce", "food")
    )


_WEIGHT_BRANCHES: List[tuple[Callable[[BusinessDNA], bool], Dict[str, float]]] = [
    (lambda dna: dna.customer_type == "marketplace", C.MARKETPLACE_WEIGHTS),
    (lambda dna: dna.regulatory_complexity == "high", C.REGULATED_WEIGHTS),
    (lambda dna: dna.industry == "saas", C.SAAS_WEIGHTS),
    (_is_physical_subscription, C.PHYSICAL_SUBSCRIPTION_WEIGHTS),
    (lambda dna: dna.network_effects == "strong", C.NETWORK_EFFECT_WEIGHTS),
]


def get_industry_weights(dna: BusinessDNA) -> IndustryWeights:
    """Return the weight vector for *dna*."""
    for applies, overrides in _WEIGHT_BRANCHES:
        if applies(dna):
            return {**C.BASE_WEIGHTS, **overrides}
    return dict(C.BASE_WEIGHTS)


# ── Dimension rationales ──

def _market_reason(dna: BusinessDNA) -> str:
    if dna.scale == "global":
        return "Global scope raises TAM expectations and growth thresholds."
    if dna.customer_type == "b2b":
        return "B2B markets require clear ICP and reachable TAM."
    return "Right-sized TAM and healthy growth reduce go-to-market friction."


def _differentiation_reason(dna: BusinessDNA) -> str:
    if dna.customer_type == "marketplace":
        return "Defensibility hinges on liquidity, trust, and switching costs."
    return "Clear edge vs incumbents needed to win share and pricing power."


def _demand_reason(dna: BusinessDNA) -> str:
    if dna.industry == "beauty":
        return "Beauty requires early signals due to high competition and brand preference."
    return "Real user signals de-risk false positives from desk research."


def _wtp_reason(dna: BusinessDNA) -> str:
    if _is_physical_subscription(dna):
        return (
            "Unit economics hinge on COGS, shipping, and retention; "
            "prove contribution margin and <6 mo payback."
        )
    if dna.business_model == "subscription":
        return "Recurring revenue viability depends on willingness to pay and retention."
    return "Monetization confidence is critical before scale efforts."


def _gtm_reason(dna: BusinessDNA) -> str:
    if dna.customer_type == "b2b":
        return "Channel clarity and efficient unit economics drive sales productivity."
    return "Efficient acquisition is required to reach PMF before capital runs short."


def _feasibility_reason(dna: BusinessDNA) -> str:
    if dna.capital_intensity == "high":
        return "Capex and supply constraints raise feasibility bar."
    return "Build/ops feasibility must match available resources and timelines."


def _execution_reason(dna: BusinessDNA) -> str:
    if dna.regulatory_complexity == "high":
        return "Regulatory execution requires domain expertise and process rigor."
    return "Team readiness and runway determine iteration speed and risk."


_REASONS: Dict[str, Callable[[BusinessDNA], str]] = {
    "market_quality": _market_reason,
    "differentiation": _differentiation_reason,
    "demand_signals": _demand_reason,
    "wtp": _wtp_reason,
    "gtm": _gtm_reason,
    "feasibility": _feasibility_reason,
    "execution": _execution_reason,
    "risk": lambda _: "Lower regulatory/platform/safety risks increase investability and speed.",
}


def _benchmarks(dna: BusinessDNA) -> List[str]:
    benchmarks: List[str] = []
    if dna.industry == "saas":
        benchmarks += ["LTV/CAC >= 3", "Gross margin 70-80%", "Payback < 12 months", "Net retention"]
    if _is_physical_subscription(dna):
        benchmarks += [
            "Gross margin 50-65%",
            "Payback < 6 months",
            "Contribution margin after CAC",
            "Monthly churn < 8-10%",
        ]
    if dna.customer_type == "marketplace":
        benchmarks += ["Liquidity (time-to-first-job)", "Take rate vs leakage", "Repeat rate by cohort"]
    if dna.industry in ("beauty", "ecommerce"):
        benchmarks += [
            "Contribution margin after CAC",
            "Conversion rate vs niche baseline",
            "CAC vs AOV vs repeat",
        ]
    if dna.regulatory_complexity == "high":
        benchmarks += ["Compliance milestones", "Audit requirements", "Data handling requirements"]
    return benchmarks


def describe_strategy(dna: BusinessDNA, weights: IndustryWeights) -> ValidationStrategy:
    """Explain which dimensions drive the verdict for *dna* and why."""
    selected = [
        SelectedDimension(
            key=key,
            label=C.DIMENSION_LABELS[key],
            weight=weights.get(key, 0),
            reason=reason(dna),
        )
        for key, reason in _REASONS.items()
    ]
    for key, reason in C.CONDITIONAL_DIMENSION_REASONS.items():
        if key in weights:
            selected.append(
                SelectedDimension(key=key, label=C.DIMENSION_LABELS[key], weight=weights[key], reason=reason)
            )

    return ValidationStrategy(
        selected_dimensions=sorted(
            (s for s in selected if s.weight > 0), key=lambda s: s.weight, reverse=True
        ),
        benchmarks_focus=_benchmarks(dna),
        data_quality_guards=[
            f"Use {dna.industry} sources only for TAM/growth",
            "Ignore benchmarks from unrelated models (e.g., SaaS metrics for skincare)",
            "Cross-check competition lists for category fit",
        ],
        notes=(
            f"Strategy tailored for {dna.industry} {dna.business_model} "
            f"({dna.customer_type.upper()}) at {dna.stage} stage."
        ),
    )
