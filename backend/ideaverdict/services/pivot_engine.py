"""Pivot Recommendation Engine.

Suggests up to four alternative business concepts for a weak idea.

Pipeline
--------
1. Candidate set from the catalog of the detected archetype
   (Mobile-App narrowed by sub-type, SaaS-B2B split into enterprise vs
   generic by enterprise language).
2. Artisan filter: craft/handmade language removes fintech and
   healthcare candidates regardless of the detected archetype.
3. Artisan merge: physical-product ideas with artisan language gain
   hand-authored artisan options (deduplicated by id).
4. Each candidate is scored from its six factors; only uplift >= 15
   survives; ranking is ``overall + 10 * skill_match``.

Rules
-----
- NO API calls
- Catalog entries are never mutated
"""

from __future__ import annotations

import re
from typing import Dict, FrozenSet, List, Optional, Sequence

from ..schemas.pivot_schema import (
    BusinessModelClassification,
    BusinessModelType,
    CategoryPivotOption,
    ContextualPivot,
    HealthcarePivotAnalysis,
    InvalidPivot,
    MarketSnapshot,
    PivotRequest,
    PivotResponse,
    PivotScore,
    PivotValidation,
    ScoringFactors,
    UserProfile,
)
from .model_type_detector import constraints_for_model, detect_business_model_type, has_enterprise_signal
from .pivot_catalog import (
    ALL_PIVOTS,
    ARTISAN_PIVOT_IDS,
    ARTISAN_PIVOTS,
    CATALOG_BY_TYPE,
    ENTERPRISE_SAAS_PIVOTS,
    MOBILE_APP_PIVOTS,
    SAAS_PIVOTS,
)
from .scoring_engine import round_half_up

T = BusinessModelType

FACTOR_WEIGHTS: Dict[str, float] = {
    "problem": 0.2,
    "underserved": 0.15,
    "demand": 0.25,
    "differentiation": 0.15,
    "economics": 0.15,
    "gtm": 0.1,
}

MIN_PIVOT_UPLIFT = 15
MIN_HEALTHCARE_UPLIFT = 10
MAX_PIVOTS = 4
SKILL_RANK_WEIGHT = 10
DEFAULT_SKILL_MATCH = 0.5

# ---------------------------------------------------------------------------
# Mobile sub-vertical curation
# ---------------------------------------------------------------------------

_MOBILE_GENERIC_IDS = frozenset({"mobile.habit-tracker", "mobile.creator-video-tools", "mobile.offline-field-data"})

MOBILE_PIVOT_IDS: Dict[str, FrozenSet[str]] = {
    "fitness-wellness": frozenset(
        {
            "mobile.habit-tracker",
            "mobile.corporate-wellness-b2b2c",
            "mobile.physical-therapy-rehab",
            "mobile.senior-fitness-fall-prevention",
            "mobile.youth-sports-training",
            "mobile.prenatal-postpartum-fitness",
        }
    ),
    "mental-wellness": frozenset({"mobile.habit-tracker", "mobile.corporate-wellness-b2b2c"}),
    "productivity": frozenset({"mobile.habit-tracker", "mobile.offline-field-data"}),
}

# ---------------------------------------------------------------------------
# Artisan context
# ---------------------------------------------------------------------------

_ARTISAN_SIGNALS = re.compile(r"(handmade|leather|artisan|craft|crafted|bespoke|custom)", re.IGNORECASE)
_FINANCE_LABEL = re.compile(r"fintech|bank|payment|lending", re.IGNORECASE)
_HEALTH_LABEL = re.compile(r"clinic|therapy|care|patient|health", re.IGNORECASE)

# ---------------------------------------------------------------------------
# Compatibility tables
# ---------------------------------------------------------------------------

# Categories a pivot may belong to, per detected primary type
ALLOWED_PIVOT_CATEGORIES: Dict[BusinessModelType, FrozenSet[BusinessModelType]] = {
    T.ENTERPRISE_SAAS: frozenset({T.ENTERPRISE_SAAS, T.SERVICES, T.SAAS_B2B}),
    T.FOOD_SERVICE: frozenset({T.FOOD_SERVICE, T.SERVICES, T.DTC_SUBSCRIPTION}),
    T.PHYSICAL_PRODUCT: frozenset({T.PHYSICAL_PRODUCT, T.DTC_SUBSCRIPTION}),
    T.DTC_SUBSCRIPTION: frozenset({T.DTC_SUBSCRIPTION, T.PHYSICAL_PRODUCT}),
    T.MARKETPLACE: frozenset({T.MARKETPLACE, T.SERVICES}),
    # SaaS ideas with enterprise language draw from the enterprise catalog
    T.SAAS_B2B: frozenset({T.SAAS_B2B, T.SERVICES, T.ENTERPRISE_SAAS}),
    T.SERVICES: frozenset({T.SERVICES, T.SAAS_B2B}),
    T.MOBILE_APP: frozenset({T.MOBILE_APP, T.SAAS_B2B}),
    T.FINTECH: frozenset({T.FINTECH, T.SAAS_B2B}),
    T.HEALTHCARE: frozenset({T.HEALTHCARE, T.SAAS_B2B}),
    T.EDTECH: frozenset({T.EDTECH, T.SAAS_B2B}),
}

# Related categories accepted by the healthcare-validated path
RELATED_CATEGORIES: Dict[BusinessModelType, FrozenSet[BusinessModelType]] = {
    T.ENTERPRISE_SAAS: frozenset({T.SAAS_B2B, T.HEALTHCARE, T.FINTECH}),
    T.FOOD_SERVICE: frozenset({T.DTC_SUBSCRIPTION, T.SERVICES}),
    T.HEALTHCARE: frozenset({T.SAAS_B2B}),
    T.FINTECH: frozenset({T.SAAS_B2B}),
    T.EDTECH: frozenset({T.SAAS_B2B, T.FINTECH}),
    T.DTC_SUBSCRIPTION: frozenset({T.PHYSICAL_PRODUCT}),
    T.PHYSICAL_PRODUCT: frozenset({T.DTC_SUBSCRIPTION}),
    T.MARKETPLACE: frozenset({T.SERVICES}),
    T.SERVICES: frozenset({T.MARKETPLACE, T.SAAS_B2B, T.FOOD_SERVICE}),
    T.SAAS_B2B: frozenset({T.HEALTHCARE, T.FINTECH, T.EDTECH}),
    T.MOBILE_APP: frozenset({T.SAAS_B2B}),
}


# =============================================================================
# Scoring
# =============================================================================

def calculate_overall_score(factors: ScoringFactors) -> int:
    """Weighted blend of the six 0-100 factors, rounded half up."""
    weighted = sum(getattr(factors, name) * weight for name, weight in FACTOR_WEIGHTS.items())
    return int(round_half_up(weighted))


def calculate_skill_match(required: Sequence[str], user_skills: Optional[Sequence[str]]) -> float:
    """Fraction of *required* skills found (by substring) in *user_skills*.

    0.5 when the user supplied no skills; 0.0 when the option lists none.
    """
    if not user_skills:
        return DEFAULT_SKILL_MATCH
    if not required:
        return 0.0
    lowered = [skill.lower() for skill in user_skills]
    matches = [r for r in required if any(r.lower() in skill for skill in lowered)]
    return len(matches) / len(required)


def _score_option(option: CategoryPivotOption, current_score: float, skills: Optional[Sequence[str]]) -> PivotScore:
    overall = calculate_overall_score(option.scoring_factors)
    return PivotScore(
        option=option,
        overall=overall,
        delta=overall - current_score,
        skill_match=calculate_skill_match(option.relevant_skills, skills),
    )


# =============================================================================
# Candidate selection
# =============================================================================

def pivots_for_business_model(model: BusinessModelType) -> List[CategoryPivotOption]:
    """The full catalog for *model* (empty for an unknown type)."""
    return list(CATALOG_BY_TYPE.get(model, ()))


def _mobile_candidates(sub_type: Optional[str]) -> List[CategoryPivotOption]:
    wanted = MOBILE_PIVOT_IDS.get(sub_type or "", _MOBILE_GENERIC_IDS)
    return [p for p in MOBILE_APP_PIVOTS if p.id in wanted]


def _candidates(text: str, classification: BusinessModelClassification) -> List[CategoryPivotOption]:
    primary = classification.primary_type
    if primary == T.SAAS_B2B:
        return list(ENTERPRISE_SAAS_PIVOTS if has_enterprise_signal(text) else SAAS_PIVOTS)
    if primary == T.MOBILE_APP:
        return _mobile_candidates(classification.sub_type)
    if primary in CATALOG_BY_TYPE:
        return pivots_for_business_model(primary)
    return list(ALL_PIVOTS)


def has_artisan_signals(text: str) -> bool:
    return bool(_ARTISAN_SIGNALS.search(text or ""))


def _is_regulated_mismatch(option: CategoryPivotOption) -> bool:
    return bool(
        _FINANCE_LABEL.search(option.label)
        or option.category == T.FINTECH
        or _HEALTH_LABEL.search(option.label)
        or option.category == T.HEALTHCARE
    )


def _apply_artisan_context(
    candidates: List[CategoryPivotOption], classification: BusinessModelClassification, text: str
) -> List[CategoryPivotOption]:
    if not has_artisan_signals(text):
        return candidates

    candidates = [p for p in candidates if not _is_regulated_mismatch(p)]
    if classification.primary_type == T.PHYSICAL_PRODUCT:
        seen = {p.id for p in candidates}
        candidates += [p for p in ARTISAN_PIVOTS if p.id not in seen]
        candidates = [p for p in candidates if not _is_regulated_mismatch(p)]
    return candidates


# =============================================================================
# Public API
# =============================================================================

def recommend_pivots(
    idea_text: str,
    current_score: float,
    classification: BusinessModelClassification,
    user_profile: Optional[UserProfile] = None,
) -> List[PivotScore]:
    """Up to four pivots with uplift >= 15, best first."""
    text = (idea_text or "").lower()
    candidates = _apply_artisan_context(_candidates(text, classification), classification, text)
    skills = user_profile.skills if user_profile else None

    scored = [_score_option(option, current_score, skills) for option in candidates]
    kept = [p for p in scored if p.delta >= MIN_PIVOT_UPLIFT]
    kept.sort(key=lambda p: p.overall + p.skill_match * SKILL_RANK_WEIGHT, reverse=True)

    print(
        f"🧭 [PIVOTS] {classification.primary_type.value}: "
        f"{len(candidates)} candidates, {len(kept)} above uplift, returning {min(len(kept), MAX_PIVOTS)}"
    )
    return kept[:MAX_PIVOTS]


def validate_healthcare_pivot_relevance(
    classification: BusinessModelClassification, option: CategoryPivotOption
) -> Optional[str]:
    """``None`` when *option* is relevant to *classification*, else the reason."""
    primary = classification.primary_type
    if option.category == primary or option.category in RELATED_CATEGORIES.get(primary, frozenset()):
        return None
    return f'Pivot category "{option.category.value}" not compatible with business model "{primary.value}"'


def healthcare_validated_pivots(idea_text: str, current_score: float) -> HealthcarePivotAnalysis:
    """Relevance-checked pivots with the lower uplift bar of 10."""
    classification = detect_business_model_type(idea_text)
    valid: List[PivotScore] = []
    invalid: List[InvalidPivot] = []

    for option in pivots_for_business_model(classification.primary_type):
        reason = validate_healthcare_pivot_relevance(classification, option)
        if reason is not None:
            invalid.append(InvalidPivot(option=option, reason=reason))
            continue
        scored = _score_option(option, current_score, None)
        if scored.delta >= MIN_HEALTHCARE_UPLIFT:
            valid.append(scored)

    valid.sort(key=lambda p: p.overall, reverse=True)
    return HealthcarePivotAnalysis(
        business_model=classification,
        valid_pivots=valid[:MAX_PIVOTS],
        invalid_pivots=invalid,
    )


def validate_pivot_recommendations(
    classification: BusinessModelClassification, pivots: Sequence[PivotScore]
) -> PivotValidation:
    """QA check of a pivot list. Never blocks a response."""
    primary = classification.primary_type
    allowed = ALLOWED_PIVOT_CATEGORIES.get(primary, frozenset({primary}))
    errors: List[str] = []

    for pivot in pivots:
        option = pivot.option
        if option.category not in allowed and option.id not in ARTISAN_PIVOT_IDS:
            errors.append(f'Pivot "{option.label}" category {option.category.value} not allowed for {primary.value}')
        if not option.tam or option.tam == "—":
            errors.append(f'Pivot "{option.label}" missing market data')
        if pivot.delta < MIN_PIVOT_UPLIFT:
            errors.append(f'Pivot "{option.label}" improvement too small: {pivot.delta:g}')

    return PivotValidation(is_valid=not errors, errors=errors)


def _classification_for(request: PivotRequest) -> BusinessModelClassification:
    if request.business_model_override is None:
        return detect_business_model_type(request.idea_text)
    override = BusinessModelType(request.business_model_override)
    return BusinessModelClassification(
        primary_type=override,
        confidence=1.0,
        indicators=["caller override"],
        constraints=constraints_for_model(override),
        reasoning_chain=[f"Business model supplied by caller: {override.value}"],
    )


def to_contextual_pivot(pivot: PivotScore) -> ContextualPivot:
    option = pivot.option
    return ContextualPivot(
        id=option.id,
        category=option.category,
        label=option.label,
        description=option.description,
        overall=pivot.overall,
        delta=pivot.delta,
        market_snapshot=MarketSnapshot(
            tam=option.tam,
            growth=option.growth,
            competition=option.competition,
            competitors=list(option.major_competitors),
        ),
        scoring_breakdown=option.scoring_factors,
        barriers=list(option.barriers),
        opportunities=list(option.opportunities),
        skill_match=pivot.skill_match,
    )


def generate_contextual_pivots(request: PivotRequest) -> PivotResponse:
    """Pivot list shaped for direct rendering."""
    classification = _classification_for(request)
    pivots = recommend_pivots(
        request.idea_text,
        request.current_score,
        classification,
        request.user_profile,
    )
    return PivotResponse(
        business_model=classification,
        pivots=[to_contextual_pivot(p) for p in pivots],
        original_constraints=list(classification.constraints),
    )
