"""Hybrid Validation Service.

The default end-to-end pipeline for one idea:

    DNA -> market intelligence -> weights -> scores -> decision -> result

Each step is delegated to its own engine; this module only orchestrates
them and assembles the ``ValidationResult``.
"""

from __future__ import annotations

import logging
import uuid
from datetime import datetime, timezone
from typing import Optional

from .. import constants as C
from ..errors import ClassificationError
from ..schemas.dna_schema import BusinessDNA
from ..schemas.validation_schema import AttributeSignals, ValidationInput, ValidationResult
from .decision_engine import make_decision
from .dna_classifier import classify_business_dna
from .market_intelligence import MarketIntelligenceGatherer
from .quality_controller import cac_payback_months, check_for_warnings
from .scoring_engine import ComputedScores, compute_scores
from .weighting_engine import IndustryWeights, describe_strategy, get_industry_weights

logger = logging.getLogger(__name__)


def demo_input(idea_text: str) -> ValidationInput:
    """Conservative default signals for a bare idea description."""
    is_b2b = "business" in (idea_text or "").lower()
    return ValidationInput(
        idea_text=idea_text,
        b2x="B2B" if is_b2b else "B2C",
        unavoidable=6,
        urgency=6,
        underserved=6,
        feasibility=7,
        pain_gain_ratio=6,
        whitespace=6,
        tam_quality=6,
        growth_rate_quality=6,
        competition_density=5,
        willingness_to_pay=6,
        channels_clarity=6 if is_b2b else 5,
        team_experience=6,
        capital_runway_months=8,
        regulatory_risk=3,
        platform_dependency_risk=4,
        safety_risk=2,
        attributes=AttributeSignals(Disruptive=6, Defensible=5, Growth=6),
    )


def value_proposition(inp: ValidationInput, dna: BusinessDNA) -> str:
    core = inp.idea_text or "This business"
    target = inp.target_customer or ("businesses" if dna.customer_type == "b2b" else "consumers")
    if dna.network_effects == "strong":
        driver = "leverages network effects for competitive advantage"
    else:
        driver = f"serves an underserved {dna.industry} market"
    return f"{core} — targeting {target} in the {dna.industry} industry, {driver}."


def target_market_description(inp: ValidationInput, dna: BusinessDNA) -> str:
    if inp.target_customer:
        return f"{dna.customer_type.upper()} - {inp.target_customer}"
    return f"{dna.customer_type.upper()} {dna.industry} ({dna.scale} scale)"


def methodology_explanation(dna: BusinessDNA, weights: IndustryWeights) -> str:
    top = sorted(weights.items(), key=lambda kv: kv[1], reverse=True)[:3]
    factors = ", ".join(f"{name} ({weight:g}%)" for name, weight in top)
    return (
        f"Validation adapted for {dna.industry} {dna.business_model} business. "
        f"Key factors: {factors}. Confidence: {round(dna.confidence * 100)}%"
    )


def _dimension_scores(scores: ComputedScores) -> dict:
    return {k: v for k, v in scores.as_dict().items() if k != "overall"}


class HybridValidationService:
    """Runs the full hybrid pipeline for one ``ValidationInput``."""

    def __init__(self, gatherer: Optional[MarketIntelligenceGatherer] = None) -> None:
        self._gatherer = gatherer or MarketIntelligenceGatherer()

    @property
    def gatherer(self) -> MarketIntelligenceGatherer:
        return self._gatherer

    async def validate_business_idea(self, inp: ValidationInput) -> ValidationResult:
        """Validate *inp*.

        Raises
        ------
        ClassificationError
            When the business DNA confidence is below 0.4 or any step
            of the pipeline fails.
        """
        try:
            dna = classify_business_dna(inp.idea_text)
            if dna.confidence < C.MIN_CLASSIFICATION_CONFIDENCE:
                raise ClassificationError(
                    "Unable to clearly classify business type. Please provide more specific details.",
                    code="low_confidence",
                )

            market = await self._gatherer.gather(inp.idea_text, dna)
            weights = get_industry_weights(dna)
            strategy = describe_strategy(dna, weights)
            scores = compute_scores(inp, dna, market, weights)
            decision = make_decision(scores, dna, market, inp)

            payback = cac_payback_months(inp.cac_estimate, inp.price_point, market.typical_margins)
            warnings = check_for_warnings(inp.idea_text, _dimension_scores(scores), payback)
        except ClassificationError:
            raise
        except Exception as exc:
            logger.error("Hybrid validation failed: %s", exc)
            raise ClassificationError(f"Validation failed: {exc}", code="hybrid_failed", cause=exc) from exc

        return ValidationResult(
            id=str(uuid.uuid4()),
            status=decision.status,
            value_prop=value_proposition(inp, dna),
            highlights=decision.highlights,
            risks=decision.risks,
            scores=scores.to_scorecard(),
            target_market=target_market_description(inp, dna),
            title=(inp.idea_text or "")[:80],
            created_at=datetime.now(timezone.utc).isoformat(),
            reasoning=decision.reasoning,
            business_dna=dna,
            market_intelligence=market,
            validation_strategy=strategy,
            methodology_explanation=methodology_explanation(dna, weights),
            meta={"quality_warnings": [w.model_dump() for w in warnings]},
        )
