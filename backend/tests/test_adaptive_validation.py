"""Adaptive validator tests: routing, fallback tiers, consistency, optional passes."""

import asyncio
import math
import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from ideaverdict.agents.adaptive_validation import (
    AdaptiveFallbackOrchestrator,
    AdaptiveValidator,
    BaseValidationStrategy,
    ConsensusEngine,
    EdgeCaseManager,
    EdgeCaseType,
    ModelFamily,
    WeightConfiguration,
    enforce_consistency,
)
from ideaverdict.agents.adaptive_validation.consistency import (
    NormalizedSignal,
    CalibrationModel,
    clamp_scorecard,
    consensus_weights,
    hybrid_signals,
)
from ideaverdict.agents.adaptive_validation.fallback import RuleBasedFallbackTier
from ideaverdict.agents.adaptive_validation.strategies import (
    ECommerceDomainStrategy,
    ValidationContext,
    market_context_from_text,
)
from ideaverdict.config import ValidatorSettings
from ideaverdict.errors import ClassificationError, ConsistencyViolation
from ideaverdict.schemas.validation_schema import (
    ScoreCard,
    ValidateOptions,
    ValidationInput,
    ValidationResult,
)
from ideaverdict.services.hybrid_validation import HybridValidationService, demo_input

COFFEE_BOX = (
    "Monthly subscription box delivering artisanal coffee beans from different regions. "
    "Subscribers pay $35/month and receive 2-3 coffee varieties with tasting notes and brewing guides."
)
CANDLES = "We sell handmade candles online with a unique brand story for a loyal community"
PM_IDEA = "Cloud-based project management software that teams pay $29/month to access."


class BrokenStrategy(BaseValidationStrategy):
    name = "broken"

    async def validate(self, inp):
        raise RuntimeError("strategy exploded")


class FailingService(HybridValidationService):
    async def validate_business_idea(self, inp):
        raise ClassificationError("cannot classify", code="low_confidence")


class OutOfRangeStrategy(BaseValidationStrategy):
    name = "out-of-range"

    async def validate(self, inp):
        return ValidationResult(
            id="raw",
            status="REVIEW",
            scores=ScoreCard(problem=14, risk=-3, network_effects=12, overall=140),
        )


def _validator(**kwargs):
    return AdaptiveValidator(ValidatorSettings(), **kwargs)


def _validate(validator, idea_text, options=None):
    return asyncio.run(validator.validate(demo_input(idea_text), options))


# ---------------------------------------------------------------------------
# Pre-routing
# ---------------------------------------------------------------------------

class TestPreRouting:
    def test_short_text_is_insufficient_data(self):
        result = _validate(_validator(strategies={f: BrokenStrategy() for f in ModelFamily}), "Uber for cats")
        assert result.meta["edge_case"] == "insufficient_data"
        assert result.status == "REVIEW"
        assert result.scores.overall == 40
        assert "fallback" not in result.meta

    def test_illegal_text_is_routed(self):
        result = _validate(_validator(), "A marketplace for illegal fireworks shipped across borders")
        assert result.meta["edge_case"] == "illegal_content"
        assert result.status == "NO-GO"
        assert result.scores.overall == 0

    def test_illegal_flag_is_routed(self):
        inp = demo_input(COFFEE_BOX).model_copy(update={"illegal_or_prohibited": True})
        result = asyncio.run(_validator().validate(inp))
        assert result.meta["edge_case"] == "illegal_content"

    def test_edge_results_have_minimal_scores(self):
        result = _validate(_validator(), "too short")
        assert result.scores.problem == 0
        assert result.scores.risk == 5


# ---------------------------------------------------------------------------
# Main path
# ---------------------------------------------------------------------------

class TestValidate:
    def test_result_shape(self):
        result = _validate(_validator(), COFFEE_BOX)
        assert result.status in ("GO", "REVIEW", "NO-GO")
        assert 0 <= result.scores.overall <= 100
        assert result.meta["model_detection"] == {
            "primary_type": "physical-subscription",
            "detector": "heuristic",
        }
        assert "quality_warnings" in result.meta

    def test_deterministic_without_provider(self):
        first = _validate(_validator(), COFFEE_BOX)
        second = _validate(_validator(), COFFEE_BOX)
        assert first.scores == second.scores
        assert first.business_dna == second.business_dna
        assert first.status == second.status

    def test_project_management_market_quality_capped(self):
        result = _validate(_validator(), PM_IDEA)
        assert result.scores.market_quality <= 4

    def test_ecommerce_strategy_attaches_domain_meta(self):
        result = _validate(_validator(), CANDLES)
        ecommerce = result.meta["ecommerce"]
        assert set(ecommerce) == {"summary", "context", "criteria", "constraints", "kpis"}
        assert "ltv_cac" in ecommerce["kpis"]

    def test_registered_strategy_is_used(self):
        validator = _validator(strategies={ModelFamily.PHYSICAL_SUBSCRIPTION: OutOfRangeStrategy()})
        result = _validate(validator, COFFEE_BOX)
        assert result.id == "raw"

    def test_enforce_caps_records_cap(self):
        result = _validate(_validator(), COFFEE_BOX, ValidateOptions(enforce_caps=True))
        cap = result.meta["saturation_cap"]
        assert cap["model"] == "physical-subscription"
        assert result.scores.overall <= cap["cap100"]


# ---------------------------------------------------------------------------
# Fallback
# ---------------------------------------------------------------------------

class TestFallback:
    def test_strategy_error_falls_back(self):
        validator = _validator(strategies={f: BrokenStrategy() for f in ModelFamily})
        result = _validate(validator, COFFEE_BOX)
        assert result.meta["fallback"]["tier"] in ("feature-group", "simplified-model", "rule-based")
        assert result.meta["fallback"]["reason"] == "strategy exploded"
        assert result.scores.overall is not None

    def test_failing_service_reaches_rule_based(self):
        validator = _validator(
            strategies={f: BrokenStrategy() for f in ModelFamily},
            fallback=AdaptiveFallbackOrchestrator(FailingService()),
        )
        result = _validate(validator, PM_IDEA)
        assert result.meta["fallback"]["tier"] == "rule-based"
        assert result.meta["fallback"]["code"] is None
        assert result.status == "NO-GO"
        assert result.scores.overall == 35

    def test_fallback_code_is_recorded(self):
        orchestrator = AdaptiveFallbackOrchestrator(FailingService())
        error = ClassificationError("low", code="low_confidence")
        result = asyncio.run(orchestrator.handle_fallback(error, demo_input(COFFEE_BOX)))
        assert result.meta["fallback"] == {"tier": "rule-based", "reason": "low", "code": "low_confidence"}

    @pytest.mark.parametrize("text", ["", "x", "niche project management for florists", None])
    def test_rule_based_tier_never_raises(self, text):
        tier = RuleBasedFallbackTier()
        inp = None if text is None else ValidationInput(idea_text=text)
        result = asyncio.run(tier.execute(inp, RuntimeError("boom")))
        assert result.status in ("REVIEW", "NO-GO")
        assert result.scores.overall in (35, 55)

    def test_focused_saturated_idea_is_review(self):
        result = RuleBasedFallbackTier().evaluate(ValidationInput(idea_text="niche crm for florists"))
        assert result.status == "REVIEW"
        assert result.highlights == ["Potential vertical focus"]


# ---------------------------------------------------------------------------
# Consistency and consensus
# ---------------------------------------------------------------------------

class TestConsistency:
    def test_clamp_bounds_every_dimension(self):
        scores = clamp_scorecard(ScoreCard(problem=14, risk=-3, network_effects=12, overall=140))
        assert scores.problem == 10
        assert scores.risk == 0
        assert scores.network_effects == 10
        assert scores.overall == 100
        assert scores.gtm is None

    def test_clamp_is_idempotent(self):
        raw = ValidationResult(id="x", status="REVIEW", scores=ScoreCard(problem=-1, overall=101))
        once = enforce_consistency(raw)
        assert enforce_consistency(once) == once

    def test_orchestrator_clamps_by_default(self):
        validator = _validator(strategies={ModelFamily.PHYSICAL_SUBSCRIPTION: OutOfRangeStrategy()})
        result = _validate(validator, COFFEE_BOX)
        assert result.scores.overall == 100
        assert result.scores.problem == 10

    def test_clamp_can_be_disabled(self):
        validator = _validator(strategies={ModelFamily.PHYSICAL_SUBSCRIPTION: OutOfRangeStrategy()})
        result = _validate(validator, COFFEE_BOX, ValidateOptions(clamp_scores=False))
        assert result.scores.overall == 140


class TestConsensus:
    def setup_method(self):
        self.signals = [
            NormalizedSignal("hybrid", "customer_acquisition", 0.6, 0.8),
            NormalizedSignal("hybrid", "revenue_growth", 0.4, 0.8),
            NormalizedSignal("hybrid", "operational_efficiency", 0.9, 0.8),
            NormalizedSignal("hybrid", "competitive_position", 0.2, 0.8),
        ]

    def test_weights_must_sum_to_one(self):
        with pytest.raises(ConsistencyViolation):
            ConsensusEngine().ensure_consistency(self.signals, {"customer_acquisition": 0.5, "revenue_growth": 0.6})

    def test_tolerance_accepts_float_noise(self):
        weights = {"customer_acquisition": 0.1, "revenue_growth": 0.2, "operational_efficiency": 0.3,
                   "competitive_position": 0.4 + 1e-9}
        outcome = ConsensusEngine().ensure_consistency(self.signals, weights)
        assert 0.0 <= outcome.final_score <= 1.0

    def test_outcome_ranges(self):
        outcome = ConsensusEngine().ensure_consistency(self.signals, WeightConfiguration().as_dict())
        assert 0.0 <= outcome.final_score <= 1.0
        assert 0.0 <= outcome.provider_agreement <= 1.0
        assert outcome.mathematical_consistency is True
        assert outcome.confidence_bounds == (0.2, 0.9)
        assert math.isclose(outcome.final_score, 0.25 * 0.8 * (0.6 + 0.4 + 0.9 + 0.2))

    def test_identical_signals_agree_fully(self):
        signals = [NormalizedSignal("a", "customer_acquisition", 0.5), NormalizedSignal("b", "revenue_growth", 0.5)]
        outcome = ConsensusEngine().ensure_consistency(signals, WeightConfiguration().as_dict())
        assert outcome.provider_agreement == 1.0

    def test_calibration_scales_and_bounds_reliability(self):
        engine = ConsensusEngine([CalibrationModel("raw", scale=lambda s: s / 100, reliability_bias=5)])
        outcome = engine.ensure_consistency(
            [NormalizedSignal("raw", "customer_acquisition", 80)],
            {"customer_acquisition": 1.0},
        )
        assert math.isclose(outcome.final_score, 0.8)

    def test_hybrid_signals_use_stronger_pair(self):
        signals = hybrid_signals(ScoreCard(gtm=3, demand_signals=7))
        by_category = {s.category: s.score for s in signals}
        assert by_category["customer_acquisition"] == 0.7
        assert by_category["revenue_growth"] == 0.0

    def test_ecommerce_criteria_are_normalized(self):
        weights = consensus_weights({"ecommerce": {"criteria": {"customer_acquisition": 3, "revenue_growth": 1}}})
        assert abs(sum(weights.as_dict().values()) - 1.0) < 1e-9

    def test_consensus_pass_attaches_meta(self):
        result = _validate(_validator(enable_consensus=True), CANDLES)
        consensus = result.meta["consensus"]
        assert 0.0 <= consensus["outcome"]["final_score"] <= 1.0
        assert abs(sum(consensus["weights"].values()) - 1.0) < 1e-6


# ---------------------------------------------------------------------------
# Optional passes
# ---------------------------------------------------------------------------

class TestFalsePositivePass:
    def test_meta_is_attached_without_changing_scores(self):
        plain = _validate(_validator(), PM_IDEA)
        checked = _validate(_validator(enable_false_positive=True), PM_IDEA)
        assessment = checked.meta["false_positive"]
        assert checked.scores == plain.scores
        assert 0.0 <= assessment["risk"] <= 1.0
        assert 0.4 <= assessment["explainability_score"] <= 0.95
        assert assessment["recommendations"]
        assert assessment["flexible_rules"]["soft_blocks"][0]["code"] == "saturated-category"

    def test_thresholds_follow_context(self):
        result = _validate(_validator(enable_false_positive=True), "A crowded generic prototype for selling socks online")
        thresholds = result.meta["false_positive"]["thresholds"]
        assert thresholds["overall_min"] == 55
        assert thresholds["dimension_min"] == pytest.approx(4.2)


class TestCompositeRouting:
    def test_low_confidence_routes_to_ambiguous_model(self):
        validator = _validator(use_composite_detector=True)
        result = _validate(validator, "We help people enjoy their weekends more")
        assert result.meta["edge_case"] == "ambiguous_model"

    def test_confident_detection_is_attached(self):
        validator = _validator(use_composite_detector=True)
        result = _validate(validator, COFFEE_BOX)
        detection = result.meta["model_detection"]
        assert detection["detector"] == "composite"
        assert detection["confidence"] >= 0.4
        assert "edge_case" not in result.meta


# ---------------------------------------------------------------------------
# Edge cases and domain strategy
# ---------------------------------------------------------------------------

class TestEdgeCases:
    def test_saturated_market_severity(self):
        manager = EdgeCaseManager()
        severe = asyncio.run(manager.route(ValidationInput(idea_text="project management tool"), EdgeCaseType.SATURATED_MARKET))
        none = asyncio.run(manager.route(ValidationInput(idea_text="handmade mugs"), EdgeCaseType.SATURATED_MARKET))
        assert (severe.status, severe.scores.overall) == ("NO-GO", 25)
        assert (none.id, none.scores.overall) == ("edge-saturated-none", 55)

    def test_ambiguous_model_escalates_on_classification_error(self):
        manager = EdgeCaseManager(FailingService())
        result = asyncio.run(manager.route(ValidationInput(idea_text=COFFEE_BOX), EdgeCaseType.AMBIGUOUS_MODEL))
        assert result.id == "edge-human"
        assert result.scores.overall == 50

    def test_unregistered_case_goes_to_human_review(self):
        result = asyncio.run(EdgeCaseManager().route(ValidationInput(idea_text=COFFEE_BOX), EdgeCaseType.OTHER))
        assert result.status == "REVIEW"
        assert result.meta["edge_case"] == "other"


class TestECommerceDomain:
    def test_context_from_text(self):
        context = market_context_from_text("crowded market, scaling with vc money")
        assert context.market_saturation == 0.85
        assert context.market_maturity == "growth"

    def test_adaptive_weights_sum_to_one(self):
        weights = ECommerceDomainStrategy().adaptive_weights(ValidationContext("early", 0.85))
        assert abs(sum(weights.as_dict().values()) - 1.0) < 0.01
        assert weights.customer_acquisition > weights.operational_efficiency

    def test_confidence_bounded(self):
        domain = ECommerceDomainStrategy()
        assert domain.confidence(ValidationContext("early", 0.85)) == pytest.approx(0.45)
        assert 0.3 <= domain.confidence(ValidationContext("mature", 1.0)) <= 0.9

    def test_constraints_from_saturation_model(self):
        constraints = ECommerceDomainStrategy().saturation_constraints(ValidationContext("early", 0.85))
        assert 30 <= constraints.overall_cap_100 <= 100
        assert constraints.demand_floor_10 == 2
