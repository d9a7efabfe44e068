"""Scoring pipeline tests: weights, scores, decisions, saturation, rounding."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ideaverdict.services.decision_engine import evaluate_red_flags, make_decision
from ideaverdict.services.dna_classifier import classify_business_dna
from ideaverdict.services.hybrid_validation import demo_input
from ideaverdict.services.market_intelligence import internal_market_data, parse_market_data
from ideaverdict.services.market_saturation import (
    MarketContext,
    MarketSaturationConstraints,
    assess_market_saturation,
)
from ideaverdict.services.scoring_engine import compute_scores, round_half_up
from ideaverdict.services.timing import StepTimer
from ideaverdict.services.weighting_engine import describe_strategy, get_industry_weights

PM_IDEA = "Cloud-based project management software that teams pay $29/month to access."
COFFEE_BOX = (
    "Monthly subscription box delivering artisanal coffee beans from different regions. "
    "Subscribers pay $35/month and receive 2-3 coffee varieties with tasting notes and brewing guides."
)

BASE_DIMENSIONS = (
    "problem", "underserved", "feasibility", "differentiation", "demand_signals",
    "wtp", "market_quality", "gtm", "execution", "risk",
)


def _score(idea_text, inp=None):
    dna = classify_business_dna(idea_text)
    market = parse_market_data(internal_market_data(dna))
    weights = get_industry_weights(dna)
    inp = inp or demo_input(idea_text)
    return dna, market, weights, compute_scores(inp, dna, market, weights)


class TestRounding:
    def test_half_rounds_up(self):
        assert round_half_up(64.5) == 65
        assert round_half_up(2.5) == 3
        assert round_half_up(0.125, 2) == 0.13


class TestWeights:
    def test_weights_are_positive(self):
        dna = classify_business_dna(COFFEE_BOX)
        weights = get_industry_weights(dna)
        assert weights
        assert all(w >= 0 for w in weights.values())

    def test_strategy_description_lists_dimensions(self):
        dna = classify_business_dna(COFFEE_BOX)
        strategy = describe_strategy(dna, get_industry_weights(dna))
        assert strategy.selected_dimensions


class TestScores:
    def test_dimensions_in_range(self):
        _, _, _, scores = _score(COFFEE_BOX)
        for name in BASE_DIMENSIONS:
            assert 0 <= getattr(scores, name) <= 10, name
        assert 0 <= scores.overall <= 100

    def test_project_management_market_quality_capped(self):
        _, _, _, scores = _score(PM_IDEA)
        assert scores.market_quality <= 4

    def test_scoring_is_deterministic(self):
        assert _score(COFFEE_BOX)[3] == _score(COFFEE_BOX)[3]

    def test_generic_features_cap_differentiation(self):
        idea = "A todo app with reminders, notifications, a calendar and a dashboard for tasks"
        _, _, _, scores = _score(idea)
        assert scores.differentiation <= 5


class TestDecision:
    def test_status_is_terminal(self):
        dna, market, _, scores = _score(COFFEE_BOX)
        decision = make_decision(scores, dna, market, demo_input(COFFEE_BOX))
        assert decision.status in ("GO", "REVIEW", "NO-GO")

    def test_illegal_flag_is_a_kill(self):
        inp = demo_input(COFFEE_BOX).model_copy(update={"illegal_or_prohibited": True})
        dna, market, _, scores = _score(COFFEE_BOX, inp)
        decision = make_decision(scores, dna, market, inp)
        assert decision.status == "NO-GO"
        assert decision.highlights == []

    def test_kill_reasoning_matches_red_flags(self):
        inp = demo_input(COFFEE_BOX).model_copy(update={"illegal_or_prohibited": True})
        dna, market, _, scores = _score(COFFEE_BOX, inp)
        triggered, killers = evaluate_red_flags(scores, dna, market, inp)

        assert "illegal" in [flag.id for flag in killers]
        decision = make_decision(scores, dna, market, inp)
        assert decision.risks == [flag.message for flag in triggered]
        for flag in killers:
            assert flag.message in decision.reasoning

    def test_low_overall_is_no_go(self):
        inp = demo_input(PM_IDEA).model_copy(
            update={
                "unavoidable": 0, "urgency": 0, "underserved": 0, "feasibility": 1,
                "pain_gain_ratio": 0, "whitespace": 0, "willingness_to_pay": 0,
                "channels_clarity": 0, "team_experience": 0,
            }
        )
        dna, market, _, scores = _score(PM_IDEA, inp)
        decision = make_decision(scores, dna, market, inp)
        assert decision.status == "NO-GO"


class TestMarketSaturation:
    def test_project_management_penalized(self):
        penalty = assess_market_saturation("A project management tool for agencies")
        assert penalty is not None
        assert penalty.saturation == 95
        assert "Asana" in penalty.competitors
        assert penalty.max_score == 25

    def test_unknown_market_has_no_penalty(self):
        assert assess_market_saturation("Handmade ceramic mugs") is None

    def test_hill_cap_is_bounded(self):
        model = MarketSaturationConstraints().calculate_saturation_cap(
            "ecommerce", MarketContext(spend_index=1.0, saturation_pct=65, demand_elasticity=0.9)
        )
        assert 0 < model.alpha_cap <= 1
        assert model.gamma_shape == 2.3
        assert model.constraint_function(1.0) >= 0


class TestStepTimer:
    def test_records_each_step(self):
        timer = StepTimer("scoring")
        with timer.step("weights"):
            pass
        with timer.step("scores"):
            pass
        assert list(timer.steps) == ["weights", "scores"]
        assert timer.summary() >= sum(timer.steps.values())
