"""Pivot recommendation tests: uplift, allow-lists, artisan context, healthcare path."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from ideaverdict.schemas.pivot_schema import (
    BusinessModelType,
    PivotRequest,
    ScoringFactors,
    UserProfile,
)
from ideaverdict.services.model_type_detector import detect_business_model_type
from ideaverdict.services.pivot_catalog import ALL_PIVOTS, ARTISAN_PIVOT_IDS, CATALOG_BY_TYPE
from ideaverdict.services.pivot_engine import (
    ALLOWED_PIVOT_CATEGORIES,
    MAX_PIVOTS,
    calculate_overall_score,
    calculate_skill_match,
    generate_contextual_pivots,
    healthcare_validated_pivots,
    recommend_pivots,
    validate_pivot_recommendations,
)

LEATHER_BAGS = (
    "I plan to sell handmade leather bags and accessories online. "
    "Each bag costs $80-300 to make and I'll sell them for $200-800."
)
ARTISAN_IDEA = "Handmade premium leather bags and wallets crafted by local artisans sold online and wholesale"
REGULATED = {BusinessModelType.FINTECH, BusinessModelType.HEALTHCARE}


class TestScoringHelpers:
    def test_overall_is_weighted_blend(self):
        factors = ScoringFactors(
            problem=100, underserved=0, demand=100, differentiation=0, economics=0, gtm=0
        )
        assert calculate_overall_score(factors) == 45

    def test_skill_match_defaults_without_profile(self):
        assert calculate_skill_match(["sales"], None) == 0.5
        assert calculate_skill_match(["sales"], []) == 0.5

    def test_skill_match_substring(self):
        assert calculate_skill_match(["sales", "design"], ["B2B Sales lead"]) == 0.5

    def test_skill_match_no_required_skills(self):
        assert calculate_skill_match([], ["anything"]) == 0.0


class TestCatalog:
    def test_every_archetype_has_options(self):
        for model in BusinessModelType:
            assert CATALOG_BY_TYPE.get(model), model

    def test_ids_are_unique(self):
        ids = [p.id for p in ALL_PIVOTS]
        assert len(ids) == len(set(ids))


class TestRecommendPivots:
    @pytest.mark.parametrize("idea", [
        LEATHER_BAGS,
        "Monthly subscription box delivering artisanal coffee beans. Subscribers pay $35/month.",
        "Platform where freelance graphic designers offer services to small businesses. We take 15% commission.",
        "Cloud-based project management software that teams pay $29/month to access.",
    ])
    def test_uplift_and_allow_list(self, idea):
        classification = detect_business_model_type(idea)
        pivots = recommend_pivots(idea, 30, classification)
        allowed = ALLOWED_PIVOT_CATEGORIES[classification.primary_type]

        assert len(pivots) <= MAX_PIVOTS
        for pivot in pivots:
            assert pivot.delta >= 15
            assert pivot.option.category in allowed or pivot.option.id in ARTISAN_PIVOT_IDS

    def test_leather_bags_have_no_regulated_pivots(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        pivots = recommend_pivots(LEATHER_BAGS, 40, classification)
        assert pivots
        assert not [p for p in pivots if p.option.category in REGULATED]

    def test_artisan_options_merge_in(self):
        classification = detect_business_model_type(ARTISAN_IDEA)
        assert classification.primary_type == BusinessModelType.PHYSICAL_PRODUCT

        pivots = recommend_pivots(ARTISAN_IDEA, 40, classification)
        labels = [p.option.label.lower() for p in pivots]
        for bad in ("clinic", "therapy", "patient", "health", "fintech", "payment", "lending", "bank"):
            assert not any(bad in label for label in labels)

    def test_ranked_best_first(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        pivots = recommend_pivots(LEATHER_BAGS, 20, classification, UserProfile(skills=["marketing"]))
        keys = [p.overall + 10 * p.skill_match for p in pivots]
        assert keys == sorted(keys, reverse=True)

    def test_high_current_score_leaves_nothing(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        assert recommend_pivots(LEATHER_BAGS, 100, classification) == []

    def test_recommendations_pass_validation(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        pivots = recommend_pivots(LEATHER_BAGS, 30, classification)
        assert validate_pivot_recommendations(classification, pivots).is_valid

    def test_fractional_uplift_below_threshold_is_dropped(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        best = recommend_pivots(LEATHER_BAGS, 0, classification)[0]

        current = best.overall - 14.5
        pivots = recommend_pivots(LEATHER_BAGS, current, classification)
        assert best.option.id not in [p.option.id for p in pivots]
        for pivot in pivots:
            assert pivot.delta >= 15

    def test_fractional_uplift_is_reported_exactly(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        best = recommend_pivots(LEATHER_BAGS, 0, classification)[0]

        current = best.overall - 15.5
        pivots = recommend_pivots(LEATHER_BAGS, current, classification)
        match = [p for p in pivots if p.option.id == best.option.id]
        assert match
        assert match[0].delta == 15.5

    def test_validation_flags_fractional_shortfall(self):
        classification = detect_business_model_type(LEATHER_BAGS)
        best = recommend_pivots(LEATHER_BAGS, 0, classification)[0]
        short = best.model_copy(update={"delta": 14.5})

        check = validate_pivot_recommendations(classification, [short])
        assert not check.is_valid
        assert any("improvement too small: 14.5" in e for e in check.errors)


class TestHealthcarePath:
    def test_lower_uplift_bar(self):
        analysis = healthcare_validated_pivots(
            "Telehealth clinic platform connecting patients with licensed therapists", 40
        )
        assert len(analysis.valid_pivots) <= MAX_PIVOTS
        for pivot in analysis.valid_pivots:
            assert pivot.delta >= 10
        overall = [p.overall for p in analysis.valid_pivots]
        assert overall == sorted(overall, reverse=True)

    def test_fractional_uplift_below_lower_bar_is_dropped(self):
        idea = "Telehealth clinic platform connecting patients with licensed therapists"
        best = healthcare_validated_pivots(idea, 0).valid_pivots[0]

        analysis = healthcare_validated_pivots(idea, best.overall - 9.5)
        assert best.option.id not in [p.option.id for p in analysis.valid_pivots]
        for pivot in analysis.valid_pivots:
            assert pivot.delta >= 10


class TestContextualPivots:
    def test_response_shape(self):
        response = generate_contextual_pivots(PivotRequest(idea_text=LEATHER_BAGS, current_score=35))
        assert response.business_model.primary_type == BusinessModelType.PHYSICAL_PRODUCT
        assert response.original_constraints == response.business_model.constraints
        for pivot in response.pivots:
            assert pivot.market_snapshot.tam
            assert pivot.delta >= 15

    def test_override_is_trusted(self):
        response = generate_contextual_pivots(PivotRequest(
            idea_text=LEATHER_BAGS,
            current_score=20,
            business_model_override=BusinessModelType.FOOD_SERVICE,
        ))
        assert response.business_model.primary_type == BusinessModelType.FOOD_SERVICE
        assert response.business_model.confidence == 1.0
        allowed = ALLOWED_PIVOT_CATEGORIES[BusinessModelType.FOOD_SERVICE]
        assert all(p.category in allowed or p.id in ARTISAN_PIVOT_IDS for p in response.pivots)
