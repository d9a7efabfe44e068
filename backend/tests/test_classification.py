"""Classification tests: business DNA, archetype detection, model families."""

import asyncio
import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from ideaverdict.agents.adaptive_validation.composite_detector import (
    CompositeBusinessModelDetector,
    HeuristicBusinessModelDetector,
    ModelFamily,
    extract_business_features,
)
from ideaverdict.schemas.pivot_schema import BusinessModelType
from ideaverdict.schemas.validation_schema import ValidationInput
from ideaverdict.services.dna_classifier import classify_business_dna
from ideaverdict.services.model_type_detector import (
    business_model_display_label,
    constraints_for_model,
    detect_business_model_type,
)

COFFEE_BOX = (
    "Monthly subscription box delivering artisanal coffee beans from different regions. "
    "Subscribers pay $35/month and receive 2-3 coffee varieties with tasting notes and brewing guides."
)
LEATHER_BAGS = (
    "I plan to sell handmade leather bags and accessories online. "
    "Each bag costs $80-300 to make and I'll sell them for $200-800."
)


class TestBusinessDNA:
    def test_subscription_with_fulfilment_is_physical_subscription(self):
        dna = classify_business_dna(COFFEE_BOX)
        assert dna.business_model == "physical-subscription"

    def test_empty_text_uses_defaults(self):
        dna = classify_business_dna("")
        assert dna.industry == "technology"
        assert dna.sub_industry == "general"
        assert 0.0 <= dna.confidence <= 0.95

    def test_classification_is_deterministic(self):
        assert classify_business_dna(LEATHER_BAGS) == classify_business_dna(LEATHER_BAGS)

    def test_longer_text_is_more_confident(self):
        short = classify_business_dna("An app for dogs")
        long = classify_business_dna(COFFEE_BOX)
        assert long.confidence > short.confidence


class TestArchetypeDetection:
    def test_coffee_box_is_dtc_subscription(self):
        result = detect_business_model_type(COFFEE_BOX)
        assert result.primary_type == BusinessModelType.DTC_SUBSCRIPTION
        assert result.confidence >= 0.7

    def test_leather_bags_are_physical_product(self):
        result = detect_business_model_type(LEATHER_BAGS)
        assert result.primary_type == BusinessModelType.PHYSICAL_PRODUCT
        assert result.confidence >= 0.8

    def test_no_indicators_defaults_to_services(self):
        result = detect_business_model_type("")
        assert result.primary_type == BusinessModelType.SERVICES
        assert result.confidence == 0.3
        assert result.indicators == ["fallback classification"]

    def test_constraints_attached(self):
        result = detect_business_model_type(LEATHER_BAGS)
        assert result.constraints == constraints_for_model(result.primary_type)
        assert result.constraints

    def test_every_archetype_has_display_label(self):
        for model in BusinessModelType:
            assert business_model_display_label(model)


class TestModelFamilies:
    def setup_method(self):
        self.detector = HeuristicBusinessModelDetector()

    def test_marketplace_wins_first(self):
        text = "A marketplace for subscription boxes that ship monthly"
        assert self.detector.detect(text) == ModelFamily.MARKETPLACE

    def test_physical_subscription(self):
        assert self.detector.detect(COFFEE_BOX) == ModelFamily.PHYSICAL_SUBSCRIPTION

    def test_saas(self):
        assert self.detector.detect("Dashboard software for dentists") == ModelFamily.SAAS

    def test_ecommerce(self):
        assert self.detector.detect("We sell handmade candles online") == ModelFamily.ECOMMERCE

    def test_unknown_on_empty(self):
        assert self.detector.detect("") == ModelFamily.UNKNOWN


class TestCompositeDetector:
    def test_evidence_raises_confidence(self):
        detector = CompositeBusinessModelDetector()
        rich = asyncio.run(detector.detect_model(
            "Two-sided marketplace with escrow and a 10% commission on every sale"
        ))
        bare = asyncio.run(detector.detect_model("We help people enjoy their weekends more"))

        assert rich.primary_type == ModelFamily.MARKETPLACE
        assert "two-sided" in rich.supporting_evidence
        assert rich.hybrid_characteristics == ["managed-marketplace"]
        assert bare.primary_type == ModelFamily.UNKNOWN
        assert bare.hybrid_characteristics is None
        assert bare.confidence < 0.4
        assert rich.confidence > bare.confidence

    def test_entropy_complements_confidence(self):
        context = asyncio.run(CompositeBusinessModelDetector().detect_model(COFFEE_BOX))
        metrics = context.uncertainty_metrics
        assert abs(metrics.entropy - (1 - metrics.confidence)) < 1e-9
        assert 0.2 <= context.confidence <= 0.95

    def test_context_dump_is_tagged(self):
        context = asyncio.run(CompositeBusinessModelDetector().detect_model(COFFEE_BOX))
        data = context.as_dict()
        assert data["detector"] == "composite"
        assert data["primary_type"] == "physical-subscription"

    def test_features_join_descriptive_fields(self):
        inp = ValidationInput(idea_text="Idea", title="Title", description="Desc")
        assert extract_business_features(inp) == "Idea Title Desc"
        assert extract_business_features(None) == ""
