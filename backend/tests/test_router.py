"""HTTP surface tests for /validate, /validate/pivots and the health endpoints."""

import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest
from fastapi.testclient import TestClient

from ideaverdict.agents.adaptive_validation import AdaptiveValidator
from ideaverdict.config import ValidatorSettings
from ideaverdict.errors import ConsistencyViolation
from ideaverdict.main import app
from ideaverdict.routers.validation import get_validator

COFFEE_BOX = (
    "Monthly subscription box delivering artisanal coffee beans from different regions. "
    "Subscribers pay $35/month and receive 2-3 coffee varieties with tasting notes and brewing guides."
)
LEATHER_BAGS = (
    "I plan to sell handmade leather bags and accessories online. "
    "Each bag costs $80-300 to make and I'll sell them for $200-800."
)
TELEHEALTH = "Telehealth clinic platform connecting patients with licensed therapists"


class ExplodingValidator:
    async def validate(self, inp, options=None):
        raise ConsistencyViolation("Weight configuration must sum to 1.0")


client = TestClient(app)


@pytest.fixture(autouse=True)
def offline_validator():
    """Validator without research provider or feature flags."""
    app.dependency_overrides[get_validator] = lambda: AdaptiveValidator(ValidatorSettings())
    yield
    app.dependency_overrides.pop(get_validator, None)


class TestValidateEndpoint:
    def test_validates_idea(self):
        res = client.post("/validate", json={"input": {"idea_text": COFFEE_BOX, "price_point": 35}})
        assert res.status_code == 200
        body = res.json()
        assert body["status"] in ("GO", "REVIEW", "NO-GO")
        assert 0 <= body["scores"]["overall"] <= 100
        assert body["meta"]["model_detection"]["primary_type"] == "physical-subscription"

    def test_short_idea_is_edge_case(self):
        res = client.post("/validate", json={"input": {"idea_text": "tiny"}})
        assert res.status_code == 200
        assert res.json()["meta"]["edge_case"] == "insufficient_data"

    def test_options_are_passed_through(self):
        res = client.post(
            "/validate",
            json={"input": {"idea_text": COFFEE_BOX}, "options": {"enforce_caps": True}},
        )
        assert res.status_code == 200
        assert "saturation_cap" in res.json()["meta"]

    def test_out_of_range_signal_is_rejected(self):
        res = client.post("/validate", json={"input": {"idea_text": COFFEE_BOX, "urgency": 11}})
        assert res.status_code == 422

    def test_validator_error_maps_to_500(self):
        app.dependency_overrides[get_validator] = lambda: ExplodingValidator()
        res = client.post("/validate", json={"input": {"idea_text": COFFEE_BOX}})
        assert res.status_code == 500
        assert res.json()["detail"].startswith("Validation failed:")


class TestPivotsEndpoint:
    def test_returns_pivots(self):
        res = client.post(
            "/validate/pivots",
            json={"idea_text": LEATHER_BAGS, "current_score": 35},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["business_model"]["primary_type"] == "physical-product"
        for pivot in body["pivots"]:
            assert pivot["delta"] >= 15
            assert pivot["category"] not in ("fintech", "healthcare")
            assert "tam" in pivot["market_snapshot"]

    def test_score_out_of_range(self):
        res = client.post("/validate/pivots", json={"idea_text": "anything", "current_score": 150})
        assert res.status_code == 422

    def test_healthcare_pivots(self):
        res = client.post(
            "/validate/pivots/healthcare",
            json={"idea_text": TELEHEALTH, "current_score": 40.5},
        )
        assert res.status_code == 200
        body = res.json()
        assert body["business_model"]["primary_type"]
        assert "invalid_pivots" in body
        for pivot in body["valid_pivots"]:
            assert pivot["delta"] >= 10

    def test_healthcare_pivots_require_idea_text(self):
        res = client.post("/validate/pivots/healthcare", json={"idea_text": "", "current_score": 40})
        assert res.status_code == 422


class TestHealth:
    def test_router_health(self):
        assert client.get("/validate/health").json() == {"status": "healthy", "service": "idea-validation"}

    def test_global_health(self):
        assert client.get("/health").json()["status"] == "healthy"

    def test_root_lists_endpoints(self):
        assert "pivots" in client.get("/").json()["endpoints"]
        assert "healthcare_pivots" in client.get("/").json()["endpoints"]
