"""Market intelligence tests: gatherer degradation and the HTTP research provider.

The HTTP provider is exercised against httpx.MockTransport; no network is used.
"""

import asyncio
import os
import sys

# Ensure the backend package is importable
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

from unittest.mock import patch

import httpx
import pytest

from ideaverdict.config import ValidatorSettings
from ideaverdict.services.dna_classifier import classify_business_dna
from ideaverdict.services.market_intelligence import (
    MarketIntelligenceGatherer,
    ResearchProvider,
    build_research_prompt,
    get_research_provider,
)
from ideaverdict.services.research_client import HttpResearchProvider

IDEA = "Monthly subscription box delivering artisanal coffee beans to remote teams"
PM_IDEA = "Project management software with kanban boards for small agencies"


class SlowProvider(ResearchProvider):
    async def research(self, prompt, *, industry, timeout_ms=8000):
        await asyncio.sleep(1)
        return {"tam_usd": 5e9}


class FailingProvider(ResearchProvider):
    async def research(self, prompt, *, industry, timeout_ms=8000):
        raise RuntimeError("provider down")


class ListProvider(ResearchProvider):
    async def research(self, prompt, *, industry, timeout_ms=8000):
        return ["not", "a", "dict"]


class StaticProvider(ResearchProvider):
    async def research(self, prompt, *, industry, timeout_ms=8000):
        return {"tam_usd": 2e9, "growth_rate": 0.2, "competition_level": 9, "confidence": 0.9}


def _gather(gatherer, idea=IDEA):
    return asyncio.run(gatherer.gather(idea, classify_business_dna(idea)))


# ---------------------------------------------------------------------------
# Gatherer
# ---------------------------------------------------------------------------

class TestGatherer:
    def test_internal_data_without_provider(self):
        market = _gather(MarketIntelligenceGatherer())
        assert market.confidence == 0.8
        assert market.tam_usd > 0

    def test_timeout_degrades_to_internal_data(self):
        baseline = _gather(MarketIntelligenceGatherer())
        market = _gather(MarketIntelligenceGatherer(SlowProvider(), timeout_seconds=0.05))
        assert market == baseline

    def test_provider_error_degrades_to_internal_data(self):
        assert _gather(MarketIntelligenceGatherer(FailingProvider())) == _gather(MarketIntelligenceGatherer())

    def test_non_dict_payload_is_ignored(self):
        assert _gather(MarketIntelligenceGatherer(ListProvider())) == _gather(MarketIntelligenceGatherer())

    def test_provider_data_is_used(self):
        market = _gather(MarketIntelligenceGatherer(StaticProvider()))
        assert market.tam_usd == 2e9
        assert market.confidence == 0.9

    def test_parse_failure_uses_fallback_dataset(self):
        with patch(
            "ideaverdict.services.market_intelligence.parse_market_data",
            side_effect=ValueError("bad payload"),
        ):
            market = _gather(MarketIntelligenceGatherer())
        assert market.confidence == 0.3
        assert market.tam_usd == 10e9

    def test_density_overlay_caps_competition(self):
        market = _gather(MarketIntelligenceGatherer(StaticProvider()), PM_IDEA)
        assert market.competition_level == 2
        assert "Asana" in market.notable_competitors

    def test_prompt_mentions_industry(self):
        dna = classify_business_dna(IDEA)
        assert dna.industry in build_research_prompt(IDEA, dna)


# ---------------------------------------------------------------------------
# Provider factory
# ---------------------------------------------------------------------------

class TestProviderFactory:
    def test_no_provider_by_default(self):
        assert get_research_provider(ValidatorSettings()) is None

    def test_missing_credentials_disable_provider(self):
        assert get_research_provider(ValidatorSettings(research_provider="http")) is None

    def test_http_provider_selected(self):
        settings = ValidatorSettings(
            research_provider="http",
            research_api_url="https://research.example/api",
            research_api_key="key",
        )
        assert isinstance(get_research_provider(settings), HttpResearchProvider)


# ---------------------------------------------------------------------------
# HTTP provider
# ---------------------------------------------------------------------------

def _mock_client(handler):
    async def get_client():
        return httpx.AsyncClient(transport=httpx.MockTransport(handler))
    return patch("ideaverdict.services.research_client.get_client", get_client)


def _research(provider):
    return asyncio.run(provider.research("prompt", industry="food"))


class TestHttpResearchProvider:
    def setup_method(self):
        self.provider = HttpResearchProvider("https://research.example/api", "secret")
        self.calls = []

    def test_requires_credentials(self):
        with pytest.raises(EnvironmentError):
            HttpResearchProvider("", "")

    def test_nested_data_is_unwrapped(self):
        def handler(request):
            self.calls.append(request)
            return httpx.Response(200, json={"data": {"tam_usd": 3e9}})

        with _mock_client(handler):
            assert _research(self.provider) == {"tam_usd": 3e9}
        assert self.calls[0].headers["Authorization"] == "Bearer secret"

    def test_top_level_fields_are_returned(self):
        with _mock_client(lambda request: httpx.Response(200, json={"growth_rate": 0.3})):
            assert _research(self.provider) == {"growth_rate": 0.3}

    def test_client_error_is_not_retried(self):
        def handler(request):
            self.calls.append(request)
            return httpx.Response(404)

        with _mock_client(handler):
            assert _research(self.provider) is None
        assert len(self.calls) == 1

    def test_server_error_is_retried_once(self):
        def handler(request):
            self.calls.append(request)
            return httpx.Response(503)

        with _mock_client(handler):
            assert _research(self.provider) is None
        assert len(self.calls) == 2

    def test_non_json_body(self):
        with _mock_client(lambda request: httpx.Response(200, text="oops")):
            assert _research(self.provider) is None
