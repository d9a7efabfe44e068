"""Market Intelligence Gatherer.

Produces ``MarketIntelligence`` for an idea. An external research
provider may be injected; its answer is used only when it resolves
inside a hard timeout, otherwise the deterministic internal dataset for
the idea's industry is used. A competitive-density overlay then clamps
the competition level for known crowded categories.

Providers
---------
- ``HttpResearchProvider`` (``research_client``), selected with
  ``RESEARCH_PROVIDER=http``.

Adding a new provider
---------------------
1. Subclass ``ResearchProvider``.
2. Implement ``research``.
3. Register it in ``get_research_provider()``.
"""

from __future__ import annotations

import abc
import asyncio
import logging
from typing import Dict, List, Optional

from .. import constants as C
from ..config import DEFAULT_RESEARCH_TIMEOUT_SECONDS, ValidatorSettings
from ..schemas.dna_schema import BusinessDNA, MarketIntelligence

logger = logging.getLogger(__name__)

_PROVIDER_TIMEOUT_MS = 8000


def _clamp(value: float, lo: float, hi: float) -> float:
    """Clamp *value* to [lo, hi]."""
    return max(lo, min(hi, value))


# ===================================================================== #
#  Abstract interface                                                     #
# ===================================================================== #

class ResearchProvider(abc.ABC):
    """Interface every market-research source must implement.

    ``research`` receives the rendered research prompt and returns a
    dict with any of ``tam_usd``, ``growth_rate``, ``competition_level``,
    ``key_trends``, ``regulatory_barriers``, ``typical_margins``,
    ``customer_acquisition_difficulty``, ``confidence`` and
    ``notable_competitors``.

    Return ``None`` when no data can be found.  Never guess values.
    """

    @abc.abstractmethod
    async def research(
        self,
        prompt: str,
        *,
        industry: str,
        timeout_ms: int = _PROVIDER_TIMEOUT_MS,
    ) -> Optional[Dict]:
        ...


def get_research_provider(settings: Optional[ValidatorSettings] = None) -> Optional[ResearchProvider]:
    """Return the configured research provider, or ``None``.

    Missing credentials are logged and degrade to no provider.
    """
    settings = settings or ValidatorSettings.from_env()
    if settings.research_provider != "http":
        return None

    from .research_client import HttpResearchProvider

    try:
        return HttpResearchProvider(settings.research_api_url, settings.research_api_key)
    except EnvironmentError as exc:
        logger.warning("Research provider disabled: %s", exc)
        return None


# ===================================================================== #
#  Prompt + datasets                                                      #
# ===================================================================== #

def build_research_prompt(idea_text: str, dna: BusinessDNA) -> str:
    """Render the research request sent to an external provider."""
    return (
        "Analyze the market opportunity for this business idea:\n\n"
        f'Business: "{idea_text}"\n'
        f"Industry: {dna.industry} ({dna.sub_industry})\n"
        f"Business Model: {dna.business_model}\n"
        f"Customer Type: {dna.customer_type}\n"
        f"Geographic Scale: {dna.scale}\n\n"
        "Research and provide specific data for:\n"
        "1. Total Addressable Market (TAM) size in USD\n"
        "2. Industry growth rate (CAGR)\n"
        "3. Competition density (0-10 scale, 10 = low competition)\n"
        "4. Key market trends affecting this segment\n"
        "5. Regulatory barriers or requirements\n"
        f"6. Typical gross margins for {dna.business_model} businesses in {dna.industry}\n"
        "7. Customer acquisition difficulty (0-10, 10 = very difficult)\n\n"
        f"Focus on {dna.industry} industry data specifically for {dna.sub_industry} segment. "
        "Exclude data from unrelated industries. "
        "Provide sources and confidence level for your estimates."
    )


def internal_market_data(dna: BusinessDNA) -> Dict:
    """Deterministic seeded dataset for *dna*'s industry."""
    base = C.INTERNAL_MARKET_DATA.get(dna.industry, C.DEFAULT_INTERNAL_MARKET_DATA)
    return {
        **base,
        "key_trends": list(C.INDUSTRY_TRENDS.get(dna.industry, C.DEFAULT_TRENDS)),
        "regulatory_barriers": list(C.REGULATORY_BARRIERS.get(dna.industry, C.DEFAULT_BARRIERS)),
        "confidence": C.INTERNAL_DATA_CONFIDENCE,
    }


def fallback_market_intelligence() -> MarketIntelligence:
    return MarketIntelligence(**C.FALLBACK_MARKET_DATA)


def parse_market_data(data: Dict) -> MarketIntelligence:
    """Parse a raw research payload, substituting defaults for gaps."""
    competitors = data.get("notable_competitors")
    return MarketIntelligence(
        tam_usd=float(data.get("tam_usd") or 1e9),
        growth_rate=float(data.get("growth_rate") or 0.1),
        competition_level=_clamp(float(data.get("competition_level") or 5), 0, 10),
        key_trends=list(data.get("key_trends") or []),
        regulatory_barriers=list(data.get("regulatory_barriers") or []),
        typical_margins=float(data.get("typical_margins") or 0.5),
        customer_acquisition_difficulty=_clamp(
            float(data.get("customer_acquisition_difficulty") or 5), 0, 10
        ),
        confidence=_clamp(float(data.get("confidence") or 0.7), 0, 1),
        notable_competitors=list(competitors) if isinstance(competitors, list) else None,
    )


def competitive_density(idea_text: str, dna: BusinessDNA) -> tuple[int, Optional[List[str]]]:
    """Competition level ceiling and named incumbents for crowded categories."""
    text = (idea_text or "").lower()
    for terms, level, incumbents in C.COMPETITIVE_DENSITY:
        if any(term in text for term in terms):
            return level, list(incumbents)
    if dna.industry in C.CROWDED_INDUSTRIES:
        return C.CROWDED_INDUSTRY_LEVEL, None
    return C.DEFAULT_DENSITY_LEVEL, None


def apply_density_overlay(
    market: MarketIntelligence, idea_text: str, dna: BusinessDNA
) -> MarketIntelligence:
    level, incumbents = competitive_density(idea_text, dna)
    update: Dict = {
        "competition_level": max(1, min(10, min(market.competition_level, level))),
    }
    if incumbents:
        update["notable_competitors"] = incumbents
    return market.model_copy(update=update)


# ===================================================================== #
#  Gatherer                                                               #
# ===================================================================== #

class MarketIntelligenceGatherer:
    """Collects market data for one idea; never raises."""

    def __init__(
        self,
        provider: Optional[ResearchProvider] = None,
        timeout_seconds: float = DEFAULT_RESEARCH_TIMEOUT_SECONDS,
    ) -> None:
        self._provider = provider
        self._timeout_seconds = timeout_seconds

    @property
    def provider(self) -> Optional[ResearchProvider]:
        return self._provider

    # ------------------------------------------------------------------ #
    #  Public                                                              #
    # ------------------------------------------------------------------ #

    async def gather(self, idea_text: str, dna: BusinessDNA) -> MarketIntelligence:
        try:
            data = await self._research(build_research_prompt(idea_text, dna), dna)
            if data is None:
                data = internal_market_data(dna)
            market = parse_market_data(data)
            market = apply_density_overlay(market, idea_text, dna)
        except Exception as exc:
            logger.warning("Market intelligence gathering failed, using fallback: %s", exc)
            return fallback_market_intelligence()

        print(
            f"🔍 [RESEARCH] tam=${market.tam_usd / 1e9:.1f}B growth={market.growth_rate:.1%} "
            f"competition={market.competition_level} confidence={market.confidence:.2f}"
        )
        return market

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                    #
    # ------------------------------------------------------------------ #

    async def _research(self, prompt: str, dna: BusinessDNA) -> Optional[Dict]:
        """Ask the provider under the hard timeout; any failure means no data."""
        if self._provider is None:
            return None
        try:
            data = await asyncio.wait_for(
                self._provider.research(
                    prompt, industry=dna.industry, timeout_ms=_PROVIDER_TIMEOUT_MS
                ),
                timeout=self._timeout_seconds,
            )
        except asyncio.TimeoutError:
            logger.warning(
                "Research provider timed out after %.1fs, using internal data",
                self._timeout_seconds,
            )
            return None
        except Exception as exc:
            logger.warning("Research provider failed, using internal data: %s", exc)
            return None

        if data is not None and not isinstance(data, dict):
            logger.warning("Research provider returned %s, using internal data", type(data).__name__)
            return None
        return data
