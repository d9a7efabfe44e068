"""Business DNA Classifier.

Derives the structural classification vector (industry, business model,
customer type, stage, scale, capital/regulatory profile, network effects)
from the idea text with keyword tables from ``constants``.

Rules
-----
- NO API calls
- Never raises; low-signal text yields default categories
- Ties resolve to the first-declared entry
"""

from __future__ import annotations

from typing import Dict, List, Tuple

from .. import constants as C
from ..schemas.dna_schema import BusinessDNA
from .pattern_matcher import contains_any, count_hits


def _argmax(text: str, table: Dict[str, List[str]], default: str) -> str:
    best, best_score = default, 0
    for name, terms in table.items():
        score = count_hits(text, terms)
        if score > best_score:
            best, best_score = name, score
    return best


def _first_group(text: str, groups: List[Tuple[str, List[str]]], default: str) -> str:
    for name, terms in groups:
        if contains_any(text, terms):
            return name
    return default


def _detect_industry(text: str) -> str:
    return _argmax(text, C.INDUSTRY_KEYWORDS, C.DEFAULT_INDUSTRY)


def _detect_sub_industry(text: str, industry: str) -> str:
    table = C.SUB_INDUSTRY_KEYWORDS.get(industry)
    if not table:
        return C.DEFAULT_SUB_INDUSTRY
    return _argmax(text, table, C.DEFAULT_SUB_INDUSTRY)


def _detect_business_model(text: str) -> str:
    # Recurring vocabulary + physical fulfilment always means a shipped subscription
    if contains_any(text, C.RECURRING_TERMS) and contains_any(text, C.FULFILLMENT_TERMS):
        return "physical-subscription"
    return _argmax(text, C.BUSINESS_MODEL_KEYWORDS, C.DEFAULT_BUSINESS_MODEL)


def _capital_intensity(text: str, industry: str) -> str:
    if industry in C.HIGH_CAPITAL_INDUSTRIES or contains_any(text, C.HIGH_CAPITAL_TERMS):
        return "high"
    if contains_any(text, C.LOW_CAPITAL_TERMS):
        return "low"
    return "medium"


def _regulatory_complexity(industry: str) -> str:
    if industry in C.HIGH_REGULATORY_INDUSTRIES:
        return "high"
    if industry in C.MEDIUM_REGULATORY_INDUSTRIES:
        return "medium"
    return "low"


def _network_effects(text: str, business_model: str) -> str:
    if business_model == "marketplace" or contains_any(text, C.NETWORK_STRONG_TERMS):
        return "strong"
    if business_model == "social" or contains_any(text, C.NETWORK_WEAK_TERMS):
        return "weak"
    return "none"


def _confidence(text: str, labels: List[str]) -> float:
    confidence = C.DNA_BASE_CONFIDENCE
    if len(text) > 100:
        confidence += 0.2
    if len(text) > 200:
        confidence += 0.1
    if "industry" in text or "market" in text:
        confidence += 0.1
    if any(label.lower() in text for label in labels if label):
        confidence += 0.1
    return min(confidence, C.DNA_MAX_CONFIDENCE)


def classify_business_dna(idea_text: str) -> BusinessDNA:
    """Classify *idea_text* into a ``BusinessDNA`` vector."""
    text = (idea_text or "").lower().strip()

    industry = _detect_industry(text)
    sub_industry = _detect_sub_industry(text, industry)
    business_model = _detect_business_model(text)
    customer_type = _first_group(text, C.CUSTOMER_TYPE_KEYWORDS, C.DEFAULT_CUSTOMER_TYPE)

    dna = BusinessDNA(
        industry=industry,
        sub_industry=sub_industry,
        business_model=business_model,
        customer_type=customer_type,
        stage=_first_group(text, C.STAGE_KEYWORDS, C.DEFAULT_STAGE),
        scale=_first_group(text, C.SCALE_KEYWORDS, C.DEFAULT_SCALE),
        capital_intensity=_capital_intensity(text, industry),
        regulatory_complexity=_regulatory_complexity(industry),
        network_effects=_network_effects(text, business_model),
        confidence=_confidence(text, [industry, sub_industry, business_model, customer_type]),
    )
    print(
        f"🧬 [DNA] industry={dna.industry}/{dna.sub_industry} model={dna.business_model} "
        f"customer={dna.customer_type} confidence={dna.confidence:.2f}"
    )
    return dna
