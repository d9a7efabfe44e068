"""
Business-Model Family Detection

The adaptive validator routes each idea to a strategy by *model family*
(saas, marketplace, physical-subscription, ecommerce, services,
unknown). Two detectors produce a family:

- ``HeuristicBusinessModelDetector``: ordered regex rules, default.
- ``CompositeBusinessModelDetector``: three collaborating parts behind
  one interface (pattern classifier, hybrid-pattern detector,
  uncertainty quantifier). Each part can be swapped by injection, e.g.
  for a learned classifier.
"""

from __future__ import annotations

import abc
import re
from dataclasses import asdict, dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Union

from ...schemas.validation_schema import ValidationInput

MAX_FEATURE_CHARS = 4000


class ModelFamily(str, Enum):
    SAAS = "saas"
    MARKETPLACE = "marketplace"
    PHYSICAL_SUBSCRIPTION = "physical-subscription"
    ECOMMERCE = "ecommerce"
    SERVICES = "services"
    UNKNOWN = "unknown"


_MARKETPLACE = re.compile(r"\bmarketplace\b|two[- ]sided|connect\s+buyers?\s+and\s+sellers|commission|take[- ]?rate")
_SUBSCRIPTION = re.compile(r"subscription|subscribe|monthly|quarterly")
_PHYSICAL = re.compile(r"ship|shipping|box|crate|bag|inventory|warehouse|3pl|fulfillment")
_SAAS = re.compile(r"saas|software|platform|api|dashboard")
_ECOMMERCE = re.compile(r"sell|product|inventory|shipping|e[- ]?commerce|storefront")
_SERVICES = re.compile(r"service|agency|consult")


class HeuristicBusinessModelDetector:
    """Ordered regex rules; the first matching family wins."""

    def detect(self, idea_text: str) -> ModelFamily:
        text = (idea_text or "").lower()
        if not text:
            return ModelFamily.UNKNOWN
        if _MARKETPLACE.search(text):
            return ModelFamily.MARKETPLACE
        if _SUBSCRIPTION.search(text) and _PHYSICAL.search(text):
            return ModelFamily.PHYSICAL_SUBSCRIPTION
        if _SAAS.search(text):
            return ModelFamily.SAAS
        if _ECOMMERCE.search(text):
            return ModelFamily.ECOMMERCE
        if _SERVICES.search(text):
            return ModelFamily.SERVICES
        return ModelFamily.UNKNOWN


# ===================================================================== #
#  Composite parts                                                        #
# ===================================================================== #

@dataclass
class PrimaryClassification:
    family: ModelFamily
    evidence: List[str] = field(default_factory=list)


@dataclass
class HybridPatterns:
    score: float
    patterns: List[str] = field(default_factory=list)


@dataclass
class UncertaintyMetrics:
    confidence: float
    entropy: float
    notes: List[str] = field(default_factory=list)


class PrimaryClassifier(abc.ABC):
    @abc.abstractmethod
    def classify(self, features: str) -> PrimaryClassification:
        ...


class HybridDetector(abc.ABC):
    @abc.abstractmethod
    def detect_hybrid_patterns(self, features: str) -> HybridPatterns:
        ...


class UncertaintyQuantifier(abc.ABC):
    @abc.abstractmethod
    def quantify(self, primary: PrimaryClassification, features: str) -> UncertaintyMetrics:
        ...


_EVIDENCE_RULES = (
    (re.compile(r"\bmarketplace\b|two[- ]sided"), "two-sided"),
    (re.compile(r"commission|take[- ]?rate"), "take-rate"),
    (_SUBSCRIPTION, "subscription"),
    (_PHYSICAL, "physical-shipping"),
    (re.compile(r"saas|software|api|dashboard"), "saas-keyword"),
    (re.compile(r"agency|service|consult"), "services-keyword"),
    (re.compile(r"e[- ]?commerce|storefront|cart|checkout"), "ecommerce-keyword"),
)


class PatternClassifier(PrimaryClassifier):
    """Heuristic family plus the evidence tokens found in the text."""

    def __init__(self, detector: Optional[HeuristicBusinessModelDetector] = None) -> None:
        self._detector = detector or HeuristicBusinessModelDetector()

    def classify(self, features: str) -> PrimaryClassification:
        text = (features or "").lower()
        evidence = [token for pattern, token in _EVIDENCE_RULES if pattern.search(text)]
        return PrimaryClassification(self._detector.detect(text), evidence)


class HybridPatternDetector(HybridDetector):
    """Flags business-model combinations such as a managed marketplace."""

    def detect_hybrid_patterns(self, features: str) -> HybridPatterns:
        text = (features or "").lower()

        def has(pattern: str) -> bool:
            return re.search(pattern, text) is not None

        patterns: List[str] = []
        if has(r"marketplace") and has(r"managed|escrow|qa|curat"):
            patterns.append("managed-marketplace")
        if has(r"saas") and has(r"services|agency"):
            patterns.append("saas+services")
        if has(r"subscription") and has(r"shipping|3pl|inventory"):
            patterns.append("physical-subscription")

        bonus = 0.25 if has(r"two[- ]sided|commission|take[- ]?rate") else 0.0
        return HybridPatterns(score=min(1.0, len(patterns) * 0.5 + bonus), patterns=patterns)


class EvidenceUncertaintyQuantifier(UncertaintyQuantifier):
    """Confidence grows with evidence count; unknown families start lower."""

    def quantify(self, primary: PrimaryClassification, features: str) -> UncertaintyMetrics:
        count = len(primary.evidence)
        base = 0.35 if primary.family == ModelFamily.UNKNOWN else 0.55
        confidence = max(0.2, min(0.95, base + min(0.4, count * 0.1)))
        notes = ["Low evidence; result heuristic"] if count == 0 else []
        return UncertaintyMetrics(confidence=confidence, entropy=1 - confidence, notes=notes)


# ===================================================================== #
#  Composite detector                                                     #
# ===================================================================== #

@dataclass
class BusinessModelContext:
    primary_type: ModelFamily
    hybrid_characteristics: Optional[List[str]]
    confidence: float
    supporting_evidence: List[str]
    uncertainty_metrics: UncertaintyMetrics

    def as_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["primary_type"] = self.primary_type.value
        data["detector"] = "composite"
        return data


def extract_business_features(data: Union[ValidationInput, str, None]) -> str:
    """Concatenate the descriptive text fields of *data*."""
    if data is None:
        return ""
    if isinstance(data, str):
        return data[:MAX_FEATURE_CHARS]
    parts = [
        data.idea_text,
        data.title,
        data.category,
        data.value_prop,
        data.description,
        data.target_market,
    ]
    return " ".join(p for p in parts if p)[:MAX_FEATURE_CHARS]


class CompositeBusinessModelDetector:
    """Classifier, hybrid-pattern detector and uncertainty quantifier in one."""

    def __init__(
        self,
        classifier: Optional[PrimaryClassifier] = None,
        hybrid: Optional[HybridDetector] = None,
        uncertainty: Optional[UncertaintyQuantifier] = None,
    ) -> None:
        self._classifier = classifier or PatternClassifier()
        self._hybrid = hybrid or HybridPatternDetector()
        self._uncertainty = uncertainty or EvidenceUncertaintyQuantifier()

    async def detect_model(self, data: Union[ValidationInput, str, None]) -> BusinessModelContext:
        features = extract_business_features(data)
        primary = self._classifier.classify(features)
        hybrid = self._hybrid.detect_hybrid_patterns(features)
        uncertainty = self._uncertainty.quantify(primary, features)

        return BusinessModelContext(
            primary_type=primary.family,
            hybrid_characteristics=hybrid.patterns or None,
            confidence=uncertainty.confidence,
            supporting_evidence=primary.evidence,
            uncertainty_metrics=uncertainty,
        )
