"""
Mathematical Consistency

Two layers:

- ``enforce_consistency`` clamps every dimension of a result to [0, 10]
  and ``overall`` to [0, 100]. Idempotent.
- ``ConsensusEngine`` reconciles several normalized signals into one
  bounded score with an agreement measure. This is the one place where
  an invalid configuration raises instead of being clamped: weights
  must sum to exactly 1.0 (tolerance 1e-6).

Rules
-----
- NO API calls
- Consensus runs after scoring and only ever adds metadata
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass, field
from typing import Any, Callable, Dict, Iterable, List, Mapping, Optional, Tuple

from ...errors import ConsistencyViolation
from ...schemas.validation_schema import ScoreCard, ValidationResult

WEIGHT_TOLERANCE = 1e-6
AGREEMENT_STD_SPAN = 0.5
DEFAULT_RELIABILITY = 0.7
HYBRID_RELIABILITY = 0.8
MIN_RELIABILITY = 0.2
MAX_RELIABILITY = 1.0

CONSENSUS_CATEGORIES = (
    "customer_acquisition",
    "revenue_growth",
    "operational_efficiency",
    "competitive_position",
)

_OVERALL = "overall"


def _clamp(value: float, lo: float, hi: float) -> float:
    return max(lo, min(hi, value))


# ===================================================================== #
#  Bound clamping                                                         #
# ===================================================================== #

def clamp_scorecard(scores: ScoreCard) -> ScoreCard:
    values = scores.model_dump()
    for name, value in values.items():
        if value is None:
            continue
        values[name] = _clamp(value, 0, 100) if name == _OVERALL else _clamp(value, 0, 10)
    return ScoreCard(**values)


def enforce_consistency(result: ValidationResult) -> ValidationResult:
    """Clamp all score dimensions of *result* into their valid ranges."""
    return result.model_copy(update={"scores": clamp_scorecard(result.scores)})


# ===================================================================== #
#  Consensus                                                              #
# ===================================================================== #

@dataclass(frozen=True)
class WeightConfiguration:
    """Consensus weights over the four business categories."""

    customer_acquisition: float = 0.25
    revenue_growth: float = 0.25
    operational_efficiency: float = 0.25
    competitive_position: float = 0.25

    def as_dict(self) -> Dict[str, float]:
        return asdict(self)

    def normalized(self) -> "WeightConfiguration":
        total = sum(self.as_dict().values())
        if total <= 0:
            return WeightConfiguration()
        return WeightConfiguration(**{k: v / total for k, v in self.as_dict().items()})


@dataclass(frozen=True)
class NormalizedSignal:
    provider: str
    category: str
    score: float
    reliability: float = DEFAULT_RELIABILITY


@dataclass(frozen=True)
class CalibrationModel:
    provider: str
    scale: Optional[Callable[[float], float]] = None
    reliability_bias: float = 0.0


@dataclass(frozen=True)
class ConsensusOutcome:
    final_score: float
    provider_agreement: float
    mathematical_consistency: bool
    confidence_bounds: Tuple[float, float] = field(default=(0.0, 0.0))

    def as_dict(self) -> Dict[str, Any]:
        low, high = self.confidence_bounds
        return {
            "final_score": self.final_score,
            "provider_agreement": self.provider_agreement,
            "mathematical_consistency": self.mathematical_consistency,
            "confidence_bounds": {"low": low, "high": high},
        }


class ConsensusEngine:
    """Weighted, reliability-adjusted consensus over normalized signals."""

    def __init__(self, calibrations: Optional[Iterable[CalibrationModel]] = None) -> None:
        self._calibrations: Dict[str, CalibrationModel] = {c.provider: c for c in calibrations or ()}

    def ensure_consistency(
        self, signals: List[NormalizedSignal], weights: Mapping[str, float]
    ) -> ConsensusOutcome:
        """Reconcile *signals* under *weights*.

        Raises
        ------
        ConsistencyViolation
            If *weights* do not sum to 1.0 or the consensus is not finite.
        """
        normalized = [self._normalize(s) for s in signals]
        final_score = self._weighted_consensus(normalized, weights)

        return ConsensusOutcome(
            final_score=final_score,
            provider_agreement=self._agreement(normalized),
            mathematical_consistency=0.0 <= final_score <= 1.0,
            confidence_bounds=self._bounds(normalized),
        )

    def _normalize(self, signal: NormalizedSignal) -> NormalizedSignal:
        model = self._calibrations.get(signal.provider)
        scaled = model.scale(signal.score) if model and model.scale else signal.score
        bias = model.reliability_bias if model else 0.0
        reliability = signal.reliability if signal.reliability is not None else DEFAULT_RELIABILITY
        return NormalizedSignal(
            provider=signal.provider,
            category=signal.category,
            score=_clamp(scaled, 0.0, 1.0),
            reliability=_clamp(reliability + bias, MIN_RELIABILITY, MAX_RELIABILITY),
        )

    @staticmethod
    def _weighted_consensus(signals: List[NormalizedSignal], weights: Mapping[str, float]) -> float:
        total = sum(weights.values())
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ConsistencyViolation(
                f"Weight configuration must sum to 1.0 for mathematical consistency (got {total})"
            )
        consensus = sum(s.score * weights.get(s.category, 0.0) * s.reliability for s in signals)
        if not math.isfinite(consensus):
            raise ConsistencyViolation("Weighted consensus is not finite")
        return _clamp(consensus, 0.0, 1.0)

    @staticmethod
    def _agreement(signals: List[NormalizedSignal]) -> float:
        if not signals:
            return 0.0
        scores = [s.score for s in signals]
        mean = sum(scores) / len(scores)
        std = math.sqrt(sum((x - mean) ** 2 for x in scores) / len(scores))
        return _clamp(1 - std / AGREEMENT_STD_SPAN, 0.0, 1.0)

    @staticmethod
    def _bounds(signals: List[NormalizedSignal]) -> Tuple[float, float]:
        if not signals:
            return (0.0, 0.0)
        scores = [s.score for s in signals]
        return (max(0.0, min(scores)), min(1.0, max(scores)))


# ===================================================================== #
#  Hybrid-result adapters                                                 #
# ===================================================================== #

def _to_unit(value: Optional[float]) -> float:
    if value is None or not math.isfinite(value):
        return 0.0
    return _clamp(value / 10, 0.0, 1.0)


def hybrid_signals(scores: ScoreCard) -> List[NormalizedSignal]:
    """Project a score card onto the four consensus categories."""
    by_category = {
        "customer_acquisition": max(_to_unit(scores.gtm), _to_unit(scores.demand_signals)),
        "revenue_growth": max(_to_unit(scores.willingness_to_pay), _to_unit(scores.market_quality)),
        "operational_efficiency": max(_to_unit(scores.execution), _to_unit(scores.feasibility)),
        "competitive_position": max(_to_unit(scores.differentiation), _to_unit(scores.problem)),
    }
    return [
        NormalizedSignal("hybrid", category, score, HYBRID_RELIABILITY)
        for category, score in by_category.items()
    ]


def consensus_weights(meta: Mapping[str, Any]) -> WeightConfiguration:
    """Equal weights, or the e-commerce criteria (normalized) when present."""
    criteria = (meta.get("ecommerce") or {}).get("criteria")
    if not criteria:
        return WeightConfiguration()
    configured = WeightConfiguration(
        **{name: float(criteria.get(name, 0.25)) for name in CONSENSUS_CATEGORIES}
    )
    return configured.normalized()
