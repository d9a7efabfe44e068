"""
False-Positive Prevention

Estimates how likely a passing verdict is a false positive given the
market context, and attaches the assessment as ``meta.false_positive``.
Scores are never changed.

Rules
-----
- NO API calls
- Metadata only
"""

from __future__ import annotations

import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List

from ...schemas.validation_schema import ValidationResult
from .strategies import ValidationContext

BASE_OVERALL_MIN = 55
BASE_DIMENSION_MIN = 4.5
DEFAULT_OVERALL = 50

_NICHE = re.compile(r"handmade|artisan|niche|community")
_SATURATED = re.compile(r"project management|crm|email marketing")

_DIMENSIONS = (
    "problem",
    "underserved",
    "feasibility",
    "differentiation",
    "demand_signals",
    "willingness_to_pay",
    "market_quality",
    "gtm",
    "execution",
    "risk",
)


@dataclass
class SoftBlock:
    code: str
    weight: float
    reason: str


@dataclass
class FlexibleRules:
    relaxations: List[str] = field(default_factory=list)
    soft_blocks: List[SoftBlock] = field(default_factory=list)
    justifications: List[str] = field(default_factory=list)


@dataclass
class AdjustedThresholds:
    overall_min: float
    dimension_min: float
    notes: List[str] = field(default_factory=list)


@dataclass
class Explanation:
    explainability_score: float
    explanations: List[str]


def evaluate_flexible_rules(idea_text: str, context: ValidationContext) -> FlexibleRules:
    text = (idea_text or "").lower()
    rules = FlexibleRules()
    if context.market_maturity == "early":
        rules.relaxations.append("evidence-strictness")
        rules.justifications.append("Early-stage signal scarcity expected")
    if _NICHE.search(text):
        rules.relaxations.append("category-benchmark")
        rules.justifications.append("Niche positioning warrants tailored benchmarks")
    if _SATURATED.search(text):
        rules.soft_blocks.append(SoftBlock("saturated-category", 0.3, "Highly saturated market detected"))
    return rules


def adjusted_thresholds(context: ValidationContext) -> AdjustedThresholds:
    overall_min: float = BASE_OVERALL_MIN
    dimension_min = BASE_DIMENSION_MIN
    notes: List[str] = []
    if context.market_maturity == "early":
        overall_min -= 5
        dimension_min -= 0.3
        notes.append("Relaxed thresholds for early-stage context")
    if context.market_saturation > 0.8:
        overall_min += 5
        notes.append("Raised overall threshold due to saturation risk")
    return AdjustedThresholds(
        overall_min=max(30, min(80, overall_min)),
        dimension_min=max(3, min(7, dimension_min)),
        notes=notes,
    )


def _overall(result: ValidationResult) -> float:
    overall = result.scores.overall
    return DEFAULT_OVERALL if overall is None else overall


def explain(result: ValidationResult, thresholds: AdjustedThresholds) -> Explanation:
    overall = _overall(result)
    dims = [v for v in (getattr(result.scores, d) for d in _DIMENSIONS) if v is not None]
    pass_rate = sum(1 for v in dims if v >= thresholds.dimension_min) / len(dims) if dims else 0.5
    meets_overall = 1 if overall >= thresholds.overall_min else 0
    score = round(max(0.4, min(0.95, 0.6 * pass_rate + 0.4 * meets_overall)), 3)
    return Explanation(
        explainability_score=score,
        explanations=[
            f"Overall {overall:g} vs min {thresholds.overall_min:g}",
            f"Dimensions pass rate {pass_rate * 100:.0f}% vs min {thresholds.dimension_min:.1f}",
        ],
    )


def false_positive_risk(result: ValidationResult, context: ValidationContext, explanation: Explanation) -> float:
    overall = _overall(result)
    band_risk = 0.3 if 55 <= overall <= 65 else 0.1
    saturation_penalty = max(0.0, context.market_saturation - 0.6) * 0.6
    risk = band_risk + saturation_penalty + (1 - explanation.explainability_score) * 0.3
    return round(max(0.0, min(1.0, risk)), 3)


def recommendations(risk: float, explanation: Explanation) -> List[str]:
    recs: List[str] = []
    if risk >= 0.5:
        recs.append("Tighten acceptance thresholds for saturated categories")
    if explanation.explainability_score < 0.7:
        recs.append("Collect more evidence for weak dimensions to improve explainability")
    return recs or ["Maintain current thresholds; monitor drift over time"]


class FalsePositivePreventionSystem:
    def assess(self, idea_text: str, context: ValidationContext, result: ValidationResult) -> Dict[str, Any]:
        rules = evaluate_flexible_rules(idea_text, context)
        thresholds = adjusted_thresholds(context)
        explanation = explain(result, thresholds)
        risk = false_positive_risk(result, context, explanation)
        return {
            "risk": risk,
            "recommendations": recommendations(risk, explanation),
            "explainability_score": explanation.explainability_score,
            "explanations": explanation.explanations,
            "thresholds": asdict(thresholds),
            "flexible_rules": asdict(rules),
        }

    def apply(self, idea_text: str, context: ValidationContext, result: ValidationResult) -> ValidationResult:
        """Copy of *result* with ``meta.false_positive`` attached."""
        assessment = self.assess(idea_text, context, result)
        return result.model_copy(update={"meta": {**result.meta, "false_positive": assessment}})
