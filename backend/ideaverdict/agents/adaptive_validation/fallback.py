"""
Adaptive Fallback Orchestrator

When the primary strategy raises, three tiers are tried in order:

1. ``feature-group``: rerun the hybrid pipeline on a minimal safe subset
   of the input (idea text and target customer only).
2. ``simplified-model``: the plain hybrid strategy on the original input.
3. ``rule-based``: keyword rules with fixed scores. Never raises.

A tier's result is accepted when ``overall >= 30`` or when no overall is
present. Every result is tagged with ``meta.fallback``.
"""

from __future__ import annotations

import abc
import logging
import re
from typing import List, Optional

from ...schemas.validation_schema import ScoreCard, ValidationInput, ValidationResult
from ...services.hybrid_validation import HybridValidationService
from .strategies import HybridStrategy

logger = logging.getLogger(__name__)

MIN_ACCEPTABLE_OVERALL = 30
MAX_IDEA_CHARS = 1000
MAX_TARGET_CHARS = 200

_SATURATED = re.compile(r"project management|crm|email marketing")
_FOCUSED = re.compile(r"niche|managed|community|vertical|handmade")


class FallbackTier(abc.ABC):
    level: str = "base"

    def can_handle(self, error: BaseException) -> bool:
        return True

    @abc.abstractmethod
    async def execute(self, original: Optional[ValidationInput], error: BaseException) -> ValidationResult:
        ...


class FeatureGroupFallbackTier(FallbackTier):
    level = "feature-group"

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._service = service or HybridValidationService()

    async def execute(self, original: Optional[ValidationInput], error: BaseException) -> ValidationResult:
        original = original or ValidationInput()
        target = original.target_customer or original.target_market
        clean = ValidationInput(
            idea_text=(original.idea_text or "")[:MAX_IDEA_CHARS],
            target_customer=target[:MAX_TARGET_CHARS] if target else None,
        )
        return await self._service.validate_business_idea(clean)


class SimplifiedModelFallbackTier(FallbackTier):
    level = "simplified-model"

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._strategy = HybridStrategy(service)

    async def execute(self, original: Optional[ValidationInput], error: BaseException) -> ValidationResult:
        return await self._strategy.validate(original or ValidationInput())


class RuleBasedFallbackTier(FallbackTier):
    """Coarse verdict from saturated-category and vertical-focus keywords."""

    level = "rule-based"

    async def execute(self, original: Optional[ValidationInput], error: BaseException) -> ValidationResult:
        return self.evaluate(original)

    def evaluate(self, original: Optional[ValidationInput]) -> ValidationResult:
        text = ((original.idea_text if original else "") or "").lower()
        risky = _SATURATED.search(text) is not None
        focused = _FOCUSED.search(text) is not None

        return ValidationResult(
            id="fallback-rule",
            status="NO-GO" if risky and not focused else "REVIEW",
            value_prop=(original.value_prop if original else None) or "",
            highlights=["Potential vertical focus"] if focused else [],
            risks=["Saturated category"] if risky else ["Limited evidence"],
            scores=ScoreCard(overall=35 if risky else 55),
        )


def is_acceptable(result: ValidationResult) -> bool:
    overall = result.scores.overall if result.scores else None
    if overall is None:
        return True
    return overall >= MIN_ACCEPTABLE_OVERALL


def tag_fallback(result: ValidationResult, level: str, error: BaseException) -> ValidationResult:
    fallback = {
        "tier": level,
        "reason": str(error) or "fallback",
        "code": getattr(error, "code", None),
    }
    return result.model_copy(update={"meta": {**result.meta, "fallback": fallback}})


class AdaptiveFallbackOrchestrator:
    """Runs the fallback tiers in order until one yields an acceptable result."""

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._rule_based = RuleBasedFallbackTier()
        self._tiers: List[FallbackTier] = [
            FeatureGroupFallbackTier(service),
            SimplifiedModelFallbackTier(service),
            self._rule_based,
        ]

    @property
    def tiers(self) -> List[FallbackTier]:
        return list(self._tiers)

    async def handle_fallback(
        self, error: BaseException, original: Optional[ValidationInput]
    ) -> ValidationResult:
        print(f"🛟 [FALLBACK] Primary strategy failed: {error}")
        for tier in self._tiers:
            if not tier.can_handle(error):
                continue
            try:
                result = await tier.execute(original, error)
            except Exception as tier_error:
                logger.warning("Fallback tier %s failed: %s", tier.level, tier_error)
                continue
            if is_acceptable(result):
                print(f"🛟 [FALLBACK] Accepted tier: {tier.level}")
                return tag_fallback(result, tier.level, error)

        print(f"🛟 [FALLBACK] No tier accepted, using {self._rule_based.level}")
        return tag_fallback(self._rule_based.evaluate(original), self._rule_based.level, error)
