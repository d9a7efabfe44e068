"""
Adaptive Validator

Entry point of the validation core. One call runs:

    pre-route edge cases
      -> detect model family (heuristic or composite)
      -> strategy for the family (fallback tiers on any error)
      -> clamp scores          (unless options.clamp_scores is False)
      -> saturation cap        (only when options.enforce_caps is True)
      -> attach model_detection
      -> consensus pass        (feature flag)
      -> false-positive pass   (feature flag)
      -> post-route ambiguous model (composite confidence < 0.4)

Callers always get a well-formed ``ValidationResult``. The only error
allowed to escape is ``ConsistencyViolation`` from the consensus pass.
"""

from __future__ import annotations

import logging
import re
from typing import Any, Dict, Mapping, Optional, Tuple

from ...config import ValidatorSettings
from ...constants import ILLEGAL_CONTENT_PATTERN
from ...schemas.validation_schema import ValidateOptions, ValidationInput, ValidationResult
from ...services.hybrid_validation import HybridValidationService
from ...services.market_intelligence import MarketIntelligenceGatherer, ResearchProvider, get_research_provider
from ...services.market_saturation import MarketContext, MarketSaturationConstraints
from ...services.scoring_engine import round_half_up
from .composite_detector import (
    BusinessModelContext,
    CompositeBusinessModelDetector,
    HeuristicBusinessModelDetector,
    ModelFamily,
)
from .consistency import ConsensusEngine, consensus_weights, enforce_consistency, hybrid_signals
from .edge_cases import EdgeCaseManager, EdgeCaseType
from .fallback import AdaptiveFallbackOrchestrator
from .false_positive import FalsePositivePreventionSystem
from .strategies import (
    BaseValidationStrategy,
    ECommerceValidationStrategy,
    HybridStrategy,
    market_context_from_text,
)
from ...services.timing import StepTimer

logger = logging.getLogger(__name__)

MIN_IDEA_CHARS = 15
AMBIGUOUS_CONFIDENCE = 0.4

# Market context used for the optional overall cap
CAP_CONTEXT = MarketContext(spend_index=1.0, saturation_pct=65, demand_elasticity=0.9)

_ILLEGAL = re.compile(ILLEGAL_CONTENT_PATTERN)


def _pick(explicit: Optional[bool], configured: bool) -> bool:
    return configured if explicit is None else explicit


class AdaptiveValidator:
    """Routes each idea to a strategy by model family and post-processes the result."""

    def __init__(
        self,
        settings: Optional[ValidatorSettings] = None,
        *,
        service: Optional[HybridValidationService] = None,
        provider: Optional[ResearchProvider] = None,
        use_composite_detector: Optional[bool] = None,
        enable_consensus: Optional[bool] = None,
        enable_false_positive: Optional[bool] = None,
        strategies: Optional[Mapping[ModelFamily, BaseValidationStrategy]] = None,
        detector: Optional[HeuristicBusinessModelDetector] = None,
        composite_detector: Optional[CompositeBusinessModelDetector] = None,
        edge_cases: Optional[EdgeCaseManager] = None,
        fallback: Optional[AdaptiveFallbackOrchestrator] = None,
    ) -> None:
        self.settings = settings or ValidatorSettings.from_env()

        if service is None:
            gatherer = MarketIntelligenceGatherer(
                provider=provider if provider is not None else get_research_provider(self.settings),
                timeout_seconds=self.settings.research_timeout_seconds,
            )
            service = HybridValidationService(gatherer)
        self._service = service

        self.use_composite_detector = _pick(use_composite_detector, self.settings.use_composite_detector)
        self.enable_consensus = _pick(enable_consensus, self.settings.enable_consensus)
        self.enable_false_positive = _pick(enable_false_positive, self.settings.enable_false_positive)

        self._detector = detector or HeuristicBusinessModelDetector()
        self._composite: Optional[CompositeBusinessModelDetector] = None
        if self.use_composite_detector:
            self._composite = composite_detector or CompositeBusinessModelDetector()

        self._strategies: Dict[ModelFamily, BaseValidationStrategy] = self._default_strategies()
        for family, strategy in (strategies or {}).items():
            self.register_strategy(family, strategy)

        self._edge_cases = edge_cases or EdgeCaseManager(self._service)
        self._fallback = fallback or AdaptiveFallbackOrchestrator(self._service)
        self._consensus = ConsensusEngine()
        self._false_positive = FalsePositivePreventionSystem()

    def _default_strategies(self) -> Dict[ModelFamily, BaseValidationStrategy]:
        hybrid = HybridStrategy(self._service)
        strategies: Dict[ModelFamily, BaseValidationStrategy] = {family: hybrid for family in ModelFamily}
        strategies[ModelFamily.ECOMMERCE] = ECommerceValidationStrategy(self._service)
        return strategies

    def register_strategy(self, family: ModelFamily, strategy: BaseValidationStrategy) -> None:
        self._strategies[ModelFamily(family)] = strategy

    def strategy_for(self, family: ModelFamily) -> BaseValidationStrategy:
        return self._strategies.get(family) or self._strategies[ModelFamily.UNKNOWN]

    # ================================================================= #
    #  Pipeline                                                           #
    # ================================================================= #

    async def validate(
        self, inp: ValidationInput, options: Optional[ValidateOptions] = None
    ) -> ValidationResult:
        options = options or ValidateOptions()
        timer = StepTimer("orchestrator")

        pre_case = self._pre_route(inp)
        if pre_case is not None:
            print(f"🔀 [ORCHESTRATOR] Pre-routed edge case: {pre_case.value}")
            return await self._edge_cases.route(inp, pre_case)

        async with timer.async_step("detect"):
            family, detection = await self._detect(inp)

        strategy = self.strategy_for(family)
        print(f"🔀 [ORCHESTRATOR] Model family: {family.value} -> strategy: {strategy.name}")

        async with timer.async_step("strategy"):
            try:
                result = await strategy.validate(inp)
            except Exception as exc:
                logger.warning("Strategy %s failed: %s", strategy.name, exc)
                result = await self._fallback.handle_fallback(exc, inp)

        with timer.step("post-process"):
            if options.clamp_scores is not False:
                result = enforce_consistency(result)
            if options.enforce_caps:
                result = self._apply_saturation_cap(result, family)
            result = result.model_copy(update={"meta": {**result.meta, "model_detection": detection}})

            if self.enable_consensus:
                result = self._attach_consensus(result)
            if self.enable_false_positive:
                context = market_context_from_text(inp.idea_text, category=family.value)
                result = self._false_positive.apply(inp.idea_text, context, result)

        timer.summary()

        confidence = detection.get("confidence")
        if confidence is not None and confidence < AMBIGUOUS_CONFIDENCE:
            print(f"🔀 [ORCHESTRATOR] Low detection confidence ({confidence:.2f}), re-routing")
            return await self._edge_cases.route(inp, EdgeCaseType.AMBIGUOUS_MODEL)
        return result

    @staticmethod
    def _pre_route(inp: ValidationInput) -> Optional[EdgeCaseType]:
        text = (inp.idea_text or "").lower()
        if inp.illegal_or_prohibited or _ILLEGAL.search(text):
            return EdgeCaseType.ILLEGAL_CONTENT
        if len(text) < MIN_IDEA_CHARS:
            return EdgeCaseType.INSUFFICIENT_DATA
        return None

    async def _detect(self, inp: ValidationInput) -> Tuple[ModelFamily, Dict[str, Any]]:
        if self._composite is not None:
            context: BusinessModelContext = await self._composite.detect_model(inp)
            return context.primary_type, context.as_dict()
        family = self._detector.detect(inp.idea_text)
        return family, {"primary_type": family.value, "detector": "heuristic"}

    @staticmethod
    def _apply_saturation_cap(result: ValidationResult, family: ModelFamily) -> ValidationResult:
        model = MarketSaturationConstraints().calculate_saturation_cap(family.value, CAP_CONTEXT)
        cap = round_half_up(model.alpha_cap * 100)
        scores = result.scores
        if scores.overall is not None and scores.overall > cap:
            scores = scores.model_copy(update={"overall": cap})
        meta = {**result.meta, "saturation_cap": {"cap100": cap, "model": family.value}}
        return result.model_copy(update={"scores": scores, "meta": meta})

    def _attach_consensus(self, result: ValidationResult) -> ValidationResult:
        weights = consensus_weights(result.meta)
        outcome = self._consensus.ensure_consistency(hybrid_signals(result.scores), weights.as_dict())
        consensus = {"outcome": outcome.as_dict(), "weights": weights.as_dict()}
        return result.model_copy(update={"meta": {**result.meta, "consensus": consensus}})
