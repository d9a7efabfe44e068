"""
Edge Case Routing

Some inputs are not validation failures but first-class outcomes with
their own response shape: illegal content, too little text, an
ambiguous business model or a known saturated market. Each has a
registered handler; unknown case types escalate to human review.

Every edge result carries ``meta.edge_case`` with the case type.
"""

from __future__ import annotations

import abc
import logging
from enum import Enum
from typing import Dict, List, Optional

from ...errors import ClassificationError
from ...schemas.validation_schema import RecommendationStatus, ScoreCard, ValidationInput, ValidationResult
from ...services.hybrid_validation import HybridValidationService
from ...services.market_saturation import assess_market_saturation
from ...services.scoring_engine import round_half_up

logger = logging.getLogger(__name__)

_VALUE_PROP_CHARS = 200


class EdgeCaseType(str, Enum):
    ILLEGAL_CONTENT = "illegal_content"
    INSUFFICIENT_DATA = "insufficient_data"
    AMBIGUOUS_MODEL = "ambiguous_model"
    SATURATED_MARKET = "saturated_market"
    OTHER = "other"


def minimal_scores(overall: float) -> ScoreCard:
    """Zeroed base dimensions, neutral risk and a bounded overall."""
    return ScoreCard(
        problem=0,
        underserved=0,
        feasibility=0,
        differentiation=0,
        demand_signals=0,
        willingness_to_pay=0,
        market_quality=0,
        gtm=0,
        execution=0,
        risk=5,
        overall=max(0, min(100, round_half_up(overall))),
    )


def edge_result(
    case_type: EdgeCaseType,
    result_id: str,
    status: RecommendationStatus,
    inp: Optional[ValidationInput],
    overall: float,
    highlights: Optional[List[str]] = None,
    risks: Optional[List[str]] = None,
) -> ValidationResult:
    idea = (inp.idea_text if inp else "") or ""
    return ValidationResult(
        id=result_id,
        status=status,
        value_prop=idea[:_VALUE_PROP_CHARS],
        highlights=highlights or [],
        risks=risks or [],
        scores=minimal_scores(overall),
        meta={"edge_case": case_type.value},
    )


# ===================================================================== #
#  Handlers                                                               #
# ===================================================================== #

class EdgeCaseHandler(abc.ABC):
    """Resolves one kind of edge case into a result."""

    @abc.abstractmethod
    async def process(self, inp: Optional[ValidationInput]) -> ValidationResult:
        ...


class IllegalContentHandler(EdgeCaseHandler):
    async def process(self, inp: Optional[ValidationInput]) -> ValidationResult:
        return edge_result(
            EdgeCaseType.ILLEGAL_CONTENT,
            "edge-illegal",
            "NO-GO",
            inp,
            0,
            risks=["Content appears illegal or prohibited"],
        )


class InsufficientDataHandler(EdgeCaseHandler):
    async def process(self, inp: Optional[ValidationInput]) -> ValidationResult:
        return edge_result(
            EdgeCaseType.INSUFFICIENT_DATA,
            "edge-insufficient",
            "REVIEW",
            inp,
            40,
            highlights=["Provide more detail on the problem, target customer, and validation signals"],
            risks=["Insufficient information to validate"],
        )


class AmbiguousModelHandler(EdgeCaseHandler):
    """Best-effort hybrid validation of the original input."""

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._service = service or HybridValidationService()

    async def process(self, inp: Optional[ValidationInput]) -> ValidationResult:
        inp = inp or ValidationInput()
        try:
            result = await self._service.validate_business_idea(inp)
        except ClassificationError as exc:
            logger.warning("Ambiguous-model validation failed, escalating: %s", exc)
            return human_review_result(inp, EdgeCaseType.AMBIGUOUS_MODEL)
        meta = {**result.meta, "edge_case": EdgeCaseType.AMBIGUOUS_MODEL.value}
        return result.model_copy(update={"meta": meta})


class SaturatedMarketHandler(EdgeCaseHandler):
    async def process(self, inp: Optional[ValidationInput]) -> ValidationResult:
        penalty = assess_market_saturation(inp.idea_text if inp else "")
        if penalty is None:
            return edge_result(
                EdgeCaseType.SATURATED_MARKET,
                "edge-saturated-none",
                "REVIEW",
                inp,
                55,
                highlights=["No strong saturation penalty found"],
            )

        severe = penalty.saturation >= 90
        return edge_result(
            EdgeCaseType.SATURATED_MARKET,
            "edge-saturated",
            "NO-GO" if severe else "REVIEW",
            inp,
            25 if severe else 45,
            highlights=["Saturation risk detected"],
            risks=[
                f"Oversaturation (~{penalty.saturation}%)",
                f"Competitors: {', '.join(penalty.competitors)}",
                "Recommendation: target niche or alternative go-to-market",
            ],
        )


def human_review_result(inp: Optional[ValidationInput], case_type: EdgeCaseType) -> ValidationResult:
    return edge_result(
        case_type,
        "edge-human",
        "REVIEW",
        inp,
        50,
        highlights=["Escalated to human reviewer"],
        risks=[f"Unhandled edge case type: {case_type.value}"],
    )


# ===================================================================== #
#  Manager                                                                #
# ===================================================================== #

class EdgeCaseManager:
    """Routes an edge case to its registered handler."""

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._handlers: Dict[EdgeCaseType, EdgeCaseHandler] = {
            EdgeCaseType.ILLEGAL_CONTENT: IllegalContentHandler(),
            EdgeCaseType.INSUFFICIENT_DATA: InsufficientDataHandler(),
            EdgeCaseType.AMBIGUOUS_MODEL: AmbiguousModelHandler(service),
            EdgeCaseType.SATURATED_MARKET: SaturatedMarketHandler(),
        }

    def register(self, case_type: EdgeCaseType, handler: EdgeCaseHandler) -> None:
        self._handlers[EdgeCaseType(case_type)] = handler

    async def route(self, inp: Optional[ValidationInput], case_type: EdgeCaseType) -> ValidationResult:
        case_type = EdgeCaseType(case_type)
        handler = self._handlers.get(case_type)
        if handler is None:
            print(f"🚧 [EDGE] No handler for {case_type.value}, escalating to human review")
            return human_review_result(inp, case_type)

        print(f"🚧 [EDGE] Routing {case_type.value}")
        return await handler.process(inp)
