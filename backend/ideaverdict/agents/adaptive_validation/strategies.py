"""
Validation Strategies

A strategy turns one ``ValidationInput`` into a ``ValidationResult``.
The orchestrator picks one per model family:

- ``HybridStrategy`` runs the default hybrid pipeline.
- ``ECommerceValidationStrategy`` runs the same pipeline and attaches an
  e-commerce domain assessment (weights, Hill-function saturation
  constraints, KPIs) under ``meta.ecommerce``. The domain assessment is
  a separate object (``ECommerceDomainStrategy``) held by composition.
"""

from __future__ import annotations

import abc
import re
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional

from ...schemas.validation_schema import ValidationInput, ValidationResult
from ...services.hybrid_validation import HybridValidationService
from ...services.market_saturation import MarketContext, MarketSaturationConstraints
from ...services.scoring_engine import round_half_up
from .composite_detector import ModelFamily
from .consistency import WeightConfiguration

MarketMaturity = Literal["early", "growth", "mature"]

ECOMMERCE_KPIS = ["conversion_rate", "aov", "cac", "ltv", "ltv_cac", "repeat_rate"]
VALIDITY_THRESHOLD = 0.45

_CROWDED = re.compile(r"crowded|saturated|many competitors|generic")
_NICHE = re.compile(r"unique|niche|community")
_EARLY = re.compile(r"prelaunch|prototype|idea")
_GROWTH = re.compile(r"scale|vc|growth")
_BRAND = re.compile(r"brand|story|unique|niche|community|loyalty")
_COMMODITY = re.compile(r"dropship|generic|commodity|aliexpress")


class BaseValidationStrategy(abc.ABC):
    """Validates one input for a model family."""

    name: str = "base"

    @abc.abstractmethod
    async def validate(self, inp: ValidationInput) -> ValidationResult:
        ...


class HybridStrategy(BaseValidationStrategy):
    name = "hybrid-default"

    def __init__(self, service: Optional[HybridValidationService] = None) -> None:
        self._service = service or HybridValidationService()

    async def validate(self, inp: ValidationInput) -> ValidationResult:
        return await self._service.validate_business_idea(inp)


# ===================================================================== #
#  E-commerce domain assessment                                           #
# ===================================================================== #

@dataclass(frozen=True)
class ValidationContext:
    market_maturity: MarketMaturity
    market_saturation: float
    category: Optional[str] = None


@dataclass(frozen=True)
class SaturationConstraints:
    overall_cap_100: int
    demand_floor_10: int
    notes: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class DomainSummary:
    is_valid: bool
    adaptive_weights: WeightConfiguration
    market_constraints: SaturationConstraints
    industry_kpis: List[str]
    confidence_score: float


def market_context_from_text(idea_text: str, category: Optional[str] = None) -> ValidationContext:
    """Saturation and maturity guessed from the wording of the idea."""
    text = (idea_text or "").lower()
    if _CROWDED.search(text):
        saturation = 0.85
    elif _NICHE.search(text):
        saturation = 0.5
    else:
        saturation = 0.65
    if _EARLY.search(text):
        maturity: MarketMaturity = "early"
    elif _GROWTH.search(text):
        maturity = "growth"
    else:
        maturity = "early"
    return ValidationContext(market_maturity=maturity, market_saturation=saturation, category=category)


class ECommerceDomainStrategy:
    """Weights, saturation constraints and KPIs for e-commerce ideas."""

    def weighting_criteria(self) -> WeightConfiguration:
        return WeightConfiguration(
            customer_acquisition=0.3,
            revenue_growth=0.3,
            operational_efficiency=0.2,
            competitive_position=0.2,
        )

    def industry_kpis(self) -> List[str]:
        return list(ECOMMERCE_KPIS)

    def saturation_constraints(self, context: ValidationContext) -> SaturationConstraints:
        model = MarketSaturationConstraints().calculate_saturation_cap(
            ModelFamily.ECOMMERCE.value,
            MarketContext(
                spend_index=1.0,
                saturation_pct=round_half_up(context.market_saturation * 100),
                demand_elasticity=0.8 if context.market_maturity == "early" else 0.9,
            ),
        )
        return SaturationConstraints(
            overall_cap_100=int(round_half_up(model.alpha_cap * 100)),
            demand_floor_10=2 if model.beta_inflection >= 1.2 else 1,
            notes=[
                f"alpha≈{model.alpha_cap:.2f}, beta≈{model.beta_inflection:.2f}, gamma≈{model.gamma_shape:.2f}",
                "Computed via Hill-function saturation model",
            ],
        )

    def adaptive_weights(self, context: ValidationContext) -> WeightConfiguration:
        weights = WeightConfiguration(
            customer_acquisition=0.4 if context.market_maturity == "early" else 0.25,
            revenue_growth=0.3,
            operational_efficiency=0.2,
            competitive_position=0.35 if context.market_saturation > 0.8 else 0.25,
        ).normalized()
        return WeightConfiguration(**{k: round(v, 3) for k, v in weights.as_dict().items()})

    def confidence(self, context: ValidationContext) -> float:
        base = {"early": 0.55, "growth": 0.65}.get(context.market_maturity, 0.7)
        saturation_penalty = max(0.0, context.market_saturation - 0.6) * 0.4
        return max(0.3, min(0.9, base - saturation_penalty))

    def assess(self, inp: ValidationInput, context: ValidationContext) -> DomainSummary:
        weights = self.adaptive_weights(context)
        text = (inp.idea_text or "").lower()
        branded = _BRAND.search(text) is not None
        commodity = _COMMODITY.search(text) is not None
        score = (
            (0.7 if branded else 0.4) * weights.competitive_position
            + (0.1 if commodity else 0.3) * weights.customer_acquisition
            + 0.3 * weights.revenue_growth
            + 0.2 * weights.operational_efficiency
        )
        return DomainSummary(
            is_valid=score >= VALIDITY_THRESHOLD,
            adaptive_weights=weights,
            market_constraints=self.saturation_constraints(context),
            industry_kpis=self.industry_kpis(),
            confidence_score=self.confidence(context),
        )


class ECommerceValidationStrategy(BaseValidationStrategy):
    """Hybrid pipeline plus the e-commerce domain assessment."""

    name = "ecommerce-domain-adapter"

    def __init__(
        self,
        service: Optional[HybridValidationService] = None,
        domain: Optional[ECommerceDomainStrategy] = None,
    ) -> None:
        self._service = service or HybridValidationService()
        self._domain = domain or ECommerceDomainStrategy()

    async def validate(self, inp: ValidationInput) -> ValidationResult:
        context = market_context_from_text(inp.idea_text, category=ModelFamily.ECOMMERCE.value)
        result = await self._service.validate_business_idea(inp)
        summary = self._domain.assess(inp, context)

        ecommerce: Dict[str, Any] = {
            "summary": asdict(summary),
            "context": asdict(context),
            "criteria": self._domain.weighting_criteria().as_dict(),
            "constraints": asdict(self._domain.saturation_constraints(context)),
            "kpis": self._domain.industry_kpis(),
        }
        return result.model_copy(update={"meta": {**result.meta, "ecommerce": ecommerce}})
