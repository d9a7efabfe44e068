from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, Field

from .dna_schema import BusinessDNA, MarketIntelligence, ValidationStrategy

RecommendationStatus = Literal["GO", "REVIEW", "NO-GO"]


class AttributeSignals(BaseModel):
    """Self-assessed 0-10 idea attributes used by differentiation and virality."""

    Disruptive: Optional[float] = Field(None, ge=0, le=10)
    Defensible: Optional[float] = Field(None, ge=0, le=10)
    Discontinuous: Optional[float] = Field(None, ge=0, le=10)
    SocialNeed: Optional[float] = Field(None, ge=0, le=10)
    Growth: Optional[float] = Field(None, ge=0, le=10)
    Achievement: Optional[float] = Field(None, ge=0, le=10)
    Recognition: Optional[float] = Field(None, ge=0, le=10)

    class Config:
        frozen = True


class ValidationInput(BaseModel):
    """Raw idea text plus optional self-reported validation signals.

    Every numeric signal is optional; the scoring engine substitutes a
    neutral default for anything left unset.
    """

    idea_text: str = Field("", description="Free-form idea description (may be empty)")
    target_customer: Optional[str] = None
    b2x: Optional[Literal["B2B", "B2C", "B2B2C", "Marketplace"]] = None

    # Problem / solution signals (0-10)
    unavoidable: Optional[float] = Field(None, ge=0, le=10)
    urgency: Optional[float] = Field(None, ge=0, le=10)
    underserved: Optional[float] = Field(None, ge=0, le=10)
    feasibility: Optional[float] = Field(None, ge=0, le=10)
    pain_gain_ratio: Optional[float] = Field(None, ge=0, le=10)
    whitespace: Optional[float] = Field(None, ge=0, le=10)

    # Market signals (0-10)
    tam_quality: Optional[float] = Field(None, ge=0, le=10)
    growth_rate_quality: Optional[float] = Field(None, ge=0, le=10)
    competition_density: Optional[float] = Field(None, ge=0, le=10)
    willingness_to_pay: Optional[float] = Field(None, ge=0, le=10)
    channels_clarity: Optional[float] = Field(None, ge=0, le=10)
    market_data_weight: Optional[float] = Field(
        None, ge=0, le=1, description="Share of market quality taken from research data"
    )

    # Team and risk (0-10)
    team_experience: Optional[float] = Field(None, ge=0, le=10)
    regulatory_risk: Optional[float] = Field(None, ge=0, le=10)
    platform_dependency_risk: Optional[float] = Field(None, ge=0, le=10)
    safety_risk: Optional[float] = Field(None, ge=0, le=10)

    attributes: Optional[AttributeSignals] = None

    # Evidence counts (>= 0)
    interviews: Optional[float] = Field(None, ge=0)
    interviews_positive_pct: Optional[float] = Field(None, ge=0)
    waitlist_signups: Optional[float] = Field(None, ge=0)
    waitlist_conv_rate_pct: Optional[float] = Field(None, ge=0)
    lois: Optional[float] = Field(None, ge=0)
    preorders: Optional[float] = Field(None, ge=0)
    price_point: Optional[float] = Field(None, ge=0)
    ltv_estimate: Optional[float] = Field(None, ge=0)
    cac_estimate: Optional[float] = Field(None, ge=0)
    capital_runway_months: Optional[float] = Field(None, ge=0)

    illegal_or_prohibited: bool = False

    # Descriptive fields read by the composite detector
    title: Optional[str] = None
    category: Optional[str] = None
    value_prop: Optional[str] = None
    description: Optional[str] = None
    target_market: Optional[str] = None

    class Config:
        frozen = True


class ValidateOptions(BaseModel):
    enforce_caps: Optional[bool] = None
    clamp_scores: Optional[bool] = None


class ValidateRequest(BaseModel):
    input: ValidationInput
    options: Optional[ValidateOptions] = None


class ScoreCard(BaseModel):
    """Dimension scores (0-10) and overall score (0-100) of a result."""

    problem: Optional[float] = None
    underserved: Optional[float] = None
    feasibility: Optional[float] = None
    differentiation: Optional[float] = None
    demand_signals: Optional[float] = None
    willingness_to_pay: Optional[float] = None
    market_quality: Optional[float] = None
    gtm: Optional[float] = None
    execution: Optional[float] = None
    risk: Optional[float] = None
    network_effects: Optional[float] = None
    regulatory_compliance: Optional[float] = None
    supply_demand_balance: Optional[float] = None
    viral_potential: Optional[float] = None
    overall: Optional[float] = None


class ValidationResult(BaseModel):
    """Terminal output of one validation call."""

    id: str
    status: RecommendationStatus
    value_prop: str = ""
    highlights: List[str] = Field(default_factory=list)
    risks: List[str] = Field(default_factory=list)
    scores: ScoreCard = Field(default_factory=ScoreCard)
    target_market: Optional[str] = None
    title: Optional[str] = None
    created_at: Optional[str] = None
    reasoning: Optional[str] = None
    business_dna: Optional[BusinessDNA] = None
    market_intelligence: Optional[MarketIntelligence] = None
    validation_strategy: Optional[ValidationStrategy] = None
    methodology_explanation: Optional[str] = None
    meta: Dict[str, Any] = Field(default_factory=dict)
