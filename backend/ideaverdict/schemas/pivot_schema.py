from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class BusinessModelType(str, Enum):
    """The 11 business-model archetypes used for pivot selection."""

    SAAS_B2B = "saas-b2b"
    ENTERPRISE_SAAS = "enterprise-saas"
    MARKETPLACE = "marketplace"
    PHYSICAL_PRODUCT = "physical-product"
    DTC_SUBSCRIPTION = "dtc-subscription"
    SERVICES = "services"
    FINTECH = "fintech"
    HEALTHCARE = "healthcare"
    EDTECH = "edtech"
    MOBILE_APP = "mobile-app"
    FOOD_SERVICE = "food-service"


class BusinessModelClassification(BaseModel):
    primary_type: BusinessModelType
    sub_type: Optional[str] = None
    confidence: float = Field(..., ge=0.0, le=1.0)
    indicators: List[str] = Field(default_factory=list)
    constraints: List[str] = Field(default_factory=list)
    reasoning_chain: List[str] = Field(default_factory=list)


class ScoringFactors(BaseModel):
    """Six 0-100 factors blended into a pivot's overall score."""

    problem: float = Field(..., ge=0, le=100)
    underserved: float = Field(..., ge=0, le=100)
    demand: float = Field(..., ge=0, le=100)
    differentiation: float = Field(..., ge=0, le=100)
    economics: float = Field(..., ge=0, le=100)
    gtm: float = Field(..., ge=0, le=100)

    class Config:
        frozen = True


class CategoryPivotOption(BaseModel):
    """Read-only catalog entry describing one alternative business concept."""

    id: str
    category: BusinessModelType
    label: str
    description: str
    tam: str
    growth: str
    competition: str
    major_competitors: List[str] = Field(default_factory=list)
    cac_range: str
    ltv: str
    barriers: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    scoring_factors: ScoringFactors
    relevant_skills: List[str] = Field(default_factory=list)

    class Config:
        frozen = True


class PivotScore(BaseModel):
    option: CategoryPivotOption
    overall: int
    delta: float
    skill_match: float = Field(..., ge=0.0, le=1.0)


class UserProfile(BaseModel):
    skills: List[str] = Field(default_factory=list)


class PivotRequest(BaseModel):
    idea_text: str
    current_score: float = Field(..., ge=0, le=100)
    business_model_override: Optional[BusinessModelType] = None
    user_profile: Optional[UserProfile] = None


class HealthcarePivotRequest(BaseModel):
    idea_text: str = Field(..., min_length=1)
    current_score: float = Field(..., ge=0, le=100)


class MarketSnapshot(BaseModel):
    tam: str
    growth: str
    competition: str
    competitors: List[str] = Field(default_factory=list)


class ContextualPivot(BaseModel):
    id: str
    category: BusinessModelType
    label: str
    description: str
    overall: int
    delta: float
    market_snapshot: MarketSnapshot
    scoring_breakdown: ScoringFactors
    barriers: List[str] = Field(default_factory=list)
    opportunities: List[str] = Field(default_factory=list)
    skill_match: float


class PivotResponse(BaseModel):
    business_model: BusinessModelClassification
    pivots: List[ContextualPivot] = Field(default_factory=list)
    original_constraints: List[str] = Field(default_factory=list)


class InvalidPivot(BaseModel):
    option: CategoryPivotOption
    reason: str


class HealthcarePivotAnalysis(BaseModel):
    business_model: BusinessModelClassification
    valid_pivots: List[PivotScore] = Field(default_factory=list)
    invalid_pivots: List[InvalidPivot] = Field(default_factory=list)


class PivotValidation(BaseModel):
    is_valid: bool
    errors: List[str] = Field(default_factory=list)
