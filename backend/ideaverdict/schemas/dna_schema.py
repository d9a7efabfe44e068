from typing import List, Literal, Optional

from pydantic import BaseModel, Field


class BusinessDNA(BaseModel):
    """Structural classification of an idea, derived once per call."""

    industry: str = Field(..., description="e.g. fintech, saas, beauty; default technology")
    sub_industry: str = Field("general")
    business_model: str = Field(..., description="e.g. physical-subscription, marketplace")
    customer_type: Literal["b2c", "b2b", "b2b2c", "marketplace"]
    stage: Literal["idea", "prototype", "mvp", "launched"]
    scale: Literal["local", "regional", "national", "global"]
    capital_intensity: Literal["low", "medium", "high"]
    regulatory_complexity: Literal["low", "medium", "high"]
    network_effects: Literal["none", "weak", "strong"]
    confidence: float = Field(..., ge=0.0, le=1.0)

    class Config:
        frozen = True


class MarketIntelligence(BaseModel):
    """Market sizing for one idea.

    ``competition_level`` is on a 0-10 scale where 10 means LOW
    competition; ``customer_acquisition_difficulty`` 10 means very hard.
    """

    tam_usd: float = Field(..., ge=0)
    growth_rate: float
    competition_level: float = Field(..., ge=0, le=10)
    key_trends: List[str] = Field(default_factory=list)
    regulatory_barriers: List[str] = Field(default_factory=list)
    typical_margins: float
    customer_acquisition_difficulty: float = Field(..., ge=0, le=10)
    confidence: float = Field(..., ge=0.0, le=1.0)
    notable_competitors: Optional[List[str]] = None


class SelectedDimension(BaseModel):
    key: str
    label: str
    weight: float
    reason: str


class ValidationStrategy(BaseModel):
    """Human-readable rationale for the weight vector chosen for an idea."""

    selected_dimensions: List[SelectedDimension] = Field(default_factory=list)
    benchmarks_focus: List[str] = Field(default_factory=list)
    data_quality_guards: List[str] = Field(default_factory=list)
    notes: Optional[str] = None
