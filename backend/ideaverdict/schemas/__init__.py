from .dna_schema import (
    BusinessDNA,
    MarketIntelligence,
    SelectedDimension,
    ValidationStrategy,
)
from .validation_schema import (
    AttributeSignals,
    RecommendationStatus,
    ScoreCard,
    ValidateOptions,
    ValidateRequest,
    ValidationInput,
    ValidationResult,
)
from .pivot_schema import (
    BusinessModelClassification,
    BusinessModelType,
    CategoryPivotOption,
    ContextualPivot,
    HealthcarePivotAnalysis,
    HealthcarePivotRequest,
    InvalidPivot,
    MarketSnapshot,
    PivotRequest,
    PivotResponse,
    PivotScore,
    PivotValidation,
    ScoringFactors,
    UserProfile,
)

__all__ = [
    "BusinessDNA",
    "MarketIntelligence",
    "SelectedDimension",
    "ValidationStrategy",
    "AttributeSignals",
    "RecommendationStatus",
    "ScoreCard",
    "ValidateOptions",
    "ValidateRequest",
    "ValidationInput",
    "ValidationResult",
    "BusinessModelClassification",
    "BusinessModelType",
    "CategoryPivotOption",
    "ContextualPivot",
    "HealthcarePivotAnalysis",
    "HealthcarePivotRequest",
    "InvalidPivot",
    "MarketSnapshot",
    "PivotRequest",
    "PivotResponse",
    "PivotScore",
    "PivotValidation",
    "ScoringFactors",
    "UserProfile",
]
