from .dna_classifier import classify_business_dna
from .model_type_detector import detect_business_model_type
from .market_intelligence import MarketIntelligenceGatherer, ResearchProvider, get_research_provider
from .weighting_engine import get_industry_weights
from .scoring_engine import compute_scores
from .decision_engine import make_decision
from .hybrid_validation import HybridValidationService
from .pivot_engine import generate_contextual_pivots, recommend_pivots

__all__ = [
    "classify_business_dna",
    "detect_business_model_type",
    "MarketIntelligenceGatherer",
    "ResearchProvider",
    "get_research_provider",
    "get_industry_weights",
    "compute_scores",
    "make_decision",
    "HybridValidationService",
    "generate_contextual_pivots",
    "recommend_pivots",
]
