# Adaptive validation package
from .orchestrator import AdaptiveValidator
from .composite_detector import CompositeBusinessModelDetector, HeuristicBusinessModelDetector, ModelFamily
from .consistency import ConsensusEngine, WeightConfiguration, enforce_consistency
from .edge_cases import EdgeCaseManager, EdgeCaseType
from .fallback import AdaptiveFallbackOrchestrator
from .false_positive import FalsePositivePreventionSystem
from .strategies import BaseValidationStrategy, ECommerceValidationStrategy, HybridStrategy

__all__ = [
    "AdaptiveValidator",
    "CompositeBusinessModelDetector",
    "HeuristicBusinessModelDetector",
    "ModelFamily",
    "ConsensusEngine",
    "WeightConfiguration",
    "enforce_consistency",
    "EdgeCaseManager",
    "EdgeCaseType",
    "AdaptiveFallbackOrchestrator",
    "FalsePositivePreventionSystem",
    "BaseValidationStrategy",
    "ECommerceValidationStrategy",
    "HybridStrategy",
]
