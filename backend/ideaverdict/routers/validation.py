"""
Validation Router

Thin HTTP adapter over the adaptive validator and the pivot engine.
"""

import time
from functools import lru_cache

from fastapi import APIRouter, Depends, HTTPException, status

from ..agents.adaptive_validation import AdaptiveValidator
from ..schemas.pivot_schema import (
    HealthcarePivotAnalysis,
    HealthcarePivotRequest,
    PivotRequest,
    PivotResponse,
)
from ..schemas.validation_schema import ValidateRequest, ValidationResult
from ..services.pivot_engine import generate_contextual_pivots, healthcare_validated_pivots


router = APIRouter(
    prefix="/validate",
    tags=["Validation"],
    responses={
        500: {"description": "Internal server error during validation"}
    }
)


@lru_cache(maxsize=1)
def get_validator() -> AdaptiveValidator:
    """Validator built once from the environment."""
    return AdaptiveValidator()


@router.post(
    "",
    response_model=ValidationResult,
    status_code=status.HTTP_200_OK,
    summary="Validate a Startup Idea",
    response_description="Verdict, dimension scores, highlights, risks and metadata"
)
async def validate_idea(
    request: ValidateRequest,
    validator: AdaptiveValidator = Depends(get_validator),
) -> ValidationResult:
    start_time = time.perf_counter()
    print("[TIMING] validate_endpoint: START")

    try:
        result = await validator.validate(request.input, request.options)
    except Exception as e:
        total_duration = (time.perf_counter() - start_time) * 1000
        print(f"[TIMING] validate_endpoint: ERROR after {total_duration:.0f}ms — {str(e)[:100]}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Validation failed: {str(e)}"
        )

    total_duration = (time.perf_counter() - start_time) * 1000
    print(f"[TIMING] validate_endpoint: END — duration={total_duration:.0f}ms")
    return result


@router.post(
    "/pivots",
    response_model=PivotResponse,
    status_code=status.HTTP_200_OK,
    summary="Recommend Pivots",
    response_description="Detected business model, pivot options and current constraints"
)
async def recommend_pivots(request: PivotRequest) -> PivotResponse:
    try:
        return generate_contextual_pivots(request)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Pivot generation failed: {str(e)}"
        )


@router.post(
    "/pivots/healthcare",
    response_model=HealthcarePivotAnalysis,
    status_code=status.HTTP_200_OK,
    summary="Healthcare-Validated Pivots",
    response_description="Relevance-checked pivots with uplift >= 10, plus the rejected options"
)
async def healthcare_pivots(request: HealthcarePivotRequest) -> HealthcarePivotAnalysis:
    try:
        return healthcare_validated_pivots(request.idea_text, request.current_score)
    except Exception as e:
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail=f"Healthcare pivot analysis failed: {str(e)}"
        )


@router.get(
    "/health",
    summary="Health Check",
    description="Check if the validation service is running",
    response_description="Health status"
)
async def health_check():
    """Simple health check endpoint."""
    return {"status": "healthy", "service": "idea-validation"}
