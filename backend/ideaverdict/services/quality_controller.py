"""Quality Controller.

Produces advisory warnings attached to hybrid validation results.
Warnings never change scores or the decision.
"""

from __future__ import annotations

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel

from .market_saturation import assess_market_saturation

REGULATORY_RISK_KEYWORDS = [
    "personal data",
    "financial services",
    "healthcare",
    "children",
    "gambling",
    "biometric",
]

MAX_VIABLE_PAYBACK_MONTHS = 24


class QualityWarning(BaseModel):
    type: Literal["CRITICAL", "LEGAL", "INFO"]
    message: str
    details: Optional[str] = None


def detect_regulatory_risk(idea: str) -> bool:
    lower = (idea or "").lower()
    return any(keyword in lower for keyword in REGULATORY_RISK_KEYWORDS)


def cac_payback_months(
    cac: Optional[float], price_point: Optional[float], margin: Optional[float]
) -> Optional[float]:
    """Months of gross profit needed to recover CAC, when computable."""
    if not cac or not price_point or not margin:
        return None
    if cac <= 0 or price_point <= 0 or margin <= 0:
        return None
    return cac / (price_point * margin)


def check_for_warnings(
    idea: str,
    scores: Optional[Dict[str, float]],
    payback_months: Optional[float] = None,
) -> List[QualityWarning]:
    warnings: List[QualityWarning] = []

    if payback_months is not None and payback_months > MAX_VIABLE_PAYBACK_MONTHS:
        warnings.append(
            QualityWarning(
                type="CRITICAL",
                message="STOP - Unit economics unviable",
                details=(
                    f"CAC payback of {payback_months:.1f} months exceeds viable "
                    f"threshold ({MAX_VIABLE_PAYBACK_MONTHS} months)."
                ),
            )
        )

    penalty = assess_market_saturation(idea)
    if penalty is not None:
        warnings.append(
            QualityWarning(
                type="CRITICAL",
                message="STOP - Market oversaturated",
                details=f"{penalty.reasoning}. Consider pivot to underserved niche.",
            )
        )

    if detect_regulatory_risk(idea):
        warnings.append(
            QualityWarning(
                type="LEGAL",
                message="CAUTION - Regulatory compliance required",
                details="Significant legal/compliance costs and approval processes required.",
            )
        )

    if scores:
        low = [name for name, value in scores.items() if value is not None and value <= 3]
        if low:
            warnings.append(
                QualityWarning(
                    type="INFO",
                    message="Weak validation signals detected",
                    details=f"Dimensions requiring attention: {', '.join(low)}.",
                )
            )

    return warnings
