"""Lexical Pattern Matcher.

Scores lower-cased text against a table of weighted indicators and
returns the total together with an evidence trail.

Rules
-----
- NO API calls
- Literal or regex match contributes the FULL weight (no partial credit)
- Negative weights model anti-indicators
- Pure deterministic matching
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Pattern, Sequence, Union


@dataclass(frozen=True)
class PatternIndicator:
    """One weighted indicator: a literal substring or a compiled regex."""

    term: Union[str, Pattern[str]]
    weight: float
    reason: str = ""
    label: Optional[str] = None

    def matches(self, text: str) -> bool:
        if isinstance(self.term, str):
            return self.term in text
        return self.term.search(text) is not None

    @property
    def evidence(self) -> str:
        if self.label:
            return self.label
        return self.term if isinstance(self.term, str) else self.term.pattern


@dataclass
class MatchResult:
    score: float = 0.0
    evidence: List[str] = field(default_factory=list)
    reasons: List[str] = field(default_factory=list)

    @property
    def hits(self) -> int:
        return len(self.evidence)


def rx(pattern: str) -> Pattern[str]:
    """Compile a case-insensitive indicator regex."""
    return re.compile(pattern, re.IGNORECASE)


def keyword_indicators(terms: Iterable[str], weight: float = 1.0) -> List[PatternIndicator]:
    """Build unit-weight literal indicators from a keyword list."""
    return [PatternIndicator(term, weight) for term in terms]


def score_text(
    text: str,
    indicators: Sequence[PatternIndicator],
    multiplier: float = 1.0,
    result: Optional[MatchResult] = None,
) -> MatchResult:
    """Score *text* against *indicators*.

    Parameters
    ----------
    text : str
        Already lower-cased text.
    indicators : sequence of PatternIndicator
        Weighted indicators, evaluated in order.
    multiplier : float
        Scales every matched weight (used for asymmetric discounts).
    result : MatchResult, optional
        Accumulate into an existing result instead of a fresh one.
    """
    out = result if result is not None else MatchResult()
    for indicator in indicators:
        if indicator.matches(text):
            out.score += indicator.weight * multiplier
            out.evidence.append(indicator.evidence)
            if indicator.reason:
                out.reasons.append(indicator.reason)
    return out


def count_hits(text: str, terms: Iterable[str]) -> int:
    """Number of literal *terms* present in *text*."""
    return score_text(text, keyword_indicators(terms)).hits


def contains_any(text: str, terms: Iterable[str]) -> bool:
    return any(term in text for term in terms)
