"""
Runtime settings for the adaptive validator.

Values are read from the environment (``.env`` is loaded through
python-dotenv). Constructor arguments on ``AdaptiveValidator`` take
precedence over anything read here.

Environment variables
---------------------
- ADAPTIVE_COMPOSITE_DETECTOR   "1" enables the composite detector
- ADAPTIVE_CONSENSUS            "1" enables the consensus pass
- ADAPTIVE_FALSE_POSITIVE       "1" enables the false-positive pass
- RESEARCH_PROVIDER             "http" selects the HTTP research provider
- RESEARCH_API_URL / RESEARCH_API_KEY
- RESEARCH_TIMEOUT_SECONDS      hard ceiling for a research call (8.5)
"""

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv

DEFAULT_RESEARCH_TIMEOUT_SECONDS = 8.5


def _flag(name: str) -> bool:
    return os.getenv(name, "").strip() == "1"


def _float_env(name: str, default: float) -> float:
    raw = os.getenv(name, "").strip()
    if not raw:
        return default
    try:
        return float(raw)
    except ValueError:
        print(f"⚠️ [CONFIG] Invalid {name}={raw!r}, using {default}")
        return default


@dataclass(frozen=True)
class ValidatorSettings:
    """Feature flags and limits for one validator instance."""

    use_composite_detector: bool = False
    enable_consensus: bool = False
    enable_false_positive: bool = False
    research_provider: str = ""
    research_api_url: str = ""
    research_api_key: str = ""
    research_timeout_seconds: float = DEFAULT_RESEARCH_TIMEOUT_SECONDS

    @classmethod
    def from_env(cls) -> "ValidatorSettings":
        load_dotenv()
        return cls(
            use_composite_detector=_flag("ADAPTIVE_COMPOSITE_DETECTOR"),
            enable_consensus=_flag("ADAPTIVE_CONSENSUS"),
            enable_false_positive=_flag("ADAPTIVE_FALSE_POSITIVE"),
            research_provider=os.getenv("RESEARCH_PROVIDER", "").strip().lower(),
            research_api_url=os.getenv("RESEARCH_API_URL", "").strip(),
            research_api_key=os.getenv("RESEARCH_API_KEY", "").strip(),
            research_timeout_seconds=_float_env(
                "RESEARCH_TIMEOUT_SECONDS", DEFAULT_RESEARCH_TIMEOUT_SECONDS
            ),
        )
