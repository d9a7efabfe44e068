"""
Async HTTP Client Configuration

Shared httpx.AsyncClient for the external market-research provider,
with timeout presets and retry settings.
"""

import httpx
from typing import Optional


class Timeouts:
    """Timeout presets for external calls (seconds)."""
    RESEARCH = 8.0      # per-request budget for the research API
    CONNECT = 3.0

    # Hard ceiling for the whole research step, retries included
    RESEARCH_MAX = 8.5


class RetryConfig:
    """Retry settings - one retry keeps the research step under its ceiling."""
    MAX_RETRIES = 1
    INITIAL_BACKOFF = 0.25  # seconds
    MAX_BACKOFF = 1.0       # seconds

    NON_RETRYABLE_CODES = {400, 401, 403, 404, 422}
    RETRYABLE_CODES = {429, 500, 502, 503, 504}


_client: Optional[httpx.AsyncClient] = None


async def get_client() -> httpx.AsyncClient:
    """Get the shared async HTTP client."""
    global _client
    if _client is None:
        _client = httpx.AsyncClient(
            timeout=httpx.Timeout(Timeouts.RESEARCH, connect=Timeouts.CONNECT),
            limits=httpx.Limits(max_keepalive_connections=10, max_connections=20),
            follow_redirects=True,
        )
    return _client


async def close_client():
    """Close the shared client (call on app shutdown)."""
    global _client
    if _client is not None:
        await _client.aclose()
        _client = None


def get_timeout(service: str) -> httpx.Timeout:
    """Get timeout configuration for a service."""
    timeouts = {
        "research": Timeouts.RESEARCH,
    }
    seconds = timeouts.get(service.lower(), Timeouts.RESEARCH)
    return httpx.Timeout(seconds, connect=Timeouts.CONNECT)


def backoff_seconds(attempt: int) -> float:
    """Exponential backoff for the given zero-based attempt."""
    return min(RetryConfig.MAX_BACKOFF, RetryConfig.INITIAL_BACKOFF * (2 ** attempt))


def is_retryable_error(status_code: int) -> bool:
    """Check if an HTTP error is retryable."""
    return status_code in RetryConfig.RETRYABLE_CODES


def is_non_retryable_error(status_code: int) -> bool:
    """Check if an HTTP error should not be retried."""
    return status_code in RetryConfig.NON_RETRYABLE_CODES
