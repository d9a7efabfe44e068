"""HTTP market-research provider.

Posts the research prompt to a JSON endpoint and returns the market
fields it answers with. The response may carry the fields at the top
level or nested under ``data``.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Dict, Optional

import httpx

from .http_client import (
    RetryConfig,
    backoff_seconds,
    get_client,
    get_timeout,
    is_non_retryable_error,
    is_retryable_error,
)
from .timing import async_timer
from .market_intelligence import ResearchProvider

logger = logging.getLogger(__name__)


class HttpResearchProvider(ResearchProvider):
    """Fetches market research from ``RESEARCH_API_URL``."""

    def __init__(self, api_url: str, api_key: str) -> None:
        if not api_url or not api_key:
            raise EnvironmentError(
                "RESEARCH_API_URL and RESEARCH_API_KEY environment variables must "
                "be set to use the HTTP research provider."
            )
        self._api_url = api_url
        self._headers = {
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }

    # ------------------------------------------------------------------ #
    #  Public                                                              #
    # ------------------------------------------------------------------ #

    async def research(
        self,
        prompt: str,
        *,
        industry: str,
        timeout_ms: int = 8000,
    ) -> Optional[Dict]:
        payload = {"prompt": prompt, "industry": industry, "timeout_ms": timeout_ms}
        async with async_timer("research", "HTTP"):
            return await self._post_with_retry(payload)

    # ------------------------------------------------------------------ #
    #  Internal helpers                                                    #
    # ------------------------------------------------------------------ #

    async def _post_with_retry(self, payload: Dict) -> Optional[Dict]:
        client = await get_client()
        for attempt in range(RetryConfig.MAX_RETRIES + 1):
            try:
                response = await client.post(
                    self._api_url,
                    json=payload,
                    headers=self._headers,
                    timeout=get_timeout("research"),
                )
            except httpx.TimeoutException:
                logger.warning("Research API timeout (attempt %d)", attempt + 1)
            except httpx.HTTPError as exc:
                logger.warning("Research API request failed: %s", exc)
                return None
            else:
                if response.status_code == 200:
                    return self._extract(response)
                if is_non_retryable_error(response.status_code):
                    logger.warning("Research API HTTP %d (not retried)", response.status_code)
                    return None
                if not is_retryable_error(response.status_code):
                    logger.warning("Research API unexpected HTTP %d", response.status_code)
                    return None
                logger.warning(
                    "Research API HTTP %d (attempt %d)", response.status_code, attempt + 1
                )

            if attempt < RetryConfig.MAX_RETRIES:
                await asyncio.sleep(backoff_seconds(attempt))
        return None

    @staticmethod
    def _extract(response: httpx.Response) -> Optional[Dict]:
        try:
            body = response.json()
        except ValueError:
            logger.warning("Research API returned non-JSON body")
            return None
        if not isinstance(body, dict):
            return None
        data = body.get("data", body)
        return data if isinstance(data, dict) else None
