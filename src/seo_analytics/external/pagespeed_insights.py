"""
Google PageSpeed Insights API Client

Fetches Lighthouse audits for one URL and one device profile.
API Documentation: https://developers.google.com/speed/docs/insights/v5/get-started

Rate Limits:
- Anonymous requests share a small quota and are rejected with HTTP 429
- An API key raises the quota to 25,000 requests per day (free tier)
"""

import asyncio
import logging
from typing import Awaitable, Callable, Optional

import httpx

from seo_analytics.config import AnalysisConfig, default_config
from seo_analytics.constants import HTTP_TOO_MANY_REQUESTS
from seo_analytics.exceptions import AuditFetchFailed, UnknownDeviceProfile
from seo_analytics.models import AuditRequest, AuditResult, DeviceProfile

logger = logging.getLogger(__name__)

SleepFunc = Callable[[float], Awaitable[None]]


class PageSpeedInsightsAPI:
    """Client for Google PageSpeed Insights API v5"""

    def __init__(
        self,
        config: Optional[AnalysisConfig] = None,
        client: Optional[httpx.AsyncClient] = None,
        sleep: Optional[SleepFunc] = None,
    ):
        """
        Initialize PageSpeed Insights API client.

        Args:
            config: Retry, timeout and endpoint configuration
            client: Shared HTTP client (a fresh one is opened per request if None)
            sleep: Awaitable used for backoff waits (default: asyncio.sleep)
        """
        self.config = config or default_config
        self.client = client
        self.sleep = sleep or asyncio.sleep

    async def fetch_audit(
        self,
        target_url: str,
        device_profile: DeviceProfile,
        credential: Optional[str] = None,
    ) -> AuditResult:
        """
        Fetch the Lighthouse audit for a URL under one device profile.

        Rate-limited responses (429) are retried with a linear backoff of
        ``attempt * backoff_step_seconds``; every other failure is raised
        immediately.

        Args:
            target_url: URL to analyze
            device_profile: Mobile or desktop strategy
            credential: Optional API key

        Returns:
            Decoded audit result

        Raises:
            AuditFetchFailed: On transport errors, non-success responses or
                when the retry ceiling is reached
            MalformedAuditData: If the response has no Lighthouse result
            UnknownDeviceProfile: If device_profile is not mobile or desktop
        """
        try:
            device_profile = DeviceProfile(device_profile)
        except ValueError as e:
            raise UnknownDeviceProfile(device_profile) from e

        request = AuditRequest(target_url, device_profile, credential)
        params = request.to_params(self.config.categories)
        max_attempts = self.config.max_attempts

        logger.info(f"[PSI] Analyzing {target_url} ({request.device_profile.value})")

        for attempt in range(1, max_attempts + 1):
            response = await self._get(request, params)

            if response.is_success:
                return self._decode(request, response)

            if response.status_code != HTTP_TOO_MANY_REQUESTS:
                cause = f"API error: {response.status_code} {response.reason_phrase}"
                logger.error(f"[PSI] {cause} for {target_url} ({request.device_profile.value})")
                raise AuditFetchFailed(
                    target_url,
                    request.device_profile,
                    cause,
                    http_status=response.status_code,
                )

            if attempt < max_attempts:
                wait_time = self.config.backoff_for(attempt)
                logger.warning(
                    f"[PSI] Rate limited. Waiting {wait_time:g}s before retry "
                    f"(attempt {attempt}/{max_attempts})..."
                )
                await self.sleep(wait_time)

        logger.error(f"[PSI] Max retries exceeded for {target_url} ({request.device_profile.value})")
        raise AuditFetchFailed(
            target_url,
            request.device_profile,
            "Max retries exceeded",
            http_status=HTTP_TOO_MANY_REQUESTS,
        )

    async def _get(self, request: AuditRequest, params: list[tuple[str, str]]) -> httpx.Response:
        """Issue one GET, turning transport errors into AuditFetchFailed."""
        try:
            if self.client is not None:
                return await self.client.get(
                    self.config.api_url, params=params, timeout=self.config.request_timeout
                )
            async with httpx.AsyncClient(timeout=self.config.request_timeout) as client:
                return await client.get(self.config.api_url, params=params)

        except httpx.TimeoutException as e:
            logger.error(
                f"[PSI] Timeout analyzing {request.target_url} (>{self.config.request_timeout:g}s)"
            )
            raise AuditFetchFailed(
                request.target_url,
                request.device_profile,
                f"Request timed out after {self.config.request_timeout:g}s",
            ) from e

        except httpx.RequestError as e:
            error_msg = str(e) if str(e) else type(e).__name__
            logger.error(f"[PSI] Network error analyzing {request.target_url}: {error_msg}")
            raise AuditFetchFailed(
                request.target_url,
                request.device_profile,
                f"Network error: {error_msg}",
            ) from e

    def _decode(self, request: AuditRequest, response: httpx.Response) -> AuditResult:
        try:
            payload = response.json()
        except ValueError as e:
            raise AuditFetchFailed(
                request.target_url,
                request.device_profile,
                "Response body is not valid JSON",
                http_status=response.status_code,
            ) from e

        result = AuditResult.from_payload(payload, request.device_profile)
        logger.info(
            f"[PSI] ✓ {request.target_url} ({request.device_profile.value}): "
            f"{len(result.audits)} audits"
        )
        return result
