"""Site-quality analysis pipeline: fetch both device audits, then build the report."""

import asyncio
import logging
from typing import Optional

from seo_analytics.config import AnalysisConfig, default_config
from seo_analytics.external.pagespeed_insights import PageSpeedInsightsAPI, SleepFunc
from seo_analytics.models import AnalysisReport, DeviceProfile
from seo_analytics.report_builder import build_report

logger = logging.getLogger(__name__)


async def analyze_url(
    target_url: str,
    credential: Optional[str] = None,
    *,
    config: Optional[AnalysisConfig] = None,
    api: Optional[PageSpeedInsightsAPI] = None,
    sleep: Optional[SleepFunc] = None,
) -> AnalysisReport:
    """Run one complete analysis of a URL.

    The mobile audit is fetched first, then after a fixed pause the desktop
    audit; the two requests never overlap. A failure of either fetch aborts
    the run.

    Args:
        target_url: URL to analyze
        credential: Optional PageSpeed Insights API key
        config: Timing, retry and threshold configuration
        api: Retriever to use (built from config if None)
        sleep: Awaitable used for the inter-request pause

    Returns:
        AnalysisReport for the URL

    Raises:
        AuditFetchFailed: If either audit could not be fetched
        MalformedAuditData: If either audit is missing a category score
    """
    config = config or default_config
    sleep = sleep or asyncio.sleep
    api = api or PageSpeedInsightsAPI(config=config, sleep=sleep)

    logger.info(f"Starting SEO analysis for: {target_url}")

    mobile = await api.fetch_audit(target_url, DeviceProfile.MOBILE, credential)

    logger.debug(f"Waiting {config.inter_request_delay_seconds:g}s before desktop request")
    await sleep(config.inter_request_delay_seconds)

    desktop = await api.fetch_audit(target_url, DeviceProfile.DESKTOP, credential)

    report = build_report(mobile, desktop, target_url, config=config)
    logger.info(
        f"Analysis complete: mobile performance={report.mobile.scores.performance}, "
        f"desktop performance={report.desktop.scores.performance}, "
        f"{len(report.opportunities)} opportunities"
    )
    return report
