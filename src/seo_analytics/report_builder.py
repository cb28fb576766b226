"""
Report Builder

Turns the mobile and desktop PageSpeed Insights audits into an
AnalysisReport:
- Category scores rounded onto a 0-100 scale for each device
- The six tracked vitals classified against fixed thresholds
- Up to ten improvement opportunities taken from failing audits

Vitals and opportunities are read from the mobile audit only; the desktop
audit contributes its category scores.
"""

import math
from itertools import islice
from datetime import datetime
from typing import Iterable, Optional

from seo_analytics.config import AnalysisConfig, VitalThreshold, default_config
from seo_analytics.constants import VITAL_AUDIT_IDS
from seo_analytics.exceptions import MalformedAuditData
from seo_analytics.models import (
    AnalysisReport,
    AuditEntry,
    AuditResult,
    CategoryScores,
    DeviceReport,
    Opportunity,
    VitalMetric,
    VitalName,
    VitalReading,
    VitalStatus,
)


def classify_score(fraction: float) -> int:
    """Convert a 0.0-1.0 Lighthouse score to an integer 0-100, rounding half up."""
    return int(math.floor(fraction * 100 + 0.5))


def classify_vital(value: Optional[float], threshold: VitalThreshold) -> VitalStatus:
    """Classify a vital's numeric value; both band limits are inclusive."""
    if value is None:
        return VitalStatus.UNKNOWN
    if value <= threshold.good:
        return VitalStatus.GOOD
    if value <= threshold.needs_work:
        return VitalStatus.NEEDS_WORK
    return VitalStatus.POOR


def summarize_description(description: str) -> str:
    """Keep the first sentence of an audit description, period included."""
    return description.split(".")[0] + "."


def extract_category_scores(audit: AuditResult) -> CategoryScores:
    """
    Round the four category scores of one audit.

    Raises:
        MalformedAuditData: If a category is missing or has no score
    """
    def score_of(category: str) -> int:
        fraction = audit.categories.get(category)
        if fraction is None:
            raise MalformedAuditData(audit.device_profile, f"categories.{category}.score")
        return classify_score(fraction)

    return CategoryScores(
        performance=score_of("performance"),
        accessibility=score_of("accessibility"),
        best_practices=score_of("best-practices"),
        seo=score_of("seo"),
    )


def extract_vitals(
    audit: AuditResult,
    thresholds: dict[VitalName, VitalThreshold],
) -> tuple[VitalReading, ...]:
    """Read and classify the six tracked vitals, in report order."""
    readings = []
    for name in VitalName:
        entry = audit.audits.get(VITAL_AUDIT_IDS[name.value]) or AuditEntry()
        metric = VitalMetric(
            name=name,
            numeric_value=entry.numeric_value,
            display_value=entry.display_value,
        )
        readings.append(VitalReading(metric, classify_vital(metric.numeric_value, thresholds[name])))
    return tuple(readings)


def extract_opportunities(
    audits: dict[str, AuditEntry],
    limit: int = 10,
    score_cutoff: float = 0.9,
) -> tuple[Opportunity, ...]:
    """
    Collect improvement suggestions from failing audits.

    An audit qualifies when its score is present and below the cutoff and
    it has both a title and a description. Payload order is kept; results
    are not ranked.
    """
    return tuple(islice(_iter_opportunities(audits.values(), score_cutoff), limit))


def _iter_opportunities(entries: Iterable[AuditEntry], score_cutoff: float):
    for entry in entries:
        if entry.score is None or entry.score >= score_cutoff:
            continue
        if not entry.title or not entry.description:
            continue
        yield Opportunity(title=entry.title, summary=summarize_description(entry.description))


def build_report(
    mobile_audit: AuditResult,
    desktop_audit: AuditResult,
    target_url: str,
    *,
    config: Optional[AnalysisConfig] = None,
    generated_at: Optional[datetime] = None,
) -> AnalysisReport:
    """
    Assemble the report for one analysis run.

    Args:
        mobile_audit: Audit fetched with the mobile strategy
        desktop_audit: Audit fetched with the desktop strategy
        target_url: URL that was analyzed
        config: Thresholds and opportunity limits
        generated_at: Report timestamp (defaults to now)

    Returns:
        Immutable AnalysisReport

    Raises:
        MalformedAuditData: If either audit lacks a category score
    """
    config = config or default_config

    # Both device reports show the mobile vitals
    vitals = extract_vitals(mobile_audit, config.thresholds)

    return AnalysisReport(
        target_url=target_url,
        generated_at=generated_at or datetime.now(),
        mobile=DeviceReport(scores=extract_category_scores(mobile_audit), vitals=vitals),
        desktop=DeviceReport(scores=extract_category_scores(desktop_audit), vitals=vitals),
        opportunities=extract_opportunities(
            mobile_audit.audits,
            limit=config.max_opportunities,
            score_cutoff=config.opportunity_score_cutoff,
        ),
    )
