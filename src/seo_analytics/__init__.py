"""Single-URL site-quality analyzer built on Google PageSpeed Insights."""

__version__ = "0.1.0"

from seo_analytics.analyzer import analyze_url
from seo_analytics.config import AnalysisConfig, VitalThreshold, settings
from seo_analytics.exceptions import (
    SeoAnalyticsError,
    AuditFetchFailed,
    MalformedAuditData,
    UnknownDeviceProfile,
)
from seo_analytics.external.pagespeed_insights import PageSpeedInsightsAPI
from seo_analytics.models import (
    DeviceProfile,
    AuditRequest,
    AuditEntry,
    AuditResult,
    CategoryScores,
    VitalName,
    VitalMetric,
    VitalStatus,
    VitalReading,
    Opportunity,
    DeviceReport,
    AnalysisReport,
)
from seo_analytics.report_builder import build_report, classify_score, classify_vital
from seo_analytics.report_generator import ReportGenerator
from seo_analytics.output_manager import OutputManager

__all__ = [
    # Core
    "analyze_url",
    "PageSpeedInsightsAPI",
    "build_report",
    "classify_score",
    "classify_vital",
    # Config
    "AnalysisConfig",
    "VitalThreshold",
    "settings",
    # Errors
    "SeoAnalyticsError",
    "AuditFetchFailed",
    "MalformedAuditData",
    "UnknownDeviceProfile",
    # Models
    "DeviceProfile",
    "AuditRequest",
    "AuditEntry",
    "AuditResult",
    "CategoryScores",
    "VitalName",
    "VitalMetric",
    "VitalStatus",
    "VitalReading",
    "Opportunity",
    "DeviceReport",
    "AnalysisReport",
    # Output
    "ReportGenerator",
    "OutputManager",
]
