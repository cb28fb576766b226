# src/seo_analytics/constants.py
"""Centralized constants for the site-quality analyzer.

Default values used across the retriever, the report builder and the
renderer. For the structure that carries them at runtime, see config.py
and AnalysisConfig.
"""

# =============================================================================
# PageSpeed Insights API Constants
# =============================================================================

PSI_API_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"

# Lighthouse categories requested for every audit
PSI_CATEGORIES = (
    "performance",
    "accessibility",
    "best-practices",
    "seo",
)

# Per-request timeout in seconds (Lighthouse runs are slow)
DEFAULT_REQUEST_TIMEOUT_SECONDS = 120.0


# =============================================================================
# Retry Constants
# =============================================================================

# Total attempts per device profile, the first request included
DEFAULT_MAX_ATTEMPTS = 5

# Linear backoff step: attempt n waits n * step seconds (15s, 30s, 45s, ...)
RATE_LIMIT_BACKOFF_STEP_SECONDS = 15.0

# Only this status is retried
HTTP_TOO_MANY_REQUESTS = 429

# Pause between the mobile and the desktop request
INTER_REQUEST_DELAY_SECONDS = 2.0


# =============================================================================
# Core Web Vitals Thresholds (milliseconds, CLS is unitless)
# =============================================================================

LCP_GOOD_MS = 2500
LCP_NEEDS_WORK_MS = 4000

TBT_GOOD_MS = 200
TBT_NEEDS_WORK_MS = 600

CLS_GOOD_THRESHOLD = 0.1
CLS_NEEDS_WORK_THRESHOLD = 0.25

FCP_GOOD_MS = 1800
FCP_NEEDS_WORK_MS = 3000

SPEED_INDEX_GOOD_MS = 3400
SPEED_INDEX_NEEDS_WORK_MS = 5800

TTI_GOOD_MS = 3800
TTI_NEEDS_WORK_MS = 7300

# Lighthouse audit ids for the tracked vitals, in report order
VITAL_AUDIT_IDS = {
    "LCP": "largest-contentful-paint",
    "TBT": "total-blocking-time",
    "CLS": "cumulative-layout-shift",
    "FCP": "first-contentful-paint",
    "SpeedIndex": "speed-index",
    "TTI": "interactive",
}


# =============================================================================
# Opportunity Constants
# =============================================================================

# Audits scoring below this are reported as opportunities
OPPORTUNITY_SCORE_CUTOFF = 0.9

# Maximum opportunities carried by a report
MAX_OPPORTUNITIES = 10


# =============================================================================
# Report Constants
# =============================================================================

DEFAULT_REPORT_PATH = "./seo-report.html"

# Category score bands used for colouring score cards
SCORE_GOOD_MIN = 90
SCORE_AVERAGE_MIN = 50

SCORE_COLORS = {
    "good": "#0cce6b",
    "average": "#ffa400",
    "poor": "#ff4e42",
}
