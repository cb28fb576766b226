from dotenv import load_dotenv
from dataclasses import dataclass, field
from typing import Optional
import os

from seo_analytics.constants import (
    PSI_API_URL,
    PSI_CATEGORIES,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_MAX_ATTEMPTS,
    RATE_LIMIT_BACKOFF_STEP_SECONDS,
    INTER_REQUEST_DELAY_SECONDS,
    LCP_GOOD_MS,
    LCP_NEEDS_WORK_MS,
    TBT_GOOD_MS,
    TBT_NEEDS_WORK_MS,
    CLS_GOOD_THRESHOLD,
    CLS_NEEDS_WORK_THRESHOLD,
    FCP_GOOD_MS,
    FCP_NEEDS_WORK_MS,
    SPEED_INDEX_GOOD_MS,
    SPEED_INDEX_NEEDS_WORK_MS,
    TTI_GOOD_MS,
    TTI_NEEDS_WORK_MS,
    OPPORTUNITY_SCORE_CUTOFF,
    MAX_OPPORTUNITIES,
)
from seo_analytics.models import VitalName

load_dotenv()  # Loads variables from .env file


class Settings:
    """
    Manages application settings loaded from environment variables.
    """
    PAGESPEED_API_KEY = os.getenv("PAGESPEED_API_KEY")
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


settings = Settings()


@dataclass(frozen=True)
class VitalThreshold:
    """Upper bounds for the Good and Needs Work bands of one vital."""

    good: float
    needs_work: float


def _default_thresholds() -> dict[VitalName, VitalThreshold]:
    return {
        VitalName.LCP: VitalThreshold(LCP_GOOD_MS, LCP_NEEDS_WORK_MS),
        VitalName.TBT: VitalThreshold(TBT_GOOD_MS, TBT_NEEDS_WORK_MS),
        VitalName.CLS: VitalThreshold(CLS_GOOD_THRESHOLD, CLS_NEEDS_WORK_THRESHOLD),
        VitalName.FCP: VitalThreshold(FCP_GOOD_MS, FCP_NEEDS_WORK_MS),
        VitalName.SPEED_INDEX: VitalThreshold(SPEED_INDEX_GOOD_MS, SPEED_INDEX_NEEDS_WORK_MS),
        VitalName.TTI: VitalThreshold(TTI_GOOD_MS, TTI_NEEDS_WORK_MS),
    }


@dataclass
class AnalysisConfig:
    """Configuration shared by the retriever and the report builder."""

    # PageSpeed Insights API
    api_url: str = PSI_API_URL
    categories: tuple[str, ...] = PSI_CATEGORIES
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS

    # Rate-limit handling
    max_attempts: int = DEFAULT_MAX_ATTEMPTS
    backoff_step_seconds: float = RATE_LIMIT_BACKOFF_STEP_SECONDS
    inter_request_delay_seconds: float = INTER_REQUEST_DELAY_SECONDS

    # Report assembly
    opportunity_score_cutoff: float = OPPORTUNITY_SCORE_CUTOFF
    max_opportunities: int = MAX_OPPORTUNITIES
    thresholds: dict[VitalName, VitalThreshold] = field(default_factory=_default_thresholds)

    def backoff_for(self, attempt: int) -> float:
        """Seconds to wait after the given (1-based) rate-limited attempt."""
        return attempt * self.backoff_step_seconds

    @classmethod
    def from_env(cls) -> "AnalysisConfig":
        """Load timing configuration from environment variables.

        Vital thresholds are not read from the environment.

        Returns:
            AnalysisConfig: Configuration instance with values from environment
        """
        return cls(
            request_timeout=float(os.getenv("PSI_REQUEST_TIMEOUT", str(DEFAULT_REQUEST_TIMEOUT_SECONDS))),
            max_attempts=int(os.getenv("PSI_MAX_ATTEMPTS", str(DEFAULT_MAX_ATTEMPTS))),
            backoff_step_seconds=float(
                os.getenv("PSI_BACKOFF_STEP_SECONDS", str(RATE_LIMIT_BACKOFF_STEP_SECONDS))
            ),
            inter_request_delay_seconds=float(
                os.getenv("PSI_INTER_REQUEST_DELAY_SECONDS", str(INTER_REQUEST_DELAY_SECONDS))
            ),
        )


# Global default configuration instance
default_config = AnalysisConfig()
