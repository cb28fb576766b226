"""Data models for site-quality analysis."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import Any, Optional

from seo_analytics.exceptions import MalformedAuditData


class DeviceProfile(str, Enum):
    """Emulated client context; the value is the PSI ``strategy``."""

    MOBILE = "mobile"
    DESKTOP = "desktop"


class VitalName(str, Enum):
    """The six tracked loading/interactivity metrics."""

    LCP = "LCP"
    TBT = "TBT"
    CLS = "CLS"
    FCP = "FCP"
    SPEED_INDEX = "SpeedIndex"
    TTI = "TTI"


class VitalStatus(str, Enum):
    GOOD = "Good"
    NEEDS_WORK = "NeedsWork"
    POOR = "Poor"
    UNKNOWN = "Unknown"


@dataclass(frozen=True)
class AuditRequest:
    """One outbound audit request for a single device profile."""

    target_url: str
    device_profile: DeviceProfile
    credential: Optional[str] = None

    def to_params(self, categories: tuple[str, ...]) -> list[tuple[str, str]]:
        """Build query parameters in wire order.

        The API key is only attached when a credential was supplied;
        otherwise the anonymous quota is used.
        """
        params = [
            ("url", self.target_url),
            ("strategy", self.device_profile.value),
        ]
        params.extend(("category", category) for category in categories)
        if self.credential:
            params.append(("key", self.credential))
        return params


@dataclass(frozen=True)
class AuditEntry:
    """A single named Lighthouse audit. Absent fields are None."""

    title: Optional[str] = None
    description: Optional[str] = None
    score: Optional[float] = None
    display_value: Optional[str] = None
    numeric_value: Optional[float] = None

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "AuditEntry":
        return cls(
            title=data.get("title"),
            description=data.get("description"),
            score=data.get("score"),
            display_value=data.get("displayValue"),
            numeric_value=data.get("numericValue"),
        )


@dataclass(frozen=True)
class AuditResult:
    """Decoded PageSpeed Insights payload for one device profile."""

    device_profile: DeviceProfile
    categories: dict[str, Optional[float]] = field(default_factory=dict)
    audits: dict[str, AuditEntry] = field(default_factory=dict)  # payload order
    fetch_time: Optional[str] = None
    lighthouse_version: Optional[str] = None
    final_url: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any, device_profile: DeviceProfile) -> "AuditResult":
        """Parse a raw ``runPagespeed`` response.

        Args:
            payload: Decoded JSON body
            device_profile: Profile the payload was requested for

        Returns:
            AuditResult with categories and audits in payload order

        Raises:
            MalformedAuditData: If the payload has no ``lighthouseResult`` or
                its categories or audits are not JSON objects
        """
        if not isinstance(payload, dict):
            raise MalformedAuditData(device_profile, "lighthouseResult")
        lighthouse = payload.get("lighthouseResult")
        if not isinstance(lighthouse, dict):
            raise MalformedAuditData(device_profile, "lighthouseResult")

        raw_categories = lighthouse.get("categories") or {}
        if not isinstance(raw_categories, dict):
            raise MalformedAuditData(device_profile, "categories")
        categories = {}
        for name, category in raw_categories.items():
            if category is None:
                categories[name] = None
            elif isinstance(category, dict):
                categories[name] = category.get("score")
            else:
                raise MalformedAuditData(device_profile, f"categories.{name}")

        raw_audits = lighthouse.get("audits") or {}
        if not isinstance(raw_audits, dict):
            raise MalformedAuditData(device_profile, "audits")
        audits = {
            audit_id: AuditEntry.from_dict(audit)
            for audit_id, audit in raw_audits.items()
            if isinstance(audit, dict)
        }

        return cls(
            device_profile=device_profile,
            categories=categories,
            audits=audits,
            fetch_time=lighthouse.get("fetchTime"),
            lighthouse_version=lighthouse.get("lighthouseVersion"),
            final_url=lighthouse.get("finalUrl"),
        )


@dataclass(frozen=True)
class CategoryScores:
    """Lighthouse category scores on a 0-100 scale."""

    performance: int
    accessibility: int
    best_practices: int
    seo: int

    def as_dict(self) -> dict[str, int]:
        return {
            "performance": self.performance,
            "accessibility": self.accessibility,
            "best-practices": self.best_practices,
            "seo": self.seo,
        }


@dataclass(frozen=True)
class VitalMetric:
    name: VitalName
    numeric_value: Optional[float] = None  # None means "not reported", never zero
    display_value: Optional[str] = None


@dataclass(frozen=True)
class VitalReading:
    """A vital metric together with its derived status."""

    metric: VitalMetric
    status: VitalStatus

    def to_dict(self) -> dict[str, Any]:
        return {
            "name": self.metric.name.value,
            "numeric_value": self.metric.numeric_value,
            "display_value": self.metric.display_value,
            "status": self.status.value,
        }


@dataclass(frozen=True)
class Opportunity:
    title: str
    summary: str

    def to_dict(self) -> dict[str, str]:
        return {"title": self.title, "summary": self.summary}


@dataclass(frozen=True)
class DeviceReport:
    scores: CategoryScores
    vitals: tuple[VitalReading, ...] = ()

    def vital(self, name: VitalName) -> Optional[VitalReading]:
        """Look up the reading for one vital."""
        for reading in self.vitals:
            if reading.metric.name == name:
                return reading
        return None

    def to_dict(self) -> dict[str, Any]:
        return {
            "scores": self.scores.as_dict(),
            "vitals": [reading.to_dict() for reading in self.vitals],
        }


@dataclass(frozen=True)
class AnalysisReport:
    """Complete result of one analysis run."""

    target_url: str
    generated_at: datetime
    mobile: DeviceReport
    desktop: DeviceReport
    opportunities: tuple[Opportunity, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary."""
        return {
            "target_url": self.target_url,
            "generated_at": self.generated_at.isoformat(),
            "mobile": self.mobile.to_dict(),
            "desktop": self.desktop.to_dict(),
            "opportunities": [opportunity.to_dict() for opportunity in self.opportunities],
        }
