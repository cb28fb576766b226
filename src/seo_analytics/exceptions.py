"""Exceptions raised by the site-quality analyzer."""

from typing import Any, Optional


def _profile_name(device_profile: Any) -> str:
    return str(getattr(device_profile, "value", device_profile))


class SeoAnalyticsError(Exception):
    """Base class for every error the analyzer surfaces to its caller."""


class AuditFetchFailed(SeoAnalyticsError):
    """An audit could not be retrieved for one device profile.

    Covers transport failures, non-success responses other than 429 and
    exhaustion of the rate-limit retry ceiling.
    """

    def __init__(
        self,
        target_url: str,
        device_profile: Any,
        cause: str,
        http_status: Optional[int] = None,
    ):
        self.target_url = target_url
        self.device_profile = device_profile
        self.cause = cause
        self.http_status = http_status
        super().__init__(
            f"Failed to fetch {_profile_name(device_profile)} audit for {target_url}: {cause}"
        )


class UnknownDeviceProfile(SeoAnalyticsError, ValueError):
    """A device profile other than mobile or desktop was requested."""

    def __init__(self, device_profile: Any):
        self.device_profile = device_profile
        super().__init__(
            f"Unknown device profile {device_profile!r} (expected 'mobile' or 'desktop')"
        )


class MalformedAuditData(SeoAnalyticsError):
    """An audit payload is missing a field the report cannot do without."""

    def __init__(self, device_profile: Any, missing_field: str):
        self.device_profile = device_profile
        self.missing_field = missing_field
        super().__init__(
            f"Malformed {_profile_name(device_profile)} audit data: missing '{missing_field}'"
        )
