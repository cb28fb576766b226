"""Shared fixtures for analyzer tests."""

import pytest


def make_payload(scores=None, audits=None):
    """Build a minimal runPagespeed response body."""
    scores = scores or {}
    categories = {
        name: {"score": scores.get(name, 1.0)}
        for name in ("performance", "accessibility", "best-practices", "seo")
    }
    return {
        "lighthouseResult": {
            "fetchTime": "2026-01-01T00:00:00.000Z",
            "lighthouseVersion": "12.0.0",
            "finalUrl": "https://example.com/",
            "categories": categories,
            "audits": audits or {},
        }
    }


class SleepRecorder:
    """Records requested waits instead of sleeping."""

    def __init__(self, events):
        self.waits = []
        self.events = events

    async def __call__(self, seconds):
        self.waits.append(seconds)
        self.events.append(("sleep", seconds))


@pytest.fixture
def payload_factory():
    """Factory for runPagespeed response bodies."""
    return make_payload


@pytest.fixture
def event_log():
    """Ordered log of requests and waits shared by fakes in one test."""
    return []


@pytest.fixture
def sleep_recorder(event_log):
    return SleepRecorder(event_log)
