"""Tests for the command-line interface."""

import json
from datetime import datetime
from unittest.mock import AsyncMock, patch

import pytest

from seo_analytics import cli
from seo_analytics.exceptions import AuditFetchFailed
from seo_analytics.models import (
    AnalysisReport,
    CategoryScores,
    DeviceProfile,
    DeviceReport,
    VitalMetric,
    VitalName,
    VitalReading,
    VitalStatus,
)


@pytest.fixture
def report():
    vitals = tuple(
        VitalReading(VitalMetric(name, None, None), VitalStatus.UNKNOWN) for name in VitalName
    )
    return AnalysisReport(
        target_url="https://example.com",
        generated_at=datetime(2026, 3, 1, 12, 30, 0),
        mobile=DeviceReport(CategoryScores(72, 100, 92, 100), vitals),
        desktop=DeviceReport(CategoryScores(100, 100, 100, 100), vitals),
    )


@pytest.fixture(autouse=True)
def quiet_logging():
    with patch.object(cli, "setup_logging"):
        yield


class TestCli:
    """Test cases for the seo-analytics entry point."""

    def test_writes_report_and_prints_summary(self, report, tmp_path, capsys):
        output = tmp_path / "seo-report.html"
        with patch.object(cli, "analyze_url", new=AsyncMock(return_value=report)) as mock_analyze:
            exit_code = cli.main(["https://example.com", "cli-key", "--output", str(output)])

        assert exit_code == 0
        assert output.exists()
        mock_analyze.assert_awaited_once()
        args, _ = mock_analyze.call_args
        assert args == ("https://example.com", "cli-key")

        out = capsys.readouterr().out
        assert "Performance:    72/100" in out
        assert "Best Practices: 92/100" in out
        assert "LCP: N/A" in out
        assert str(output) in out

    def test_credential_from_environment(self, report, tmp_path, monkeypatch):
        monkeypatch.setattr(cli.settings, "PAGESPEED_API_KEY", "env-key")
        with patch.object(cli, "analyze_url", new=AsyncMock(return_value=report)) as mock_analyze:
            cli.main(["https://example.com", "-o", str(tmp_path / "r.html")])

        args, _ = mock_analyze.call_args
        assert args[1] == "env-key"

    def test_anonymous_when_no_credential(self, report, tmp_path, monkeypatch):
        monkeypatch.setattr(cli.settings, "PAGESPEED_API_KEY", None)
        with patch.object(cli, "analyze_url", new=AsyncMock(return_value=report)) as mock_analyze:
            cli.main(["https://example.com", "-o", str(tmp_path / "r.html")])

        args, _ = mock_analyze.call_args
        assert args[1] is None

    def test_json_export(self, report, tmp_path):
        json_path = tmp_path / "report.json"
        with patch.object(cli, "analyze_url", new=AsyncMock(return_value=report)):
            cli.main([
                "https://example.com",
                "-o", str(tmp_path / "r.html"),
                "--json", str(json_path),
            ])

        assert json.loads(json_path.read_text())["mobile"]["scores"]["performance"] == 72

    def test_failure_exits_non_zero(self, tmp_path, capsys):
        output = tmp_path / "r.html"
        error = AuditFetchFailed(
            "https://example.com", DeviceProfile.MOBILE, "Max retries exceeded", http_status=429
        )
        with patch.object(cli, "analyze_url", new=AsyncMock(side_effect=error)):
            exit_code = cli.main(["https://example.com", "-o", str(output)])

        assert exit_code == 1
        assert not output.exists()
        assert "Max retries exceeded" in capsys.readouterr().err

    def test_unwritable_output_exits_non_zero(self, report, tmp_path, capsys):
        """Test a report path under a regular file fails cleanly."""
        blocker = tmp_path / "not-a-dir"
        blocker.write_text("")
        with patch.object(cli, "analyze_url", new=AsyncMock(return_value=report)):
            exit_code = cli.main(["https://example.com", "-o", str(blocker / "r.html")])

        assert exit_code == 1
        captured = capsys.readouterr()
        assert "❌ Error" in captured.err
        assert "SEO Analysis Complete" not in captured.out

    def test_invalid_env_config_exits_non_zero(self, tmp_path, monkeypatch, capsys):
        monkeypatch.setenv("PSI_MAX_ATTEMPTS", "lots")
        mock_analyze = AsyncMock()
        with patch.object(cli, "analyze_url", new=mock_analyze):
            exit_code = cli.main(["https://example.com", "-o", str(tmp_path / "r.html")])

        assert exit_code == 1
        assert "lots" in capsys.readouterr().err
        mock_analyze.assert_not_called()

    def test_missing_url_is_usage_error(self):
        with pytest.raises(SystemExit) as exc_info:
            cli.main([])
        assert exc_info.value.code == 2
