"""Output manager for writing analysis reports to disk."""

import json
import logging
from pathlib import Path
from typing import Optional

from seo_analytics.models import AnalysisReport
from seo_analytics.report_generator import ReportGenerator

logger = logging.getLogger(__name__)


class OutputManager:
    """Writes the HTML report and an optional JSON export for one run."""

    def __init__(self, generator: Optional[ReportGenerator] = None):
        """Initialize output manager.

        Args:
            generator: Report renderer (a default ReportGenerator if None)
        """
        self.generator = generator or ReportGenerator()

    def save_html_report(self, report: AnalysisReport, output_path: str) -> Path:
        """Render and save the HTML report.

        Args:
            report: Report to render
            output_path: Destination file

        Returns:
            Path the report was written to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(self.generator.render(report), encoding="utf-8")
        logger.info(f"Saved HTML report to {path}")
        return path

    def save_json_report(self, report: AnalysisReport, output_path: str) -> Path:
        """Save the report data model as JSON.

        Args:
            report: Report to serialize
            output_path: Destination file

        Returns:
            Path the JSON was written to
        """
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(report.to_dict(), f, indent=2, ensure_ascii=False)
        logger.info(f"Saved JSON report to {path}")
        return path
