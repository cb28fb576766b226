"""HTML report generator using Jinja2 templates."""

from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seo_analytics.constants import SCORE_AVERAGE_MIN, SCORE_COLORS, SCORE_GOOD_MIN
from seo_analytics.models import AnalysisReport, VitalName, VitalStatus


class ReportGenerator:
    """Renders an AnalysisReport as a standalone HTML page."""

    TEMPLATE_NAME = "seo_report.html"

    CATEGORY_LABELS = {
        "performance": "Performance",
        "accessibility": "Accessibility",
        "best-practices": "Best Practices",
        "seo": "SEO",
    }

    VITAL_LABELS = {
        VitalName.LCP: "Largest Contentful Paint (LCP)",
        VitalName.TBT: "Total Blocking Time (TBT)",
        VitalName.CLS: "Cumulative Layout Shift (CLS)",
        VitalName.FCP: "First Contentful Paint (FCP)",
        VitalName.SPEED_INDEX: "Speed Index",
        VitalName.TTI: "Time to Interactive (TTI)",
    }

    # (css class, label) per status
    STATUS_DISPLAY = {
        VitalStatus.GOOD: ("good", "Good"),
        VitalStatus.NEEDS_WORK: ("needs-improvement", "Needs Work"),
        VitalStatus.POOR: ("poor", "Poor"),
        VitalStatus.UNKNOWN: ("", "N/A"),
    }

    def __init__(self, template_dir: Optional[str] = None):
        """Initialize report generator.

        Args:
            template_dir: Directory containing Jinja2 templates
                (defaults to the templates shipped with the package)
        """
        template_path = Path(template_dir) if template_dir else Path(__file__).parent / "templates"

        self.env = Environment(
            loader=FileSystemLoader(str(template_path)),
            autoescape=select_autoescape(["html"]),
        )
        self.env.filters['score_rating'] = self.score_rating
        self.env.filters['score_color'] = self.score_color

    @staticmethod
    def score_rating(score: int) -> str:
        """Band a 0-100 category score as good, average or poor."""
        if score >= SCORE_GOOD_MIN:
            return "good"
        if score >= SCORE_AVERAGE_MIN:
            return "average"
        return "poor"

    def score_color(self, score: int) -> str:
        return SCORE_COLORS[self.score_rating(score)]

    def render(self, report: AnalysisReport) -> str:
        """Render the report to an HTML string."""
        template = self.env.get_template(self.TEMPLATE_NAME)
        return template.render(**self._build_context(report))

    def _build_context(self, report: AnalysisReport) -> dict:
        mobile_scores = report.mobile.scores.as_dict()
        desktop_scores = report.desktop.scores.as_dict()

        vitals = []
        for reading in report.mobile.vitals:
            css_class, status_text = self.STATUS_DISPLAY[reading.status]
            vitals.append({
                "label": self.VITAL_LABELS[reading.metric.name],
                "value": reading.metric.display_value or "N/A",
                "status_class": css_class,
                "status_text": status_text,
            })

        return {
            "target_url": report.target_url,
            "generated_at": report.generated_at.strftime("%Y-%m-%d %H:%M:%S"),
            "category_labels": self.CATEGORY_LABELS,
            "score_cards": [
                ("Mobile Scores", mobile_scores),
                ("Desktop Scores", desktop_scores),
            ],
            "vitals": vitals,
            "opportunities": report.opportunities,
            "chart": {
                "labels": list(self.CATEGORY_LABELS.values()),
                "mobile": list(mobile_scores.values()),
                "desktop": list(desktop_scores.values()),
            },
        }
