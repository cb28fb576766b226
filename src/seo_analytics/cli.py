"""Command-line interface for the site-quality analyzer."""

import asyncio
import logging
import sys
from typing import Optional

from seo_analytics.analyzer import analyze_url
from seo_analytics.config import AnalysisConfig, settings
from seo_analytics.constants import DEFAULT_REPORT_PATH
from seo_analytics.exceptions import SeoAnalyticsError
from seo_analytics.logging_config import setup_logging
from seo_analytics.models import AnalysisReport, VitalName
from seo_analytics.output_manager import OutputManager

logger = logging.getLogger(__name__)

SUMMARY_VITALS = (VitalName.LCP, VitalName.TBT, VitalName.CLS)


def print_report_summary(report: AnalysisReport, output_path: str):
    """Print the analysis summary in a formatted way.

    Args:
        report: Completed analysis report
        output_path: Where the HTML report was written
    """
    print(f"\n{'=' * 60}")
    print("SEO Analysis Complete")
    print(f"{'=' * 60}")

    for heading, scores in (("Mobile", report.mobile.scores), ("Desktop", report.desktop.scores)):
        print(f"\n📊 {heading} Scores:")
        print(f"  • Performance:    {scores.performance}/100")
        print(f"  • Accessibility:  {scores.accessibility}/100")
        print(f"  • Best Practices: {scores.best_practices}/100")
        print(f"  • SEO:            {scores.seo}/100")

    print("\n⏱️  Core Web Vitals (Mobile):")
    for name in SUMMARY_VITALS:
        reading = report.mobile.vital(name)
        display_value = reading.metric.display_value if reading else None
        print(f"  • {name.value}: {display_value or 'N/A'}")

    print(f"\n💾 Report saved to: {output_path}")
    print("Open the HTML file in a browser to view the interactive report.")
    print(f"\n{'=' * 60}\n")


def analyze_command(args) -> int:
    """Analyze a URL and write the report. Returns the exit status."""
    credential = args.api_key or settings.PAGESPEED_API_KEY
    if not credential:
        logger.info("No API key supplied; using the anonymous PageSpeed Insights quota")

    try:
        report = asyncio.run(
            analyze_url(args.url, credential, config=AnalysisConfig.from_env())
        )
        output = OutputManager()
        output.save_html_report(report, args.output)
        if args.json_output:
            output.save_json_report(report, args.json_output)
    except SeoAnalyticsError as e:
        logger.error(f"Analysis failed: {e}")
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    except ValueError as e:
        logger.error(f"Invalid configuration: {e}")
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1
    except OSError as e:
        logger.error(f"Could not write report: {e}")
        print(f"\n❌ Error: {e}", file=sys.stderr)
        return 1

    print_report_summary(report, args.output)
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    """Main CLI entry point."""
    import argparse

    parser = argparse.ArgumentParser(
        description="SEO Analytics - Analyze a URL with Google PageSpeed Insights and generate an HTML report"
    )
    parser.add_argument("url", help="URL to analyze (e.g., https://example.com)")
    parser.add_argument(
        "api_key",
        nargs="?",
        default=None,
        help="PageSpeed Insights API key (default: PAGESPEED_API_KEY environment variable)",
    )
    parser.add_argument(
        "--output",
        "-o",
        default=DEFAULT_REPORT_PATH,
        help=f"Path of the HTML report (default: {DEFAULT_REPORT_PATH})",
    )
    parser.add_argument(
        "--json",
        dest="json_output",
        help="Also write the report data as JSON to this path",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=settings.LOG_LEVEL.upper(),
        help="Set logging verbosity (default: INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )

    args = parser.parse_args(argv)

    setup_logging(level=args.log_level, log_file=args.log_file)

    return analyze_command(args)


if __name__ == "__main__":
    sys.exit(main())
