"""Pipeline orchestration: fetch → categorize → render → save/preview → dispatch."""

import logging
import tempfile
import webbrowser
from dataclasses import dataclass
from datetime import date
from pathlib import Path
from typing import Callable, Optional

from pydantic import BaseModel

from investment_report.categorizing import categorize
from investment_report.config import ReportSettings
from investment_report.connectors import BaseRecordSource, ConnectorRegistry
from investment_report.delivery import EmailSender, ResendSender, build_subject, dispatch_report
from investment_report.models.investment import CategorizedReport
from investment_report.rendering import render_report

logger = logging.getLogger(__name__)

DEFAULT_HTML_PATH = Path("report.html")


class RunOptions(BaseModel):
    """How one run sources data, what it writes, and whether it sends."""

    sample: bool = False
    dry_run: bool = False
    save_html: Optional[Path] = None
    preview: bool = False
    seed: Optional[int] = None

    @property
    def sends_email(self) -> bool:
        """Sample data is never mailed."""
        return not (self.dry_run or self.sample)


@dataclass
class ReportRun:
    """Outputs of a completed run."""

    report: CategorizedReport
    html: str
    subject: str
    message_id: Optional[str] = None
    saved_path: Optional[Path] = None
    preview_path: Optional[Path] = None


def write_preview(html: str, opener: Optional[Callable[[str], bool]] = None) -> Path:
    """Write html to a temp file and open it in the default browser. Open failures only warn."""
    with tempfile.NamedTemporaryFile(
        "w", suffix=".html", prefix="investment-report-", delete=False, encoding="utf-8"
    ) as f:
        f.write(html)
        path = Path(f.name)
    logger.info("Opening preview in browser...")
    try:
        opened = (opener or webbrowser.open)(path.as_uri())
    except webbrowser.Error as e:
        logger.warning("Could not open browser: %s", e)
        opened = None
    if opened is False:
        logger.warning("Could not open browser: no runnable browser found")
    if not opened:
        logger.info("Preview saved to: %s", path)
    return path


def run_report(
    settings: ReportSettings,
    options: RunOptions,
    today: date,
    *,
    source: Optional[BaseRecordSource] = None,
    sender: Optional[EmailSender] = None,
    opener: Optional[Callable[[str], bool]] = None,
) -> ReportRun:
    """
    Run the whole report once. Missing configuration stops the run before
    any fetch unless sample data is used. Any failure propagates.
    source/sender override the collaborators built from settings.
    """
    if not options.sample:
        settings.require()

    schema = settings.load_schema()
    if source is None:
        source = ConnectorRegistry.for_run(
            settings, sample=options.sample, today=today, schema=schema, seed=options.seed
        )

    if options.sample:
        logger.info("Using sample data (--sample flag detected)")
    else:
        logger.info("Fetching investments from Notion...")
    records = source.fetch_records()
    logger.info("Found %d investments", len(records))

    logger.info("Categorizing investments by action date...")
    report = categorize(records, today, schema)
    logger.debug("Bucket counts: %s", report.bucket_counts())

    logger.info("Generating HTML report...")
    html = render_report(report, today, settings.database_url)
    run = ReportRun(report=report, html=html, subject=build_subject(report))

    if options.save_html is not None:
        options.save_html.write_text(html, encoding="utf-8")
        run.saved_path = options.save_html
        logger.info("HTML saved to: %s", options.save_html.resolve())

    if options.preview:
        run.preview_path = write_preview(html, opener=opener)

    if options.sends_email:
        logger.info("Sending email...")
        if sender is None:
            sender = ResendSender(settings.resend_api_key, from_address=settings.email_from)
    else:
        logger.info("Email sending skipped (dry-run or sample mode)")
    run.message_id = dispatch_report(
        html,
        report,
        recipient=settings.email_to,
        sender=sender,
        dry_run=not options.sends_email,
    )
    return run
