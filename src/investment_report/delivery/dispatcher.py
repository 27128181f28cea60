"""Subject line and send / dry-run decision for a rendered report."""

import logging
from typing import Optional

from investment_report.errors import DispatchFailure
from investment_report.models.investment import CategorizedReport

from .resend import EmailSender

logger = logging.getLogger(__name__)

SUBJECT_PREFIX = "[Angel Portfolio]"


def build_subject(report: CategorizedReport) -> str:
    """Count of overdue + due-today items, or the all-clear subject when there are none."""
    action_count = report.action_count
    if action_count > 0:
        return f"{SUBJECT_PREFIX} {action_count} action items need attention"
    return f"{SUBJECT_PREFIX} Daily Report - All Clear"


def dispatch_report(
    html: str,
    report: CategorizedReport,
    *,
    recipient: Optional[str],
    sender: Optional[EmailSender],
    dry_run: bool = False,
) -> Optional[str]:
    """
    Send the report to recipient, or only log what would be sent when dry_run.
    Returns the transport message id, None on dry run.
    """
    subject = build_subject(report)

    if dry_run:
        logger.info("=== DRY RUN MODE ===")
        logger.info("To: %s", recipient)
        logger.info("Subject: %s", subject)
        logger.info("Action items: %s", report.bucket_counts())
        logger.info("Email would be sent successfully!")
        return None

    if sender is None or not recipient:
        raise DispatchFailure("No email sender or recipient configured")

    try:
        message_id = sender.send(to=[recipient], subject=subject, html=html)
    except DispatchFailure as e:
        logger.error("Failed to send email: %s", e)
        raise
    except Exception as e:
        logger.error("Failed to send email: %s", e)
        raise DispatchFailure(str(e)) from e

    logger.info("Email sent successfully: %s", message_id)
    return message_id
