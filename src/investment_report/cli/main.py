"""Main CLI entry point."""

import argparse
import logging
from datetime import date
from pathlib import Path
from typing import TYPE_CHECKING, Optional

from dotenv import find_dotenv, load_dotenv

from investment_report.config import REQUIRED_ENV, ReportSettings
from investment_report.errors import ReportError

if TYPE_CHECKING:
    from investment_report.pipeline import ReportRun

logger = logging.getLogger("investment_report")

EPILOG = """\
Examples:
  investment-report                     # Scheduled run: fetch, render, send
  investment-report --dry-run           # Test with real data, don't send email
  investment-report --sample --preview  # Use sample data and preview in browser
  investment-report --validate          # Just check if configuration is valid
"""


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="investment-report",
        description="Daily investment report from a Notion database, delivered by email",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "-d",
        "--dry-run",
        action="store_true",
        help="Fetch data and generate report without sending email",
    )
    parser.add_argument(
        "-s",
        "--sample",
        action="store_true",
        help="Use sample data instead of fetching from Notion (never sends email)",
    )
    parser.add_argument(
        "-p",
        "--preview",
        action="store_true",
        help="Generate HTML preview and open in browser",
    )
    parser.add_argument(
        "--save-html",
        action="store_true",
        help="Save the generated HTML to 'report.html'",
    )
    parser.add_argument(
        "--validate",
        action="store_true",
        help="Only validate configuration without running",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Show detailed logging",
    )
    parser.add_argument(
        "--schema",
        type=Path,
        default=None,
        help="YAML file mapping database property names (default: built-in names)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for --sample data",
    )
    return parser


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(levelname)-7s %(message)s",
    )
    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.DEBUG if verbose else logging.WARNING)


def _validate_config(settings: ReportSettings, verbose: bool) -> bool:
    """Log each missing or (verbose) configured variable; True when complete."""
    logger.info("Validating configuration...")
    missing = settings.missing()
    for name in REQUIRED_ENV:
        if name in missing:
            logger.error("Missing: %s", name)
        elif verbose:
            logger.debug("Found: %s = %s", name, settings.masked(name))
    if missing:
        logger.error("Configuration incomplete! Missing %d required variables.", len(missing))
        logger.warning("Create a .env file with the required variables (see .env.example)")
        return False
    logger.info("All required environment variables are configured!")
    return True


def _print_summary(run: "ReportRun", verbose: bool) -> None:
    from investment_report.rendering import format_currency, format_short_date

    report = run.report
    print()
    print("Report Summary:")
    print(f"   Overdue:     {len(report.overdue)} items")
    print(f"   Due Today:   {len(report.due_today)} items")
    print(f"   This Week:   {len(report.this_week)} items")
    print(f"   This Month:  {len(report.this_month)} items")
    print(f"   Subject:     {run.subject}")
    print()
    if not verbose:
        return
    for label, items in (("Overdue items", report.overdue), ("Due today", report.due_today)):
        if not items:
            continue
        print(f"{label}:")
        for item in items:
            print(
                f"   - {item.company_name} ({format_short_date(item.next_action_date)}, "
                f"{format_currency(item.amount)}, {item.status}): {item.next_action}"
            )
    print()


def main(argv: Optional[list[str]] = None) -> None:
    """Parse args, run the report, exit non-zero on failure."""
    from investment_report.pipeline import DEFAULT_HTML_PATH, RunOptions, run_report

    args = _build_parser().parse_args(argv)
    _configure_logging(args.verbose)
    load_dotenv(find_dotenv(usecwd=True))

    settings = ReportSettings.from_env()
    if args.schema is not None:
        settings = settings.model_copy(update={"schema_path": args.schema})

    if args.validate:
        raise SystemExit(0 if _validate_config(settings, args.verbose) else 1)

    if not _validate_config(settings, args.verbose):
        if not args.sample:
            logger.info("You can still test with sample data using: investment-report --sample")
            raise SystemExit(1)

    options = RunOptions(
        sample=args.sample,
        dry_run=args.dry_run,
        save_html=DEFAULT_HTML_PATH if args.save_html else None,
        preview=args.preview,
        seed=args.seed,
    )

    try:
        run = run_report(settings, options, date.today())
    except ReportError as e:
        logger.error("Report failed: %s", e, exc_info=args.verbose)
        raise SystemExit(1)
    except Exception as e:
        logger.error("Unexpected error: %s", e, exc_info=args.verbose)
        raise SystemExit(1)

    _print_summary(run, args.verbose)
    if run.message_id:
        logger.info("Report sent successfully to %s", settings.email_to)
    else:
        logger.info("Report completed successfully")


if __name__ == "__main__":
    main()
