"""Render a CategorizedReport into a self-contained HTML email."""

from datetime import date

from jinja2 import Environment, PackageLoader, StrictUndefined, select_autoescape

from investment_report.models.investment import CategorizedReport

from .formatting import days_overdue, format_long_date, format_short_date

TEMPLATE_FILE = "report.html"

# Upcoming-this-month entries shown before the "... and N more" line
MONTH_PREVIEW_LIMIT = 5

_env = Environment(
    loader=PackageLoader("investment_report.rendering", "templates"),
    autoescape=select_autoescape(enabled_extensions=("html",)),
    undefined=StrictUndefined,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["short_date"] = format_short_date
_env.filters["long_date"] = format_long_date


def render_report(report: CategorizedReport, today: date, database_url: str) -> str:
    """
    Build the report HTML. Output depends only on the arguments,
    so the same report and day always give identical HTML.
    """
    template = _env.get_template(TEMPLATE_FILE)
    overdue = [(item, days_overdue(item.next_action_date, today)) for item in report.overdue]
    hidden = max(len(report.this_month) - MONTH_PREVIEW_LIMIT, 0)
    return template.render(
        today=today,
        total_count=report.total_count,
        active_count=report.active_count,
        action_count=report.action_count,
        overdue=overdue,
        due_today=report.due_today,
        this_week=report.this_week,
        this_month=report.this_month,
        this_month_shown=report.this_month[:MONTH_PREVIEW_LIMIT],
        this_month_hidden=hidden,
        all_clear=report.action_count == 0 and not report.this_week,
        database_url=database_url,
    )
