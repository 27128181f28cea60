"""Daily investment report: Notion records bucketed by due date, emailed as HTML."""

__version__ = "0.1.0"
