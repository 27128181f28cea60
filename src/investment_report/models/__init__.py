"""Data models for raw store records, investments, and report buckets."""

from investment_report.models.investment import CategorizedReport, Investment
from investment_report.models.raw import RawRecord
from investment_report.models.schema import PropertySchema

__all__ = ["CategorizedReport", "Investment", "PropertySchema", "RawRecord"]
