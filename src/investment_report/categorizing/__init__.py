"""Due-date bucketing of investment records."""

from .engine import categorize, to_investment
from .rules import Bucket, bucket_for, parse_due_date

__all__ = ["Bucket", "bucket_for", "categorize", "parse_due_date", "to_investment"]
