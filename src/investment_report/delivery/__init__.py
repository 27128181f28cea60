"""Email delivery of the rendered report."""

from .dispatcher import build_subject, dispatch_report
from .resend import EmailSender, ResendSender

__all__ = ["EmailSender", "ResendSender", "build_subject", "dispatch_report"]
