"""Integration tests for run_report."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from helpers import TODAY, records_due_in
from investment_report.config import ReportSettings
from investment_report.connectors.base import BaseRecordSource
from investment_report.errors import ConfigurationIncomplete, DispatchFailure, FetchFailure
from investment_report.pipeline import RunOptions, run_report, write_preview


class ListSource(BaseRecordSource):
    """Returns fixed records; counts calls."""

    source_id = "list"

    def __init__(self, records):
        self.records = records
        self.calls = 0

    def fetch_records(self):
        self.calls += 1
        return list(self.records)


class FailingSource(BaseRecordSource):
    def fetch_records(self):
        raise FetchFailure("Notion query failed: HTTP 401")


class TestRunReport:
    def test_live_run_sends(self, full_settings: ReportSettings) -> None:
        """One overdue record: categorized, rendered, and mailed once."""
        sender = MagicMock()
        sender.send.return_value = "msg-1"
        source = ListSource(records_due_in(-10, 40))

        run = run_report(full_settings, RunOptions(), TODAY, source=source, sender=sender)

        assert source.calls == 1
        assert run.report.action_count == 1
        assert run.report.total_count == 2
        assert "(10 days overdue)" in run.html
        assert run.subject == "[Angel Portfolio] 1 action items need attention"
        assert run.message_id == "msg-1"
        sender.send.assert_called_once_with(to=["investor@example.com"], subject=run.subject, html=run.html)

    def test_dry_run_does_not_send(self, full_settings: ReportSettings) -> None:
        sender = MagicMock()
        run = run_report(full_settings, RunOptions(dry_run=True), TODAY, source=ListSource([]), sender=sender)
        sender.send.assert_not_called()
        assert run.message_id is None
        assert "All Clear!" in run.html

    def test_sample_mode_needs_no_config_and_never_sends(self) -> None:
        sender = MagicMock()
        run = run_report(ReportSettings(), RunOptions(sample=True, seed=5), TODAY, sender=sender)
        sender.send.assert_not_called()
        assert run.report.total_count == 10
        assert run.report.action_count == 3

    def test_missing_config_stops_before_fetch(self) -> None:
        source = ListSource([])
        with pytest.raises(ConfigurationIncomplete):
            run_report(ReportSettings(notion_api_key="k"), RunOptions(), TODAY, source=source)
        assert source.calls == 0

    def test_fetch_failure_propagates(self, full_settings: ReportSettings) -> None:
        sender = MagicMock()
        with pytest.raises(FetchFailure):
            run_report(full_settings, RunOptions(), TODAY, source=FailingSource(), sender=sender)
        sender.send.assert_not_called()

    def test_dispatch_failure_propagates(self, full_settings: ReportSettings) -> None:
        sender = MagicMock()
        sender.send.side_effect = DispatchFailure("Resend API HTTP 500")
        with pytest.raises(DispatchFailure):
            run_report(full_settings, RunOptions(), TODAY, source=ListSource([]), sender=sender)
        assert sender.send.call_count == 1

    def test_default_sender_is_resend(self, full_settings: ReportSettings) -> None:
        with patch("investment_report.pipeline.ResendSender") as sender_cls:
            sender_cls.return_value.send.return_value = "msg-9"
            run = run_report(full_settings, RunOptions(), TODAY, source=ListSource([]))
        sender_cls.assert_called_once_with("re_abcd1234wxyz", from_address=full_settings.email_from)
        assert run.message_id == "msg-9"

    def test_save_html(self, full_settings: ReportSettings, tmp_path: Path) -> None:
        out = tmp_path / "report.html"
        run = run_report(
            full_settings,
            RunOptions(dry_run=True, save_html=out),
            TODAY,
            source=ListSource(records_due_in(0)),
        )
        assert run.saved_path == out
        assert out.read_text(encoding="utf-8") == run.html

    def test_preview_opens_browser(self, full_settings: ReportSettings) -> None:
        opened: list[str] = []

        def opener(url: str) -> bool:
            opened.append(url)
            return True

        run = run_report(
            full_settings,
            RunOptions(dry_run=True, preview=True),
            TODAY,
            source=ListSource([]),
            opener=opener,
        )
        try:
            assert opened == [run.preview_path.as_uri()]
            assert run.preview_path.read_text(encoding="utf-8") == run.html
        finally:
            run.preview_path.unlink()


class TestWritePreview:
    def test_browser_failure_is_not_fatal(self, caplog: pytest.LogCaptureFixture) -> None:
        path = write_preview("<p>hi</p>", opener=lambda url: False)
        try:
            assert path.exists()
            assert "Could not open browser" in caplog.text
        finally:
            path.unlink()


class TestRunOptions:
    @pytest.mark.parametrize(
        "kwargs,expected",
        [({}, True), ({"dry_run": True}, False), ({"sample": True}, False)],
    )
    def test_sends_email(self, kwargs: dict, expected: bool) -> None:
        assert RunOptions(**kwargs).sends_email is expected
