"""Тесты для Report Formatter и Sink Writer."""

import os

import pytest

from src.core.domain import Report, Totals
from src.statistic import ReportConfig, ReportFormatter, ReportSink, SinkWriteError


class TestReportFormatter:
    """Тесты ReportFormatter."""

    def test_format_returns_report(self):
        report = ReportFormatter().format(Totals(supply=105, buy=40))
        assert report == Report(supply=105, buy=40, result=65)

    def test_default_render_uses_platform_separator(self):
        """По умолчанию: os.linesep, без разделителя после result."""
        text = ReportFormatter().render(Totals(supply=10, buy=0))
        assert text == os.linesep.join(["supply,10", "buy,0", "result,10"])
        assert not text.endswith(os.linesep)

    def test_render_exact_bytes(self):
        formatter = ReportFormatter(ReportConfig(line_separator="\n"))
        text = formatter.render(Totals(supply=105, buy=40))
        assert text.encode("utf-8") == b"supply,105\nbuy,40\nresult,65"

    def test_render_trailing_newline(self):
        formatter = ReportFormatter(ReportConfig(line_separator="\n", trailing_newline=True))
        assert formatter.render(Totals(supply=1, buy=2)) == "supply,1\nbuy,2\nresult,-1\n"

    def test_empty_totals(self):
        formatter = ReportFormatter(ReportConfig(line_separator="\n"))
        assert formatter.render(Totals()) == "supply,0\nbuy,0\nresult,0"

    def test_empty_separator_rejected(self):
        with pytest.raises(ValueError, match="line_separator"):
            ReportConfig(line_separator="")


class TestReportSink:
    """Тесты ReportSink."""

    def test_writes_exact_content(self, tmp_path):
        dest = tmp_path / "report.csv"
        ReportSink().write(str(dest), "supply,1\r\nbuy,0\r\nresult,1")

        # newline="": разделитель не транслируется
        assert dest.read_bytes() == b"supply,1\r\nbuy,0\r\nresult,1"

    def test_overwrites_previous_content(self, tmp_path):
        dest = tmp_path / "report.csv"
        dest.write_text("old content that is much longer than the report\n" * 10)

        ReportSink().write(str(dest), "supply,0\nbuy,0\nresult,0")

        assert dest.read_text() == "supply,0\nbuy,0\nresult,0"

    def test_missing_directory(self, tmp_path):
        dest = str(tmp_path / "no_such_dir" / "report.csv")
        with pytest.raises(SinkWriteError) as exc_info:
            ReportSink().write(dest, "supply,0")

        assert exc_info.value.dest_id == dest
        assert isinstance(exc_info.value.cause, OSError)
        assert "no_such_dir" in str(exc_info.value)

    def test_destination_is_directory(self, tmp_path):
        with pytest.raises(SinkWriteError):
            ReportSink().write(str(tmp_path), "supply,0")
