"""Report Formatter — Totals → Report → текст."""

from typing import Optional

from src.core.domain import Report, Totals
from src.statistic.config import ReportConfig


class ReportFormatter:
    """Построение отчёта из итогов. Чистая функция, ошибок нет."""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    def format(self, totals: Totals) -> Report:
        return Report.from_totals(totals)

    def render(self, totals: Totals) -> str:
        """Текст отчёта с настроенным разделителем строк.

        Args:
            totals: итоги агрегации

        Returns:
            "supply,<s><sep>buy,<b><sep>result,<s-b>" (+ <sep> при trailing_newline)
        """
        return self.format(totals).render(
            line_separator=self.config.line_separator,
            trailing_newline=self.config.trailing_newline,
        )
