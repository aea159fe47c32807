"""Orchestrator — чтение журнала, отчёт, запись, возврат отчёта.

Порядок:
1. TransactionLogParser.read_totals(source_id)
2. ReportFormatter.render(totals)
3. ReportSink.write(dest_id, report)

Первая ошибка прерывает вызов и пробрасывается без обёртки. При ошибке
чтения destination не открывается.
"""

import logging
from typing import Optional

from src.statistic.config import StatisticConfig
from src.statistic.formatter import ReportFormatter
from src.statistic.parser import TransactionLogParser
from src.statistic.sink import ReportSink

logger = logging.getLogger(__name__)


class StatisticService:
    """Pipeline отчёта по журналу транзакций."""

    def __init__(self, config: Optional[StatisticConfig] = None):
        self.config = config or StatisticConfig()
        self.parser = TransactionLogParser(self.config.parser)
        self.formatter = ReportFormatter(self.config.report)
        self.sink = ReportSink(self.config.report)

    def get_statistic(self, source_id: str, dest_id: str) -> str:
        """Построение отчёта по журналу с записью в destination.

        Args:
            source_id: путь к журналу транзакций
            dest_id: путь к файлу отчёта

        Returns:
            Текст отчёта, идентичный записанному в destination

        Raises:
            SourceReadError: журнал не читается
            SinkWriteError: отчёт не записывается
            MalformedRecordError: некорректная строка при ParsingPolicy.STRICT
        """
        totals = self.parser.read_totals(source_id)
        report = self.formatter.render(totals)
        self.sink.write(dest_id, report)

        logger.info(
            "Statistic %s -> %s: supply=%d buy=%d result=%d",
            source_id, dest_id, totals.supply, totals.buy, totals.result,
        )
        return report


def get_statistic(
    from_file: str,
    to_file: str,
    config: Optional[StatisticConfig] = None
) -> str:
    """Построение отчёта с конфигурацией по умолчанию (или переданной).

    Returns:
        Текст отчёта
    """
    return StatisticService(config).get_statistic(from_file, to_file)
