"""Statistic — отчёт supply/buy по журналу транзакций.

- Parser/Aggregator: строки журнала → Totals
- Report Formatter: Totals → трёхстрочный отчёт
- Sink Writer: запись отчёта в destination
- Orchestrator: StatisticService.get_statistic(source, destination)
"""

from .config import ParserConfig, ParsingPolicy, ReportConfig, StatisticConfig
from .errors import MalformedRecordError, SinkWriteError, SourceReadError, StatisticError
from .formatter import ReportFormatter
from .parser import TransactionLogParser
from .service import StatisticService, get_statistic
from .sink import ReportSink

__all__ = [
    "ParserConfig",
    "ParsingPolicy",
    "ReportConfig",
    "StatisticConfig",
    "StatisticError",
    "SourceReadError",
    "SinkWriteError",
    "MalformedRecordError",
    "TransactionLogParser",
    "ReportFormatter",
    "ReportSink",
    "StatisticService",
    "get_statistic",
]
