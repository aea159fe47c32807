"""Parser/Aggregator — разбор журнала транзакций и накопление итогов.

Формат строки: <tag>,<amount>
- tag: supply | buy (прочие теги игнорируются, это не ошибка)
- amount: целое со знаком, только ASCII цифры

Некорректные строки (число полей != 2, нечисловой amount):
- ParsingPolicy.LENIENT: пропуск
- ParsingPolicy.STRICT: MalformedRecordError
"""

import logging
import re
from typing import Iterable, Optional

from src.core.domain import (
    FIELD_DELIMITER,
    RECORD_FIELD_COUNT,
    OperationKind,
    Record,
    Totals,
    TotalsAccumulator,
)
from src.statistic.config import ParserConfig, ParsingPolicy
from src.statistic.errors import MalformedRecordError, SourceReadError

logger = logging.getLogger(__name__)

# Допустимая запись amount: опциональный знак и ASCII цифры, без пробелов
_AMOUNT_PATTERN = re.compile(r"[+-]?[0-9]+")


class TransactionLogParser:
    """Разбор журнала и агрегация сумм supply/buy.

    Stateless между вызовами: каждый aggregate() создаёт свой аккумулятор.
    """

    def __init__(self, config: Optional[ParserConfig] = None):
        self.config = config or ParserConfig()

    def parse_line(self, line: str, line_number: int = 1) -> Optional[Record]:
        """Разбор одной строки журнала.

        Args:
            line: строка (терминатор строки допускается)
            line_number: номер строки для диагностики

        Returns:
            Record для supply/buy, None для пропущенной или нераспознанной строки

        Raises:
            MalformedRecordError: некорректная строка при STRICT
        """
        text = line.rstrip("\r\n")
        fields = text.split(FIELD_DELIMITER)
        # Пустые поля в конце строки не считаются: "supply,5," → ["supply", "5"]
        while fields and not fields[-1]:
            fields.pop()

        if len(fields) != RECORD_FIELD_COUNT:
            return self._reject(
                line_number, text,
                f"expected {RECORD_FIELD_COUNT} fields, got {len(fields)}"
            )

        tag, raw_amount = fields
        if not _AMOUNT_PATTERN.fullmatch(raw_amount):
            return self._reject(line_number, text, f"amount {raw_amount!r} is not an integer")

        kind = OperationKind.from_tag(tag)
        if kind is None:
            logger.debug("Line %d: unrecognized tag %r ignored", line_number, tag)
            return None

        return Record(kind=kind, amount=int(raw_amount))

    def aggregate(self, lines: Iterable[str]) -> Totals:
        """Агрегация итогов по последовательности строк.

        Args:
            lines: источник строк (файл, список, генератор)

        Returns:
            Totals после исчерпания источника
        """
        accumulator = TotalsAccumulator()
        line_count = 0

        for line_count, line in enumerate(lines, start=1):
            record = self.parse_line(line, line_count)
            if record is not None:
                accumulator.add(record)

        logger.debug(
            "Aggregated %d lines: %d records applied, %d ignored",
            line_count,
            accumulator.records_applied,
            line_count - accumulator.records_applied,
        )
        return accumulator.freeze()

    def read_totals(self, source_id: str) -> Totals:
        """Чтение журнала из файла и агрегация итогов.

        Args:
            source_id: путь к журналу

        Returns:
            Totals

        Raises:
            SourceReadError: файл не открывается или чтение прервалось
            MalformedRecordError: некорректная строка при STRICT
        """
        logger.debug("Reading transaction log from %s", source_id)
        try:
            with open(source_id, "r", encoding=self.config.encoding) as source:
                return self.aggregate(source)
        except (OSError, UnicodeDecodeError) as e:
            raise SourceReadError(source_id, e) from e

    def _reject(self, line_number: int, line: str, reason: str) -> None:
        if self.config.policy is ParsingPolicy.STRICT:
            raise MalformedRecordError(line_number, line, reason)
        logger.debug("Line %d skipped: %s", line_number, reason)
        return None
