"""Конфигурация pipeline: политика разбора и формат отчёта."""

import os
from dataclasses import dataclass, field
from enum import Enum


class ParsingPolicy(str, Enum):
    """Обработка некорректных строк журнала.

    - LENIENT: строка пропускается, разбор продолжается
    - STRICT: MalformedRecordError прерывает чтение

    Нераспознанный тег ошибкой не является ни в одной политике.
    """
    LENIENT = "lenient"
    STRICT = "strict"


@dataclass(frozen=True)
class ParserConfig:
    """Конфигурация чтения журнала."""
    policy: ParsingPolicy = ParsingPolicy.LENIENT
    encoding: str = "utf-8"


@dataclass(frozen=True)
class ReportConfig:
    """Конфигурация формата отчёта.

    По умолчанию после строки result разделитель не пишется.
    """
    line_separator: str = os.linesep
    trailing_newline: bool = False
    encoding: str = "utf-8"

    def __post_init__(self):
        if not self.line_separator:
            raise ValueError("line_separator must be non-empty")


@dataclass(frozen=True)
class StatisticConfig:
    """Полная конфигурация pipeline."""
    parser: ParserConfig = field(default_factory=ParserConfig)
    report: ReportConfig = field(default_factory=ReportConfig)
