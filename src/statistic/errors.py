"""
Exceptions for the statistic pipeline.

SourceReadError и SinkWriteError фатальны: прерывают весь вызов,
повторных попыток нет. MalformedRecordError возникает только при
ParsingPolicy.STRICT.
"""

from typing import Any, Optional


class StatisticError(Exception):
    """Base exception for all statistic pipeline errors."""

    def __init__(self, message: str, details: Optional[dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class SourceReadError(StatisticError):
    """Source не удалось открыть или чтение прервалось."""

    def __init__(self, source_id: str, cause: BaseException) -> None:
        message = f"Can't read data from source '{source_id}': {cause}"
        super().__init__(message, {"source_id": source_id})
        self.source_id = source_id
        self.cause = cause


class SinkWriteError(StatisticError):
    """Destination не удалось открыть или запись прервалась."""

    def __init__(self, dest_id: str, cause: BaseException) -> None:
        message = f"Can't write data to destination '{dest_id}': {cause}"
        super().__init__(message, {"dest_id": dest_id})
        self.dest_id = dest_id
        self.cause = cause


class MalformedRecordError(StatisticError, ValueError):
    """Строка журнала не соответствует формату <tag>,<amount> (STRICT)."""

    def __init__(self, line_number: int, line: str, reason: str) -> None:
        message = f"Malformed record at line {line_number}: {reason}"
        super().__init__(message, {"line_number": line_number, "line": line})
        self.line_number = line_number
        self.line = line
        self.reason = reason
