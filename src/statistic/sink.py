"""Sink Writer — запись отчёта в destination.

Семантика truncate-then-write: предыдущее содержимое заменяется целиком.
Handle закрывается (и буфер сбрасывается) на любом пути выхода.
"""

import logging
from typing import Optional

from src.statistic.config import ReportConfig
from src.statistic.errors import SinkWriteError

logger = logging.getLogger(__name__)


class ReportSink:
    """Запись текста отчёта в файл."""

    def __init__(self, config: Optional[ReportConfig] = None):
        self.config = config or ReportConfig()

    def write(self, dest_id: str, text: str) -> None:
        """Запись отчёта.

        Args:
            dest_id: путь к destination (создаётся или перезаписывается)
            text: полный текст отчёта

        Raises:
            SinkWriteError: destination не открывается или запись прервалась
        """
        try:
            # newline="": разделитель строк пишется как есть, без трансляции
            with open(dest_id, "w", encoding=self.config.encoding, newline="") as sink:
                sink.write(text)
        except OSError as e:
            raise SinkWriteError(dest_id, e) from e
        logger.debug("Wrote %d chars to %s", len(text), dest_id)
