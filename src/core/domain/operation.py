"""
Operation — Виды операций журнала транзакций

Константы формата журнала и эфемерная запись (Record), которая живёт
только внутри цикла разбора.
"""

from enum import Enum
from typing import Final, NamedTuple, Optional


# =============================================================================
# FORMAT CONSTANTS
# =============================================================================

# Разделитель полей в строке журнала и в строках отчёта
FIELD_DELIMITER: Final[str] = ","

# Тег итоговой строки отчёта (supply - buy)
RESULT_TAG: Final[str] = "result"

# Количество полей в корректной строке: <tag>,<amount>
RECORD_FIELD_COUNT: Final[int] = 2


# =============================================================================
# ENUMS
# =============================================================================


class OperationKind(str, Enum):
    """Вид операции в журнале"""

    SUPPLY = "supply"
    BUY = "buy"

    @classmethod
    def from_tag(cls, tag: str) -> Optional["OperationKind"]:
        """
        Поиск вида операции по тегу строки.

        Сравнение точное (регистр и пробелы значимы).

        Returns:
            OperationKind или None для нераспознанного тега
        """
        try:
            return cls(tag)
        except ValueError:
            return None


# =============================================================================
# RECORD
# =============================================================================


class Record(NamedTuple):
    """Разобранная строка журнала: вид операции и сумма."""

    kind: OperationKind
    amount: int
