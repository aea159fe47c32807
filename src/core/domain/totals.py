"""
Totals — Накопленные суммы по видам операций

Immutable Pydantic модель итогов и mutable аккумулятор, который
используется только в течение одного прохода разбора.
"""

from pydantic import BaseModel, Field

from .operation import OperationKind, Record


# =============================================================================
# TOTALS MODEL
# =============================================================================


class Totals(BaseModel):
    """
    Итоги по журналу транзакций.

    Immutable модель (frozen=True): после завершения агрегации суммы
    не меняются. Суммы знаковые, отрицательные amount допустимы.
    """

    supply: int = Field(default=0, description="Сумма всех supply операций")
    buy: int = Field(default=0, description="Сумма всех buy операций")

    model_config = {"frozen": True}  # Immutable

    @property
    def result(self) -> int:
        """Разница supply - buy (без clamp, может быть отрицательной)."""
        return self.supply - self.buy


# =============================================================================
# ACCUMULATOR
# =============================================================================


class TotalsAccumulator:
    """
    Счётчики supply/buy для одного прохода по журналу.

    Принадлежит вызову, который его создал; наружу отдаётся только
    замороженный Totals через freeze().
    """

    def __init__(self):
        self.supply = 0
        self.buy = 0
        self.records_applied = 0

    def add(self, record: Record) -> None:
        """
        Добавление суммы записи к счётчику её вида.

        Args:
            record: Разобранная запись журнала
        """
        if record.kind is OperationKind.SUPPLY:
            self.supply += record.amount
        elif record.kind is OperationKind.BUY:
            self.buy += record.amount
        self.records_applied += 1

    def freeze(self) -> Totals:
        """Снапшот текущих счётчиков как immutable Totals."""
        return Totals(supply=self.supply, buy=self.buy)
