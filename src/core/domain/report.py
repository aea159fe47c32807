"""
Report — Отчёт по журналу транзакций

Immutable Pydantic модель трёхстрочного отчёта:

    supply,<supply>
    buy,<buy>
    result,<supply - buy>

КРИТИЧЕСКИЙ ИНВАРИАНТ:
    result == supply - buy (проверяется model_validator, нарушение → ValidationError)

Модель является одновременно возвращаемым значением и содержимым,
которое пишется в destination.
"""

from pydantic import BaseModel, Field, model_validator

from .operation import FIELD_DELIMITER, RESULT_TAG, OperationKind
from .totals import Totals


class Report(BaseModel):
    """
    Отчёт: итоги supply/buy и их разница.

    Immutable модель (frozen=True). Порядок строк фиксирован:
    supply, buy, result.
    """

    supply: int = Field(..., description="Итог supply")
    buy: int = Field(..., description="Итог buy")
    result: int = Field(..., description="supply - buy")

    model_config = {"frozen": True}  # Immutable

    @model_validator(mode="after")
    def validate_result_consistency(self) -> "Report":
        """Проверка инварианта result == supply - buy."""
        expected = self.supply - self.buy
        if self.result != expected:
            raise ValueError(
                f"result {self.result} inconsistent with supply - buy = {expected}"
            )
        return self

    @classmethod
    def from_totals(cls, totals: Totals) -> "Report":
        """
        Построение отчёта из итогов.

        Args:
            totals: Итоги после агрегации

        Returns:
            Report с вычисленным result
        """
        return cls(supply=totals.supply, buy=totals.buy, result=totals.result)

    def lines(self) -> tuple[str, str, str]:
        """
        Строки отчёта в фиксированном порядке.

        Returns:
            ("supply,<s>", "buy,<b>", "result,<r>")
        """
        return (
            f"{OperationKind.SUPPLY.value}{FIELD_DELIMITER}{self.supply}",
            f"{OperationKind.BUY.value}{FIELD_DELIMITER}{self.buy}",
            f"{RESULT_TAG}{FIELD_DELIMITER}{self.result}",
        )

    def render(self, line_separator: str = "\n", trailing_newline: bool = False) -> str:
        """
        Текстовое представление отчёта.

        Args:
            line_separator: Разделитель строк
            trailing_newline: Добавлять ли разделитель после строки result

        Returns:
            Отчёт одной строкой
        """
        text = line_separator.join(self.lines())
        if trailing_newline:
            text += line_separator
        return text
