from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal

from airline.shared.utils.validators import to_decimal

from .currency import Currency

CENT = Decimal("0.01")


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if not self.amount.is_finite():
            raise ValueError(f"Amount must be a finite number: {self.amount}")
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def subtract(self, other: Money) -> Money:
        """金額を減算する（結果が負になる場合は ValueError）"""
        self._ensure_same_currency(other)
        return Money(amount=self.amount - other.amount, currency=self.currency)

    def multiply(self, rate: Decimal) -> Money:
        """割合を掛けた金額を返す（小数第2位で四捨五入）"""
        amount = (self.amount * rate).quantize(CENT, rounding=ROUND_HALF_UP)
        return Money(amount=amount, currency=self.currency)

    def is_zero(self) -> bool:
        return self.amount == 0

    def format(self) -> str:
        """画面表示用の文字列（例: RM1500.00）"""
        return f"{self.currency.symbol}{self.amount.quantize(CENT)}"

    def _ensure_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine money with different currencies")

    @classmethod
    def myr(cls, amount: object) -> Money:
        """リンギットで Money を生成"""
        return cls(to_decimal(amount), Currency.myr())

    @classmethod
    def zero(cls, currency: Currency | None = None) -> Money:
        """金額 0 の Money を生成"""
        return cls(Decimal("0"), currency or Currency.myr())
