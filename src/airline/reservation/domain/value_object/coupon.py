from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import ClassVar


@dataclass(frozen=True)
class Coupon:
    """割引クーポン（手動予約のみ・1予約1回）"""

    RATES: ClassVar[dict[str, Decimal]] = {
        "CAPTAINAFIQ": Decimal("0.05"),
        "COPILOTAMIR": Decimal("0.10"),
        "AEROAMEEN": Decimal("0.15"),
        "STEWARDFARIS": Decimal("0.10"),
    }

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if normalized not in self.RATES:
            raise ValueError("Invalid coupon")
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @property
    def rate(self) -> Decimal:
        return self.RATES[self.code]

    @property
    def percent_off(self) -> int:
        return int(self.rate * 100)

    @classmethod
    def available(cls) -> list[Coupon]:
        """利用可能なクーポン一覧"""
        return [cls(code) for code in cls.RATES]
