from __future__ import annotations

from decimal import Decimal
from enum import Enum

from airline.reservation.domain.enum.destination import Destination


class TravelPackage(str, Enum):
    """家族向けパッケージ（大人2名・子供2名）

    値はメニュー上の選択記号。
    """

    LONDON = "A"
    TOKYO = "B"
    MAKKAH = "C"

    @property
    def destination(self) -> Destination:
        return Destination(self.name)

    @property
    def discount_rate(self) -> Decimal:
        return _DISCOUNT_RATES[self]

    @classmethod
    def from_option(cls, option: str) -> TravelPackage:
        try:
            return cls(option.strip().upper())
        except ValueError as e:
            raise ValueError(f"Invalid package option: {option}") from e


_DISCOUNT_RATES: dict[TravelPackage, Decimal] = {
    TravelPackage.LONDON: Decimal("0.30"),
    TravelPackage.TOKYO: Decimal("0.20"),
    TravelPackage.MAKKAH: Decimal("0.35"),
}
