from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import TYPE_CHECKING

from airline.shared.domain import Money

if TYPE_CHECKING:
    from airline.reservation.domain.value_object.passenger import Passenger


@dataclass(frozen=True)
class Fare:
    """就航先ごとの運賃表

    大人（18歳以上）と子供で基本運賃が異なり、
    ビジネスクラスの座席には追加料金がかかる。
    """

    adult: Money
    kid: Money
    business_surcharge: Money

    def price_for(self, passenger: Passenger) -> Money:
        """乗客1名分の運賃"""
        price = self.adult if passenger.is_adult else self.kid
        if passenger.seat.is_business:
            price = price.add(self.business_surcharge)
        return price

    @classmethod
    def myr(cls, adult: int, kid: int, business_surcharge: int) -> Fare:
        return cls(
            adult=Money.myr(Decimal(adult)),
            kid=Money.myr(Decimal(kid)),
            business_surcharge=Money.myr(Decimal(business_surcharge)),
        )
