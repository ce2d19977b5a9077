from __future__ import annotations

from enum import Enum

from airline.reservation.domain.value_object.fare import Fare

ORIGIN = "KUALA LUMPUR"


class Destination(str, Enum):
    """就航先（出発地はすべてクアラルンプール）

    定義順がメニューの番号（1-7）になる。
    """

    JAKARTA = "JAKARTA"
    BANGKOK = "BANGKOK"
    MAKKAH = "MAKKAH"
    TOKYO = "TOKYO"
    PARIS = "PARIS"
    LONDON = "LONDON"
    CHICAGO = "CHICAGO"

    @property
    def fare(self) -> Fare:
        return _FARES[self]

    @property
    def menu_number(self) -> int:
        return list(Destination).index(self) + 1

    @classmethod
    def from_menu_number(cls, number: int) -> Destination:
        destinations = list(cls)
        if not 1 <= number <= len(destinations):
            raise ValueError(
                f"Invalid destination number: {number}. "
                f"Choose 1-{len(destinations)} only"
            )
        return destinations[number - 1]


_FARES: dict[Destination, Fare] = {
    Destination.JAKARTA: Fare.myr(adult=1000, kid=500, business_surcharge=500),
    Destination.BANGKOK: Fare.myr(adult=1100, kid=550, business_surcharge=600),
    Destination.MAKKAH: Fare.myr(adult=1200, kid=600, business_surcharge=700),
    Destination.TOKYO: Fare.myr(adult=1300, kid=650, business_surcharge=800),
    Destination.PARIS: Fare.myr(adult=1400, kid=700, business_surcharge=900),
    Destination.LONDON: Fare.myr(adult=1500, kid=750, business_surcharge=1000),
    Destination.CHICAGO: Fare.myr(adult=1600, kid=800, business_surcharge=1100),
}
