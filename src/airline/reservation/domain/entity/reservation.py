from collections.abc import Sequence
from typing import ClassVar

from airline.reservation.domain.enum.departure_time import DepartureTime
from airline.reservation.domain.enum.destination import Destination
from airline.reservation.domain.value_object.coupon import Coupon
from airline.reservation.domain.value_object.passenger import Passenger
from airline.reservation.domain.value_object.reference_number import ReferenceNumber
from airline.shared.domain import Entity, Money
from airline.shared.domain.exception import BusinessRuleViolationException


class Reservation(Entity[ReferenceNumber]):
    """フライト予約

    1予約あたり1-4名。座席は予約内で重複しない。
    total_price は割引適用後の金額、discount は割引額。
    """

    MAX_PASSENGERS: ClassVar[int] = 4

    def __init__(
        self,
        id: ReferenceNumber,
        destination: Destination,
        departure_time: DepartureTime,
        passengers: Sequence[Passenger],
        total_price: Money,
        discount: Money | None = None,
    ) -> None:
        super().__init__(id)

        self._destination = destination
        self._departure_time = departure_time
        self._passengers = tuple(passengers)
        self._total_price = total_price
        self._discount = discount or Money.zero(total_price.currency)

        self._validate_passengers()
        self._validate_currency()

    def _validate_passengers(self) -> None:
        """乗客数 1-4、座席の重複なし"""
        if not 1 <= len(self._passengers) <= self.MAX_PASSENGERS:
            raise BusinessRuleViolationException(
                f"A reservation must have 1-{self.MAX_PASSENGERS} passengers"
            )
        seats = [p.seat for p in self._passengers]
        if len(set(seats)) != len(seats):
            raise BusinessRuleViolationException(
                "Each passenger in a reservation must have a different seat"
            )

    def _validate_currency(self) -> None:
        if self._total_price.currency != self._discount.currency:
            raise BusinessRuleViolationException(
                "Total price and discount must be in the same currency"
            )

    @property
    def destination(self) -> Destination:
        return self._destination

    @property
    def departure_time(self) -> DepartureTime:
        return self._departure_time

    @property
    def passengers(self) -> tuple[Passenger, ...]:
        return self._passengers

    @property
    def total_price(self) -> Money:
        return self._total_price

    @property
    def discount(self) -> Money:
        return self._discount

    @property
    def num_passengers(self) -> int:
        return len(self._passengers)

    @property
    def num_adults(self) -> int:
        return sum(1 for p in self._passengers if p.is_adult)

    @property
    def num_kids(self) -> int:
        return self.num_passengers - self.num_adults

    def apply_coupon(self, coupon: Coupon) -> None:
        """クーポンを適用する（1予約につき1回まで）"""
        if not self._discount.is_zero():
            raise BusinessRuleViolationException(
                "A discount has already been applied to this reservation"
            )
        discount = self._total_price.multiply(coupon.rate)
        self._discount = discount
        self._total_price = self._total_price.subtract(discount)
