from __future__ import annotations

from collections import Counter
from collections.abc import Iterable, Mapping
from dataclasses import dataclass

from airline.reservation.domain.entity import Reservation
from airline.shared.domain import Money


@dataclass(frozen=True)
class ReservationSummary:
    """予約全体の集計

    total_income は割引後の売上合計、gross_sales は割引前の売上合計。
    """

    total_reservations: int
    total_tickets: int
    total_adults: int
    total_kids: int
    reservations_by_destination: Mapping[str, int]
    total_discount: Money
    total_income: Money

    @property
    def gross_sales(self) -> Money:
        return self.total_income.add(self.total_discount)

    @classmethod
    def from_reservations(cls, reservations: Iterable[Reservation]) -> ReservationSummary:
        reservations = list(reservations)
        destinations = Counter(r.destination.value for r in reservations)

        total_discount = Money.zero()
        total_income = Money.zero()
        for r in reservations:
            total_discount = total_discount.add(r.discount)
            total_income = total_income.add(r.total_price)

        return cls(
            total_reservations=len(reservations),
            total_tickets=sum(r.num_passengers for r in reservations),
            total_adults=sum(r.num_adults for r in reservations),
            total_kids=sum(r.num_kids for r in reservations),
            reservations_by_destination=dict(sorted(destinations.items())),
            total_discount=total_discount,
            total_income=total_income,
        )
