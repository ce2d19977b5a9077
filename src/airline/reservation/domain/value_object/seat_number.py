from dataclasses import dataclass
from typing import ClassVar

from airline.reservation.domain.enum.travel_class import TravelClass


@dataclass(frozen=True)
class SeatNumber:
    """座席番号

    1-15 がビジネスクラス、16-81 がエコノミークラス。
    """

    FIRST: ClassVar[int] = 1
    LAST: ClassVar[int] = 81
    LAST_BUSINESS: ClassVar[int] = 15

    value: int

    def __post_init__(self) -> None:
        if not self.FIRST <= self.value <= self.LAST:
            raise ValueError(
                f"Available seats for this flight is {self.FIRST}-{self.LAST} only"
            )

    def __str__(self) -> str:
        return str(self.value)

    @property
    def is_business(self) -> bool:
        return self.value <= self.LAST_BUSINESS

    @property
    def travel_class(self) -> TravelClass:
        if self.is_business:
            return TravelClass.BUSINESS
        return TravelClass.ECONOMY
