from collections.abc import Sequence
from dataclasses import dataclass

from airline.reservation.domain.value_object.passenger import Passenger


@dataclass(frozen=True)
class PackageComposition:
    """パッケージの乗客構成（既定: 大人2名・子供2名）"""

    adults: int = 2
    kids: int = 2

    @property
    def size(self) -> int:
        return self.adults + self.kids

    def admits(self, passengers: Sequence[Passenger], candidate: Passenger) -> bool:
        """candidate を追加しても構成を満たせるか"""
        adults = sum(1 for p in passengers if p.is_adult)
        kids = len(passengers) - adults
        if candidate.is_adult:
            return adults < self.adults
        return kids < self.kids

    def is_satisfied_by(self, passengers: Sequence[Passenger]) -> bool:
        adults = sum(1 for p in passengers if p.is_adult)
        return adults == self.adults and len(passengers) - adults == self.kids
