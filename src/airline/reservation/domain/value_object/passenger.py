from dataclasses import dataclass
from typing import ClassVar

from airline.reservation.domain.enum.travel_class import TravelClass
from airline.reservation.domain.value_object.seat_number import SeatNumber


@dataclass(frozen=True)
class Passenger:
    """乗客

    名前は保存ファイルの区切り文字（カンマ・改行）を含めない。
    """

    ADULT_AGE: ClassVar[int] = 18
    MAX_NAME_LENGTH: ClassVar[int] = 100
    FORBIDDEN_NAME_CHARS: ClassVar[frozenset[str]] = frozenset({",", "\n", "\r"})

    name: str
    age: int
    seat: SeatNumber

    def __post_init__(self) -> None:
        if self.age < 0:
            raise ValueError("Invalid age. Please enter a valid non-negative number")
        object.__setattr__(self, "name", self.validate_name(self.name))

    @classmethod
    def validate_name(cls, name: str) -> str:
        """名前を検証し、前後の空白を除いて返す"""
        stripped = name.strip()
        if not stripped:
            raise ValueError("Passenger name cannot be empty")
        if len(stripped) > cls.MAX_NAME_LENGTH:
            raise ValueError("Passenger name is too long")
        if cls.FORBIDDEN_NAME_CHARS & set(stripped):
            raise ValueError("Passenger name cannot contain commas or line breaks")
        return stripped

    @property
    def is_adult(self) -> bool:
        return self.age >= self.ADULT_AGE

    @property
    def travel_class(self) -> TravelClass:
        return self.seat.travel_class
