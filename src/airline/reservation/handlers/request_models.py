from pydantic import BaseModel, Field, field_validator, model_validator

from airline.reservation.domain.enum import Destination
from airline.reservation.domain.value_object import Passenger, SeatNumber


class PassengerRequest(BaseModel):
    """乗客の入力スキーマ"""

    name: str = Field(
        ...,
        min_length=1,
        max_length=Passenger.MAX_NAME_LENGTH,
        description="乗客名",
        examples=["Ahmad Faris"],
    )

    age: int = Field(..., ge=0, description="年齢", examples=[34])

    seat: int = Field(
        ...,
        ge=SeatNumber.FIRST,
        le=SeatNumber.LAST,
        description="座席番号（1-15 ビジネス / 16-81 エコノミー）",
        examples=[12],
    )

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        """保存ファイルの区切り文字を含まないこと"""
        return Passenger.validate_name(v)


class ReservationRequest(BaseModel):
    """予約リクエストの共通部分"""

    departure_time: str = Field(
        ...,
        pattern="^[A-Da-d]$",
        description="出発時刻の選択記号（A-D）",
        examples=["A"],
    )

    passengers: list[PassengerRequest]

    @model_validator(mode="after")
    def validate_unique_seats(self) -> "ReservationRequest":
        """予約内で座席が重複しないこと"""
        seats = [p.seat for p in self.passengers]
        if len(set(seats)) != len(seats):
            raise ValueError("Each passenger must have a different seat")
        return self


class ManualReservationRequest(ReservationRequest):
    """手動予約リクエストスキーマ"""

    destination: Destination = Field(..., description="就航先", examples=["TOKYO"])

    passengers: list[PassengerRequest] = Field(..., min_length=1, max_length=4)


class PackageReservationRequest(ReservationRequest):
    """パッケージ予約リクエストスキーマ"""

    package: str = Field(
        ...,
        pattern="^[A-Ca-c]$",
        description="パッケージの選択記号（A-C）",
        examples=["B"],
    )

    passengers: list[PassengerRequest] = Field(..., min_length=4, max_length=4)
