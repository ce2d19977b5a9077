from pydantic import BaseModel

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum.destination import ORIGIN

AIRLINE_NAME = "RAUB AIRLINE"
FLIGHT_NUMBER = "RB370"
AIRCRAFT = "Boeing-770"

RULE = "_" * 90


class PassengerData(BaseModel):
    """搭乗券に載せる乗客データ"""

    name: str
    age: int
    seat: int
    travel_class: str


class BoardingPass(BaseModel):
    """搭乗券のレスポンスモデル"""

    airline: str = AIRLINE_NAME
    flight_number: str = FLIGHT_NUMBER
    reference_number: str
    origin: str = ORIGIN
    destination: str
    departure_time: str
    passengers: list[PassengerData]
    total_amount: str
    discount_amount: str


def to_response(reservation: Reservation) -> BoardingPass:
    """Entity を搭乗券に変換"""
    return BoardingPass(
        reference_number=str(reservation.id),
        destination=reservation.destination.value,
        departure_time=reservation.departure_time.value,
        passengers=[
            PassengerData(
                name=p.name,
                age=p.age,
                seat=p.seat.value,
                travel_class=p.travel_class.value,
            )
            for p in reservation.passengers
        ],
        total_amount=reservation.total_price.format(),
        discount_amount=reservation.discount.format(),
    )


def render_boarding_pass(boarding_pass: BoardingPass) -> str:
    """搭乗券を画面表示用のテキストにする"""
    lines = [
        RULE,
        f"  {boarding_pass.airline}    e-Boarding Pass    "
        f"[Reference Number : {boarding_pass.reference_number}]",
        RULE,
        "  PASSENGER & FLIGHT DETAILS",
    ]
    for p in boarding_pass.passengers:
        lines += [
            "",
            f"  {p.name}",
            f"  Age {p.age:<10} Flight  {boarding_pass.flight_number:<20} {p.travel_class}",
            f"  Seat {p.seat}",
            f"  {boarding_pass.origin} to {boarding_pass.destination}     "
            f"{boarding_pass.departure_time}",
        ]
    lines += [
        "",
        f"  DISCOUNT     : {boarding_pass.discount_amount}",
        f"  TOTAL AMOUNT : {boarding_pass.total_amount}",
        RULE,
    ]
    return "\n".join(lines)
