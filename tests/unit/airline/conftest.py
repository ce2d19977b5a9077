from collections.abc import Sequence
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum import DepartureTime, Destination
from airline.reservation.domain.factory import ReservationFactory
from airline.reservation.domain.value_object import (
    Passenger,
    ReferenceNumber,
    SeatNumber,
)
from airline.shared.domain import Money
from airline.shared.utils.console import Console


@pytest.fixture
def mock_repository():
    """リポジトリのモックフィクスチャ"""
    return MagicMock()


@pytest.fixture
def fixed_factory():
    """予約番号を RB000001 に固定した ReservationFactory"""
    return ReservationFactory(reference_generator=lambda: ReferenceNumber("RB000001"))


@pytest.fixture
def create_reservation():
    """Reservation を生成する Factory fixture（Factories as fixtures パターン）

    ages を渡すと、座席 20 番から順に乗客を割り当てる。
    """

    def _factory(
        reference: str = "RB000001",
        destination: Destination = Destination.LONDON,
        departure_time: DepartureTime = DepartureTime.MORNING,
        ages: Sequence[int] = (30,),
        passengers: Sequence[Passenger] | None = None,
        total_price: Decimal = Decimal("1500"),
        discount: Decimal = Decimal("0"),
    ) -> Reservation:
        if passengers is None:
            passengers = [
                Passenger(name=f"Passenger {i + 1}", age=age, seat=SeatNumber(20 + i))
                for i, age in enumerate(ages)
            ]
        return Reservation(
            id=ReferenceNumber(value=reference),
            destination=destination,
            departure_time=departure_time,
            passengers=passengers,
            total_price=Money.myr(total_price),
            discount=Money.myr(discount),
        )

    return _factory


@pytest.fixture
def create_console():
    """スクリプト化した入力で動く Console を生成する Factory fixture

    (console, 出力のリスト) を返す。入力が尽きると EOFError になる。
    """

    def _factory(*inputs: str) -> tuple[Console, list[str]]:
        answers = iter(inputs)
        output: list[str] = []

        def _input(prompt: str) -> str:
            try:
                return next(answers)
            except StopIteration:
                raise EOFError from None

        return Console(input_func=_input, output_func=output.append), output

    return _factory
