from collections.abc import Callable
from decimal import Decimal
from typing import TypedDict

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum import DepartureTime, Destination, TravelPackage
from airline.reservation.domain.value_object import (
    PackageComposition,
    Passenger,
    ReferenceNumber,
    SeatNumber,
)
from airline.shared.domain import Money
from airline.shared.domain.exception import BusinessRuleViolationException


class PassengerDetails(TypedDict):
    """乗客の入力データ構造"""

    name: str
    age: int
    seat: int


class ManualReservationDetails(TypedDict):
    """手動予約の入力データ構造"""

    destination: str
    departure_time: str
    passengers: list[PassengerDetails]


class PackageReservationDetails(TypedDict):
    """パッケージ予約の入力データ構造"""

    package: str
    departure_time: str
    passengers: list[PassengerDetails]


class ReservationFactory:
    """フライト予約エンティティのファクトリ

    - 予約番号の採番
    - プリミティブ型から Value Object への変換
    - 運賃表・パッケージ割引による金額計算
    """

    def __init__(
        self,
        reference_generator: Callable[[], ReferenceNumber] = ReferenceNumber.generate,
        composition: PackageComposition | None = None,
    ) -> None:
        self._reference_generator = reference_generator
        self._composition = composition or PackageComposition()

    @property
    def composition(self) -> PackageComposition:
        return self._composition

    def create_manual(self, details: ManualReservationDetails) -> Reservation:
        """手動予約を生成する

        運賃は乗客ごとに就航先の運賃表から計算する（割引なし）。
        """
        destination = Destination(details["destination"])
        passengers = self._to_passengers(details["passengers"])

        total = Money.zero()
        for passenger in passengers:
            total = total.add(destination.fare.price_for(passenger))

        return Reservation(
            id=self._reference_generator(),
            destination=destination,
            departure_time=DepartureTime.from_option(details["departure_time"]),
            passengers=passengers,
            total_price=total,
        )

    def create_package(self, details: PackageReservationDetails) -> Reservation:
        """パッケージ予約を生成する

        定価は 大人運賃 x 2 + 子供運賃 x 2（座席クラスは問わない）。
        パッケージごとの割引率を適用し、割引額を記録する。
        """
        package = TravelPackage.from_option(details["package"])
        passengers = self._to_passengers(details["passengers"])

        if not self._composition.is_satisfied_by(passengers):
            raise BusinessRuleViolationException(
                f"This package is for {self._composition.adults} adults and "
                f"{self._composition.kids} kids only"
            )

        list_price = self.list_price(package, self._composition)
        discount = list_price.multiply(package.discount_rate)

        return Reservation(
            id=self._reference_generator(),
            destination=package.destination,
            departure_time=DepartureTime.from_option(details["departure_time"]),
            passengers=passengers,
            total_price=list_price.subtract(discount),
            discount=discount,
        )

    @staticmethod
    def list_price(package: TravelPackage, composition: PackageComposition) -> Money:
        """パッケージの割引前価格"""
        fare = package.destination.fare
        return fare.adult.multiply(Decimal(composition.adults)).add(
            fare.kid.multiply(Decimal(composition.kids))
        )

    def _to_passengers(self, details: list[PassengerDetails]) -> list[Passenger]:
        return [
            Passenger(name=d["name"], age=d["age"], seat=SeatNumber(d["seat"]))
            for d in details
        ]
