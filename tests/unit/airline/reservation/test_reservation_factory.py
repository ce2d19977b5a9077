from decimal import Decimal

import pytest

from airline.reservation.domain.entity import Reservation
from airline.reservation.domain.enum import DepartureTime, Destination, TravelPackage
from airline.reservation.domain.factory import ReservationFactory
from airline.reservation.domain.value_object import PackageComposition, ReferenceNumber
from airline.shared.domain import Money
from airline.shared.domain.exception import BusinessRuleViolationException


class TestReservationFactory:
    """ReservationFactory のテスト"""

    def test_create_manual(self, fixed_factory, manual_details):
        """運賃表から乗客ごとの運賃を合計する"""
        reservation = fixed_factory.create_manual(manual_details)

        assert isinstance(reservation, Reservation)
        assert reservation.id == ReferenceNumber("RB000001")
        assert reservation.destination == Destination.LONDON
        assert reservation.departure_time == DepartureTime.MORNING
        # 大人 1500 + 子供 750 + ビジネス追加料金 1000
        assert reservation.total_price == Money.myr(3250)
        assert reservation.discount.is_zero()

    def test_create_manual_generates_reference_number(self, manual_details):
        reservation = ReservationFactory().create_manual(manual_details)
        assert ReferenceNumber.PATTERN.match(str(reservation.id))

    @pytest.mark.parametrize(
        "package, destination, total, discount",
        [
            ("A", Destination.LONDON, "3150", "1350"),
            ("B", Destination.TOKYO, "3120", "780"),
            ("C", Destination.MAKKAH, "2340", "1260"),
        ],
    )
    def test_create_package(
        self,
        fixed_factory,
        create_package_details,
        package,
        destination,
        total,
        discount,
    ):
        """パッケージ割引後の金額と割引額が記録される"""
        reservation = fixed_factory.create_package(
            create_package_details(package=package)
        )

        assert reservation.destination == destination
        assert reservation.departure_time == DepartureTime.AFTERNOON
        assert reservation.total_price == Money.myr(total)
        assert reservation.discount == Money.myr(discount)
        assert (reservation.num_adults, reservation.num_kids) == (2, 2)

    def test_package_price_ignores_seat_class(self, fixed_factory, create_package_details):
        """座席 1-4 はビジネスクラスだが、パッケージ価格は変わらない"""
        reservation = fixed_factory.create_package(create_package_details())
        assert reservation.total_price == Money.myr(3150)

    @pytest.mark.parametrize("ages", [(40, 38, 20, 6), (40, 8, 7, 6), (40, 38, 8)])
    def test_package_composition_violation(
        self, fixed_factory, create_package_details, ages
    ):
        with pytest.raises(
            BusinessRuleViolationException,
            match="This package is for 2 adults and 2 kids only",
        ):
            fixed_factory.create_package(create_package_details(ages=ages))

    def test_list_price(self):
        assert ReservationFactory.list_price(
            TravelPackage.TOKYO, PackageComposition()
        ) == Money.myr(Decimal("3900"))
