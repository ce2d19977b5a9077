from decimal import Decimal

from airline.report.domain.value_object import ReservationSummary
from airline.reservation.domain.enum import Destination
from airline.shared.domain import Money


class TestReservationSummary:
    """ReservationSummary のテスト"""

    def test_from_reservations(self, create_reservation):
        # Arrange
        reservations = [
            create_reservation(
                reference="RB000001",
                destination=Destination.TOKYO,
                ages=(30,),
                total_price=Decimal("1300"),
            ),
            create_reservation(
                reference="RB000002",
                destination=Destination.LONDON,
                ages=(40, 38, 8, 6),
                total_price=Decimal("3150"),
                discount=Decimal("1350"),
            ),
            create_reservation(
                reference="RB000003",
                destination=Destination.TOKYO,
                ages=(10,),
                total_price=Decimal("552.50"),
                discount=Decimal("97.50"),
            ),
        ]

        # Act
        summary = ReservationSummary.from_reservations(reservations)

        # Assert
        assert summary.total_reservations == 3
        assert summary.total_tickets == 6
        assert summary.total_adults == 3
        assert summary.total_kids == 3
        assert list(summary.reservations_by_destination.items()) == [
            ("LONDON", 1),
            ("TOKYO", 2),
        ]
        assert summary.total_discount == Money.myr("1447.50")
        assert summary.total_income == Money.myr("5002.50")
        assert summary.gross_sales == Money.myr("6450.00")

    def test_empty(self):
        summary = ReservationSummary.from_reservations([])
        assert summary.total_tickets == 0
        assert summary.reservations_by_destination == {}
        assert summary.total_income.is_zero()
        assert summary.gross_sales.is_zero()
