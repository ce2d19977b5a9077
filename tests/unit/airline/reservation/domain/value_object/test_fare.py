import pytest

from airline.reservation.domain.enum import Destination
from airline.reservation.domain.value_object import Passenger, SeatNumber
from airline.shared.domain import Money


class TestFare:
    """Fare と就航先の運賃表のテスト"""

    @pytest.mark.parametrize(
        "destination, adult, kid, surcharge",
        [
            (Destination.JAKARTA, 1000, 500, 500),
            (Destination.BANGKOK, 1100, 550, 600),
            (Destination.MAKKAH, 1200, 600, 700),
            (Destination.TOKYO, 1300, 650, 800),
            (Destination.PARIS, 1400, 700, 900),
            (Destination.LONDON, 1500, 750, 1000),
            (Destination.CHICAGO, 1600, 800, 1100),
        ],
    )
    def test_fare_table(self, destination, adult, kid, surcharge):
        fare = destination.fare
        assert fare.adult == Money.myr(adult)
        assert fare.kid == Money.myr(kid)
        assert fare.business_surcharge == Money.myr(surcharge)

    def test_price_for_economy_adult(self):
        passenger = Passenger(name="Ali", age=30, seat=SeatNumber(20))
        assert Destination.TOKYO.fare.price_for(passenger) == Money.myr(1300)

    def test_price_for_business_kid(self):
        """ビジネスクラスは追加料金がかかる"""
        passenger = Passenger(name="Adam", age=10, seat=SeatNumber(15))
        assert Destination.TOKYO.fare.price_for(passenger) == Money.myr(1450)
