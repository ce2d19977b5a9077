import pytest

from airline.reservation.domain.enum import TravelClass
from airline.reservation.domain.value_object import SeatNumber


class TestSeatNumber:
    """SeatNumber のテスト"""

    @pytest.mark.parametrize("value", [1, 15])
    def test_business_seats(self, value):
        """1-15 番はビジネスクラス"""
        seat = SeatNumber(value)
        assert seat.is_business
        assert seat.travel_class == TravelClass.BUSINESS

    @pytest.mark.parametrize("value", [16, 81])
    def test_economy_seats(self, value):
        """16-81 番はエコノミークラス"""
        assert SeatNumber(value).travel_class == TravelClass.ECONOMY

    @pytest.mark.parametrize("value", [0, 82, -1])
    def test_out_of_range_raises_error(self, value):
        with pytest.raises(
            ValueError, match="Available seats for this flight is 1-81 only"
        ):
            SeatNumber(value)
