import pytest

from airline.reservation.domain.enum import DepartureTime, Destination, TravelPackage


class TestDepartureTime:
    """DepartureTime のテスト"""

    @pytest.mark.parametrize(
        "option, expected",
        [
            ("A", DepartureTime.MORNING),
            ("b", DepartureTime.AFTERNOON),
            ("C", DepartureTime.EVENING),
            ("d", DepartureTime.NIGHT),
        ],
    )
    def test_from_option(self, option, expected):
        assert DepartureTime.from_option(option) == expected

    def test_labels(self):
        assert [t.value for t in DepartureTime] == [
            "8.00AM",
            "1.30PM",
            "5.00PM",
            "10.30PM",
        ]

    def test_invalid_option_raises_error(self):
        with pytest.raises(ValueError, match="Invalid departure time option: E"):
            DepartureTime.from_option("E")


class TestDestination:
    """Destination のテスト"""

    def test_menu_numbers(self):
        """定義順がメニュー番号になる"""
        assert Destination.from_menu_number(1) == Destination.JAKARTA
        assert Destination.from_menu_number(7) == Destination.CHICAGO
        assert Destination.LONDON.menu_number == 6

    @pytest.mark.parametrize("number", [0, 8])
    def test_invalid_menu_number_raises_error(self, number):
        with pytest.raises(ValueError, match="Invalid destination number"):
            Destination.from_menu_number(number)


class TestTravelPackage:
    """TravelPackage のテスト"""

    def test_destinations(self):
        assert TravelPackage.from_option("a").destination == Destination.LONDON
        assert TravelPackage.from_option("B").destination == Destination.TOKYO
        assert TravelPackage.from_option("c").destination == Destination.MAKKAH

    def test_invalid_option_raises_error(self):
        with pytest.raises(ValueError, match="Invalid package option: D"):
            TravelPackage.from_option("D")
