import pytest

from airline.reservation.domain.factory import (
    ManualReservationDetails,
    PackageReservationDetails,
)


@pytest.fixture
def manual_details() -> ManualReservationDetails:
    """大人1名（エコノミー）と子供1名（ビジネス）のロンドン行き"""
    return {
        "destination": "LONDON",
        "departure_time": "A",
        "passengers": [
            {"name": "Ahmad", "age": 30, "seat": 20},
            {"name": "Siti", "age": 10, "seat": 5},
        ],
    }


@pytest.fixture
def create_package_details():
    """PackageReservationDetails を生成する Factory fixture"""

    def _factory(
        package: str = "A",
        ages: tuple[int, ...] = (40, 38, 8, 6),
        departure_time: str = "B",
    ) -> PackageReservationDetails:
        return {
            "package": package,
            "departure_time": departure_time,
            "passengers": [
                {"name": f"Member {i + 1}", "age": age, "seat": i + 1}
                for i, age in enumerate(ages)
            ],
        }

    return _factory
