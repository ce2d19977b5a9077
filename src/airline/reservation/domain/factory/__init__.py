from .reservation_factory import (
    ManualReservationDetails as ManualReservationDetails,
)
from .reservation_factory import (
    PackageReservationDetails as PackageReservationDetails,
)
from .reservation_factory import PassengerDetails as PassengerDetails
from .reservation_factory import ReservationFactory as ReservationFactory
