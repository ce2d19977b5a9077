from .entity import Reservation as Reservation
from .enum import DepartureTime as DepartureTime
from .enum import Destination as Destination
from .enum import TravelClass as TravelClass
from .enum import TravelPackage as TravelPackage
from .factory import ManualReservationDetails as ManualReservationDetails
from .factory import PackageReservationDetails as PackageReservationDetails
from .factory import PassengerDetails as PassengerDetails
from .factory import ReservationFactory as ReservationFactory
from .repository import ReservationRepository as ReservationRepository
from .value_object import Coupon as Coupon
from .value_object import PackageComposition as PackageComposition
from .value_object import Passenger as Passenger
from .value_object import ReferenceNumber as ReferenceNumber
from .value_object import SeatNumber as SeatNumber
