from .coupon import Coupon as Coupon
from .fare import Fare as Fare
from .package_composition import PackageComposition as PackageComposition
from .passenger import Passenger as Passenger
from .reference_number import ReferenceNumber as ReferenceNumber
from .seat_number import SeatNumber as SeatNumber
