from .departure_time import DepartureTime as DepartureTime
from .destination import Destination as Destination
from .travel_class import TravelClass as TravelClass
from .travel_package import TravelPackage as TravelPackage
