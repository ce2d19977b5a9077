from .enum import SearchAlgorithm as SearchAlgorithm
from .enum import SortAlgorithm as SortAlgorithm
from .value_object import ReservationSummary as ReservationSummary
from .value_object import TimedResult as TimedResult
