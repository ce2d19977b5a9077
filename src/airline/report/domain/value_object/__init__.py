from .reservation_summary import ReservationSummary as ReservationSummary
from .timed_result import TimedResult as TimedResult
