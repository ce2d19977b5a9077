from .algorithm import SearchAlgorithm as SearchAlgorithm
from .algorithm import SortAlgorithm as SortAlgorithm
