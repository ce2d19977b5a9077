from .searching import binary_search as binary_search
from .searching import linear_search as linear_search
from .sorting import bubble_sort as bubble_sort
from .sorting import merge_sort as merge_sort
