from .state import DiskColor, DiskState, SortedDisks
from .sorting import sort_left_to_right, sort_lawnmower, ALGORITHMS
