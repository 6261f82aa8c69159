from .sequence import sequence_to_string, random_sequence, is_increasing
from .exhaustive import index_selections, longest_increasing_powerset
