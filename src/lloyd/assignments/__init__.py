"""Assignment strategies for the k-means engine."""

from .hard import HardAssignment, distance_matrix
from .repair import EmptyClusterRepair, locate_vector

__all__ = [
    'HardAssignment',
    'distance_matrix',
    'EmptyClusterRepair',
    'locate_vector'
]
