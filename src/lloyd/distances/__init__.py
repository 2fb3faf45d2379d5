"""Distance metrics for the k-means engine."""

from .euclidean import EuclideanDistance, WeightedEuclideanDistance
from .minkowski import ManhattanDistance, ChebyshevDistance, CosineDistance

__all__ = [
    'EuclideanDistance',
    'WeightedEuclideanDistance',
    'ManhattanDistance',
    'ChebyshevDistance',
    'CosineDistance'
]
