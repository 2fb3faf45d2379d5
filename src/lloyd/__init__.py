"""
Lloyd: k-means clustering with pluggable strategies.

Vectors are partitioned into k clusters by alternately assigning each vector
to its nearest centroid and recomputing centroids as cluster means, until the
centroids stop moving or an iteration cap is reached. Distance, sampler,
initialization and convergence check are all swappable.

Example usage:
    >>> from lloyd import KMeans, k_means
    >>>
    >>> data = [[0, 0], [0, 1], [10, 0], [10, 1]]
    >>>
    >>> # One-shot clustering
    >>> clusters = k_means({'k': 2}, data)
    >>>
    >>> # Step by step
    >>> model = KMeans(data, k=2, initial_centroids=[[0, 0], [10, 0]])
    >>> _ = model.iterate().iterate()
    >>> model.converged
    True
"""

__version__ = '0.1.0'

from .exceptions import ConfigurationError

from .algorithms.kmeans import KMeans, k_means
from .algorithms.builder import KMeansBuilder, create_kmeans

from .base import (
    KMeansOptions,
    ClusterState,
    DistanceMetric,
    Sampler,
    InitializationStrategy,
    ConvergenceCriterion
)

from .distances import (
    EuclideanDistance,
    WeightedEuclideanDistance,
    ManhattanDistance,
    ChebyshevDistance,
    CosineDistance
)

from .sampling import RandomSampler
from .initialization import RandomInit, KMeansPlusPlusInit
from .utils.convergence import ExactCentroidMatch, CentroidShiftTolerance

# Import visualization
from .visualization import plot_clusters_2d

__all__ = [
    # Engine
    'KMeans',
    'k_means',
    'KMeansBuilder',
    'create_kmeans',
    'KMeansOptions',
    'ClusterState',
    'ConfigurationError',

    # Interfaces
    'DistanceMetric',
    'Sampler',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Strategies
    'EuclideanDistance',
    'WeightedEuclideanDistance',
    'ManhattanDistance',
    'ChebyshevDistance',
    'CosineDistance',
    'RandomSampler',
    'RandomInit',
    'KMeansPlusPlusInit',
    'ExactCentroidMatch',
    'CentroidShiftTolerance',

    # Visualization
    'plot_clusters_2d',

    # Version
    '__version__'
]
