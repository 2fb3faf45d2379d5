"""Base classes, interfaces and state containers for the k-means engine."""

from .interfaces import (
    DistanceMetric,
    Sampler,
    InitializationStrategy,
    ConvergenceCriterion
)

from .data_structures import ClusterState

from .options import KMeansOptions, coerce_options

from .clustering_base import BaseClusteringAlgorithm

__all__ = [
    # Interfaces
    'DistanceMetric',
    'Sampler',
    'InitializationStrategy',
    'ConvergenceCriterion',

    # Data structures
    'ClusterState',

    # Configuration
    'KMeansOptions',
    'coerce_options',

    # Base algorithm
    'BaseClusteringAlgorithm'
]
