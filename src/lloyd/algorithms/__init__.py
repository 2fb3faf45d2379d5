"""Clustering algorithm implementations."""

from .kmeans import KMeans, k_means
from .builder import KMeansBuilder, create_kmeans

__all__ = [
    'KMeans',
    'k_means',
    'KMeansBuilder',
    'create_kmeans'
]
