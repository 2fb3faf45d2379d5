"""Initialization strategies for the k-means engine."""

from .random import RandomInit
from .kmeans_plusplus import KMeansPlusPlusInit
from .resolver import resolve_initial_centroids

__all__ = [
    'RandomInit',
    'KMeansPlusPlusInit',
    'resolve_initial_centroids'
]
