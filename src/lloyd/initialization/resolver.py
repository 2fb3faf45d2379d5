"""
Resolution of the starting centroids of a run.

Order: a concrete centroid list, else a strategy callable, else a sampler draw.
Whatever path is taken, the result is validated against k and the dataset
dimension.
"""

from typing import Any, Callable, Sequence
from torch import Tensor

from ..utils.validation import check_centroids
from .random import RandomInit


def resolve_initial_centroids(data: Sequence,
                              n_clusters: int,
                              dimension: int,
                              distance: Callable,
                              max_iterations: int,
                              initial_centroids: Any,
                              sampler: Callable) -> Tensor:
    """Compute and validate the initial centroids.

    Args:
        data: The caller's dataset
        n_clusters: Number of clusters k
        dimension: Vector dimension D of the dataset
        distance: Distance of the run
        max_iterations: Iteration cap of the run
        initial_centroids: Concrete centroids, strategy callable, or None
        sampler: Sampler used when no centroids are given

    Returns:
        (k, D) tensor of centroids

    Raises:
        ConfigurationError: if the resolved centroids are malformed
    """
    if initial_centroids is None:
        centroids = RandomInit(sampler).initialize(data, n_clusters)
    elif callable(initial_centroids):
        centroids = initial_centroids(data, {
            'k': n_clusters,
            'distance': distance,
            'max_iterations': max_iterations
        })
    else:
        centroids = initial_centroids

    return check_centroids(centroids, n_clusters, dimension)
