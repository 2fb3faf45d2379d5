"""
Hard assignment strategy for the k-means engine.

Assigns each point to its nearest centroid under the configured distance.
"""

from typing import Callable
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


def distance_matrix(distance: Callable, points: Tensor, centroids: Tensor) -> Tensor:
    """Compute the (n, k) matrix of distances from points to centroids.

    `DistanceMetric` instances use their vectorised `pairwise`; plain callables
    are invoked once per (point, centroid) pair with 1D tensors.
    """
    if isinstance(distance, DistanceMetric):
        return distance.pairwise(points, centroids)

    distances = torch.empty(points.shape[0], centroids.shape[0],
                            dtype=points.dtype, device=points.device)
    for i, point in enumerate(points):
        for j, centroid in enumerate(centroids):
            distances[i, j] = float(distance(point, centroid))
    return distances


class HardAssignment:
    """Hard (discrete) assignment to nearest centroid.

    Ties are broken towards the lowest centroid index.
    """

    def __init__(self, distance: Callable):
        self.distance = distance

    def compute_assignments(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Assign each point to nearest centroid.

        Args:
            points: (n, d) data points
            centroids: (k, d) current centroids

        Returns:
            (n,) tensor of cluster indices
        """
        distances = distance_matrix(self.distance, points, centroids)

        # argmin returns the first minimal index
        return torch.argmin(distances, dim=1)
