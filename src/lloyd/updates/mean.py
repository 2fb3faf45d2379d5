"""
Mean update strategy for centroid-based clustering.
"""

import torch
from torch import Tensor


class MeanUpdater:
    """Recompute every centroid as the component-wise mean of its members."""

    def update(self, points: Tensor, labels: Tensor, n_clusters: int) -> Tensor:
        """Compute new centroids.

        Args:
            points: (n, d) data points
            labels: (n,) cluster index per point; every cluster non-empty
            n_clusters: Number of clusters K

        Returns:
            (K, d) tensor of centroids
        """
        centroids = torch.empty(n_clusters, points.shape[1],
                                dtype=points.dtype, device=points.device)

        for k in range(n_clusters):
            members = points[labels == k]
            # An empty cluster has no mean; repair must run first
            assert len(members) > 0, f"Cluster {k} is empty"
            centroids[k] = members.mean(dim=0)

        return centroids
