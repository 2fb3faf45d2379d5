"""
Clustering quality metrics.
"""

import torch
from torch import Tensor


def inertia(X: Tensor, centroids: Tensor, labels: Tensor) -> float:
    """Sum of squared Euclidean distances from each point to its centroid.

    Args:
        X: (n, d) data points
        centroids: (k, d) cluster centroids
        labels: (n,) cluster index per point

    Returns:
        Within-cluster sum of squares
    """
    diff = X - centroids[labels]
    return torch.sum(diff * diff).item()
