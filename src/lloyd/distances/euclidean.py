"""
Euclidean distance metrics.

The default distance of the k-means engine.
"""

from typing import Sequence, Union
import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class EuclideanDistance(DistanceMetric):
    """Euclidean distance ||a - b||.

    With `squared=True` the square root is skipped; nearest-centroid
    assignments are the same either way.
    """

    def __init__(self, squared: bool = False):
        """
        Args:
            squared: If True, return squared distances.
                    If False (default), return actual Euclidean distances.
        """
        self.squared = squared

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        diff = a - b
        squared_distance = torch.sum(diff * diff)

        if self.squared:
            return squared_distance
        return torch.sqrt(squared_distance)

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        squared_distances = torch.sum(diff * diff, dim=2)

        if self.squared:
            return squared_distances
        return torch.sqrt(squared_distances)

    def __repr__(self) -> str:
        return f"EuclideanDistance(squared={self.squared})"


class WeightedEuclideanDistance(DistanceMetric):
    """Weighted Euclidean distance with feature weights.

    Computes sqrt(sum_i w_i * (a_i - b_i)²) where w_i are feature weights.
    """

    def __init__(self, weights: Union[Tensor, Sequence[float]], squared: bool = False):
        """
        Args:
            weights: (d,) feature weights, non-negative
            squared: Whether to return squared distances
        """
        self.weights = torch.as_tensor(weights, dtype=torch.float64)
        if self.weights.dim() != 1 or (self.weights < 0).any():
            raise ValueError("Feature weights must be a 1D sequence of non-negative numbers")
        self.squared = squared

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        weights = self.weights.to(device=a.device, dtype=a.dtype)
        diff = a - b
        squared_distance = torch.sum(weights * diff * diff)

        if self.squared:
            return squared_distance
        return torch.sqrt(squared_distance)

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        weights = self.weights.to(device=points.device, dtype=points.dtype)
        diff = points.unsqueeze(1) - centroids.unsqueeze(0)
        squared_distances = torch.sum(weights * diff * diff, dim=2)

        if self.squared:
            return squared_distances
        return torch.sqrt(squared_distances)
