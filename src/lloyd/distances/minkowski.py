"""
Other vector distances usable in place of the Euclidean default.
"""

import torch
from torch import Tensor

from ..base.interfaces import DistanceMetric


class ManhattanDistance(DistanceMetric):
    """City-block distance sum_i |a_i - b_i|."""

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        return torch.sum(torch.abs(a - b))

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        return torch.sum(torch.abs(points.unsqueeze(1) - centroids.unsqueeze(0)), dim=2)


class ChebyshevDistance(DistanceMetric):
    """Largest coordinate difference max_i |a_i - b_i|."""

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        return torch.max(torch.abs(a - b))

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        return torch.amax(torch.abs(points.unsqueeze(1) - centroids.unsqueeze(0)), dim=2)


class CosineDistance(DistanceMetric):
    """1 - cosine similarity; zero vectors are treated as orthogonal to everything."""

    def __init__(self, eps: float = 1e-12):
        self.eps = eps

    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        denom = torch.clamp(a.norm() * b.norm(), min=self.eps)
        return torch.clamp(1.0 - torch.dot(a, b) / denom, min=0.0)

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        norms = points.norm(dim=1, keepdim=True) * centroids.norm(dim=1).unsqueeze(0)
        similarities = (points @ centroids.t()) / torch.clamp(norms, min=self.eps)
        return torch.clamp(1.0 - similarities, min=0.0)
