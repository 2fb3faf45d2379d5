"""
Core interfaces for the pluggable pieces of Lloyd's k-means.

Every strategy is a small callable object so that plain functions with the
same signature can be used wherever an interface instance is accepted.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Mapping, Sequence
import torch
from torch import Tensor


class DistanceMetric(ABC):
    """Abstract base class for vector-to-vector distances."""

    @abstractmethod
    def compute(self, a: Tensor, b: Tensor) -> Tensor:
        """Compute the distance between two vectors.

        Args:
            a: (d,) tensor
            b: (d,) tensor

        Returns:
            Scalar tensor, non-negative
        """
        pass

    def pairwise(self, points: Tensor, centroids: Tensor) -> Tensor:
        """Compute the (n, k) matrix of distances from points to centroids.

        Subclasses override this with a vectorised form.
        """
        distances = torch.empty(points.shape[0], centroids.shape[0],
                                dtype=points.dtype, device=points.device)
        for i, point in enumerate(points):
            for j, centroid in enumerate(centroids):
                distances[i, j] = self.compute(point, centroid)
        return distances

    def __call__(self, a: Tensor, b: Tensor) -> Tensor:
        return self.compute(a, b)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class Sampler(ABC):
    """Abstract base class for drawing vectors out of a dataset."""

    @abstractmethod
    def sample_indices(self, count: int, n_points: int) -> Tensor:
        """Draw `count` dataset indices in [0, n_points).

        Returns:
            (count,) long tensor
        """
        pass

    def __call__(self, count: int, data: Sequence) -> List[Any]:
        indices = self.sample_indices(count, len(data))
        return [data[i] for i in indices.tolist()]


class InitializationStrategy(ABC):
    """Abstract base class for initial centroid selection."""

    @abstractmethod
    def initialize(self, data: Sequence, n_clusters: int, **kwargs) -> Any:
        """Compute initial centroids.

        Args:
            data: The dataset as given by the caller
            n_clusters: Number of centroids to produce
            **kwargs: `distance` and `max_iterations` of the run

        Returns:
            A sequence of n_clusters vectors (list or (k, d) tensor)
        """
        pass

    def __call__(self, data: Sequence, options: Mapping[str, Any]) -> Any:
        return self.initialize(
            data,
            options['k'],
            distance=options.get('distance'),
            max_iterations=options.get('max_iterations')
        )


class ConvergenceCriterion(ABC):
    """Abstract base class for centroid convergence checks."""

    def __init__(self):
        self.history: List[Dict[str, Any]] = []

    @abstractmethod
    def check(self, previous: Tensor, current: Tensor) -> bool:
        """Check whether the centroids stopped moving.

        Args:
            previous: (k, d) centroids before the update step
            current: (k, d) centroids after the update step

        Returns:
            True if converged, False otherwise
        """
        pass

    def reset(self):
        """Reset convergence history."""
        self.history = []
