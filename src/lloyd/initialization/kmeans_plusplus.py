"""
K-means++ initialization strategy.

Selects initial centroids that are far apart, which usually shortens the run
and improves the final partition.
"""

from typing import Callable, Optional, Sequence, Union
import math
import torch
from torch import Tensor

from ..base.interfaces import InitializationStrategy
from ..assignments.hard import distance_matrix
from ..distances.euclidean import EuclideanDistance
from ..utils.validation import check_random_state, to_points


class KMeansPlusPlusInit(InitializationStrategy):
    """K-means++ initialization for better starting positions.

    Algorithm:
    1. Choose first center uniformly at random
    2. For each remaining center:
       - Compute distance from each point to nearest existing center
       - Sample a few candidates with probability proportional to squared distance
       - Keep the candidate that most reduces the total squared distance
    """

    def __init__(self, n_local_trials: Optional[int] = None,
                 random_state: Optional[Union[int, torch.Generator]] = None):
        """
        Args:
            n_local_trials: Number of candidates to try for each center.
                           If None, uses 2 + log(k) as in sklearn
            random_state: Seed or torch.Generator; None uses the global RNG
        """
        self.n_local_trials = n_local_trials
        self.generator = check_random_state(random_state)

    def initialize(self, data: Sequence, n_clusters: int,
                   distance: Optional[Callable] = None, **kwargs) -> Tensor:
        """Initialize centroids using K-means++.

        Args:
            data: Dataset vectors
            n_clusters: Number of clusters
            distance: Distance of the run; squared for the sampling weights

        Returns:
            (n_clusters, d) tensor of centroids, all dataset vectors
        """
        points = to_points(data)
        n_points = points.shape[0]
        distance = distance if distance is not None else EuclideanDistance()

        if n_clusters > n_points:
            raise ValueError(f"Cannot create {n_clusters} clusters from {n_points} points")

        # Number of candidates to try per iteration
        if self.n_local_trials is None:
            n_local_trials = 2 + int(math.log(n_clusters))
        else:
            n_local_trials = self.n_local_trials

        first_idx = torch.randint(n_points, (1,), generator=self.generator).item()
        center_indices = [first_idx]

        distances = self._squared_distances(distance, points, points[first_idx])

        for _ in range(1, n_clusters):
            total = distances.sum()

            if total <= 0:
                # Every point sits on a center already; fall back to unused points
                remaining = [i for i in range(n_points) if i not in center_indices]
                choice = torch.randint(len(remaining), (1,), generator=self.generator).item()
                best_candidate = remaining[choice]
            else:
                probabilities = distances / total
                candidates_idx = torch.multinomial(probabilities, n_local_trials,
                                                   replacement=True, generator=self.generator)

                best_potential = float('inf')
                best_candidate = None

                for idx in candidates_idx.tolist():
                    candidate_distances = self._squared_distances(distance, points, points[idx])
                    potential = torch.minimum(distances, candidate_distances).sum().item()

                    if potential < best_potential:
                        best_potential = potential
                        best_candidate = idx

            center_indices.append(best_candidate)
            new_center_distances = self._squared_distances(distance, points, points[best_candidate])
            distances = torch.minimum(distances, new_center_distances)

        return points[center_indices].clone()

    @staticmethod
    def _squared_distances(distance: Callable, points: Tensor, center: Tensor) -> Tensor:
        d = distance_matrix(distance, points, center.unsqueeze(0)).squeeze(1)
        return d * d
