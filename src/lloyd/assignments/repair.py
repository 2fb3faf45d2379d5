"""
Empty-cluster repair.

A cluster that receives no vector during assignment would have an undefined
mean. Each empty cluster takes one vector drawn by the sampler, moved out of
the cluster it was assigned to, so the assignment stays a partition.
"""

from typing import Any, Callable, List, Optional, Sequence, Tuple
import torch
from torch import Tensor

from ..base.interfaces import Sampler
from ..utils.validation import to_vector


class EmptyClusterRepair:
    """Re-seed empty clusters with sampled dataset vectors.

    Policy:
    - Empty clusters are handled in ascending index order.
    - A draw is accepted only if the vector's current cluster keeps at least
      one other member; labels are updated after every move, so a vector
      drawn twice stays where it was first moved.
    - After `max_draws` rejected draws, the lowest dataset index whose
      cluster can spare it is moved instead. One always exists since n >= k.
    """

    def __init__(self, sampler: Callable, max_draws: Optional[int] = None):
        """
        Args:
            sampler: Sampler instance or callable (count, data) -> vectors
            max_draws: Draws attempted per empty cluster (defaults to n)
        """
        self.sampler = sampler
        self.max_draws = max_draws

    def repair(self, labels: Tensor, n_clusters: int, data: Sequence,
               points: Tensor) -> Tuple[Tensor, List[Tuple[int, int, int]]]:
        """Fill every empty cluster.

        Args:
            labels: (n,) cluster index per point, as assigned
            n_clusters: Number of clusters K
            data: The caller's dataset (handed to plain sampler callables)
            points: (n, d) dataset tensor

        Returns:
            Repaired labels and the list of moves as (index, from, to)
        """
        counts = torch.bincount(labels, minlength=n_clusters)
        if (counts > 0).all():
            return labels, []

        labels = labels.clone()
        moves = []
        max_draws = self.max_draws if self.max_draws is not None else len(points)

        for cluster in range(n_clusters):
            if counts[cluster] > 0:
                continue

            index = self._draw_donor(labels, counts, data, points, max_draws)
            origin = labels[index].item()

            labels[index] = cluster
            counts[origin] -= 1
            counts[cluster] += 1
            moves.append((index, origin, cluster))

        return labels, moves

    def _draw_donor(self, labels: Tensor, counts: Tensor, data: Sequence,
                    points: Tensor, max_draws: int) -> int:
        spare = counts[labels] > 1

        for _ in range(max_draws):
            index = self._draw_index(data, points, spare)
            if index is not None and spare[index]:
                return index

        return torch.nonzero(spare)[0].item()

    def _draw_index(self, data: Sequence, points: Tensor, spare: Tensor) -> Optional[int]:
        if isinstance(self.sampler, Sampler):
            return int(self.sampler.sample_indices(1, len(points))[0])

        drawn = self.sampler(1, data)
        return locate_vector(points, drawn[0], prefer=spare)


def locate_vector(points: Tensor, vector: Any, prefer: Optional[Tensor] = None) -> Optional[int]:
    """Find the dataset index of a vector by row equality.

    Among duplicate rows, the first one flagged in `prefer` wins, then the
    first one overall. Returns None when the vector is not in the dataset.
    """
    try:
        target = to_vector(vector, points.dtype).to(points.device)
    except (TypeError, ValueError, RuntimeError):
        return None

    if target.shape != points.shape[1:]:
        return None

    matches = (points == target).all(dim=1)
    if prefer is not None and (matches & prefer).any():
        matches = matches & prefer

    found = torch.nonzero(matches)
    if len(found) == 0:
        return None
    return found[0].item()
