"""
Core data structures for the k-means engine.

`ClusterState` holds everything an engine mutates between iterations; the
dataset itself is never stored here.
"""

from typing import Optional, List
import torch
from torch import Tensor
from dataclasses import dataclass


@dataclass
class ClusterState:
    """Mutable state of one clustering run.

    Centroids are replaced wholesale once per iteration; labels are recomputed
    from scratch every iteration.
    """

    centroids: Tensor                          # (K, d) current centroids
    previous_centroids: Optional[Tensor] = None  # (K, d) centroids before the last update
    labels: Optional[Tensor] = None            # (n,) cluster index per dataset vector
    iterations: int = 0
    converged: bool = False

    def __post_init__(self):
        assert self.centroids.dim() == 2

    @property
    def n_clusters(self) -> int:
        return self.centroids.shape[0]

    @property
    def dimension(self) -> int:
        return self.centroids.shape[1]

    def cluster_indices(self, cluster_idx: int) -> Tensor:
        """Dataset indices assigned to a cluster, in dataset order."""
        if self.labels is None:
            raise ValueError("No assignment computed yet")
        return torch.where(self.labels == cluster_idx)[0]

    def groups(self) -> List[List[int]]:
        """Dataset indices of every cluster."""
        return [self.cluster_indices(k).tolist() for k in range(self.n_clusters)]
