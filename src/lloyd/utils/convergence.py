"""
Convergence criteria for the k-means engine.

Both criteria compare the centroids before and after an update step:
- Exact equality of every coordinate (the default)
- Largest coordinate shift under a tolerance
"""

import torch
from torch import Tensor

from ..base.interfaces import ConvergenceCriterion


class ExactCentroidMatch(ConvergenceCriterion):
    """Converged when the new centroids are bit-for-bit identical to the previous ones.

    Exact float comparison is sensitive to summation order; use
    `CentroidShiftTolerance` when centroids are computed non-deterministically.
    """

    def check(self, previous: Tensor, current: Tensor) -> bool:
        converged = previous.shape == current.shape and torch.equal(previous, current)

        self.history.append({
            'iteration': len(self.history),
            'converged': converged
        })

        return converged


class CentroidShiftTolerance(ConvergenceCriterion):
    """Converged when no centroid coordinate moved by more than `tol`."""

    def __init__(self, tol: float = 1e-8):
        """
        Args:
            tol: Largest absolute coordinate change still considered stable
        """
        super().__init__()
        self.tol = tol

    def check(self, previous: Tensor, current: Tensor) -> bool:
        max_shift = (current - previous).abs().max().item()

        self.history.append({
            'iteration': len(self.history),
            'max_shift': max_shift
        })

        return max_shift <= self.tol
