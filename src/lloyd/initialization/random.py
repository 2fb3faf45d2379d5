"""
Random initialization strategy.

Selects dataset vectors as initial centroids through a sampler.
"""

from typing import Any, Callable, Optional, Sequence

from ..base.interfaces import InitializationStrategy
from ..sampling.random import RandomSampler


class RandomInit(InitializationStrategy):
    """Random initialization by drawing n_clusters vectors from the dataset.

    With the default sampler the vectors are distinct (no replacement).
    """

    def __init__(self, sampler: Optional[Callable] = None):
        """
        Args:
            sampler: Callable (count, data) -> vectors; defaults to RandomSampler()
        """
        self.sampler = sampler if sampler is not None else RandomSampler()

    def initialize(self, data: Sequence, n_clusters: int, **kwargs) -> Any:
        """Draw the initial centroids.

        Returns:
            Whatever the sampler returns; validated by the caller
        """
        return self.sampler(n_clusters, data)
