"""
Random dataset samplers.

Used both for drawing initial centroids and for re-seeding empty clusters.
"""

from typing import Optional, Union
import torch
from torch import Tensor

from ..base.interfaces import Sampler
from ..utils.validation import check_random_state


class RandomSampler(Sampler):
    """Uniform random draw of dataset vectors.

    Draws without replacement by default, so `count` distinct vectors are
    returned whenever count <= len(data).
    """

    def __init__(self, random_state: Optional[Union[int, torch.Generator]] = None,
                 replacement: bool = False):
        """
        Args:
            random_state: Seed or torch.Generator; None uses the global RNG
            replacement: Whether the same index may be drawn several times
        """
        self.generator = check_random_state(random_state)
        self.replacement = replacement

    def sample_indices(self, count: int, n_points: int) -> Tensor:
        if n_points <= 0:
            raise ValueError("Cannot sample from an empty dataset")

        if self.replacement:
            return torch.randint(n_points, (count,), generator=self.generator)

        if count > n_points:
            raise ValueError(f"Cannot draw {count} distinct vectors from {n_points}")
        return torch.randperm(n_points, generator=self.generator)[:count]

    def __repr__(self) -> str:
        return f"RandomSampler(replacement={self.replacement})"
