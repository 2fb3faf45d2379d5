"""Dataset samplers."""

from .random import RandomSampler

__all__ = ['RandomSampler']
