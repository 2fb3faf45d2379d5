"""
Input validation for k-means runs.

Every check raises `ConfigurationError` naming the failed precondition and
the offending value.
"""

import math
from collections.abc import Sequence
from numbers import Integral
from typing import Any, Optional, Union
import torch
from torch import Tensor
import numpy as np

from ..exceptions import ConfigurationError


DTYPE = torch.float64


def is_vector(obj: Any) -> bool:
    """Whether obj is an ordered, one-dimensional sequence."""
    if isinstance(obj, Tensor):
        return obj.dim() == 1
    if isinstance(obj, np.ndarray):
        return obj.ndim == 1
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def is_vector_sequence(obj: Any) -> bool:
    """Whether obj is an ordered sequence whose items may be vectors."""
    if isinstance(obj, Tensor):
        return obj.dim() == 2
    if isinstance(obj, np.ndarray):
        return obj.ndim == 2
    return isinstance(obj, Sequence) and not isinstance(obj, (str, bytes))


def check_dataset(data: Any) -> None:
    """Ensure the dataset is an ordered sequence of vectors."""
    if not is_vector_sequence(data) or (len(data) > 0 and not is_vector(data[0])):
        raise ConfigurationError(
            f"Dataset should be a sequence of vectors, got {type(data).__name__}"
        )


def _is_positive_integer(value: Any) -> bool:
    """Positive integers, including integral floats such as 2.0."""
    if isinstance(value, bool):
        return False
    if isinstance(value, float):
        return math.isfinite(value) and value.is_integer() and value > 0
    return isinstance(value, Integral) and value > 0


def check_n_clusters(k: Any, n_samples: int) -> None:
    """Validate number of clusters against the dataset size."""
    if not _is_positive_integer(k):
        raise ConfigurationError(f"`k` should be a positive integer, got {k!r}")

    if k > n_samples:
        raise ConfigurationError(
            f"k ({k}) is greater than the number of provided vectors ({n_samples})"
        )


def check_callable(name: str, value: Any) -> None:
    if not callable(value):
        raise ConfigurationError(f"The `{name}` option should be callable, got {value!r}")


def check_max_iterations(max_iterations: Any) -> None:
    if not _is_positive_integer(max_iterations):
        raise ConfigurationError(
            f"The `max_iterations` option should be a positive integer, got {max_iterations!r}"
        )


def check_tolerance(tol: Optional[float]) -> None:
    if tol is None:
        return
    if (isinstance(tol, bool) or not isinstance(tol, (int, float))
            or not math.isfinite(tol) or tol < 0):
        raise ConfigurationError(
            f"The `tol` option should be a finite non-negative number, got {tol!r}"
        )


def check_verbose(verbose: Any) -> None:
    if isinstance(verbose, bool) or not isinstance(verbose, Integral) or verbose < 0:
        raise ConfigurationError(
            f"The `verbose` option should be a non-negative integer, got {verbose!r}"
        )


def to_vector(vector: Any, dtype: torch.dtype = DTYPE) -> Tensor:
    """Convert one vector to a 1D tensor."""
    if isinstance(vector, Tensor):
        return vector.detach().to(dtype=dtype)
    return torch.as_tensor(np.asarray(vector, dtype=np.float64), dtype=dtype)


def to_points(data: Any, dtype: torch.dtype = DTYPE, ensure_finite: bool = True) -> Tensor:
    """Convert a sequence of vectors to a (n, d) tensor.

    Raises:
        ConfigurationError: ragged, non-numeric or non-finite input
    """
    try:
        if isinstance(data, Tensor):
            points = data.detach().to(dtype=dtype).clone()
        elif isinstance(data, np.ndarray):
            points = torch.from_numpy(np.array(data, dtype=np.float64)).to(dtype=dtype)
        else:
            points = torch.stack([to_vector(vector, dtype) for vector in data])
    except (TypeError, ValueError, RuntimeError) as exc:
        raise ConfigurationError(
            f"Vectors should be numeric and share the same dimension ({exc})"
        ) from exc

    if points.dim() != 2:
        raise ConfigurationError(f"Expected a 2D collection of vectors, got {points.dim()}D")

    if ensure_finite:
        if torch.isnan(points).any():
            raise ConfigurationError("Input contains NaN values")
        if torch.isinf(points).any():
            raise ConfigurationError("Input contains infinite values")

    return points


def check_centroids(centroids: Any, n_clusters: int, dimension: int) -> Tensor:
    """Validate resolved initial centroids and convert them to a (k, d) tensor."""
    if not is_vector_sequence(centroids):
        raise ConfigurationError(
            "`initial_centroids` are not a sequence, or the strategy computing them "
            f"returned invalid data (could be your `sampler`): got {type(centroids).__name__}"
        )

    if len(centroids) != n_clusters:
        raise ConfigurationError(
            f"You should provide k centroids (got {len(centroids)} instead of {n_clusters})"
        )

    for i, centroid in enumerate(centroids):
        if not is_vector(centroid) or len(centroid) != dimension:
            got = len(centroid) if is_vector(centroid) else type(centroid).__name__
            raise ConfigurationError(
                f"Centroid {i} is not of the correct dimension "
                f"(expected a vector of length {dimension}, got {got})"
            )

    return to_points(centroids)


def check_random_state(random_state: Optional[Union[int, torch.Generator]]) -> Optional[torch.Generator]:
    """Create generator from random state.

    Args:
        random_state: Seed or generator

    Returns:
        Generator or None
    """
    if random_state is None:
        return None
    elif isinstance(random_state, torch.Generator):
        return random_state
    elif isinstance(random_state, Integral) and not isinstance(random_state, bool):
        generator = torch.Generator()
        generator.manual_seed(int(random_state))
        return generator
    else:
        raise ConfigurationError(
            f"random_state must be int or Generator, got {type(random_state).__name__}"
        )
