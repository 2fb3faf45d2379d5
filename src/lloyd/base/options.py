"""
Immutable configuration of a k-means run.

A fresh `KMeansOptions` is built for every engine; strategies left as None
are replaced by fresh default instances when the engine is constructed.
"""

from dataclasses import dataclass, fields
from typing import Any, Callable, Dict, Mapping, Optional, Union

from ..exceptions import ConfigurationError


@dataclass(frozen=True)
class KMeansOptions:
    """Options recognised by `KMeans`.

    Attributes:
        k: Number of clusters
        distance: Callable (a, b) -> number; None means Euclidean
        max_iterations: Iteration cap
        initial_centroids: Concrete list of centroids, a strategy callable
            (data, options) -> centroids, or None to draw them with the sampler
        sampler: Callable (count, data) -> vectors; None means uniform random
        convergence: ConvergenceCriterion; None means exact centroid equality
            (or a shift tolerance when `tol` is given)
        tol: Largest centroid coordinate change still counted as converged
        random_state: Seed for the default sampler and k-means++ generator
        verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
    """

    k: Any = 8
    distance: Optional[Callable] = None
    max_iterations: Any = 300
    initial_centroids: Any = None
    sampler: Optional[Callable] = None
    convergence: Any = None
    tol: Optional[float] = None
    random_state: Optional[int] = None
    verbose: int = 0

    @classmethod
    def from_mapping(cls, mapping: Optional[Mapping[str, Any]] = None,
                     **overrides) -> 'KMeansOptions':
        """Build options from a mapping plus keyword overrides."""
        params = dict(mapping or {})
        params.update(overrides)

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(params) - known)
        if unknown:
            raise ConfigurationError(f"Unknown k-means option(s): {', '.join(unknown)}")

        return cls(**params)

    def with_overrides(self, **overrides) -> 'KMeansOptions':
        """Return a copy with some options replaced."""
        if not overrides:
            return self
        return KMeansOptions.from_mapping(self.to_dict(), **overrides)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def coerce_options(options: Union[KMeansOptions, Mapping[str, Any], None],
                   **overrides) -> KMeansOptions:
    """Accept options as a KMeansOptions, a mapping, or nothing."""
    if options is None:
        return KMeansOptions.from_mapping(None, **overrides)
    if isinstance(options, KMeansOptions):
        return options.with_overrides(**overrides)
    if isinstance(options, Mapping):
        return KMeansOptions.from_mapping(options, **overrides)
    raise ConfigurationError(
        f"k-means options should be a mapping or KMeansOptions, got {type(options).__name__}"
    )
