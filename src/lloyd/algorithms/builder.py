"""
Builder pattern for configuring k-means runs.

Provides a fluent interface for assembling the strategies of a run.
"""

from typing import Any, Callable, Optional

from ..base.interfaces import ConvergenceCriterion
from ..base.options import KMeansOptions
from ..exceptions import ConfigurationError
from ..initialization import KMeansPlusPlusInit
from .kmeans import KMeans


class KMeansBuilder:
    """Fluent builder for k-means runs.

    Examples
    --------
    >>> model = (KMeansBuilder()
    ...     .with_k(3)
    ...     .with_kmeans_plusplus_init()
    ...     .with_tolerance(1e-9)
    ...     .build(X))
    >>> clusters = model.run()
    """

    def __init__(self):
        """Initialize builder with defaults."""
        self._params = KMeansOptions().to_dict()
        # k-means++ is created at build time so it sees the final random_state
        self._kmeans_plusplus = False
        self._n_local_trials = None

    def _set(self, **params) -> 'KMeansBuilder':
        self._params.update(params)
        return self

    def with_k(self, k: int) -> 'KMeansBuilder':
        """Set the number of clusters."""
        return self._set(k=k)

    def with_distance(self, distance: Callable) -> 'KMeansBuilder':
        """Set the distance function."""
        return self._set(distance=distance)

    def with_max_iterations(self, max_iterations: int) -> 'KMeansBuilder':
        return self._set(max_iterations=max_iterations)

    def with_initial_centroids(self, centroids: Any) -> 'KMeansBuilder':
        """Use concrete centroids, or a strategy computing them."""
        self._kmeans_plusplus = False
        return self._set(initial_centroids=centroids)

    def with_random_init(self) -> 'KMeansBuilder':
        """Draw the initial centroids with the run's sampler."""
        self._kmeans_plusplus = False
        return self._set(initial_centroids=None)

    def with_kmeans_plusplus_init(self, n_local_trials: Optional[int] = None) -> 'KMeansBuilder':
        """Use K-means++ initialization, seeded from the builder's random state."""
        self._kmeans_plusplus = True
        self._n_local_trials = n_local_trials
        return self._set(initial_centroids=None)

    def with_sampler(self, sampler: Callable) -> 'KMeansBuilder':
        """Set the sampler used for initialization and empty-cluster repair."""
        return self._set(sampler=sampler)

    def with_convergence_criterion(self, criterion: ConvergenceCriterion) -> 'KMeansBuilder':
        return self._set(convergence=criterion)

    def with_tolerance(self, tol: float) -> 'KMeansBuilder':
        """Converge when no centroid coordinate moves by more than `tol`."""
        return self._set(tol=tol, convergence=None)

    def with_random_state(self, random_state: Optional[int]) -> 'KMeansBuilder':
        return self._set(random_state=random_state)

    def with_verbose(self, verbose: int = 1) -> 'KMeansBuilder':
        return self._set(verbose=verbose)

    def build_options(self) -> KMeansOptions:
        """Freeze the configured options."""
        params = dict(self._params)
        if self._kmeans_plusplus:
            params['initial_centroids'] = KMeansPlusPlusInit(
                n_local_trials=self._n_local_trials,
                random_state=params['random_state']
            )
        return KMeansOptions.from_mapping(params)

    def build(self, data: Any) -> KMeans:
        """Construct the engine for a dataset."""
        return KMeans(data, self.build_options())


def create_kmeans(data: Any,
                  k: int = 8,
                  init: Any = 'random',
                  max_iterations: int = 300,
                  distance: Optional[Callable] = None,
                  random_state: Optional[int] = None,
                  verbose: int = 0) -> KMeans:
    """Create a k-means engine from common settings.

    Args:
        data: Dataset vectors
        k: Number of clusters
        init: 'random', 'k-means++', concrete centroids or a strategy callable
        max_iterations: Iteration cap
        distance: Distance function (Euclidean when None)
        random_state: Seed for the sampler and k-means++
        verbose: Verbosity level

    Returns:
        Constructed KMeans engine
    """
    builder = (KMeansBuilder()
               .with_k(k)
               .with_max_iterations(max_iterations)
               .with_random_state(random_state)
               .with_verbose(verbose))

    if distance is not None:
        builder.with_distance(distance)

    if isinstance(init, str):
        if init == 'random':
            builder.with_random_init()
        elif init == 'k-means++':
            builder.with_kmeans_plusplus_init()
        else:
            raise ConfigurationError(f"Unknown init method: {init}")
    else:
        builder.with_initial_centroids(init)

    return builder.build(data)
