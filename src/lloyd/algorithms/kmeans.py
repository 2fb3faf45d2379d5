"""
K-means clustering (Lloyd's algorithm).

Vectors are assigned to their nearest centroid, centroids are recomputed as
cluster means, and the two steps alternate until the centroids stop moving
or the iteration cap is hit.
"""

from typing import Any, Dict, List, Mapping, Optional, Union
from torch import Tensor

from ..base.clustering_base import BaseClusteringAlgorithm
from ..base.data_structures import ClusterState
from ..base.interfaces import ConvergenceCriterion
from ..base.options import KMeansOptions, coerce_options
from ..assignments.hard import HardAssignment
from ..assignments.repair import EmptyClusterRepair
from ..distances.euclidean import EuclideanDistance
from ..exceptions import ConfigurationError
from ..initialization.resolver import resolve_initial_centroids
from ..sampling.random import RandomSampler
from ..updates.mean import MeanUpdater
from ..utils.convergence import ExactCentroidMatch, CentroidShiftTolerance
from ..utils.metrics import inertia
from ..utils.validation import (
    check_dataset, check_n_clusters, check_callable, check_max_iterations,
    check_tolerance, check_verbose, to_points
)


class KMeans(BaseClusteringAlgorithm):
    """K-means clustering engine.

    The engine references the dataset, never copies it, and owns the
    centroid and assignment state of a single run.

    Parameters
    ----------
    data : sequence of vectors, ndarray or Tensor of shape (n_samples, n_features)
        Dataset to cluster
    options : KMeansOptions or mapping, optional
        Run configuration; see `KMeansOptions`
    **overrides
        Individual options overriding `options`

    Attributes
    ----------
    clusters : list of k lists of dataset vectors
        Final cluster assignment (None before the first iteration)
    centroids : Tensor of shape (k, n_features)
        Current centroids
    labels_ : Tensor of shape (n_samples,)
        Cluster index of every dataset vector
    iterations : int
        Number of iterations run
    converged : bool
        Whether the last update left the centroids unchanged

    Raises
    ------
    ConfigurationError
        When the dataset or an option is invalid
    """

    def __init__(self,
                 data: Any,
                 options: Union[KMeansOptions, Mapping[str, Any], None] = None,
                 **overrides):
        options = coerce_options(options, **overrides)

        # Enforcing data validity
        check_dataset(data)
        check_n_clusters(options.k, len(data))

        distance = options.distance if options.distance is not None else EuclideanDistance()
        check_callable('distance', distance)

        check_max_iterations(options.max_iterations)

        sampler = options.sampler if options.sampler is not None else RandomSampler(options.random_state)
        check_callable('sampler', sampler)

        check_tolerance(options.tol)
        convergence = options.convergence
        if convergence is None:
            convergence = CentroidShiftTolerance(options.tol) if options.tol is not None else ExactCentroidMatch()
        if not isinstance(convergence, ConvergenceCriterion):
            raise ConfigurationError(
                f"The `convergence` option should be a ConvergenceCriterion, got {convergence!r}"
            )
        check_verbose(options.verbose)

        super().__init__(
            max_iterations=int(options.max_iterations),
            convergence_criterion=convergence,
            verbose=options.verbose
        )

        self.options = options
        self.k = int(options.k)
        self.distance = distance
        self.sampler = sampler

        self.data = data
        self.points = to_points(data)
        self.dimensions = self.points.shape[1]

        self.assignment_strategy = HardAssignment(distance)
        self.repair_strategy = EmptyClusterRepair(sampler)
        self.update_strategy = MeanUpdater()

        if self.verbose:
            print(f"Initializing {self.k} clusters...")

        centroids = resolve_initial_centroids(
            data,
            n_clusters=self.k,
            dimension=self.dimensions,
            distance=distance,
            max_iterations=self.max_iterations,
            initial_centroids=options.initial_centroids,
            sampler=sampler
        )

        self.state = ClusterState(centroids=centroids)
        self.convergence_criterion.reset()

    def _assign(self, centroids: Tensor) -> Tensor:
        return self.assignment_strategy.compute_assignments(self.points, centroids)

    def _repair(self, labels: Tensor) -> Tensor:
        labels, moves = self.repair_strategy.repair(labels, self.k, self.data, self.points)

        if moves and self.verbose >= 2:
            for index, origin, cluster in moves:
                print(f"  empty cluster {cluster} re-seeded with vector {index} "
                      f"(from cluster {origin})")

        return labels

    def _update(self, labels: Tensor) -> Tensor:
        return self.update_strategy.update(self.points, labels, self.k)

    def _iteration_summary(self) -> str:
        return f"inertia = {self.inertia_:.6f}"

    @property
    def inertia_(self) -> Optional[float]:
        """Sum of squared distances of vectors to their centroid."""
        if self.state.labels is None:
            return None
        return inertia(self.points, self.state.centroids, self.state.labels)

    def predict(self, X: Any) -> Tensor:
        """Predict the nearest current centroid for new vectors.

        Parameters
        ----------
        X : sequence of vectors of the dataset's dimension

        Returns
        -------
        labels : Tensor of shape (n_vectors,)
        """
        points = to_points(X)
        if points.shape[1] != self.dimensions:
            raise ConfigurationError(
                f"Expected vectors of dimension {self.dimensions}, got {points.shape[1]}"
            )
        return self.assignment_strategy.compute_assignments(points, self.state.centroids)

    def get_params(self) -> Dict[str, Any]:
        """Resolved options of this run."""
        return {
            'k': self.k,
            'distance': self.distance,
            'max_iterations': self.max_iterations,
            'initial_centroids': self.options.initial_centroids,
            'sampler': self.sampler,
            'convergence': self.convergence_criterion,
            'tol': self.options.tol,
            'random_state': self.options.random_state,
            'verbose': self.verbose
        }

    def __repr__(self) -> str:
        return (f"KMeans(k={self.k}, dimensions={self.dimensions}, "
                f"iterations={self.iterations}, converged={self.converged})")


def k_means(options: Union[KMeansOptions, Mapping[str, Any], None],
            data: Any) -> List[List[Any]]:
    """Cluster a dataset in one call.

    Args:
        options: Run configuration (see `KMeansOptions`)
        data: Dataset vectors

    Returns:
        The clusters, k lists of dataset vectors
    """
    return KMeans(data, options).run()
