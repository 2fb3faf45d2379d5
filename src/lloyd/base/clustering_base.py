"""
Base class for iterative centroid clustering.

Provides the algorithmic skeleton of one Lloyd iteration (assignment, repair,
update, convergence check) and the driver that repeats it.
"""

from abc import abstractmethod
from typing import Any, List, Optional, Sequence
import time
import warnings

from torch import Tensor

from .interfaces import ConvergenceCriterion
from .data_structures import ClusterState


class BaseClusteringAlgorithm:
    """Base class implementing the alternating assignment/update loop.

    Subclasses need to specify:
    - How points are assigned to centroids
    - How empty clusters are repaired
    - How centroids are recomputed from an assignment

    The subclass constructor must set `self.data`, `self.points` and
    `self.state` before `iterate` is called.
    """

    def __init__(self,
                 max_iterations: int,
                 convergence_criterion: ConvergenceCriterion,
                 verbose: int = 0):
        """
        Args:
            max_iterations: Maximum iterations run by `run`
            convergence_criterion: Compares centroids before and after an update
            verbose: Verbosity level (0=silent, 1=progress, 2=detailed)
        """
        self.max_iterations = max_iterations
        self.convergence_criterion = convergence_criterion
        self.verbose = verbose

        self.data: Optional[Sequence] = None
        self.points: Optional[Tensor] = None
        self.state: Optional[ClusterState] = None

    @abstractmethod
    def _assign(self, centroids: Tensor) -> Tensor:
        """Return the (n,) cluster index of every point."""
        pass

    @abstractmethod
    def _repair(self, labels: Tensor) -> Tensor:
        """Return labels in which no cluster is empty."""
        pass

    @abstractmethod
    def _update(self, labels: Tensor) -> Tensor:
        """Return the (k, d) centroids of an assignment."""
        pass

    def _iteration_summary(self) -> str:
        return f"converged = {self.state.converged}"

    def _log_iteration(self, iteration: int, iter_time: float) -> None:
        if self.verbose >= 2 or (self.verbose >= 1 and iteration % 10 == 0):
            print(f"Iteration {iteration:3d}: {self._iteration_summary()} "
                  f"({iter_time:.3f}s)")

    def iterate(self) -> 'BaseClusteringAlgorithm':
        """Perform one assignment + update cycle.

        Does nothing once the run has converged.

        Returns:
            Self, for chaining
        """
        state = self.state
        if state.converged:
            return self

        iter_start_time = time.time()

        # Assignment step
        labels = self._assign(state.centroids)
        labels = self._repair(labels)

        # Update step
        centroids = self._update(labels)

        state.previous_centroids = state.centroids
        state.centroids = centroids
        state.labels = labels
        state.converged = self.convergence_criterion.check(state.previous_centroids, centroids)
        state.iterations += 1

        self._log_iteration(state.iterations - 1, time.time() - iter_start_time)

        return self

    def run(self) -> List[List[Any]]:
        """Iterate until convergence or until `max_iterations` is reached.

        Reaching the cap is not an error; check `converged` to tell apart.

        Returns:
            The clusters, k lists of dataset vectors
        """
        start_time = time.time()

        while not self.state.converged and self.state.iterations < self.max_iterations:
            self.iterate()

        if self.verbose:
            if self.state.converged:
                print(f"Converged at iteration {self.state.iterations}")
            else:
                warnings.warn(f"Failed to converge after {self.max_iterations} iterations")
            print(f"Total clustering time: {time.time() - start_time:.3f}s")

        return self.clusters

    @property
    def clusters(self) -> Optional[List[List[Any]]]:
        """Dataset vectors of every cluster, in dataset order.

        None until the first iteration.
        """
        if self.state.labels is None:
            return None
        return [[self.data[i] for i in group] for group in self.state.groups()]

    @property
    def centroids(self) -> Tensor:
        return self.state.centroids

    @property
    def previous_centroids(self) -> Optional[Tensor]:
        return self.state.previous_centroids

    @property
    def iterations(self) -> int:
        return self.state.iterations

    @property
    def converged(self) -> bool:
        return self.state.converged

    @property
    def labels_(self) -> Optional[Tensor]:
        """Cluster index of every dataset vector (None before the first iteration)."""
        return self.state.labels

    @property
    def cluster_centers_(self) -> Tensor:
        """Get cluster centers."""
        return self.state.centroids

    @property
    def n_iter_(self) -> int:
        return self.state.iterations
