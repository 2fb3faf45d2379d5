"""Utility functions for the k-means engine."""

from .convergence import ExactCentroidMatch, CentroidShiftTolerance

from .metrics import inertia

from .validation import (
    check_dataset,
    check_n_clusters,
    check_callable,
    check_max_iterations,
    check_tolerance,
    check_verbose,
    check_centroids,
    check_random_state,
    to_points,
    to_vector
)

__all__ = [
    # Convergence criteria
    'ExactCentroidMatch',
    'CentroidShiftTolerance',

    # Metrics
    'inertia',

    # Validation
    'check_dataset',
    'check_n_clusters',
    'check_callable',
    'check_max_iterations',
    'check_tolerance',
    'check_verbose',
    'check_centroids',
    'check_random_state',
    'to_points',
    'to_vector'
]
