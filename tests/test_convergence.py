# tests/test_convergence.py
"""
Convergence criteria behavior.

- ExactCentroidMatch: bit-for-bit equality only
- CentroidShiftTolerance: largest coordinate shift under tol
"""

from __future__ import annotations

import torch

from lloyd import KMeans, ExactCentroidMatch, CentroidShiftTolerance


def test_exact_match_requires_identical_centroids():
    crit = ExactCentroidMatch()
    a = torch.tensor([[0.0, 0.5], [10.0, 0.5]], dtype=torch.float64)

    assert crit.check(a, a.clone()) is True
    assert crit.check(a, a + 1e-15) is False
    assert crit.check(a, a[:1]) is False
    assert len(crit.history) == 3

    crit.reset()
    assert crit.history == []


def test_shift_tolerance():
    crit = CentroidShiftTolerance(tol=1e-3)
    a = torch.zeros(2, 3, dtype=torch.float64)

    assert crit.check(a, a + 1e-4) is True
    assert crit.check(a, a + 1e-2) is False
    assert crit.history[-1]["max_shift"] > 1e-3


def test_engine_uses_given_criterion(four_points):
    crit = CentroidShiftTolerance(tol=100.0)
    model = KMeans(four_points, k=2, convergence=crit, initial_centroids=[[0, 0], [10, 0]])
    model.run()

    # Any move is within tolerance, so the first iteration already converges
    assert model.iterations == 1
    assert model.converged is True
    assert len(crit.history) == 1


def test_exact_match_on_scenario_history(four_points):
    model = KMeans(four_points, k=2, initial_centroids=[[0, 0], [10, 0]])
    model.run()

    history = model.convergence_criterion.history
    assert [entry["converged"] for entry in history] == [False, True]
