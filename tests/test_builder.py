# tests/test_builder.py
"""
Fluent builder, create_kmeans and the immutable options container.
"""

from __future__ import annotations

import dataclasses

import pytest
import torch

from lloyd import (
    KMeans, KMeansBuilder, KMeansOptions, KMeansPlusPlusInit, CentroidShiftTolerance,
    ManhattanDistance, ConfigurationError, create_kmeans
)

from data_gen import make_blobs


def test_builder_options():
    distance = ManhattanDistance()
    options = (KMeansBuilder()
               .with_k(3)
               .with_distance(distance)
               .with_max_iterations(50)
               .with_random_state(4)
               .build_options())

    assert isinstance(options, KMeansOptions)
    assert options.k == 3
    assert options.distance is distance
    assert options.max_iterations == 50
    assert options.random_state == 4


def test_builder_build_runs(four_points):
    model = (KMeansBuilder()
             .with_k(2)
             .with_initial_centroids([[0, 0], [10, 0]])
             .build(four_points))

    assert isinstance(model, KMeans)
    assert model.run() == [[[0, 0], [0, 1]], [[10, 0], [10, 1]]]


def test_builder_kmeans_plusplus_and_tolerance(four_points):
    model = (KMeansBuilder()
             .with_k(2)
             .with_random_state(0)
             .with_kmeans_plusplus_init()
             .with_tolerance(1e-9)
             .build(four_points))

    assert isinstance(model.options.initial_centroids, KMeansPlusPlusInit)
    assert isinstance(model.convergence_criterion, CentroidShiftTolerance)
    assert model.convergence_criterion.tol == 1e-9


def test_builder_seeds_kmeans_plusplus_after_the_fact():
    X, _ = make_blobs(n_per=30, seed=3)

    def build():
        return (KMeansBuilder()
                .with_k(3)
                .with_kmeans_plusplus_init()
                .with_random_state(5)
                .build(X))

    first, second = build(), build()
    assert first.options.initial_centroids is not second.options.initial_centroids
    assert torch.equal(first.centroids, second.centroids)


def test_builder_later_init_replaces_kmeans_plusplus(four_points):
    model = (KMeansBuilder()
             .with_k(2)
             .with_kmeans_plusplus_init()
             .with_initial_centroids([[0, 0], [10, 0]])
             .build(four_points))

    assert model.centroids.tolist() == [[0.0, 0.0], [10.0, 0.0]]


def test_create_kmeans(four_points):
    model = create_kmeans(four_points, k=2, init="k-means++", random_state=1)
    clusters = model.run()
    assert sorted(len(group) for group in clusters) == [2, 2]

    model = create_kmeans(four_points, k=2, init=[[0, 0], [10, 0]])
    assert model.centroids.tolist() == [[0.0, 0.0], [10.0, 0.0]]

    with pytest.raises(ConfigurationError, match="Unknown init method"):
        create_kmeans(four_points, k=2, init="farthest")


def test_options_are_frozen():
    options = KMeansOptions(k=3)
    with pytest.raises(dataclasses.FrozenInstanceError):
        options.k = 4


def test_options_defaults():
    options = KMeansOptions()
    assert options.k == 8
    assert options.max_iterations == 300
    assert options.distance is None
    assert options.initial_centroids is None
    assert options.sampler is None


def test_options_overrides(four_points):
    base = KMeansOptions(k=2, max_iterations=10)
    assert base.with_overrides(k=3).k == 3
    assert base.k == 2

    model = KMeans(four_points, {"k": 2}, k=1)
    assert model.k == 1

    model = KMeans(four_points, base, max_iterations=4)
    assert model.max_iterations == 4
    assert model.k == 2

    with pytest.raises(ConfigurationError, match="Unknown"):
        base.with_overrides(clusters=3)
