"""
Demo of Lloyd's k-means clustering.

This example shows how to:
1. Generate synthetic blobs
2. Cluster them step by step and in one shot
3. Visualize the result
"""

import torch
import matplotlib.pyplot as plt

from lloyd import KMeans, KMeansPlusPlusInit, k_means, plot_clusters_2d


def generate_blobs(n_points_per_cluster=100, centers=((0, 0), (6, 0), (3, 5)), scale=0.8):
    """Gaussian blobs around the given centers."""
    torch.manual_seed(42)

    blobs = []
    for center in centers:
        noise = scale * torch.randn(n_points_per_cluster, 2, dtype=torch.float64)
        blobs.append(torch.tensor(center, dtype=torch.float64) + noise)
    return torch.cat(blobs)


def main():
    X = generate_blobs()

    # Step by step, watching the centroids move
    model = KMeans(X, k=3, initial_centroids=KMeansPlusPlusInit(random_state=0), verbose=1)
    while not model.converged and model.iterations < model.max_iterations:
        model.iterate()
        print(f"iteration {model.iterations}: centroids = {model.centroids.tolist()}")

    print(f"Converged: {model.converged} after {model.iterations} iterations, "
          f"inertia = {model.inertia_:.3f}")

    # The same clustering in one call
    clusters = k_means({'k': 3, 'random_state': 0}, X)
    print(f"Cluster sizes: {[len(cluster) for cluster in clusters]}")

    plot_clusters_2d(model, title="K-means on three blobs")
    plt.show()


if __name__ == "__main__":
    main()
