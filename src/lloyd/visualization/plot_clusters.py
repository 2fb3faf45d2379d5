"""
Cluster visualization utilities.

Scatter plots of 2D clusterings with their centroids.
"""

from typing import Any, List, Optional
import torch
from torch import Tensor
import matplotlib.pyplot as plt
import numpy as np

from ..utils.validation import to_points


def plot_clusters_2d(X: Any,
                     labels: Optional[Tensor] = None,
                     centers: Optional[Tensor] = None,
                     ax: Optional[plt.Axes] = None,
                     colors: Optional[List[str]] = None,
                     alpha: float = 0.7,
                     center_marker: str = 'X',
                     center_size: int = 200,
                     point_size: int = 50,
                     show_legend: bool = True,
                     title: Optional[str] = None) -> plt.Axes:
    """Plot 2D clustering results.

    Args:
        X: (n, 2) data points, or a KMeans engine that has iterated at least once
        labels: (n,) cluster labels (taken from the engine when X is one)
        centers: Optional (k, 2) cluster centers
        ax: Matplotlib axes (created if None)
        colors: List of colors for clusters
        alpha: Point transparency
        center_marker: Marker for centers
        center_size: Size of center markers
        point_size: Size of data points
        show_legend: Whether to show legend
        title: Plot title

    Returns:
        Matplotlib axes
    """
    if hasattr(X, 'labels_') and hasattr(X, 'points'):
        model = X
        X = model.points
        labels = model.labels_ if labels is None else labels
        centers = model.centroids if centers is None else centers

    points = to_points(X)
    if points.shape[1] != 2:
        raise ValueError(f"plot_clusters_2d expects 2D vectors, got dimension {points.shape[1]}")
    if labels is None:
        raise ValueError("Cluster labels are required")

    if ax is None:
        fig, ax = plt.subplots(figsize=(8, 6))

    # Convert to numpy for matplotlib
    X_np = points.cpu().numpy()
    labels_np = torch.as_tensor(labels).cpu().numpy()

    unique_labels = np.unique(labels_np)
    n_clusters = len(unique_labels)

    if colors is None:
        cmap = plt.get_cmap('tab10' if n_clusters <= 10 else 'tab20')
        colors = [cmap(i % cmap.N) for i in range(n_clusters)]

    for i, label in enumerate(unique_labels):
        mask = labels_np == label
        ax.scatter(X_np[mask, 0], X_np[mask, 1],
                   c=[colors[i % len(colors)]],
                   s=point_size,
                   alpha=alpha,
                   edgecolors='black',
                   linewidth=0.5,
                   label=f'Cluster {label}')

    if centers is not None:
        centers_np = to_points(centers).cpu().numpy()
        ax.scatter(centers_np[:, 0], centers_np[:, 1],
                   c='black',
                   marker=center_marker,
                   s=center_size,
                   edgecolors='white',
                   linewidth=2,
                   label='Centroids')

    if show_legend:
        ax.legend()
    if title:
        ax.set_title(title)

    return ax
