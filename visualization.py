"""
Visualization: filtered signal with the deadband and detected edges.
"""

import numpy as np
import matplotlib.pyplot as plt


def plot_filtered_signal(
    time_s: np.ndarray,
    filtered: np.ndarray,
    threshold: float,
    positive_edges: list = None,
    negative_edges: list = None,
    title: str = "Acceleration along gravity and detected edges",
    figsize: tuple = (12, 4),
) -> plt.Figure:
    """Plot the filtered signal, the ±threshold deadband and accepted rising edges."""
    fig, ax = plt.subplots(figsize=figsize)
    ax.plot(time_s, filtered, "b-", alpha=0.7, label="Filtered")
    ax.axhline(threshold, color="gray", linestyle="--", alpha=0.6)
    ax.axhline(-threshold, color="gray", linestyle="--", alpha=0.6)
    if positive_edges:
        ax.scatter(time_s[positive_edges], filtered[positive_edges], color="red", s=30, zorder=5,
                   label=f"Positive edges ({len(positive_edges)})")
    if negative_edges:
        ax.scatter(time_s[negative_edges], filtered[negative_edges], color="green", s=30, zorder=5,
                   label=f"Negative edges ({len(negative_edges)})")
    ax.set_xlabel("Time (s)")
    ax.set_ylabel("Acceleration (g)")
    ax.set_title(title)
    ax.legend(loc="upper right")
    ax.grid(True, alpha=0.3)
    plt.tight_layout()
    return fig


def plot_threshold_splits(
    time_s: np.ndarray,
    positive: np.ndarray,
    negative: np.ndarray,
    title: str = "Threshold splits",
    figsize: tuple = (12, 4),
) -> plt.Figure:
    """Positive and negative binary sequences, one panel each."""
    fig, (ax1, ax2) = plt.subplots(2, 1, sharex=True, figsize=figsize)
    ax1.step(time_s, positive, where="post", color="red")
    ax1.set_ylabel("Positive")
    ax1.set_yticks([0, 1])
    ax1.set_title(title)
    ax2.step(time_s, negative, where="post", color="green")
    ax2.set_ylabel("Negative")
    ax2.set_yticks([0, 1])
    ax2.set_xlabel("Time (s)")
    plt.tight_layout()
    return fig
