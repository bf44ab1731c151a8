"""
Matplotlib views of a trust flow timeline.

- Rank history: one line per node across query times
- Snapshot: the graph at one query time, nodes shaded by rank and edges
  drawn with width proportional to their current weight
"""

from __future__ import annotations
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np
import matplotlib.pyplot as plt
from matplotlib.colors import LinearSegmentedColormap
from matplotlib.figure import Figure
from matplotlib.axes import Axes

if TYPE_CHECKING:
    from trustflow.core.graph import Graph
    from trustflow.experiments.timeline import Snapshot


# White (no rank) → blue (all the rank), same encoding as the DOT frames
CMAP_RANK = LinearSegmentedColormap.from_list("rank", [(1.0, 1.0, 1.0), (0.0, 0.0, 1.0)])
EXPERT_COLOR = "darkgreen"


def plot_rank_history(
    history: np.ndarray,
    experts: Sequence[int] = (),
    times: Sequence[float] | None = None,
    title: str = "Rank over time",
    ax: Axes | None = None,
    figsize: tuple[float, float] = (9, 5),
) -> tuple[Figure, Axes]:
    """
    Plot every node's rank across frames.

    Args:
        history: Array of shape [n_frames, num_nodes]
        experts: Expert node ids, drawn with thicker lines
        times: Query time per frame (0..n_frames-1 if None)
        title: Plot title
        ax: Existing axes (creates new if None)

    Returns:
        (fig, ax) tuple
    """
    history = np.asarray(history)
    if times is None:
        times = np.arange(history.shape[0])

    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    expert_set = set(experts)
    for node in range(history.shape[1]):
        is_expert = node in expert_set
        ax.plot(
            times,
            history[:, node],
            label=f"{node} (expert)" if is_expert else str(node),
            linewidth=3.0 if is_expert else 1.5,
            marker="o",
            markersize=3,
        )

    ax.set_xlabel("Query time")
    ax.set_ylabel("Rank")
    ax.set_ylim(bottom=0)
    ax.set_title(title)
    ax.grid(True, alpha=0.3)
    ax.legend(title="Node", fontsize="small")

    return fig, ax


def plot_snapshot(
    snapshot: "Snapshot",
    graph: "Graph",
    positions: np.ndarray,
    experts: Sequence[int] = (),
    ax: Axes | None = None,
    figsize: tuple[float, float] = (7, 7),
    edge_width_scale: float = 8.0,
) -> tuple[Figure, Axes]:
    """
    Draw the graph at one query time.

    Edges with zero weight (not created yet) are skipped.
    """
    if ax is None:
        fig, ax = plt.subplots(figsize=figsize)
    else:
        fig = ax.figure

    for edge, w in zip(graph.edges, snapshot.weights):
        if w == 0.0:
            continue
        (x0, y0), (x1, y1) = positions[edge.source], positions[edge.target]
        ax.annotate(
            "",
            xy=(x1, y1),
            xytext=(x0, y0),
            arrowprops=dict(
                arrowstyle="-|>",
                linewidth=edge_width_scale * w,
                color="gray",
                shrinkA=18,
                shrinkB=18,
            ),
        )

    expert_set = set(experts)
    edge_colors = [EXPERT_COLOR if i in expert_set else "black" for i in range(graph.num_nodes)]
    line_widths = [4.0 if i in expert_set else 1.0 for i in range(graph.num_nodes)]
    sc = ax.scatter(
        positions[:, 0],
        positions[:, 1],
        c=snapshot.ranks,
        cmap=CMAP_RANK,
        vmin=0,
        vmax=1,
        s=900,
        edgecolors=edge_colors,
        linewidths=line_widths,
        zorder=3,
    )
    for i, (x, y) in enumerate(positions):
        ax.text(x, y, f"{i}\n{snapshot.ranks[i]:.2f}", ha="center", va="center", fontsize=9, zorder=4)

    plt.colorbar(sc, ax=ax, fraction=0.046, pad=0.04, label="Rank")
    ax.set_title(f"Trust flow at t={snapshot.time}")
    ax.set_aspect("equal")
    ax.margins(0.2)
    ax.set_axis_off()

    return fig, ax


def save_figure(fig: Figure, path: str | Path, dpi: int = 150, **kwargs) -> None:
    """Save figure to file."""
    fig.savefig(path, dpi=dpi, bbox_inches="tight", **kwargs)
