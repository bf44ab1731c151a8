"""
Graphviz DOT rendering of a single trust flow frame.

Encoding:
- Node fill goes from white (rank 0) to pure blue (rank 1)
- Expert nodes get a thick dark green border
- Edge pen width is proportional to the current weight
- Edges that do not exist yet are kept but invisible, so that neato
  places every frame identically

Positions are pinned, so the output is meant for `neato -n`/`dot -Kneato`.
"""

from __future__ import annotations
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Sequence

import numpy as np

if TYPE_CHECKING:
    from trustflow.core.graph import Graph

logger = logging.getLogger(__name__)


EDGE_WIDTH_SCALE = 8.0
EXPERT_PEN_WIDTH = 8
FONT_SIZE = 20


def circular_layout(num_nodes: int, radius: float = 1.0) -> np.ndarray:
    """
    Place nodes evenly on a circle, node i at angle 2πi/n.

    Returns:
        Array of shape [num_nodes, 2] with (x, y) per node
    """
    angles = 2.0 * np.pi * np.arange(num_nodes) / num_nodes
    return radius * np.column_stack([np.cos(angles), np.sin(angles)])


def rank_fill_color(rank: float) -> str:
    """Hex fill colour for a rank value, clamped to [0, 1]."""
    r = min(max(float(rank), 0.0), 1.0)
    level = int((1.0 - r) * 255.0)
    return f"#{level:02X}{level:02X}FF"


def format_number(value: float) -> str:
    """Shortest round-trip decimal, no exponent, no trailing '.0' (8.0 -> '8')."""
    return np.format_float_positional(float(value), trim="-")


def render_dot(
    ranks: Sequence[float],
    graph: "Graph",
    weights: Sequence[float],
    experts: Sequence[int],
    positions: np.ndarray,
    frame: int,
    total_frames: int,
    algorithm: str = "Custom PageRank variant",
    decay_desc: str = "Exponential",
) -> str:
    """
    Render one frame as DOT source.

    Args:
        ranks: Rank per node
        graph: Graph whose edges are drawn
        weights: Current weight per edge, aligned with graph.edges
        experts: Expert node ids
        positions: [num_nodes, 2] node coordinates
        frame: 1-based frame number for the title
        total_frames: Number of frames in the sequence
        algorithm: Algorithm label for the title
        decay_desc: Decay model label for the title

    Returns:
        DOT source text
    """
    expert_set = set(experts)
    lines = [
        "digraph G {",
        "  nodesep=0.8;",
        f'  graph [layout=neato, overlap=false, splines=true, pad="1.0,1.0", fontsize={FONT_SIZE}];',
        '  labelloc="t";',
        '  labeljust="l";',
        "  labelfontsize=26;",
        f'  label="Trust flow over time\\nAlgorithm: {algorithm}\\n'
        f'Edge decay: {decay_desc}\\nFrame: {frame}/{total_frames}";',
    ]

    for i, rank in enumerate(ranks):
        x, y = positions[i]
        attrs = [
            f'label="{i} ({rank:.2f})"',
            "shape=circle",
            "style=filled",
            f'fillcolor="{rank_fill_color(rank)}"',
        ]
        if i in expert_set:
            attrs += ['color="darkgreen"', f"penwidth={EXPERT_PEN_WIDTH}"]
        attrs += [f"fontsize={FONT_SIZE}", f'pos="{x:.2f},{y:.2f}!"', "pin=true"]
        lines.append(f"  {i} [{', '.join(attrs)}];")

    for edge, w in zip(graph.edges, weights):
        if w == 0.0:
            lines.append(f"  {edge.source} -> {edge.target} [style=invis];")
        else:
            width = format_number(EDGE_WIDTH_SCALE * w)
            lines.append(f"  {edge.source} -> {edge.target} [penwidth={width}];")

    lines.append("}")
    return "\n".join(lines) + "\n"


def write_dot(path: str | Path, *args, **kwargs) -> Path:
    """Render a frame (same arguments as render_dot) and write it to path."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(render_dot(*args, **kwargs))
    logger.info("%s created", path)
    return path


def frame_filename(time: int) -> str:
    return f"frame_{time:03d}.dot"
