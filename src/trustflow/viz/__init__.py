"""
Visualization utilities.

- DOT frames for Graphviz (one file per query time)
- Rank history line plots
- Matplotlib snapshot of the graph at one query time
"""

from trustflow.viz.graph import (
    circular_layout,
    rank_fill_color,
    format_number,
    render_dot,
    write_dot,
    frame_filename,
)

from trustflow.viz.history import (
    plot_rank_history,
    plot_snapshot,
    save_figure,
)

__all__ = [
    "circular_layout",
    "rank_fill_color",
    "format_number",
    "render_dot",
    "write_dot",
    "frame_filename",
    "plot_rank_history",
    "plot_snapshot",
    "save_figure",
]
