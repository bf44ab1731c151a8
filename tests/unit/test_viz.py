"""Unit tests for visualization."""

import math

import matplotlib.pyplot as plt
import numpy as np
import pytest

from trustflow.experiments.timeline import TrustFlowTimeline, rank_history
from trustflow.viz.graph import (
    circular_layout,
    format_number,
    frame_filename,
    rank_fill_color,
    render_dot,
    write_dot,
)
from trustflow.viz.history import plot_rank_history, plot_snapshot, save_figure


class TestCircularLayout:
    """Tests for node placement."""

    def test_on_unit_circle(self):
        pos = circular_layout(6)
        assert pos.shape == (6, 2)
        assert np.allclose(np.hypot(pos[:, 0], pos[:, 1]), 1.0)

    def test_first_node_on_x_axis(self):
        pos = circular_layout(4)
        assert np.allclose(pos[0], [1.0, 0.0])
        assert np.allclose(pos[1], [0.0, 1.0])

    def test_radius(self):
        pos = circular_layout(3, radius=2.5)
        assert np.allclose(np.hypot(pos[:, 0], pos[:, 1]), 2.5)


class TestRankFillColor:
    """Tests for the rank colour encoding."""

    @pytest.mark.parametrize("rank, color", [
        (0.0, "#FFFFFF"),
        (1.0, "#0000FF"),
        (0.5, "#7F7FFF"),
        (2.0, "#0000FF"),
        (-1.0, "#FFFFFF"),
    ])
    def test_colors(self, rank, color):
        assert rank_fill_color(rank) == color


class TestRenderDot:
    """Tests for DOT frame output."""

    def _frame(self, scenario, time):
        timeline = TrustFlowTimeline(scenario)
        snap = timeline.snapshot(time)
        return render_dot(
            snap.ranks,
            scenario.graph,
            snap.weights,
            scenario.experts,
            circular_layout(scenario.num_nodes),
            frame=time + 1,
            total_frames=timeline.n_frames,
        )

    def test_structure(self, example_scenario):
        dot = self._frame(example_scenario, 0)
        lines = dot.splitlines()
        assert lines[0] == "digraph G {"
        assert lines[-1] == "}"
        assert "layout=neato" in dot
        assert "Frame: 1/21" in dot
        assert "Algorithm: Custom PageRank variant" in dot
        assert "Edge decay: Exponential" in dot

    def test_nodes(self, example_scenario):
        dot = self._frame(example_scenario, 0)
        assert '0 [label="0 (0.50)"' in dot
        assert '1 [label="1 (0.10)"' in dot
        assert 'pos="1.00,0.00!"' in dot
        assert dot.count("pin=true") == 6

    def test_expert_styling(self, example_scenario):
        lines = self._frame(example_scenario, 0).splitlines()
        expert = next(l for l in lines if l.startswith("  0 ["))
        other = next(l for l in lines if l.startswith("  1 ["))
        assert 'color="darkgreen"' in expert and "penwidth=8" in expert
        assert "darkgreen" not in other

    def test_future_edges_invisible(self, example_scenario):
        dot = self._frame(example_scenario, 0)
        assert dot.count("[style=invis]") == 6

    def test_edge_width_follows_weight(self, example_scenario):
        dot = self._frame(example_scenario, 2)
        assert "  1 -> 2 [penwidth=8];" in dot
        line = next(l for l in dot.splitlines() if l.startswith("  0 -> 1 "))
        width = float(line.split("penwidth=")[1].rstrip("];"))
        assert math.isclose(width, 8.0 * math.exp(-0.1), rel_tol=1e-12)
        assert dot.count("[style=invis]") == 4

    @pytest.mark.parametrize("value, text", [
        (8.0, "8"),
        (np.float64(2.5), "2.5"),
        (0.1, "0.1"),
        (1e-7, "0.0000001"),
        (1 / 3, "0.3333333333333333"),
    ])
    def test_format_number(self, value, text):
        assert format_number(value) == text

    def test_write_creates_folder(self, example_scenario, tmp_path):
        timeline = TrustFlowTimeline(example_scenario)
        snap = timeline.snapshot(4)
        path = tmp_path / "out" / example_scenario.name / frame_filename(snap.time)
        written = write_dot(
            path,
            snap.ranks,
            example_scenario.graph,
            snap.weights,
            example_scenario.experts,
            circular_layout(6),
            frame=5,
            total_frames=21,
        )
        assert written == path
        assert path.read_text().startswith("digraph G {")

    def test_frame_filename(self):
        assert frame_filename(7) == "frame_007.dot"
        assert frame_filename(120) == "frame_120.dot"


class TestPlots:
    """Smoke tests for matplotlib views."""

    def test_rank_history(self, example_scenario, tmp_path):
        history = rank_history(TrustFlowTimeline(example_scenario).run())
        fig, ax = plot_rank_history(history, experts=[0])
        assert len(ax.get_lines()) == 6
        save_figure(fig, tmp_path / "history.png")
        assert (tmp_path / "history.png").exists()
        plt.close(fig)

    def test_snapshot(self, example_scenario):
        snap = TrustFlowTimeline(example_scenario).snapshot(10)
        fig, ax = plot_snapshot(snap, example_scenario.graph, circular_layout(6), experts=[0])
        assert ax.get_title() == "Trust flow at t=10"
        plt.close(fig)
