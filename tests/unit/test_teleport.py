"""Unit tests for the teleportation distribution."""

import numpy as np
import pytest

from trustflow.core.errors import InvalidInput
from trustflow.core.teleport import build_teleport_vector


class TestTeleportShares:
    """Tests for the shares assigned to each node."""

    def test_single_expert(self):
        t = build_teleport_vector(6, [0], 0.8)
        assert t.shape == (6,)
        assert np.isclose(t[0], 0.2 / 6 + 0.8)
        assert np.allclose(t[1:], 0.2 / 6)

    @pytest.mark.parametrize("n, experts, fraction", [
        (6, [0], 0.8),
        (10, [1, 4, 7], 0.3),
        (3, [0, 1, 2], 1.0),
        (7, [], 0.0),
        (1, [0], 0.5),
    ])
    def test_sums_to_one(self, n, experts, fraction):
        t = build_teleport_vector(n, experts, fraction)
        assert abs(t.sum() - 1.0) <= 1e-9
        assert np.all(t >= 0)

    def test_experts_exceed_non_experts(self):
        t = build_teleport_vector(10, [2, 5], 0.1)
        experts, others = t[[2, 5]], np.delete(t, [2, 5])
        assert experts.min() > others.max()

    def test_experts_split_equally(self):
        t = build_teleport_vector(5, [1, 3], 0.6)
        assert t[1] == t[3]

    def test_duplicate_experts_ignored(self):
        once = build_teleport_vector(5, [1, 3], 0.6)
        twice = build_teleport_vector(5, [3, 1, 1, 3, 3], 0.6)
        assert np.array_equal(once, twice)

    def test_zero_fraction_is_uniform(self):
        t = build_teleport_vector(4, [2], 0.0)
        assert np.allclose(t, 0.25)

    def test_no_experts_zero_fraction(self):
        t = build_teleport_vector(4, [], 0.0)
        assert np.allclose(t, 0.25)

    def test_full_fraction_leaves_no_floor(self):
        t = build_teleport_vector(4, [0], 1.0)
        assert np.array_equal(t, [1.0, 0.0, 0.0, 0.0])


class TestTeleportValidation:
    """Tests for rejected arguments."""

    def test_empty_experts_with_positive_fraction(self):
        with pytest.raises(InvalidInput) as exc:
            build_teleport_vector(6, [], 0.8)
        assert exc.value.field == "expert_nodes"

    @pytest.mark.parametrize("num_nodes", [0, -1])
    def test_non_positive_node_count(self, num_nodes):
        with pytest.raises(InvalidInput):
            build_teleport_vector(num_nodes, [0], 0.5)

    @pytest.mark.parametrize("expert", [-1, 6])
    def test_expert_out_of_range(self, expert):
        with pytest.raises(InvalidInput):
            build_teleport_vector(6, [expert], 0.5)

    @pytest.mark.parametrize("expert", [1.7, 1.0, True])
    def test_non_integer_expert(self, expert):
        with pytest.raises(InvalidInput) as exc:
            build_teleport_vector(3, [expert], 0.5)
        assert exc.value.field == "expert_nodes"

    @pytest.mark.parametrize("num_nodes", [3.0, 2.5])
    def test_non_integer_node_count(self, num_nodes):
        with pytest.raises(InvalidInput) as exc:
            build_teleport_vector(num_nodes, [0], 0.5)
        assert exc.value.field == "num_nodes"

    def test_numpy_integer_experts_accepted(self):
        t = build_teleport_vector(np.int64(4), np.array([1, 1]), 0.4)
        assert np.isclose(t[1], 0.6 / 4 + 0.4)

    @pytest.mark.parametrize("fraction", [-0.1, 1.5])
    def test_fraction_out_of_range(self, fraction):
        with pytest.raises(InvalidInput) as exc:
            build_teleport_vector(6, [0], fraction)
        assert exc.value.field == "expert_fraction"
