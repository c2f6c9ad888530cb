"""Tests for the world-to-camera view matrix."""

import numpy as np
import pytest

from vertex_renderer import DegenerateBasis, build_view_matrix, build_view_matrix_from_up


def test_default_basis_at_origin_is_identity() -> None:
    V = build_view_matrix([0, 0, 0], [0, 0, -1], [1, 0, 0])
    np.testing.assert_allclose(V, np.eye(4), atol=1e-12)


def test_camera_position_maps_to_origin() -> None:
    position = np.array([1.0, 2.0, 3.0])
    V = build_view_matrix(position, [0, 0, -1], [1, 0, 0])
    np.testing.assert_allclose(V @ np.append(position, 1.0), [0, 0, 0, 1], atol=1e-12)


def test_point_ahead_lands_on_negative_z() -> None:
    V = build_view_matrix([0, 0, 0], [1, 0, 0], [0, 0, 1])
    np.testing.assert_allclose(V @ np.array([5.0, 0, 0, 1]), [0, 0, -5, 1], atol=1e-12)
    np.testing.assert_allclose(V[1, :3], [0, 1, 0], atol=1e-12)


def test_basis_is_normalized_and_orthogonalized() -> None:
    V = build_view_matrix([0, 0, 0], [0, 0, -3], [2, 0, 0.5])
    R = V[:3, :3]
    np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-12)
    np.testing.assert_allclose(R[2], [0, 0, 1], atol=1e-12)


def test_up_overload_matches_explicit_right() -> None:
    position = [0.5, -1.0, 2.0]
    np.testing.assert_allclose(
        build_view_matrix_from_up(position, [0, 0, -1], [0, 1, 0]),
        build_view_matrix(position, [0, 0, -1], [1, 0, 0]),
        atol=1e-12,
    )


def test_inputs_are_not_modified() -> None:
    forward = np.array([0.0, 0.0, -2.0])
    right = np.array([3.0, 0.0, 0.0])
    build_view_matrix([0, 0, 0], forward, right)
    np.testing.assert_array_equal(forward, [0, 0, -2])
    np.testing.assert_array_equal(right, [3, 0, 0])


@pytest.mark.parametrize(
    "forward, right",
    [
        ([0, 0, 0], [1, 0, 0]),
        ([0, 0, -1], [0, 0, 0]),
        ([0, 0, -1], [0, 0, 2]),
        ([1, 1, 0], [-1, -1, 0]),
    ],
)
def test_degenerate_basis_is_reported(forward, right) -> None:
    with pytest.raises(DegenerateBasis):
        build_view_matrix([0, 0, 0], forward, right)


def test_up_parallel_to_forward_is_reported() -> None:
    with pytest.raises(DegenerateBasis):
        build_view_matrix_from_up([0, 0, 0], [0, 1, 0], [0, 2, 0])
