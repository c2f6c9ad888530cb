"""Tests for the immutable camera state."""

import dataclasses

import numpy as np
import pytest

from vertex_renderer import CameraState, DegenerateBasis, InvalidParameter, camera_state_from_dict
from vertex_renderer.camera import camera_state_to_dict


def test_default_camera_looks_down_negative_z() -> None:
    camera = CameraState()
    np.testing.assert_allclose(camera.forward, [0, 0, -1], atol=1e-12)
    np.testing.assert_allclose(camera.right, [1, 0, 0], atol=1e-12)
    np.testing.assert_allclose(camera.up, [0, 1, 0], atol=1e-12)
    np.testing.assert_allclose(camera.view_matrix(), np.eye(4), atol=1e-12)


def test_zero_yaw_looks_down_positive_x() -> None:
    camera = CameraState(yaw=0.0)
    np.testing.assert_allclose(camera.forward, [1, 0, 0], atol=1e-12)
    np.testing.assert_allclose(camera.right, [0, 0, 1], atol=1e-12)


def test_updates_return_new_states() -> None:
    camera = CameraState()
    moved = camera.moved([1, 2, 3])
    assert moved.position == (1.0, 2.0, 3.0)
    assert camera.position == (0.0, 0.0, 0.0)
    with pytest.raises(dataclasses.FrozenInstanceError):
        camera.yaw = 10.0


def test_walked_moves_along_camera_axes() -> None:
    camera = CameraState().walked(forward=2.0, right=1.0, up=0.5)
    np.testing.assert_allclose(camera.position, [1.0, 0.5, -2.0], atol=1e-12)


def test_turned_clamps_pitch() -> None:
    camera = CameraState().turned(d_yaw=30.0, d_pitch=120.0)
    assert camera.yaw == pytest.approx(-60.0)
    assert camera.pitch == 89.0
    assert CameraState().turned(d_pitch=-200.0).pitch == -89.0


def test_states_are_hashable_by_value() -> None:
    a = CameraState(position=[1, 2, 3], yaw=-45)
    b = CameraState(position=(1.0, 2.0, 3.0), yaw=-45.0)
    assert a == b
    assert hash(a) == hash(b)
    assert a != a.moved([0, 0, 1])


def test_straight_up_has_no_right_vector() -> None:
    with pytest.raises(DegenerateBasis):
        CameraState(pitch=90.0).view_matrix()


def test_camera_state_from_dict() -> None:
    camera = camera_state_from_dict({"position": [0, 1, 4], "pitch": -10})
    assert camera.position == (0.0, 1.0, 4.0)
    assert camera.yaw == -90.0
    assert camera.pitch == -10.0
    assert camera_state_from_dict(camera_state_to_dict(camera)) == camera


def test_camera_state_from_dict_rejects_bad_position() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        camera_state_from_dict({"position": [0, 1]})
    assert excinfo.value.parameter == "camera.position"


def test_axis_aligned_camera_has_exact_basis() -> None:
    camera = CameraState()
    np.testing.assert_array_equal(camera.forward, [0, 0, -1])
    np.testing.assert_array_equal(camera.right, [1, 0, 0])
    np.testing.assert_array_equal(camera.view_matrix(), np.eye(4))
    np.testing.assert_array_equal(CameraState(yaw=0.0).forward, [1, 0, 0])


def test_camera_state_from_dict_rejects_non_numeric_angle() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        camera_state_from_dict({"yaw": "left"})
    assert excinfo.value.parameter == "camera.yaw"
