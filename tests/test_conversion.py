"""Tests for input conversion helpers."""

import numpy as np
import pytest

from vertex_renderer import InvalidParameter
from vertex_renderer.utils import to_ndc_buffer, to_vector3, to_vertex_array


def test_empty_sequence_is_zero_vertices() -> None:
    assert to_vertex_array([]).shape == (0, 3)
    assert to_vertex_array(np.zeros((0, 3))).shape == (0, 3)


@pytest.mark.parametrize(
    "value",
    [
        np.zeros((4, 0)),
        [[1.0, 2.0], [3.0, 4.0]],
        [[1.0, 2.0, 3.0], [4.0, 5.0]],
        [["a", "b", "c"]],
        5.0,
    ],
)
def test_malformed_vertices_are_rejected(value) -> None:
    with pytest.raises(InvalidParameter):
        to_vertex_array(value)


def test_vertex_array_is_a_copy() -> None:
    source = np.array([[1.0, 2.0, 3.0]])
    result = to_vertex_array(source)
    result[0, 0] = 9.0
    assert source[0, 0] == 1.0


def test_to_vector3_rejects_non_numeric() -> None:
    with pytest.raises(InvalidParameter) as excinfo:
        to_vector3(["x", "y", "z"], "position")
    assert excinfo.value.parameter == "position"


def test_ndc_buffer_is_flat_float32() -> None:
    buffer = to_ndc_buffer(np.array([[0.5, -0.5, 0.25], [1.0, 0.0, -1.0]]))
    assert buffer.dtype == np.float32
    np.testing.assert_array_equal(buffer, [0.5, -0.5, 0.25, 1.0, 0.0, -1.0])
