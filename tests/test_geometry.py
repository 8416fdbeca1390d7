import dataclasses

import pytest

from backrooms.geometry import Color, Vector2, Vector3, Vertex


def test_vector_defaults_are_zero():
    assert tuple(Vector2()) == (0.0, 0.0)
    assert Vector3().as_tuple() == (0.0, 0.0, 0.0)


def test_vector3_as_tuple_keeps_order():
    assert Vector3(1.5, -2.0, 3.25).as_tuple() == (1.5, -2.0, 3.25)


def test_color_defaults_to_opaque_white():
    assert tuple(Color()) == (1.0, 1.0, 1.0, 1.0)


def test_color_alpha_defaults_to_one():
    color = Color(0.2, 0.3, 0.4)
    assert color.a == 1.0
    assert (color.r, color.g, color.b) == (0.2, 0.3, 0.4)


def test_vertex_flatten_order():
    vertex = Vertex(Vector3(1, 2, 3), Vector3(4, 5, 6), Vector2(7, 8))
    assert vertex.flatten() == (1, 2, 3, 4, 5, 6, 7, 8)


def test_default_vertex_flattens_to_eight_zeros():
    flat = Vertex().flatten()
    assert len(flat) == 8
    assert all(value == 0.0 for value in flat)


def test_vectors_are_immutable():
    vector = Vector3(1, 2, 3)
    with pytest.raises((AttributeError, dataclasses.FrozenInstanceError)):
        vector.x = 5  # type: ignore[misc]
    assert vector.as_tuple() == (1, 2, 3)