import dataclasses

import pytest

from zenengine.vectors import Vector2, Vector3
from zenengine.vertex import Vertex


def test_default_vertex_is_all_zero():
    vertex = Vertex()
    assert vertex.position == Vector3(0, 0, 0)
    assert vertex.texture == Vector2(0, 0)
    assert vertex.as_floats() == (0.0,) * 8


def test_as_floats_interleaves_parts_in_order():
    vertex = Vertex(Vector3(1, 2, 3), Vector2(4, 5), Vector3(6, 7, 8))
    assert vertex.as_floats() == (1.0, 2.0, 3.0, 4.0, 5.0, 6.0, 7.0, 8.0)


def test_as_floats_round_trip():
    original = Vertex(Vector3(0.5, -1, 2), Vector2(0.25, 0.75), Vector3(0, 1, 0))
    f = original.as_floats()
    rebuilt = Vertex(Vector3(*f[0:3]), Vector2(*f[3:5]), Vector3(*f[5:8]))
    assert rebuilt == original


def test_partial_construction_keeps_defaults():
    vertex = Vertex(Vector3(1, 1, 1))
    assert vertex.normal == Vector3(0, 0, 0)
    assert vertex.as_floats()[:3] == (1.0, 1.0, 1.0)


def test_vertex_is_immutable():
    vertex = Vertex()
    with pytest.raises(dataclasses.FrozenInstanceError):
        vertex.position = Vector3(1, 1, 1)