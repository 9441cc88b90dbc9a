import dataclasses

import pytest

from gridquest.vector import Vector2D


def test_defaults_are_origin():
    v = Vector2D()
    assert (v.x, v.y) == (0, 0)


def test_add_combines_components():
    assert Vector2D(2, 3) + Vector2D(-1, 4) == Vector2D(1, 7)


def test_add_leaves_operands_unchanged():
    a = Vector2D(1, 1)
    b = Vector2D(0, -1)
    result = a + b
    assert a == Vector2D(1, 1)
    assert b == Vector2D(0, -1)
    assert result == Vector2D(1, 0)


def test_origin_is_identity():
    v = Vector2D(5, -7)
    assert v + Vector2D() == v
    assert Vector2D() + v == v


def test_add_rejects_other_types():
    with pytest.raises(TypeError):
        Vector2D(1, 2) + (1, 2)


def test_vector_is_immutable():
    v = Vector2D(1, 2)
    with pytest.raises(dataclasses.FrozenInstanceError):
        v.x = 3
    assert (v.x, v.y) == (1, 2)


def test_vectors_are_hashable_by_value():
    assert {Vector2D(1, 2), Vector2D(1, 2)} == {Vector2D(1, 2)}