import pytest

from rastersvg.vectors import Vector2D, Vector3D, Vector4D


def test_str_2d():
    assert str(Vector2D(1, 2)) == "(1,2)"


def test_str_3d():
    assert str(Vector3D(1, 2, 3)) == "(1,2,3)"


def test_str_4d():
    assert str(Vector4D(1, 2, 3, 4)) == "(1,2,3,4)"


def test_str_fractional():
    assert str(Vector2D(0.5, -1.25)) == "(0.5,-1.25)"


def test_to_3d():
    assert Vector4D(1, 2, 3, 4).to_3d() == Vector3D(1, 2, 3)


@pytest.mark.parametrize("xyz", [(1.0, 2.0, 3.0), (-4.0, 0.5, 7.0)])
def test_project_with_unit_w_is_identity(xyz):
    assert Vector4D(*xyz, 1.0).project_to_3d() == Vector3D(*xyz)


def test_project_scales_by_w():
    v = Vector4D(1.0, 2.0, 3.0, 1.0)
    assert (v * 2.0).project_to_3d() == v.to_3d()


def test_arithmetic_round_trip():
    a = Vector2D(1.5, -2.0)
    b = Vector2D(0.25, 4.0)
    assert (a + b) - b == a
    assert -(-a) == a


def test_indexing():
    v = Vector3D(1, 2, 3)
    assert list(v) == [v.x, v.y, v.z]
    assert v[1] == v.y
    assert len(v) == 3


def test_mutation():
    v = Vector2D(1, 1)
    v.x -= 1
    assert v == Vector2D(0, 1)