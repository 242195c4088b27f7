import pytest

from rastersvg.matrix4x4 import Matrix4x4, outer
from rastersvg.vectors import Vector4D


def _sample():
    return Matrix4x4([[2, 1, 0, 3], [0, 1, 4, 1], [1, 0, 1, 0], [3, 2, 1, 5]])


def _entries(m):
    return [m[i, j] for i in range(4) for j in range(4)]


IDENTITY_ENTRIES = [1.0 if i == j else 0.0 for i in range(4) for j in range(4)]


def test_row_major_constructor():
    m = Matrix4x4(range(16))
    assert m[0, 1] == 1
    assert m[1, 0] == 4
    assert m[3, 3] == 15


def test_column_access():
    m = Matrix4x4(range(16))
    assert m.column(1) == Vector4D(1, 5, 9, 13)
    assert m[2] == m.column(2)


def test_identity_det_and_norm():
    ident = Matrix4x4.identity()
    assert ident.det() == 1.0
    assert ident.norm() == 2.0


def test_diagonal_det():
    m = Matrix4x4([[2, 0, 0, 0], [0, 3, 0, 0], [0, 0, 4, 0], [0, 0, 0, 5]])
    assert m.det() == 120.0


def test_identity_is_neutral():
    m = _sample()
    assert Matrix4x4.identity() * m == m
    assert m * Matrix4x4.identity() == m


def test_inverse_round_trip():
    m = _sample()
    inverse = m.inverse()
    assert _entries(inverse * m) == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)
    assert _entries(m * inverse) == pytest.approx(IDENTITY_ENTRIES, abs=1e-9)


def test_diagonal_inverse_values():
    m = Matrix4x4([[2, 0, 0, 0], [0, 4, 0, 0], [0, 0, 5, 0], [0, 0, 0, 8]])
    inverse = m.inverse()
    assert [inverse[i, i] for i in range(4)] == pytest.approx([0.5, 0.25, 0.2, 0.125])
    assert inverse[0, 1] == pytest.approx(0.0)


@pytest.mark.parametrize("rows", [
    [[0] * 4] * 4,
    [[1, 2, 3, 4], [1, 2, 3, 4], [0, 1, 0, 1], [1, 0, 1, 0]],
])
def test_singular_inverse(rows):
    with pytest.raises(ValueError):
        Matrix4x4(rows).inverse()


def test_singular_det_is_zero():
    assert Matrix4x4([[1, 2, 3, 4], [1, 2, 3, 4], [0, 1, 0, 1], [1, 0, 1, 0]]).det() == 0.0


def test_transpose_twice():
    m = _sample()
    assert m.transpose().transpose() == m
    assert m.transpose()[0, 3] == m[3, 0]


def test_det_of_transpose():
    m = _sample()
    assert abs(m.det() - m.transpose().det()) < 1e-9


def test_negation_and_subtraction():
    m = _sample()
    zero = Matrix4x4()
    assert -m + m == zero
    assert m - m == zero


def test_scalar_ops():
    m = _sample()
    assert (m / 2) * 2 == m
    assert 3 * m == m * 3


def test_matrix_vector_identity():
    v = Vector4D(1.0, -2.0, 3.5, 1.0)
    assert Matrix4x4.identity() * v == v


def test_zero_fill():
    m = _sample()
    m.zero(7.0)
    assert all(m[i, j] == 7.0 for i in range(4) for j in range(4))


def test_setitem():
    m = Matrix4x4()
    m[1, 2] = 9.0
    m[3] = Vector4D(1, 2, 3, 4)
    assert m[1, 2] == 9.0
    assert m.column(3) == Vector4D(1, 2, 3, 4)


def test_outer_entries():
    u = Vector4D(1, 2, 3, 4)
    v = Vector4D(5, 6, 7, 8)
    m = outer(u, v)
    assert all(m[i, j] == u[i] * v[j] for i in range(4) for j in range(4))
    assert outer(v, u) == m.transpose()


def test_str_has_four_rows():
    assert len(str(_sample()).splitlines()) == 4