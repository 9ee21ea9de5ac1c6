import pytest

from fluidsim.color import Color

A = Color(0.25, 0.5, 0.75, 1.0)
B = Color(0.5, 0.125, 0.25, 0.5)


def test_components_and_indexing():
    assert (A[0], A[1], A[2], A[3]) == (0.25, 0.5, 0.75, 1.0)
    assert list(A) == [A.red, A.green, A.blue, A.alpha]
    with pytest.raises(IndexError):
        A[4]


def test_default_is_black_transparent():
    assert Color() == Color(0, 0, 0, 0)


def test_add_sub_round_trip():
    assert (A + B) - B == A
    assert A + B == B + A


def test_negation():
    assert A + (-A) == Color()
    assert -(-A) == A


def test_scalar_multiplication():
    assert 2 * A == A + A
    assert A * 2 == 2 * A
    assert (A * 4) / 4 == A


def test_componentwise_product_and_division():
    p = A * B
    assert p == B * A
    assert p == Color(0.125, 0.0625, 0.1875, 0.5)
    assert (A * B) / B == A


def test_division_by_zero_color_raises():
    with pytest.raises(ZeroDivisionError):
        A / Color(1, 1, 0, 1)


def test_str_format():
    assert str(Color(0, 0, 1, 1)) == "Color(0,0,1,1)"


def test_unsupported_operand_raises():
    c = Color(0.25, 0.5, 0.75, 1.0)
    with pytest.raises(TypeError):
        c + 1
    assert c == Color(0.25, 0.5, 0.75, 1.0)
    assert c + c == Color(0.5, 1.0, 1.5, 2.0)