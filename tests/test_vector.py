from ujump.domain.vector import ZERO, Vector


def test_add_returns_new_vector():
    a = Vector(1.0, 2.0)
    b = Vector(0.5, -1.0)

    c = a + b

    assert c == Vector(1.5, 1.0)
    assert a == Vector(1.0, 2.0)
    assert b == Vector(0.5, -1.0)


def test_scale():
    assert Vector(2.0, -3.0) * 0.5 == Vector(1.0, -1.5)
    assert Vector(2.0, 0.0) * -1.0 == Vector(-2.0, 0.0)


def test_zero_is_identity():
    v = Vector(3.0, 4.0)
    assert v + ZERO == v
