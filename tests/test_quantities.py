import pytest

from matsgame.geometry import Vec2
from matsgame.quantities import ScalarQuantity, VectorQuantity


class Thrust(ScalarQuantity, additive=True, arithmetic=True):
    pass


class Boost(ScalarQuantity, additive=True, adds_to=(Thrust,)):
    pass


class Level(ScalarQuantity, default=100.0):
    pass


class Drift(VectorQuantity, additive=True):
    pass


class Push(VectorQuantity, adds_to=(Drift,)):
    pass


class Factor(ScalarQuantity, scales=(Thrust, Drift)):
    pass


def test_same_type_addition():
    assert Thrust(1.0) + Thrust(2.0) == Thrust(3.0)
    assert Drift(Vec2(1.0, 2.0)) + Drift(Vec2(3.0, 4.0)) == Drift(Vec2(4.0, 6.0))


def test_same_type_augmented_addition():
    a = Thrust(1.0)
    a += Thrust(2.0)
    assert a == Thrust(3.0)
    assert float(a) == 3.0
    d = Drift(Vec2(1.0, 0.0))
    d += Drift(Vec2(0.0, 1.0))
    assert d == Drift(Vec2(1.0, 1.0))


def test_arithmetic_with_plain_numbers_round_trips():
    a = Thrust(1.5)
    assert (a + 2.0) - 2.0 == a
    assert a * 1.0 == a
    assert (a * 2.0).value == a.value + a.value
    assert (Drift(Vec2(1.5, -2.0)) * 2.0).value == Vec2(3.0, -4.0)


def test_plain_number_arithmetic_needs_opt_in():
    with pytest.raises(TypeError):
        Boost(1.0) + 1.0
    with pytest.raises(TypeError):
        Level() * 2.0
    with pytest.raises(TypeError):
        Push(Vec2(1.0, 1.0)) + 1.0


def test_addition_needs_opt_in():
    with pytest.raises(TypeError):
        Level(1.0) + Level(2.0)
    with pytest.raises(TypeError):
        Push(Vec2(1.0, 1.0)) + Push(Vec2(1.0, 1.0))


def test_cross_type_addition_keeps_left_type():
    result = Thrust(0.0) + Boost(1.0)
    assert result == Thrust(1.0)
    assert Drift(Vec2(0.0, 0.0)) + Push(Vec2(1.0, 1.0)) == Drift(Vec2(1.0, 1.0))


def test_cross_type_addition_is_one_way():
    with pytest.raises(TypeError):
        Boost(0.0) + Thrust(1.0)
    with pytest.raises(TypeError):
        Push(Vec2(1.0, 1.0)) + Drift(Vec2(1.0, 1.0))


def test_defaults():
    assert Thrust().value == 0.0
    assert Level() == Level(100.0)
    assert Drift().value == Vec2(0.0, 0.0)


def test_equality_is_per_type():
    assert Thrust(1.0) == Thrust(1.0)
    assert not (Thrust(1.0) == Boost(1.0))
    assert not (Thrust(1.0) == 1.0)
    assert Drift(Vec2(1.0, 1.0)) == Drift(Vec2(1.0, 1.0))
    assert not (Drift(Vec2(1.0, 1.0)) == Push(Vec2(1.0, 1.0)))


def test_ordering_within_type():
    assert Thrust(1.0) < Thrust(2.0)
    assert Thrust(2.0) >= Thrust(2.0)
    with pytest.raises(TypeError):
        Thrust(1.0) < Boost(2.0)
    with pytest.raises(TypeError):
        Thrust(1.0) < Vec2(2.0, 2.0)


def test_quantities_are_unhashable():
    with pytest.raises(TypeError):
        hash(Thrust(1.0))
    with pytest.raises(TypeError):
        hash(Drift(Vec2(1.0, 1.0)))


def test_scaling_scalar():
    assert Thrust(1.5) * Factor(1.0) == Thrust(1.5)
    with pytest.raises(TypeError):
        Factor(2.0) * Thrust(1.0)
    assert Drift(Vec2(1.0, 2.0)) * Factor(1.0) == Drift(Vec2(1.0, 2.0))


def test_vector_same_type_addition():
    assert Drift(Vec2(0.0, 0.0)) + Drift(Vec2(1.0, 1.0)) == Drift(Vec2(1.0, 1.0))


def test_vector_cross_type_addition():
    a = Drift(Vec2(0.0, 0.0))
    a += Push(Vec2(1.0, 1.0))
    assert a == Drift(Vec2(1.0, 1.0))
    with pytest.raises(TypeError):
        Push(Vec2(1.0, 1.0)) + Drift(Vec2(1.0, 1.0))


def test_vector_ops_with_vec2():
    d = Drift(Vec2(1.0, -3.0))
    assert (d + Vec2.ONE) - Vec2.ONE == d
    assert d * Vec2.ONE == d
    assert d * 1.0 == d


def test_vector_scaled_by_factor():
    result = Drift(Vec2(1.0, 1.0)) * Factor(2.0)
    assert result.value == Vec2(2.0, 2.0)


def test_vector_default_and_accessors():
    d = Drift()
    assert d.value == Vec2.ZERO
    e = Drift(Vec2(3.0, 4.0))
    assert (e.x, e.y) == (3.0, 4.0)
    assert tuple(e) == (3.0, 4.0)
    assert e.length() == e.value.length()


def test_vector_requires_vec2():
    assert Drift(Vec2(1.0, 2.0)).value == Vec2(1.0, 2.0)
    with pytest.raises(TypeError):
        Drift((1.0, 2.0))


def test_vector_non_additive_same_type():
    with pytest.raises(TypeError):
        Push(Vec2(1.0, 1.0)) + Push(Vec2(1.0, 1.0))