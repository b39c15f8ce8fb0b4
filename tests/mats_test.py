import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from vecmat.Errors import UnrecognizedShapeError
from vecmat.Mat import mat
from vecmat.Mats import Mats
from vecmat.Vec import Vec, vec


@pytest.fixture
def close():
    return lambda v, x, y: v.arr == pytest.approx((x, y), abs=1e-9)


def test_id_and_zero():
    assert Mats.id.rows == ((1.0, 0.0, 0.0), (0.0, 1.0, 0.0))
    assert Mats.zero.linear == (0.0,) * 6
    assert Mats.zero.apply(5, 6) == Vec(0.0, 0.0)


def test_translate():
    t = Mats.translate((3, 4))
    assert t == mat(1, 0, 3, 0, 1, 4)
    assert t.apply(1, 1) == Vec(4.0, 5.0)
    assert Mats.translate(2) == mat(1, 0, 2, 0, 1, 2)


def test_rotate_quarter_turn(close):
    assert close(Mats.rotate(math.pi / 2).apply(vec(1, 0)), 0.0, 1.0)
    assert close(Mats.rotate(math.pi / 2).apply(vec(0, 1)), -1.0, 0.0)


def test_rotate_around_origin(close):
    assert close(Mats.rotate(math.pi, (1, 1)).apply(2, 1), 0.0, 1.0)


@pytest.mark.parametrize("theta", [0.0, 0.5, math.pi / 3, math.pi, -2.0, 10.0])
@pytest.mark.parametrize("origin", [(0, 0), (1, 2), (-50, 7.5), {"x": 3, "y": -3}])
def test_anchored_rotation_fixes_its_origin(close, theta, origin):
    o = vec(origin)
    assert close(Mats.rotate(theta, origin).apply(o), o.x, o.y)


def test_scale(close):
    assert Mats.scale((2, 3)).apply(1, 1) == Vec(2.0, 3.0)
    assert Mats.scale(2) == mat(2, 0, 0, 0, 2, 0)
    assert close(Mats.scale((2, 2), (1, 1)).apply(2, 2), 3.0, 3.0)
    assert close(Mats.scale((5, -1), (4, 4)).apply(4, 4), 4.0, 4.0)


def test_shear(close):
    assert close(Mats.shear((1, 2), (0, 0)).apply(1, 1), 2.0, 1.0)
    assert close(Mats.shear((1, 2), (1, 1)).apply(1, 1), 1.0, 1.0)


def test_shear_needs_an_origin():
    with pytest.raises(UnrecognizedShapeError):
        Mats.shear((1, 2))
    with pytest.raises(UnrecognizedShapeError):
        Mats.skew((0.1, 0.2))


def test_skew_uses_tangents(close):
    assert close(Mats.skew((0, math.pi / 4), (0, 0)).apply(0, 1), 1.0, 0.0)
    skewed = Mats.skew((0.3, 0.2), (0, 0))
    sheared = Mats.shear((math.tan(0.3), math.tan(0.2)), (0, 0))
    assert skewed == sheared


def test_reflect(close):
    assert close(Mats.reflect((1, 0)).apply(1, 1), 1.0, -1.0)
    assert close(Mats.reflect((0, 1)).apply(1, 1), -1.0, 1.0)
    assert close(Mats.reflect((1, 1)).apply(2, 0), 0.0, 2.0)


def test_reflect_around_origin(close):
    # Mirror in the horizontal line y = 1
    assert close(Mats.reflect((1, 0), (0, 1)).apply(0, 0), 0.0, 2.0)
    assert close(Mats.reflect((1, 0), (0, 1)).apply(5, 1), 5.0, 1.0)


def test_reflect_matches_vector_reflection(close):
    axis = vec(2, 1)
    p = vec(-3, 4)
    r = p.reflect_axis(axis)
    assert close(Mats.reflect(axis).apply(p), r.x, r.y)


def test_reflect_twice_is_identity():
    m = Mats.reflect((3, 1), (2, 2))
    assert m.compose(m).linear == pytest.approx(Mats.id.linear, abs=1e-12)


def test_dilate(close):
    d = Mats.dilate((1, 1), 3)
    assert close(d.apply(2, 1), 4.0, 1.0)
    assert close(d.apply(1, 1), 1.0, 1.0)
    assert d.linear == pytest.approx(Mats.scale(3, (1, 1)).linear)


def test_builders_return_fresh_values():
    assert Mats.translate((1, 1)) is not Mats.translate((1, 1))
    assert mat(Mats.id) is not Mats.id
