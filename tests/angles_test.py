import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from vecmat.Angles import (
    Angles,
    deg_to_rad,
    grad_to_rad,
    rad_to_deg,
    rad_to_grad,
    rad_to_turn,
    turn_to_rad,
)


def test_to_radians():
    assert deg_to_rad(180) == pytest.approx(math.pi)
    assert deg_to_rad(-90) == pytest.approx(-math.pi / 2)
    assert turn_to_rad(0.5) == math.pi
    assert turn_to_rad(1) == math.tau
    assert grad_to_rad(200) == pytest.approx(math.pi)
    assert grad_to_rad(100) == pytest.approx(deg_to_rad(90))


def test_from_radians():
    assert rad_to_deg(math.pi) == pytest.approx(180)
    assert rad_to_turn(math.pi) == 0.5
    assert rad_to_grad(math.pi) == pytest.approx(200)


def test_gradians_are_400_per_turn():
    assert rad_to_grad(deg_to_rad(360)) == pytest.approx(400)
    assert rad_to_grad(deg_to_rad(1)) == pytest.approx(400 / 360)


@pytest.mark.parametrize("value", [0.0, 1.0, -37.5, 720.0])
def test_round_trips(value):
    assert rad_to_deg(deg_to_rad(value)) == pytest.approx(value)
    assert rad_to_turn(turn_to_rad(value)) == pytest.approx(value)
    assert rad_to_grad(grad_to_rad(value)) == pytest.approx(value)


def test_short_names():
    assert Angles.deg(90) == deg_to_rad(90)
    assert Angles.turn(0.25) == turn_to_rad(0.25)
    assert Angles.grad(50) == grad_to_rad(50)
    assert Angles.todeg(1.0) == rad_to_deg(1.0)
    assert Angles.toturn(1.0) == rad_to_turn(1.0)
    assert Angles.tograd(1.0) == rad_to_grad(1.0)
