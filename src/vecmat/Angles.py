from dataclasses import dataclass

from vecmat.Constants import DEGREES_PER_TURN, GRADIANS_PER_TURN, TAU

# Angles are plain floats; the unit is whatever the called conversion says.
Rad = float
Deg = float
Turn = float
Grad = float


def deg_to_rad(deg: Deg) -> Rad:
    return (deg / DEGREES_PER_TURN) * TAU


def turn_to_rad(turn: Turn) -> Rad:
    return turn * TAU


def grad_to_rad(grad: Grad) -> Rad:
    return (grad / GRADIANS_PER_TURN) * TAU


def rad_to_deg(rad: Rad) -> Deg:
    return (rad * DEGREES_PER_TURN) / TAU


def rad_to_turn(rad: Rad) -> Turn:
    return rad / TAU


def rad_to_grad(rad: Rad) -> Grad:
    return (rad * GRADIANS_PER_TURN) / TAU


@dataclass(frozen=True)
class Angles:
    """Short names for the conversions: `deg`, `turn`, `grad` go to radians, `to*` come back."""
    deg = staticmethod(deg_to_rad)
    turn = staticmethod(turn_to_rad)
    grad = staticmethod(grad_to_rad)
    todeg = staticmethod(rad_to_deg)
    toturn = staticmethod(rad_to_turn)
    tograd = staticmethod(rad_to_grad)
