import math
from dataclasses import dataclass
from typing import Any, ClassVar, Optional

from vecmat.Angles import Rad
from vecmat.Mat import Mat, mat
from vecmat.Shapes import ImplicitVec
from vecmat.Vec import vec


@dataclass(frozen=True)
class Mats:
    """Builders for the primitive affine transforms.

    Builders taking an `origin` apply the pure transform as if `origin` were
    the coordinate origin: T(origin) @ F @ T(origin)^-1.
    """
    id: ClassVar[Mat] = Mat(1.0, 0.0, 0.0, 0.0, 1.0, 0.0)
    zero: ClassVar[Mat] = Mat(0.0, 0.0, 0.0, 0.0, 0.0, 0.0)

    @staticmethod
    def of(*args: Any) -> Mat:
        return mat(*args)

    @staticmethod
    def around(pure: Mat, origin: ImplicitVec) -> Mat:
        t = Mats.translate(origin)
        return t.compose(pure).anticompose(t)

    @staticmethod
    def translate(v: ImplicitVec) -> Mat:
        vu = vec(v)
        return Mat(1.0, 0.0, vu.x, 0.0, 1.0, vu.y)

    @staticmethod
    def rotate(theta: Rad, origin: Optional[ImplicitVec] = None) -> Mat:
        cos_t, sin_t = math.cos(theta), math.sin(theta)
        pure = Mat(cos_t, -sin_t, 0.0, sin_t, cos_t, 0.0)
        if origin is None:
            return pure
        return Mats.around(pure, origin)

    @staticmethod
    def scale(v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> Mat:
        vu = vec(v)
        pure = Mat(vu.x, 0.0, 0.0, 0.0, vu.y, 0.0)
        if origin is None:
            return pure
        return Mats.around(pure, origin)

    @staticmethod
    def shear(v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> Mat:
        """Shear by `v` relative to `origin`.

        Always conjugates around `origin`, so leaving it out raises
        UnrecognizedShapeError.
        """
        vu = vec(v)
        pure = Mat(0.0, vu.y, 0.0, vu.x, 0.0, 0.0)
        return Mats.around(pure, origin)

    @staticmethod
    def skew(v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> Mat:
        """Shear by (tan(v.x), tan(v.y))."""
        vu = vec(v)
        return Mats.shear(vec(math.tan(vu.x), math.tan(vu.y)), origin)

    @staticmethod
    def reflect(v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> Mat:
        """Reflection across the line with direction `v` through `origin`."""
        angle = vec(v).angle()
        cos_2a, sin_2a = math.cos(2 * angle), math.sin(2 * angle)
        pure = Mat(cos_2a, sin_2a, 0.0, sin_2a, -cos_2a, 0.0)
        if origin is None:
            return pure
        return Mats.around(pure, origin)

    @staticmethod
    def dilate(center: ImplicitVec, ratio: float) -> Mat:
        """Uniform scaling by `ratio` away from `center` (homothety)."""
        return Mats.scale(vec(ratio), center)
