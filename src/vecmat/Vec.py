import math
from dataclasses import dataclass
from typing import Any, Dict, Iterator, Optional, Tuple

from vecmat.Angles import Rad
from vecmat.ComplexKernel import ComplexKernel
from vecmat.Errors import UnrecognizedShapeError
from vecmat.LinAlg import LinAlg
from vecmat.Shapes import ImplicitMat, ImplicitVec, VecShape, classify_vec, get_field, is_complex_number, is_number


def _as_float(value: Any, source: Any) -> float:
    if not is_number(value):
        raise UnrecognizedShapeError(source)
    return float(value)


def _field(obj: Any, name: str) -> float:
    # Missing companion fields read as NaN.
    value = get_field(obj, name, math.nan)
    return math.nan if value is None else _as_float(value, obj)


def _unify(a: Any, b: Any = None) -> Tuple[float, float]:
    shape = classify_vec(a, b)
    if shape is VecShape.Canonical:
        return a.x, a.y
    if shape is VecShape.Scalar:
        x = float(a)
        return x, (x if b is None else float(b))
    if shape is VecShape.Tuple:
        return _as_float(a[0], a), _as_float(a[1], a)
    if shape is VecShape.Cartesian:
        return _field(a, "x"), _field(a, "y")
    if shape is VecShape.Complex:
        if is_complex_number(a):
            return float(a.real), float(a.imag)
        return _field(a, "re"), _field(a, "im")
    r = _field(a, "r")
    phi = _field(a, "phi")
    return math.cos(phi) * r, math.sin(phi) * r


def vec(a: ImplicitVec, b: Optional[float] = None) -> "Vec":
    """Normalize any vector-like input into a new Vec.

    Accepts a Vec, one or two numbers (one number is broadcast to both
    coordinates), a two element sequence, a complex number, or an object or
    mapping with `x`/`y`, `re`/`im` or `phi`/`r` fields, tried in that order.

    Raises:
        UnrecognizedShapeError: `a` matches none of these shapes.
    """
    x, y = _unify(a, b)
    return Vec(x, y)


def polar(r: float, phi: Rad) -> "Vec":
    return Vec(math.cos(phi) * r, math.sin(phi) * r)


def _div(a: float, b: float) -> float:
    return float(LinAlg.divide(a, b))


@dataclass(frozen=True, slots=True)
class Vec:
    """A point in the plane, also read as the complex number x + iy."""
    x: float
    y: float

    # Exports

    @property
    def arr(self) -> Tuple[float, float]:
        return (self.x, self.y)

    @property
    def as3(self) -> Tuple[float, float, float]:
        """Homogeneous coordinates (x, y, 1)."""
        return (self.x, self.y, 1.0)

    @property
    def simple(self) -> Dict[str, float]:
        return {"x": self.x, "y": self.y}

    def as_complex(self) -> complex:
        return complex(self.x, self.y)

    @property
    def complex(self) -> Dict[str, float]:
        return {"re": self.x, "im": self.y}

    @property
    def polar(self) -> Dict[str, float]:
        return {"phi": self.angle(), "r": self.len}

    @property
    def re(self) -> float:
        return self.x

    @property
    def im(self) -> float:
        return self.y

    # Queries

    @property
    def len(self) -> float:
        return LinAlg.norm(self.arr)

    @property
    def unit(self) -> "Vec":
        # A zero vector gives (nan, nan).
        return self.mul(_div(1.0, self.len))

    @property
    def neg(self) -> "Vec":
        return Vec(-self.x, -self.y)

    @property
    def is_zero(self) -> bool:
        return LinAlg.is_zero(self.x) and LinAlg.is_zero(self.y)

    @property
    def is_nan(self) -> bool:
        return math.isnan(self.x) or math.isnan(self.y)

    @property
    def is_infinity(self) -> bool:
        return not math.isfinite(self.x) or not math.isfinite(self.y)

    def angle(self, v: Optional[ImplicitVec] = None, y: Optional[float] = None) -> Rad:
        """Angle from the x axis, or with an argument, from `self` to `v`.

        The two argument form is atan2(x*v.y + y*v.x, x*v.x + y*v.y).
        """
        if v is None:
            return math.atan2(self.y, self.x)
        vs = vec(v, y)
        return math.atan2(self.x * vs.y + self.y * vs.x, self.x * vs.x + self.y * vs.y)

    def dot(self, v: ImplicitVec, y: Optional[float] = None) -> float:
        return LinAlg.dot(self.arr, vec(v, y).arr)

    def dist(self, p: ImplicitVec, y: Optional[float] = None) -> float:
        return LinAlg.distance(self.arr, vec(p, y).arr)

    def eq(self, v: ImplicitVec, y: Optional[float] = None) -> bool:
        vs = vec(v, y)
        return LinAlg.equal(self.x, vs.x) and LinAlg.equal(self.y, vs.y)

    def is_collinear(self, v: ImplicitVec, y: Optional[float] = None) -> bool:
        vs = vec(v, y)
        return self.x * vs.y - vs.x * self.y == 0

    def is_orth(self, v: ImplicitVec, y: Optional[float] = None) -> bool:
        return self.dot(v, y) == 0

    # Componentwise arithmetic

    def add(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        vs = vec(v, y)
        return Vec(self.x + vs.x, self.y + vs.y)

    def sub(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        vs = vec(v, y)
        return Vec(self.x - vs.x, self.y - vs.y)

    def mul(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Hadamard product (x * v.x, y * v.y)."""
        return Vec(*LinAlg.dot_multiply(self.arr, vec(v, y).arr).tolist())

    def div(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Hadamard quotient (x / v.x, y / v.y)."""
        return Vec(*LinAlg.divide(self.arr, vec(v, y).arr).tolist())

    def mod(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        return Vec(*LinAlg.mod(self.arr, vec(v, y).arr).tolist())

    def mid(self, p: ImplicitVec, y: Optional[float] = None) -> "Vec":
        vs = vec(p, y)
        return Vec((vs.x + self.x) / 2, (vs.y + self.y) / 2)

    # Geometry

    def proj(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Projection of `self` onto the direction of `v`."""
        vs = vec(v, y)
        factor = _div(vs.dot(self), vs.len ** 2)
        return vs.mul(factor)

    def reflect_axis(self, v: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Reflection across the line through the origin with direction `v`."""
        u = vec(v, y).unit.arr
        z = ComplexKernel.multiply(ComplexKernel.conj(u), self.arr)
        return Vec(*ComplexKernel.multiply(ComplexKernel.conj(z), u))

    def rotate(self, theta: Rad) -> "Vec":
        return self.zmul(polar(1, theta))

    def transform(self, m: ImplicitMat) -> "Vec":
        from vecmat.Mat import mat

        return mat(m).apply(self)

    # Complex arithmetic

    def zconj(self) -> "Vec":
        return Vec(*ComplexKernel.conj(self.arr))

    def zmul(self, z: ImplicitVec, y: Optional[float] = None) -> "Vec":
        return Vec(*ComplexKernel.multiply(self.arr, vec(z, y).arr))

    def zdiv(self, z: ImplicitVec, y: Optional[float] = None) -> "Vec":
        return Vec(*ComplexKernel.divide(self.arr, vec(z, y).arr))

    def zdivs(self, z: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Reverse division z / self."""
        return vec(z, y).zdiv(self)

    def zexp(self, z: ImplicitVec, y: Optional[float] = None) -> "Vec":
        """Principal power self ** z."""
        return Vec(*ComplexKernel.power(self.arr, vec(z, y).arr))

    def zlog(self, z: Optional[ImplicitVec] = None, y: Optional[float] = None) -> "Vec":
        """Principal logarithm in base `z`, natural when no base is given."""
        ln = ComplexKernel.log(self.arr)
        if z is None:
            return Vec(*ln)
        return Vec(*ComplexKernel.divide(ln, vec(z, y).zlog().arr))

    # Formatting and protocol

    def zstring(self) -> str:
        return ComplexKernel.to_string(self.arr)

    def to_vec_string(self) -> str:
        return f"{LinAlg.format_number(self.x)}x̂ + {LinAlg.format_number(self.y)}ŷ"

    def __str__(self) -> str:
        return f"({LinAlg.format_number(self.x)}, {LinAlg.format_number(self.y)})"

    def __iter__(self) -> Iterator[float]:
        return iter(self.arr)

    def __add__(self, other: ImplicitVec) -> "Vec":
        try:
            return self.add(other)
        except UnrecognizedShapeError:
            return NotImplemented

    def __radd__(self, other: ImplicitVec) -> "Vec":
        return self.__add__(other)

    def __sub__(self, other: ImplicitVec) -> "Vec":
        try:
            return self.sub(other)
        except UnrecognizedShapeError:
            return NotImplemented

    def __rsub__(self, other: ImplicitVec) -> "Vec":
        try:
            return vec(other).sub(self)
        except UnrecognizedShapeError:
            return NotImplemented

    def __neg__(self) -> "Vec":
        return self.neg

    def __abs__(self) -> float:
        return self.len


@dataclass(frozen=True)
class Vecs:
    @staticmethod
    def of(a: ImplicitVec, b: Optional[float] = None) -> Vec:
        return vec(a, b)

    @staticmethod
    def point(x: float, y: float) -> Vec:
        return vec(x, y)

    @staticmethod
    def polar(r: float, phi: Rad) -> Vec:
        return polar(r, phi)
