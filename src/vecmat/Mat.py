import logging
import math
from dataclasses import dataclass
from typing import Any, Dict, Optional, Tuple

import numpy as np

from vecmat.Angles import Rad
from vecmat.Constants import AFFINE_ROW
from vecmat.Errors import InvalidAffineFormError, UnknownArraySizeError, UnrecognizedShapeError
from vecmat.LinAlg import LinAlg
from vecmat.Shapes import ImplicitMat, ImplicitVec, MatShape, classify_mat, get_field, is_number, is_sequence
from vecmat.Vec import Vec, vec

logger = logging.getLogger(__name__)

Cells = Tuple[float, float, float, float, float, float]


def _or_zero(value: Any, source: Any) -> float:
    # Absent, None and NaN cells all read as 0.
    if value is None:
        return 0.0
    if not is_number(value):
        raise UnrecognizedShapeError(source, "matrix")
    value = float(value)
    return 0.0 if math.isnan(value) else value


def _row(row: Any, size: int, source: Any) -> Tuple[float, ...]:
    if not is_sequence(row):
        raise UnknownArraySizeError(source)
    return tuple(_or_zero(row[i] if i < len(row) else None, source) for i in range(size))


def _named(obj: Any, *names: str) -> Cells:
    return tuple(_or_zero(get_field(obj, name), obj) for name in names)


def _is_affine_row(row: Any) -> bool:
    if not is_sequence(row) or len(row) != 3 or not all(is_number(c) for c in row):
        return False
    return LinAlg.equal(row, AFFINE_ROW)


def _unify(args: Tuple[Any, ...]) -> Cells:
    shape = classify_mat(args)
    if shape is MatShape.Loose:
        padded = tuple(args) + (None,) * (6 - len(args))
        return tuple(_or_zero(v, args) for v in padded)

    inp = args[0]
    if shape is MatShape.Canonical:
        return inp.linear
    if shape is MatShape.SquareRows:
        if not _is_affine_row(inp[2]):
            logger.debug("Third row of %r is not [0, 0, 1]", inp)
            raise InvalidAffineFormError(inp)
        return _row(inp[0], 3, inp) + _row(inp[1], 3, inp)
    if shape is MatShape.Rows:
        return _row(inp[0], 3, inp) + _row(inp[1], 3, inp)
    if shape is MatShape.Linear:
        return tuple(_or_zero(v, inp) for v in inp)
    if shape is MatShape.Cols:
        c1, c2, c3 = (_row(col, 2, inp) for col in inp)
        return (c1[0], c2[0], c3[0], c1[1], c2[1], c3[1])
    if shape is MatShape.Actx:
        return _named(inp, "a", "c", "tx", "b", "d", "ty")
    if shape is MatShape.Ace:
        return _named(inp, "a", "c", "e", "b", "d", "f")
    return _named(inp, "m11", "m12", "m13", "m21", "m22", "m23")


def mat(*args: Any) -> "Mat":
    """Normalize any matrix-like input into a new Mat.

    Accepts a Mat; up to six loose numbers m11, m12, m13, m21, m22, m23; a
    3x3 row array whose last row is [0, 0, 1]; a 2x3 row array; a flat
    6-element row-major array; a 3x2 column array; or an object or mapping in
    the {a, b, c, d, tx, ty}, {a, b, c, d, e, f} or {m11 .. m23} layouts.
    Missing cells read as 0.

    Raises:
        UnrecognizedShapeError: the input matches no shape.
        InvalidAffineFormError: a 3x3 input's last row is not [0, 0, 1].
        UnknownArraySizeError: an array input has an unsupported size.
    """
    return Mat(*_unify(args))


@dataclass(frozen=True, slots=True)
class Mat:
    """A 2D affine transform: the top two rows of a 3x3 matrix whose last row is [0, 0, 1].

    Points are column vectors [x, y, 1]^T, so `apply(v)` is `M @ [x, y, 1]`.
    """
    m11: float
    m12: float
    m13: float
    m21: float
    m22: float
    m23: float

    @staticmethod
    def _of_rows(rows: np.ndarray) -> "Mat":
        """Build from the first two rows of a 2x3 or 3x3 result."""
        r1, r2 = rows[0], rows[1]
        return Mat(float(r1[0]), float(r1[1]), float(r1[2]), float(r2[0]), float(r2[1]), float(r2[2]))

    # Exports

    @property
    def rows(self) -> Tuple[Tuple[float, float, float], Tuple[float, float, float]]:
        return ((self.m11, self.m12, self.m13), (self.m21, self.m22, self.m23))

    @property
    def cols(self) -> Tuple[Tuple[float, float], Tuple[float, float], Tuple[float, float]]:
        return ((self.m11, self.m21), (self.m12, self.m22), (self.m13, self.m23))

    @property
    def linear(self) -> Cells:
        return (self.m11, self.m12, self.m13, self.m21, self.m22, self.m23)

    @property
    def as_square(self) -> Tuple[Tuple[float, float, float], ...]:
        return self.rows + (AFFINE_ROW,)

    @property
    def ace(self) -> Dict[str, float]:
        return {"a": self.m11, "b": self.m21, "c": self.m12, "d": self.m22, "e": self.m13, "f": self.m23}

    @property
    def actx(self) -> Dict[str, float]:
        return {"a": self.m11, "b": self.m21, "c": self.m12, "d": self.m22, "tx": self.m13, "ty": self.m23}

    @property
    def m(self) -> Dict[str, float]:
        return {"m11": self.m11, "m12": self.m12, "m13": self.m13,
                "m21": self.m21, "m22": self.m22, "m23": self.m23}

    def get(self, i: int, j: int) -> float:
        """Cell at zero-based row `i`, column `j`; NaN outside the 2x3 block."""
        if i in (0, 1) and j in (0, 1, 2):
            return self.rows[i][j]
        return math.nan

    # Composition

    @property
    def det(self) -> float:
        return LinAlg.det(self.as_square)

    def invert(self) -> Optional["Mat"]:
        """Inverse transform, or None when `self` is singular."""
        inverse = LinAlg.inv(self.as_square)
        if inverse is None:
            return None
        return Mat._of_rows(inverse)

    def compose(self, m: ImplicitMat) -> "Mat":
        """self @ m: the transform that applies `m` first, then `self`."""
        return Mat._of_rows(LinAlg.multiply(self.as_square, mat(m).as_square))

    def backcompose(self, m: ImplicitMat) -> "Mat":
        """m @ self: the transform that applies `self` first, then `m`."""
        return Mat._of_rows(LinAlg.multiply(mat(m).as_square, self.as_square))

    def anticompose(self, m: ImplicitMat) -> Optional["Mat"]:
        """self @ m^-1, or None when `m` has no inverse."""
        inverse = mat(m).invert()
        if inverse is None:
            return None
        return self.compose(inverse)

    def apply(self, v: ImplicitVec, y: Optional[float] = None) -> Vec:
        r = LinAlg.multiply(self.as_square, vec(v, y).as3)
        return Vec(float(r[0]), float(r[1]))

    # Entrywise algebra

    def add(self, m: ImplicitMat) -> "Mat":
        return Mat._of_rows(LinAlg.add(self.rows, mat(m).rows))

    def sub(self, m: ImplicitMat) -> "Mat":
        return Mat._of_rows(LinAlg.subtract(self.rows, mat(m).rows))

    def mult(self, m: ImplicitMat) -> "Mat":
        """Hadamard product, not the matrix product (see compose)."""
        return Mat._of_rows(LinAlg.dot_multiply(self.rows, mat(m).rows))

    def div(self, m: ImplicitMat) -> "Mat":
        return Mat._of_rows(LinAlg.divide(self.rows, mat(m).rows))

    def clamp(self, min_value: Optional[float] = None, max_value: Optional[float] = None) -> "Mat":
        return Mat._of_rows(LinAlg.clamp(self.rows, min_value, max_value))

    # Transform sugar, each composed after self

    def translate(self, v: ImplicitVec) -> "Mat":
        from vecmat.Mats import Mats

        return self.compose(Mats.translate(v))

    def rotate(self, theta: Rad, origin: Optional[ImplicitVec] = None) -> "Mat":
        from vecmat.Mats import Mats

        return self.compose(Mats.rotate(theta, origin))

    def scale(self, v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> "Mat":
        from vecmat.Mats import Mats

        return self.compose(Mats.scale(v, origin))

    def skew(self, v: ImplicitVec, origin: Optional[ImplicitVec] = None) -> "Mat":
        from vecmat.Mats import Mats

        return self.compose(Mats.skew(v, origin))

    def __matmul__(self, other: ImplicitMat) -> "Mat":
        return self.compose(other)

    def __call__(self, v: ImplicitVec, y: Optional[float] = None) -> Vec:
        return self.apply(v, y)

    def __str__(self) -> str:
        fmt = LinAlg.format_number
        r1, r2 = self.rows
        return f"[[{', '.join(map(fmt, r1))}], [{', '.join(map(fmt, r2))}]]"
