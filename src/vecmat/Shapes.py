"""Input shapes accepted wherever a vector or matrix is expected.

Callers hand in plain data (tuples, dicts, objects with named fields, numpy
arrays). Each input is first classified into exactly one tagged shape, then
normalized according to that tag. The classification order is fixed, so an
object carrying several recognised fields always resolves the same way:

    vectors:  Canonical, Scalar, Tuple, Cartesian (x), Complex (re), Polar (phi)
    matrices: Canonical, Loose, SquareRows, Rows, Linear, Cols,
              Actx (tx), Ace (e), Mxy (m11)
"""
import logging
import numbers
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Tuple, Union

import numpy as np

from vecmat.Errors import UnknownArraySizeError, UnrecognizedShapeError

logger = logging.getLogger(__name__)


class VecShape(Enum):
    Canonical = auto()
    Scalar = auto()
    Tuple = auto()
    Cartesian = auto()
    Complex = auto()
    Polar = auto()


class MatShape(Enum):
    Canonical = auto()
    Loose = auto()
    SquareRows = auto()
    Rows = auto()
    Linear = auto()
    Cols = auto()
    Actx = auto()
    Ace = auto()
    Mxy = auto()


@dataclass(frozen=True, slots=True)
class CartesianPoint:
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class CartesianComplex:
    re: float
    im: float


@dataclass(frozen=True, slots=True)
class PolarPoint:
    phi: float
    r: float


ImplicitVec = Union["Vec", float, Tuple[float, float], CartesianPoint, CartesianComplex, PolarPoint, complex, Mapping]
ImplicitMat = Union["Mat", Sequence, np.ndarray, Mapping, Any]

# Named-field matrix layouts, in classification order: (tag, key field).
_NAMED_MATRIX_FIELDS = ((MatShape.Actx, "tx"), (MatShape.Ace, "e"), (MatShape.Mxy, "m11"))


def is_number(x: Any) -> bool:
    return isinstance(x, numbers.Real) and not isinstance(x, (bool, np.bool_))


def is_sequence(x: Any) -> bool:
    if isinstance(x, np.ndarray):
        return x.ndim >= 1
    return isinstance(x, Sequence) and not isinstance(x, (str, bytes))


def is_complex_number(x: Any) -> bool:
    return isinstance(x, (complex, np.complexfloating))


def has_field(obj: Any, name: str) -> bool:
    if isinstance(obj, Mapping):
        return name in obj
    return hasattr(obj, name)


def get_field(obj: Any, name: str, default: Any = None) -> Any:
    if isinstance(obj, Mapping):
        return obj.get(name, default)
    return getattr(obj, name, default)


def classify_vec(a: Any, b: Any = None) -> VecShape:
    from vecmat.Vec import Vec

    if isinstance(a, Vec):
        return VecShape.Canonical
    if is_number(a):
        if b is not None and not is_number(b):
            logger.debug("Second vector component %r is not a number", b)
            raise UnrecognizedShapeError((a, b))
        return VecShape.Scalar
    if is_sequence(a):
        if len(a) != 2:
            logger.debug("Vector sequence %r does not have two elements", a)
            raise UnrecognizedShapeError(a)
        return VecShape.Tuple
    if is_complex_number(a):
        return VecShape.Complex
    if a is None or isinstance(a, (str, bytes, bool, np.bool_)):
        raise UnrecognizedShapeError(a)
    if has_field(a, "x"):
        return VecShape.Cartesian
    if has_field(a, "re"):
        return VecShape.Complex
    if has_field(a, "phi"):
        return VecShape.Polar
    logger.debug("No vector shape matches %r", a)
    raise UnrecognizedShapeError(a)


def classify_mat(args: Tuple[Any, ...]) -> MatShape:
    from vecmat.Mat import Mat

    if len(args) == 0:
        raise UnrecognizedShapeError(args, "matrix")
    if len(args) > 1:
        if len(args) > 6 or not is_number(args[0]):
            logger.debug("Loose matrix arguments %r are not up to six numbers", args)
            raise UnrecognizedShapeError(args, "matrix")
        return MatShape.Loose

    inp = args[0]
    if isinstance(inp, Mat):
        return MatShape.Canonical
    if is_number(inp):
        raise UnrecognizedShapeError(inp, "matrix")
    if is_sequence(inp):
        return _classify_array(inp)
    if inp is None or isinstance(inp, (str, bytes)):
        raise UnrecognizedShapeError(inp, "matrix")
    for shape, key in _NAMED_MATRIX_FIELDS:
        if has_field(inp, key):
            return shape
    logger.debug("No matrix shape matches %r", inp)
    raise UnrecognizedShapeError(inp, "matrix")


def _row_len(row: Any) -> int:
    return len(row) if is_sequence(row) else -1


def _classify_array(inp: Any) -> MatShape:
    n = len(inp)
    first = _row_len(inp[0]) if n else -1
    if n == 3 and first == 3:
        return MatShape.SquareRows
    if n == 2 and first == 3:
        return MatShape.Rows
    if n == 6 and first == -1:
        return MatShape.Linear
    if n == 3 and first == 2:
        return MatShape.Cols
    logger.debug("Matrix array %r matches no known layout", inp)
    raise UnknownArraySizeError(inp)
