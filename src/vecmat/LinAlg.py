import logging
from dataclasses import dataclass
from typing import Optional

import numpy as np

from vecmat.Constants import DBL_EPSILON, EPSILON

logger = logging.getLogger(__name__)

# IEEE results (inf, nan) are values here, not errors.
_QUIET = dict(divide="ignore", invalid="ignore", over="ignore")


@dataclass(frozen=True)
class LinAlg:
    """Dense linear algebra over small real matrices and 2-vectors, backed by numpy."""

    @staticmethod
    def array(a) -> np.ndarray:
        return np.asarray(a, dtype=float)

    @staticmethod
    def det(a) -> float:
        """Determinant; 2x2 and 3x3 use cofactor expansion so integer input stays exact."""
        m = LinAlg.array(a)
        if m.shape == (2, 2):
            return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
        if m.shape == (3, 3):
            adj = LinAlg._adjugate3(m)
            return float(m[0, 0] * adj[0, 0] + m[0, 1] * adj[1, 0] + m[0, 2] * adj[2, 0])
        return float(np.linalg.det(m))

    @staticmethod
    def _adjugate3(m: np.ndarray) -> np.ndarray:
        (a, b, c), (d, e, f), (g, h, i) = m
        with np.errstate(**_QUIET):
            return np.array([
                [e * i - f * h, c * h - b * i, b * f - c * e],
                [f * g - d * i, a * i - c * g, c * d - a * f],
                [d * h - e * g, b * g - a * h, a * e - b * d],
            ])

    @staticmethod
    def inv(a) -> Optional[np.ndarray]:
        """Inverse of a square matrix, or None when its determinant is exactly 0."""
        m = LinAlg.array(a)
        d = LinAlg.det(m)
        if d == 0.0:
            logger.debug("Matrix %s has zero determinant, no inverse", m.tolist())
            return None
        if m.shape == (3, 3):
            with np.errstate(**_QUIET):
                return LinAlg._adjugate3(m) / d
        try:
            with np.errstate(**_QUIET):
                return np.linalg.inv(m)
        except np.linalg.LinAlgError:
            logger.debug("Matrix %s is singular, no inverse", m.tolist())
            return None

    @staticmethod
    def multiply(a, b) -> np.ndarray:
        """Matrix product a @ b."""
        with np.errstate(**_QUIET):
            return LinAlg.array(a) @ LinAlg.array(b)

    @staticmethod
    def add(a, b) -> np.ndarray:
        with np.errstate(**_QUIET):
            return LinAlg.array(a) + LinAlg.array(b)

    @staticmethod
    def subtract(a, b) -> np.ndarray:
        with np.errstate(**_QUIET):
            return LinAlg.array(a) - LinAlg.array(b)

    @staticmethod
    def dot_multiply(a, b) -> np.ndarray:
        """Entrywise (Hadamard) product."""
        with np.errstate(**_QUIET):
            return LinAlg.array(a) * LinAlg.array(b)

    @staticmethod
    def divide(a, b) -> np.ndarray:
        """Entrywise quotient; x / 0 gives inf or nan."""
        with np.errstate(**_QUIET):
            return np.true_divide(LinAlg.array(a), LinAlg.array(b))

    @staticmethod
    def mod(a, b) -> np.ndarray:
        """Entrywise remainder carrying the sign of the dividend."""
        with np.errstate(**_QUIET):
            return np.fmod(LinAlg.array(a), LinAlg.array(b))

    @staticmethod
    def clamp(a, min_value: Optional[float] = None, max_value: Optional[float] = None) -> np.ndarray:
        out = LinAlg.array(a)
        if min_value is not None:
            out = np.maximum(out, min_value)
        if max_value is not None:
            out = np.minimum(out, max_value)
        return out

    @staticmethod
    def dot(u, v) -> float:
        with np.errstate(**_QUIET):
            return float(np.dot(LinAlg.array(u), LinAlg.array(v)))

    @staticmethod
    def norm(u) -> float:
        with np.errstate(**_QUIET):
            return float(np.linalg.norm(LinAlg.array(u)))

    @staticmethod
    def distance(u, v) -> float:
        return LinAlg.norm(LinAlg.subtract(u, v))

    @staticmethod
    def equal(a, b) -> bool:
        """Entrywise nearly-equal test.

        Equal values (including -0 and 0, or same-signed infinities) match;
        NaN never matches anything. Finite values match when their difference
        is within DBL_EPSILON, or within EPSILON relative to the larger one.
        """
        x = LinAlg.array(a)
        y = LinAlg.array(b)
        if x.shape != y.shape:
            return False
        with np.errstate(**_QUIET):
            diff = np.abs(x - y)
            finite = np.isfinite(x) & np.isfinite(y)
            near = (diff <= DBL_EPSILON) | (diff <= np.maximum(np.abs(x), np.abs(y)) * EPSILON)
            return bool(np.all((x == y) | (finite & near)))

    @staticmethod
    def is_zero(x: float) -> bool:
        return x == 0.0

    @staticmethod
    def format_number(x: float) -> str:
        """2.0 -> "2", 2.5 -> "2.5", 1e20 -> "1e+20", inf -> "inf"."""
        x = float(x)
        if x.is_integer() and abs(x) < 1e16:
            return str(int(x))
        return repr(x)
