import math
from dataclasses import dataclass
from typing import Any, Optional

from vecmat.Angles import Rad
from vecmat.Constants import EPSILON
from vecmat.LinAlg import LinAlg
from vecmat.Mat import mat
from vecmat.Shapes import ImplicitMat, ImplicitVec
from vecmat.Vec import Vec, vec


def _cross(a: Vec, b: Vec) -> float:
    # 2D cross product (z-component)
    return a.x * b.y - a.y * b.x


def line_segment(start: ImplicitVec, end: ImplicitVec) -> "LineSegment":
    return LineSegment(vec(start), vec(end))


@dataclass(frozen=True, slots=True)
class LineSegment:
    start: Vec
    end: Vec

    @property
    def direction(self) -> Vec:
        return self.end.sub(self.start)

    @property
    def len(self) -> float:
        return self.start.dist(self.end)

    @property
    def slope(self) -> float:
        d = self.direction
        return float(LinAlg.divide(d.y, d.x))

    def _tolerance(self) -> float:
        return EPSILON * max(self.len, 1.0)

    def _contains(self, p: Vec) -> bool:
        ab = self.direction
        ab2 = ab.dot(ab)
        if ab2 == 0.0:
            return p.dist(self.start) <= self._tolerance()
        # Distance from p to the closest point of the segment
        t = max(0.0, min(1.0, p.sub(self.start).dot(ab) / ab2))
        closest = self.start.add(ab.mul(t))
        return p.dist(closest) <= self._tolerance()

    def is_in_segment(self, p: Any, y: Optional[float] = None) -> bool:
        """True when the point lies on the closed segment.

        Given another LineSegment, true when both of its ends do.
        """
        if isinstance(p, LineSegment):
            return self._contains(p.start) and self._contains(p.end)
        return self._contains(vec(p, y))

    def intersection(self, ls: "LineSegment") -> Optional[Vec]:
        """Crossing point of the two segments, or None if they are parallel or do not meet."""
        r = self.direction
        s = ls.direction
        denom = _cross(r, s)
        if denom == 0.0:
            return None
        qp = ls.start.sub(self.start)
        t = _cross(qp, s) / denom
        u = _cross(qp, r) / denom
        tol = EPSILON
        if -tol <= t <= 1 + tol and -tol <= u <= 1 + tol:
            return self.start.add(r.mul(t))
        return None

    def angle(self, ls: Optional["LineSegment"] = None) -> Optional[Rad]:
        """Direction angle from the x axis, or the signed angle to `ls` when they intersect."""
        r = self.direction
        if ls is None:
            return r.angle()
        if self.intersection(ls) is None:
            return None
        s = ls.direction
        return math.atan2(_cross(r, s), r.dot(s))

    def transform(self, m: ImplicitMat) -> "LineSegment":
        mu = mat(m)
        return LineSegment(mu.apply(self.start), mu.apply(self.end))

    def __str__(self) -> str:
        return f"{self.start} -> {self.end}"
