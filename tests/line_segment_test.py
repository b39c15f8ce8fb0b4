import math
import os
import sys

import pytest

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src")))

from vecmat.LineSegment import LineSegment, line_segment
from vecmat.Mats import Mats
from vecmat.Vec import Vec


@pytest.fixture
def seg():
    return line_segment((0, 0), (4, 0))


def test_ends_are_normalized():
    s = line_segment({"x": 1, "y": 2}, 3 + 4j)
    assert s == LineSegment(Vec(1.0, 2.0), Vec(3.0, 4.0))


def test_len_and_slope(seg):
    assert seg.len == 4.0
    assert seg.slope == 0.0
    assert line_segment((0, 0), (2, 4)).slope == 2.0
    assert line_segment((0, 0), (0, 2)).slope == math.inf
    assert math.isnan(line_segment((1, 1), (1, 1)).slope)


def test_is_in_segment_point(seg):
    assert seg.is_in_segment((2, 0))
    assert seg.is_in_segment(2, 0)
    assert seg.is_in_segment((0, 0))
    assert seg.is_in_segment((4, 0))
    assert not seg.is_in_segment((5, 0))
    assert not seg.is_in_segment((2, 0.1))


def test_is_in_segment_diagonal():
    s = line_segment((0, 0), (3, 3))
    assert s.is_in_segment((0.1 * 3, 0.1 * 3))
    assert not s.is_in_segment((1, 2))


def test_is_in_segment_subsegment(seg):
    assert seg.is_in_segment(line_segment((1, 0), (3, 0)))
    assert not seg.is_in_segment(line_segment((3, 0), (5, 0)))


def test_intersection():
    a = line_segment((0, 0), (2, 2))
    b = line_segment((0, 2), (2, 0))
    p = a.intersection(b)
    assert p.arr == pytest.approx((1.0, 1.0))


def test_intersection_at_end_point():
    a = line_segment((0, 0), (2, 0))
    b = line_segment((2, 0), (2, 5))
    assert a.intersection(b).arr == pytest.approx((2.0, 0.0))


def test_parallel_segments_do_not_intersect(seg):
    assert seg.intersection(line_segment((0, 1), (4, 1))) is None


def test_lines_meeting_outside_segments():
    a = line_segment((0, 0), (1, 1))
    b = line_segment((3, 0), (2, 1))
    assert a.intersection(b) is None


def test_angle():
    assert line_segment((0, 0), (1, 1)).angle() == pytest.approx(math.pi / 4)
    a = line_segment((0, 0), (2, 0))
    b = line_segment((1, -1), (1, 1))
    assert a.angle(b) == pytest.approx(math.pi / 2)
    assert b.angle(a) == pytest.approx(-math.pi / 2)


def test_angle_of_disjoint_segments_is_none(seg):
    assert seg.angle(line_segment((0, 1), (1, 2))) is None


def test_transform(seg):
    moved = seg.transform(Mats.translate((1, 1)))
    assert moved == line_segment((1, 1), (5, 1))
    turned = seg.transform(Mats.rotate(math.pi / 2))
    assert turned.end.arr == pytest.approx((0.0, 4.0), abs=1e-12)
