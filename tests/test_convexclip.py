import pytest

from rastercut.convexclip import NotConvexError, clip_segment, clip_segments, is_convex
from rastercut.errors import GraphicsError

SQUARE = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
CLOSED_SQUARE = SQUARE + [SQUARE[0]]


def _approx_segment(segment):
    (x1, y1), (x2, y2) = segment
    return ((pytest.approx(x1), pytest.approx(y1)), (pytest.approx(x2), pytest.approx(y2)))


def test_square_is_convex():
    assert is_convex(SQUARE)


def test_reversed_square_is_convex():
    assert is_convex(list(reversed(SQUARE)))


def test_concave_polygon_detected():
    assert not is_convex([(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (5.0, 3.0), (0.0, 10.0)])


def test_too_few_vertices_not_convex():
    assert not is_convex([(0.0, 0.0), (1.0, 1.0)])


def test_clip_segment_crossing():
    result = clip_segment(SQUARE, ((-5.0, 5.0), (15.0, 5.0)))
    assert result == _approx_segment(((0.0, 5.0), (10.0, 5.0)))


def test_clip_segment_inside_unchanged():
    result = clip_segment(SQUARE, ((2.0, 2.0), (8.0, 8.0)))
    assert result == _approx_segment(((2.0, 2.0), (8.0, 8.0)))


def test_clip_segment_outside():
    assert clip_segment(SQUARE, ((-5.0, -5.0), (-1.0, -1.0))) is None


def test_clip_segment_parallel_outside():
    assert clip_segment(SQUARE, ((-5.0, -1.0), (15.0, -1.0))) is None


def test_orientation_does_not_matter():
    line = ((-5.0, 5.0), (15.0, 5.0))
    assert clip_segment(list(reversed(SQUARE)), line) == _approx_segment(
        clip_segment(SQUARE, line)
    )


def test_clip_segments_filters_invisible():
    lines = [((-5.0, 5.0), (15.0, 5.0)), ((20.0, 20.0), (30.0, 30.0)), ((5.0, -5.0), (5.0, 15.0))]
    result = clip_segments(CLOSED_SQUARE, lines)
    assert len(result) == 2
    assert result[0] == _approx_segment(((0.0, 5.0), (10.0, 5.0)))
    assert result[1] == _approx_segment(((5.0, 0.0), (5.0, 10.0)))


def test_clip_results_stay_inside():
    lines = [((-3.0, 2.0), (12.0, 7.0)), ((1.0, -4.0), (9.0, 14.0))]
    for start, end in clip_segments(CLOSED_SQUARE, lines):
        for x, y in (start, end):
            assert -1e-9 <= x <= 10 + 1e-9
            assert -1e-9 <= y <= 10 + 1e-9


def test_nonconvex_polygon_raises():
    concave = [(0.0, 0.0), (10.0, 0.0), (10.0, 10.0), (5.0, 3.0), (0.0, 10.0), (0.0, 0.0)]
    with pytest.raises(NotConvexError) as info:
        clip_segments(concave, [((1.0, 1.0), (2.0, 2.0))])
    assert info.value.description == "Многоугольник не выпуклый"


def test_too_small_polygon_raises():
    with pytest.raises(GraphicsError):
        clip_segments([(0.0, 0.0), (1.0, 1.0)], [])