import pytest

from rastercut.scanline import EdgeInfo, ScanlineCanvas


def _square() -> ScanlineCanvas:
    canvas = ScanlineCanvas()
    for point in [(0, 0), (10, 0), (10, 10), (0, 10)]:
        canvas.add_point(point)
    canvas.add_point((0, 0))
    return canvas


def test_edge_info_orders_by_x_then_dy_then_dx():
    a = EdgeInfo(1.0, 5.0, 0.0)
    b = EdgeInfo(1.0, 2.0, 3.0)
    c = EdgeInfo(0.0, 9.0, 9.0)
    assert sorted([a, b, c]) == [c, b, a]


def test_repeating_first_point_closes_figure():
    canvas = _square()
    assert canvas.closes == [0, 4]
    assert len(canvas.points) == 4
    assert canvas.edges == [(0, 1), (1, 2), (2, 3), (0, 3)]


def test_close_needs_three_points():
    canvas = ScanlineCanvas()
    canvas.add_point((1, 1))
    canvas.add_point((5, 1))
    assert canvas.close() is False
    assert canvas.closes == [0]


def test_is_closed_tracks_open_figure():
    canvas = ScanlineCanvas()
    canvas.add_point((1, 1))
    canvas.add_point((5, 1))
    assert canvas.is_closed() is True
    canvas.add_point((5, 5))
    assert canvas.close() is True
    assert canvas.is_closed() is False


def test_last_closed_point():
    canvas = ScanlineCanvas()
    assert canvas.last_closed_point() is None
    canvas.add_point((3, 4))
    canvas.add_point((7, 4))
    assert canvas.last_closed_point() == (3.0, 4.0)


def test_bounds_follow_points():
    canvas = _square()
    assert canvas.min_bound == (0.0, 0.0)
    assert canvas.max_bound == (10.0, 10.0)


def test_fill_square_rows():
    canvas = _square()
    canvas.fill()
    expected = [((0.0, float(y)), (10.0, float(y))) for y in range(10, 0, -1)]
    assert canvas.filler == expected


def test_fill_triangle_follows_diagonal():
    canvas = ScanlineCanvas()
    for point in [(0, 0), (10, 10), (0, 10)]:
        canvas.add_point(point)
    assert canvas.close()
    canvas.fill()
    assert len(canvas.filler) == 10
    for (x1, y1), (x2, y2) in canvas.filler:
        assert y1 == y2
        assert x1 == 0.0
        assert x2 == y2


def test_fill_reports_progress_per_row():
    canvas = _square()
    seen = []
    total = canvas.fill(on_progress=seen.append)
    assert len(seen) == 10
    assert seen == sorted(seen)
    assert total == seen[-1]


def test_clean_then_fill_repeats_result():
    canvas = _square()
    canvas.fill()
    first = list(canvas.filler)
    canvas.clean()
    assert canvas.filler == []
    canvas.fill()
    assert canvas.filler == first


def test_fill_empty_canvas():
    canvas = ScanlineCanvas()
    assert canvas.fill() == 0.0
    assert canvas.filler == []


def test_clear_resets_everything():
    canvas = _square()
    canvas.fill()
    canvas.clear()
    assert canvas.points == []
    assert canvas.edges == []
    assert canvas.filler == []
    assert canvas.closes == [0]
    assert canvas.last_closed_point() is None


def test_remove_point_and_set_color():
    canvas = _square()
    canvas.remove_point(1)
    assert canvas.points == [(0.0, 0.0), (10.0, 10.0), (0.0, 10.0)]
    with pytest.raises(IndexError):
        canvas.remove_point(10)
    canvas.set_color((1, 2, 3))
    assert canvas.color == (1, 2, 3)