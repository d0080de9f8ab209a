from rastercut.seedfill import SeedCanvas, fill_ordinary, fill_recursive

BLACK = (0, 0, 0)
RED = (255, 0, 0)
WHITE = (255, 255, 255)


def _square() -> SeedCanvas:
    canvas = SeedCanvas()
    for point in [(10, 10), (20, 10), (20, 20), (10, 20)]:
        canvas.add_point(point, BLACK)
    assert canvas.close()
    return canvas


def _interior():
    return {(x, y) for x in range(11, 20) for y in range(11, 20)}


def test_square_outline_is_closed():
    canvas = _square()
    for i in range(10, 21):
        assert canvas.eq_color(i, 10, BLACK)
        assert canvas.eq_color(i, 20, BLACK)
        assert canvas.eq_color(10, i, BLACK)
        assert canvas.eq_color(20, i, BLACK)
    assert canvas.closes == [0, 5]
    assert canvas.points[-1] == ((10.0, 10.0), BLACK)


def test_close_needs_three_points():
    canvas = SeedCanvas()
    canvas.add_point((1, 1), BLACK)
    canvas.add_point((5, 1), BLACK)
    assert canvas.close() is False
    assert canvas.closes == [0]


def test_last_closed_point():
    canvas = SeedCanvas()
    assert canvas.last_closed_point() is None
    canvas.add_point((3, 4), BLACK)
    assert canvas.last_closed_point() == (3.0, 4.0)
    canvas = _square()
    assert canvas.last_closed_point() is None
    assert canvas.last_point() == (10.0, 10.0)


def test_at_prefers_fill_over_edges_over_background():
    canvas = SeedCanvas(background=(1, 2, 3))
    canvas.add_point((0, 5), BLACK)
    canvas.add_point((4, 5), BLACK)
    assert canvas.at(2, 5) == BLACK
    assert canvas.at(2, 6) == (1, 2, 3)
    canvas.draw_line((1, 5), (3, 5), RED)
    assert canvas.at(2, 5) == RED
    assert canvas.at(0, 5) == BLACK
    assert canvas.strings == [(((0.0, 5.0), (4.0, 5.0)), RED)]


def test_ordinary_fill_covers_interior_exactly():
    canvas = _square()
    canvas.fill((15, 15), RED, BLACK)
    assert set(canvas.pixels_fill) == _interior()
    assert canvas.at(10, 15) == BLACK
    assert canvas.at(5, 5) == WHITE
    assert canvas.at(25, 15) == WHITE


def test_recursive_fill_stays_inside():
    canvas = _square()
    canvas.fill((15, 15), RED, BLACK, recursive=True)
    filled = set(canvas.pixels_fill)
    assert (15, 15) in filled
    assert filled <= _interior()
    assert canvas.at(25, 15) == WHITE


def test_functions_match_canvas_method():
    first = _square()
    second = _square()
    fill_ordinary(first, 15, 15, RED, BLACK)
    second.fill((15.0, 15.0), RED, BLACK)
    assert first.pixels_fill == second.pixels_fill


def test_recursive_on_border_does_nothing():
    canvas = _square()
    fill_recursive(canvas, 10, 15, RED, BLACK)
    assert canvas.pixels_fill == {}
    assert canvas.strings == []


def test_progress_called_per_span():
    canvas = _square()
    seen = []
    canvas.fill((15, 15), RED, BLACK, on_progress=seen.append)
    assert len(seen) == len(canvas.strings)
    assert seen == sorted(seen)


def test_clean_keeps_outline():
    canvas = _square()
    canvas.fill((15, 15), RED, BLACK)
    canvas.clean()
    assert canvas.pixels_fill == {}
    assert canvas.strings == []
    assert canvas.at(10, 10) == BLACK


def test_clear_removes_everything():
    canvas = _square()
    canvas.add_circle((50, 50), 5, BLACK)
    canvas.add_ellipse((80, 80), (6, 3), BLACK)
    canvas.clear()
    assert canvas.points == []
    assert canvas.circles == []
    assert canvas.ellipses == []
    assert canvas.pixels_edges == {}
    assert canvas.outline == []
    assert canvas.closes == [0]


def test_circle_and_ellipse_recorded():
    canvas = SeedCanvas()
    canvas.add_circle((50, 50), 5, BLACK)
    canvas.add_ellipse((80, 80), (6, 3), RED)
    assert canvas.circles == [((50.0, 50.0), 5.0, BLACK)]
    assert canvas.ellipses == [((80.0, 80.0), (6.0, 3.0), RED)]
    assert canvas.at(50, 55) == BLACK
    assert canvas.at(86, 80) == RED
    assert all(color in (BLACK, RED) for _, color in canvas.outline)