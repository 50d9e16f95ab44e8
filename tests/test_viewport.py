import pytest

from animodeler.geometry import Point
from animodeler.viewport import CurveDomain, Viewport


def _zoomed_in(width=200, height=100):
    view = Viewport(width, height)
    view.do_zoom(width // 2, -(height // 2))
    return view


def test_curve_domain_mag():
    domain = CurveDomain(-2.0, 6.0)
    assert domain.mag() == pytest.approx(8.0)


def test_initial_view_has_margin():
    view = Viewport(100, 100)
    assert view.current.left == pytest.approx(-0.01)
    assert view.current.right == pytest.approx(1.01)
    assert view.current.bottom == pytest.approx(-0.01)
    assert view.current.top == pytest.approx(1.01)


def test_invalid_window_size():
    with pytest.raises(ValueError):
        Viewport(0, 100)


def test_zoom_in_halves_width_and_keeps_centre():
    view = Viewport(200, 100)
    old_width = view.current.width()
    old_center = (view.current.left + view.current.right) / 2
    view.do_zoom(100, 0)
    assert view.current.width() == pytest.approx(old_width * 0.5)
    assert (view.current.left + view.current.right) / 2 == pytest.approx(old_center)


def test_zoom_out_is_clamped_to_full_view():
    view = _zoomed_in()
    view.do_zoom(-400, 200)
    full = Viewport(200, 100).current
    assert view.current.left == pytest.approx(full.left)
    assert view.current.right == pytest.approx(full.right)
    assert view.current.bottom == pytest.approx(full.bottom)
    assert view.current.top == pytest.approx(full.top)


def test_zoom_all_restores_full_view():
    view = _zoomed_in()
    view.zoom_all()
    assert view.current == Viewport(5, 5).current


def test_pan_keeps_size_and_clamps_at_zero():
    view = _zoomed_in()
    width = view.current.width()
    height = view.current.height()
    view.do_pan(10_000, -10_000)
    assert view.current.left == pytest.approx(0.0)
    assert view.current.bottom == pytest.approx(0.0)
    assert view.current.width() == pytest.approx(width)
    assert view.current.height() == pytest.approx(height)


def test_pan_clamps_at_one():
    view = _zoomed_in()
    view.do_pan(-10_000, 10_000)
    assert view.current.right == pytest.approx(1.0)
    assert view.current.top == pytest.approx(1.0)


def test_selection_is_validated():
    view = Viewport(100, 100)
    view.start_selection(10, 20)
    view.do_selection(50, 5)
    view.end_selection(60, 80)
    assert (view.selection.left, view.selection.right) == (10, 60)
    assert (view.selection.bottom, view.selection.top) == (20, 80)


def test_zoom_to_selection_maps_corner_to_window_corner():
    view = Viewport(100, 100)
    domain = CurveDomain(0.0, 1.0)
    corner = view.window_to_curve(Point(10, 80), 1.0, domain)
    view.start_selection(10, 20)
    view.end_selection(60, 80)
    assert view.zoom_to_selection() is True
    assert view.current.left == pytest.approx(corner.x)
    assert view.current.bottom == pytest.approx(corner.y)
    back = view.curve_to_window(corner, 1.0, domain)
    assert back.x == pytest.approx(0.0)
    assert back.y == pytest.approx(100.0)


def test_empty_selection_does_not_zoom():
    view = Viewport(100, 100)
    before = view.current.width()
    view.start_selection(30, 30)
    view.end_selection(30, 70)
    assert view.zoom_to_selection() is False
    assert view.current.width() == before


@pytest.mark.parametrize("x, y", [(0.0, 0.0), (3.5, -1.0), (20.0, 4.0), (12.25, 2.5)])
def test_curve_window_round_trip(x, y):
    view = _zoomed_in()
    domain = CurveDomain(-1.0, 4.0)
    window = view.curve_to_window(Point(x, y), 20.0, domain)
    curve = view.window_to_curve(window, 20.0, domain)
    assert curve.x == pytest.approx(x)
    assert curve.y == pytest.approx(y)


def test_window_origin_is_top_left_of_view():
    view = Viewport(100, 50)
    domain = CurveDomain(0.0, 10.0)
    top_left = view.window_to_curve(Point(0, 0), 20.0, domain)
    assert top_left.x == pytest.approx(view.current.left * 20.0)
    assert top_left.y == pytest.approx(view.current.top * 10.0)