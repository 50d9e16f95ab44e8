"""The visible part of the curve graph and its mapping to window pixels."""

from __future__ import annotations

from dataclasses import dataclass

from animodeler.geometry import Point, Rect

VIEWPORT_MARGIN = 0.01


@dataclass
class CurveDomain:
    """The range of values a curve may take."""

    minimum: float = 0.0
    maximum: float = 1.0

    def mag(self) -> float:
        """Size of the range."""
        return self.maximum - self.minimum


def _full_view() -> Rect:
    return Rect(
        0.0 - VIEWPORT_MARGIN,
        1.0 + VIEWPORT_MARGIN,
        0.0 - VIEWPORT_MARGIN,
        1.0 + VIEWPORT_MARGIN,
    )


def _clamp_edge(value: float) -> float:
    return min(max(value, 0.0 - VIEWPORT_MARGIN), 1.0 + VIEWPORT_MARGIN)


class Viewport:
    """A normalised view rectangle over a window of ``width`` x ``height`` pixels.

    The view is kept in normalised coordinates, where 0..1 covers the whole
    animation length horizontally and a curve's whole domain vertically.
    """

    def __init__(self, width: int, height: int) -> None:
        if width <= 0 or height <= 0:
            raise ValueError("window size must be positive")
        self.width = width
        self.height = height
        self.current = _full_view()
        self.selection = Rect()

    def zoom_all(self) -> None:
        """Show everything, with a small margin on each side."""
        self.current = _full_view()

    def do_zoom(self, dx: int, dy: int) -> None:
        """Zoom about the centre by a mouse drag of (dx, dy) pixels."""
        view = self.current
        center_x = (view.left + view.right) * 0.5
        center_y = (view.bottom + view.top) * 0.5
        x_scaling = 1.0 + -dx / self.width
        y_scaling = 1.0 + dy / self.height

        zoomed = Rect(
            (view.left - center_x) * x_scaling + center_x,
            (view.right - center_x) * x_scaling + center_x,
            (view.bottom - center_y) * y_scaling + center_y,
            (view.top - center_y) * y_scaling + center_y,
        )
        zoomed.validate()
        zoomed.left = _clamp_edge(zoomed.left)
        zoomed.right = _clamp_edge(zoomed.right)
        zoomed.top = _clamp_edge(zoomed.top)
        zoomed.bottom = _clamp_edge(zoomed.bottom)

        if zoomed.width() > 0.0 and zoomed.height() > 0.0:
            self.current = zoomed

    def do_pan(self, dx: int, dy: int) -> None:
        """Move the view by a mouse drag of (dx, dy) pixels, staying in range."""
        view = self.current
        fdx = -dx * view.width() / self.width
        fdy = dy * view.height() / self.height

        fdx = max(-view.left, fdx)
        fdx = min(1.0 - view.right, fdx)
        fdy = max(-view.bottom, fdy)
        fdy = min(1.0 - view.top, fdy)

        view.left += fdx
        view.right += fdx
        view.bottom += fdy
        view.top += fdy

    def start_selection(self, x: float, y: float) -> None:
        """Begin a rubber-band selection at a window point."""
        self.selection.bottom_left(x, y)
        self.selection.top_right(x, y)

    def do_selection(self, x: float, y: float) -> None:
        """Move the free corner of the selection."""
        self.selection.top_right(x, y)

    def end_selection(self, x: float, y: float) -> None:
        """Finish the selection and order its edges."""
        self.selection.top_right(x, y)
        self.selection.validate()

    def zoom_to_selection(self) -> bool:
        """Zoom the view to the selected window rectangle.

        Returns False, leaving the view alone, when the selection is empty.
        """
        sel = self.selection
        if not (sel.width() > 0.0 and sel.height() > 0.0):
            return False
        old = Rect(self.current.left, self.current.right, self.current.bottom, self.current.top)
        w = float(self.width)
        h = float(self.height)
        self.current.left = old.width() * sel.left / w + old.left
        self.current.right = old.width() * sel.right / w + old.left
        self.current.bottom = old.height() * (h - sel.top) / h + old.bottom
        self.current.top = old.height() * (h - sel.bottom) / h + old.bottom
        return True

    def curve_to_window(self, point: Point, end_time: float, domain: CurveDomain) -> Point:
        """Map a curve point (time, value) to window pixels."""
        view = self.current
        x = (point.x - view.left * end_time) / (view.width() * end_time) * self.width
        normalized_y = (point.y - domain.minimum) / domain.mag()
        y = self.height - (normalized_y - view.bottom) / view.height() * self.height
        return Point(x, y)

    def window_to_curve(self, point: Point, end_time: float, domain: CurveDomain) -> Point:
        """Map window pixels to a curve point (time, value)."""
        view = self.current
        x = (point.x / self.width * view.width() + view.left) * end_time
        y = (
            (self.height - point.y) / self.height * view.height() + view.bottom
        ) * domain.mag() + domain.minimum
        return Point(x, y)