"""The curve graph: a set of animation curves shown in a zoomable window."""

from __future__ import annotations

import math
from collections.abc import Iterator
from dataclasses import dataclass
from enum import IntEnum

from animodeler.curves import LinearCurveEvaluator
from animodeler.geometry import Point
from animodeler.viewport import CurveDomain, Viewport

FLT_MAX = 3.4028234663852886e38
AVERAGE_LONG_MARK_LENGTH = 15
DEFAULT_END_TIME = 20.0


class CurveType(IntEnum):
    """The kinds of curve a control can be animated with."""

    LINEAR = 0
    BSPLINE = 1
    BEZIER = 2
    CATMULLROM = 3
    C2INTERPOLATING = 4


@dataclass
class _Curve:
    start_value: float
    domain: CurveDomain
    curve_type: CurveType
    evaluator: LinearCurveEvaluator
    end_time: float


def _mark_length(value_range: float, count: int) -> float:
    """Spacing of the long grid marks, rounded up to a power of ten."""
    return 10.0 ** math.ceil(math.log10(value_range / count))


class GraphView:
    """Curves, their types and domains, the active selection and the view."""

    def __init__(self, width: int, height: int) -> None:
        self.viewport = Viewport(width, height)
        # Only the linear evaluator exists; every curve type uses it.
        self.evaluators = {kind: LinearCurveEvaluator() for kind in CurveType}
        self._curves: list[_Curve] = []
        self._active: list[int] = []
        self.current_curve: int | None = None
        self._end_time = DEFAULT_END_TIME
        self._current_time = 0.0
        self.has_zoom_selection = False

    @property
    def width(self) -> int:
        return self.viewport.width

    @property
    def height(self) -> int:
        return self.viewport.height

    @property
    def end_time(self) -> float:
        return self._end_time

    @property
    def current_time(self) -> float:
        return self._current_time

    @property
    def curve_count(self) -> int:
        return len(self._curves)

    @property
    def active_curves(self) -> list[int]:
        return list(self._active)

    def _curve(self, curve: int) -> _Curve:
        if not 0 <= curve < len(self._curves):
            raise IndexError(f"no curve {curve}")
        return self._curves[curve]

    def curve_type(self, curve: int) -> CurveType:
        """The type of the given curve."""
        return self._curve(curve).curve_type

    def curve_domain(self, curve: int) -> CurveDomain:
        """The value range of the given curve."""
        return self._curve(curve).domain

    def add_curve(self, start_value: float, min_y: float, max_y: float) -> int:
        """Add a linear curve and return its index."""
        self._curves.append(
            _Curve(
                start_value=start_value,
                domain=CurveDomain(min_y, max_y),
                curve_type=CurveType.LINEAR,
                evaluator=self.evaluators[CurveType.LINEAR],
                end_time=self._end_time,
            )
        )
        return len(self._curves) - 1

    def set_curve_type(self, curve: int, curve_type: int) -> None:
        """Change the type of a curve; raises on a bad index or type."""
        record = self._curve(curve)
        kind = CurveType(curve_type)
        record.curve_type = kind
        record.evaluator = self.evaluators[kind]

    def set_current_curve_type(self, curve_type: int) -> None:
        """Change the type of the current curve, if there is one and the type is valid."""
        if self.current_curve is None:
            return
        try:
            kind = CurveType(curve_type)
        except ValueError:
            return
        record = self._curves[self.current_curve]
        record.curve_type = kind
        record.evaluator = self.evaluators[kind]

    def current_curve_type(self) -> CurveType | None:
        """The type of the current curve, or None when no curve is current."""
        if self.current_curve is None:
            return None
        return self._curves[self.current_curve].curve_type

    def left_time(self) -> float:
        return self._end_time * self.viewport.current.left

    def right_time(self) -> float:
        return self._end_time * self.viewport.current.right

    def top_value(self) -> float:
        if self.current_curve is None:
            return FLT_MAX
        domain = self._curves[self.current_curve].domain
        return self.viewport.current.top * domain.mag() + domain.minimum

    def bottom_value(self) -> float:
        if self.current_curve is None:
            return -FLT_MAX
        domain = self._curves[self.current_curve].domain
        return self.viewport.current.bottom * domain.mag() + domain.minimum

    def set_current_time(self, value: float) -> None:
        """Move the time bar; times outside 0..end_time are ignored."""
        if 0.0 <= value <= self._end_time:
            self._current_time = value

    def set_end_time(self, value: float) -> None:
        """Change the animation length; non-positive lengths are ignored."""
        if value > 0.0:
            self._end_time = value
            for record in self._curves:
                record.end_time = value

    def activate_curve(self, curve: int, active: bool) -> None:
        """Show or hide a curve; the only visible curve becomes current."""
        if not 0 <= curve < len(self._curves):
            return
        if active:
            if curve not in self._active:
                self._active.append(curve)
                self._active.sort()
        else:
            if curve == self.current_curve:
                self.current_curve = None
            if curve in self._active:
                self._active.remove(curve)

        self.current_curve = self._active[0] if len(self._active) == 1 else None

    def curve_to_window(self, curve: int, point: Point) -> Point:
        """Map a point of the given curve to window pixels."""
        domain = self._curve(curve).domain
        return self.viewport.curve_to_window(point, self._end_time, domain)

    def window_to_curve(self, curve: int, point: Point) -> Point:
        """Map window pixels to a point of the given curve."""
        domain = self._curve(curve).domain
        return self.viewport.window_to_curve(point, self._end_time, domain)

    def start_zoom_selection(self, x: float, y: float) -> None:
        self.viewport.start_selection(x, y)
        self.has_zoom_selection = True

    def do_zoom_selection(self, x: float, y: float) -> None:
        self.viewport.do_selection(x, y)

    def end_zoom_selection(self, x: float, y: float) -> None:
        """Finish the rubber band and zoom to it if it is not empty."""
        self.viewport.end_selection(x, y)
        self.has_zoom_selection = False
        self.viewport.zoom_to_selection()

    def _mark_counts(self) -> tuple[int, int]:
        return (
            self.width // AVERAGE_LONG_MARK_LENGTH,
            self.height // AVERAGE_LONG_MARK_LENGTH,
        )

    def window_to_grid(self, point: Point) -> Point:
        """Index of the grid mark nearest a window point."""
        value_range = self.right_time() - self.left_time()
        count_x, count_y = self._mark_counts()
        mark_x = mark_y = 0

        if count_x > 0:
            length_x = _mark_length(value_range, count_x)
            mark_x = int(
                (int((point.x - 0.5) / self.width * value_range) - self.left_time()) / length_x
            )
            if count_y > 0:
                length_y = _mark_length(value_range, count_y)
                mark_y = int(
                    (int((point.y - 0.5) / self.height * value_range) - self.left_time())
                    / length_y
                )

        return Point(float(mark_x), float(mark_y))

    def grid_to_window(self, point: Point) -> Point:
        """Window position of the grid mark with the given indices."""
        count_x, count_y = self._mark_counts()
        if count_x <= 0 or count_y <= 0:
            raise ValueError("window is too small to hold a grid")
        value_range = self.right_time() - self.left_time()
        length_x = _mark_length(value_range, count_x)
        length_y = _mark_length(value_range, count_y)
        x = int((point.x * length_x - self.left_time()) / value_range * self.width + 0.5)
        y = int((point.y * length_y - self.left_time()) / value_range * self.height + 0.5)
        return Point(float(x), float(y))

    def grid_points(self) -> Iterator[tuple[float, float]]:
        """Grid dot positions in normalised device coordinates, column by column."""
        count_x, count_y = self._mark_counts()
        if count_x <= 0 or count_y <= 0:
            return
        width, height = self.width, self.height
        left = self.left_time()
        value_range = self.right_time() - left
        length_x = _mark_length(value_range, count_x)
        length_y = _mark_length(value_range, count_y)

        start_x = math.ceil(left / length_x)
        while True:
            mark_x = 2 * int((start_x * length_x - left) / value_range * width + 0.5) - width
            x = mark_x / width
            start_y = math.ceil(left / length_y)
            while True:
                mark_y = (
                    2 * int((start_y * length_y - left) / value_range * height + 0.5) - height
                )
                yield (x, mark_y / height)
                start_y += 1
                if mark_y >= height:
                    break
            start_x += 1
            if mark_x >= width:
                break