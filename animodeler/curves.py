"""Curve evaluators that turn control points into drawable curve points."""

from __future__ import annotations

from collections.abc import Sequence

from animodeler.geometry import Point


class LinearCurveEvaluator:
    """Joins control points with straight lines."""

    def evaluate_curve(
        self,
        control_points: Sequence[Point],
        ani_length: float,
        wrap: bool,
        default_value: float = 0.0,
    ) -> list[Point]:
        """Return the control points followed by the start and end points.

        Without wrapping, the curve is flat before the first and after the
        last control point. With wrapping, the value at both ends is chosen
        so that the segment across the wrap-around is a single straight line.
        With no control points the curve holds ``default_value`` throughout.
        """
        if not control_points:
            return [Point(0.0, default_value), Point(ani_length, default_value)]

        evaluated = [Point(p.x, p.y) for p in control_points]
        first = control_points[0]
        last = control_points[-1]

        if wrap:
            span = first.x + ani_length - last.x
            if span > 0.0:
                start_y = (first.y * (ani_length - last.x) + last.y * first.x) / span
            else:
                start_y = first.y
            end_y = start_y
        else:
            start_y = first.y
            end_y = last.y

        evaluated.append(Point(0.0, start_y))
        evaluated.append(Point(ani_length, end_y))
        return evaluated