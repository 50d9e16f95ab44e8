"""A horizontal track of time markers with a movable floating marker."""

from __future__ import annotations

import bisect


class IndicatorTrack:
    """Fixed markers, a floating marker and a shaded range over ``width`` pixels."""

    def __init__(self, width: int) -> None:
        self.width = width
        self.minimum = 0.0
        self.maximum = 1.0
        self.range_marker = (0.0, 0.0)
        self.range_marker_enabled = False
        self.floating_indicator = 0.0
        self.selected_indicator: int | None = None
        self._indicators: list[float] = []

    @property
    def indicators(self) -> list[float]:
        return list(self._indicators)

    def set_range(self, minimum: float, maximum: float) -> None:
        if not maximum > minimum:
            raise ValueError("range maximum must exceed its minimum")
        self.minimum = minimum
        self.maximum = maximum

    def add_indicator(self, value: float) -> None:
        bisect.insort(self._indicators, value)

    def remove_indicator(self, value: float) -> None:
        """Remove the first marker equal to ``value``, if any."""
        if value in self._indicators:
            self._indicators.remove(value)

    def clear_indicators(self) -> None:
        self._indicators.clear()

    def set_floating_indicator(self, value: float) -> None:
        """Move the floating marker; it snaps when it sits on a fixed marker."""
        self.floating_indicator = value
        self.selected_indicator = None
        for index, indicator in enumerate(self._indicators):
            if indicator == value:
                self.selected_indicator = index

    def snapped(self) -> bool:
        return self.selected_indicator is not None

    def find_indicator(self, x: int, pick_window_size: int = 5) -> float | None:
        """The marker nearest pixel ``x`` within the pick window, or None."""
        best_distance = pick_window_size
        found = None
        for indicator in self._indicators:
            distance = abs(x - self.to_window_x(indicator))
            if distance * 2 <= pick_window_size and distance < best_distance:
                best_distance = distance
                found = indicator
        return found

    def set_range_marker(self, low: float, high: float) -> None:
        self.range_marker = (low, high)

    def to_window_x(self, value: float) -> int:
        if self.width > 1:
            return int(
                (value - self.minimum) * (self.width - 1) / (self.maximum - self.minimum) + 0.5
            )
        return 0

    def from_window_x(self, x: int) -> float:
        if self.width > 1:
            return x * (self.maximum - self.minimum) / (self.width - 1) + self.minimum
        return 0.0