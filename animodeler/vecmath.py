"""Variable-length numeric vectors."""

from __future__ import annotations

import math
from collections.abc import Iterable, Iterator
from numbers import Real


class VectorSizeMismatch(ValueError):
    """Raised when two vectors of different sizes are combined."""


class Vec:
    """A mutable vector of any number of elements."""

    __hash__ = None  # type: ignore[assignment]

    def __init__(self, values: Iterable[float] = ()) -> None:
        self._values = list(values)

    def _check_size(self, other: Vec) -> None:
        if len(self._values) != len(other._values):
            raise VectorSizeMismatch(
                f"vector sizes differ: {len(self._values)} and {len(other._values)}"
            )

    def __len__(self) -> int:
        return len(self._values)

    def __getitem__(self, index):
        return self._values[index]

    def __setitem__(self, index, value) -> None:
        self._values[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self._values)

    def __repr__(self) -> str:
        return f"Vec({self._values!r})"

    def __add__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_size(other)
        return Vec(a + b for a, b in zip(self._values, other._values))

    def __sub__(self, other: Vec) -> Vec:
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_size(other)
        return Vec(a - b for a, b in zip(self._values, other._values))

    def __neg__(self) -> Vec:
        return Vec(-a for a in self._values)

    def __mul__(self, other):
        """Dot product with another vector, or scaling by a number."""
        if isinstance(other, Vec):
            self._check_size(other)
            return sum((a * b for a, b in zip(self._values, other._values)), 0.0)
        if isinstance(other, Real):
            return Vec(a * other for a in self._values)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return Vec(a * other for a in self._values)
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return Vec(a / scalar for a in self._values)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Vec):
            return NotImplemented
        self._check_size(other)
        return all(a == b for a, b in zip(self._values, other._values))

    def __str__(self) -> str:
        return " ".join([str(len(self._values)), *(str(a) for a in self._values)])

    def resize(self, size: int, zero: bool = False) -> None:
        """Change the number of elements; optionally set them all to zero."""
        if size < 0:
            raise ValueError("vector size must not be negative")
        if size != len(self._values):
            kept = self._values[:size]
            self._values = kept + [0.0] * (size - len(kept))
        if zero:
            self.zero_elements()

    def length2(self) -> float:
        return sum((a * a for a in self._values), 0.0)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        size = self.length()
        if size == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        self._values = [a / size for a in self._values]

    def is_zero(self) -> bool:
        return all(a == 0 for a in self._values)

    def zero_elements(self) -> None:
        self._values = [0.0] * len(self._values)


def _pairwise(a: Vec, b: Vec, op) -> Vec:
    if len(a) != len(b):
        raise VectorSizeMismatch(f"vector sizes differ: {len(a)} and {len(b)}")
    return Vec(op(x, y) for x, y in zip(a, b))


def minimum(a: Vec, b: Vec) -> Vec:
    """Element-wise minimum."""
    return _pairwise(a, b, min)


def maximum(a: Vec, b: Vec) -> Vec:
    """Element-wise maximum."""
    return _pairwise(a, b, max)


def prod(a: Vec, b: Vec) -> Vec:
    """Element-wise product."""
    return _pairwise(a, b, lambda x, y: x * y)