"""Fixed-size two-, three- and four-element vectors."""

from __future__ import annotations

import math
from collections.abc import Iterator
from numbers import Real


class _FixedVector:
    """Common behaviour of the fixed-size vectors."""

    __slots__ = ("n",)
    __hash__ = None  # type: ignore[assignment]

    def __init__(self, *values: float) -> None:
        self.n = list(values)

    def __len__(self) -> int:
        return len(self.n)

    def __getitem__(self, index):
        return self.n[index]

    def __setitem__(self, index, value) -> None:
        self.n[index] = value

    def __iter__(self) -> Iterator[float]:
        return iter(self.n)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({', '.join(repr(v) for v in self.n)})"

    def __str__(self) -> str:
        return " ".join(f"{v:g}" for v in self.n)

    def _same(self, other) -> bool:
        return type(other) is type(self)

    def __add__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(*(a + b for a, b in zip(self.n, other.n)))

    def __sub__(self, other):
        if not self._same(other):
            return NotImplemented
        return type(self)(*(a - b for a, b in zip(self.n, other.n)))

    def __iadd__(self, other):
        if not self._same(other):
            return NotImplemented
        self.n = [a + b for a, b in zip(self.n, other.n)]
        return self

    def __isub__(self, other):
        if not self._same(other):
            return NotImplemented
        self.n = [a - b for a, b in zip(self.n, other.n)]
        return self

    def __imul__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self.n = [a * scalar for a in self.n]
        return self

    def __itruediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        self.n = [a / scalar for a in self.n]
        return self

    def __neg__(self):
        return type(self)(*(-a for a in self.n))

    def __mul__(self, other):
        """Dot product with a vector of the same kind, or scaling by a number."""
        if isinstance(other, Real):
            return type(self)(*(a * other for a in self.n))
        if self._same(other):
            return sum((a * b for a, b in zip(self.n, other.n)), 0.0)
        return NotImplemented

    def __rmul__(self, other):
        if isinstance(other, Real):
            return type(self)(*(a * other for a in self.n))
        return NotImplemented

    def __truediv__(self, scalar):
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(*(a / scalar for a in self.n))

    def __eq__(self, other) -> bool:
        if not self._same(other):
            return NotImplemented
        return self.n == other.n

    def length2(self) -> float:
        return sum((a * a for a in self.n), 0.0)

    def length(self) -> float:
        return math.sqrt(self.length2())

    def normalize(self) -> None:
        """Scale the vector in place to unit length."""
        size = self.length()
        if size == 0:
            raise ZeroDivisionError("cannot normalize a zero-length vector")
        self.n = [a / size for a in self.n]

    def is_zero(self) -> bool:
        return all(a == 0 for a in self.n)

    def zero_elements(self) -> None:
        self.n = [0.0] * len(self.n)


class Vec2(_FixedVector):
    """A two-element vector."""

    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0) -> None:
        super().__init__(x, y)


class Vec3(_FixedVector):
    """A three-element vector."""

    __slots__ = ()

    def __init__(self, x: float = 0.0, y: float = 0.0, z: float = 0.0) -> None:
        super().__init__(x, y, z)

    def __mul__(self, other):
        if isinstance(other, Vec4):
            return dot_affine(self, other)
        return super().__mul__(other)

    def __xor__(self, other):
        """Cross product."""
        if not isinstance(other, Vec3):
            return NotImplemented
        a, b = self.n, other.n
        return Vec3(
            a[1] * b[2] - a[2] * b[1],
            a[2] * b[0] - a[0] * b[2],
            a[0] * b[1] - a[1] * b[0],
        )

    def clamp(self) -> None:
        """Clamp every element in place into the range [0, 1]."""
        self.n = [0.0 if a < 0 else 1.0 if a > 1 else a for a in self.n]


class Vec4(_FixedVector):
    """A four-element vector."""

    __slots__ = ()

    def __init__(
        self, x: float = 0.0, y: float = 0.0, z: float = 0.0, w: float = 0.0
    ) -> None:
        super().__init__(x, y, z, w)

    def __mul__(self, other):
        if isinstance(other, Vec3):
            return dot_affine(other, self)
        return super().__mul__(other)


def dot_affine(v3: Vec3, v4: Vec4) -> float:
    """Dot product of a point with a plane: the fourth element is added as is."""
    return v3[0] * v4[0] + v3[1] * v4[1] + v3[2] * v4[2] + v4[3]


def vec4to3(v: Vec4) -> Vec3:
    """Drop the fourth element."""
    return Vec3(v[0], v[1], v[2])


def _parse(text: str, count: int) -> list[float]:
    tokens = text.split()
    if len(tokens) < count:
        raise ValueError(f"expected {count} numbers, found {len(tokens)}")
    return [float(token) for token in tokens[:count]]


def parse_vec3(text: str) -> Vec3:
    """Read the first three whitespace-separated numbers of a string."""
    return Vec3(*_parse(text, 3))


def parse_vec4(text: str) -> Vec4:
    """Read the first four whitespace-separated numbers of a string."""
    return Vec4(*_parse(text, 4))