"""Material, draw-mode and quality state, and output of drawing primitives.

Primitives are either written to an open ``.ray`` scene file or, when no
file is open, recorded as :class:`Primitive` entries for a renderer to draw.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import IntEnum
from typing import TextIO

from animodeler.vectors import Vec3

Matrix = tuple[tuple[float, float, float, float], ...]

IDENTITY: Matrix = (
    (1.0, 0.0, 0.0, 0.0),
    (0.0, 1.0, 0.0, 0.0),
    (0.0, 0.0, 1.0, 0.0),
    (0.0, 0.0, 0.0, 1.0),
)

RAY_FILE_HEADER = (
    "SBT-raytracer 1.0\n\n"
    "camera { fov=30; }\n\n"
    "directional_light { direction=(-1,-1,-1); color=(0.7,0.7,0.7); }\n\n"
)


class DrawMode(IntEnum):
    NONE = 0
    NORMAL = 1
    WIREFRAME = 2
    FLATSHADE = 3


class Quality(IntEnum):
    HIGH = 0
    MEDIUM = 1
    LOW = 2
    POOR = 3


_DIVISIONS = {
    Quality.HIGH: 32,
    Quality.MEDIUM: 20,
    Quality.LOW: 12,
    Quality.POOR: 8,
}


@dataclass(frozen=True)
class Primitive:
    """A primitive drawn while no ray file was open."""

    kind: str
    params: tuple
    draw_mode: DrawMode
    diffuse: tuple[float, float, float, float]
    modelview: Matrix
    divisions: int | None = None
    caps: tuple[str, ...] = ()


def triangle_normal(p1: Sequence[float], p2: Sequence[float], p3: Sequence[float]) -> Vec3:
    """Cross product of the edges p1->p2 and p1->p3 (not normalised)."""
    a, b, c = p2[0] - p1[0], p2[1] - p1[1], p2[2] - p1[2]
    d, e, f = p3[0] - p1[0], p3[1] - p1[1], p3[2] - p1[2]
    return Vec3(b * f - c * e, c * d - a * f, a * e - b * d)


class DrawState:
    """Current colours, draw mode, quality, transform and output target."""

    def __init__(self) -> None:
        self.draw_mode = DrawMode.NORMAL
        self.quality = Quality.MEDIUM
        self.ambient_color = (0.0, 0.0, 0.0, 1.0)
        self.diffuse_color = (0.5, 0.5, 0.5, 1.0)
        self.specular_color = (1.0, 1.0, 1.0, 1.0)
        self.shininess = 0.5
        self.modelview: Matrix = IDENTITY
        self.ray_file: TextIO | None = None
        self.primitives: list[Primitive] = []

    def set_ambient_color(self, r: float, g: float, b: float) -> None:
        self.ambient_color = (float(r), float(g), float(b), 1.0)

    def set_diffuse_color(self, r: float, g: float, b: float, a: float = 1.0) -> None:
        self.diffuse_color = (float(r), float(g), float(b), float(a))

    def set_specular_color(self, r: float, g: float, b: float) -> None:
        self.specular_color = (float(r), float(g), float(b), 1.0)

    def set_shininess(self, s: float) -> None:
        self.shininess = float(s)

    def set_modelview(self, matrix: Sequence[Sequence[float]]) -> None:
        """Set the current model-view transform as a row-major 4x4 matrix."""
        rows = [tuple(float(v) for v in row) for row in matrix]
        if len(rows) != 4 or any(len(row) != 4 for row in rows):
            raise ValueError("model-view matrix must be 4x4")
        self.modelview = tuple(rows)  # type: ignore[assignment]

    def divisions(self) -> int:
        """Number of slices used for round primitives at the current quality."""
        return _DIVISIONS[self.quality]

    def open_ray_file(self, path: str) -> None:
        """Start writing primitives to a ray file, closing any open one."""
        if not path:
            raise ValueError("no ray file name given")
        if self.ray_file is not None:
            self.close_ray_file()
        handle = open(path, "w", encoding="ascii")
        handle.write(RAY_FILE_HEADER)
        self.ray_file = handle

    def close_ray_file(self) -> None:
        if self.ray_file is not None:
            self.ray_file.close()
        self.ray_file = None

    def __enter__(self) -> DrawState:
        return self

    def __exit__(self, *args) -> None:
        self.close_ray_file()

    def _write_transform(self, out: TextIO) -> None:
        r = [", ".join("")]  # placeholder removed below
        del r
        rows = [",".join("%f" % v for v in row) for row in self.modelview]
        out.write(
            "transform(\n    (%s),\n    (%s),\n     (%s),\n    (%s),\n" % tuple(rows)
        )

    def _write_material(self, out: TextIO) -> None:
        d = self.diffuse_color
        out.write(
            "material={\n    diffuse=(%f,%f,%f);\n    ambient=(%f,%f,%f);\n}\n"
            % (d[0], d[1], d[2], d[0], d[1], d[2])
        )

    def _write(self, opening: str, closing: str) -> None:
        out = self.ray_file
        assert out is not None
        self._write_transform(out)
        out.write(opening)
        self._write_material(out)
        out.write(closing)

    def _record(self, kind: str, params: tuple, divisions: int | None = None,
                caps: tuple[str, ...] = ()) -> None:
        self.primitives.append(
            Primitive(kind, params, self.draw_mode, self.diffuse_color,
                      self.modelview, divisions, caps)
        )

    def draw_sphere(self, r: float) -> None:
        """A sphere of radius ``r`` about the origin."""
        if self.ray_file is not None:
            self._write("scale(%f,%f,%f,sphere {\n" % (r, r, r), "}))\n")
        else:
            self._record("sphere", (float(r),), self.divisions())

    def draw_box(self, x: float, y: float, z: float) -> None:
        """An axis-aligned box from the origin to (x, y, z)."""
        if self.ray_file is not None:
            self._write(
                "scale(%f,%f,%f,translate(0.5,0.5,0.5,box {\n" % (x, y, z), "})))\n"
            )
        else:
            self._record("box", (float(x), float(y), float(z)))

    def draw_cylinder(self, h: float, r1: float, r2: float) -> None:
        """A cylinder along z from 0 to ``h``, radius ``r1`` at 0 and ``r2`` at ``h``."""
        if self.ray_file is not None:
            self._write(
                "cone { height=%f; bottom_radius=%f; top_radius=%f;\n" % (h, r1, r2), "})\n"
            )
        else:
            caps = tuple(
                name for name, radius in (("bottom", r1), ("top", r2)) if radius > 0.0
            )
            self._record("cylinder", (float(h), float(r1), float(r2)), self.divisions(), caps)

    def draw_triangle(self, p1: Sequence[float], p2: Sequence[float],
                      p3: Sequence[float]) -> None:
        """A triangle with counter-clockwise vertices."""
        points = [tuple(float(v) for v in p) for p in (p1, p2, p3)]
        if any(len(p) != 3 for p in points):
            raise ValueError("triangle vertices need three coordinates")
        if self.ray_file is not None:
            flat = tuple(v for p in points for v in p)
            self._write(
                "polymesh { points=((%f,%f,%f),(%f,%f,%f),(%f,%f,%f)); faces=((0,1,2));\n"
                % flat,
                "})\n",
            )
        else:
            normal = triangle_normal(*points)
            self._record("triangle", (*points, tuple(normal)))