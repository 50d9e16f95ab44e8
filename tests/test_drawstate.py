import pytest

from animodeler.drawstate import (
    IDENTITY,
    RAY_FILE_HEADER,
    DrawMode,
    DrawState,
    Quality,
    triangle_normal,
)


def test_defaults():
    state = DrawState()
    assert state.draw_mode is DrawMode.NORMAL
    assert state.quality is Quality.MEDIUM
    assert state.ambient_color == (0.0, 0.0, 0.0, 1.0)
    assert state.diffuse_color == (0.5, 0.5, 0.5, 1.0)
    assert state.specular_color == (1.0, 1.0, 1.0, 1.0)
    assert state.shininess == 0.5
    assert state.modelview == IDENTITY


@pytest.mark.parametrize(
    "quality, expected",
    [(Quality.HIGH, 32), (Quality.MEDIUM, 20), (Quality.LOW, 12), (Quality.POOR, 8)],
)
def test_divisions(quality, expected):
    state = DrawState()
    state.quality = quality
    assert state.divisions() == expected


def test_colour_setters():
    state = DrawState()
    state.set_ambient_color(0.1, 0.2, 0.3)
    state.set_diffuse_color(0.4, 0.5, 0.6, 0.7)
    state.set_specular_color(0.8, 0.9, 1.0)
    state.set_shininess(3)
    assert state.ambient_color == (0.1, 0.2, 0.3, 1.0)
    assert state.diffuse_color == (0.4, 0.5, 0.6, 0.7)
    assert state.specular_color == (0.8, 0.9, 1.0, 1.0)
    assert state.shininess == 3.0


def test_modelview_must_be_4x4():
    state = DrawState()
    with pytest.raises(ValueError):
        state.set_modelview([[1, 0, 0], [0, 1, 0], [0, 0, 1]])


def test_primitives_recorded_without_ray_file():
    state = DrawState()
    state.quality = Quality.LOW
    state.draw_sphere(2)
    state.draw_box(1, 2, 3)
    kinds = [p.kind for p in state.primitives]
    assert kinds == ["sphere", "box"]
    assert state.primitives[0].params == (2.0,)
    assert state.primitives[0].divisions == 12
    assert state.primitives[1].params == (1.0, 2.0, 3.0)


def test_cylinder_caps():
    state = DrawState()
    state.draw_cylinder(2, 1, 0)
    state.draw_cylinder(2, 0, 1)
    state.draw_cylinder(2, 1, 1)
    assert [p.caps for p in state.primitives] == [("bottom",), ("top",), ("bottom", "top")]


def test_triangle_normal_is_perpendicular_to_edges():
    p1, p2, p3 = (1.0, 2.0, 0.5), (3.0, -1.0, 2.0), (0.0, 4.0, 1.0)
    n = triangle_normal(p1, p2, p3)
    e1 = [b - a for a, b in zip(p1, p2)]
    e2 = [b - a for a, b in zip(p1, p3)]
    assert sum(x * y for x, y in zip(n, e1)) == pytest.approx(0.0)
    assert sum(x * y for x, y in zip(n, e2)) == pytest.approx(0.0)
    assert n.length() > 0


def test_triangle_normal_counter_clockwise_points_up():
    n = triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0))
    assert list(n) == [0, 0, 1]


def test_triangle_records_normal():
    state = DrawState()
    state.draw_triangle((0, 0, 0), (1, 0, 0), (0, 1, 0))
    prim = state.primitives[0]
    assert prim.kind == "triangle"
    assert prim.params[3] == tuple(triangle_normal((0, 0, 0), (1, 0, 0), (0, 1, 0)))


def test_triangle_rejects_bad_vertex():
    with pytest.raises(ValueError):
        DrawState().draw_triangle((0, 0), (1, 0, 0), (0, 1, 0))


def test_open_ray_file_writes_header(tmp_path):
    path = tmp_path / "scene.ray"
    with DrawState() as state:
        state.open_ray_file(str(path))
    assert state.ray_file is None
    assert path.read_text() == RAY_FILE_HEADER


def test_open_ray_file_requires_name():
    with pytest.raises(ValueError):
        DrawState().open_ray_file("")


def test_sphere_written_to_ray_file(tmp_path):
    path = tmp_path / "scene.ray"
    state = DrawState()
    state.open_ray_file(str(path))
    state.draw_sphere(2)
    state.close_ray_file()
    text = path.read_text()
    body = text[len(RAY_FILE_HEADER):]
    assert text.startswith(RAY_FILE_HEADER)
    assert body.startswith("transform(\n")
    assert "scale(2.000000,2.000000,2.000000,sphere {\n" in body
    assert "material={\n    diffuse=(0.500000,0.500000,0.500000);" in body
    assert body.endswith("}))\n")
    assert state.primitives == []


def test_ray_file_uses_modelview_rows(tmp_path):
    path = tmp_path / "scene.ray"
    state = DrawState()
    state.set_modelview([[1, 0, 0, 5], [0, 1, 0, 6], [0, 0, 1, 7], [0, 0, 0, 1]])
    state.open_ray_file(str(path))
    state.draw_box(1, 1, 1)
    state.close_ray_file()
    body = path.read_text()[len(RAY_FILE_HEADER):]
    lines = body.splitlines()
    assert lines[1].strip() == "(1.000000,0.000000,0.000000,5.000000),"
    assert body.endswith("})))\n")


def test_reopening_closes_previous(tmp_path):
    first = tmp_path / "a.ray"
    second = tmp_path / "b.ray"
    state = DrawState()
    state.open_ray_file(str(first))
    old = state.ray_file
    state.open_ray_file(str(second))
    assert old.closed
    state.draw_cylinder(1, 1, 1)
    state.close_ray_file()
    assert first.read_text() == RAY_FILE_HEADER
    assert "cone { height=1.000000;" in second.read_text()