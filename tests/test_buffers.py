import pytest

from audiocaster.buffers import (
    MAX_LINE_COUNT,
    MAX_VERTEX_COUNT,
    LineBuffer,
    VertexBuffer,
    coords_to_vertices,
    parse_floats,
)
from audiocaster.line_object import ObjectType
from audiocaster.vec2 import Vec2


def test_parse_floats_reads_fields():
    assert parse_floats("1,2.5,-3,4e2") == [1.0, 2.5, -3.0, 4e2]


def test_parse_floats_ignores_trailing_garbage_and_whitespace():
    assert parse_floats(" 1.5abc, 7\r") == [1.5, 7.0]


@pytest.mark.parametrize("text", ["", "1,2,", "1,x,3"])
def test_parse_floats_rejects_empty_or_bad_field(text):
    with pytest.raises(ValueError):
        parse_floats(text)


def test_coords_to_vertices_pairs_values():
    assert coords_to_vertices([1.0, 2.0, 3.0, 4.0]) == [Vec2(1.0, 2.0), Vec2(3.0, 4.0)]


def test_coords_to_vertices_drops_odd_coordinate():
    assert coords_to_vertices([1.0, 2.0, 3.0]) == [Vec2(1.0, 2.0)]


def test_coords_to_vertices_is_capped():
    coords = [float(i) for i in range(MAX_VERTEX_COUNT * 2 + 50)]
    vertices = coords_to_vertices(coords)
    assert len(vertices) == MAX_VERTEX_COUNT
    assert vertices[-1] == Vec2(coords[2 * MAX_VERTEX_COUNT - 2], coords[2 * MAX_VERTEX_COUNT - 1])


def test_line_buffer_builds_walls_from_pairs():
    vertices = [Vec2(0.0, 0.0), Vec2(10.0, 0.0), Vec2(0.0, 5.0), Vec2(0.0, 15.0), Vec2(9.0, 9.0)]
    buffer = LineBuffer()
    buffer.load_data(vertices)
    assert len(buffer) == 2
    assert [(line.start, line.end) for line in buffer] == [
        (vertices[0], vertices[1]),
        (vertices[2], vertices[3]),
    ]
    assert all(line.type is ObjectType.WALL for line in buffer)


def test_line_buffer_reload_replaces_lines():
    buffer = LineBuffer()
    buffer.load_data([Vec2(0.0, 0.0), Vec2(1.0, 1.0)])
    buffer.load_data([Vec2(5.0, 5.0), Vec2(6.0, 6.0)])
    assert [(line.start, line.end) for line in buffer] == [(Vec2(5.0, 5.0), Vec2(6.0, 6.0))]


def test_line_buffer_is_capped():
    vertices = [Vec2(float(i), float(i + 1)) for i in range(MAX_VERTEX_COUNT + 10)]
    buffer = LineBuffer()
    buffer.load_data(vertices)
    assert len(buffer) == MAX_LINE_COUNT


def test_vertex_buffer_reads_first_line(tmp_path):
    path = tmp_path / "vertices.csv"
    path.write_text("1,2,3,4,5,6,7,8\n100,200\n", encoding="utf-8")
    buffer = VertexBuffer()
    result = buffer.load_data(path)
    expected = [Vec2(1.0, 2.0), Vec2(3.0, 4.0), Vec2(5.0, 6.0), Vec2(7.0, 8.0)]
    assert result == expected
    assert buffer.vertices == expected


def test_vertex_buffer_into_line_buffer(tmp_path):
    path = tmp_path / "vertices.csv"
    path.write_text("0,0,50,0,50,0,50,50", encoding="utf-8")
    vertices = VertexBuffer()
    vertices.load_data(path)
    lines = LineBuffer()
    lines.load_data(vertices.vertices)
    assert len(lines) == 2
    assert lines.lines[1].end == Vec2(50.0, 50.0)


def test_vertex_buffer_missing_file(tmp_path):
    with pytest.raises(OSError):
        VertexBuffer().load_data(tmp_path / "missing.csv")


def test_vertex_buffer_empty_file(tmp_path):
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")
    with pytest.raises(ValueError):
        VertexBuffer().load_data(path)