"""Tests for the edge reader, the view driver, and markup export."""

import json
from dataclasses import FrozenInstanceError

import numpy as np
import pytest

from wireframe_pipeline import (
    DEFAULT_VIEWS,
    CanvasConfig,
    LineSegment,
    TransformConfig,
    ViewConfig,
    build_views,
    collect_segments,
    format_segment_row,
    parse_wireframe,
    point_pair_matrix,
    read_wireframe,
    render_html,
    render_svg,
    render_views,
    svg_line_element,
    write_debug_json,
    write_html,
    write_svg,
)


def _record(i: int) -> str:
    return f"{i} 0 0 {i} 1 0"


def test_single_record_yields_one_edge() -> None:
    edges = parse_wireframe("0 0 0 1 0 0\n")
    assert len(edges) == 1
    np.testing.assert_array_equal(edges[0], point_pair_matrix((0, 0, 0), (1, 0, 0)))


def test_record_may_span_lines() -> None:
    edges = parse_wireframe("0 0 0\n1 0 0\n\n2 2 2\n3 3 3")
    assert len(edges) == 2


def test_five_value_record_yields_no_edges(capsys) -> None:
    assert parse_wireframe("0 0 0 1 0") == []
    assert "has 5 of 6 values" in capsys.readouterr().err


def test_short_trailing_record_keeps_earlier_edges(capsys) -> None:
    edges = parse_wireframe("0 0 0 1 0 0\n1 1 1 2 2")
    assert len(edges) == 1
    assert "Edge record 2" in capsys.readouterr().err


def test_non_numeric_record_stops_reading(capsys) -> None:
    edges = parse_wireframe("0 0 0 1 0 0\n1 1 x 2 2 2\n3 3 3 4 4 4")
    assert len(edges) == 1
    assert "not finite numeric" in capsys.readouterr().err


def test_non_finite_values_stop_reading(capsys) -> None:
    assert parse_wireframe("0 0 0 nan 1 0") == []
    assert parse_wireframe("0 0 0 1 inf 0") == []
    assert parse_wireframe("0 0 0 1 0 -Infinity") == []
    assert "not finite numeric" in capsys.readouterr().err


def test_underscore_separated_digits_are_malformed(capsys) -> None:
    assert parse_wireframe("1_0 0 0 nan inf 0") == []
    assert len(parse_wireframe("0 0 0 1 0 0\n1_0 0 0 1 0 0")) == 1
    assert "1_0" in capsys.readouterr().err


def test_empty_input_is_an_empty_scene(capsys) -> None:
    assert parse_wireframe("  \n\t") == []
    assert capsys.readouterr().err == ""


def test_capacity_keeps_first_edges_in_order(capsys) -> None:
    text = "\n".join(_record(i) for i in range(10))
    edges = parse_wireframe(text, max_edges=4)
    assert len(edges) == 4
    assert [float(edge[0, 0]) for edge in edges] == [0.0, 1.0, 2.0, 3.0]
    assert "capacity of 4 edges" in capsys.readouterr().err


def test_exact_capacity_is_not_reported(capsys) -> None:
    text = "\n".join(_record(i) for i in range(4)) + "\n"
    assert len(parse_wireframe(text, max_edges=4)) == 4
    assert capsys.readouterr().err == ""


def test_parse_rejects_non_positive_capacity() -> None:
    with pytest.raises(ValueError):
        parse_wireframe("0 0 0 1 0 0", max_edges=0)


def test_read_wireframe_from_file(tmp_path) -> None:
    path = tmp_path / "edges.txt"
    path.write_text("0 0 0 1 0 0\n0 0 0 0 0 1\n", encoding="utf-8")
    assert len(read_wireframe(path)) == 2


def test_read_wireframe_missing_file(tmp_path) -> None:
    missing = tmp_path / "nope.txt"
    with pytest.raises(FileNotFoundError, match="nope.txt"):
        read_wireframe(missing)


def test_read_wireframe_undecodable_file_names_file(tmp_path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"0 0 0 1 0 0\xe9")
    with pytest.raises(OSError, match="latin1.txt"):
        read_wireframe(path)


def test_render_views_is_view_major_with_view_colours() -> None:
    edges = parse_wireframe("0 0 0 1 0 0\n0 0 0 0 1 0\n0 0 0 0 0 1")
    calls = []

    def sink(x1, y1, x2, y2, color):
        calls.append((x1, y1, x2, y2, color))

    total = render_views(edges, sink)
    assert total == 4 * len(edges) == len(calls)
    colours = [call[4] for call in calls]
    assert colours == [view.color for view in DEFAULT_VIEWS for _ in edges]
    assert colours[:3] == ["magenta"] * 3
    assert colours[-3:] == ["purple"] * 3


def test_render_views_empty_scene_never_calls_sink() -> None:
    calls = []
    assert render_views([], lambda *args: calls.append(args)) == 0
    assert calls == []


def test_collect_segments_uses_config() -> None:
    edges = [point_pair_matrix((0, 0, 0), (1, 0, 0))]
    views = [ViewConfig(scale=1.0, xt=0.0, yt=0.0, zt=0.0, color="red")]
    segments = collect_segments(edges, views=views, config=TransformConfig(0.0, 0.0, 0.0))
    assert segments == [LineSegment(x1=0.0, y1=0.0, x2=1.0, y2=0.0, color="red")]


def test_build_views_replaces_colours_only() -> None:
    views = build_views(["red", "green", "blue", "black"])
    assert [v.color for v in views] == ["red", "green", "blue", "black"]
    assert [v.scale for v in views] == [200.0, 150.0, 100.0, 50.0]
    assert DEFAULT_VIEWS[0].color == "magenta"


def test_build_views_requires_four_colours() -> None:
    with pytest.raises(ValueError, match="Expected 4 colours"):
        build_views(["red"])


def test_svg_line_element_format() -> None:
    segment = LineSegment(x1=125.0, y1=125.0, x2=266.42, y2=173.37, color="magenta")
    assert svg_line_element(segment) == (
        '<line x1="125.0" y1="125.0" x2="266.4" y2="173.4" style="stroke: magenta;" />'
    )


def test_format_segment_row() -> None:
    segment = LineSegment(x1=125.0, y1=125.0, x2=266.4214, y2=173.369, color="cyan")
    assert format_segment_row(segment) == " 125.00  125.00  266.42  173.37"


def test_write_html_document(tmp_path) -> None:
    segments = [
        LineSegment(0.0, 0.0, 1.0, 1.0, "magenta"),
        LineSegment(2.0, 2.0, 3.0, 3.0, "cyan"),
    ]
    path = tmp_path / "out" / "page.html"
    write_html(path, segments, CanvasConfig(title="Cube <1>"))
    lines = path.read_text(encoding="utf-8").splitlines()
    assert lines[0] == "<!DOCTYPE html>"
    assert "<title>Cube &lt;1&gt;</title>" in lines
    assert '<svg width="500px" height="500px">' in lines
    line_rows = [row for row in lines if row.startswith("<line")]
    assert len(line_rows) == 2
    assert "magenta" in line_rows[0] and "cyan" in line_rows[1]
    assert lines[-3:] == ["</svg>", "</body>", "</html>"]


def test_write_html_unwritable_path_names_file(tmp_path) -> None:
    blocker = tmp_path / "blocker"
    blocker.write_text("", encoding="utf-8")
    with pytest.raises(OSError, match="Unable to write output file"):
        write_html(blocker / "page.html", [], CanvasConfig())


def test_write_svg_document(tmp_path) -> None:
    path = tmp_path / "page.svg"
    write_svg(path, [LineSegment(0.0, 0.0, 1.0, 1.0, "blue")], CanvasConfig(width=320, height=240))
    text = path.read_text(encoding="utf-8")
    assert text.startswith('<?xml version="1.0" encoding="UTF-8"?>')
    assert 'viewBox="0 0 320 240"' in text
    assert 'xmlns="http://www.w3.org/2000/svg"' in text
    assert text.count("<line ") == 1


def test_write_debug_json(tmp_path) -> None:
    path = tmp_path / "debug.json"
    segments = [LineSegment(0.0, 0.0, 1.0, 1.0, "purple")]
    write_debug_json(path, TransformConfig(), CanvasConfig(), DEFAULT_VIEWS, 1, segments)
    payload = json.loads(path.read_text(encoding="utf-8"))
    assert payload["stats"] == {"edges_count": 1, "segments_count": 1}
    assert payload["transform_degrees"]["rotation_z"] == pytest.approx(-45.0)
    assert len(payload["views"]) == 4
    assert payload["segments"][0]["color"] == "purple"


def test_render_functions_match_written_files(tmp_path) -> None:
    segments = [LineSegment(0.0, 0.0, 1.0, 1.0, "blue")]
    canvas = CanvasConfig(width=320, height=240)
    write_html(tmp_path / "page.html", segments, canvas)
    write_svg(tmp_path / "page.svg", segments, canvas)
    assert (tmp_path / "page.html").read_text(encoding="utf-8") == render_html(segments, canvas)
    assert (tmp_path / "page.svg").read_text(encoding="utf-8") == render_svg(segments, canvas)


def test_view_config_is_frozen() -> None:
    with pytest.raises(FrozenInstanceError):
        DEFAULT_VIEWS[0].color = "black"
    assert DEFAULT_VIEWS[0].color == "magenta"
