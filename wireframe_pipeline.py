#!/usr/bin/env python3
"""
Wireframe multi-view pipeline.

Pipeline stage
--------------
This module reads a list of 3D line-segment edges, reduces each edge to 2D
with one combined homogeneous transform per displayed copy, and exports the
result as SVG line primitives embedded in an HTML document. The same
wireframe is drawn four times at different scales, offsets, and colours.

Input / output
--------------
Input is a whitespace-delimited text file with six floats per edge
(`x1 y1 z1 x2 y2 z2`). Output is an HTML5 page holding one `<svg>` canvas,
plus an optional standalone SVG and an optional debug JSON.

Key parameters
--------------
`TransformConfig` holds the three rotation angles shared by every copy.
`ViewConfig` holds the per-copy scale, translation, and colour.
`CanvasConfig` holds the canvas size and document title.

Coordinate conventions
----------------------
Matrices act on column vectors, so the rightmost factor of a product is
applied to a point first. The combined transform is
`P @ T @ S @ R_x @ R_y @ R_z`. Projection keeps `(x, z)` and drops `y`, so
model `z` becomes screen vertical. SVG `y` grows downward, which is why the
scaling step negates the `z` factor.
"""

from __future__ import annotations

import argparse
import html
import json
import math
import sys
from dataclasses import asdict, dataclass, replace
from pathlib import Path
from typing import Callable, Sequence

import numpy as np


MATRIX_SIZE = 4
PROJECTION_ROWS = 2
POINTS_PER_EDGE = 2
VALUES_PER_EDGE = 6
MAX_WIREFRAME_EDGES = 5000

DEFAULT_INPUT_PATH = Path("input.txt")
DEFAULT_OUTPUT_PATH = Path("output.html")
DEFAULT_TITLE = "Wireframe"
DEFAULT_COLORS = ("magenta", "cyan", "blue", "purple")

CANVAS_WIDTH = 500
CANVAS_HEIGHT = 500

ROTATION_ANGLE_X_DEG = 20.0
ROTATION_ANGLE_Y_DEG = 0.0
ROTATION_ANGLE_Z_DEG = -45.0


@dataclass
class TransformConfig:
    """
    Rotation angles shared by every displayed copy of the wireframe.

    Parameters
    ----------
    rotation_x, rotation_y, rotation_z : float
        Rotation about each model axis, in radians.

    Returns
    -------
    None
        Dataclass container.

    Notes
    -----
    Rotation about `z` is applied first, then `y`, then `x`.
    """

    rotation_x: float = math.radians(ROTATION_ANGLE_X_DEG)
    rotation_y: float = math.radians(ROTATION_ANGLE_Y_DEG)
    rotation_z: float = math.radians(ROTATION_ANGLE_Z_DEG)

    @classmethod
    def from_degrees(cls, x_deg: float, y_deg: float, z_deg: float) -> TransformConfig:
        return cls(
            rotation_x=math.radians(x_deg),
            rotation_y=math.radians(y_deg),
            rotation_z=math.radians(z_deg),
        )


@dataclass(frozen=True)
class ViewConfig:
    """
    Placement of one displayed copy on the canvas.

    Parameters
    ----------
    scale : float
        Uniform scale factor, in pixels per model unit.
    xt, yt, zt : float
        Translation applied after scaling, in pixels. `yt` is discarded by
        the projection but kept for a complete 3D offset.
    color : str
        SVG stroke colour name.
    """

    scale: float
    xt: float
    yt: float
    zt: float
    color: str


DEFAULT_VIEWS: tuple[ViewConfig, ...] = (
    ViewConfig(scale=200.0, xt=125.0, yt=0.0, zt=125.0, color=DEFAULT_COLORS[0]),
    ViewConfig(scale=150.0, xt=375.0, yt=0.0, zt=125.0, color=DEFAULT_COLORS[1]),
    ViewConfig(scale=100.0, xt=125.0, yt=0.0, zt=375.0, color=DEFAULT_COLORS[2]),
    ViewConfig(scale=50.0, xt=375.0, yt=0.0, zt=375.0, color=DEFAULT_COLORS[3]),
)


@dataclass
class CanvasConfig:
    """Canvas size in pixels and the HTML document title."""

    width: int = CANVAS_WIDTH
    height: int = CANVAS_HEIGHT
    title: str = DEFAULT_TITLE


@dataclass
class LineSegment:
    """
    Screen-space line emitted for one edge of one displayed copy.

    Parameters
    ----------
    x1, y1 : float
        Start point in pixels.
    x2, y2 : float
        End point in pixels.
    color : str
        SVG stroke colour name.
    """

    x1: float
    y1: float
    x2: float
    y2: float
    color: str


def build_views(colors: Sequence[str]) -> tuple[ViewConfig, ...]:
    """
    Return the four fixed view placements with the given colours.

    Parameters
    ----------
    colors : Sequence[str]
        One colour name per view, in view order.

    Returns
    -------
    tuple[ViewConfig, ...]
        Copies of `DEFAULT_VIEWS` with replaced colours.
    """

    if len(colors) != len(DEFAULT_VIEWS):
        raise ValueError(
            f"Expected {len(DEFAULT_VIEWS)} colours, got {len(colors)}."
        )
    return tuple(replace(view, color=str(color)) for view, color in zip(DEFAULT_VIEWS, colors))


# ---------------------------------------------------------------------------
# Matrix algebra
# ---------------------------------------------------------------------------


def multiply(
    a: np.ndarray,
    b: np.ndarray,
    a_rows: int,
    a_cols: int,
    b_cols: int,
) -> np.ndarray:
    """
    Compute the matrix product `a @ b` with explicitly stated shapes.

    Parameters
    ----------
    a : np.ndarray
        Left operand of shape `(a_rows, a_cols)`.
    b : np.ndarray
        Right operand of shape `(a_cols, b_cols)`.
    a_rows, a_cols, b_cols : int
        Expected dimensions. The row count of `b` equals `a_cols`.

    Returns
    -------
    np.ndarray
        New array of shape `(a_rows, b_cols)`.

    Notes
    -----
    The explicit dimensions are checked against both operands, so a caller
    that passes a 4x4 transform where a 2x4 projection is expected gets a
    `ValueError` instead of a silently truncated product.

    Assumptions
    -----------
    Operands hold finite floats; non-finite values propagate unchanged.
    """

    for name, value in (("a_rows", a_rows), ("a_cols", a_cols), ("b_cols", b_cols)):
        if isinstance(value, bool) or not isinstance(value, (int, np.integer)) or value <= 0:
            raise ValueError(f"{name} must be a positive integer, got {value!r}")

    left = np.asarray(a, dtype=np.float64)
    right = np.asarray(b, dtype=np.float64)
    if left.shape != (a_rows, a_cols):
        raise ValueError(
            f"Left operand has shape {left.shape}, expected {(a_rows, a_cols)}."
        )
    if right.shape != (a_cols, b_cols):
        raise ValueError(
            f"Right operand has shape {right.shape}, expected {(a_cols, b_cols)}."
        )
    return left @ right


# ---------------------------------------------------------------------------
# Transform builders
# ---------------------------------------------------------------------------


def rotation_matrix_x(angle: float) -> np.ndarray:
    """
    Build a 4x4 rotation about the model `x` axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians, counter-clockwise in the `y`/`z` plane.

    Returns
    -------
    np.ndarray
        Homogeneous transform matrix of shape `(4, 4)`.
    """

    c = math.cos(angle)
    s = math.sin(angle)
    out = np.eye(MATRIX_SIZE, dtype=np.float64)
    out[1, 1] = c
    out[1, 2] = -s
    out[2, 1] = s
    out[2, 2] = c
    return out


def rotation_matrix_y(angle: float) -> np.ndarray:
    """
    Build a 4x4 rotation about the model `y` axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians.

    Returns
    -------
    np.ndarray
        Homogeneous transform matrix of shape `(4, 4)`.

    Notes
    -----
    The sine terms sit at `[0, 2] = -sin` and `[2, 0] = +sin`, which is the
    transpose of the usual right-hand `y` rotation. The placement is kept
    because the pinned multi-view output depends on it; with the default
    `y` angle of zero both conventions coincide.
    """

    c = math.cos(angle)
    s = math.sin(angle)
    out = np.eye(MATRIX_SIZE, dtype=np.float64)
    out[0, 0] = c
    out[0, 2] = -s
    out[2, 0] = s
    out[2, 2] = c
    return out


def rotation_matrix_z(angle: float) -> np.ndarray:
    """
    Build a 4x4 rotation about the model `z` axis.

    Parameters
    ----------
    angle : float
        Rotation angle in radians, counter-clockwise in the `x`/`y` plane.

    Returns
    -------
    np.ndarray
        Homogeneous transform matrix of shape `(4, 4)`.
    """

    c = math.cos(angle)
    s = math.sin(angle)
    out = np.eye(MATRIX_SIZE, dtype=np.float64)
    out[0, 0] = c
    out[0, 1] = -s
    out[1, 0] = s
    out[1, 1] = c
    return out


def scaling_matrix(xs: float, ys: float, zs: float) -> np.ndarray:
    """Build a 4x4 diagonal scaling matrix with a trailing homogeneous 1."""

    out = np.eye(MATRIX_SIZE, dtype=np.float64)
    out[0, 0] = xs
    out[1, 1] = ys
    out[2, 2] = zs
    return out


def translation_matrix(xt: float, yt: float, zt: float) -> np.ndarray:
    """Build a 4x4 translation matrix with the offsets in column 3."""

    out = np.eye(MATRIX_SIZE, dtype=np.float64)
    out[0, 3] = xt
    out[1, 3] = yt
    out[2, 3] = zt
    return out


def projection_matrix() -> np.ndarray:
    """
    Build the parallel projection onto the model `x`/`z` plane.

    Returns
    -------
    np.ndarray
        Matrix of shape `(2, 4)` mapping `(x, y, z, w)` to `(x, z)`.

    Notes
    -----
    The projection has exactly two rows. Depth (`y`) and the homogeneous
    coordinate are discarded, so no perspective divide follows.
    """

    out = np.zeros((PROJECTION_ROWS, MATRIX_SIZE), dtype=np.float64)
    out[0, 0] = 1.0
    out[1, 2] = 1.0
    return out


# ---------------------------------------------------------------------------
# Composition and edge transform
# ---------------------------------------------------------------------------


def compose_transform(
    scale: float,
    xt: float,
    yt: float,
    zt: float,
    config: TransformConfig | None = None,
) -> np.ndarray:
    """
    Combine rotation, scaling, translation, and projection into one matrix.

    Parameters
    ----------
    scale : float
        Uniform scale factor, in pixels per model unit.
    xt, yt, zt : float
        Translation applied after scaling, in pixels.
    config : TransformConfig | None, optional
        Rotation angles. `None` uses the default 20, 0, and -45 degrees.

    Returns
    -------
    np.ndarray
        Combined transform of shape `(2, 4)` equal to
        `P @ T @ S @ R_x @ R_y @ R_z`.

    Notes
    -----
    The `z` scale is `-scale` because SVG vertical coordinates grow
    downward while model `z` grows upward.
    """

    if config is None:
        config = TransformConfig()

    rot_x = rotation_matrix_x(config.rotation_x)
    rot_y = rotation_matrix_y(config.rotation_y)
    rot_z = rotation_matrix_z(config.rotation_z)
    projection = projection_matrix()
    scaling = scaling_matrix(scale, scale, -scale)
    translation = translation_matrix(xt, yt, zt)

    n = MATRIX_SIZE
    yz = multiply(rot_y, rot_z, n, n, n)
    xyz = multiply(rot_x, yz, n, n, n)
    sxyz = multiply(scaling, xyz, n, n, n)
    tsxyz = multiply(translation, sxyz, n, n, n)
    return multiply(projection, tsxyz, PROJECTION_ROWS, n, n)


def point_pair_matrix(
    start: Sequence[float],
    end: Sequence[float],
) -> np.ndarray:
    """
    Store an edge as a homogeneous point pair.

    Parameters
    ----------
    start, end : Sequence[float]
        Edge endpoints `(x, y, z)` in model units.

    Returns
    -------
    np.ndarray
        Array of shape `(4, 2)`. Column 0 is `start`, column 1 is `end`, and
        row 3 holds the homogeneous coordinate `1.0` for both.
    """

    start_arr = np.asarray(start, dtype=np.float64)
    end_arr = np.asarray(end, dtype=np.float64)
    if start_arr.shape != (3,) or end_arr.shape != (3,):
        raise ValueError(
            f"Edge endpoints must have 3 coordinates, got {start_arr.shape} and {end_arr.shape}."
        )

    out = np.ones((MATRIX_SIZE, POINTS_PER_EDGE), dtype=np.float64)
    out[0:3, 0] = start_arr
    out[0:3, 1] = end_arr
    return out


def transform_edge(m: np.ndarray, edge: np.ndarray) -> tuple[float, float, float, float]:
    """
    Apply a combined transform to one edge.

    Parameters
    ----------
    m : np.ndarray
        Combined transform of shape `(2, 4)` from `compose_transform`.
    edge : np.ndarray
        Point pair of shape `(4, 2)` from `point_pair_matrix`.

    Returns
    -------
    tuple[float, float, float, float]
        Screen coordinates `(x1, y1, x2, y2)` in pixels.
    """

    result = multiply(m, edge, PROJECTION_ROWS, MATRIX_SIZE, POINTS_PER_EDGE)
    return (
        float(result[0, 0]),
        float(result[1, 0]),
        float(result[0, 1]),
        float(result[1, 1]),
    )


# ---------------------------------------------------------------------------
# Edge source
# ---------------------------------------------------------------------------


def _parse_value(token: str) -> float:
    # float() also takes digit separators like "1_0"; plain decimal only here.
    if "_" in token:
        raise ValueError(f"Invalid coordinate: {token!r}")
    value = float(token)
    if not math.isfinite(value):
        raise ValueError(f"Non-finite coordinate: {token!r}")
    return value


def parse_wireframe(text: str, max_edges: int = MAX_WIREFRAME_EDGES) -> list[np.ndarray]:
    """
    Parse whitespace-delimited edge records.

    Parameters
    ----------
    text : str
        Input text with six floats per edge: `x1 y1 z1 x2 y2 z2`.
    max_edges : int, optional
        Scene capacity. Records beyond it are dropped.

    Returns
    -------
    list[np.ndarray]
        Point pairs of shape `(4, 2)` in file order.

    Notes
    -----
    Records are read as a token stream, so line breaks inside a record are
    allowed. A non-numeric token (including `nan`, `inf`, and underscore
    digit separators) or a short trailing record ends reading;
    what was read so far is the complete scene. Both that case and capacity
    truncation are reported as `[WARN]` lines on stderr.
    """

    if max_edges <= 0:
        raise ValueError("max_edges must be > 0")

    tokens = text.split()
    edges: list[np.ndarray] = []
    pos = 0
    while pos < len(tokens):
        if len(edges) == max_edges:
            print(
                f"[WARN] Wireframe capacity of {max_edges} edges reached; "
                "ignoring remaining input.",
                file=sys.stderr,
            )
            break

        record = tokens[pos:pos + VALUES_PER_EDGE]
        record_no = len(edges) + 1
        if len(record) < VALUES_PER_EDGE:
            print(
                f"[WARN] Edge record {record_no} has {len(record)} of "
                f"{VALUES_PER_EDGE} values; stopping read.",
                file=sys.stderr,
            )
            break
        try:
            values = [_parse_value(token) for token in record]
        except ValueError:
            print(
                f"[WARN] Edge record {record_no} is not finite numeric: "
                f"{' '.join(record)!r}; stopping read.",
                file=sys.stderr,
            )
            break

        edges.append(point_pair_matrix(values[0:3], values[3:6]))
        pos += VALUES_PER_EDGE

    return edges


def read_wireframe(path: Path, max_edges: int = MAX_WIREFRAME_EDGES) -> list[np.ndarray]:
    """
    Read a wireframe edge file.

    Parameters
    ----------
    path : Path
        Input text file.
    max_edges : int, optional
        Scene capacity.

    Returns
    -------
    list[np.ndarray]
        Point pairs of shape `(4, 2)` in file order.
    """

    path = Path(path)
    if not path.is_file():
        raise FileNotFoundError(f"Wireframe input file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise OSError(f"Unable to read input file {path}: {exc}") from exc
    return parse_wireframe(text, max_edges=max_edges)


# ---------------------------------------------------------------------------
# View driver
# ---------------------------------------------------------------------------


def draw_wireframe(
    edges: Sequence[np.ndarray],
    m: np.ndarray,
    color: str,
    sink: Callable[[float, float, float, float, str], None],
) -> int:
    """Transform every edge with `m` and hand it to `sink`; return the call count."""

    count = 0
    for edge in edges:
        x1, y1, x2, y2 = transform_edge(m, edge)
        sink(x1, y1, x2, y2, color)
        count += 1
    return count


def render_views(
    edges: Sequence[np.ndarray],
    sink: Callable[[float, float, float, float, str], None],
    views: Sequence[ViewConfig] = DEFAULT_VIEWS,
    config: TransformConfig | None = None,
) -> int:
    """
    Draw the wireframe once per view.

    Parameters
    ----------
    edges : Sequence[np.ndarray]
        Point pairs of shape `(4, 2)`.
    sink : Callable[[float, float, float, float, str], None]
        Line-drawing sink receiving `(x1, y1, x2, y2, color)`.
    views : Sequence[ViewConfig], optional
        Displayed copies, drawn in order.
    config : TransformConfig | None, optional
        Rotation angles shared by every view.

    Returns
    -------
    int
        Number of sink calls, `len(views) * len(edges)`.

    Notes
    -----
    Output order is view-major: all edges of the first view, then all
    edges of the second view, and so on.
    """

    total = 0
    for view in views:
        m = compose_transform(view.scale, view.xt, view.yt, view.zt, config=config)
        total += draw_wireframe(edges, m, view.color, sink)
    return total


def collect_segments(
    edges: Sequence[np.ndarray],
    views: Sequence[ViewConfig] = DEFAULT_VIEWS,
    config: TransformConfig | None = None,
) -> list[LineSegment]:
    """Render all views into a list of `LineSegment` records."""

    segments: list[LineSegment] = []

    def sink(x1: float, y1: float, x2: float, y2: float, color: str) -> None:
        segments.append(LineSegment(x1=x1, y1=y1, x2=x2, y2=y2, color=color))

    render_views(edges, sink, views=views, config=config)
    return segments


# ---------------------------------------------------------------------------
# Markup export
# ---------------------------------------------------------------------------


def svg_line_element(segment: LineSegment) -> str:
    """Format one segment as an SVG `<line>` element."""

    return (
        f'<line x1="{segment.x1:.1f}" y1="{segment.y1:.1f}" '
        f'x2="{segment.x2:.1f}" y2="{segment.y2:.1f}" '
        f'style="stroke: {html.escape(segment.color)};" />'
    )


def format_segment_row(segment: LineSegment) -> str:
    """Format one segment as a fixed-width coordinate row."""

    return f"{segment.x1:7.2f} {segment.y1:7.2f} {segment.x2:7.2f} {segment.y2:7.2f}"


def _write_document(path: Path, text: str) -> None:
    path = Path(path)
    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
    except OSError as exc:
        raise OSError(f"Unable to write output file {path}: {exc}") from exc


def render_html(segments: Sequence[LineSegment], canvas: CanvasConfig) -> str:
    """
    Build an HTML5 page with one inline SVG canvas.

    Parameters
    ----------
    segments : Sequence[LineSegment]
        Screen-space segments in draw order.
    canvas : CanvasConfig
        Canvas size and document title.

    Returns
    -------
    str
        Complete document text ending in a newline.

    Notes
    -----
    Segments are emitted in the order given, so later views paint over
    earlier ones where they overlap.
    """

    rows: list[str] = [
        "<!DOCTYPE html>",
        "<html>",
        "<head>",
        f"<title>{html.escape(canvas.title)}</title>",
        "</head>",
        "<body>",
        f'<svg width="{canvas.width}px" height="{canvas.height}px">',
    ]
    rows.extend(svg_line_element(segment) for segment in segments)
    rows.extend(["</svg>", "</body>", "</html>"])
    return "\n".join(rows) + "\n"


def render_svg(segments: Sequence[LineSegment], canvas: CanvasConfig) -> str:
    """Build a standalone SVG document sized to the canvas."""

    rows: list[str] = [
        '<?xml version="1.0" encoding="UTF-8"?>',
        (
            f'<svg width="{canvas.width}" height="{canvas.height}" '
            f'viewBox="0 0 {canvas.width} {canvas.height}" '
            'fill="none" xmlns="http://www.w3.org/2000/svg">'
        ),
    ]
    rows.extend(svg_line_element(segment) for segment in segments)
    rows.append("</svg>")
    return "\n".join(rows) + "\n"


def render_debug_json(
    transform: TransformConfig,
    canvas: CanvasConfig,
    views: Sequence[ViewConfig],
    edges_count: int,
    segments: Sequence[LineSegment],
) -> str:
    """
    Build a JSON snapshot of the configuration and the rendered segments.

    Parameters
    ----------
    transform : TransformConfig
        Rotation angles used for every view.
    canvas : CanvasConfig
        Canvas size and title.
    views : Sequence[ViewConfig]
        Displayed copies.
    edges_count : int
        Number of edges read from the input.
    segments : Sequence[LineSegment]
        Rendered segments in draw order.

    Returns
    -------
    str
        Indented JSON text.

    Notes
    -----
    The JSON is a debugging artifact, not an interchange format.
    """

    payload = {
        "transform": asdict(transform),
        "transform_degrees": {
            "rotation_x": math.degrees(transform.rotation_x),
            "rotation_y": math.degrees(transform.rotation_y),
            "rotation_z": math.degrees(transform.rotation_z),
        },
        "canvas": asdict(canvas),
        "views": [asdict(view) for view in views],
        "stats": {
            "edges_count": edges_count,
            "segments_count": len(segments),
        },
        "segments": [asdict(segment) for segment in segments],
    }
    return json.dumps(payload, indent=2)


def write_html(html_path: Path, segments: Sequence[LineSegment], canvas: CanvasConfig) -> None:
    """Export the segments as an HTML page; see `render_html`."""

    _write_document(html_path, render_html(segments, canvas))


def write_svg(svg_path: Path, segments: Sequence[LineSegment], canvas: CanvasConfig) -> None:
    """Export the segments as a standalone SVG file; see `render_svg`."""

    _write_document(svg_path, render_svg(segments, canvas))


def write_debug_json(
    json_path: Path,
    transform: TransformConfig,
    canvas: CanvasConfig,
    views: Sequence[ViewConfig],
    edges_count: int,
    segments: Sequence[LineSegment],
) -> None:
    """Write the JSON snapshot from `render_debug_json`."""

    _write_document(json_path, render_debug_json(transform, canvas, views, edges_count, segments))


# ---------------------------------------------------------------------------
# Command line
# ---------------------------------------------------------------------------


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """
    Define and parse the command-line interface for the pipeline.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Argument list. `None` reads `sys.argv`.

    Returns
    -------
    argparse.Namespace
        Parsed command-line arguments.

    Notes
    -----
    Every flag has a default, so a bare invocation reads `input.txt` and
    writes `output.html`. Validation is deferred to `validate_args`.
    """

    parser = argparse.ArgumentParser(
        description="Render a 3D wireframe edge list as four SVG views in an HTML page"
    )

    parser.add_argument("--input", type=Path, default=DEFAULT_INPUT_PATH, help="Input edge file")
    parser.add_argument("--output", type=Path, default=DEFAULT_OUTPUT_PATH, help="Output HTML path")
    parser.add_argument("--svg", type=Path, default=None, help="Optional standalone SVG path")
    parser.add_argument("--json", type=Path, default=None, help="Optional debug JSON path")

    parser.add_argument(
        "--max-edges",
        type=int,
        default=MAX_WIREFRAME_EDGES,
        help="Maximum number of edges read from the input; the rest is dropped.",
    )
    parser.add_argument("--canvas-width", type=int, default=CANVAS_WIDTH, help="Canvas width in pixels")
    parser.add_argument("--canvas-height", type=int, default=CANVAS_HEIGHT, help="Canvas height in pixels")
    parser.add_argument("--title", type=str, default=DEFAULT_TITLE, help="HTML document title")

    parser.add_argument("--rotation-x", type=float, default=ROTATION_ANGLE_X_DEG, help="Rotation about X in degrees")
    parser.add_argument("--rotation-y", type=float, default=ROTATION_ANGLE_Y_DEG, help="Rotation about Y in degrees")
    parser.add_argument("--rotation-z", type=float, default=ROTATION_ANGLE_Z_DEG, help="Rotation about Z in degrees")
    parser.add_argument(
        "--colors",
        nargs=4,
        type=str,
        default=DEFAULT_COLORS,
        metavar=("C0", "C1", "C2", "C3"),
        help="Stroke colour for each of the four views",
    )

    parser.add_argument(
        "--print-segments",
        action="store_true",
        help="Print every transformed edge as 'x1 y1 x2 y2'.",
    )
    return parser.parse_args(argv)


def validate_args(args: argparse.Namespace) -> None:
    """
    Validate the numeric ranges and names of CLI parameters.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.

    Returns
    -------
    None
    """

    if args.max_edges <= 0:
        raise ValueError("--max-edges must be > 0")
    if args.canvas_width <= 0 or args.canvas_height <= 0:
        raise ValueError("--canvas-width and --canvas-height must be > 0")
    if not args.title.strip():
        raise ValueError("--title must not be empty")
    for color in args.colors:
        if not color or any(ch.isspace() for ch in color):
            raise ValueError(f"--colors entries must be non-empty names without spaces, got {color!r}")


def run(args: argparse.Namespace) -> int:
    """
    Execute the edge-file-to-HTML pipeline for one command-line invocation.

    Parameters
    ----------
    args : argparse.Namespace
        Parsed command-line arguments.

    Returns
    -------
    int
        Process exit code (`0` on success).

    Notes
    -----
    A write failure on the HTML page itself can still leave the optional
    SVG or JSON on disk, since those are written first.
    """

    validate_args(args)

    transform = TransformConfig.from_degrees(args.rotation_x, args.rotation_y, args.rotation_z)
    canvas = CanvasConfig(
        width=int(args.canvas_width),
        height=int(args.canvas_height),
        title=str(args.title),
    )
    views = build_views(args.colors)

    edges = read_wireframe(args.input, max_edges=int(args.max_edges))
    if not edges:
        print(f"[WARN] No edges read from {args.input}", file=sys.stderr)

    segments = collect_segments(edges, views=views, config=transform)

    # Render everything before touching disk; the HTML page goes last.
    documents: list[tuple[Path, str]] = []
    if args.svg is not None:
        documents.append((args.svg, render_svg(segments, canvas)))
    if args.json is not None:
        documents.append(
            (args.json, render_debug_json(transform, canvas, views, len(edges), segments))
        )
    documents.append((args.output, render_html(segments, canvas)))
    for path, text in documents:
        _write_document(path, text)

    if args.print_segments:
        for segment in segments:
            print(format_segment_row(segment))

    print(f"[OK] Wireframe loaded: {args.input}")
    print(f"[OK] Edges: {len(edges)}")
    print(f"[OK] Segments drawn: {len(segments)} across {len(views)} views")
    print(f"[OK] HTML saved: {args.output}")
    if args.svg is not None:
        print(f"[OK] SVG saved: {args.svg}")
    if args.json is not None:
        print(f"[OK] JSON saved: {args.json}")
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """
    Command-line entry point for the wireframe pipeline.

    Parameters
    ----------
    argv : Sequence[str] | None, optional
        Argument list. `None` reads `sys.argv`.

    Returns
    -------
    int
        Process exit code.

    Notes
    -----
    Exceptions are converted into a non-zero exit code after a readable
    stderr message naming the failing file or parameter.
    """

    args = parse_args(argv)
    try:
        return run(args)
    except Exception as exc:
        print(f"[ERROR] {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
