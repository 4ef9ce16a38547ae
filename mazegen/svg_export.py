import typing as t
from xml.dom import minidom

import shapely.affinity as affinity
import shapely.ops
from shapely.geometry import Point, Polygon, box

from mazegen.level import EmitRecord, Level, cell_to_world
from mazegen.orientation import Flip
from mazegen.types import CellKind

OUTSIDE_WALL_STYLE = "fill:#1919a6;stroke:none"
INSIDE_WALL_STYLE = "fill:#2121de;stroke:none"
GHOST_WALL_STYLE = "fill:#ffb8de;stroke:none"
PELLET_STYLE = "fill:#ffb897;stroke:none"
BACKGROUND_STYLE = "fill:#000000;stroke:none"

OUTSIDE_HALF_WIDTH = 0.15
INSIDE_HALF_WIDTH = 0.08


def _straight(w: float) -> Polygon:
    return box(-0.5, -w, 0.5, w)


def _corner(w: float) -> Polygon:
    # Connects the right and bottom edges of the unit tile.
    return t.cast(
        Polygon, shapely.ops.unary_union([box(-w, -w, 0.5, w), box(-w, -0.5, w, w)])
    )


def _t_junction(w: float, bar_shift: float) -> Polygon:
    # Bar from left to right, moved up by `bar_shift`, and a stem down shifted to
    # the left. Both offsets make flips visible without moving a connected side.
    return t.cast(
        Polygon,
        shapely.ops.unary_union(
            [
                box(-0.5, -w + bar_shift, 0.5, w + bar_shift),
                box(-3 * w, -0.5, 0, w + bar_shift),
            ]
        ),
    )


# Tile shapes in unit cell coordinates, centered on the origin, y pointing up.
TILE_SHAPES: t.Dict[CellKind, t.Tuple[Polygon, str]] = {
    CellKind.EMPTY: (box(-0.5, -0.5, 0.5, 0.5), BACKGROUND_STYLE),
    CellKind.OUTSIDE_CORNER: (_corner(OUTSIDE_HALF_WIDTH), OUTSIDE_WALL_STYLE),
    CellKind.OUTSIDE_WALL: (_straight(OUTSIDE_HALF_WIDTH), OUTSIDE_WALL_STYLE),
    CellKind.INSIDE_CORNER: (_corner(INSIDE_HALF_WIDTH), INSIDE_WALL_STYLE),
    CellKind.INSIDE_WALL: (_straight(INSIDE_HALF_WIDTH), INSIDE_WALL_STYLE),
    CellKind.PELLET: (t.cast(Polygon, Point(0, 0).buffer(0.1)), PELLET_STYLE),
    CellKind.POWER_PELLET: (t.cast(Polygon, Point(0, 0).buffer(0.3)), PELLET_STYLE),
    CellKind.T_JUNCTION: (
        _t_junction(OUTSIDE_HALF_WIDTH, OUTSIDE_HALF_WIDTH / 2),
        OUTSIDE_WALL_STYLE,
    ),
    CellKind.GHOST_WALL: (_straight(0.04), GHOST_WALL_STYLE),
}

# Variants drawn for a vertical flip: the inner detail is mirrored across the
# bar while the connected sides stay in place.
VERTICAL_FLIP_SHAPES: t.Dict[CellKind, Polygon] = {
    CellKind.T_JUNCTION: _t_junction(OUTSIDE_HALF_WIDTH, -OUTSIDE_HALF_WIDTH / 2),
}


def tile_shape(record: EmitRecord) -> Polygon:
    shape, _style = TILE_SHAPES[record.kind]
    if record.orientation.flip == Flip.VERTICAL:
        return VERTICAL_FLIP_SHAPES[record.kind]
    return shape


def record_to_polygon(
    record: EmitRecord,
    rows: int,
    cell_size: float = 1.0,
    spawn_offset: t.Tuple[float, float] = (0.0, 0.0),
) -> Polygon:
    """World-space polygon of a record: oriented unit tile, scaled and moved in place."""
    shape = tile_shape(record)
    m = record.orientation.matrix()
    x, y = cell_to_world(record.row, record.col, rows, cell_size, spawn_offset)
    return t.cast(
        Polygon,
        affinity.affine_transform(
            shape,
            [
                m[0][0] * cell_size,
                m[0][1] * cell_size,
                m[1][0] * cell_size,
                m[1][1] * cell_size,
                x,
                y,
            ],
        ),
    )


def polygon_to_svg_pathd(polygon: Polygon) -> str:
    return minidom.parseString(polygon.svg()).documentElement.getAttribute("d")  # type: ignore


def get_empty_svg_doc(width: float, height: float) -> minidom.Document:
    doc = minidom.Document()
    svg = doc.createElement("svg")
    svg.setAttribute("xmlns", "http://www.w3.org/2000/svg")
    svg.setAttribute("xmlns:svg", "http://www.w3.org/2000/svg")
    svg.setAttribute("width", str(int(round(width))))
    svg.setAttribute("height", str(int(round(height))))
    doc.appendChild(svg)
    return doc


def level_to_svg(
    level: Level,
    cell_size: float = 1.0,
    spawn_offset: t.Tuple[float, float] = (0.0, 0.0),
    pixels_per_unit: float = 20.0,
) -> minidom.Document:
    """
    Draws every emit record of `level` as one svg path, in emit order.

    World coordinates have y pointing up; they are flipped and shifted so that
    the level fills the document from its top-left corner.
    """
    rows, cols = level.shape
    width = cols * cell_size * pixels_per_unit
    height = rows * cell_size * pixels_per_unit
    doc = get_empty_svg_doc(width, height)

    x_min = spawn_offset[0] - cell_size / 2.0
    y_max = (rows - 1) * cell_size + spawn_offset[1] + cell_size / 2.0

    for i, record in enumerate(level.records):
        _shape, style = TILE_SHAPES[record.kind]
        world = record_to_polygon(record, rows, cell_size, spawn_offset)
        page = affinity.affine_transform(
            world,
            [
                pixels_per_unit,
                0,
                0,
                -pixels_per_unit,
                -x_min * pixels_per_unit,
                y_max * pixels_per_unit,
            ],
        )
        path = doc.createElement("svg:path")
        path.setAttribute(
            "id", "{}_{}_{}_{}".format(record.kind.name.lower(), record.row, record.col, i)
        )
        path.setAttribute("d", polygon_to_svg_pathd(t.cast(Polygon, page)))
        path.setAttribute("style", style)
        doc.childNodes[0].appendChild(path)

    return doc
