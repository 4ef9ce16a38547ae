import typing as t

import numpy as np

from mazegen import utils
from mazegen.mirror import expand, quadrant_shape_of
from mazegen.orientation import IDENTITY, Orientation, resolve_orientation
from mazegen.types import CONTENT, CellKind, Grid, GridCell, QuadrantLike

ASCII_GLYPHS: t.Dict[CellKind, str] = {
    CellKind.EMPTY: " ",
    CellKind.OUTSIDE_CORNER: "+",
    CellKind.OUTSIDE_WALL: "#",
    CellKind.INSIDE_CORNER: "o",
    CellKind.INSIDE_WALL: "=",
    CellKind.PELLET: ".",
    CellKind.POWER_PELLET: "*",
    CellKind.T_JUNCTION: "T",
    CellKind.GHOST_WALL: "-",
}


class EmitRecord(t.NamedTuple):
    row: int
    col: int
    kind: CellKind
    orientation: Orientation = IDENTITY


class Level:
    """A built level: the full grid plus the ordered records to draw it."""

    def __init__(
        self,
        *,
        grid: Grid,
        quadrant_shape: t.Tuple[int, int],
        center_shared: bool,
        records: t.Sequence[EmitRecord],
    ):
        self.grid = grid
        self.quadrant_shape = quadrant_shape
        self.center_shared = center_shared
        self.records: t.Tuple[EmitRecord, ...] = tuple(records)

    @property
    def shape(self) -> t.Tuple[int, int]:
        R, C = self.grid.shape
        return R, C

    def records_at(self, row: int, col: int) -> t.List[EmitRecord]:
        return [x for x in self.records if x.row == row and x.col == col]

    def orientations(self) -> t.Dict[GridCell, Orientation]:
        """Orientation of every structural cell."""
        return {
            (x.row, x.col): x.orientation
            for x in self.records
            if x.kind not in CONTENT
        }

    def to_ascii(self) -> str:
        return "\n".join(
            "".join(ASCII_GLYPHS[CellKind(int(e))] for e in row) for row in self.grid
        )

    def print_grid(self):
        print(self.to_ascii())


def emit_cell(full: Grid, r: int, c: int) -> t.List[EmitRecord]:
    """Records for one cell, in the order a scene assembler must realize them."""
    kind = CellKind(int(full[r][c]))
    if kind == CellKind.EMPTY:
        return []
    if kind == CellKind.PELLET:
        return [EmitRecord(r, c, kind)]
    if kind == CellKind.POWER_PELLET:
        # The background goes under the power pellet.
        return [EmitRecord(r, c, CellKind.EMPTY), EmitRecord(r, c, kind)]
    return [EmitRecord(r, c, kind, resolve_orientation(full, r, c))]


def build_level(
    quadrant: QuadrantLike,
    center_shared: bool = True,
    logger: utils.MazegenLogger | None = None,
) -> Level:
    if logger is None:
        logger = utils.MazegenLogger(printout=False)

    full = expand(quadrant, center_shared=center_shared)
    quadrant_shape = quadrant_shape_of(full, center_shared)
    logger.append(
        utils.MazegenLog(
            "Quadrant {}x{} expanded to {}x{} (center shared: {}).".format(
                *quadrant_shape, *full.shape, center_shared
            ),
            0,
        )
    )

    records: t.List[EmitRecord] = []
    R, C = full.shape
    for r in range(R):
        for c in range(C):
            records.extend(emit_cell(full, r, c))

    n_oriented = sum(1 for x in records if not x.orientation.is_identity)
    logger.append(
        utils.MazegenLog(
            "Orientations resolved: {} records, {} rotated or flipped.".format(
                len(records), n_oriented
            ),
            1,
        )
    )

    return Level(
        grid=full,
        quadrant_shape=quadrant_shape,
        center_shared=center_shared,
        records=records,
    )


def cell_to_world(
    row: int,
    col: int,
    rows: int,
    cell_size: float = 1.0,
    spawn_offset: t.Tuple[float, float] = (0.0, 0.0),
) -> t.Tuple[float, float]:
    """Row 0 is the top of the level, so world y grows as the row index shrinks."""
    x = col * cell_size + spawn_offset[0]
    y = (rows - 1 - row) * cell_size + spawn_offset[1]
    return float(x), float(y)


def count_kinds(level: Level) -> t.Dict[CellKind, int]:
    values, counts = np.unique(level.grid, return_counts=True)
    return {CellKind(int(v)): int(n) for v, n in zip(values, counts)}
