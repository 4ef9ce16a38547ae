import typing as t
from enum import Enum

import numpy as np
import numpy.typing as npt

from mazegen import utils
from mazegen.types import CONTENT, CellKind, Grid, QuadrantLike


class Flip(str, Enum):
    NONE = "none"
    HORIZONTAL = "horizontal"
    VERTICAL = "vertical"


class Orientation(t.NamedTuple):
    """
    Counter-clockwise rotation in degrees (0, 90, 180 or 270) plus a mirror flip.

    A flip never changes which sides of a tile connect. `HORIZONTAL` swaps the
    left and right ends of the tile (x to -x in the tile frame), both of which
    connect for every oriented junction. `VERTICAL` mirrors only the inner detail across the bar, so it selects
    a tile variant and is not part of `matrix()`.
    """

    rotation: int = 0
    flip: Flip = Flip.NONE

    @property
    def is_identity(self) -> bool:
        return self.rotation == 0 and self.flip == Flip.NONE

    def matrix(self) -> npt.NDArray[np.float64]:
        """2x2 tile transform around its center: horizontal flip, then rotation."""
        theta = np.radians(self.rotation)
        rot = np.array(
            [[np.cos(theta), -np.sin(theta)], [np.sin(theta), np.cos(theta)]]
        )
        if self.flip == Flip.HORIZONTAL:
            mirror = np.array([[-1.0, 0.0], [0.0, 1.0]])
        else:
            mirror = np.eye(2)
        return np.round(rot @ mirror, decimals=12)

    def __str__(self):
        if self.flip == Flip.NONE:
            return "{} deg".format(self.rotation)
        return "{} deg, {} flip".format(self.rotation, self.flip.value)


IDENTITY = Orientation(0, Flip.NONE)

# (first side, second side, rotation) in precedence order. The untransformed
# corner sprite connects right and down.
CORNER_PAIRS: t.Tuple[t.Tuple[str, str, int], ...] = (
    ("up", "right", 90),
    ("right", "down", 0),
    ("down", "left", 270),
    ("left", "up", 180),
)

# Rotation of an inside corner with three walls, keyed by its single open side.
INSIDE_CORNER_OPEN_SIDE: t.Dict[str, int] = {
    "down": 90,
    "up": 0,
    "left": 0,
    "right": 270,
}

# With three or more walls one of the first two always matches. The last two
# catch junctions whose third side is another junction, as on a doubled center
# column. The untransformed junction connects left, right and down.
JUNCTION_PAIRS: t.Tuple[t.Tuple[str, str, int], ...] = (
    ("up", "right", 180),
    ("down", "left", 0),
    ("right", "down", 0),
    ("left", "up", 180),
)


def _match_pairs(
    neighbors: utils.Neighbors,
    pairs: t.Sequence[t.Tuple[str, str, int]] = CORNER_PAIRS,
) -> int | None:
    for first, second, rotation in pairs:
        if getattr(neighbors, first) and getattr(neighbors, second):
            return rotation
    return None


def _outside_corner(full: Grid, r: int, c: int) -> Orientation:
    rotation = _match_pairs(
        utils.classify_neighbors(r, c, full, utils.is_wall_or_corner)
    )
    return IDENTITY if rotation is None else Orientation(rotation)


def _inside_corner(full: Grid, r: int, c: int) -> Orientation:
    walls = utils.classify_neighbors(r, c, full, utils.is_wall_like)
    count = walls.total()

    if count == 2:
        rotation = _match_pairs(walls)
        if rotation is not None:
            return Orientation(rotation)
    elif count == 3:
        [open_side] = [
            side for side, is_wall in zip(walls._fields, walls) if not is_wall
        ]
        return Orientation(INSIDE_CORNER_OPEN_SIDE[open_side])

    # Corner-to-corner and corner-to-wall connections
    corners = utils.classify_neighbors(r, c, full, utils.is_corner)
    for first, second, rotation in CORNER_PAIRS:
        a_wall, b_wall = getattr(walls, first), getattr(walls, second)
        a_corner, b_corner = getattr(corners, first), getattr(corners, second)
        if (
            (a_wall and b_corner)
            or (a_corner and b_wall)
            or (a_corner and b_corner)
        ):
            return Orientation(rotation)

    return IDENTITY


def _straight_wall(full: Grid, r: int, c: int) -> Orientation:
    walls = utils.classify_neighbors(r, c, full, utils.is_wall_like)
    corners = utils.classify_neighbors(r, c, full, utils.is_corner)
    junctions = utils.classify_neighbors(r, c, full, utils.is_junction)

    vertical = (
        (walls.up and walls.down)
        or junctions.up
        or junctions.down
        or (walls.up and corners.down)
        or (walls.down and corners.up)
        or (corners.up and corners.down)
    )
    return Orientation(90) if vertical else IDENTITY


def _ghost_wall(full: Grid, r: int, c: int) -> Orientation:
    walls = utils.classify_neighbors(r, c, full, utils.is_wall_like)
    return Orientation(90) if walls.up and walls.down else IDENTITY


def junction_flip(full: Grid, r: int, c: int) -> Flip:
    """
    Mirror flip of a T junction, decided from its left/up-left and
    right/down-right neighbourhoods. The first test accepts walls and corners on
    the left side while the second one also accepts junctions on both cells.
    """
    up_left_r, up_left_c = r + utils.UP_LEFT[0], c + utils.UP_LEFT[1]
    down_right_r, down_right_c = r + utils.DOWN_RIGHT[0], c + utils.DOWN_RIGHT[1]

    if utils.is_wall_or_corner(r, c - 1, full) and utils.is_wall_corner_or_junction(
        up_left_r, up_left_c, full
    ):
        return Flip.HORIZONTAL
    if utils.is_wall_corner_or_junction(
        down_right_r, down_right_c, full
    ) and utils.is_wall_corner_or_junction(r, c + 1, full):
        return Flip.VERTICAL
    return Flip.NONE


def _t_junction(full: Grid, r: int, c: int) -> Orientation:
    walls = utils.classify_neighbors(r, c, full, utils.is_wall_like)
    rotation = _match_pairs(walls, JUNCTION_PAIRS)
    if rotation is None:
        rotation = 0
    return Orientation(rotation, junction_flip(full, r, c))


RULES: t.Dict[CellKind, t.Callable[[Grid, int, int], Orientation]] = {
    CellKind.OUTSIDE_CORNER: _outside_corner,
    CellKind.INSIDE_CORNER: _inside_corner,
    CellKind.OUTSIDE_WALL: _straight_wall,
    CellKind.INSIDE_WALL: _straight_wall,
    CellKind.GHOST_WALL: _ghost_wall,
    CellKind.T_JUNCTION: _t_junction,
}


def resolve_orientation(full: QuadrantLike, r: int, c: int) -> Orientation:
    """
    Orientation of the tile at (r, c), derived only from its neighbourhood.

    Content cells (empty, pellets) are never rotated. Neighbours outside the grid
    count as absent, and a structural cell that matches no rule keeps the
    identity orientation.
    """
    full = np.asarray(full)
    if not utils.is_in_map(r, c, full):
        raise IndexError("Cell {} is outside of a {} grid.".format((r, c), full.shape))

    kind = CellKind(int(full[r][c]))
    if kind in CONTENT:
        return IDENTITY
    return RULES[kind](full, r, c)
