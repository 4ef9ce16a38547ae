import typing as t
from enum import IntEnum

import numpy as np
import numpy.typing as npt


class CellKind(IntEnum):
    EMPTY = 0
    OUTSIDE_CORNER = 1
    OUTSIDE_WALL = 2
    INSIDE_CORNER = 3
    INSIDE_WALL = 4
    PELLET = 5
    POWER_PELLET = 6
    T_JUNCTION = 7
    GHOST_WALL = 8


WALL_LIKE: t.FrozenSet[CellKind] = frozenset(
    {CellKind.OUTSIDE_WALL, CellKind.INSIDE_WALL, CellKind.GHOST_WALL}
)
CORNERS: t.FrozenSet[CellKind] = frozenset(
    {CellKind.OUTSIDE_CORNER, CellKind.INSIDE_CORNER}
)
JUNCTIONS: t.FrozenSet[CellKind] = frozenset({CellKind.T_JUNCTION})
WALL_OR_CORNER = WALL_LIKE | CORNERS
WALL_CORNER_OR_JUNCTION = WALL_OR_CORNER | JUNCTIONS

# Cells that are drawn without any orientation.
CONTENT: t.FrozenSet[CellKind] = frozenset(
    {CellKind.EMPTY, CellKind.PELLET, CellKind.POWER_PELLET}
)

GridCell = t.Tuple[int, int]
Grid = npt.NDArray[np.int8]
QuadrantLike = t.Union[t.Sequence[t.Sequence[int]], npt.NDArray[t.Any]]
