import json
import typing as t
from datetime import datetime

import numpy.typing as npt

from mazegen.types import (
    CORNERS,
    JUNCTIONS,
    WALL_CORNER_OR_JUNCTION,
    WALL_LIKE,
    WALL_OR_CORNER,
    CellKind,
)

UP = (-1, 0)
RIGHT = (0, 1)
DOWN = (1, 0)
LEFT = (0, -1)
UP_LEFT = (-1, -1)
DOWN_RIGHT = (1, 1)

# Neighbour order used throughout: up, right, down, left.
TAXI_NEIGHBORHOOD = (UP, RIGHT, DOWN, LEFT)


def timestamp_string():
    return datetime.now().strftime("%Y-%m-%d-%Hh%Mm%Ss_%f")


class MazegenLog:
    def __init__(self, message: str, step: int, timestamp: str | None = None):
        self.message = message
        self.step = step
        self.timestamp = timestamp or timestamp_string()

    def __str__(self):
        return "At step {}: '{}'".format(self.step, self.message)

    def toJSON(self):
        return json.dumps(self, default=lambda o: o.__dict__, sort_keys=True, indent=4)


class MazegenLogger(list[MazegenLog]):
    def __init__(self, printout: bool = True):
        super(MazegenLogger, self).__init__()
        self.printout = printout

    def append(self, log: MazegenLog):
        super(MazegenLogger, self).append(log)
        if self.printout:
            print(log)

    def messages(self) -> t.List[str]:
        return [log.message for log in self]


def is_in_map(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    R, C = map.shape
    return not (r < 0 or r >= R or c < 0 or c >= C)


def kind_at(r: int, c: int, map: npt.NDArray[t.Any]) -> CellKind | None:
    """Returns the kind of cell (r, c), or None when it lies outside the map."""
    if not is_in_map(r, c, map):
        return None
    return CellKind(int(map[r][c]))


def is_kind_in(
    r: int, c: int, map: npt.NDArray[t.Any], kinds: t.AbstractSet[CellKind]
) -> bool:
    kind = kind_at(r, c, map)
    return kind is not None and kind in kinds


def is_wall_like(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    return is_kind_in(r, c, map, WALL_LIKE)


def is_corner(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    return is_kind_in(r, c, map, CORNERS)


def is_junction(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    return is_kind_in(r, c, map, JUNCTIONS)


def is_wall_or_corner(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    return is_kind_in(r, c, map, WALL_OR_CORNER)


def is_wall_corner_or_junction(r: int, c: int, map: npt.NDArray[t.Any]) -> bool:
    return is_kind_in(r, c, map, WALL_CORNER_OR_JUNCTION)


class Neighbors(t.NamedTuple):
    up: bool
    right: bool
    down: bool
    left: bool

    def total(self) -> int:
        return sum(1 for x in self if x)


def classify_neighbors(
    r: int,
    c: int,
    map: npt.NDArray[t.Any],
    predicate: t.Callable[[int, int, npt.NDArray[t.Any]], bool],
) -> Neighbors:
    """Applies `predicate` to the four orthogonal neighbours of (r, c)."""
    return Neighbors(*(predicate(r + dr, c + dc, map) for dr, dc in TAXI_NEIGHBORHOOD))
